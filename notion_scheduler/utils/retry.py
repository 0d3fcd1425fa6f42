# File: notion_scheduler/utils/retry.py

import time
from typing import Callable, TypeVar

from notion_scheduler.utils.logger import setup_logger

logger = setup_logger(__name__)

T = TypeVar("T")


def retryable(
    operation: Callable[[], T],
    max_attempts: int = 3,
    base_delay_ms: int = 1000,
    description: str = "operation"
) -> T:
    """
    Run ``operation``, retrying on any exception.

    Waits ``base_delay_ms * attempt`` milliseconds between attempts. Every
    failure is retried the same way; 4xx errors are not treated specially.

    Args:
        operation: Zero-argument callable to run
        max_attempts: Total number of attempts (at least 1)
        base_delay_ms: Base delay between attempts in milliseconds
        description: Label used in the warning logs

    Returns:
        The operation's result

    Raises:
        The exception from the last attempt once all attempts failed
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    for attempt in range(1, max_attempts + 1):
        try:
            return operation()
        except Exception as e:
            logger.warning(f"Attempt {attempt}/{max_attempts} of {description} failed: {e}")

            if attempt == max_attempts:
                raise

            time.sleep(base_delay_ms * attempt / 1000)
