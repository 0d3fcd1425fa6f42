# File: notion_scheduler/main.py
"""
Entry point: generate next week's events from the Notion template.
"""

import sys
from typing import Optional

from notion_scheduler.core.config_manager import Config
from notion_scheduler.core.exceptions import ConfigurationError
from notion_scheduler.core.orchestrator import WeekGeneratorFactory
from notion_scheduler.models.results import RunResult
from notion_scheduler.utils.logger import set_log_level, setup_logger

logger = setup_logger(__name__)


def run(config: Optional[Config] = None) -> RunResult:
    """Load configuration (if not given) and run one batch."""
    if config is None:
        config = Config.from_env()

    set_log_level(config.log_level)

    logger.info("Notion Week Scheduler")
    logger.info("Configuration loaded:")
    for line in config.summary().splitlines():
        logger.info(line)

    return WeekGeneratorFactory.create(config).run()


def main() -> int:
    """
    Run the scheduler and return the process exit code.

    Returns:
        0 when the run completed (even with failed events), 1 on a fatal abort
    """
    try:
        result = run()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    if result.success:
        logger.info("Process completed successfully")
        logger.info(f"  - Events created: {result.created_count}")
        if result.failed_count:
            logger.warning(f"  - Events failed: {result.failed_count}")
        logger.info(f"  - Duration: {result.elapsed_seconds:.2f}s")
    else:
        logger.error("Process failed")
        logger.error(f"  - Error: {result.error}")

    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
