# File: notion_scheduler/core/orchestrator.py
"""
Batch materializer for the Notion week scheduler.
Coordinates the services that turn the weekly template into next week's
calendar events.
"""

import datetime
import time
from typing import List, Optional

import pytz

from notion_scheduler.core.config_manager import Config
from notion_scheduler.core.exceptions import ConnectivityError, RemoteApiError
from notion_scheduler.models.enums import WEEKDAY_SPELLINGS
from notion_scheduler.models.results import EventError, RunResult, RunState
from notion_scheduler.processors.event_processor import EventProcessor
from notion_scheduler.services.calendar_service import CalendarService
from notion_scheduler.services.notion_client import NotionClient
from notion_scheduler.services.template_service import TemplateService
from notion_scheduler.utils.date_utils import next_week_dates, next_week_end, next_week_start
from notion_scheduler.utils.logger import setup_logger

logger = setup_logger(__name__)


class WeekGenerator:
    """
    Runs one batch: verify connection, fetch templates, transform, write.

    Connectivity and fetch failures abort the run. Transform and write
    failures are collected per task and the run still succeeds.
    """

    def __init__(
        self,
        config: Config,
        client: NotionClient,
        template_service: TemplateService,
        calendar_service: CalendarService,
        event_processor: EventProcessor
    ):
        self.config = config
        self.client = client
        self.template_service = template_service
        self.calendar_service = calendar_service
        self.event_processor = event_processor
        self.state = RunState.IDLE

    def verify_connection(self) -> None:
        """
        Read both databases without writing anything.

        Raises:
            ConnectivityError: If either database cannot be retrieved
        """
        for label, database_id in (
            ("template", self.config.template_db_id),
            ("calendar", self.config.calendar_db_id),
        ):
            try:
                self.client.retrieve_database(database_id)
            except RemoteApiError as e:
                raise ConnectivityError(
                    f"Connection check failed for the {label} database: {e.describe()}", e
                ) from e

    def run(self, now: Optional[datetime.datetime] = None) -> RunResult:
        """
        Execute the full weekly generation pipeline.

        Args:
            now: Reference instant; defaults to the current time

        Returns:
            RunResult with counts, per-event errors and elapsed time
        """
        started = time.monotonic()
        now = now or datetime.datetime.now(pytz.utc)

        logger.info("=" * 60)
        logger.info("Starting week generation")
        logger.info("=" * 60)

        try:
            self.state = RunState.VERIFYING_CONNECTION
            logger.info("STEP 1/4: Verifying connection with Notion")
            self.verify_connection()
            logger.info("Connection verified")

            self.state = RunState.FETCHING_TEMPLATES
            logger.info("STEP 2/4: Fetching template tasks")
            tasks = self.template_service.fetch_template_tasks()
        except (ConnectivityError, RemoteApiError) as e:
            return self._fail(e, started)

        if not tasks:
            logger.warning("No tasks found in the template database")
            return self._finish(
                RunResult(success=True, message="No template tasks to process"),
                started
            )

        self.state = RunState.TRANSFORMING
        logger.info(
            f"STEP 3/4: Transforming {len(tasks)} tasks for the week of "
            f"{next_week_start(now, self.config.tz)} to {next_week_end(now, self.config.tz)}"
        )
        for day, day_date in next_week_dates(now, self.config.tz).items():
            logger.info(f"  - {WEEKDAY_SPELLINGS[day][0]}: {day_date.isoformat()}")
        events, errors = self.event_processor.transform_tasks(tasks, now)
        if errors:
            logger.warning(f"{len(errors)} tasks had transform errors")

        self.state = RunState.WRITING_EVENTS
        logger.info("STEP 4/4: Creating events in the calendar database")
        batch = self.calendar_service.create_events_batch(events)

        all_errors: List[EventError] = list(errors)
        all_errors.extend(
            EventError(event_name=event.name, error_message=str(error))
            for event, error in batch.failures
        )

        result = self._finish(
            RunResult(
                success=True,
                created_count=batch.created_count,
                failed_count=len(all_errors),
                errors=all_errors,
            ),
            started
        )

        logger.info("=" * 60)
        logger.info("Week generation completed")
        logger.info(f"Events created: {result.created_count}")
        if result.failed_count:
            logger.warning(f"Events failed: {result.failed_count}")
            for error in result.errors:
                logger.warning(f"  - {error}")
        logger.info(f"Total time: {result.elapsed_seconds:.2f}s")
        logger.info("=" * 60)

        return result

    def _finish(self, result: RunResult, started: float) -> RunResult:
        self.state = RunState.DONE_SUCCESS if result.success else RunState.DONE_FAILURE
        result.state = self.state
        result.elapsed_seconds = round(time.monotonic() - started, 2)
        return result

    def _fail(self, error: Exception, started: float) -> RunResult:
        failed_during = self.state
        message = error.describe() if isinstance(error, RemoteApiError) else str(error)
        logger.error(f"Week generation aborted during {failed_during.value}: {message}")
        return self._finish(RunResult(success=False, error=message), started)


class WeekGeneratorFactory:
    """Factory for creating WeekGenerator instances with dependency injection."""

    @staticmethod
    def create(config: Config, client: Optional[NotionClient] = None) -> WeekGenerator:
        """
        Create a fully wired WeekGenerator.

        Args:
            config: Validated application configuration
            client: Optional Notion client (a new one is built otherwise)
        """
        client = client or NotionClient(config)
        return WeekGenerator(
            config=config,
            client=client,
            template_service=TemplateService(client, config),
            calendar_service=CalendarService(client, config),
            event_processor=EventProcessor(config),
        )
