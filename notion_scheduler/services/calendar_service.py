# File: notion_scheduler/services/calendar_service.py

from typing import Any, Dict, List

from notion_scheduler.core.config_manager import Config
from notion_scheduler.models.calendar import CalendarEvent
from notion_scheduler.models.results import BatchResult
from notion_scheduler.services.notion_client import NotionClient
from notion_scheduler.utils.logger import setup_logger
from notion_scheduler.utils.retry import retryable

logger = setup_logger(__name__)


def build_page_properties(event: CalendarEvent) -> Dict[str, Any]:
    """Notion properties for a row of the calendar database."""
    return {
        'Name': {
            'title': [{'text': {'content': event.name}}],
        },
        'Date': {
            'date': event.date_range.to_notion(),
        },
        'Notes': {
            'rich_text': [{'text': {'content': event.notes or ''}}],
        },
    }


class CalendarService:
    """Writes events into the calendar database."""

    def __init__(self, client: NotionClient, config: Config):
        """
        Initialize calendar service.

        Args:
            client: Notion API client
            config: Application configuration (database id, retry policy)
        """
        self.client = client
        self.config = config

    def create_event(self, event: CalendarEvent) -> str:
        """
        Create one row in the calendar database.

        No duplicate check is made; rerunning creates another row.

        Returns:
            Id of the created Notion page

        Raises:
            RemoteApiError: If the write still fails after retries
        """
        properties = build_page_properties(event)
        logger.debug(f"Creating event: {event.name} - {properties['Date']['date']['start']}")

        page = retryable(
            lambda: self.client.create_page(self.config.calendar_db_id, properties),
            max_attempts=self.config.max_retries,
            base_delay_ms=self.config.retry_delay_ms,
            description=f"create '{event.name}'"
        )

        logger.debug(f"Event created: {event.name}")
        return page.get('id', '')

    def create_events_batch(self, events: List[CalendarEvent]) -> BatchResult:
        """
        Create events one at a time; a failure does not stop the others.

        Returns:
            BatchResult with created page ids and (event, error) failures
        """
        logger.info(f"Creating {len(events)} events in the calendar database")
        result = BatchResult()

        for event in events:
            try:
                result.created.append(self.create_event(event))
            except Exception as e:
                logger.error(f"Error creating event '{event.name}': {e}")
                result.failures.append((event, e))

        if result.failures:
            logger.warning(f"Created {result.created_count} events, {result.failed_count} failed")
        else:
            logger.info(f"Successfully created {result.created_count} events")

        return result
