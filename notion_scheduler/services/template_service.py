# File: notion_scheduler/services/template_service.py

from typing import Any, Dict, List, Optional

from notion_scheduler.core.config_manager import Config
from notion_scheduler.models.tasks import TemplateTask, template_task_from_dict
from notion_scheduler.services.notion_client import NotionClient
from notion_scheduler.utils.logger import setup_logger
from notion_scheduler.utils.retry import retryable

logger = setup_logger(__name__)

DAY_SORT = [{"property": "Day", "direction": "ascending"}]


class TemplateService:
    """Reads the weekly template database."""

    def __init__(self, client: NotionClient, config: Config):
        """
        Initialize template service.

        Args:
            client: Notion API client
            config: Application configuration (database id, retry policy)
        """
        self.client = client
        self.config = config

    def fetch_template_tasks(self) -> List[TemplateTask]:
        """
        Fetch every template row, normalized and ordered by weekday.

        Returns:
            List of TemplateTask objects (empty if the database has no rows)

        Raises:
            RemoteApiError: If a query still fails after retries
        """
        logger.info("Fetching tasks from the template database")

        pages: List[Dict[str, Any]] = []
        cursor: Optional[str] = None

        while True:
            response = retryable(
                lambda: self.client.query_database(
                    self.config.template_db_id,
                    sorts=DAY_SORT,
                    start_cursor=cursor
                ),
                max_attempts=self.config.max_retries,
                base_delay_ms=self.config.retry_delay_ms,
                description="template query"
            )
            pages.extend(response.get('results', []))

            if not response.get('has_more') or not response.get('next_cursor'):
                break
            cursor = response['next_cursor']

        tasks = [parse_template_page(page) for page in pages]
        # Notion sorts selects by option order; re-sort by week position (stable)
        tasks.sort(key=lambda t: t.sort_key())

        logger.info(f"Fetched {len(tasks)} template tasks")
        return tasks


def parse_template_page(page: Dict[str, Any]) -> TemplateTask:
    """Convert a Notion page from the template database into a TemplateTask."""
    properties = page.get('properties', {})

    return template_task_from_dict({
        'id': page.get('id', ''),
        'name': extract_title(properties.get('Name')),
        'day': extract_select(properties.get('Day')),
        'time': extract_text(properties.get('Time')),
        'duration': extract_number(properties.get('Duration')),
        'notes': extract_text(properties.get('Notes')),
    })


# ===== Property extractors =====

def _plain_text(segments: Optional[List[Dict[str, Any]]]) -> str:
    if not segments:
        return ''
    return ''.join(segment.get('plain_text', '') for segment in segments).strip()


def extract_title(prop: Optional[Dict[str, Any]]) -> str:
    if not prop:
        return ''
    return _plain_text(prop.get('title'))


def extract_select(prop: Optional[Dict[str, Any]]) -> str:
    """Select option name; text properties are accepted too."""
    if not prop:
        return ''
    if prop.get('select'):
        return prop['select'].get('name', '')
    if 'rich_text' in prop:
        return _plain_text(prop.get('rich_text'))
    return ''


def extract_text(prop: Optional[Dict[str, Any]]) -> str:
    if not prop:
        return ''
    return _plain_text(prop.get('rich_text'))


def extract_number(prop: Optional[Dict[str, Any]]) -> Optional[float]:
    if not prop:
        return None
    return prop.get('number')
