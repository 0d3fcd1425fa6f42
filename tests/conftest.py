# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable test data and mocks for all tests.
"""

import pytest
from datetime import datetime
from pathlib import Path
from unittest.mock import Mock
import sys

import pytz

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from notion_scheduler.core.config_manager import Config
from notion_scheduler.models.tasks import TemplateTask


# ==================== Configuration Fixtures ====================

@pytest.fixture
def config():
    """Validated configuration with a non-UTC timezone."""
    return Config(
        notion_api_key="secret_test_key",
        template_db_id="tmpl-db-0001",
        calendar_db_id="cal-db-0001",
        timezone="America/Bogota",
    )


@pytest.fixture
def env_vars():
    """Minimal environment mapping accepted by Config.from_env."""
    return {
        "NOTION_API_KEY": "secret_test_key",
        "TEMPLATE_DB_ID": "tmpl-db-0001",
        "CALENDAR_DB_ID": "cal-db-0001",
    }


# ==================== Date/Time Fixtures ====================

@pytest.fixture
def reference_now():
    """Wednesday 2025-01-08 12:00 UTC (07:00 in Bogota). Next week starts Monday 2025-01-13."""
    return datetime(2025, 1, 8, 12, 0, tzinfo=pytz.utc)


# ==================== Template Fixtures ====================

@pytest.fixture
def make_template_page():
    """Factory fixture building Notion pages shaped like the template database rows."""
    counter = {'n': 0}

    def _create(name="Task", day="Monday", time="09:00", duration=None, notes=None, page_id=None):
        counter['n'] += 1
        properties = {
            'Name': {'type': 'title', 'title': [{'plain_text': name}] if name else []},
            'Day': {'type': 'select', 'select': {'name': day} if day else None},
            'Time': {'type': 'rich_text', 'rich_text': [{'plain_text': time}] if time else []},
            'Duration': {'type': 'number', 'number': duration},
            'Notes': {'type': 'rich_text', 'rich_text': [{'plain_text': notes}] if notes else []},
        }
        return {'id': page_id or f"page-{counter['n']}", 'properties': properties}

    return _create


@pytest.fixture
def standup_task():
    """A 30 minute Monday task."""
    return TemplateTask(id="t1", name="Standup", day="Monday", time="09:00", duration=30)


# ==================== Mock Service Fixtures ====================

@pytest.fixture
def mock_notion_client():
    """Mock Notion client with an empty template database."""
    mock = Mock()
    mock.retrieve_database.return_value = {'object': 'database'}
    mock.query_database.return_value = {'results': [], 'has_more': False, 'next_cursor': None}
    mock.create_page.return_value = {'id': 'new_page_id'}
    return mock


# ==================== Pytest Markers ====================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


# ==================== Auto-use Fixtures ====================

@pytest.fixture(autouse=True)
def no_retry_sleep(monkeypatch):
    """Skip the real back-off delay between retries."""
    monkeypatch.setattr("notion_scheduler.utils.retry.time.sleep", lambda seconds: None)
    yield
