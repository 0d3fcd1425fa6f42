# File: tests/unit/test_notion_client.py
"""
Unit tests for the Notion API client with a mocked HTTP session.
"""

import pytest
from unittest.mock import Mock

import requests

from notion_scheduler.core.exceptions import ApiErrorReason, RemoteApiError
from notion_scheduler.services.notion_client import NotionClient


def _response(status_code=200, payload=None, json_error=False):
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if json_error:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = payload if payload is not None else {}
    return response


@pytest.fixture
def session():
    mock = Mock()
    mock.headers = {}
    return mock


@pytest.fixture
def client(config, session):
    return NotionClient(config, session=session)


class TestNotionClientRequests:
    """Requests sent to the API."""

    def test_headers(self, client, session):
        assert session.headers["Authorization"] == "Bearer secret_test_key"
        assert session.headers["Notion-Version"] == "2022-06-28"

    def test_retrieve_database(self, client, session):
        session.request.return_value = _response(payload={'object': 'database', 'id': 'tmpl'})

        assert client.retrieve_database("tmpl") == {'object': 'database', 'id': 'tmpl'}
        session.request.assert_called_once_with(
            "GET", "https://api.notion.com/v1/databases/tmpl", json=None, timeout=30.0
        )

    def test_query_database_body(self, client, session):
        session.request.return_value = _response(payload={'results': []})
        sorts = [{'property': 'Day', 'direction': 'ascending'}]

        client.query_database("tmpl", sorts=sorts, start_cursor="cursor-1")

        session.request.assert_called_once_with(
            "POST",
            "https://api.notion.com/v1/databases/tmpl/query",
            json={'page_size': 100, 'sorts': sorts, 'start_cursor': 'cursor-1'},
            timeout=30.0,
        )

    def test_create_page_body(self, client, session):
        session.request.return_value = _response(payload={'id': 'page-1'})
        properties = {'Name': {'title': [{'text': {'content': 'Gym'}}]}}

        assert client.create_page("cal", properties) == {'id': 'page-1'}
        session.request.assert_called_once_with(
            "POST",
            "https://api.notion.com/v1/pages",
            json={'parent': {'database_id': 'cal'}, 'properties': properties},
            timeout=30.0,
        )


class TestNotionClientErrors:
    """Conversion of failures into RemoteApiError."""

    @pytest.mark.parametrize("status,code,reason,text", [
        (404, "object_not_found", ApiErrorReason.NOT_FOUND, "not found"),
        (401, "unauthorized", ApiErrorReason.UNAUTHORIZED, "NOTION_API_KEY"),
        (403, "restricted_resource", ApiErrorReason.RESTRICTED, "Share the database"),
        (400, "validation_error", ApiErrorReason.VALIDATION, "Validation error: bad body"),
        (429, "rate_limited", ApiErrorReason.RATE_LIMITED, "Rate limited"),
        (500, "internal_server_error", ApiErrorReason.OTHER, "bad body"),
    ])
    def test_error_codes(self, client, session, status, code, reason, text):
        session.request.return_value = _response(
            status, {'object': 'error', 'status': status, 'code': code, 'message': 'bad body'}
        )

        with pytest.raises(RemoteApiError) as excinfo:
            client.retrieve_database("tmpl")

        assert excinfo.value.reason is reason
        assert excinfo.value.status == status
        assert text in excinfo.value.describe()

    def test_rate_limit_without_body(self, client, session):
        session.request.return_value = _response(429, json_error=True)

        with pytest.raises(RemoteApiError) as excinfo:
            client.retrieve_database("tmpl")

        assert excinfo.value.reason is ApiErrorReason.RATE_LIMITED

    def test_non_json_error_body(self, client, session):
        session.request.return_value = _response(502, json_error=True)

        with pytest.raises(RemoteApiError) as excinfo:
            client.retrieve_database("tmpl")

        assert excinfo.value.reason is ApiErrorReason.OTHER
        assert str(excinfo.value) == "HTTP 502"

    def test_network_failure(self, client, session):
        session.request.side_effect = requests.ConnectionError("connection refused")

        with pytest.raises(RemoteApiError) as excinfo:
            client.query_database("tmpl")

        assert excinfo.value.reason is ApiErrorReason.OTHER
        assert "connection refused" in str(excinfo.value)

    def test_non_json_success_body(self, client, session):
        session.request.return_value = _response(200, json_error=True)

        with pytest.raises(RemoteApiError):
            client.create_page("cal", {})
