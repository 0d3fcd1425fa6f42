# File: notion_scheduler/services/notion_client.py
"""
Minimal Notion REST API client.
Covers the three endpoints the scheduler needs and converts every failure
into a RemoteApiError.
"""

from typing import Any, Dict, List, Optional

import requests

from notion_scheduler.core.config_manager import Config
from notion_scheduler.core.exceptions import ApiErrorReason, RemoteApiError
from notion_scheduler.utils.logger import LoggerMixin


class NotionClient(LoggerMixin):
    """Thin wrapper over ``requests.Session`` for the Notion API."""

    def __init__(self, config: Config, session: Optional[requests.Session] = None):
        """
        Initialize the client.

        Args:
            config: Application configuration (API key, version, timeout)
            session: Optional pre-built session, mainly for tests
        """
        self.base_url = config.api_url.rstrip("/")
        self.timeout = config.request_timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {config.notion_api_key}",
            "Notion-Version": config.notion_version,
            "Content-Type": "application/json",
        })

    def retrieve_database(self, database_id: str) -> Dict[str, Any]:
        """GET /databases/{id}. Used as a read-only existence check."""
        return self._request("GET", f"/databases/{database_id}")

    def query_database(
        self,
        database_id: str,
        sorts: Optional[List[Dict[str, str]]] = None,
        start_cursor: Optional[str] = None,
        page_size: int = 100
    ) -> Dict[str, Any]:
        """POST /databases/{id}/query. Returns one page of results."""
        body: Dict[str, Any] = {"page_size": page_size}
        if sorts:
            body["sorts"] = sorts
        if start_cursor:
            body["start_cursor"] = start_cursor
        return self._request("POST", f"/databases/{database_id}/query", json=body)

    def create_page(self, database_id: str, properties: Dict[str, Any]) -> Dict[str, Any]:
        """POST /pages with a database parent."""
        body = {
            "parent": {"database_id": database_id},
            "properties": properties,
        }
        return self._request("POST", "/pages", json=body)

    def _request(self, method: str, path: str, json: Optional[dict] = None) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        self.logger.debug(f"{method} {path}")

        try:
            response = self.session.request(method, url, json=json, timeout=self.timeout)
        except requests.RequestException as e:
            raise RemoteApiError(f"Request to Notion failed: {e}") from e

        if not response.ok:
            raise self._error_from_response(response)

        try:
            return response.json()
        except ValueError as e:
            raise RemoteApiError(
                f"Notion returned a non-JSON response ({response.status_code})",
                status=response.status_code
            ) from e

    @staticmethod
    def _error_from_response(response: requests.Response) -> RemoteApiError:
        """Build a RemoteApiError from a Notion error body (``{"code": ..., "message": ...}``)."""
        try:
            payload = response.json()
        except ValueError:
            payload = {}
        if not isinstance(payload, dict):
            payload = {}

        code = payload.get("code")
        reason = ApiErrorReason.from_code(code)
        if reason is ApiErrorReason.OTHER and response.status_code == 429:
            reason = ApiErrorReason.RATE_LIMITED

        message = payload.get("message") or f"HTTP {response.status_code}"
        return RemoteApiError(message, reason=reason, status=response.status_code)
