# taskapp/services/api_client.py

import logging
import os
from typing import Any, Dict, List, Optional

import requests

from ..errors import (
    NotFoundError,
    RequestFailedError,
    TransportError,
    ValidationError,
)

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://127.0.0.1:5000"


def resolve_api_url(base_url: Optional[str] = None) -> str:
    """Base URL from the argument, then TASK_API_URL, then the local default."""
    url = base_url or os.environ.get("TASK_API_URL") or DEFAULT_API_URL
    return url.rstrip("/")


class TaskApiClient:
    """Thin wrapper around the Task HTTP API."""

    def __init__(self, base_url: Optional[str] = None, timeout: float = 10, session=None):
        self.base_url = resolve_api_url(base_url)
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def _send(self, method: str, path: str, **kwargs):
        url = f"{self.base_url}{path}"
        try:
            return self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            # Covers refused connections, timeouts and unusable URLs alike
            logger.error(f"{method} {url} failed: {e}")
            raise TransportError(f"Could not reach {self.base_url}") from e

    def _request(self, method: str, path: str, **kwargs) -> Any:
        response = self._send(method, path, **kwargs)

        if response.status_code == 400:
            raise ValidationError(self._message(response, "Invalid request"))
        if response.status_code == 404:
            raise NotFoundError(self._message(response, "Task not found"))
        if not response.ok:
            logger.error(f"Server responded with status {response.status_code}: {response.text}")
            raise RequestFailedError(
                self._message(response, f"Request failed with status {response.status_code}"),
                response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{method} {path} returned a non-JSON body: {response.text[:200]}")
            raise RequestFailedError("Server returned an invalid response", response.status_code) from e

    @staticmethod
    def _message(response, default: str) -> str:
        try:
            body = response.json()
        except ValueError:
            return default
        if isinstance(body, dict) and body.get("message"):
            return body["message"]
        return default

    def health(self) -> str:
        response = self._send("GET", "/")
        if not response.ok:
            raise RequestFailedError("Health check failed", response.status_code)
        return response.text

    def list_tasks(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/tasks")

    def get_task(self, task_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/api/tasks/{task_id}")

    def create_task(self, title: str, description: str = "", priority: Optional[str] = None) -> Dict[str, Any]:
        payload = {"title": title, "description": description}
        if priority:
            payload["priority"] = priority
        return self._request("POST", "/api/tasks", json=payload)

    def toggle_task(self, task_id: str) -> Dict[str, Any]:
        return self._request("PUT", f"/api/tasks/{task_id}/toggle")

    def delete_task(self, task_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/api/tasks/{task_id}")
