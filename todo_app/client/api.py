"""
HTTP client for the todo API.

Every call is a single request/response pair: no retry, no timeout unless one
is given explicitly.
"""

import logging
from datetime import date
from typing import List, Optional

import requests
from pydantic import ConfigDict

from todo_app.core.config import settings
from todo_app.schemas.todo import TodoResponse

logger = logging.getLogger(__name__)


class Todo(TodoResponse):
    """Task record as held by the client."""

    model_config = ConfigDict(from_attributes=True, frozen=True)


class TodoApiError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message


class TodoApiClient:
    """Thin wrapper over ``/api/todos``.

    ``session`` may be any object exposing ``get/post/put/delete`` that
    return responses with ``status_code`` and ``json()`` (a
    ``requests.Session`` by default, FastAPI's ``TestClient`` in tests).
    """

    def __init__(self, base_url: Optional[str] = None, session=None, timeout: Optional[float] = None):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    @property
    def api_url(self) -> str:
        return f"{self.base_url}/api/todos"

    def _request(self, method: str, url: str, **kwargs):
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        try:
            response = getattr(self.session, method)(url, **kwargs)
        except requests.RequestException as e:
            logger.error(f"{method.upper()} {url} failed: {e}")
            raise

        if response.status_code >= 400:
            try:
                message = response.json().get("error", "")
            except (ValueError, AttributeError):
                message = response.text
            logger.error(f"{method.upper()} {url} -> {response.status_code} {message}")
            raise TodoApiError(response.status_code, message)
        return response.json()

    @staticmethod
    def _body(title: str, priority: Optional[str], deadline: Optional[date]) -> dict:
        return {
            "title": title,
            "priority": priority,
            "deadline": deadline.isoformat() if deadline else None,
        }

    def list_todos(self) -> List[Todo]:
        data = self._request("get", self.api_url)
        return [Todo.model_validate(item) for item in data]

    def create_todo(self, title: str, priority: Optional[str] = "low", deadline: Optional[date] = None) -> Todo:
        data = self._request("post", self.api_url, json=self._body(title, priority, deadline))
        return Todo.model_validate(data)

    def update_todo(self, todo_id: int, title: str, priority: Optional[str], deadline: Optional[date]) -> Optional[Todo]:
        # `completed` n'est jamais envoyé
        data = self._request("put", f"{self.api_url}/{todo_id}", json=self._body(title, priority, deadline))
        if data is None:
            return None
        return Todo.model_validate(data)

    def delete_todo(self, todo_id: int) -> str:
        return self._request("delete", f"{self.api_url}/{todo_id}")["message"]

    def clear_todos(self) -> str:
        return self._request("delete", f"{self.api_url}/clear")["message"]
