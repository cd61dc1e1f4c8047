# =============================================================================
# client/api.py - Todo API Client
# =============================================================================
# Thin httpx wrapper around the Todo API. Every method is one request; there
# is no retry, coalescing or cancellation. Any non-2xx response or transport
# failure raises TodoApiError.
#
# Usage:
#   from client.api import TodoApiClient
#   with TodoApiClient("http://localhost:5000") as api:
#       todos = api.list_todos()
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from core.models.todo import Todo, TodoDeleted
from lib.utils import ApplicationError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "http://localhost:5000"

_TODO = TypeAdapter(Todo)
_TODO_LIST = TypeAdapter(list[Todo])
_DELETED = TypeAdapter(TodoDeleted)


class TodoApiError(ApplicationError):
    """
    Raised when a request to the Todo API doesn't succeed.

    Attributes:
        status_code: HTTP status, or None when no response was received
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            message,
            code="TODO_API_ERROR",
            suggestion="Check that the Todo API is running and reachable",
            details=details,
        )
        self.status_code = status_code


class TodoApiClient:
    """
    Client for the Todo API.

    Example:
        api = TodoApiClient("http://localhost:5000")
        todo = api.create_todo("Buy milk")
        api.update_todo(todo.id, completed=True)
        api.delete_todo(todo.id)
        api.close()

    An existing httpx.Client (for example FastAPI's TestClient) can be passed
    in instead of a base URL; it is not closed by close().
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
        http_client: httpx.Client | None = None,
    ):
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(base_url=base_url, timeout=timeout)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> TodoApiClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Request helper
    # -------------------------------------------------------------------------

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """
        Send one request and raise TodoApiError unless it succeeded.
        """
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise TodoApiError(f"Request failed: {e}") from e

        if response.is_error:
            try:
                message = response.json().get("error", response.reason_phrase)
            except (ValueError, AttributeError):
                message = response.reason_phrase
            logger.error(f"{method} {path} returned {response.status_code}: {message}")
            raise TodoApiError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
                details={"error": message},
            )

        return response

    def _parse(self, response: httpx.Response, adapter: TypeAdapter):
        try:
            return adapter.validate_json(response.content)
        except ValidationError as e:
            raise TodoApiError(
                f"Unexpected response body: {e}",
                status_code=response.status_code,
            ) from e

    # -------------------------------------------------------------------------
    # Endpoints
    # -------------------------------------------------------------------------

    def ping(self) -> str:
        """Fetch the root liveness marker."""
        return self._request("GET", "/").text

    def list_todos(self) -> list[Todo]:
        """All todos, newest first."""
        return self._parse(self._request("GET", "/todos"), _TODO_LIST)

    def create_todo(self, text: str) -> Todo:
        response = self._request("POST", "/todos", json={"text": text})
        return self._parse(response, _TODO)

    def update_todo(
        self,
        todo_id: int,
        text: str | None = None,
        completed: bool | None = None,
    ) -> Todo:
        """
        Merge-update a todo; only the arguments that are given are sent.
        """
        body: dict[str, Any] = {}
        if text is not None:
            body["text"] = text
        if completed is not None:
            body["completed"] = completed

        response = self._request("PUT", f"/todos/{todo_id}", json=body)
        return self._parse(response, _TODO)

    def delete_todo(self, todo_id: int) -> str:
        """Delete a todo and return the server's confirmation message."""
        response = self._request("DELETE", f"/todos/{todo_id}")
        return self._parse(response, _DELETED).message
