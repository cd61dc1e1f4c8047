# =============================================================================
# tests/test_todo_service.py - Todo Service Tests
# =============================================================================
# Tests for core.services.TodoService:
# - Validation happens before the store is touched
# - "No row" results become TodoNotFoundError
# - Store errors propagate unchanged
#
# Validation tests use a mocked store so we can assert it was never called.
# =============================================================================

from unittest.mock import MagicMock

import pytest

from app.exceptions import TodoNotFoundError, TodoValidationError
from core.models.todo import TodoCreate, TodoUpdate
from core.services.todo_service import TodoService
from lib.database import StoreError
from lib.todo_store import TodoStore


@pytest.fixture
def mock_store():
    return MagicMock(spec=TodoStore)


@pytest.fixture
def mock_service(mock_store):
    return TodoService(mock_store)


# =============================================================================
# Validation Tests (mocked store)
# =============================================================================

class TestCreateValidation:
    """Create rejects missing text without writing anything."""

    @pytest.mark.parametrize("request_body", [None, TodoCreate(), TodoCreate(text="")])
    def test_missing_text(self, mock_service, mock_store, request_body):
        with pytest.raises(TodoValidationError) as exc_info:
            mock_service.create_todo(request_body)

        assert exc_info.value.status_code == 400
        assert exc_info.value.to_dict() == {"error": "Text is required"}
        mock_store.insert.assert_not_called()

    def test_valid_text_is_inserted(self, mock_service, mock_store, sample_todo_row):
        mock_store.insert.return_value = sample_todo_row

        result = mock_service.create_todo(TodoCreate(text="Buy milk"))

        assert result == sample_todo_row
        mock_store.insert.assert_called_once_with("Buy milk")


class TestUpdateValidation:
    """Update passes only the given fields to the store."""

    def test_empty_text_rejected(self, mock_service, mock_store):
        with pytest.raises(TodoValidationError):
            mock_service.update_todo(1, TodoUpdate(text=""))

        mock_store.update.assert_not_called()

    def test_absent_fields_passed_as_none(self, mock_service, mock_store, sample_todo_row):
        mock_store.update.return_value = sample_todo_row

        mock_service.update_todo(1, TodoUpdate(completed=True))

        mock_store.update.assert_called_once_with(1, text=None, completed=True)

    def test_no_body(self, mock_service, mock_store, sample_todo_row):
        mock_store.update.return_value = sample_todo_row

        assert mock_service.update_todo(1, None) == sample_todo_row
        mock_store.update.assert_called_once_with(1, text=None, completed=None)

    def test_store_error_propagates(self, mock_service, mock_store):
        mock_store.update.side_effect = StoreError("connection refused")

        with pytest.raises(StoreError):
            mock_service.update_todo(1, TodoUpdate(completed=True))


# =============================================================================
# Behavior Tests (real store)
# =============================================================================

class TestTodoService:
    """End-to-end service behavior on the in-memory database."""

    def test_create_then_list(self, service):
        created = service.create_todo(TodoCreate(text="Buy milk"))

        todos = service.list_todos()

        assert todos == [created]
        assert created["completed"] is False

    def test_get_missing(self, service):
        with pytest.raises(TodoNotFoundError) as exc_info:
            service.get_todo(42)

        assert exc_info.value.status_code == 404
        assert exc_info.value.to_dict() == {"error": "Todo not found"}

    def test_update_missing(self, service, store):
        service.create_todo(TodoCreate(text="Buy milk"))

        with pytest.raises(TodoNotFoundError):
            service.update_todo(42, TodoUpdate(completed=True))

        assert store.list_all()[0]["completed"] is False

    def test_update_merges(self, service):
        created = service.create_todo(TodoCreate(text="Buy milk"))

        toggled = service.update_todo(created["id"], TodoUpdate(completed=True))
        renamed = service.update_todo(created["id"], TodoUpdate(text="Buy bread"))

        assert toggled["text"] == "Buy milk"
        assert renamed["completed"] is True
        assert renamed["text"] == "Buy bread"

    def test_delete_twice(self, service):
        created = service.create_todo(TodoCreate(text="Buy milk"))

        service.delete_todo(created["id"])

        with pytest.raises(TodoNotFoundError):
            service.delete_todo(created["id"])
