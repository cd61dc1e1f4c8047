# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the todo models to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Models serialize to JSON properly
# - Default values work as expected
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

from datetime import datetime

import pytest
from pydantic import ValidationError

from core.models import (
    TEXT_MAX_LENGTH,
    ErrorResponse,
    Todo,
    TodoCreate,
    TodoDeleted,
    TodoUpdate,
)


class TestTodoCreate:
    """Tests for TodoCreate model."""

    def test_valid_create(self):
        request = TodoCreate(text="Buy milk")

        assert request.text == "Buy milk"

    def test_text_is_optional_at_schema_level(self):
        """Missing text is reported by the service, not the schema."""
        request = TodoCreate()

        assert request.text is None

    def test_text_too_long(self):
        with pytest.raises(ValidationError):
            TodoCreate(text="x" * (TEXT_MAX_LENGTH + 1))

    def test_text_must_be_string(self):
        with pytest.raises(ValidationError):
            TodoCreate(text=42)


class TestTodoUpdate:
    """Tests for TodoUpdate model."""

    def test_empty_update(self):
        """An empty body means "change nothing"."""
        request = TodoUpdate()

        assert request.text is None
        assert request.completed is None

    def test_completed_only(self):
        request = TodoUpdate(completed=True)

        assert request.completed is True
        assert request.text is None

    def test_completed_must_be_boolean(self):
        """Strings and ints are not silently coerced to booleans."""
        with pytest.raises(ValidationError):
            TodoUpdate(completed="yes")

        with pytest.raises(ValidationError):
            TodoUpdate(completed=1)


class TestTodo:
    """Tests for the Todo response model."""

    def test_from_row(self, sample_todo_row):
        todo = Todo(**sample_todo_row)

        assert todo.id == 1
        assert todo.text == "Buy milk"
        assert todo.completed is False
        assert todo.created_at == datetime(2024, 1, 15, 10, 30)

    def test_serializes_to_json(self, sample_todo_row):
        data = Todo(**sample_todo_row).model_dump(mode="json")

        assert data == {
            "id": 1,
            "text": "Buy milk",
            "completed": False,
            "created_at": "2024-01-15T10:30:00",
        }

    def test_requires_id(self, sample_todo_row):
        del sample_todo_row["id"]

        with pytest.raises(ValidationError):
            Todo(**sample_todo_row)


class TestResponseBodies:
    """Tests for confirmation and error bodies."""

    def test_deleted_default_message(self):
        assert TodoDeleted().message == "Todo deleted successfully"

    def test_error_response(self):
        assert ErrorResponse(error="Todo not found").model_dump() == {"error": "Todo not found"}
