# =============================================================================
# core/models/todo.py - Todo Schemas
# =============================================================================
# These models define the API contract for todo operations:
# - TodoCreate: Input for creating a todo
# - TodoUpdate: Input for a merge update (absent fields are left unchanged)
# - Todo: A stored todo, returned by the API and held by the client
# - TodoDeleted: Confirmation after a delete
# - ErrorResponse: Body of every 4xx/5xx response
#
# A todo is the only persisted entity in the system.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

TEXT_MAX_LENGTH = 255


class TodoCreate(BaseModel):
    """
    Schema for creating a todo.

    `text` is optional at the schema level so a missing value can be
    reported as "Text is required" by the service instead of a generic
    validation error.

    Example:
        {"text": "Buy milk"}
    """

    text: str | None = Field(
        default=None,
        max_length=TEXT_MAX_LENGTH,
        description="What needs to be done"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [{"text": "Buy milk"}]
        }
    }


class TodoUpdate(BaseModel):
    """
    Schema for updating a todo.

    Merge semantics: only fields present in the body are written. A field
    that is missing (or null) keeps its stored value.

    Example:
        {"completed": true}
        or
        {"text": "Buy oat milk"}
    """

    text: str | None = Field(
        default=None,
        max_length=TEXT_MAX_LENGTH,
        description="New text (omit to keep the current text)"
    )

    completed: bool | None = Field(
        default=None,
        description="New completion state (omit to keep the current state)"
    )

    model_config = ConfigDict(
        # "1"/"true" strings and 0/1 ints must not be coerced silently
        strict=True,
        json_schema_extra={
            "examples": [{"completed": True}, {"text": "Buy oat milk"}]
        },
    )


class Todo(BaseModel):
    """
    A stored todo.

    Returned by every read/write endpoint and held in client state.

    Example:
        {
            "id": 1,
            "text": "Buy milk",
            "completed": false,
            "created_at": "2024-01-15T10:30:00"
        }
    """

    # Assigned by the database, never reused
    id: int = Field(..., description="Unique todo identifier")

    text: str = Field(..., description="What needs to be done")

    completed: bool = Field(default=False, description="Whether the todo is done")

    # Set once by the database; the sole ordering key for listings
    created_at: datetime = Field(..., description="Timestamp when the todo was created")

    model_config = ConfigDict(from_attributes=True)


class TodoDeleted(BaseModel):
    """Confirmation returned after a successful delete."""
    message: str = Field(default="Todo deleted successfully")


class ErrorResponse(BaseModel):
    """Body of every error response."""
    error: str = Field(..., examples=["Todo not found"])
