# =============================================================================
# lib/todo_store.py - Todo Persistence Operations
# =============================================================================
# Typed access to the `todos` table. Every operation is exactly one
# parameterized statement run in its own transaction, so each insert/update/
# delete is atomic and durable once it returns.
#
# There is no in-process locking: two concurrent updates to the same row are
# resolved by the database and the last writer wins.
#
# Usage:
#   from lib.todo_store import TodoStore
#   store = TodoStore(database.engine)
#   row = store.insert("Buy milk")
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Boolean, String, bindparam, delete, func, insert, select, update
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import SQLAlchemyError

from lib.database import StoreError, todos_table

# Set up logging for this module
logger = logging.getLogger(__name__)

# Columns returned by every read/write, in API order
_COLUMNS = (
    todos_table.c.id,
    todos_table.c.text,
    todos_table.c.completed,
    todos_table.c.created_at,
)


def _row_to_dict(row: RowMapping) -> dict[str, Any]:
    """Convert a result row to a plain dict."""
    return {
        "id": row["id"],
        "text": row["text"],
        "completed": bool(row["completed"]),
        "created_at": row["created_at"],
    }


class TodoStore:
    """
    Parameterized CRUD statements for the todos table.

    All values reach the database as bound parameters; user input is never
    concatenated into SQL.

    Example:
        store = TodoStore(engine)
        created = store.insert("Walk dog")
        store.update(created["id"], completed=True)
        store.list_all()   # newest first
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def list_all(self) -> list[dict[str, Any]]:
        """
        Fetch every todo, newest first.

        Rows created within the same timestamp tick are ordered by id, so the
        most recent insert still comes first.

        Raises:
            StoreError: If the query fails
        """
        statement = select(*_COLUMNS).order_by(
            todos_table.c.created_at.desc(),
            todos_table.c.id.desc(),
        )

        try:
            with self.engine.connect() as conn:
                rows = conn.execute(statement).mappings().all()
        except SQLAlchemyError as e:
            raise StoreError(
                message=f"Failed to fetch todos: {e}",
                code="FETCH_TODOS_FAILED",
            ) from e

        logger.debug(f"Fetched {len(rows)} todos")
        return [_row_to_dict(row) for row in rows]

    def get(self, todo_id: int) -> dict[str, Any] | None:
        """
        Fetch one todo by id.

        Returns:
            Todo dict, or None if no row matches

        Raises:
            StoreError: If the query fails
        """
        statement = select(*_COLUMNS).where(todos_table.c.id == todo_id)

        try:
            with self.engine.connect() as conn:
                row = conn.execute(statement).mappings().first()
        except SQLAlchemyError as e:
            raise StoreError(
                message=f"Failed to fetch todo: {e}",
                code="FETCH_TODO_FAILED",
                details={"todo_id": todo_id},
            ) from e

        return _row_to_dict(row) if row else None

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def insert(self, text: str) -> dict[str, Any]:
        """
        Insert a new todo.

        The database assigns id, created_at and completed=false.

        Returns:
            Inserted todo dict

        Raises:
            StoreError: If the insert fails
        """
        statement = insert(todos_table).values(text=text).returning(*_COLUMNS)

        try:
            with self.engine.begin() as conn:
                row = conn.execute(statement).mappings().one()
        except SQLAlchemyError as e:
            raise StoreError(
                message=f"Failed to insert todo: {e}",
                code="INSERT_TODO_FAILED",
            ) from e

        logger.info(f"Created todo: {row['id']}")
        return _row_to_dict(row)

    def update(
        self,
        todo_id: int,
        text: str | None = None,
        completed: bool | None = None,
    ) -> dict[str, Any] | None:
        """
        Merge-update a todo in a single statement.

        A None argument leaves the column unchanged (COALESCE with the
        current value); only the values given are written.

        Returns:
            Updated todo dict, or None if no row matches

        Raises:
            StoreError: If the update fails
        """
        statement = (
            update(todos_table)
            .where(todos_table.c.id == todo_id)
            .values(
                text=func.coalesce(
                    bindparam("new_text", text, type_=String),
                    todos_table.c.text,
                ),
                completed=func.coalesce(
                    bindparam("new_completed", completed, type_=Boolean),
                    todos_table.c.completed,
                ),
            )
            .returning(*_COLUMNS)
        )

        try:
            with self.engine.begin() as conn:
                row = conn.execute(statement).mappings().first()
        except SQLAlchemyError as e:
            raise StoreError(
                message=f"Failed to update todo: {e}",
                code="UPDATE_TODO_FAILED",
                details={"todo_id": todo_id},
            ) from e

        if row is None:
            return None

        logger.info(f"Updated todo: {todo_id}")
        return _row_to_dict(row)

    def delete(self, todo_id: int) -> dict[str, Any] | None:
        """
        Hard-delete a todo.

        Returns:
            The deleted todo dict, or None if no row matches

        Raises:
            StoreError: If the delete fails
        """
        statement = (
            delete(todos_table)
            .where(todos_table.c.id == todo_id)
            .returning(*_COLUMNS)
        )

        try:
            with self.engine.begin() as conn:
                row = conn.execute(statement).mappings().first()
        except SQLAlchemyError as e:
            raise StoreError(
                message=f"Failed to delete todo: {e}",
                code="DELETE_TODO_FAILED",
                details={"todo_id": todo_id},
            ) from e

        if row is None:
            return None

        logger.info(f"Deleted todo: {todo_id}")
        return _row_to_dict(row)
