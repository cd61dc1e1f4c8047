# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - database.py: Pooled SQLAlchemy engine, todos table, schema bootstrap
# - todo_store.py: Parameterized CRUD statements for the todos table
# - utils.py: Shared utilities (base error class, text helpers)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.database import Database, StoreError, metadata, todos_table
from lib.todo_store import TodoStore
from lib.utils import ApplicationError, is_blank

__all__ = [
    # Database
    "Database",
    "StoreError",
    "metadata",
    "todos_table",
    # Store
    "TodoStore",
    # Utils
    "ApplicationError",
    "is_blank",
]
