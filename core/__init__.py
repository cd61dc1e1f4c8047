# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the todo business logic:
# - models/: Pydantic schemas for data validation
# - services/: Validation and not-found handling on top of lib.todo_store
#
# Code in this package should NOT import from FastAPI routers.
# This keeps the logic testable and reusable.
# =============================================================================
