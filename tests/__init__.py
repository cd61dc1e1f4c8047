# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Todo API and client:
# - test_models.py: Unit tests for Pydantic model validation
# - test_config.py: Settings and .env selection
# - test_todo_store.py: Persistence layer against in-memory SQLite
# - test_todo_service.py: Validation and not-found handling
# - test_api.py: HTTP contract through TestClient
# - test_client_state.py / test_client_controller.py: Client side
#
# Run tests with: pytest
# =============================================================================
