# tests/conftest.py
import os
import tempfile
from typing import Any, Dict, Optional

import pytest

# Les logs des tests vont dans un dossier temporaire
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix="library-logs-"))

from fastapi.testclient import TestClient  # noqa: E402
from strawberry.types import ExecutionResult  # noqa: E402

from backend.api.graphql.gqContext_init import AppContext  # noqa: E402
from backend.api.graphql.queries.schema import schema  # noqa: E402
from backend.api.utils.library_store import LibraryStore, get_store  # noqa: E402
from backend.api_app import create_api  # noqa: E402


@pytest.fixture
def store():
    """Store neuf avec le jeu de données initial (3 auteurs, 8 livres)."""
    return LibraryStore()


@pytest.fixture
def empty_store():
    return LibraryStore(seed=False)


@pytest.fixture
def graphql_context(store):
    """Fixture providing GraphQL context bound to the test store."""
    return AppContext(store=store)


@pytest.fixture
def execute_graphql(graphql_context):
    """
    Fixture to execute GraphQL queries or mutations synchronously.

    Args:
        query: GraphQL query or mutation string.
        variables: Optional dictionary of variables.

    Returns:
        ExecutionResult from Strawberry.
    """
    def _execute(query: str, variables: Optional[Dict[str, Any]] = None) -> ExecutionResult:
        return schema.execute_sync(
            query,
            variable_values=variables,
            context_value=graphql_context
        )
    return _execute


@pytest.fixture
def client(store):
    """Client de test FastAPI branché sur le store du test."""
    app = create_api()
    app.dependency_overrides[get_store] = lambda: store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
