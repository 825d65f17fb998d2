import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from netlog.api import log_routes
from netlog.models.log_models import LogEntry
from netlog.store.log_store import LogStore


@pytest.fixture
def get_entry():
    return LogEntry(request_type="GET", path="/x")


@pytest.fixture
def post_entry():
    return LogEntry(request_type="POST", path="/y")


@pytest.fixture
def full_entry():
    return LogEntry(
        request_type="POST",
        response="201 Created",
        query_parameter="{dryRun: false}",
        header="{Content-Type: application/json}",
        request_data='{"name": "alice"}',
        response_data='{"id": 7}',
        path="/users",
        message="created",
        curl="curl -X POST https://api.example.com/users",
    )


@pytest.fixture
def store():
    return LogStore()


@pytest.fixture
def client(store):
    """Test client bound to a fresh store."""
    log_routes.init_routes(log_store=store)
    app = FastAPI()
    app.include_router(log_routes.router)
    yield TestClient(app)
    log_routes.init_routes(log_store=None)
