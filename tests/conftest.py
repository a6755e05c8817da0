import os
import sys
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from app.api.deps import get_now, get_set_logs
from app.main import app

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def now():
    return NOW


@pytest.fixture()
def history():
    """Mutable list the recovery endpoints read instead of the database."""
    return []


@pytest.fixture()
def client(history):
    app.dependency_overrides[get_now] = lambda: NOW
    app.dependency_overrides[get_set_logs] = lambda: history
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
