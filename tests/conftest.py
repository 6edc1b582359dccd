"""
Shared fixtures: a fresh store per test, wired into the app through dependency overrides.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

# keep test runs from writing ./logs
os.environ.setdefault("LOG_DIR", str(Path(tempfile.gettempdir()) / "ledger_service_test_logs"))

import pytest
from fastapi.testclient import TestClient

from ledger_service.api.deps import get_accounts_service
from ledger_service.app import app
from ledger_service.notifications import LoggingNotificationService
from ledger_service.service import AccountsService
from ledger_service.store import InMemoryAccountsRepository


@pytest.fixture
def repository() -> InMemoryAccountsRepository:
    return InMemoryAccountsRepository()


@pytest.fixture
def accounts_service(repository: InMemoryAccountsRepository) -> AccountsService:
    return AccountsService(repository, LoggingNotificationService())


@pytest.fixture
def client(accounts_service: AccountsService):
    app.dependency_overrides[get_accounts_service] = lambda: accounts_service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
