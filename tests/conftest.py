"""Shared fixtures."""

import pytest

from form3.core.config import get_settings
from form3.services.accounts_service import AccountsService
from tests.fakes import BASE_URL, ScriptedTransport, build_response


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def respond():
    """Factory: service wired to a transport answering with the given status and body."""

    def _make(status_code: int, body: str = "") -> tuple[AccountsService, ScriptedTransport]:
        transport = ScriptedTransport(build_response(status_code, body))
        return AccountsService(transport, BASE_URL), transport

    return _make
