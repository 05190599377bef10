"""Shared fixtures: one fake host per platform service."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from mainflux_sdk.core.config import SDKSettings
from mainflux_sdk.sdk import SDK

USERS_URL = "http://users.test"
THINGS_URL = "http://things.test"
CLIENTS_URL = "http://clients.test"
DOMAINS_URL = "http://domains.test"
INVITATIONS_URL = "http://invitations.test"
BOOTSTRAP_URL = "http://bootstrap.test"
CERTS_URL = "http://certs.test"
HTTP_ADAPTER_URL = "http://adapter.test"
READERS_URL = "http://readers.test"
JOURNALS_URL = "http://journal.test"

TOKEN = "user-token"

SERVICE_ENV = {
    "MF_SDK_USERS_URL": USERS_URL,
    "MF_SDK_THINGS_URL": THINGS_URL,
    "MF_SDK_CLIENTS_URL": CLIENTS_URL,
    "MF_SDK_DOMAINS_URL": DOMAINS_URL,
    "MF_SDK_INVITATIONS_URL": INVITATIONS_URL,
    "MF_SDK_BOOTSTRAP_URL": BOOTSTRAP_URL,
    "MF_SDK_CERTS_URL": CERTS_URL,
    "MF_SDK_HTTP_ADAPTER_URL": HTTP_ADAPTER_URL,
    "MF_SDK_READERS_URL": READERS_URL,
    "MF_SDK_JOURNALS_URL": JOURNALS_URL,
}


def request_json(request: httpx.Request) -> Any:
    return json.loads(request.content)


@pytest.fixture
def settings() -> SDKSettings:
    return SDKSettings(
        _env_file=None,
        users_url=USERS_URL,
        things_url=THINGS_URL,
        clients_url=CLIENTS_URL,
        domains_url=DOMAINS_URL,
        invitations_url=INVITATIONS_URL,
        bootstrap_url=BOOTSTRAP_URL,
        certs_url=CERTS_URL,
        http_adapter_url=HTTP_ADAPTER_URL,
        readers_url=READERS_URL,
        journals_url=JOURNALS_URL,
    )


@pytest.fixture
def sdk(settings: SDKSettings) -> SDK:
    return SDK(settings)


@pytest.fixture
def service_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Point SDKSettings() at the fake hosts and away from any real .env."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.delenv("MF_SDK_TOKEN", raising=False)
    for key, value in SERVICE_ENV.items():
        monkeypatch.setenv(key, value)
