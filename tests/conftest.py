# tests/conftest.py
from __future__ import annotations

import asyncio
from typing import Any

import pytest

from fxa.content.contracts.account import Account


class FakeClientSource:
    """In-memory client source recording its calls."""

    def __init__(
        self,
        devices: list[dict[str, Any]] | None = None,
        oauth_apps: list[dict[str, Any]] | None = None,
        *,
        devices_error: Exception | None = None,
        oauth_apps_error: Exception | None = None,
        delay: float = 0.0,
    ):
        self.devices = devices or []
        self.oauth_apps = oauth_apps or []
        self.devices_error = devices_error
        self.oauth_apps_error = oauth_apps_error
        self.delay = delay
        self.calls: list[tuple[str, Account]] = []

    async def fetch_devices(self, account: Account) -> list[dict[str, Any]]:
        self.calls.append(("devices", account))
        await asyncio.sleep(self.delay)
        if self.devices_error:
            raise self.devices_error
        return [{**d, "clientType": "device"} for d in self.devices]

    async def fetch_oauth_apps(self, account: Account) -> list[dict[str, Any]]:
        self.calls.append(("oauth_apps", account))
        if self.oauth_apps_error:
            raise self.oauth_apps_error
        return [{**a, "clientType": "oAuthApp"} for a in self.oauth_apps]


@pytest.fixture
def account() -> Account:
    return Account(session_token="session-token", uid="uid-1")
