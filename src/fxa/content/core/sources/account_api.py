# fxa/content/core/sources/account_api.py
"""
Thin async client for the account API device and OAuth app listings.
"""
from __future__ import annotations

import logging
from typing import Any

import httpx

from fxa.content.contracts.account import Account
from fxa.content.contracts.clients import ClientType
from fxa.content.core.errors import SourceAPIError, SourceUnavailableError

logger = logging.getLogger(__name__)


class AccountApiClient:
    """HTTP client for the account API.

    Contract::

        GET {base_url}{devices_path}     -> [ {id, name, isCurrentDevice, ...} ]
        GET {base_url}{oauth_apps_path}  -> [ {id, name, scope, ...} ]

    Both calls authenticate with the account session token as bearer
    credential. Returned items are stamped with their ``clientType``.
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 10.0,
        devices_path: str = "/account/devices",
        oauth_apps_path: str = "/account/oauth-apps",
    ) -> None:
        self._base = base_url.rstrip("/")
        self._timeout = timeout
        self._devices_path = devices_path
        self._oauth_apps_path = oauth_apps_path

    async def fetch_devices(self, account: Account) -> list[dict[str, Any]]:
        items = await self._get(self._devices_path, account)
        return [{**item, "clientType": ClientType.DEVICE.value} for item in items]

    async def fetch_oauth_apps(self, account: Account) -> list[dict[str, Any]]:
        items = await self._get(self._oauth_apps_path, account)
        return [{**item, "clientType": ClientType.OAUTH_APP.value} for item in items]

    async def _get(self, path: str, account: Account) -> list[dict[str, Any]]:
        headers = {"Authorization": f"Bearer {account.session_token}"}
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            try:
                resp = await client.get(f"{self._base}{path}", headers=headers)
                resp.raise_for_status()
            except httpx.HTTPStatusError as ex:
                logger.warning(
                    "Request to %s failed status=%s", path, ex.response.status_code
                )
                raise SourceAPIError(
                    ex.response.status_code, ex.response.text, path
                ) from ex
            except httpx.HTTPError as ex:
                logger.warning("Request to %s failed: %s", path, ex)
                raise SourceUnavailableError(f"{path}: {ex}") from ex

            try:
                data = resp.json()
            except ValueError as ex:
                logger.warning("Request to %s returned invalid JSON", path)
                raise SourceAPIError(resp.status_code, "invalid JSON", path) from ex

        if not isinstance(data, list):
            raise SourceAPIError(resp.status_code, "expected a JSON array", path)
        if not all(isinstance(item, dict) for item in data):
            raise SourceAPIError(resp.status_code, "expected an array of objects", path)
        return data
