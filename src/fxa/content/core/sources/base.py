# fxa/content/core/sources/base.py
"""
Client source protocol.

A client source knows how to list the devices and the authorized OAuth
apps of a signed-in account. Each returned item is a raw attribute bag
that carries the ``clientType`` discriminator.
"""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from fxa.content.contracts.account import Account


@runtime_checkable
class ClientSource(Protocol):
    async def fetch_devices(self, account: Account) -> list[dict[str, Any]]: ...

    async def fetch_oauth_apps(self, account: Account) -> list[dict[str, Any]]: ...
