# fxa/content/core/attached/service.py
"""
AttachedClientsService – single entry-point for attached-clients refreshes.

Keeps one registry per signed-in session and wires the fetch
coordinator into it.
"""
from __future__ import annotations

import logging

from fxa.content.contracts.account import Account
from fxa.content.contracts.clients import ClientTypes
from fxa.content.core.attached.coordinator import ClientFetchCoordinator
from fxa.content.core.attached.registry import AttachedClientRegistry

logger = logging.getLogger(__name__)


class AttachedClientsService:
    """Facade for the attached-clients subsystem."""

    def __init__(self, *, coordinator: ClientFetchCoordinator) -> None:
        self._coordinator = coordinator
        self._registries: dict[str, AttachedClientRegistry] = {}

    def registry_for(self, account: Account) -> AttachedClientRegistry:
        """Return the registry of ``account``'s session, creating it once."""
        registry = self._registries.get(account.session_token)
        if registry is None:
            registry = AttachedClientRegistry()
            self._registries[account.session_token] = registry
        return registry

    def discard(self, account: Account) -> None:
        """Tear down the registry of ``account``'s session, if any."""
        registry = self._registries.pop(account.session_token, None)
        if registry is not None:
            registry.reset()

    async def refresh(
        self,
        account: Account,
        client_types: ClientTypes,
    ) -> AttachedClientRegistry:
        """Fetch the requested sources and replace the session's roster.

        When no source is requested the roster is still reset to empty.
        A failing fetch propagates and leaves the roster untouched; no
        registry is created for a session whose first refresh fails.
        """
        results = await self._coordinator.fetch(client_types, account)
        registry = self.registry_for(account)
        registry.refresh_from(results)
        logger.debug(
            "Refreshed attached clients (devices=%s, oauth_apps=%s): %d item(s)",
            client_types.devices,
            client_types.oauth_apps,
            len(registry),
        )
        return registry

    def __len__(self) -> int:
        return len(self._registries)
