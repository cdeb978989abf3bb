# fxa/content/core/attached/coordinator.py
"""
Concurrent fetch of the attached-clients sources.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable

from fxa.content.contracts.account import Account
from fxa.content.contracts.clients import ClientTypes
from fxa.content.core.sources.base import ClientSource

logger = logging.getLogger(__name__)

FetchFn = Callable[[Account], Awaitable[list[dict[str, Any]]]]


class ClientFetchCoordinator:
    """Fans out the requested source fetches and joins them.

    Every requested fetch runs as its own task. The join is all-or-fail:
    the first failure cancels the remaining fetches and is re-raised
    unchanged, so no partial result ever reaches the caller.
    """

    def __init__(self, source: ClientSource) -> None:
        self._source = source

    def _calls(self, client_types: ClientTypes) -> list[tuple[str, FetchFn]]:
        calls: list[tuple[str, FetchFn]] = []
        if client_types.devices:
            calls.append(("devices", self._source.fetch_devices))
        if client_types.oauth_apps:
            calls.append(("oauth_apps", self._source.fetch_oauth_apps))
        return calls

    async def fetch(
        self,
        client_types: ClientTypes,
        account: Account,
    ) -> list[list[dict[str, Any]]]:
        """Fetch the enabled sources for ``account``.

        Returns:
            One list of raw attribute bags per requested source, devices
            first. Empty when no source is requested.

        Raises:
            Exception: Whatever the first failing source raised.
        """
        calls = self._calls(client_types)
        if not calls:
            logger.debug("No attached-client sources requested")
            return []

        try:
            async with asyncio.TaskGroup() as tg:
                tasks = [
                    tg.create_task(fn(account), name=f"fetch_{name}")
                    for name, fn in calls
                ]
        except BaseExceptionGroup as group:
            first = group.exceptions[0]
            logger.warning(
                "Attached-clients fetch failed (%d error(s)): %r",
                len(group.exceptions),
                first,
            )
            raise first from None

        results = [list(task.result()) for task in tasks]
        logger.debug(
            "Fetched attached clients: %s",
            {name: len(items) for (name, _), items in zip(calls, results)},
        )
        return results
