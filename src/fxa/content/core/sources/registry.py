# fxa/content/core/sources/registry.py
"""
Sources registry – the client sources available to attached-clients refreshes.

Read access goes through the ``Mapping`` interface; ``resolve`` is the
lookup used at wiring time and fails loudly with the known names.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping

from fxa.content.core.errors import SourceNotFoundError
from fxa.content.core.sources.base import ClientSource

logger = logging.getLogger(__name__)


class SourcesRegistry(Mapping[str, ClientSource]):
    """Name → ``ClientSource``. Names are registered once."""

    def __init__(self) -> None:
        self._by_name: dict[str, ClientSource] = {}

    def register(self, name: str, source: object) -> None:
        if not isinstance(source, ClientSource):
            raise TypeError(
                f"Source '{name}' ({type(source).__name__}) must provide "
                "fetch_devices() and fetch_oauth_apps()"
            )
        if name in self._by_name:
            raise ValueError(f"Source '{name}' already registered")

        self._by_name[name] = source
        logger.info("Source '%s' ready (%s)", name, type(source).__name__)

    def resolve(self, name: str) -> ClientSource:
        source = self._by_name.get(name)
        if source is None:
            raise SourceNotFoundError(
                f"Source '{name}' not found. Known sources: {sorted(self._by_name)}"
            )
        return source

    def __getitem__(self, name: str) -> ClientSource:
        return self._by_name[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_name)

    def __len__(self) -> int:
        return len(self._by_name)
