# fxa/content/core/attached/registry.py
"""
Attached clients registry – the ordered roster of one signed-in session.

The registry holds at most one record per id and is kept sorted by
:func:`fxa.content.core.attached.ordering.compare` after every mutation.
Listeners registered with :meth:`AttachedClientRegistry.subscribe` are
told about resets, additions, changes, removals and re-sorts so a UI
layer can re-render.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Iterable, Iterator, Literal, Mapping, Sequence

from fxa.content.contracts.clients import ClientRecord
from fxa.content.core.attached.classifier import classify
from fxa.content.core.attached.ordering import sort_clients

logger = logging.getLogger(__name__)

EventKind = Literal["reset", "add", "change", "remove", "sort"]


@dataclass(frozen=True)
class RegistryEvent:
    """Notification emitted by the registry.

    Attributes:
        kind: What happened.
        ids: Ids of the records concerned (empty for ``reset``/``sort``).
    """

    kind: EventKind
    ids: tuple[str, ...] = ()


Listener = Callable[[RegistryEvent], None]


class AttachedClientRegistry:
    """Merge-by-id, always-sorted collection of attached clients."""

    def __init__(self) -> None:
        self._records: dict[str, ClientRecord] = {}
        self._ordered: list[ClientRecord] = []
        self._listeners: list[Listener] = []

    # -- Listeners -------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, kind: EventKind, ids: Iterable[str] = ()) -> None:
        event = RegistryEvent(kind=kind, ids=tuple(ids))
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Registry listener failed on '%s' event", kind)

    # -- Mutations -------------------------------------------------------------

    def refresh_from(self, results: Sequence[Sequence[Mapping[str, Any]]]) -> None:
        """Replace the whole roster with the records in ``results``.

        ``results`` holds one list of raw attribute bags per source, in
        fetch order. Within this pass a later bag with an already seen id
        overwrites the earlier record. The new snapshot is built aside and
        swapped in at once.
        """
        staged: dict[str, ClientRecord] = {}
        batches: list[list[str]] = []

        for items in results:
            batch: list[str] = []
            for attrs in items:
                record = classify(attrs)
                if record is None:
                    continue
                staged[record.id] = record
                batch.append(record.id)
            batches.append(batch)

        self._records = staged
        self._resort()

        self._emit("reset")
        for batch in batches:
            self._emit("add", batch)
        self._emit("sort")

        logger.debug(
            "Registry refreshed: %d record(s) from %d source(s)",
            len(self._records),
            len(batches),
        )

    def reset(self) -> None:
        """Drop every record."""
        self._records = {}
        self._ordered = []
        self._emit("reset")

    def add(self, records: Iterable[ClientRecord], *, merge: bool = True) -> list[str]:
        """Insert ``records``; existing ids are overwritten when ``merge``
        is true and left untouched otherwise. Returns the ids written."""
        written: list[str] = []
        for record in records:
            if record.id in self._records and not merge:
                continue
            self._records[record.id] = record
            written.append(record.id)

        if written:
            self._resort()
            self._emit("add", written)
            self._emit("sort")
        return written

    def update(self, client_id: str, **changes: Any) -> ClientRecord:
        """Change attributes of one record and restore the order.

        Raises:
            KeyError: No record with ``client_id``.
            ValueError: ``changes`` includes ``id``.
            TypeError: A change names a field the record variant lacks.
        """
        if "id" in changes:
            raise ValueError("Attached client ids cannot be changed")
        current = self.get(client_id)
        updated = replace(current, **changes)
        self._records[client_id] = updated
        self._resort()
        self._emit("change", [client_id])
        self._emit("sort")
        return updated

    def remove(self, client_id: str) -> ClientRecord:
        """Remove one record. Raises ``KeyError`` if it is unknown."""
        record = self.get(client_id)
        del self._records[client_id]
        self._ordered = [r for r in self._ordered if r.id != client_id]
        self._emit("remove", [client_id])
        return record

    def _resort(self) -> None:
        self._ordered = sort_clients(self._records.values())

        current = [r.id for r in self._ordered if r.is_current_device]
        if len(current) > 1:
            logger.warning(
                "Attached clients hold %d current devices: %s", len(current), current
            )

    # -- Reads -----------------------------------------------------------------

    def get(self, client_id: str) -> ClientRecord:
        try:
            return self._records[client_id]
        except KeyError:
            raise KeyError(f"Attached client '{client_id}' not found")

    def ids(self) -> list[str]:
        return [r.id for r in self._ordered]

    def to_list(self) -> list[ClientRecord]:
        """Ordered snapshot; mutating it leaves the registry untouched."""
        return list(self._ordered)

    def __iter__(self) -> Iterator[ClientRecord]:
        return iter(list(self._ordered))

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, client_id: object) -> bool:
        return client_id in self._records
