# fxa/content/core/attached/ordering.py
"""
Total order of the attached-clients roster.

1. The current device is first.
2. Clients with a last access time follow, most recent first.
3. The rest (and access-time ties) sort by trimmed, lower-cased name.
"""
from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable

from fxa.content.contracts.clients import ClientRecord


def _name_key(record: ClientRecord) -> str:
    return (record.name or "").strip().lower()


def compare(a: ClientRecord, b: ClientRecord) -> int:
    """Return a negative number if ``a`` sorts before ``b``, positive if
    after, 0 if they are order-equivalent."""
    if a.is_current_device:
        return -1
    if b.is_current_device:
        return 1

    # A zero or missing access time counts as "no access time".
    a_time = a.last_access_time
    b_time = b.last_access_time
    if a_time and b_time and a_time != b_time:
        return -1 if a_time > b_time else 1
    if a_time and not b_time:
        return -1
    if not a_time and b_time:
        return 1

    a_name = _name_key(a)
    b_name = _name_key(b)
    if a_name < b_name:
        return -1
    if a_name > b_name:
        return 1
    return 0


sort_key = cmp_to_key(compare)


def sort_clients(records: Iterable[ClientRecord]) -> list[ClientRecord]:
    """Stable sort of ``records`` by :func:`compare`."""
    return sorted(records, key=sort_key)
