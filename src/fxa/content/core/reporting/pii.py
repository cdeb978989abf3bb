# fxa/content/core/reporting/pii.py
"""
Removal of personally identifying query parameters from reported URLs.
"""
from __future__ import annotations

from typing import Any
from urllib.parse import unquote_plus, urlsplit, urlunsplit

PII_QUERY_PARAMS = frozenset({"email", "uid"})


def _param_name(pair: str) -> str:
    return unquote_plus(pair.partition("=")[0])


def strip_pii_from_url(value: Any) -> str:
    """Return ``value`` without ``email``/``uid`` query parameters.

    Remaining parameters are kept byte for byte, in their original order.
    URLs without such parameters are returned untouched. Anything that is
    not a non-empty string, or does not parse as a URL, becomes ``""``.
    """
    if not value or not isinstance(value, str):
        return ""

    try:
        parts = urlsplit(value)
    except ValueError:
        return ""

    pairs = parts.query.split("&") if parts.query else []
    kept = [pair for pair in pairs if _param_name(pair) not in PII_QUERY_PARAMS]
    if len(kept) == len(pairs):
        return value

    return urlunsplit(parts._replace(query="&".join(kept)))
