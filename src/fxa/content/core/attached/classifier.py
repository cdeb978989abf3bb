# fxa/content/core/attached/classifier.py
"""
Maps raw attribute bags to attached-client records.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

from fxa.content.contracts.clients import ClientRecord, ClientType, Device, OAuthApp

logger = logging.getLogger(__name__)

_DEVICE_KEYS = {
    "id",
    "name",
    "clientType",
    "isCurrentDevice",
    "lastAccessTime",
    "lastAccessTimeFormatted",
    "type",
    "isWebSession",
    "userAgent",
    "os",
}
_OAUTH_APP_KEYS = {"id", "name", "clientType", "scope"}


def _extra(attrs: Mapping[str, Any], known: set[str]) -> dict[str, Any]:
    return {k: v for k, v in attrs.items() if k not in known}


def _scope(value: Any) -> tuple[str, ...]:
    if not value:
        return ()
    if isinstance(value, str):
        return tuple(value.split())
    return tuple(value)


def _device(attrs: Mapping[str, Any]) -> Device:
    return Device(
        id=str(attrs["id"]),
        name=attrs.get("name"),
        is_current_device=bool(attrs.get("isCurrentDevice", False)),
        last_access_time=attrs.get("lastAccessTime"),
        last_access_time_formatted=attrs.get("lastAccessTimeFormatted"),
        type=attrs.get("type"),
        is_web_session=bool(attrs.get("isWebSession", False)),
        user_agent=attrs.get("userAgent"),
        os=attrs.get("os"),
        extra=_extra(attrs, _DEVICE_KEYS),
    )


def _oauth_app(attrs: Mapping[str, Any]) -> OAuthApp:
    return OAuthApp(
        id=str(attrs["id"]),
        name=attrs.get("name"),
        scope=_scope(attrs.get("scope")),
        extra=_extra(attrs, _OAUTH_APP_KEYS),
    )


def classify(attrs: Mapping[str, Any]) -> ClientRecord | None:
    """Build the record variant named by ``attrs["clientType"]``.

    Returns ``None`` for any other discriminator, or when the bag has no
    ``id``; such items are dropped from the roster.
    """
    if attrs.get("id") is None:
        logger.debug("Dropping attached client without id: %r", attrs)
        return None

    client_type = attrs.get("clientType")
    if client_type == ClientType.DEVICE.value:
        return _device(attrs)
    if client_type == ClientType.OAUTH_APP.value:
        return _oauth_app(attrs)

    logger.debug(
        "Dropping attached client %r with unknown clientType %r",
        attrs.get("id"),
        client_type,
    )
    return None
