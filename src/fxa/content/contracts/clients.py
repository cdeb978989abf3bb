# fxa/content/contracts/clients.py
"""
Attached client contracts.

An attached client is either a device registered on the account or an
OAuth application the user has authorized. Both variants share an ``id``
and an optional display ``name``; only devices carry the attributes the
roster ordering cares about (``is_current_device``, ``last_access_time``).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class ClientType(str, Enum):
    """Wire values of the ``clientType`` discriminator."""

    DEVICE = "device"
    OAUTH_APP = "oAuthApp"


@dataclass(frozen=True)
class Device:
    """A device (browser, mobile app, web session) attached to the account.

    Attributes:
        id: Device identifier, unique within the account.
        name: Display name. May be ``None`` or whitespace only.
        is_current_device: True for the device making the request.
        last_access_time: Milliseconds since the epoch, if known.
        last_access_time_formatted: Human readable access time from the
            account server.
        type: Device type (``desktop``, ``mobile``, ...).
        is_web_session: True for plain web sessions without a device record.
        user_agent: User agent string reported for the session.
        os: Operating system reported for the session.
        extra: Any other attribute the source returned.
    """

    id: str
    name: str | None = None
    is_current_device: bool = False
    last_access_time: int | None = None
    last_access_time_formatted: str | None = None
    type: str | None = None
    is_web_session: bool = False
    user_agent: str | None = None
    os: str | None = None
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def client_type(self) -> ClientType:
        return ClientType.DEVICE


@dataclass(frozen=True)
class OAuthApp:
    """An OAuth relier the user has granted access to the account."""

    id: str
    name: str | None = None
    scope: tuple[str, ...] = ()
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def client_type(self) -> ClientType:
        return ClientType.OAUTH_APP

    # OAuth apps never take part in the current-device or access-time rules.
    @property
    def is_current_device(self) -> bool:
        return False

    @property
    def last_access_time(self) -> int | None:
        return None


ClientRecord = Union[Device, OAuthApp]


@dataclass(frozen=True)
class ClientTypes:
    """Which sources a refresh should fetch from."""

    devices: bool = False
    oauth_apps: bool = False

    @classmethod
    def all(cls) -> ClientTypes:
        return cls(devices=True, oauth_apps=True)
