# fxa/content/core/attached/__init__.py
"""Attached clients: classification, ordering and the session roster."""

from fxa.content.core.attached.classifier import classify
from fxa.content.core.attached.coordinator import ClientFetchCoordinator
from fxa.content.core.attached.ordering import compare, sort_clients
from fxa.content.core.attached.registry import AttachedClientRegistry, RegistryEvent
from fxa.content.core.attached.service import AttachedClientsService

__all__ = [
    "classify",
    "compare",
    "sort_clients",
    "ClientFetchCoordinator",
    "AttachedClientRegistry",
    "RegistryEvent",
    "AttachedClientsService",
]
