# fxa/content/core/sources/__init__.py
"""Client sources registry and loading infrastructure."""

from fxa.content.core.sources.base import ClientSource
from fxa.content.core.sources.config import SourceSpec, read_source_specs
from fxa.content.core.sources.registry import SourcesRegistry
from fxa.content.core.sources.loader import load_and_register_sources

__all__ = [
    "ClientSource",
    "SourceSpec",
    "SourcesRegistry",
    "load_and_register_sources",
    "read_source_specs",
]
