# fxa/content/core/sources/loader.py
"""
Source loader – instantiates the sources declared in ``sources.yaml``.
"""
from __future__ import annotations

import importlib
import logging
from typing import Any, Iterable

from fxa.content.core.sources.config import SourceSpec, read_source_specs
from fxa.content.core.sources.registry import SourcesRegistry

logger = logging.getLogger(__name__)


def _source_class(spec: SourceSpec) -> Any:
    module_name, _, attr = spec.class_path.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ImportError(f"Cannot import source module '{module_name}'") from exc

    cls = getattr(module, attr, None)
    if not callable(cls):
        raise AttributeError(f"'{spec.class_path}' is not a source class")
    return cls


def load_and_register_sources(
    *,
    patterns: Iterable[str],
    registry: SourcesRegistry,
) -> None:
    """Build every configured source and add it to ``registry``.

    ``config`` entries are passed to the source class as keyword arguments.
    """
    for name, spec in read_source_specs(patterns).items():
        cls = _source_class(spec)
        registry.register(name, cls(**spec.config))

    if registry:
        logger.info("Sources available: %s", sorted(registry))
