# fxa/content/contracts/infrastructure.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fxa.content.core.attached.service import AttachedClientsService
    from fxa.content.core.reporting.csp import CspReporter
    from fxa.content.core.sources.registry import SourcesRegistry


@dataclass
class Infrastructure:

    sources_registry: SourcesRegistry
    attached_clients: AttachedClientsService
    csp_reporters: dict[str, CspReporter] = field(default_factory=dict)
