# fxa/content/core/sources/config.py
"""
Source definitions read from ``sources.yaml``.

Expected YAML::

    sources:
      account_api:
        class: fxa.content.core.sources.account_api:AccountApiClient
        config:
          base_url: "${ACCOUNT_API_URL:-http://127.0.0.1:9000/v1}"
          timeout: 10.0

String values under ``config`` may reference environment variables as
``${VAR}`` (required) or ``${VAR:-default}``. When several files define
the same source, the file that sorts last wins.
"""
from __future__ import annotations

import logging
import os
import re
from glob import glob
from pathlib import Path
from typing import Any, Iterable

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

_ENV_REF = re.compile(r"\$\{(?P<name>[^}:]+)(?::-(?P<default>[^}]*))?\}")


class SourceSpec(BaseModel):
    """One entry under ``sources:``."""

    model_config = ConfigDict(extra="forbid")

    class_path: str = Field(alias="class", pattern=r"^[\w.]+:\w+$")
    config: dict[str, Any] = Field(default_factory=dict)


class SourcesFile(BaseModel):
    model_config = ConfigDict(extra="ignore")

    sources: dict[str, SourceSpec] = Field(default_factory=dict)


def expand_env(value: Any) -> Any:
    """Resolve ``${VAR}`` / ``${VAR:-default}`` in every string of ``value``."""
    if isinstance(value, dict):
        return {key: expand_env(item) for key, item in value.items()}
    if isinstance(value, list):
        return [expand_env(item) for item in value]
    if not isinstance(value, str):
        return value

    def lookup(match: re.Match) -> str:
        name, default = match.group("name"), match.group("default")
        resolved = os.environ.get(name, default)
        if resolved is None:
            raise ValueError(f"Environment variable '{name}' is not set and has no default")
        return resolved

    return _ENV_REF.sub(lookup, value)


def _matching_files(patterns: Iterable[str]) -> list[Path]:
    found = {Path(match).resolve() for pattern in patterns for match in glob(pattern)}
    return sorted(found)


def read_source_specs(patterns: Iterable[str]) -> dict[str, SourceSpec]:
    """Read and validate every source definition matched by ``patterns``.

    Raises:
        ValueError: A file is malformed, a spec is invalid, or a required
            environment variable is missing.
    """
    patterns = list(patterns)
    files = _matching_files(patterns)
    if not files:
        logger.warning("No sources config matches %s", patterns)
        return {}

    specs: dict[str, SourceSpec] = {}
    for path in files:
        logger.info("Reading sources config %s", path)
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh) or {}

        try:
            parsed = SourcesFile.model_validate(raw)
        except ValidationError as exc:
            raise ValueError(f"Invalid sources config '{path}': {exc}") from exc

        for name, spec in parsed.sources.items():
            try:
                config = expand_env(spec.config)
            except ValueError as exc:
                raise ValueError(f"Source '{name}' in '{path}': {exc}") from exc
            specs[name] = spec.model_copy(update={"config": config})

    return specs
