# fxa/content/core/config.py
"""
Central configuration for the content service.

Environment variables override defaults (nested settings use ``__`` as
delimiter, e.g. ``CSP__OP=server.csp``). Client sources are declared in
YAML files matched by ``sources_config_paths``.
"""
from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CspSettings(BaseModel):
    """CSP violation report endpoints."""

    enabled: bool = True
    path: str = "/_/csp-violation"
    op: str = "server.csp"
    report_only_enabled: bool = True
    report_only_path: str = "/_/csp-violation-report-only"
    report_only_op: str = "server.csp.report-only"


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    app_env: str = "dev"
    log_level: str = "INFO"

    # Config file paths (glob patterns)
    sources_config_paths: list[str] = Field(
        default_factory=lambda: ["config/sources.yaml"]
    )

    # Source used for attached-clients refreshes
    account_source: str = Field(
        default="account_api",
        description="Name of the registered client source to fetch from",
    )

    # Fallback account API source, registered when no YAML declares one
    account_api_url: str = Field(
        default="http://127.0.0.1:9000/v1",
        description="Account API base URL",
    )
    account_api_timeout: float = Field(default=10.0, description="HTTP timeout (s)")

    csp: CspSettings = Field(default_factory=CspSettings)


settings = Settings()
