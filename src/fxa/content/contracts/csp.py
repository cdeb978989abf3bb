# fxa/content/contracts/csp.py
"""
Content Security Policy violation report contracts.

Field names follow the ``csp-report`` body browsers send (CSP levels 2
and 3). Only the fields listed here are read; anything else in the
report is ignored.
"""
from __future__ import annotations

from typing import Annotated
from urllib.parse import urlsplit

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def _check_url(value: str) -> str:
    try:
        parts = urlsplit(value)
    except ValueError as exc:
        raise ValueError(f"invalid URL: {exc}") from exc
    if not parts.scheme:
        raise ValueError("must be an absolute URL")
    return value


UrlStr = Annotated[str, Field(min_length=1), AfterValidator(_check_url)]
NonEmptyStr = Annotated[str, Field(min_length=1)]


class CspReport(BaseModel):
    """The ``csp-report`` object of a violation report."""

    model_config = ConfigDict(extra="ignore")

    # CSP 2, 3 required
    blocked_uri: UrlStr = Field(alias="blocked-uri")
    # CSP 2, 3 optional
    column_number: int | None = Field(default=None, ge=0, alias="column-number")
    # CSP 3 required, but not always sent
    disposition: NonEmptyStr | None = None
    # CSP 2, 3 required
    document_uri: UrlStr = Field(alias="document-uri")
    # CSP 2 required, but not always sent
    effective_directive: NonEmptyStr | None = Field(
        default=None, alias="effective-directive"
    )
    line_number: int | None = Field(default=None, alias="line-number")
    original_policy: NonEmptyStr = Field(alias="original-policy")
    # required, can be empty
    referrer: str
    # Not in the CSP spec but sent by Firefox, can be empty
    script_sample: str | None = Field(default=None, alias="script-sample")
    source_file: str | None = Field(default=None, alias="source-file")
    status_code: int | None = Field(default=None, ge=0, alias="status-code")
    violated_directive: NonEmptyStr = Field(alias="violated-directive")


class CspReportBody(BaseModel):
    """POST body of the CSP report endpoints."""

    model_config = ConfigDict(extra="ignore")

    csp_report: CspReport = Field(alias="csp-report")
