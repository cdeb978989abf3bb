"""Public contracts for the content service."""
from fxa.content.contracts.account import Account
from fxa.content.contracts.clients import (
    ClientRecord,
    ClientType,
    ClientTypes,
    Device,
    OAuthApp,
)
from fxa.content.contracts.csp import CspReport, CspReportBody
from fxa.content.contracts.infrastructure import Infrastructure

__all__ = [
    "Account",
    "ClientRecord", "ClientType", "ClientTypes", "Device", "OAuthApp",
    "CspReport", "CspReportBody",
    "Infrastructure",
]
