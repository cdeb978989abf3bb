# fxa/content/api/dependencies.py
"""
FastAPI dependencies for request-scoped services.

Provides:
- ``get_infra``: The application ``Infrastructure``.
- ``get_account``: ``Account`` built from the ``Authorization`` header.
"""
from __future__ import annotations

import logging

from fastapi import Header, HTTPException, Request

from fxa.content.contracts.account import Account
from fxa.content.contracts.infrastructure import Infrastructure

logger = logging.getLogger(__name__)


def get_infra(request: Request) -> Infrastructure:
    infra = getattr(request.app.state, "infra", None)
    if infra is None:
        raise RuntimeError("Application infrastructure not configured")
    return infra


async def get_account(
    authorization: str | None = Header(default=None),
) -> Account:
    """Require a bearer session token — returns 401 if missing."""
    if not authorization:
        raise HTTPException(status_code=401, detail="Authorization header required")

    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        logger.warning("Rejected malformed Authorization header")
        raise HTTPException(status_code=401, detail="Bearer session token required")

    return Account(session_token=token)
