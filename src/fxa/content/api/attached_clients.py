# fxa/content/api/attached_clients.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from fxa.content.api.dependencies import get_account, get_infra
from fxa.content.contracts.account import Account
from fxa.content.contracts.clients import ClientTypes
from fxa.content.contracts.infrastructure import Infrastructure
from fxa.content.contracts.routes import AttachedClientSchema
from fxa.content.core.errors import SourceAPIError, SourceError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/account")


@router.get(
    "/attached-clients",
    response_model=list[AttachedClientSchema],
    operation_id="list_attached_clients",
)
async def list_attached_clients(
    devices: bool = Query(default=True),
    oauth_apps: bool = Query(default=True),
    account: Account = Depends(get_account),
    infra: Infrastructure = Depends(get_infra),
) -> list[AttachedClientSchema]:
    client_types = ClientTypes(devices=devices, oauth_apps=oauth_apps)
    try:
        registry = await infra.attached_clients.refresh(account, client_types)
    except SourceAPIError as e:
        if e.status_code == 401:
            raise HTTPException(401, "Invalid session token")
        logger.error(f"list_attached_clients failed: {e}")
        raise HTTPException(502, "Attached clients source failed")
    except SourceError as e:
        logger.error(f"list_attached_clients failed: {e}")
        raise HTTPException(502, "Attached clients source unavailable")

    return [AttachedClientSchema.from_record(r) for r in registry.to_list()]


@router.delete(
    "/attached-clients",
    status_code=204,
    operation_id="discard_attached_clients",
)
async def discard_attached_clients(
    account: Account = Depends(get_account),
    infra: Infrastructure = Depends(get_infra),
) -> None:
    infra.attached_clients.discard(account)
