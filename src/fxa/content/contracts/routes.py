# fxa/content/contracts/routes.py
"""
Response schemas for the HTTP API.
"""
from __future__ import annotations

from pydantic import BaseModel

from fxa.content.contracts.clients import ClientRecord, Device


class AttachedClientSchema(BaseModel):
    id: str
    client_type: str
    name: str | None = None
    is_current_device: bool = False
    last_access_time: int | None = None
    last_access_time_formatted: str | None = None
    type: str | None = None
    is_web_session: bool = False
    scope: list[str] | None = None

    @classmethod
    def from_record(cls, record: ClientRecord) -> AttachedClientSchema:
        if isinstance(record, Device):
            return cls(
                id=record.id,
                client_type=record.client_type.value,
                name=record.name,
                is_current_device=record.is_current_device,
                last_access_time=record.last_access_time,
                last_access_time_formatted=record.last_access_time_formatted,
                type=record.type,
                is_web_session=record.is_web_session,
            )
        return cls(
            id=record.id,
            client_type=record.client_type.value,
            name=record.name,
            scope=list(record.scope),
        )


class CspResponseSchema(BaseModel):
    success: bool = True
