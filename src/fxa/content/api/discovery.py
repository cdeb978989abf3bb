# fxa/content/api/discovery.py
"""
Root-level health endpoint.
"""
from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
async def health(request: Request) -> dict:
    infra = getattr(request.app.state, "infra", None)
    sources = sorted(infra.sources_registry) if infra else []
    return {
        "status": "healthy",
        "sources": sources,
        "csp_endpoints": sorted(infra.csp_reporters) if infra else [],
    }
