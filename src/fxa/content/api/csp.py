# fxa/content/api/csp.py
"""
CSP violation report endpoints.

Browsers post reports as ``application/csp-report``, so the body is read
and validated by hand rather than through FastAPI's JSON body binding.
"""
from __future__ import annotations

import json
import logging

from fastapi import APIRouter, BackgroundTasks, HTTPException, Request
from pydantic import ValidationError

from fxa.content.contracts.csp import CspReportBody
from fxa.content.contracts.routes import CspResponseSchema
from fxa.content.core.reporting.csp import CspReporter

logger = logging.getLogger(__name__)


def _validation_detail(message: str, errors: list[str]) -> dict:
    return {"error": "validation_error", "message": message, "errors": errors}


async def _read_report(request: Request) -> CspReportBody:
    raw = await request.body()
    try:
        data = json.loads(raw or b"null")
    except ValueError as exc:
        raise HTTPException(400, _validation_detail("Invalid JSON body", [str(exc)]))

    try:
        return CspReportBody.model_validate(data)
    except ValidationError as exc:
        errors = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        ]
        logger.debug("Rejected CSP report: %s", errors)
        raise HTTPException(400, _validation_detail("Invalid CSP report", errors))


def build_csp_router(*, path: str, reporter: CspReporter) -> APIRouter:
    """Router exposing ``POST {path}`` for ``reporter``."""
    router = APIRouter()

    @router.post(
        path,
        response_model=CspResponseSchema,
        operation_id=f"post_csp_{reporter.op.replace('.', '_').replace('-', '_')}",
    )
    async def post_csp(request: Request, background: BackgroundTasks) -> CspResponseSchema:
        body = await _read_report(request)
        background.add_task(
            reporter.report,
            body.csp_report,
            user_agent=request.headers.get("user-agent"),
        )
        return CspResponseSchema(success=True)

    return router
