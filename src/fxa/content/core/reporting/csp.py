# fxa/content/core/reporting/csp.py
"""
CSP violation reporter.

Turns a validated ``csp-report`` into one flat log entry and hands it to
a writer. The default writer emits the entry as a JSON line on the
``fxa.content.csp`` logger.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Callable

from fxa.content.contracts.csp import CspReport
from fxa.content.core.reporting.pii import strip_pii_from_url

logger = logging.getLogger(__name__)

csp_logger = logging.getLogger("fxa.content.csp")

Writer = Callable[[dict[str, Any]], None]
Clock = Callable[[], datetime]


def _log_entry(entry: dict[str, Any]) -> None:
    csp_logger.info(json.dumps(entry, sort_keys=True))


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def hour_timestamp(now: datetime) -> str:
    """ISO-8601 UTC timestamp of ``now`` truncated to the hour."""
    hour = now.astimezone(timezone.utc).replace(minute=0, second=0, microsecond=0)
    return hour.strftime("%Y-%m-%dT%H:%M:%S.000Z")


class CspReporter:
    """Builds and writes CSP violation log entries.

    Args:
        op: Value of the entry's ``op`` field.
        write: Sink for finished entries.
        clock: Source of the current time.
    """

    def __init__(
        self,
        *,
        op: str = "server.csp",
        write: Writer | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.op = op
        self._write = write or _log_entry
        self._clock = clock or _utc_now

    def build_entry(self, report: CspReport, *, user_agent: str | None = None) -> dict[str, Any]:
        entry: dict[str, Any] = {
            "agent": user_agent,
            "blocked": report.blocked_uri,
            "column": report.column_number,
            "line": report.line_number,
            "op": self.op,
            "referrer": strip_pii_from_url(report.referrer),
            "sample": report.script_sample,
            "source": strip_pii_from_url(report.source_file),
            "time": hour_timestamp(self._clock()),
            "violated": report.violated_directive,
        }
        # Absent optional fields are left out of the entry.
        return {k: v for k, v in entry.items() if v is not None}

    def report(self, report: CspReport, *, user_agent: str | None = None) -> dict[str, Any] | None:
        """Write one entry for ``report``.

        Writer failures are logged and swallowed; the caller has already
        acknowledged the report. Returns the entry, or ``None`` when the
        write failed.
        """
        entry = self.build_entry(report, user_agent=user_agent)
        try:
            self._write(entry)
        except Exception:
            logger.exception("Failed to write CSP report entry (op=%s)", self.op)
            return None
        return entry
