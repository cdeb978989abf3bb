# fxa/content/contracts/account.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Account:
    """Signed-in account handle passed to the client sources.

    Attributes:
        session_token: Session token used as bearer credential against
            the account API. Also identifies the signed-in session context.
        uid: Account uid, when known.
    """

    session_token: str
    uid: str | None = None
