from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import RequestStatus


@dataclass(frozen=True)
class Member:
    """A pending new-hire request from the public signup form."""

    id: str
    name: str
    number: str
    status: RequestStatus = RequestStatus.PENDING
    created_at: Optional[datetime] = None
