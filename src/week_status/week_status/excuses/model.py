from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import DateRepr
from ..core.enums import ExcuseStatus


@dataclass(frozen=True)
class ExcuseRequest:
    request_id: str
    event_id: str
    status: ExcuseStatus
    occurred_on: Optional[DateRepr] = None
    event_date: Optional[DateRepr] = None
