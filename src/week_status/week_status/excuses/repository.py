from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import ExcuseRequest


class ExcuseSource(Protocol):
    def list_for_user(self, *, user_id: str, start: date, end: date) -> Sequence[ExcuseRequest]:
        raise NotImplementedError
