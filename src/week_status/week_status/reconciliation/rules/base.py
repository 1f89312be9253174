from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ...core.enums import DayStatus
from ..index import DayFacts


@dataclass(frozen=True)
class DayContext:
    day: date
    today: Optional[date]
    facts: DayFacts

    @property
    def is_future(self) -> bool:
        return self.today is not None and self.day > self.today

    @property
    def is_today(self) -> bool:
        return self.today is not None and self.day == self.today


class DayRule(ABC):
    """Strategy Pattern: one precedence rule that can claim a day."""

    status: DayStatus

    @abstractmethod
    def applies(self, ctx: DayContext) -> bool:
        raise NotImplementedError
