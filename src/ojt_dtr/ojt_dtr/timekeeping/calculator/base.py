from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ...students.model import StudentConfig
from ...timelogs.model import DayRecord


class HoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for rendered hours)."""

    @abstractmethod
    def compute_hours(self, record: DayRecord, config: StudentConfig) -> Decimal:
        raise NotImplementedError
