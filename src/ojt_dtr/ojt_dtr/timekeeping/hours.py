from __future__ import annotations

from decimal import Decimal

from ..students.model import StudentConfig
from ..timelogs.model import DayRecord
from .calculator.standard_calculator import StandardHoursCalculator

_standard = StandardHoursCalculator()


def compute_hours(record: DayRecord, config: StudentConfig) -> Decimal:
    """Rendered hours for one day under the standard rule."""
    return _standard.compute_hours(record, config)
