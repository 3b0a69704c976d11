from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from .base import HoursCalculator
from ...common.datetime_utils import minutes_of_day, parse_time_of_day
from ...core.constants import HALF_DAY_HOURS
from ...students.model import StudentConfig
from ...timelogs.model import DayRecord

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")
ZERO_HOURS = Decimal("0.00")


class StandardHoursCalculator(HoursCalculator):
    """Standard rule: (out - in) - overlap with the lunch window, not below 0.

    Absent days render 0 and half days a flat 4 hours, whatever the clock says.
    """

    def compute_hours(self, record: DayRecord, config: StudentConfig) -> Decimal:
        if record.is_absent:
            return ZERO_HOURS
        if record.is_half_day:
            return HALF_DAY_HOURS

        time_in = parse_time_of_day(record.time_in)
        time_out = parse_time_of_day(record.time_out)
        if time_in is None or time_out is None:
            logger.debug("No usable clock times for %s, rendering 0 hours", record.log_date)
            return ZERO_HOURS

        t_in, t_out = minutes_of_day(time_in), minutes_of_day(time_out)
        if t_out <= t_in:
            return ZERO_HOURS
        total = t_out - t_in

        lunch_start = parse_time_of_day(record.lunch_start) or parse_time_of_day(config.lunch_start)
        lunch_end = parse_time_of_day(record.lunch_end) or parse_time_of_day(config.lunch_end)
        if lunch_start is not None and lunch_end is not None:
            overlap_start = max(minutes_of_day(lunch_start), t_in)
            overlap_end = min(minutes_of_day(lunch_end), t_out)
            if overlap_end > overlap_start:
                total -= overlap_end - overlap_start

        return (Decimal(max(0, total)) / Decimal(60)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
