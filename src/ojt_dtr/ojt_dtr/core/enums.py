from __future__ import annotations

from enum import Enum


class HalfDaySession(str, Enum):
    """Buổi của ngày nghỉ nửa ngày."""

    AM = "AM"
    PM = "PM"


class DayType(str, Enum):
    """Phân loại một ngày trong nhật ký (dùng cho màu hiển thị và nhãn trạng thái)."""

    ABSENT = "ABSENT"
    HALF_AM = "HALF_AM"
    HALF_PM = "HALF_PM"
    OVERTIME = "OVERTIME"
    UNDER = "UNDER"
    FULL = "FULL"
