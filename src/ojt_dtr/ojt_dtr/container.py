from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DBConfig, DatabaseConnection
from .progress.service import ProgressReportService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import SettingsService
from .timekeeping.calculator.standard_calculator import StandardHoursCalculator
from .timelogs.mysql_day_record_repository import MySQLDayRecordRepository
from .timelogs.repository import DayRecordRepository
from .timelogs.service import TimeLogService


@dataclass(frozen=True)
class Container:
    students_repo: StudentRepository
    records_repo: DayRecordRepository

    timelog_service: TimeLogService
    settings_service: SettingsService
    progress_report_service: ProgressReportService


def build_services(*, students_repo: StudentRepository, records_repo: DayRecordRepository) -> Container:
    """Wire services over any repository implementation (MySQL or in-memory)."""
    return Container(
        students_repo=students_repo,
        records_repo=records_repo,
        timelog_service=TimeLogService(records_repo, students_repo, calculator=StandardHoursCalculator()),
        settings_service=SettingsService(students_repo),
        progress_report_service=ProgressReportService(records_repo, students_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(
        students_repo=MySQLStudentRepository(conn),
        records_repo=MySQLDayRecordRepository(conn),
    )
