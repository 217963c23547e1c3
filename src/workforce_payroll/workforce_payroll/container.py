from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .checkin.service import CheckInService
from .clients.mysql_client_repository import MySQLClientRepository
from .companies.mysql_company_repository import MySQLCompanyRepository
from .clients.service import TimesheetSettingsResolver
from .compensation.mysql_compensation_repository import MySQLCompensationConfigRepository
from .database.connection import DBConfig, DatabaseConnection
from .leave.mysql_leave_repository import MySQLHolidayRepository, MySQLLeaveRepository
from .leave.service import LeaveCalendar
from .loans.mysql_loan_repository import MySQLLoanRepository
from .loans.service import LoanService
from .payroll.calculator.factory import GrossPayCalculatorFactory
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.mysql_unit_record_repository import MySQLUnitRecordRepository
from .payroll.service import PayrollService
from .timesheets.mysql_timesheet_repository import MySQLTimesheetRepository
from .timesheets.service import TimesheetService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .workers.mysql_worker_repository import MySQLWorkerRepository


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository

    checkin_service: CheckInService
    timesheet_service: TimesheetService
    payroll_service: PayrollService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    users_repo = MySQLUserRepository(conn)
    workers_repo = MySQLWorkerRepository(conn)
    clients_repo = MySQLClientRepository(conn)
    companies_repo = MySQLCompanyRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    timesheets_repo = MySQLTimesheetRepository(conn)
    compensation_repo = MySQLCompensationConfigRepository(conn)
    loans_repo = MySQLLoanRepository(conn)
    leave_repo = MySQLLeaveRepository(conn)
    holidays_repo = MySQLHolidayRepository(conn)
    unit_records_repo = MySQLUnitRecordRepository(conn)
    payroll_repo = MySQLPayrollRepository(conn)

    checkin_service = CheckInService(workers_repo, attendance_repo, timesheets_repo)
    timesheet_service = TimesheetService(
        timesheets_repo,
        workers_repo,
        TimesheetSettingsResolver(clients_repo),
    )
    payroll_service = PayrollService(
        workers_repo,
        compensation_repo,
        LoanService(loans_repo),
        payroll_repo,
        calculators=GrossPayCalculatorFactory(
            leave_calendar=LeaveCalendar(leave_repo, holidays_repo),
            timesheets=timesheets_repo,
            unit_records=unit_records_repo,
            companies=companies_repo,
        ),
    )

    return Container(
        users_repo=users_repo,
        checkin_service=checkin_service,
        timesheet_service=timesheet_service,
        payroll_service=payroll_service,
    )
