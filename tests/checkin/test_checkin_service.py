from datetime import date, datetime

import pytest

from inmemory import InMemoryAttendance, InMemoryTimesheets, InMemoryWorkers

from src.workforce_payroll.workforce_payroll.attendance.model import AttendanceRecord
from src.workforce_payroll.workforce_payroll.checkin.service import CheckInService
from src.workforce_payroll.workforce_payroll.core.enums import CheckInMethod, ClockAction, PaymentType, Role
from src.workforce_payroll.workforce_payroll.core.exceptions import (
    AuthorizationError,
    NotFoundError,
    StoreReadError,
    ValidationError,
)
from src.workforce_payroll.workforce_payroll.timesheets.model import DailyEntry, WeeklyTimesheet
from src.workforce_payroll.workforce_payroll.users.model import User
from src.workforce_payroll.workforce_payroll.workers.model import Worker

WED_8AM = datetime(2025, 1, 8, 8, 0)
WED_5PM = datetime(2025, 1, 8, 17, 0)


def _user(worker_id=1, role=Role.WORKER):
    return User(user_id=100 + (worker_id or 0), username="w", role=role, worker_id=worker_id)


def _setup(payment_type=PaymentType.HOURLY, company={"_id": "c1"}):
    workers = InMemoryWorkers({1: Worker(worker_id=1, company=company, payment_type=payment_type)})
    attendance = InMemoryAttendance()
    timesheets = InMemoryTimesheets()
    return CheckInService(workers, attendance, timesheets), attendance, timesheets


def test_monthly_worker_gets_attendance_record_only():
    service, attendance, timesheets = _setup(PaymentType.MONTHLY_SALARY)

    result = service.record_check_in(_user(), "clockIn", now=WED_8AM)

    assert result.success is True
    assert result.action == ClockAction.CLOCK_IN
    assert result.message == "Successfully clocked in"
    (record,) = attendance.records.values()
    assert record.work_date == date(2025, 1, 8)
    assert record.clock_in == WED_8AM
    assert record.company_id == "c1"
    assert record.check_in_method == CheckInMethod.MANUAL
    assert timesheets.timesheets == {}


@pytest.mark.parametrize("payment_type", [PaymentType.HOURLY, PaymentType.UNIT_BASED])
def test_hourly_and_unit_workers_get_timesheet_entry_only(payment_type):
    service, attendance, timesheets = _setup(payment_type)

    service.record_check_in(_user(), "clockIn", now=WED_8AM)

    assert attendance.records == {}
    ts = timesheets.get_for_worker_and_week(1, date(2025, 1, 6))
    assert ts is not None
    assert ts.entry_for(date(2025, 1, 8)).clock_in == WED_8AM


def test_sunday_check_in_belongs_to_week_starting_previous_monday():
    service, _, timesheets = _setup()

    service.record_check_in(_user(), "clockIn", now=datetime(2025, 1, 12, 9, 0))

    (ts,) = timesheets.timesheets.values()
    assert ts.week_start_date == date(2025, 1, 6)


def test_second_action_patches_existing_attendance():
    service, attendance, _ = _setup(PaymentType.MONTHLY_SALARY)

    service.record_check_in(_user(), "clockIn", now=WED_8AM)
    result = service.record_check_in(_user(), "clockOut", now=WED_5PM)

    assert result.message == "Successfully clocked out"
    (record,) = attendance.records.values()
    assert (record.clock_in, record.clock_out) == (WED_8AM, WED_5PM)


def test_qr_metadata_is_only_written_on_clock_in():
    service, attendance, _ = _setup(PaymentType.MONTHLY_SALARY)

    service.record_check_in(_user(), "clockIn", now=WED_8AM)
    service.record_check_in(_user(), "clockOut", qr_code="SITE-A", location={"lat": 3.1}, now=WED_5PM)
    (record,) = attendance.records.values()
    assert record.check_in_method == CheckInMethod.MANUAL
    assert record.qr_code_data is None

    service.record_check_in(_user(), "clockIn", qr_code="SITE-B", location={"lat": 3.2}, now=WED_8AM)
    (record,) = attendance.records.values()
    assert record.check_in_method == CheckInMethod.QR_CODE
    assert record.qr_code_data == "SITE-B"
    assert record.location == {"lat": 3.2}


def test_qr_clock_in_on_timesheet_entry():
    service, _, timesheets = _setup()

    service.record_check_in(_user(), "clockIn", qr_code="SITE-A", now=WED_8AM)
    service.record_check_in(_user(), "lunchOut", qr_code="SITE-X", now=datetime(2025, 1, 8, 12, 0))

    entry = timesheets.get_for_worker_and_week(1, date(2025, 1, 6)).entry_for(date(2025, 1, 8))
    assert entry.check_in_method == CheckInMethod.QR_CODE
    assert entry.qr_code_check_in.qr_code_data == "SITE-A"
    assert entry.lunch_out == datetime(2025, 1, 8, 12, 0)


def test_existing_timesheet_gets_new_day_appended_and_same_day_patched():
    service, _, timesheets = _setup()

    service.record_check_in(_user(), "clockIn", now=datetime(2025, 1, 6, 8, 0))
    service.record_check_in(_user(), "clockIn", now=WED_8AM)
    service.record_check_in(_user(), "clockOut", now=WED_5PM)

    (ts,) = timesheets.timesheets.values()
    assert [e.date for e in ts.daily_entries] == [date(2025, 1, 6), date(2025, 1, 8)]
    wed = ts.entry_for(date(2025, 1, 8))
    assert (wed.clock_in, wed.clock_out) == (WED_8AM, WED_5PM)


def test_repeated_action_overwrites_with_latest_time():
    service, attendance, _ = _setup(PaymentType.MONTHLY_SALARY)

    service.record_check_in(_user(), "clockIn", now=WED_8AM)
    service.record_check_in(_user(), "clockIn", now=datetime(2025, 1, 8, 8, 3))

    (record,) = attendance.records.values()
    assert record.clock_in == datetime(2025, 1, 8, 8, 3)


@pytest.mark.parametrize(
    "user",
    [None, _user(role=Role.ADMIN), User(user_id=5, username="w", role=Role.WORKER, worker_id=None)],
)
def test_non_worker_callers_are_forbidden(user):
    service, _, _ = _setup()

    with pytest.raises(AuthorizationError):
        service.record_check_in(user, "clockIn", now=WED_8AM)


@pytest.mark.parametrize("action", [None, "", "breakStart", "clockin"])
def test_invalid_action_is_rejected(action):
    service, _, _ = _setup()

    with pytest.raises(ValidationError):
        service.record_check_in(_user(), action, now=WED_8AM)


def test_unknown_worker_is_not_found():
    service, _, _ = _setup()

    with pytest.raises(NotFoundError):
        service.record_check_in(_user(worker_id=2), "clockIn", now=WED_8AM)


def test_worker_without_company_is_rejected():
    service, _, _ = _setup(company=None)

    with pytest.raises(ValidationError):
        service.record_check_in(_user(), "clockIn", now=WED_8AM)


def test_read_failure_propagates_and_creates_nothing():
    service, attendance, _ = _setup(PaymentType.MONTHLY_SALARY)
    attendance.fail_reads = True

    with pytest.raises(StoreReadError):
        service.record_check_in(_user(), "clockIn", now=WED_8AM)

    assert attendance.records == {}


def test_timesheet_read_failure_propagates():
    service, _, timesheets = _setup()
    timesheets.fail_reads = True

    with pytest.raises(StoreReadError):
        service.record_check_in(_user(), "clockIn", now=WED_8AM)

    assert timesheets.timesheets == {}


def test_concurrent_attendance_create_falls_back_to_patch():
    service, attendance, _ = _setup(PaymentType.MONTHLY_SALARY)
    attendance.concurrent_winner = AttendanceRecord(
        attendance_id=None, worker_id=1, company_id="c1", work_date=date(2025, 1, 8), clock_in=WED_8AM
    )

    service.record_check_in(_user(), "lunchOut", now=datetime(2025, 1, 8, 12, 0))

    (record,) = attendance.records.values()
    assert record.clock_in == WED_8AM
    assert record.lunch_out == datetime(2025, 1, 8, 12, 0)


def test_concurrent_timesheet_create_falls_back_to_patch():
    service, _, timesheets = _setup()
    timesheets.concurrent_winner = WeeklyTimesheet(
        timesheet_id=None,
        worker_id=1,
        company_id="c1",
        week_start_date=date(2025, 1, 6),
        daily_entries=(DailyEntry(date=date(2025, 1, 8), clock_in=WED_8AM),),
    )

    service.record_check_in(_user(), "clockOut", now=WED_5PM)

    (ts,) = timesheets.timesheets.values()
    entry = ts.entry_for(date(2025, 1, 8))
    assert (entry.clock_in, entry.clock_out) == (WED_8AM, WED_5PM)


def test_status_defaults_when_nothing_recorded():
    service, _, _ = _setup()

    status = service.get_status(_user(), now=WED_8AM)

    assert status.to_dict() == {
        "hasCheckedIn": False,
        "clockIn": None,
        "clockOut": None,
        "lunchOut": None,
        "lunchIn": None,
        "checkInMethod": None,
    }


@pytest.mark.parametrize("payment_type", [PaymentType.MONTHLY_SALARY, PaymentType.HOURLY])
def test_status_reflects_todays_record(payment_type):
    service, _, _ = _setup(payment_type)
    service.record_check_in(_user(), "clockIn", qr_code="SITE-A", now=WED_8AM)

    status = service.get_status(_user(), now=WED_5PM)

    assert status.has_checked_in is True
    assert status.clock_in == WED_8AM
    assert status.clock_out is None
    assert status.check_in_method == "qr-code"
