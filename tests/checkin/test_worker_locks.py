import threading
from datetime import datetime

from inmemory import InMemoryAttendance, InMemoryTimesheets, InMemoryWorkers

from src.workforce_payroll.workforce_payroll.checkin.locks import WorkerLocks
from src.workforce_payroll.workforce_payroll.checkin.service import CheckInService
from src.workforce_payroll.workforce_payroll.core.enums import PaymentType, Role
from src.workforce_payroll.workforce_payroll.users.model import User
from src.workforce_payroll.workforce_payroll.workers.model import Worker


def test_same_worker_returns_same_lock():
    locks = WorkerLocks()

    assert locks._lock_for(1) is locks._lock_for(1)
    assert locks._lock_for(1) is not locks._lock_for(2)


def test_parallel_check_ins_create_a_single_record():
    workers = InMemoryWorkers({1: Worker(worker_id=1, company=9, payment_type=PaymentType.MONTHLY_SALARY)})
    attendance = InMemoryAttendance()
    service = CheckInService(workers, attendance, InMemoryTimesheets())
    user = User(user_id=1, username="w", role=Role.WORKER, worker_id=1)
    errors = []

    def tap(minute):
        try:
            service.record_check_in(user, "clockIn", now=datetime(2025, 1, 8, 8, minute))
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=tap, args=(m,)) for m in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert len(attendance.records) == 1
