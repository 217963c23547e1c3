from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional

from ..common.validators import require_date_range
from ..compensation.repository import CompensationConfigRepository
from ..compensation.resolver import resolve_deduction_config
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..loans.service import LoanService
from ..timesheets.calculator import HourBuckets
from ..users.model import User
from ..workers.repository import WorkerRepository
from .calculator.factory import GrossPayCalculatorFactory
from .composer import compose_deductions
from .model import PayrollRecord
from .repository import PayrollRepository

log = logging.getLogger(__name__)


class PayrollService:
    def __init__(
        self,
        workers: WorkerRepository,
        compensation: CompensationConfigRepository,
        loans: LoanService,
        payroll: PayrollRepository,
        *,
        calculators: GrossPayCalculatorFactory,
    ):
        self._workers = workers
        self._compensation = compensation
        self._loans = loans
        self._payroll = payroll
        self._calculators = calculators

    def generate(
        self,
        worker_id: int,
        period_start: date,
        period_end: date,
        *,
        requested_by: Optional[User] = None,
    ) -> PayrollRecord:
        """Build and store a draft payroll record for one worker and period."""
        require_date_range(period_start, period_end)

        worker = self._workers.get_by_id(worker_id)
        if not worker:
            raise NotFoundError("Worker not found")
        company_id = worker.company_id
        if not company_id:
            raise ValidationError("Worker has no company assigned")
        if requested_by is not None and requested_by.role == Role.SUBCON_ADMIN:
            if str(requested_by.company_id) != company_id:
                raise AuthorizationError("Unauthorized access to worker")

        gross = self._calculators.for_payment_type(worker.payment_type).compute(worker, period_start, period_end)

        comp = self._compensation.get_for_company(company_id)
        resolved = resolve_deduction_config(worker, comp.deduction_configs if comp else ())
        if resolved.is_default:
            log.info("payroll worker=%s: no group/band deduction config, using platform defaults", worker_id)
        else:
            log.info(
                "payroll worker=%s: using %s deduction config %r",
                worker_id, resolved.source_kind.value, resolved.source_name,
            )

        repayments = self._loans.repayments_for(worker_id, period_end)
        hours = HourBuckets(
            normal_hours=gross.normal_hours,
            ot1_5_hours=gross.ot1_5_hours,
            ot2_0_hours=gross.ot2_0_hours,
            total_hours=gross.total_hours,
        )
        deductions = compose_deductions(worker, gross.gross_pay, hours, resolved, repayments)

        record = PayrollRecord(
            payroll_id=None,
            worker_id=worker_id,
            company_id=company_id,
            period_start=period_start,
            period_end=period_end,
            gross=gross,
            deductions=deductions,
        )
        payroll_id = self._payroll.create(record)
        log.info(
            "payroll %s generated for worker %s %s..%s gross=%s net=%s",
            payroll_id, worker_id, period_start, period_end, deductions.gross_pay, deductions.net_pay,
        )
        return replace(record, payroll_id=payroll_id)
