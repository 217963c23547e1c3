from __future__ import annotations

from datetime import date, datetime
from typing import Any

from flask import Flask

from ..common.http import json_body, ok
from ..common.validators import require_int, require_iso_date, require_non_empty
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from ..users.session import current_user, require_role
from .model import WeeklyTimesheet
from .mysql_timesheet_repository import entry_to_dict

_MANAGERS = (Role.ADMIN, Role.SUBCON_ADMIN)
_REVIEWERS = (Role.ADMIN, Role.SUBCON_ADMIN, Role.AGENT, Role.CLIENT)


def _plain(value: Any) -> Any:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    return value


def timesheet_to_dict(ts: WeeklyTimesheet) -> dict[str, Any]:
    return {
        "id": ts.timesheet_id,
        "workerId": ts.worker_id,
        "companyId": ts.company_id,
        "weekStartDate": ts.week_start_date.isoformat(),
        "weekEndDate": ts.week_end_date.isoformat(),
        "dailyEntries": [_plain(entry_to_dict(e)) for e in ts.daily_entries],
        "totalNormalHours": ts.total_normal_hours,
        "totalOT1_5Hours": ts.total_ot1_5_hours,
        "totalOT2_0Hours": ts.total_ot2_0_hours,
        "totalHours": ts.total_hours,
        "status": ts.status.value,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/timesheets/<int:timesheet_id>/recalculate", methods=["POST"], endpoint="timesheet_recalculate")
    def timesheet_recalculate(timesheet_id: int):
        user = require_role(current_user(container.users_repo), _REVIEWERS)
        ts = container.timesheet_service.recalculate(timesheet_id, requested_by=user)
        return ok(timesheet_to_dict(ts))

    @app.route("/api/timesheets/generate-week", methods=["POST"], endpoint="timesheet_generate_week")
    def timesheet_generate_week():
        user = require_role(current_user(container.users_repo), _MANAGERS)
        data = json_body()
        company_id = require_non_empty(str(data.get("companyId") or ""), "companyId")
        if user.role == Role.SUBCON_ADMIN and str(user.company_id) != company_id:
            raise AuthorizationError("Unauthorized access to company")
        day = require_iso_date(data.get("date"), "date") if data.get("date") else date.today()

        result = container.timesheet_service.generate_week(company_id, day)
        return ok({"created": result.created, "skipped": result.skipped})

    @app.route("/api/timesheets/leave", methods=["POST"], endpoint="timesheet_leave")
    def timesheet_leave():
        user = require_role(current_user(container.users_repo), _MANAGERS)
        data = json_body()
        worker_id = require_int(data.get("workerId"), "workerId")
        start = require_iso_date(data.get("startDate"), "startDate")
        end = require_iso_date(data.get("endDate"), "endDate")

        if data.get("remove"):
            modified = container.timesheet_service.clear_leave(worker_id, start, end, requested_by=user)
        else:
            modified = container.timesheet_service.apply_leave(
                worker_id,
                start,
                end,
                leave_type_name=data.get("leaveTypeName"),
                code=data.get("leaveCode"),
                requested_by=user,
            )
        return ok({"modified": modified})
