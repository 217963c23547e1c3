from __future__ import annotations

from flask import Flask

from ..common.validators import require_int, require_iso_date
from ..common.http import json_body, ok
from ..container import Container
from ..core.enums import Role
from ..users.session import current_user, require_role


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll-records/generate", methods=["POST"], endpoint="payroll_generate")
    def payroll_generate():
        user = require_role(current_user(container.users_repo), (Role.ADMIN, Role.SUBCON_ADMIN))
        data = json_body()
        record = container.payroll_service.generate(
            require_int(data.get("workerId"), "workerId"),
            require_iso_date(data.get("periodStart"), "periodStart"),
            require_iso_date(data.get("periodEnd"), "periodEnd"),
            requested_by=user,
        )
        return ok(record.to_dict(), status=201)
