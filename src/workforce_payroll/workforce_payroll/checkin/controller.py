from __future__ import annotations

from flask import Flask

from ..common.http import json_body, ok
from ..container import Container
from ..users.session import current_user


def register(app: Flask, container: Container) -> None:
    @app.route("/api/worker-checkin", methods=["POST"], endpoint="worker_checkin")
    def worker_checkin():
        data = json_body()
        result = container.checkin_service.record_check_in(
            current_user(container.users_repo),
            data.get("action"),
            qr_code=(data.get("qrCode") or "").strip() or None,
            location=data.get("location"),
        )
        return ok(result.to_dict())

    @app.route("/api/worker-checkin", methods=["GET"], endpoint="worker_checkin_status")
    def worker_checkin_status():
        status = container.checkin_service.get_status(current_user(container.users_repo))
        return ok(status.to_dict())
