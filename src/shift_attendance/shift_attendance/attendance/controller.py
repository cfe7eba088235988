from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_view, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/checkin", methods=["POST"], endpoint="checkin")
    @api_view
    def checkin():
        data = json_body()
        result = container.attendance_service.check_in(str(data.get("worker_id") or ""), data.get("role"))
        return jsonify(result.to_dict())

    @app.route("/checkout", methods=["POST"], endpoint="checkout")
    @api_view
    def checkout():
        data = json_body()
        result = container.attendance_service.check_out(str(data.get("worker_id") or ""), data.get("role"))
        return jsonify(result.to_dict())

    @app.route("/attendance/<worker_id>", methods=["GET"], endpoint="attendance_history")
    @api_view
    def attendance_history(worker_id: str):
        records = container.attendance_service.history(worker_id)
        return jsonify([r.to_dict() for r in records])

    @app.route("/report", methods=["GET"], endpoint="report")
    @api_view
    def report():
        rows = container.attendance_service.report(
            worker_id=request.args.get("worker_id"),
            role=request.args.get("role"),
        )
        return jsonify([r.to_dict() for r in rows])
