from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_view
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/salary-summary", methods=["GET"], endpoint="salary_summary")
    @api_view
    def salary_summary():
        data = container.payroll_report_service.salary_summary(
            worker_id=request.args.get("worker_id"),
            month=request.args.get("month"),
            year=request.args.get("year"),
        )
        return jsonify({"success": True, "data": data})

    @app.route("/payroll", methods=["GET"], endpoint="payroll")
    @api_view
    def payroll():
        result = container.payroll_report_service.monthly_payroll(worker_id=request.args.get("worker_id"))
        body = {"month": result.month, "year": result.year, "data": result.rows}
        if not result.rows:
            body["message"] = "No data found for this month"
        return jsonify(body)

    @app.route("/analytics", methods=["GET"], endpoint="analytics")
    @api_view
    def analytics():
        return jsonify(container.payroll_report_service.analytics().to_dict())
