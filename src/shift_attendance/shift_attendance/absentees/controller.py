from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import api_view, json_body
from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from ..users.service import require_admin
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/absentees/scan", methods=["POST"], endpoint="run_absentee_scan")
    @api_view
    def run_absentee_scan():
        """Manual trigger for the daily reminder scan of one shift."""
        require_admin(request.args.get("role"), "run absentee scans")
        data = json_body()
        shift_name = require_non_empty(data.get("shift_name"), "shift_name")
        work_date = None
        if data.get("work_date"):
            try:
                work_date = parse_iso_date(str(data["work_date"]))
            except ValueError:
                raise ValidationError("work_date must be YYYY-MM-DD")

        report = container.absentee_scanner.run(shift_name, work_date)
        return jsonify({"success": True, **report.to_dict()})
