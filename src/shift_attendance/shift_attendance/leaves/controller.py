from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_view, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/leave-request", methods=["POST"], endpoint="submit_leave")
    @api_view
    def submit_leave():
        request_id = container.leave_service.submit_leave(json_body())
        return jsonify({"message": "Leave request submitted successfully", "success": True, "id": request_id})

    @app.route("/leave-requests", methods=["GET"], endpoint="list_leave_requests")
    @api_view
    def list_leave_requests():
        reqs = container.leave_service.list_requests(current_role=request.args.get("role"))
        return jsonify([r.to_dict() for r in reqs])

    @app.route("/leave-requests/<int:request_id>", methods=["POST"], endpoint="decide_leave_request")
    @api_view
    def decide_leave_request(request_id: int):
        status = container.leave_service.decide(
            current_role=request.args.get("role"),
            request_id=request_id,
            status=json_body().get("status"),
        )
        return jsonify({"message": f"Request {status.value}", "success": True})
