from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_view, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    @api_view
    def login():
        data = json_body()
        user = container.auth_service.authenticate(str(data.get("worker_id") or ""), str(data.get("password") or ""))
        return jsonify(
            {
                "worker_id": user.worker_id,
                "role": user.role.value,
                "job": user.job,
                "email": user.email,
                "success": True,
            }
        )

    @app.route("/users", methods=["POST"], endpoint="add_user")
    @api_view
    def add_user():
        data = json_body()
        container.user_service.add_user(
            current_role=request.args.get("role"),
            worker_id=data.get("worker_id"),
            password=data.get("password"),
            role=data.get("role"),
            job=data.get("job"),
            email=data.get("email"),
            shift_id=data.get("shift_id"),
        )
        return jsonify({"message": "User added successfully", "success": True})

    @app.route("/users/<worker_id>", methods=["DELETE"], endpoint="delete_user")
    @api_view
    def delete_user(worker_id: str):
        container.user_service.remove_user(current_role=request.args.get("role"), worker_id=worker_id)
        return jsonify({"message": "User removed successfully", "success": True})

    @app.route("/users", methods=["GET"], endpoint="list_workers")
    @api_view
    def list_workers():
        return jsonify([{"worker_id": w.worker_id, "job": w.job} for w in container.user_service.list_workers()])
