from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import json_body, login_required
from ..container import Container
from .service import SessionUser


def _remember(s_user: SessionUser) -> None:
    session.clear()
    session["user_id"] = s_user.user_id
    session["name"] = s_user.name
    session["role"] = s_user.role.value
    session["email"] = s_user.email
    session["company_id"] = s_user.company_id


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/signup", methods=["POST"], endpoint="signup")
    def signup():
        data = json_body()
        s_user = container.auth_service.sign_up(
            data.get("email", ""),
            data.get("password", ""),
            data.get("name", ""),
        )
        _remember(s_user)
        return jsonify({"success": True, "user": s_user.to_dict()}), 201

    @app.route("/api/auth/signin", methods=["POST"], endpoint="signin")
    def signin():
        data = json_body()
        s_user = container.auth_service.sign_in(data.get("email", ""), data.get("password", ""))
        _remember(s_user)
        return jsonify({"success": True, "user": s_user.to_dict()})

    @app.route("/api/auth/access-code", methods=["POST"], endpoint="signin_access_code")
    def signin_access_code():
        data = json_body()
        s_user = container.auth_service.sign_in_with_access_code(data.get("accessCode", ""))
        _remember(s_user)
        return jsonify({"success": True, "user": s_user.to_dict()})

    @app.route("/api/auth/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        company = None
        if session.get("company_id"):
            found = container.company_service.get_company(session["company_id"])
            company = found.to_dict() if found else None
        return jsonify(
            {
                "success": True,
                "isAuthenticated": True,
                "user": {
                    "id": session["user_id"],
                    "name": session.get("name"),
                    "role": session.get("role"),
                    "email": session.get("email"),
                    "companyId": session.get("company_id"),
                },
                "company": company,
            }
        )

    @app.route("/api/auth/signout", methods=["POST"], endpoint="signout")
    def signout():
        session.clear()
        return jsonify({"success": True})
