from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import employer_required, json_body, require_own_company
from ..container import Container
from ..core.exceptions import AuthorizationError, EmployeeNotFound, ValidationError


def register(app: Flask, container: Container) -> None:
    companies = container.company_service

    def _own_employee(employee_id: str):
        employee = companies.get_employee(employee_id)
        if not employee:
            raise EmployeeNotFound(f"Employee {employee_id} not found")
        require_own_company(employee.company_id)
        return employee

    @app.route("/api/companies", methods=["POST"], endpoint="create_company")
    @employer_required
    def create_company():
        if session.get("company_id"):
            raise AuthorizationError("You already own a company")
        data = json_body()
        company = companies.create_company(
            data.get("name", ""),
            data.get("timezone", ""),
            session["user_id"],
            logo=data.get("logo"),
            description=data.get("description"),
        )
        s_user = container.auth_service.assign_company(email=session["email"], company_id=company.id)
        session["company_id"] = s_user.company_id
        return jsonify({"success": True, "company": company.to_dict()}), 201

    @app.route("/api/companies/<company_id>", methods=["GET"], endpoint="get_company")
    @employer_required
    def get_company(company_id: str):
        require_own_company(company_id)
        company = companies.require_company(company_id)
        return jsonify({"success": True, "company": company.to_dict()})

    @app.route("/api/companies/<company_id>/employees", methods=["GET"], endpoint="list_employees")
    @employer_required
    def list_employees(company_id: str):
        require_own_company(company_id)
        return jsonify({"success": True, "employees": [e.to_dict() for e in companies.get_employees(company_id)]})

    @app.route("/api/companies/<company_id>/employees", methods=["POST"], endpoint="add_employee")
    @employer_required
    def add_employee(company_id: str):
        require_own_company(company_id)
        data = json_body()
        employee = companies.add_employee(
            company_id,
            data.get("name", ""),
            email=data.get("email"),
            position=data.get("position"),
        )
        return jsonify({"success": True, "employee": employee.to_dict()}), 201

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="remove_employee")
    @employer_required
    def remove_employee(employee_id: str):
        _own_employee(employee_id)
        companies.remove_employee(employee_id)
        return jsonify({"success": True})

    @app.route("/api/employees/<employee_id>/active", methods=["POST"], endpoint="set_employee_active")
    @employer_required
    def set_employee_active(employee_id: str):
        _own_employee(employee_id)
        data = json_body()
        if not isinstance(data.get("isActive"), bool):
            raise ValidationError("isActive must be true or false")
        employee = companies.set_employee_active(employee_id, is_active=data["isActive"])
        return jsonify({"success": True, "employee": employee.to_dict()})
