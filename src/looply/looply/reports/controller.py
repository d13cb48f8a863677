from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.web import employee_required, employer_required, json_body, require_own_company
from ..container import Container
from ..core.exceptions import ReportNotFound, ValidationError


def register(app: Flask, container: Container) -> None:
    reports = container.report_service

    def _range_args() -> dict:
        return {
            "start_date": request.args.get("startDate") or None,
            "end_date": request.args.get("endDate") or None,
        }

    # Employee side

    @app.route("/api/reports/<work_date>", methods=["PUT"], endpoint="save_report")
    @employee_required
    def save_report(work_date: str):
        data = json_body()
        shifts = data.get("shifts") or []
        if not isinstance(shifts, list):
            raise ValidationError("shifts must be a list")
        report = reports.save_draft(
            session["user_id"],
            session.get("company_id") or "",
            work_date,
            str(data.get("summary") or ""),
            shifts,
        )
        return jsonify({"success": True, "report": report.to_dict()})

    @app.route("/api/reports/<work_date>/submit", methods=["POST"], endpoint="submit_report")
    @employee_required
    def submit_report(work_date: str):
        report = reports.submit_report(session["user_id"], work_date)
        return jsonify({"success": True, "report": report.to_dict()})

    @app.route("/api/reports/<work_date>", methods=["GET"], endpoint="get_report")
    @employee_required
    def get_report(work_date: str):
        report = reports.get_report(session["user_id"], work_date)
        if not report:
            raise ReportNotFound(f"No report for {work_date}")
        return jsonify({"success": True, "report": report.to_dict()})

    @app.route("/api/reports", methods=["GET"], endpoint="my_reports")
    @employee_required
    def my_reports():
        rows = reports.get_reports(
            session.get("company_id") or "",
            employee_id=session["user_id"],
            **_range_args(),
        )
        return jsonify({"success": True, "reports": [r.to_dict() for r in rows]})

    # Employer side

    @app.route("/api/companies/<company_id>/reports", methods=["GET"], endpoint="company_reports")
    @employer_required
    def company_reports(company_id: str):
        require_own_company(company_id)
        rows = reports.get_reports(
            company_id,
            employee_id=request.args.get("employeeId") or None,
            **_range_args(),
        )
        return jsonify({"success": True, "reports": [r.to_dict() for r in rows]})

    @app.route("/api/companies/<company_id>/dashboard", methods=["GET"], endpoint="dashboard")
    @employer_required
    def dashboard(company_id: str):
        require_own_company(company_id)
        stats = reports.get_dashboard_stats(company_id, request.args.get("asOf") or None)
        return jsonify({"success": True, "stats": stats.to_dict()})

    @app.route("/api/companies/<company_id>/reports.csv", methods=["GET"], endpoint="export_reports_csv")
    @employer_required
    def export_reports_csv(company_id: str):
        require_own_company(company_id)
        text = reports.export_csv(company_id, **_range_args())
        return app.response_class(
            text.encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename=eod-reports-{company_id}.csv"},
        )
