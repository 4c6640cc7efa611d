from __future__ import annotations

from flask import Flask, jsonify, request

from ..attendance.controller import parse_date_range
from ..common.validators import require_non_empty
from ..container import Container
from ..core.exceptions import ValidationError
from .model import AttendanceStats, ReportPeriod, ReportSnapshot


def stats_to_dict(s: AttendanceStats) -> dict:
    return {
        "presentCount": s.present_count,
        "absentCount": s.absent_count,
        "lateCount": s.late_count,
        "excusedCount": s.excused_count,
        "total": s.total,
        "rate": s.rate,
    }


def snapshot_to_dict(s: ReportSnapshot) -> dict:
    return {
        "state": s.state.value,
        "period": s.period.value if s.period else None,
        "report": s.report.to_dict() if s.report else None,
        "stats": stats_to_dict(s.stats) if s.stats else None,
    }


def parse_period(value: str | None) -> ReportPeriod:
    raw = require_non_empty(value or ReportPeriod.THIS_WEEK.value, "period")
    try:
        return ReportPeriod(raw)
    except ValueError:
        allowed = ", ".join(p.value for p in ReportPeriod)
        raise ValidationError(f"period must be one of: {allowed}") from None


def register(app: Flask, container: Container) -> None:
    service = container.report_service

    @app.route("/api/tenants/<tenant_id>/stats", endpoint="api_tenant_stats")
    def api_tenant_stats(tenant_id: str):
        return jsonify(stats_to_dict(service.stats(tenant_id, parse_date_range(request.args))))

    @app.route("/api/tenants/<tenant_id>/reports", methods=["GET"], endpoint="api_tenant_report")
    def api_tenant_report(tenant_id: str):
        return jsonify(snapshot_to_dict(service.current(tenant_id)))

    @app.route("/api/tenants/<tenant_id>/reports", methods=["POST"], endpoint="api_tenant_generate_report")
    def api_tenant_generate_report(tenant_id: str):
        data = request.get_json(silent=True) or {}
        snapshot = service.generate(tenant_id, parse_period(data.get("period")))
        return jsonify(snapshot_to_dict(snapshot))
