from __future__ import annotations

import io
from datetime import date

import qrcode
from flask import Flask, current_app, jsonify, request, send_file

from ..common.datetime_utils import parse_iso_date
from ..common.validators import parse_enum, require_non_empty
from ..container import Container
from ..core.constants import DEFAULT_QR_TOKEN
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..directory.controller import person_to_dict
from .export import export_records_csv
from .model import AttendanceRecord, GeoPoint
from .strategies.base import CheckInResult


def record_to_dict(r: AttendanceRecord) -> dict:
    return {
        "id": r.record_id,
        "userId": r.person_id,
        "userName": r.person_name,
        "sessionId": r.session_id,
        "date": r.work_date.strftime("%Y-%m-%d"),
        "status": r.status.value,
        "checkInTime": r.check_in_time.strftime("%H:%M:%S") if r.check_in_time else None,
        "method": r.method.value,
        "location": {"lat": r.location.lat, "lng": r.location.lng} if r.location else None,
    }


def result_to_dict(result: CheckInResult) -> dict:
    return {
        "success": True,
        "outcome": result.outcome.value,
        "message": result.message,
        "records": [record_to_dict(r) for r in result.records],
    }


def parse_date_range(args) -> tuple[date, date] | None:
    start_s, end_s = args.get("start"), args.get("end")
    if not start_s and not end_s:
        return None
    try:
        start = parse_iso_date(start_s) if start_s else date.min
        end = parse_iso_date(end_s) if end_s else date.max
    except ValueError:
        raise ValidationError("Dates must use YYYY-MM-DD") from None
    if start > end:
        raise ValidationError("start must not be after end")
    return start, end


def _parse_location(data: dict) -> GeoPoint | None:
    if data.get("lat") is None and data.get("lng") is None:
        return None
    try:
        return GeoPoint(lat=float(data["lat"]), lng=float(data["lng"]))
    except (KeyError, TypeError, ValueError):
        raise ValidationError("lat and lng must both be numbers") from None


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/tenants/<tenant_id>/records", endpoint="api_tenant_records")
    def api_tenant_records(tenant_id: str):
        newest_first = request.args.get("newest_first", "0").lower() in {"1", "true", "yes"}
        records = service.records_for_tenant(
            tenant_id,
            parse_date_range(request.args),
            session_id=request.args.get("session_id") or None,
            newest_first=newest_first,
        )
        return jsonify([record_to_dict(r) for r in records])

    @app.route("/api/sessions/<session_id>/roster", endpoint="api_session_roster")
    def api_session_roster(session_id: str):
        date_s = request.args.get("date")
        try:
            work_date = parse_iso_date(date_s) if date_s else None
        except ValueError:
            raise ValidationError("date must use YYYY-MM-DD") from None

        view = service.roster(session_id, work_date)
        return jsonify(
            {
                "sessionId": view.session.session_id,
                "date": view.work_date.strftime("%Y-%m-%d"),
                "roster": [person_to_dict(p) for p in view.roster],
                "uncovered": [person_to_dict(p) for p in view.uncovered],
            }
        )

    @app.route("/api/sessions/<session_id>/mark", methods=["POST"], endpoint="api_session_mark")
    def api_session_mark(session_id: str):
        data = request.get_json(silent=True) or {}
        person_id = require_non_empty(data.get("person_id"), "person_id")
        status = parse_enum(AttendanceStatus, data.get("status"), "status")
        return jsonify(result_to_dict(service.mark(session_id, person_id, status)))

    @app.route("/api/sessions/<session_id>/mark-all", methods=["POST"], endpoint="api_session_mark_all")
    def api_session_mark_all(session_id: str):
        return jsonify(result_to_dict(service.mark_all_present(session_id)))

    @app.route("/api/sessions/<session_id>/scan-qr", methods=["POST"], endpoint="api_session_scan_qr")
    def api_session_scan_qr(session_id: str):
        return jsonify(result_to_dict(service.simulate_qr_scan(session_id)))

    @app.route("/api/sessions/<session_id>/gps-checkin", methods=["POST"], endpoint="api_session_gps_checkin")
    def api_session_gps_checkin(session_id: str):
        data = request.get_json(silent=True) or {}
        result = service.simulate_gps_checkin(session_id, location=_parse_location(data))
        return jsonify(result_to_dict(result))

    @app.route("/api/sessions/<session_id>/qr.png", endpoint="api_session_qr_image")
    def api_session_qr_image(session_id: str):
        """QR code students scan to check in to this session."""
        if not container.directory.get_session(session_id):
            raise NotFoundError(f"Unknown session: {session_id}")

        token = current_app.config.get("QR_TOKEN", DEFAULT_QR_TOKEN)
        qr = qrcode.QRCode(
            version=1,
            error_correction=qrcode.constants.ERROR_CORRECT_L,
            box_size=10,
            border=2,
        )
        qr.add_data(f"{token}:{session_id}")
        qr.make(fit=True)

        img = qr.make_image(fill_color="black", back_color="white")
        buf = io.BytesIO()
        img.save(buf, format="PNG")
        buf.seek(0)
        return send_file(buf, mimetype="image/png")

    @app.route("/api/export.csv", endpoint="api_export_csv")
    def api_export_csv():
        tenant_id = request.args.get("tenant_id")
        if tenant_id:
            records = service.records_for_tenant(tenant_id)
        else:
            records = container.ledger.all_records()

        filename = f"attendance_report_{service.today().strftime('%Y-%m-%d')}.csv"
        return app.response_class(
            export_records_csv(records).encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
