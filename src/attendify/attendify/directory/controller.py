from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import NotFoundError
from .model import Person, Session, Tenant


def tenant_to_dict(t: Tenant) -> dict:
    return {
        "id": t.tenant_id,
        "name": t.name,
        "slug": t.slug,
        "type": t.tenant_type.value,
        "features": {
            "qr": t.features.qr,
            "faceRecognition": t.features.face_recognition,
            "aiReports": t.features.ai_reports,
            "gps": t.features.gps,
        },
    }


def person_to_dict(p: Person) -> dict:
    return {
        "id": p.person_id,
        "name": p.name,
        "email": p.email,
        "role": p.role.value,
        "tenantId": p.tenant_id,
        "department": p.group,
    }


def session_to_dict(s: Session) -> dict:
    return {
        "id": s.session_id,
        "title": s.title,
        "tenantId": s.tenant_id,
        "startTime": s.start_time.isoformat(),
        "endTime": s.end_time.isoformat(),
        "targetGroup": s.target_group,
        "type": s.kind.value,
        "instructorName": s.instructor_name,
    }


def register(app: Flask, container: Container) -> None:
    directory = container.directory

    def _require_tenant(tenant_id: str) -> Tenant:
        tenant = directory.get_tenant(tenant_id)
        if not tenant:
            raise NotFoundError(f"Unknown tenant: {tenant_id}")
        return tenant

    @app.route("/api/tenants", endpoint="api_tenants")
    def api_tenants():
        return jsonify([tenant_to_dict(t) for t in directory.tenants()])

    @app.route("/api/tenants/<tenant_id>", endpoint="api_tenant")
    def api_tenant(tenant_id: str):
        return jsonify(tenant_to_dict(_require_tenant(tenant_id)))

    @app.route("/api/tenants/<tenant_id>/persons", endpoint="api_tenant_persons")
    def api_tenant_persons(tenant_id: str):
        _require_tenant(tenant_id)
        persons = directory.persons_of(tenant_id)
        term = (request.args.get("q") or "").strip().lower()
        if term:
            persons = [p for p in persons if term in p.name.lower() or term in p.email.lower()]
        return jsonify([person_to_dict(p) for p in persons])

    @app.route("/api/tenants/<tenant_id>/sessions", endpoint="api_tenant_sessions")
    def api_tenant_sessions(tenant_id: str):
        _require_tenant(tenant_id)
        return jsonify([session_to_dict(s) for s in directory.sessions_of(tenant_id)])
