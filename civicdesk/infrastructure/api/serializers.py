"""Domain objects → API response dicts."""

from __future__ import annotations

from datetime import datetime

from civicdesk.application.use_cases.complaint_queries import HeatPoint
from civicdesk.domain.entities.complaint import Complaint, format_duration
from civicdesk.domain.entities.department import Department
from civicdesk.domain.entities.notification import Notification
from civicdesk.domain.entities.worker import Worker


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def serialize_complaint(c: Complaint) -> dict:
    return {
        "id": c.id,
        "reporter_id": c.reporter_id,
        "name": c.name,
        "phone": c.phone,
        "address": c.address,
        "description": c.description,
        "department": c.department_code,
        "latitude": c.location.latitude if c.location else None,
        "longitude": c.location.longitude if c.location else None,
        "photo_url": c.photo_url,
        "work_status": c.work_status.value,
        "sla_status": c.sla_status.value,
        "created_at": _iso(c.created_at),
        "deadline": _iso(c.deadline),
        "sla_violated_at": _iso(c.sla_violated_at),
        "resolved_at": _iso(c.resolved_at),
        "time_to_resolve": format_duration(c.time_to_resolve),
        "worker_id": c.worker_id,
    }


def serialize_worker(w: Worker) -> dict:
    return {
        "id": w.id,
        "name": w.name,
        "department": w.department_code,
        "role": w.role.value,
        "assigned_complaint_ids": w.assigned.to_list(),
        "current_load": w.load,
        "assignment_history": [r.to_dict() for r in w.history],
    }


def serialize_department(d: Department | None) -> dict | None:
    if d is None:
        return None
    return {"code": d.code, "name": d.name, "sla_hours": d.sla_hours}


def serialize_notification(n: Notification) -> dict:
    return {
        "id": n.id,
        "worker_id": n.worker_id,
        "complaint_id": n.complaint_id,
        "kind": n.kind.value,
        "message": n.message,
        "is_read": n.is_read,
        "created_at": _iso(n.created_at),
        "read_at": _iso(n.read_at),
    }


def serialize_heat_point(p: HeatPoint) -> dict:
    return {
        "lat": p.latitude,
        "lng": p.longitude,
        "weight": p.weight,
        "complaint_id": p.complaint_id,
    }
