"""CSV value normalization — handles BOM, stray spaces, loose role / hour values."""

from __future__ import annotations

import re

from civicdesk.domain.value_objects.enums import WorkerRole

ROLE_ALIASES: dict[str, WorkerRole] = {
    "employee": WorkerRole.EMPLOYEE,
    "worker": WorkerRole.EMPLOYEE,
    "staff": WorkerRole.EMPLOYEE,
    "manager": WorkerRole.MANAGER,
    "supervisor": WorkerRole.MANAGER,
    "head": WorkerRole.MANAGER,
}


def normalize_column_name(name: str) -> str:
    """Normalize a CSV header: "\\ufeff SLA Hours " -> "sla_hours"."""
    name = name.replace("\ufeff", "").strip()
    name = re.sub(r"[\s\u00a0\-]+", "_", name)
    name = name.lower()
    return re.sub(r"[^\w]", "", name, flags=re.UNICODE)


def clean_string(value: str | None) -> str | None:
    """Strip whitespace and return None for empty strings."""
    if value is None:
        return None
    value = value.strip()
    return value if value else None


def normalize_department_code(raw: str | None) -> str | None:
    """Department codes are stored upper-case without inner spaces."""
    value = clean_string(raw)
    if value is None:
        return None
    return re.sub(r"\s+", "_", value).upper()


def parse_role(raw: str | None) -> WorkerRole:
    """Map a free-text role to WorkerRole; unknown or empty means employee."""
    value = clean_string(raw)
    if value is None:
        return WorkerRole.EMPLOYEE
    return ROLE_ALIASES.get(value.lower(), WorkerRole.EMPLOYEE)


def parse_hours(raw: str | None) -> int | None:
    """Parse an SLA hour count ("48", "48.0", "72h"); None when absent or not positive."""
    value = clean_string(raw)
    if value is None:
        return None
    value = value.lower().rstrip("h").strip().replace(",", ".")
    try:
        hours = int(float(value))
    except (ValueError, OverflowError):
        return None
    return hours if hours > 0 else None
