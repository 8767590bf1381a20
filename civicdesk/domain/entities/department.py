"""Department entity — a municipal unit with its own resolution SLA."""

from dataclasses import dataclass


@dataclass
class Department:
    code: str
    name: str
    sla_hours: int | None = None
