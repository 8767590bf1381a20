"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class WorkStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETE = "Complete"


class SLAStatus(str, Enum):
    ON_TRACK = "On Track"
    WARNING = "Warning"
    VIOLATED = "Violated"
    COMPLETED = "Completed"


class AssignmentReason(str, Enum):
    ASSIGNED = "Assigned"
    AUTO_ASSIGNED = "Auto-Assigned"


class WorkerRole(str, Enum):
    EMPLOYEE = "employee"
    MANAGER = "manager"


class NotificationKind(str, Enum):
    AUTO_ASSIGNED = "auto_assigned"
    SLA_WARNING = "sla_warning"
    SLA_VIOLATED = "sla_violated"


# Statuses that still count against a department's SLA
ACTIVE_WORK_STATUSES: tuple[WorkStatus, ...] = (WorkStatus.PENDING, WorkStatus.IN_PROGRESS)
