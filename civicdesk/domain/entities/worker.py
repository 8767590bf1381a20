"""Worker entity — a department employee who resolves complaints."""

from dataclasses import dataclass, field
from datetime import datetime

from civicdesk.domain.entities.assignment import AssignmentRecord
from civicdesk.domain.value_objects.assigned_set import AssignedSet
from civicdesk.domain.value_objects.enums import AssignmentReason, WorkerRole


@dataclass
class Worker:
    id: int | None
    name: str
    department_code: str
    role: WorkerRole = WorkerRole.EMPLOYEE
    assigned: AssignedSet = field(default_factory=AssignedSet)
    history: list[AssignmentRecord] = field(default_factory=list)

    @property
    def load(self) -> int:
        return len(self.assigned)

    def is_manager(self) -> bool:
        return self.role == WorkerRole.MANAGER

    def has_capacity(self, capacity: int) -> bool:
        return self.load < capacity

    def take(self, complaint_id: int, reason: AssignmentReason, at: datetime) -> None:
        """Push a complaint onto the assigned set and log it."""
        self.assigned = self.assigned.add(complaint_id)
        self.history.append(
            AssignmentRecord(complaint_id=complaint_id, assigned_at=at, reason=reason)
        )

    def release(self, complaint_id: int) -> None:
        self.assigned = self.assigned.remove(complaint_id)

    def forget(self, complaint_id: int) -> None:
        """Drop a complaint from both the set and the history (deletion)."""
        self.release(complaint_id)
        self.history = [r for r in self.history if r.complaint_id != complaint_id]
