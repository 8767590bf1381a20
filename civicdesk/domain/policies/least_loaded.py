"""LeastLoadedPolicy — pick the worker with the fewest open complaints."""

from __future__ import annotations

from civicdesk.domain.entities.worker import Worker


def select_least_loaded(roster: list[Worker], capacity: int) -> Worker | None:
    """Deterministic least-loaded pick from a department roster.

    1. Drop workers whose load is at or above *capacity* (exclusive threshold).
    2. Take the minimum by (load ASC, id ASC); equal loads go to the lowest id.

    Args:
        roster: workers of one department, in any order.
        capacity: maximum load; a worker at this load is never selected.

    Returns:
        The chosen worker, or None when the roster is empty or full.
    """
    eligible = [w for w in roster if w.has_capacity(capacity)]
    if not eligible:
        return None

    return min(eligible, key=lambda w: (w.load, w.id if w.id is not None else 0))
