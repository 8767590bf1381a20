"""Tests for LeastLoadedPolicy."""

import random

from civicdesk.domain.entities.worker import Worker
from civicdesk.domain.policies.least_loaded import select_least_loaded
from civicdesk.domain.value_objects.assigned_set import AssignedSet

CAPACITY = 5


def _w(wid: int, load: int) -> Worker:
    return Worker(
        id=wid, name=f"W{wid}", department_code="D",
        assigned=AssignedSet(tuple(range(wid * 100, wid * 100 + load))),
    )


def test_empty_roster():
    assert select_least_loaded([], CAPACITY) is None


def test_single_worker_below_capacity():
    assert select_least_loaded([_w(1, 4)], CAPACITY).id == 1


def test_worker_at_capacity_never_selected():
    assert select_least_loaded([_w(1, 5)], CAPACITY) is None
    assert select_least_loaded([_w(1, 7), _w(2, 5)], CAPACITY) is None


def test_strict_minimum_load_wins():
    assert select_least_loaded([_w(1, 3), _w(2, 1), _w(3, 2)], CAPACITY).id == 2


def test_tie_goes_to_lowest_id_regardless_of_order():
    roster = [_w(9, 2), _w(4, 2), _w(7, 2), _w(1, 4)]
    for _ in range(10):
        random.shuffle(roster)
        assert select_least_loaded(roster, CAPACITY).id == 4


def test_capacity_is_configurable():
    roster = [_w(1, 2), _w(2, 3)]
    assert select_least_loaded(roster, 2) is None
    assert select_least_loaded(roster, 3).id == 1
