"""Tests for CSV loader functions."""

import csv
import tempfile
from pathlib import Path

from civicdesk.adapters.csv_loader.loader import load_departments, load_workers
from civicdesk.domain.value_objects.enums import WorkerRole


def _write_csv(rows: list[dict], path: Path, encoding: str = "utf-8-sig", delimiter: str = ",") -> None:
    """Helper to write a test CSV file."""
    if not rows:
        return
    with open(path, "w", encoding=encoding, newline="") as f:
        writer = csv.DictWriter(f, fieldnames=rows[0].keys(), delimiter=delimiter)
        writer.writeheader()
        writer.writerows(rows)


def test_load_departments_basic():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "departments.csv"
        _write_csv([
            {"Code": "roads", "Name": "Roads & Bridges", "SLA Hours": "24"},
            {"Code": "WATER", "Name": "Water Supply", "SLA Hours": ""},
        ], csv_path)

        departments = load_departments(csv_path)
        assert len(departments) == 2
        assert departments[0] == {"code": "ROADS", "name": "Roads & Bridges", "sla_hours": 24}
        assert departments[1]["sla_hours"] is None


def test_load_departments_skips_rows_without_code():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "departments.csv"
        _write_csv([
            {"code": "", "name": "Nameless", "sla_hours": "10"},
            {"code": "parks", "name": "", "sla_hours": "10"},
        ], csv_path)

        departments = load_departments(csv_path)
        assert [d["code"] for d in departments] == ["PARKS"]
        assert departments[0]["name"] == "PARKS"


def test_load_workers_semicolon_delimited():
    with tempfile.TemporaryDirectory() as tmpdir:
        csv_path = Path(tmpdir) / "workers.csv"
        _write_csv([
            {"Name": "Alice Moreau", "Department": "roads", "Role": "Manager"},
            {"Name": "Bob Lee", "Department": "roads", "Role": ""},
            {"Name": "", "Department": "roads", "Role": "employee"},
        ], csv_path, delimiter=";")

        workers = load_workers(csv_path)
        assert len(workers) == 2
        assert workers[0] == {"name": "Alice Moreau", "department_code": "ROADS", "role": WorkerRole.MANAGER}
        assert workers[1]["role"] == WorkerRole.EMPLOYEE
