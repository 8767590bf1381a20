"""CSV loader — reads and normalizes the department / worker seed files."""

from __future__ import annotations

import csv
import logging
from pathlib import Path

from civicdesk.adapters.csv_loader.normalizer import (
    clean_string,
    normalize_column_name,
    normalize_department_code,
    parse_hours,
    parse_role,
)

logger = logging.getLogger(__name__)


def _sniff_dialect(sample: str) -> type[csv.Dialect]:
    """Detect the delimiter (comma/semicolon/tab) from the header line."""
    if not sample:
        return csv.excel

    first_line = sample.splitlines()[0]
    counts = {d: first_line.count(d) for d in (";", ",", "\t")}
    best_delim = max(counts, key=counts.get)
    if counts[best_delim] == 0:
        return csv.excel

    class DynamicDialect(csv.excel):
        delimiter = best_delim

    return DynamicDialect


def _read_csv(file_path: Path, encoding: str = "utf-8-sig") -> list[dict[str, str | None]]:
    """Read a CSV file with BOM handling and column normalization.

    Args:
        file_path: path to the CSV file.
        encoding: file encoding (utf-8-sig strips BOM automatically).

    Returns:
        List of dicts keyed by normalized column names.
    """
    with open(file_path, encoding=encoding, newline="") as f:
        sample = f.read(4096)
        f.seek(0)
        reader = csv.DictReader(f, dialect=_sniff_dialect(sample))
        if reader.fieldnames is None:
            raise ValueError(f"CSV file {file_path} has no header row")

        col_map = {col: normalize_column_name(col) for col in reader.fieldnames}
        rows = [
            {col_map[k]: clean_string(v) for k, v in raw_row.items() if k is not None}
            for raw_row in reader
        ]

    logger.info("Loaded %d rows from %s (columns: %s)", len(rows), file_path.name, list(col_map.values()))
    return rows


def load_departments(file_path: Path) -> list[dict]:
    """Load departments.csv.

    Expected columns: code, name, sla_hours (optional; blank means default SLA).
    """
    departments = []
    for row in _read_csv(file_path):
        code = normalize_department_code(row.get("code") or row.get("department"))
        if not code:
            logger.warning("Skipping department row without code: %s", row)
            continue
        departments.append({
            "code": code,
            "name": row.get("name") or code,
            "sla_hours": parse_hours(row.get("sla_hours") or row.get("sla")),
        })
    logger.info("Parsed %d departments", len(departments))
    return departments


def load_workers(file_path: Path) -> list[dict]:
    """Load workers.csv.

    Expected columns: name, department (code), role (employee | manager).
    """
    workers = []
    for row in _read_csv(file_path):
        name = row.get("name") or row.get("full_name")
        department = normalize_department_code(row.get("department") or row.get("department_code"))
        if not name or not department:
            logger.warning("Skipping worker row without name or department: %s", row)
            continue
        workers.append({
            "name": name,
            "department_code": department,
            "role": parse_role(row.get("role")),
        })
    logger.info("Parsed %d workers", len(workers))
    return workers
