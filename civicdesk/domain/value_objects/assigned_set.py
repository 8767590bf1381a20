"""AssignedSet — the ordered set of complaint ids a worker currently owns.

Its size is the worker's *load*. Older rows stored this column either as a
native list or as a comma-delimited string; ``parse`` accepts both and drops
anything that is not a positive integer id.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterator

MAX_ID_DIGITS = 18


def _coerce_id(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, float):
        return int(value) if value.is_integer() and value > 0 else None
    if isinstance(value, str):
        text = value.strip()
        # ASCII digits only
        if not (text.isascii() and text.isdigit()) or len(text) > MAX_ID_DIGITS:
            return None
        number = int(text)
        return number if number > 0 else None
    return None


@dataclass(frozen=True)
class AssignedSet:
    ids: tuple[int, ...] = ()

    @classmethod
    def parse(cls, raw: Any) -> AssignedSet:
        """Normalize a stored representation into an AssignedSet.

        Accepts None, a list/tuple of ids, a single id, a delimited string
        ("12,15, 17") or a JSON-encoded list string ("[12, 15]").
        Malformed entries are skipped; duplicates keep their first position.
        """
        if raw is None:
            return cls()
        if isinstance(raw, AssignedSet):
            return raw

        if isinstance(raw, str):
            text = raw.strip()
            if text.startswith("["):
                try:
                    return cls.parse(json.loads(text))
                except ValueError:
                    text = text.strip("[]")
            items: list[Any] = text.split(",")
        elif isinstance(raw, (list, tuple)):
            items = list(raw)
        else:
            items = [raw]

        seen: list[int] = []
        for item in items:
            cid = _coerce_id(item)
            if cid is not None and cid not in seen:
                seen.append(cid)
        return cls(tuple(seen))

    def add(self, complaint_id: int) -> AssignedSet:
        if complaint_id in self.ids:
            return self
        return AssignedSet(self.ids + (complaint_id,))

    def remove(self, complaint_id: int) -> AssignedSet:
        return AssignedSet(tuple(cid for cid in self.ids if cid != complaint_id))

    def to_list(self) -> list[int]:
        return list(self.ids)

    def __len__(self) -> int:
        return len(self.ids)

    def __contains__(self, complaint_id: object) -> bool:
        return complaint_id in self.ids

    def __iter__(self) -> Iterator[int]:
        return iter(self.ids)
