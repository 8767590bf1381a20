"""Wall clock used by use cases; injected so tests can pin time."""

from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
