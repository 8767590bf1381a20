"""Domain errors raised by use cases and rendered by the API layer.

Callers can tell "not found" and "not allowed" apart from a broken
dependency, which is what the HTTP status mapping in ``main.py`` relies on.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for every error this service raises on purpose."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(DomainError):
    """Input rejected before any side effect."""


class NotFoundError(DomainError):
    def __init__(self, resource: str, resource_id: object = None, details: dict | None = None):
        self.resource = resource
        self.resource_id = resource_id
        message = resource
        if resource_id is not None:
            message += f" with id '{resource_id}'"
        message += " not found"
        super().__init__(message, details)


class AuthorizationError(DomainError):
    """Caller may not perform the operation on this record."""


class DependencyError(DomainError):
    """Persistence or storage collaborator failed."""

    def __init__(self, service: str, message: str, details: dict | None = None):
        self.service = service
        super().__init__(f"{service}: {message}", details)
