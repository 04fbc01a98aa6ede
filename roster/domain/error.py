"""Domain layer errors.

Every rejected operation raises exactly one of these. ``kind`` is stable
and machine-readable; ``reason`` is the human-readable explanation.
"""

from typing import ClassVar


class DomainError(Exception):
    """Base domain error."""

    kind: ClassVar[str] = "domain_error"

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UnauthorizedError(DomainError):
    """Raised when the acting user may not perform the operation on the target."""

    kind = "unauthorized"


class InvalidOperationError(DomainError):
    """Raised when a well-formed request would break a business invariant."""

    kind = "invalid_operation"


class ConflictError(DomainError):
    """Raised when storage rejects a write because of a uniqueness violation."""

    kind = "conflict"


class TransientError(DomainError):
    """Raised when storage is unavailable or timed out. Safe to retry."""

    kind = "transient"
