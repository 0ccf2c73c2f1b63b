"""
Domain exceptions for AppTimeline.

The timeline record itself never raises from its add operations. These
exceptions are used by the collaborators that validate, merge and encode
entities.
"""

from typing import Any


class TimelineException(Exception):
    """
    Base exception for all AppTimeline errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class EntityIdentityMismatchException(TimelineException):
    """Raised when merging two entities that address different identity keys."""

    def __init__(
        self,
        expected: tuple[str | None, str | None],
        actual: tuple[str | None, str | None],
    ):
        super().__init__(
            f"Cannot merge entity {actual[0]}/{actual[1]} into {expected[0]}/{expected[1]}",
            "IDENTITY_MISMATCH",
            {
                "expected_entity_type": expected[0],
                "expected_entity_id": expected[1],
                "entity_type": actual[0],
                "entity_id": actual[1],
            },
        )
