from __future__ import annotations

from .reason import FailReason


class FailedResultError(Exception):
    """Raised by ``get_or_raise`` when the Result is a Failure."""

    def __init__(self, reason: FailReason):
        super().__init__(reason.describe())
        self.reason = reason


class SerializedError(Exception):
    """Stand-in for an exception restored from JSON.

    Only the original type name and message survive serialization, so two
    SerializedErrors compare equal when both of those match.
    """

    def __init__(self, class_name: str, message: str):
        super().__init__(message)
        self.class_name = class_name
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SerializedError):
            return NotImplemented
        return (self.class_name, self.message) == (other.class_name, other.message)

    def __hash__(self) -> int:
        return hash((self.class_name, self.message))

    def __repr__(self) -> str:
        return f"SerializedError({self.class_name!r}, {self.message!r})"
