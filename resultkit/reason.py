"""Failure reasons.

A FailReason says why a computation failed, from two perspectives:

  - friendly_message: what went wrong for an end user, free of internal
    details.
  - exception: the internal fault that was raised, if any.

If a single message explains the failure, friendly_message should be the
only field used. Both fields may be absent; construction does not enforce
that either is set.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FailReason:
    """Why a Result is a Failure.

    Example: FailReason("Port must be a number", ValueError("invalid literal"))
    """

    friendly_message: str | None = None
    exception: Exception | None = None

    def describe(self) -> str:
        """One line of text, preferring the friendly message."""
        match (self.friendly_message, self.exception):
            case (str(message), _) if message:
                return message
            case (_, Exception() as exc):
                text = str(exc)
                return f"{type(exc).__name__}: {text}" if text else type(exc).__name__
            case _:
                return "Unknown failure"
