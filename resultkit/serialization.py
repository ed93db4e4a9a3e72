"""JSON serialization for results and failure reasons.

Every result serializes to a dict with a "type" discriminator field.
Exceptions keep only their type name and message, and come back as
SerializedError. Success values must themselves be JSON-serializable.

Round-trip: result_from_json(result_to_json(x)) == x whenever x holds no
live exception.
"""

from __future__ import annotations

import json
from typing import Any

from .errors import SerializedError
from .reason import FailReason
from .result import Failure, Result, Success


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


def exception_to_json(exc: Exception) -> dict[str, Any]:
    if isinstance(exc, SerializedError):
        return {"class": exc.class_name, "message": exc.message}
    cls = type(exc)
    name = cls.__qualname__
    if cls.__module__ != "builtins":
        name = f"{cls.__module__}.{name}"
    return {"class": name, "message": str(exc)}


def exception_from_json(d: dict[str, Any]) -> SerializedError:
    match d:
        case {"class": str(class_name), "message": str(message)}:
            return SerializedError(class_name, message)
        case _:
            raise ValueError(f"Malformed exception payload: {d!r}")


# ---------------------------------------------------------------------------
# Reasons
# ---------------------------------------------------------------------------


def reason_to_json(r: FailReason) -> dict[str, Any]:
    return {
        "friendly_message": r.friendly_message,
        "exception": exception_to_json(r.exception) if r.exception is not None else None,
    }


def reason_from_json(d: dict[str, Any]) -> FailReason:
    match d:
        case {"friendly_message": str() | None as message, "exception": None}:
            return FailReason(friendly_message=message)
        case {"friendly_message": str() | None as message, "exception": dict(exc)}:
            return FailReason(friendly_message=message, exception=exception_from_json(exc))
        case _:
            raise ValueError(f"Malformed reason payload: {d!r}")


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


def result_to_json(r: Result[Any]) -> dict[str, Any]:
    match r:
        case Success(value):
            return {"type": "success", "value": value}
        case Failure(reason):
            return {"type": "failure", "reason": reason_to_json(reason)}
        case _:
            raise TypeError(f"Expected Success or Failure, got {type(r).__name__}")


def result_from_json(d: dict[str, Any]) -> Result[Any]:
    match d:
        case {"type": "success", "value": value}:
            return Success(value)
        case {"type": "failure", "reason": dict(reason)}:
            return Failure(reason_from_json(reason))
        case {"type": str(t)} if t not in ("success", "failure"):
            raise ValueError(f"Unknown result type: {t!r}")
        case _:
            raise ValueError(f"Malformed result payload: {d!r}")


# ---------------------------------------------------------------------------
# Convenience
# ---------------------------------------------------------------------------


def dumps(r: Result[Any], indent: int | None = 2) -> str:
    return json.dumps(result_to_json(r), indent=indent)


def loads(s: str) -> Result[Any]:
    return result_from_json(json.loads(s))
