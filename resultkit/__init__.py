"""resultkit: a success-or-failure Result type with chaining combinators."""

from .reason import FailReason
from .result import (
    DEFAULT_FILTER_MESSAGE,
    Failure,
    Result,
    Success,
    attempt,
    catching,
    failure,
    of,
    run_step,
    success,
)
from .comprehension import do_flat_map, do_map
from .errors import FailedResultError, SerializedError
from .serialization import dumps, loads

__all__ = [
    # Reasons
    "FailReason",
    # Result
    "Result", "Success", "Failure", "DEFAULT_FILTER_MESSAGE",
    # Construction
    "of", "success", "attempt", "failure", "catching", "run_step",
    # Comprehensions
    "do_flat_map", "do_map",
    # Errors
    "FailedResultError", "SerializedError",
    # Serialization
    "dumps", "loads",
]
