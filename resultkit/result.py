"""The Result type: a success carrying a value, or a failure carrying a reason.

Chain steps never raise. Any Exception raised by a function handed to
``map``, ``flat_map``, ``or_else``, ``attempt`` or a comprehension step is
caught and becomes a Failure whose reason holds the exception. Observation
points (``on_success``, ``on_failure``, ``get_or_handle``, ``get_or_raise``)
are terminal and let exceptions propagate.

    result = (
        attempt(lambda: raw["port"])
        .map(int)
        .filter(lambda port: 0 < port < 65536, "Port out of range")
    )
    match result:
        case Success(port):
            ...
        case Failure(reason):
            ...
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, ParamSpec, TypeVar

from .errors import FailedResultError
from .reason import FailReason

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")
P = ParamSpec("P")

DEFAULT_FILTER_MESSAGE = "Condition did not match"


# ---------------------------------------------------------------------------
# Fault capture
# ---------------------------------------------------------------------------


def _step_name(step: object) -> str:
    return getattr(step, "__qualname__", None) or repr(step)


def _captured(exc: Exception, step: object) -> Failure[Any]:
    logger.debug(
        "Captured %s from step %s", type(exc).__name__, _step_name(step), exc_info=exc
    )
    return Failure(FailReason(exception=exc))


def _expect_result(out: object, step: object) -> Result[Any]:
    """Pass a step's Result through; anything else is a fault of the step."""
    if isinstance(out, (Success, Failure)):
        return out
    return _captured(
        TypeError(
            f"Step {_step_name(step)} returned {type(out).__name__}, expected Result"
        ),
        step,
    )


def _unknown_variant(obj: object) -> TypeError:
    return TypeError(f"Expected Success or Failure, got {type(obj).__name__}")


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


class _ResultOps(Generic[A]):
    """Combinators shared by Success and Failure."""

    @property
    def is_success(self) -> bool:
        return isinstance(self, Success)

    @property
    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def map(self, f: Callable[[A], B]) -> Result[B]:
        """Transform the success value with ``f``. ``f`` runs at most once."""
        match self:
            case Success(value):
                try:
                    return Success(f(value))
                except Exception as e:
                    return _captured(e, f)
            case Failure():
                return self  # type: ignore[return-value]
            case _:
                raise _unknown_variant(self)

    def flat_map(self, f: Callable[[A], Result[B]]) -> Result[B]:
        """Bind: feed the success value to ``f`` and return its Result as is."""
        match self:
            case Success(value):
                try:
                    out = f(value)
                except Exception as e:
                    return _captured(e, f)
                return _expect_result(out, f)
            case Failure():
                return self  # type: ignore[return-value]
            case _:
                raise _unknown_variant(self)

    def map_failure(self, reason: FailReason) -> Result[A]:
        """Replace the reason of a Failure. A Success is returned unchanged."""
        match self:
            case Success():
                return self  # type: ignore[return-value]
            case Failure():
                return Failure(reason)
            case _:
                raise _unknown_variant(self)

    def on_success(self, func: Callable[[A], object]) -> Result[A]:
        match self:
            case Success(value):
                func(value)
                return self  # type: ignore[return-value]
            case Failure():
                return self  # type: ignore[return-value]
            case _:
                raise _unknown_variant(self)

    def on_failure(self, func: Callable[[FailReason], object]) -> Result[A]:
        match self:
            case Success():
                return self  # type: ignore[return-value]
            case Failure(reason):
                func(reason)
                return self  # type: ignore[return-value]
            case _:
                raise _unknown_variant(self)

    def filter(
        self, condition: Callable[[A], bool], message: str = DEFAULT_FILTER_MESSAGE
    ) -> Result[A]:
        """Keep a Success only if ``condition`` holds for its value.

        A condition that raises counts as not matching: the failure carries
        ``message`` and the exception is dropped.
        """
        match self:
            case Success(value):
                try:
                    matched = condition(value)
                except Exception as e:
                    logger.debug(
                        "Filter condition %s raised %s; treating as no match",
                        _step_name(condition),
                        type(e).__name__,
                        exc_info=e,
                    )
                    matched = False
                if matched:
                    return self  # type: ignore[return-value]
                return Failure(FailReason(friendly_message=message))
            case Failure():
                return self  # type: ignore[return-value]
            case _:
                raise _unknown_variant(self)

    def get_or_handle(self, handler: Callable[[FailReason], A]) -> A:
        match self:
            case Success(value):
                return value  # type: ignore[no-any-return]
            case Failure(reason):
                return handler(reason)
            case _:
                raise _unknown_variant(self)

    def get_or_else(self, default: A) -> A:
        match self:
            case Success(value):
                return value  # type: ignore[no-any-return]
            case Failure():
                return default
            case _:
                raise _unknown_variant(self)

    def get_or_else_lazy(self, func: Callable[[], A]) -> A:
        """Like get_or_else, but the fallback is only computed on Failure."""
        match self:
            case Success(value):
                return value  # type: ignore[no-any-return]
            case Failure():
                return func()
            case _:
                raise _unknown_variant(self)

    def get_or_raise(self) -> A:
        """Return the value, or raise FailedResultError for a Failure.

        The captured exception, if any, is chained as the cause.
        """
        match self:
            case Success(value):
                return value  # type: ignore[no-any-return]
            case Failure(reason):
                raise FailedResultError(reason) from reason.exception
            case _:
                raise _unknown_variant(self)

    def or_else(self, func: Callable[[], Result[A]]) -> Result[A]:
        """Recover from a Failure with the Result of ``func``."""
        match self:
            case Success():
                return self  # type: ignore[return-value]
            case Failure():
                try:
                    out = func()
                except Exception as e:
                    return _captured(e, func)
                return _expect_result(out, func)
            case _:
                raise _unknown_variant(self)


@dataclass(frozen=True)
class Success(_ResultOps[A]):
    """A successful outcome holding ``value``."""

    value: A


@dataclass(frozen=True)
class Failure(_ResultOps[A]):
    """A failed outcome holding ``reason``."""

    reason: FailReason


type Result[T] = Success[T] | Failure[T]


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def success(value: A) -> Result[A]:
    return Success(value)


of = success


def attempt(func: Callable[[], A]) -> Result[A]:
    """Call ``func`` now; its return value or its exception becomes a Result."""
    try:
        return Success(func())
    except Exception as e:
        return _captured(e, func)


def failure(
    message: str | Exception | FailReason | None = None,
    exception: Exception | None = None,
) -> Result[Any]:
    """Build a Failure from a message, an exception, or both.

    failure("Not found")                  — message only
    failure(KeyError("id"))               — exception only
    failure("Not found", KeyError("id"))  — both
    """
    match (message, exception):
        case (FailReason() as reason, None):
            return Failure(reason)
        case (Exception() as exc, None):
            return Failure(FailReason(exception=exc))
        case (str() | None, Exception() | None):
            return Failure(FailReason(message, exception))  # type: ignore[arg-type]
        case _:
            raise TypeError(
                f"failure() expects a message and/or an exception, got "
                f"{type(message).__name__} and {type(exception).__name__}"
            )


def run_step(
    step: Callable[..., Any], values: tuple[Any, ...], *, wrap: bool = False
) -> Result[Any]:
    """Call ``step(*values)`` as a chain step.

    With ``wrap`` the step returns a plain value that becomes a Success;
    otherwise it must return a Result. Exceptions become a Failure.
    """
    try:
        out = step(*values)
    except Exception as e:
        return _captured(e, step)
    if wrap:
        return Success(out)
    return _expect_result(out, step)


def catching(func: Callable[P, A | Result[A]]) -> Callable[P, Result[A]]:
    """Decorator: calls to ``func`` return a Result instead of raising.

    A Result returned by ``func`` is passed through without nesting.
    """

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[A]:
        try:
            out = func(*args, **kwargs)
        except Exception as e:
            return _captured(e, func)
        if isinstance(out, (Success, Failure)):
            return out
        return Success(out)

    return wrapper
