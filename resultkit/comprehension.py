"""Comprehensions: sequences of dependent Result-producing steps.

A comprehension threads every value produced so far into the next step:

    do_flat_map(
        lambda: load_user(user_id),             # () -> Result[User]
        lambda user: load_account(user),        # (User) -> Result[Account]
        lambda user, account: charge(account),  # (User, Account) -> Result[Receipt]
    )

Steps run strictly left to right. The first Failure ends the sequence and
is the overall result; later steps are never called. ``do_map`` is the
same, except its last step returns a plain value that gets wrapped in a
Success.

Any number of steps is accepted, at least two.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .result import Failure, Result, Success, run_step


def _thread(
    steps: tuple[Callable[..., Any], ...],
) -> tuple[Result[Any], tuple[Any, ...]]:
    """Run ``steps`` in order, each fed all prior values.

    Returns the last Result produced together with the values that fed the
    step which produced it.
    """
    values: tuple[Any, ...] = ()
    result = run_step(steps[0], values)
    for step in steps[1:]:
        match result:
            case Success(value):
                values = (*values, value)
                result = run_step(step, values)
            case Failure():
                break
    return result, values


def do_flat_map(
    first: Callable[[], Result[Any]],
    step: Callable[..., Result[Any]],
    *steps: Callable[..., Result[Any]],
) -> Result[Any]:
    """Chain of nested ``flat_map`` calls where every step returns a Result."""
    result, _ = _thread((first, step, *steps))
    return result


def do_map(
    first: Callable[[], Result[Any]],
    step: Callable[..., Any],
    *steps: Callable[..., Any],
) -> Result[Any]:
    """Chain of nested ``flat_map`` calls ending in a ``map``.

    Every step but the last returns a Result; the last returns a plain value.
    """
    *leading, last = (first, step, *steps)
    result, values = _thread(tuple(leading))
    match result:
        case Success(value):
            return run_step(last, (*values, value), wrap=True)
        case _:
            return result
