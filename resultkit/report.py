"""Human and machine-readable reports for a Result."""

from __future__ import annotations

import os
import traceback
from typing import Any

import jinja2

from .reason import FailReason
from .result import Failure, Result, Success
from .serialization import result_to_json

_TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")
_ENV = jinja2.Environment(
    loader=jinja2.FileSystemLoader(_TEMPLATE_DIR),
    autoescape=False,
    keep_trailing_newline=False,
    trim_blocks=True,
    lstrip_blocks=True,
)


def _exception_line(exc: Exception) -> str:
    return FailReason(exception=exc).describe()


def format_report(result: Result[Any], *, show_traceback: bool = False) -> str:
    """Human-readable report for terminal output."""
    template = _ENV.get_template("report.txt.j2")
    match result:
        case Success(value):
            return template.render(ok=True, value_repr=repr(value)).rstrip("\n")
        case Failure(reason):
            tb = ""
            if show_traceback and reason.exception is not None:
                tb = "".join(traceback.format_exception(reason.exception)).rstrip("\n")
            return template.render(
                ok=False,
                reason=reason,
                summary=reason.describe(),
                exception_line=(
                    _exception_line(reason.exception) if reason.exception is not None else ""
                ),
                traceback=tb,
            ).rstrip("\n")
        case _:
            raise TypeError(f"Expected Success or Failure, got {type(result).__name__}")


def report_json(result: Result[Any]) -> dict[str, Any]:
    """Machine-readable report for pipeline integration."""
    return {"ok": result.is_success, **result_to_json(result)}
