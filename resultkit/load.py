from __future__ import annotations

import importlib
import importlib.util
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from types import ModuleType
from typing import Any

from .reason import FailReason
from .result import Failure, Result, attempt, failure, success

logger = logging.getLogger(__name__)


def load_callable(target: str) -> Result[Callable[..., Any]]:
    """Resolve ``module:attr`` or ``path/to/file.py:attr`` to a callable.

    Dotted attribute paths are followed (``pkg.mod:Class.method``). Every
    problem is reported as a Failure with a friendly message; when an import
    raised, the exception is kept alongside the message.
    """
    source, sep, attr_path = target.rpartition(":")
    if not sep or not source or not attr_path:
        return failure(f"Target must look like 'module:function', got {target!r}")

    logger.debug("Loading %s from %s", attr_path, source)
    return (
        _import_source(source)
        .flat_map(lambda module: _resolve_attr(module, attr_path))
        .flat_map(lambda obj: _require_callable(obj, target))
    )


def _reworded(result: Result[Any], message: str) -> Result[Any]:
    match result:
        case Failure(reason):
            return result.map_failure(FailReason(message, reason.exception))
        case _:
            return result


def _import_source(source: str) -> Result[ModuleType]:
    if not source.endswith(".py"):
        return _reworded(
            attempt(lambda: importlib.import_module(source)),
            f"Could not import module {source!r}",
        )

    path = Path(source)
    if not path.is_file():
        return failure(f"Could not read file: {source}")
    spec = importlib.util.spec_from_file_location(path.stem, str(path))
    if spec is None or spec.loader is None:
        return failure(f"Could not load a module from {source}")
    module = importlib.util.module_from_spec(spec)
    loader = spec.loader
    name = spec.name
    # Must be in sys.modules before exec_module; dataclasses resolve it by name.
    sys.modules[name] = module
    return _reworded(
        attempt(lambda: loader.exec_module(module))
        .on_failure(lambda _: sys.modules.pop(name, None))
        .map(lambda _: module),
        f"Code execution failed in {source}",
    )


def _resolve_attr(module: ModuleType, attr_path: str) -> Result[Any]:
    obj: Any = module
    for part in attr_path.split("."):
        if not hasattr(obj, part):
            return failure(f"{module.__name__!r} has no attribute {attr_path!r}")
        obj = getattr(obj, part)
    return success(obj)


def _require_callable(obj: Any, target: str) -> Result[Callable[..., Any]]:
    if callable(obj):
        return success(obj)
    return failure(f"{target!r} is a {type(obj).__name__}, not a callable")
