import argparse
import json
import logging
import sys
from collections.abc import Callable, Sequence
from typing import Any

from resultkit.config import Settings, configure_logging
from resultkit.load import load_callable
from resultkit.reason import FailReason
from resultkit.report import format_report, report_json
from resultkit.result import Failure, Result, Success, catching

logger = logging.getLogger(__name__)


def _invoke(func: Callable[..., Any], args: Sequence[str]) -> Result[Any]:
    """Call ``func`` with ``args``; a Result it returns is not wrapped again."""
    return catching(func)(*args)


def handle_run(
    target: str,
    args: Sequence[str],
    *,
    as_json: bool,
    show_traceback: bool,
) -> int:
    """Load TARGET, call it, and report the outcome. Exit 0 on Success, 1 on Failure."""
    logger.debug("Running %s with %d argument(s)", target, len(args))
    result = load_callable(target).flat_map(lambda func: _invoke(func, args))

    if as_json:
        print(json.dumps(report_json(result), indent=2, default=repr))
    else:
        print(format_report(result, show_traceback=show_traceback))

    return 0 if result.is_success else 1


def _settings_error(reason: FailReason) -> int:
    print(f"Configuration error: {reason.describe()}", file=sys.stderr)
    return 2


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="resultkit",
        description="Run a Python callable and report its outcome as a Result",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Command: run
    run_parser = subparsers.add_parser(
        "run",
        help="Call module:function (or file.py:function) and report Success or Failure.",
    )
    run_parser.add_argument(
        "target",
        metavar="TARGET",
        help="What to call, e.g. 'package.module:function' or 'path/to/file.py:function'.",
    )
    run_parser.add_argument(
        "args",
        nargs="*",
        metavar="ARG",
        help="Positional string arguments passed to the callable.",
    )
    run_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print a machine-readable JSON report.",
    )
    run_parser.add_argument(
        "--traceback",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Include the captured traceback in failure reports (default: taken from RESULTKIT_TRACEBACK).",
    )

    args = parser.parse_args(argv)

    settings_result = Settings.from_env()
    match settings_result:
        case Success(settings):
            configure_logging(settings)
        case Failure(reason):
            return _settings_error(reason)

    try:
        match args.command:
            case "run":
                show_traceback = (
                    settings.show_traceback if args.traceback is None else args.traceback
                )
                return handle_run(
                    args.target,
                    args.args,
                    as_json=args.json,
                    show_traceback=show_traceback,
                )
            case None:
                parser.print_help()
                return 1
            case _:
                print(f"Unknown command: {args.command}", file=sys.stderr)
                parser.print_help()
                return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
