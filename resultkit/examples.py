"""Worked examples of Result chains.

Each function returns a Result. Run this file (or scripts/run_examples.py)
to see a report for each one, or call them through the CLI:

    resultkit run resultkit.examples:parse_port 8080
    resultkit run resultkit.examples:parse_endpoint db.local:99999
"""

from __future__ import annotations

from resultkit.comprehension import do_flat_map, do_map
from resultkit.reason import FailReason
from resultkit.result import Result, attempt, catching, failure, success
from resultkit.report import format_report

# ===================================================================
# Single-value pipelines
# ===================================================================


def parse_port(raw: str) -> Result[int]:
    """int() faults are captured; out-of-range ports fail with a message."""
    return (
        attempt(lambda: raw.strip())
        .map(int)
        .filter(lambda port: 0 < port < 65536, f"Port out of range: {raw}")
    )


def parse_host(raw: str) -> Result[str]:
    host = raw.strip().lower()
    if not host:
        return failure("Host must not be empty")
    return success(host)


@catching
def ratio(numerator: str, denominator: str) -> float:
    """Plain function turned into a Result-returning one."""
    return int(numerator) / int(denominator)


# ===================================================================
# Comprehensions
# ===================================================================


def parse_endpoint(raw: str) -> Result[str]:
    """host:port → normalised URL, stopping at the first bad part."""
    host_part, _, port_part = raw.rpartition(":")
    return do_map(
        lambda: parse_host(host_part),
        lambda host: parse_port(port_part),
        lambda host, port: f"tcp://{host}:{port}",
    )


def parse_replica_set(primary: str, secondary: str) -> Result[tuple[str, str]]:
    """Both endpoints must parse, and must differ."""
    return do_flat_map(
        lambda: parse_endpoint(primary),
        lambda first: parse_endpoint(secondary),
        lambda first, second: (
            success((first, second))
            if first != second
            else failure("Primary and secondary must differ")
        ),
    )


def port_or_default(raw: str, default: int = 5432) -> int:
    return parse_port(raw).get_or_else(default)


def port_with_fallback(raw: str, fallback: str) -> Result[int]:
    return parse_port(raw).or_else(lambda: parse_port(fallback))


def explain(raw: str) -> Result[int]:
    """Replace whatever went wrong with one user-facing message."""
    return parse_port(raw).map_failure(
        FailReason(friendly_message=f"{raw!r} is not a usable port")
    )


def main() -> None:
    runs: list[tuple[str, Result[object]]] = [
        ("parse_port('8080')", parse_port("8080")),
        ("parse_port('http')", parse_port("http")),
        ("parse_port('70000')", parse_port("70000")),
        ("ratio('1', '0')", ratio("1", "0")),
        ("parse_endpoint('DB.local:5432')", parse_endpoint("DB.local:5432")),
        ("parse_endpoint(':5432')", parse_endpoint(":5432")),
        (
            "parse_replica_set('a:1', 'a:1')",
            parse_replica_set("a:1", "a:1"),
        ),
        ("port_with_fallback('x', '6543')", port_with_fallback("x", "6543")),
        ("explain('x')", explain("x")),
    ]
    for label, result in runs:
        print(f"# {label}")
        print(format_report(result))
        print()


if __name__ == "__main__":
    main()
