"""Tests for resultkit.serialization."""

import json

import pytest

from resultkit import FailReason, Failure, SerializedError, Success, dumps, failure, loads, of
from resultkit.serialization import (
    exception_to_json,
    reason_from_json,
    result_from_json,
    result_to_json,
)


def test_success_round_trip() -> None:
    result = of({"port": 8080, "hosts": ["a", "b"]})
    assert loads(dumps(result)) == result


def test_message_failure_round_trip() -> None:
    result = failure("Not found")
    assert loads(dumps(result)) == result


def test_exception_is_restored_as_serialized_error() -> None:
    restored = loads(dumps(failure("Not found", KeyError("id"))))
    assert isinstance(restored, Failure)
    assert restored.reason.friendly_message == "Not found"
    assert restored.reason.exception == SerializedError("KeyError", "'id'")
    # A restored failure survives a second round trip unchanged.
    assert loads(dumps(restored)) == restored


def test_payload_shape() -> None:
    assert result_to_json(of(1)) == {"type": "success", "value": 1}
    assert result_to_json(failure(ValueError("bad"))) == {
        "type": "failure",
        "reason": {
            "friendly_message": None,
            "exception": {"class": "ValueError", "message": "bad"},
        },
    }


def test_non_builtin_exception_is_qualified() -> None:
    class LookupFailed(Exception):
        pass

    payload = exception_to_json(LookupFailed("gone"))
    assert payload["class"].startswith(__name__)
    assert payload["class"].endswith("LookupFailed")


def test_dumps_is_valid_json() -> None:
    data = json.loads(dumps(failure("x"), indent=None))
    assert data["type"] == "failure"


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"type": "maybe"},
        {"type": "failure"},
        {"type": "failure", "reason": {"friendly_message": 1, "exception": None}},
        {"type": "failure", "reason": {"friendly_message": None, "exception": {"class": "X"}}},
    ],
)
def test_malformed_payloads_raise(payload: dict) -> None:
    with pytest.raises(ValueError):
        result_from_json(payload)


def test_reason_from_json_without_exception() -> None:
    assert reason_from_json({"friendly_message": "m", "exception": None}) == FailReason("m")


def test_success_value_must_be_json() -> None:
    with pytest.raises(TypeError):
        dumps(Success(object()))
