"""Tests for the resultkit command line."""

import json
from pathlib import Path

import dotenv
import pytest

from resultkit import cli, config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so values later loaded from a .env file are undone too
    for name in (config.LOG_LEVEL_VAR, config.TRACEBACK_VAR):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setattr(config, "load_dotenv", lambda *args, **kwargs: False)


@pytest.fixture
def jobs(tmp_path: Path) -> Path:
    path = tmp_path / "jobs.py"
    path.write_text(
        "from resultkit import failure\n"
        "\n"
        "def add(a, b):\n"
        "    return int(a) + int(b)\n"
        "\n"
        "def refuse(*args):\n"
        "    return failure('Refused')\n"
        "\n"
        "def interrupt():\n"
        "    raise KeyboardInterrupt\n"
    )
    return path


def test_run_success(jobs: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["run", f"{jobs}:add", "2", "3"])
    assert code == 0
    assert capsys.readouterr().out == "✓ Success\n  value: 5\n"


def test_run_captures_exception(jobs: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["run", f"{jobs}:add", "2", "three"])
    assert code == 1
    out = capsys.readouterr().out
    assert out.startswith("× Failure\n  reason: ValueError:")
    assert "Traceback" not in out


def test_run_returned_failure_is_not_wrapped(
    jobs: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = cli.main(["run", f"{jobs}:refuse", "--json"])
    assert code == 1
    data = json.loads(capsys.readouterr().out)
    assert data == {
        "ok": False,
        "type": "failure",
        "reason": {"friendly_message": "Refused", "exception": None},
    }


def test_run_json_success(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["run", "resultkit.examples:parse_endpoint", "DB.local:5432", "--json"])
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data == {"ok": True, "type": "success", "value": "tcp://db.local:5432"}


def test_run_non_json_value_uses_repr(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["run", "builtins:object", "--json"])
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["value"].startswith("<object object at")


def test_traceback_flag(jobs: Path, capsys: pytest.CaptureFixture[str]) -> None:
    cli.main(["run", f"{jobs}:add", "1", "x", "--traceback"])
    assert "Traceback (most recent call last)" in capsys.readouterr().out


def test_traceback_from_environment(
    jobs: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv(config.TRACEBACK_VAR, "1")
    cli.main(["run", f"{jobs}:add", "1", "x"])
    assert "Traceback (most recent call last)" in capsys.readouterr().out

    cli.main(["run", f"{jobs}:add", "1", "x", "--no-traceback"])
    assert "Traceback" not in capsys.readouterr().out


def test_unloadable_target(capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["run", "not-a-target"])
    assert code == 1
    assert "module:function" in capsys.readouterr().out


def test_bad_configuration(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv(config.LOG_LEVEL_VAR, "LOUD")
    code = cli.main(["run", "json:dumps", "x"])
    assert code == 2
    assert "Configuration error" in capsys.readouterr().err


def test_keyboard_interrupt(jobs: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = cli.main(["run", f"{jobs}:interrupt"])
    assert code == 130
    assert "cancelled" in capsys.readouterr().err


def test_no_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main([]) == 1


def test_dotenv_in_working_directory_is_honoured(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / ".env").write_text(f"{config.LOG_LEVEL_VAR}=LOUD\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, "load_dotenv", dotenv.load_dotenv)
    assert cli.main(["run", "json:dumps", "x"]) == 2
    assert config.LOG_LEVEL_VAR in capsys.readouterr().err
