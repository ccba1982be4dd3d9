from __future__ import annotations

import logging
import signal
from pathlib import Path

import pytest

from constraintfix.config import ConfigurationError
from constraintfix.ui import cli as cli_module


def test_fix_uses_current_directory_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_fix(**kwargs: object) -> int:
        captured.update(kwargs)
        return 0

    monkeypatch.setattr(cli_module, "fix_project_constraints", fake_fix)

    cli_module.main(["fix"])

    assert captured["cwd"] == Path.cwd()


def test_fix_with_cwd_flag(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    captured: dict[str, object] = {}

    def fake_fix(**kwargs: object) -> int:
        captured.update(kwargs)
        return 0

    monkeypatch.setattr(cli_module, "fix_project_constraints", fake_fix)

    cli_module.main(["fix", "--cwd", str(tmp_path)])

    assert captured["cwd"] == tmp_path


def test_non_zero_status_becomes_exit_code(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli_module, "fix_project_constraints", lambda **_: 1)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["fix"])

    assert excinfo.value.code == 1


def test_configuration_error_exits_with_two(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_fix(**_: object) -> int:
        raise ConfigurationError("Install command must not be empty")

    monkeypatch.setattr(cli_module, "fix_project_constraints", fake_fix)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["fix"])

    assert excinfo.value.code == 2


def test_unexpected_error_exits_with_one(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_fix(**_: object) -> int:
        raise EOFError("Input closed")

    monkeypatch.setattr(cli_module, "fix_project_constraints", fake_fix)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["fix"])

    assert excinfo.value.code == 1


def test_missing_subcommand_is_a_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main([])

    assert excinfo.value.code == 2


def test_unknown_log_level_exits_with_two(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CONSTRAINTFIX_LOG_LEVEL", "chatty")

    def fake_fix(**_: object) -> int:
        raise AssertionError("fix must not run with a broken configuration")

    monkeypatch.setattr(cli_module, "fix_project_constraints", fake_fix)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["fix"])

    assert excinfo.value.code == 2


def test_sigint_handler_exits_cleanly(caplog: pytest.LogCaptureFixture) -> None:
    with (
        caplog.at_level(logging.INFO, logger=cli_module.__name__),
        pytest.raises(SystemExit) as excinfo,
    ):
        cli_module.sigint_handler(signal.SIGINT, None)

    assert excinfo.value.code == 0
    assert "Closed by user" in caplog.text
