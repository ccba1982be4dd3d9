from __future__ import annotations

import pytest

_CONFIG_ENV_VARS = (
    "CONSTRAINTFIX_INSTALL_COMMAND",
    "CONSTRAINTFIX_CONSTRAINTS_FILE",
    "CONSTRAINTFIX_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_config_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _CONFIG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
