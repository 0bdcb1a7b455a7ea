"""
Unit tests for process settings.
They pin the log-level default and the normalization applied to environment values.
"""

import subprocess
import sys
from pathlib import Path

import pytest

from src.common import settings as settings_module

ROOT_DIR = Path(__file__).resolve().parents[2]


def test_log_level_defaults_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = settings_module.load_settings(load_env=False)

    assert settings.LOG_LEVEL == "INFO"


def test_log_level_is_normalized(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", " debug ")

    assert settings_module.load_settings(load_env=False).LOG_LEVEL == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "LOUD")

    with pytest.raises(RuntimeError, match="Invalid environment configuration"):
        settings_module.load_settings(load_env=False)


def test_app_imports_without_environment_settings(tmp_path) -> None:
    env = {
        "PATH": "",
        "PYTHONPATH": str(ROOT_DIR),
        "EMPLOYEE_STORE_BACKEND": "memory",
    }

    completed = subprocess.run(
        [sys.executable, "-c", "import src.api.app"],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
    )

    assert completed.returncode == 0, completed.stderr
