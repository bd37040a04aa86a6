# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_manager.cli.bootstrap import create_initial_state
from task_manager.config import Settings, get_settings

ENV_VARS = (
    "TASKMGR_APP_NAME",
    "TASKMGR_LOG_LEVEL",
    "TASKMGR_LOG_TO_FILE",
    "TASKMGR_DATE_FORMAT",
    "TASKMGR_DATA_DIR",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_settings_defaults(clean_env) -> None:
    s = Settings.from_env()
    assert s.app_name == "task-manager"
    assert s.log_level == "WARNING"
    assert s.log_to_file is True
    assert s.date_format == "%b %d, %Y"
    assert s.data_dir == Path(".local/task_manager")


def test_settings_from_env(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASKMGR_APP_NAME", "todo")
    clean_env.setenv("TASKMGR_LOG_LEVEL", "debug")
    clean_env.setenv("TASKMGR_LOG_TO_FILE", "no")
    clean_env.setenv("TASKMGR_DATE_FORMAT", "%d.%m.%Y")
    clean_env.setenv("TASKMGR_DATA_DIR", str(tmp_path))

    s = Settings.from_env()

    assert s.app_name == "todo"
    assert s.log_level == "DEBUG"
    assert s.log_to_file is False
    assert s.date_format == "%d.%m.%Y"
    assert s.data_dir == tmp_path


def test_get_settings_is_process_wide() -> None:
    assert get_settings() is get_settings()


def test_bootstrap_builds_fresh_store(settings) -> None:
    state = create_initial_state(settings=settings)
    assert state.settings is settings
    assert [c.name for c in state.store.categories] == ["Work", "Personal", "Errands"]
    assert state.store.tasks == ()
    # log_to_file is off in the test settings: nothing written to disk
    assert not settings.data_dir.exists()
