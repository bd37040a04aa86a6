# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_manager.core.state import AppState
from task_manager.tasks.task_store import TaskStore

from .fakes import RecordingListener


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="task-manager-test",
        log_level="WARNING",
        log_to_file=False,
        date_format="%Y-%m-%d",
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def listener(store: TaskStore) -> RecordingListener:
    rec = RecordingListener()
    store.subscribe(rec)
    return rec


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    return AppState(settings=settings, store=store)


@pytest.fixture()
def categories(store: TaskStore) -> dict[str, object]:
    """Default categories by name: {"Work": ..., "Personal": ..., "Errands": ...}."""
    return {c.name: c for c in store.categories}
