# SPDX-License-Identifier: MIT

from collections.abc import Iterator
from pathlib import Path

import pendulum
import pytest

from omnitask import configuration
from omnitask.repository.meeting import MeetingRepository
from omnitask.repository.note import NoteRepository
from omnitask.repository.notification import NotificationRepository
from omnitask.repository.task import TaskRepository

from .fakes import FakeNotifier

# A Wednesday
FIXED_NOW = pendulum.datetime(2024, 6, 12, 9, 30, tz="UTC")


@pytest.fixture(autouse=True)
def utc_local_timezone() -> Iterator[None]:
    """Run every test as if the machine were in UTC so local dates are stable."""
    with pendulum.test_local_timezone(pendulum.timezone("UTC")):
        yield


@pytest.fixture()
def data_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point every data file and the config file at a temporary directory."""
    original = configuration.DATA_PATH
    configuration.set_data_path(tmp_path)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", tmp_path / "config.yaml")
    yield tmp_path
    configuration.set_data_path(original)


@pytest.fixture()
def now() -> pendulum.DateTime:
    return FIXED_NOW


@pytest.fixture()
def task_repository(data_path: Path) -> TaskRepository:
    # Start from an empty board instead of the seed tasks
    (data_path / "tasks.yaml").write_text("[]\n")
    return TaskRepository()


@pytest.fixture()
def notification_repository(data_path: Path) -> NotificationRepository:
    return NotificationRepository()


@pytest.fixture()
def note_repository(data_path: Path) -> NoteRepository:
    return NoteRepository()


@pytest.fixture()
def meeting_repository(data_path: Path) -> MeetingRepository:
    return MeetingRepository()


@pytest.fixture()
def notifier() -> FakeNotifier:
    notifier = FakeNotifier()
    notifier.request_permission()
    return notifier
