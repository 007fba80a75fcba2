# SPDX-License-Identifier: MIT

from collections.abc import Iterator
from pathlib import Path

import pendulum
import pytest
from typer.testing import CliRunner

from omnitask.repository.configuration import CONFIGURATION_REPO
from omnitask.repository.id_map import ID_MAP_REPO
from omnitask.repository.meeting import MEETING_REPO
from omnitask.repository.note import NOTE_REPO
from omnitask.repository.notification import NOTIFICATION_REPO
from omnitask.repository.task import TASK_REPO
from omnitask.terminal.app import app
from omnitask.view import state as view_state

# Wide enough that Rich never wraps a title
runner = CliRunner(env={"COLUMNS": "200"})


@pytest.fixture(autouse=True)
def fresh_repositories(
    data_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[None]:
    (data_path / "tasks.yaml").write_text("[]\n")
    (data_path / "config.yaml").write_text("native_notifications: false\n")
    for repository in (TASK_REPO, NOTE_REPO, MEETING_REPO, NOTIFICATION_REPO):
        repository.reload()
    monkeypatch.setattr(ID_MAP_REPO, "_id_map", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    view_state.set_show_header(False)
    yield
    for repository in (TASK_REPO, NOTE_REPO, MEETING_REPO, NOTIFICATION_REPO):
        repository.reload()
    view_state.set_show_header(True)


def today() -> str:
    return pendulum.today("local").format("YYYY-MM-DD")


def test_task_lifecycle() -> None:
    result = runner.invoke(app, ["task", "add", "Write docs", "--date", "today"])
    assert result.exit_code == 0, result.output
    assert "Write docs" in result.output

    result = runner.invoke(app, ["t", "ls"])
    assert result.exit_code == 0, result.output
    assert "Write docs" in result.output

    result = runner.invoke(app, ["task", "status", "1", "done"])
    assert result.exit_code == 0, result.output
    assert TASK_REPO.get_all_tasks()[0]["status"] == "DONE"

    result = runner.invoke(app, ["task", "delete", "1"])
    assert result.exit_code == 0, result.output
    assert TASK_REPO.get_all_tasks() == []


def test_unknown_short_id_is_a_usage_error() -> None:
    result = runner.invoke(app, ["task", "show", "42"])

    assert result.exit_code == 2


def test_list_filters_by_status() -> None:
    runner.invoke(app, ["task", "add", "Open item"])
    runner.invoke(app, ["task", "add", "Closed item", "--status", "DONE"])

    result = runner.invoke(app, ["task", "list", "--status", "done"])

    assert result.exit_code == 0, result.output
    assert "Closed item" in result.output
    assert "Open item" not in result.output


def test_check_then_list_marks_notifications_read() -> None:
    runner.invoke(app, ["task", "add", "Pay rent", "--date", today(), "--reminder"])

    result = runner.invoke(app, ["notification", "check"])
    assert result.exit_code == 0, result.output
    assert NOTIFICATION_REPO.unread_count() == 1

    result = runner.invoke(app, ["notification", "list"])
    assert result.exit_code == 0, result.output
    assert "Reminder: Pay rent" in result.output
    assert NOTIFICATION_REPO.unread_count() == 0


def test_report_with_export(tmp_path: Path) -> None:
    runner.invoke(app, ["task", "add", "Thursday task", "--date", "2024-06-13"])
    runner.invoke(app, ["task", "add", "Saturday task", "--date", "2024-06-15"])
    out = tmp_path / "exports"

    result = runner.invoke(
        app,
        ["report", "week", "--date", "2024-06-12", "--export", "csv", "--output", str(out)],
    )

    assert result.exit_code == 0, result.output
    exported = (out / "tasks_report_week_2024-06-12.csv").read_text()
    assert "Thursday task" in exported
    assert "Saturday task" not in exported


def test_report_rejects_a_bad_date() -> None:
    result = runner.invoke(app, ["report", "month", "--date", "2024-13-40"])

    assert result.exit_code == 2


def test_meeting_add_and_list() -> None:
    result = runner.invoke(
        app,
        ["meeting", "add", "Retro", "--date", "2099-01-05", "--time", "14:00", "-p", "Zoom"],
    )

    assert result.exit_code == 0, result.output
    assert "Retro" in result.output
    assert [m["title"] for m in MEETING_REPO.get_all_meetings()][-1] == "Retro"


def test_note_add_with_inline_content() -> None:
    result = runner.invoke(app, ["note", "add", "Ideas", "--content", "first line"])

    assert result.exit_code == 0, result.output
    assert "Ideas" in [note["title"] for note in NOTE_REPO.get_all_notes()]


def test_deleting_a_task_twice_is_a_usage_error() -> None:
    runner.invoke(app, ["task", "add", "Only once"])
    runner.invoke(app, ["task", "list"])
    assert runner.invoke(app, ["task", "delete", "1"]).exit_code == 0

    result = runner.invoke(app, ["task", "delete", "1"])

    assert result.exit_code == 2
    assert "no longer exists" in result.output


def test_delete_with_an_unknown_id_deletes_nothing() -> None:
    runner.invoke(app, ["task", "add", "Keep me"])
    runner.invoke(app, ["task", "list"])

    result = runner.invoke(app, ["task", "delete", "1,9"])

    assert result.exit_code == 2
    assert [task["title"] for task in TASK_REPO.get_all_tasks()] == ["Keep me"]


def test_status_with_an_unknown_id_changes_nothing() -> None:
    runner.invoke(app, ["task", "add", "Still pending"])
    runner.invoke(app, ["task", "list"])

    result = runner.invoke(app, ["task", "status", "1,9", "DONE"])

    assert result.exit_code == 2
    assert TASK_REPO.get_all_tasks()[0]["status"] == "PENDING"


def test_modify_after_delete_is_a_usage_error() -> None:
    runner.invoke(app, ["task", "add", "Gone soon"])
    runner.invoke(app, ["task", "list"])
    runner.invoke(app, ["task", "delete", "1"])

    result = runner.invoke(app, ["task", "modify", "1", "--title", "Back"])

    assert result.exit_code == 2
    assert TASK_REPO.get_all_tasks() == []


def test_deleting_a_note_or_meeting_twice_is_a_usage_error() -> None:
    runner.invoke(app, ["note", "add", "Scratch", "--content", "x"])
    runner.invoke(
        app, ["meeting", "add", "Sync", "--date", "2099-01-05", "--time", "09:00"]
    )
    runner.invoke(app, ["note", "list"])
    runner.invoke(app, ["meeting", "list"])
    assert runner.invoke(app, ["note", "delete", "1"]).exit_code == 0
    assert runner.invoke(app, ["meeting", "delete", "1"]).exit_code == 0

    assert runner.invoke(app, ["note", "delete", "1"]).exit_code == 2
    assert runner.invoke(app, ["meeting", "delete", "1"]).exit_code == 2
