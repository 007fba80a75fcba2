# SPDX-License-Identifier: MIT

from omnitask.model.task import TaskStatus
from omnitask.query.filter import task_board_filter
from omnitask.query.sort import sort_items

from .fakes import make_task


def board():
    return [
        make_task("Submit Budget", "2024-06-13", TaskStatus.ON_GOING, description="Q4 plan"),
        make_task("Client Review", "2024-06-14", description="budget slides"),
        make_task("Kickoff", "2024-06-12", TaskStatus.DONE),
    ]


def test_no_filter_keeps_everything() -> None:
    assert len(task_board_filter().filter(board())) == 3  # type: ignore[arg-type]


def test_search_matches_title_or_description_ignoring_case() -> None:
    found = task_board_filter(search="BUDGET").filter(board())  # type: ignore[arg-type]

    assert [task["title"] for task in found] == ["Submit Budget", "Client Review"]


def test_search_and_status_combine() -> None:
    found = task_board_filter(search="budget", status=TaskStatus.PENDING).filter(
        board()  # type: ignore[arg-type]
    )

    assert [task["title"] for task in found] == ["Client Review"]


def test_status_only() -> None:
    found = task_board_filter(status=TaskStatus.DONE).filter(board())  # type: ignore[arg-type]

    assert [task["title"] for task in found] == ["Kickoff"]


def test_sort_items_by_date_then_descending() -> None:
    tasks = board()

    assert [t["title"] for t in sort_items(tasks, ["date"])] == [  # type: ignore[arg-type]
        "Kickoff",
        "Submit Budget",
        "Client Review",
    ]
    assert [t["title"] for t in sort_items(tasks, ["desc date"])] == [  # type: ignore[arg-type]
        "Client Review",
        "Submit Budget",
        "Kickoff",
    ]


def test_sort_items_breaks_ties_with_later_keys_and_puts_none_last() -> None:
    items = [
        {"id": "1", "date": "2024-06-13", "title": "b"},
        {"id": "2", "date": None, "title": "a"},
        {"id": "3", "date": "2024-06-13", "title": "a"},
        {"id": "4", "date": "2024-06-12", "title": "z"},
    ]

    assert [item["id"] for item in sort_items(items, ["date", "title"])] == [
        "4",
        "3",
        "1",
        "2",
    ]
    assert [item["id"] for item in sort_items(items, ["desc date", "title"])] == [
        "3",
        "1",
        "4",
        "2",
    ]
