# SPDX-License-Identifier: MIT

import pendulum
import pytest

from omnitask.model.report import ReportPeriod
from omnitask.model.task import TaskStatus
from omnitask.service.report import compute_range, generate_report, week_start
from omnitask.time import weekday_sunday_first

from .fakes import make_task


def titles(report) -> list[str]:
    return [task["title"] for task in report["tasks"]]


@pytest.mark.parametrize("offset", range(14))
def test_week_runs_tuesday_to_monday(offset: int) -> None:
    reference = pendulum.date(2024, 6, 3).add(days=offset)
    week = compute_range(ReportPeriod.WEEK, reference)

    assert week["start"].isoweekday() == 2
    assert week["end"].isoweekday() == 1
    assert (week["end"] - week["start"]).in_days() == 6
    assert week["start"] <= reference <= week["end"]


def test_week_start_on_a_tuesday_is_that_day() -> None:
    assert week_start(pendulum.date(2024, 6, 11)) == pendulum.date(2024, 6, 11)
    # Monday belongs to the week that started six days earlier
    assert week_start(pendulum.date(2024, 6, 17)) == pendulum.date(2024, 6, 11)


def test_week_report_for_a_wednesday() -> None:
    tasks = [
        make_task("Saturday", "2024-06-15"),
        make_task("Thursday", "2024-06-13"),
        make_task("Previous Monday", "2024-06-10"),
        make_task("Closing Monday", "2024-06-17"),
        make_task("Next Tuesday", "2024-06-18"),
    ]

    report = generate_report(tasks, ReportPeriod.WEEK, "2024-06-12")

    assert report["range"]["start"] == pendulum.date(2024, 6, 11)
    assert report["range"]["end"] == pendulum.date(2024, 6, 17)
    assert titles(report) == ["Thursday", "Closing Monday"]
    assert (
        report["range"]["label"]
        == "June 11 - June 17, 2024 (Tue-Mon, Excluding Weekends)"
    )


@pytest.mark.parametrize("offset", range(7))
def test_week_report_never_includes_weekends(offset: int) -> None:
    reference = pendulum.date(2024, 6, 11).add(days=offset)
    tasks = [
        make_task(str(day), day.format("YYYY-MM-DD"))
        for day in (reference.subtract(days=7).add(days=n) for n in range(21))
    ]

    report = generate_report(
        tasks, ReportPeriod.WEEK, reference.format("YYYY-MM-DD")
    )

    assert len(report["tasks"]) == 5
    for task in report["tasks"]:
        day = pendulum.from_format(task["date"], "YYYY-MM-DD").date()
        assert weekday_sunday_first(day) not in (0, 6)


def test_month_report_covers_only_that_month() -> None:
    tasks = [
        make_task("Feb", "2024-02-29"),
        make_task("Mar 1", "2024-03-01"),
        make_task("Mar 31", "2024-03-31", status=TaskStatus.DONE),
        make_task("Apr", "2024-04-01"),
        make_task("Last year", "2023-03-15"),
    ]

    report = generate_report(tasks, ReportPeriod.MONTH, "2024-03-01")

    assert titles(report) == ["Mar 1", "Mar 31"]
    assert report["range"]["label"] == "March 2024"


def test_year_and_day_reports() -> None:
    tasks = [
        make_task("New year", "2024-01-01"),
        make_task("Midsummer", "2024-06-12"),
        make_task("Next year", "2025-01-01"),
    ]

    year = generate_report(tasks, ReportPeriod.YEAR, "2024-06-12")
    day = generate_report(tasks, ReportPeriod.DAY, "2024-06-12")

    assert titles(year) == ["New year", "Midsummer"]
    assert year["range"]["label"] == "2024"
    assert titles(day) == ["Midsummer"]
    assert day["range"]["label"] == "Wednesday, June 12, 2024"


def test_malformed_task_dates_never_match() -> None:
    tasks = [
        make_task("Garbage", "not-a-date"),
        make_task("Impossible", "2024-02-30"),
        make_task("Empty", ""),
    ]

    for period in ReportPeriod:
        assert generate_report(tasks, period, "2024-02-14")["tasks"] == []


@pytest.mark.parametrize("reference", ["", "2024-6-12", "12/06/2024", "2024-13-01"])
def test_malformed_reference_date_is_rejected(reference: str) -> None:
    with pytest.raises(ValueError):
        generate_report([], ReportPeriod.WEEK, reference)


def test_report_does_not_mutate_or_alias_input() -> None:
    tasks = [make_task("Thursday", "2024-06-13")]

    report = generate_report(tasks, ReportPeriod.WEEK, "2024-06-12")
    report["tasks"][0]["title"] = "changed"

    assert tasks[0]["title"] == "Thursday"
    assert generate_report(tasks, ReportPeriod.WEEK, "2024-06-12") == generate_report(
        tasks, ReportPeriod.WEEK, "2024-06-12"
    )
