# SPDX-License-Identifier: MIT

import pendulum
import pytest
import typer

from omnitask.terminal.parse import parse_date, parse_id_list, parse_time


def test_parse_date_keywords_and_offsets() -> None:
    today = pendulum.today("local").date()

    assert parse_date("2024-06-12") == "2024-06-12"
    assert parse_date("today") == today.format("YYYY-MM-DD")
    assert parse_date("o") == today.add(days=1).format("YYYY-MM-DD")
    assert parse_date("-2") == today.subtract(days=2).format("YYYY-MM-DD")
    assert parse_date(None) is None


@pytest.mark.parametrize("value", ["2024-02-30", "next week", "12/06/2024"])
def test_parse_date_rejects_bad_input(value: str) -> None:
    with pytest.raises(typer.BadParameter):
        parse_date(value)


def test_parse_time() -> None:
    assert parse_time("9:05") == "09:05"
    assert parse_time("17:30") == "17:30"
    for bad in ["24:00", "7", "07:60"]:
        with pytest.raises(typer.BadParameter):
            parse_time(bad)


def test_parse_id_list() -> None:
    assert parse_id_list("3") == [3]
    assert parse_id_list("5,1-3,3") == [1, 2, 3, 5]
    with pytest.raises(typer.BadParameter):
        parse_id_list("3-1")
    with pytest.raises(typer.BadParameter):
        parse_id_list("a")
