# SPDX-License-Identifier: MIT

from enum import StrEnum
from typing import TypedDict

import pendulum

from omnitask.model.task import Task


class ReportPeriod(StrEnum):
    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    YEAR = "YEAR"


class ReportRange(TypedDict):
    # Both ends inclusive
    start: pendulum.Date
    end: pendulum.Date
    label: str


class Report(TypedDict):
    period: ReportPeriod
    reference_date: str
    range: ReportRange
    tasks: list[Task]
