# SPDX-License-Identifier: MIT

from omnitask.model.entity_id import generate_entity_id
from omnitask.model.meeting import Meeting
from omnitask.model.note import Note
from omnitask.model.task import Task, TaskStatus
from omnitask.template.meeting import get_meeting_template
from omnitask.template.note import get_note_template
from omnitask.template.task import get_task_template
from omnitask.time import date_to_str, now_utc


def get_seed_tasks() -> list[Task]:
    today = now_utc().in_tz("local").date()

    kickoff = get_task_template()
    kickoff["id"] = generate_entity_id()
    kickoff["title"] = "Project Kickoff"
    kickoff["description"] = "Initial meeting with stakeholders"
    kickoff["date"] = date_to_str(today)
    kickoff["status"] = TaskStatus.DONE
    kickoff["remarks"] = "Went well"

    budget = get_task_template()
    budget["id"] = generate_entity_id()
    budget["title"] = "Submit Budget"
    budget["description"] = "Q4 Financial planning"
    budget["date"] = date_to_str(today.add(days=1))
    budget["status"] = TaskStatus.ON_GOING
    budget["remarks"] = "Waiting for approval"
    budget["reminder"] = True

    review = get_task_template()
    review["id"] = generate_entity_id()
    review["title"] = "Client Review"
    review["description"] = "Review designs with client"
    review["date"] = date_to_str(today.add(days=2))

    return [kickoff, budget, review]


def get_seed_notes() -> list[Note]:
    note = get_note_template()
    note["id"] = generate_entity_id()
    note["title"] = "Meeting Ideas"
    note["content"] = "Discuss timeline extension and budget constraints."
    return [note]


def get_seed_meetings() -> list[Meeting]:
    meeting = get_meeting_template()
    meeting["id"] = generate_entity_id()
    meeting["title"] = "Team Standup"
    meeting["time"] = "10:00"
    meeting["description"] = "Daily sync"
    meeting["platform"] = "Google Meet"
    return [meeting]
