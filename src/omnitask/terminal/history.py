# SPDX-License-Identifier: MIT

from omnitask.repository.id_map import ID_MAP_REPO
from omnitask.repository.notification import NOTIFICATION_REPO
from omnitask.repository.task import TASK_REPO
from omnitask.service.history import build_task_history
from omnitask.view.views.history import history_view


def history() -> None:
    """Tasks split into past, today and future."""
    ID_MAP_REPO.clear_ids("tasks")
    history_view(
        build_task_history(TASK_REPO.get_all_tasks()),
        NOTIFICATION_REPO.unread_count(),
    )
