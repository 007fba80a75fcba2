# SPDX-License-Identifier: MIT

import atexit

from omnitask.repository.configuration import CONFIGURATION_REPO
from omnitask.repository.id_map import ID_MAP_REPO


def flush() -> None:
    # Entity collections write through on every change; only these are deferred
    CONFIGURATION_REPO.flush()
    ID_MAP_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
