# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "omnitask"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_TASKS_PATH: Path = DATA_PATH / "tasks.yaml"
DATA_NOTES_PATH: Path = DATA_PATH / "notes.yaml"
DATA_MEETINGS_PATH: Path = DATA_PATH / "meetings.yaml"
DATA_NOTIFICATIONS_PATH: Path = DATA_PATH / "notifications.yaml"
DATA_ID_MAP_PATH: Path = DATA_PATH / "id_map.yaml"
DATA_LOG_FILE_PATH: Path = DATA_PATH / "omnitask.log"


class Configuration(TypedDict):
    show_header: bool
    data_path: Optional[str]
    native_notifications: bool
    reminder_initial_delay_seconds: float
    reminder_interval_seconds: float
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "data_path": None,
        "native_notifications": True,
        "reminder_initial_delay_seconds": 3.0,
        "reminder_interval_seconds": 60.0 * 60.0,
        "log_level": "WARNING",
    }


def set_data_path(data_path: Path) -> None:
    """Point every data file at data_path."""
    global \
        DATA_PATH, \
        DATA_TASKS_PATH, \
        DATA_NOTES_PATH, \
        DATA_MEETINGS_PATH, \
        DATA_NOTIFICATIONS_PATH, \
        DATA_ID_MAP_PATH, \
        DATA_LOG_FILE_PATH

    DATA_PATH = data_path
    DATA_TASKS_PATH = DATA_PATH / "tasks.yaml"
    DATA_NOTES_PATH = DATA_PATH / "notes.yaml"
    DATA_MEETINGS_PATH = DATA_PATH / "meetings.yaml"
    DATA_NOTIFICATIONS_PATH = DATA_PATH / "notifications.yaml"
    DATA_ID_MAP_PATH = DATA_PATH / "id_map.yaml"
    DATA_LOG_FILE_PATH = DATA_PATH / "omnitask.log"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are used.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
