import configparser
import logging
from dataclasses import dataclass
from pathlib import Path

from todoist_rest.errors import TodoistConfigError

logger = logging.getLogger(__name__)

API_URL = "https://api.todoist.com/rest/v2/"
DEFAULT_TIMEOUT = 10.0
DEFAULT_CONFIG_PATH = Path("settings.cfg")


@dataclass
class TodoistConfig:
    token: str
    base_url: str = API_URL
    timeout: float = DEFAULT_TIMEOUT


@dataclass
class ConfigValues:
    todoist: TodoistConfig


_configs: dict[Path, ConfigValues] = {}


def load_config(
    path: Path | str = DEFAULT_CONFIG_PATH, reload: bool = False
) -> ConfigValues:
    key = Path(path).resolve()
    if key in _configs and not reload:
        return _configs[key]

    config = configparser.ConfigParser()
    if not config.read(path):
        logger.error("Config file not found: %s", path)
        raise TodoistConfigError(f"Config file not found: {path}")

    try:
        todoist_config = TodoistConfig(
            token=config.get("TODOIST", "TOKEN"),
            base_url=config.get("TODOIST", "BASE_URL", fallback=API_URL),
            timeout=config.getfloat("TODOIST", "TIMEOUT", fallback=DEFAULT_TIMEOUT),
        )

    except (configparser.NoSectionError, configparser.NoOptionError) as e:
        logger.exception("Todoist config set incorrectly")
        raise TodoistConfigError("Todoist config set incorrectly") from e

    except ValueError as e:
        logger.exception("Todoist timeout is not a number")
        raise TodoistConfigError("Todoist timeout is not a number") from e

    if not todoist_config.base_url.endswith("/"):
        todoist_config.base_url += "/"

    _configs[key] = ConfigValues(todoist=todoist_config)
    return _configs[key]
