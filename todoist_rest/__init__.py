from todoist_rest.client import Client, ClientConfig
from todoist_rest.config import API_URL, load_config
from todoist_rest.errors import (
    TodoistConfigError,
    TodoistDecodeError,
    TodoistEncodeError,
    TodoistError,
    TodoistHTTPError,
    TodoistRequestError,
)
from todoist_rest.types import Due, Duration, Filter, Task, TimeUnit

__all__ = [
    "API_URL",
    "Client",
    "ClientConfig",
    "Due",
    "Duration",
    "Filter",
    "Task",
    "TimeUnit",
    "TodoistConfigError",
    "TodoistDecodeError",
    "TodoistEncodeError",
    "TodoistError",
    "TodoistHTTPError",
    "TodoistRequestError",
    "load_config",
]
