import logging
from dataclasses import dataclass
from http import HTTPStatus
from types import TracebackType
from typing import Any

import requests
from requests.adapters import BaseAdapter

from todoist_rest.config import API_URL, DEFAULT_TIMEOUT, ConfigValues
from todoist_rest.errors import TodoistHTTPError, TodoistRequestError
from todoist_rest.log_setup import log_response
from todoist_rest.parsing import decode_task, decode_tasks, encode_task
from todoist_rest.types import Filter, Task

logger = logging.getLogger(__name__)

TASKS_PATH = "tasks"


@dataclass
class ClientConfig:
    transport: BaseAdapter | None = None
    base_url: str = API_URL
    timeout: float | None = DEFAULT_TIMEOUT


class Client:
    """Blocking client for the Todoist task endpoint.

    Pass ``ClientConfig(transport=...)`` to swap the HTTP adapter every call
    goes through, e.g. for proxies, custom TLS or a fake in tests.
    """

    def __init__(self, token: str, config: ClientConfig | None = None) -> None:
        self.config = config or ClientConfig()
        self._token = token
        self._base_url = self.config.base_url.rstrip("/") + "/"

        self._session = requests.Session()
        self._session.hooks["response"].append(log_response)
        if self.config.transport is not None:
            self._session.mount("https://", self.config.transport)
            self._session.mount("http://", self.config.transport)

    @classmethod
    def from_config(
        cls, config_values: ConfigValues, transport: BaseAdapter | None = None
    ) -> "Client":
        todoist = config_values.todoist
        return cls(
            todoist.token,
            ClientConfig(
                transport=transport, base_url=todoist.base_url, timeout=todoist.timeout
            ),
        )

    def __enter__(self) -> "Client":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def list_tasks(self, task_filter: Filter | None = None) -> list[Task]:
        params = {"filter": str(task_filter)} if task_filter else None

        status, body = self._request("GET", TASKS_PATH, params=params)

        if status != HTTPStatus.OK:
            logger.error("Failed to retrieve tasks: %s", status)
            raise TodoistHTTPError("retrieve tasks", status, body)

        return decode_tasks(body)

    def create_task(self, task: Task) -> Task | None:
        data = encode_task(task)

        status, body = self._request("POST", TASKS_PATH, data=data)

        if status != HTTPStatus.OK:
            logger.error("Failed to create task: %s", status)
            raise TodoistHTTPError("create task", status, body)

        logger.info("Created task: %s", task.content)
        return decode_task(body)

    def _request(self, method: str, path: str, **kwargs: Any) -> tuple[int, str]:
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
        }
        url = f"{self._base_url}{path}"

        try:
            with self._session.request(
                method, url, headers=headers, timeout=self.config.timeout, **kwargs
            ) as response:
                return response.status_code, response.text
        except requests.RequestException as e:
            logger.error("Failed to send %s %s: %s", method, url, e)
            raise TodoistRequestError(f"Failed to send {method} {url}: {e}") from e
