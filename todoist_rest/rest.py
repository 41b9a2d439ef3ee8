import asyncio
import logging
from http import HTTPStatus
from typing import Any

import aiohttp

from todoist_rest.client import TASKS_PATH
from todoist_rest.config import API_URL
from todoist_rest.errors import TodoistHTTPError, TodoistRequestError
from todoist_rest.parsing import decode_task, decode_tasks, encode_task
from todoist_rest.types import Filter, Task

logger = logging.getLogger(__name__)


def _headers(api_token: str) -> dict[str, str]:
    return {
        "Authorization": f"Bearer {api_token}",
        "Content-Type": "application/json",
    }


async def _send(
    session: aiohttp.ClientSession,
    api_token: str,
    method: str,
    base_url: str,
    **kwargs: Any,
) -> tuple[int, str]:
    url = f"{base_url.rstrip('/')}/{TASKS_PATH}"

    try:
        async with session.request(
            method, url, headers=_headers(api_token), **kwargs
        ) as response:
            raw = await response.read()
            # undecodable bytes are left for the JSON decoder to reject
            body = raw.decode("utf-8", errors="replace")
            return response.status, body
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error("Failed to send %s %s: %r", method, url, e)
        raise TodoistRequestError(f"Failed to send {method} {url}: {e!r}") from e


async def list_tasks(
    session: aiohttp.ClientSession,
    api_token: str,
    task_filter: Filter | None = None,
    *,
    base_url: str = API_URL,
) -> list[Task]:
    params = {"filter": str(task_filter)} if task_filter else None

    status, body = await _send(session, api_token, "GET", base_url, params=params)

    if status != HTTPStatus.OK:
        logger.error("Failed to retrieve tasks: %s", status)
        raise TodoistHTTPError("retrieve tasks", status, body)

    return decode_tasks(body)


async def create_task(
    session: aiohttp.ClientSession,
    api_token: str,
    task: Task,
    *,
    base_url: str = API_URL,
) -> Task | None:
    data = encode_task(task)

    status, body = await _send(session, api_token, "POST", base_url, data=data)

    if status != HTTPStatus.OK:
        logger.error("Failed to create task: %s", status)
        raise TodoistHTTPError("create task", status, body)

    logger.info("Created task: %s", task.content)
    return decode_task(body)
