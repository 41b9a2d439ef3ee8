import json
import logging
from typing import Any

from pydantic import ValidationError

from todoist_rest.errors import TodoistDecodeError, TodoistEncodeError
from todoist_rest.types import Task

logger = logging.getLogger(__name__)


def encode_task(task: Task) -> str:
    try:
        return task.to_json()
    except (TypeError, ValueError) as e:
        logger.error("Failed to encode task: %s", e)
        raise TodoistEncodeError(f"Failed to encode task: {e}") from e


def _load(body: str) -> Any:
    try:
        return json.loads(body)
    except ValueError as e:
        logger.error("Response is not valid JSON: %s", e)
        raise TodoistDecodeError(f"Response is not valid JSON: {body!r}") from e


def decode_tasks(body: str) -> list[Task]:
    res = _load(body)

    if not isinstance(res, list):
        logger.error("Response is not a list: %s", type(res))
        raise TodoistDecodeError("Response is not a list")

    try:
        return [Task.model_validate(task) for task in res]
    except ValidationError as e:
        logger.error("Response holds an invalid task: %s", e)
        raise TodoistDecodeError(f"Response holds an invalid task: {e}") from e


def decode_task(body: str) -> Task | None:
    if not body.strip():
        return None

    res = _load(body)

    if not isinstance(res, dict):
        logger.error("Response is not an object: %s", type(res))
        raise TodoistDecodeError("Response is not an object")

    try:
        return Task.model_validate(res)
    except ValidationError as e:
        logger.error("Response is not a task: %s", e)
        raise TodoistDecodeError(f"Response is not a task: {e}") from e
