from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest

from todoist_rest import config
from todoist_rest.client import Client, ClientConfig

from .fakes import FakeTransport

TOKEN = "0123456789abcdef"


@pytest.fixture()
def task_json() -> dict[str, Any]:
    """A full task object as the tasks endpoint returns it."""
    return {
        "creator_id": "2671355",
        "created_at": "2019-12-11T22:36:50.000000Z",
        "assignee_id": "2671362",
        "assigner_id": "2671355",
        "comment_count": 10,
        "is_completed": False,
        "content": "Buy Milk",
        "description": "",
        "due": {
            "date": "2016-09-01",
            "is_recurring": False,
            "datetime": "2016-09-01T12:00:00.000000Z",
            "string": "tomorrow at 12",
            "timezone": "Europe/Moscow",
        },
        "duration": {"amount": 15, "unit": "minute"},
        "id": "2995104339",
        "labels": ["Food", "Shopping"],
        "order": 1,
        "priority": 1,
        "project_id": "2203306141",
        "section_id": "7025",
        "parent_id": "2995104589",
        "url": "https://todoist.com/showTask?id=2995104339",
    }


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def client(transport: FakeTransport) -> Iterator[Client]:
    with Client(TOKEN, ClientConfig(transport=transport)) as c:
        yield c


@pytest.fixture(autouse=True)
def reset_config_cache():
    config._configs.clear()
    yield
    config._configs.clear()
