from __future__ import annotations

import json

from todoist_rest.types import Due, Duration, Filter, Task, TimeUnit


def test_decode_full_task(task_json):
    task = Task.model_validate(task_json)

    assert task.id == "2995104339"
    assert task.content == "Buy Milk"
    assert task.labels == ["Food", "Shopping"]
    assert task.due == Due(
        date="2016-09-01",
        is_recurring=False,
        datetime="2016-09-01T12:00:00.000000Z",
        string="tomorrow at 12",
        timezone="Europe/Moscow",
    )
    assert task.duration == Duration(amount=15, unit=TimeUnit.minute)
    assert task.comment_count == 10


def test_decode_leaves_missing_fields_unset():
    task = Task.model_validate({"id": "1", "content": "Call mom"})

    assert task.content == "Call mom"
    assert task.description is None
    assert task.labels is None
    assert task.due is None
    assert task.duration is None
    assert task.priority is None


def test_decode_ignores_unknown_fields():
    task = Task.model_validate({"content": "x", "sync_id": None, "deadline": None})

    assert task == Task(content="x")


def test_payload_with_content_only():
    assert Task(content="Buy milk").to_payload() == {"content": "Buy milk"}


def test_payload_keeps_empty_content():
    assert Task(content="").to_payload() == {"content": ""}


def test_payload_omits_zero_values():
    task = Task(
        content="Buy milk",
        description="",
        labels=[],
        priority=0,
        order=0,
        is_completed=False,
        comment_count=0,
    )

    assert task.to_payload() == {"content": "Buy milk"}


def test_payload_keeps_set_values():
    task = Task(
        content="Buy milk",
        priority=4,
        is_completed=True,
        labels=["Food"],
        due=Due(date="2024-05-01", string="May 1"),
        duration=Duration(amount=2, unit=TimeUnit.day),
    )

    assert task.to_payload() == {
        "content": "Buy milk",
        "priority": 4,
        "is_completed": True,
        "labels": ["Food"],
        "due": {"date": "2024-05-01", "is_recurring": False, "string": "May 1"},
        "duration": {"amount": 2, "unit": "day"},
    }


def test_json_round_trip(task_json):
    task = Task.model_validate(task_json)

    decoded = Task.model_validate_json(task.to_json())

    # description="" and is_completed=False are dropped on encode
    unset = {"description": None, "is_completed": None}
    assert decoded == task.model_copy(update=unset)
    assert json.loads(task.to_json())["due"]["timezone"] == "Europe/Moscow"


def test_filter_label_and_assigned_self():
    task_filter = Filter("today", label="shame", assigned_self=True)

    assert str(task_filter) == "today & @shame & !(assigned to: others & assigned)"


def test_filter_operators():
    today = Filter("today")
    overdue = Filter("overdue")

    assert str(today | overdue) == "(today | overdue)"
    assert str(today & ~Filter(label="exclude")) == "(today & !(@exclude))"


def test_empty_filter_is_falsy():
    assert not Filter()
    assert Filter("today")
