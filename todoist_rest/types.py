import json
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

# Task.content is always sent, even when empty
REQUIRED_FIELDS = frozenset({"content"})
EMPTY_VALUES: tuple[Any, ...] = (None, "", 0, [], {})


class TimeUnit(str, Enum):
    minute = "minute"
    day = "day"


class Due(BaseModel):
    date: str
    is_recurring: bool = False
    string: str | None = None

    datetime: str | None = None
    timezone: str | None = None


class Duration(BaseModel):
    amount: int
    unit: TimeUnit


class Task(BaseModel):
    """A Todoist task as described by https://developer.todoist.com/rest/v2/#tasks.

    Everything except ``content`` is optional and left out of the request body
    when empty, so a task built with only ``content`` posts as
    ``{"content": ...}``.
    """

    model_config = ConfigDict(extra="ignore")

    content: str

    id: str | None = None
    description: str | None = None
    project_id: str | None = None
    section_id: str | None = None
    parent_id: str | None = None
    labels: list[str] | None = None
    priority: int | None = None
    order: int | None = None
    is_completed: bool | None = None
    creator_id: str | None = None
    assignee_id: str | None = None
    assigner_id: str | None = None
    created_at: str | None = None
    comment_count: int | None = None
    due: Due | None = None
    duration: Duration | None = None
    url: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload = self.model_dump(mode="json", exclude_none=True)
        return {
            key: value
            for key, value in payload.items()
            if key in REQUIRED_FIELDS or value not in EMPTY_VALUES
        }

    def to_json(self) -> str:
        return json.dumps(self.to_payload())


ASSIGNED_TO_SELF = "!(assigned to: others & assigned)"


class Filter:
    """A Todoist filter query, e.g. ``Filter("today") & ~Filter(label="exclude")``.

    Keyword terms are joined with ``&``. Combining two filters parenthesises
    the result.
    """

    def __init__(
        self,
        query: str | None = None,
        label: str | None = None,
        assigned_self: bool = False,
    ) -> None:
        terms = [query] if query is not None else []
        if label is not None:
            terms.append(f"@{label}")
        if assigned_self:
            terms.append(ASSIGNED_TO_SELF)
        self.query = " & ".join(terms)

    def __str__(self) -> str:
        return self.query

    def __repr__(self) -> str:
        return f"Filter({self.query!r})"

    def __bool__(self) -> bool:
        return bool(self.query)

    def _combine(self, operator: str, other: "Filter") -> "Filter":
        return Filter(f"({self.query} {operator} {other.query})")

    def __and__(self, other: "Filter") -> "Filter":
        return self._combine("&", other)

    def __or__(self, other: "Filter") -> "Filter":
        return self._combine("|", other)

    def __invert__(self) -> "Filter":
        return Filter(f"!({self.query})")
