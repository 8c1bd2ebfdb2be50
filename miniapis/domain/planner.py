"""Domain helpers for planner ordering and summaries."""
from __future__ import annotations

from typing import Any, Mapping

# Ids stay within the range a JavaScript client can represent exactly.
MAX_SAFE_INTEGER = 2**53 - 1


def sort_newest_first(items: list[dict]) -> None:
    """Order events/tasks by ``time`` descending, in place (stable)."""
    items.sort(key=lambda item: item["time"], reverse=True)


def user_summary(user: Mapping[str, Any]) -> dict:
    return {"uid": user["uid"], "uname": user["uname"]}


def event_summary(event: Mapping[str, Any]) -> dict:
    return {"eid": event["eid"], "title": event["title"], "time": event["time"]}


def task_summary(task: Mapping[str, Any]) -> dict:
    return {"tid": task["tid"], "title": task["title"], "time": task["time"], "done": task["done"]}


def normalize_id(value: Any) -> Any:
    """Integer strings ("123") refer to the integer id; anything else is kept."""
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return value
    return value
