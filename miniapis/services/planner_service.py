"""
myPlanner data access: users, events and tasks.

All three collections are flat lists inside one JSON document. Relationships
(event/task owner, event shared users) are plain uid references maintained by
linear scans. Input is expected to be validated by the caller; this layer only
enforces referential rules (owner exists, unique usernames).
"""

from __future__ import annotations

import copy
import logging
import random
from typing import Any, Callable, Iterable

from miniapis.core.config import get_settings
from miniapis.domain.planner import (
    MAX_SAFE_INTEGER,
    event_summary,
    normalize_id,
    sort_newest_first,
    task_summary,
    user_summary,
)
from miniapis.repositories.json_storage import JsonDocumentStore

logger = logging.getLogger(__name__)


class PlannerError(Exception):
    """Base exception for planner data access."""


class NotFoundError(PlannerError):
    """Raised when a referenced user, event or task does not exist."""

    def __init__(self, kind: str, ident: Any):
        super().__init__(f"{kind} {ident} not found")
        self.kind = kind
        self.ident = ident


class UsernameTakenError(PlannerError):
    """Raised when a username is already used by another user."""

    def __init__(self, uname: str):
        super().__init__(f"Username {uname!r} already exists")
        self.uname = uname


class PlannerService:
    """Owns the planner document and exposes CRUD helpers over it."""

    def __init__(
        self,
        store: JsonDocumentStore | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        if store is None:
            settings = get_settings()
            store = JsonDocumentStore(settings.planner_file, settings.planner_default_file)
        self.store = store
        self.rng = rng or random.Random()
        for key in ("users", "events", "tasks"):
            self.store.data.setdefault(key, [])

    # -------------------------- helpers --------------------------
    @property
    def users(self) -> list[dict]:
        return self.store.data["users"]

    @property
    def events(self) -> list[dict]:
        return self.store.data["events"]

    @property
    def tasks(self) -> list[dict]:
        return self.store.data["tasks"]

    def _new_id(self, items: Iterable[dict], key: str) -> int:
        used = {item[key] for item in items}
        while True:
            candidate = self.rng.randrange(MAX_SAFE_INTEGER)
            if candidate not in used:
                return candidate

    def _find(self, items: list[dict], key: str, ident: Any, kind: str) -> dict:
        ident = normalize_id(ident)
        for item in items:
            if item[key] == ident:
                return item
        raise NotFoundError(kind, ident)

    def _check_user(self, uid: Any) -> int:
        """Return the uid as stored in the document."""
        return self.get_user(uid)["uid"]

    def dump(self) -> dict:
        """Deep copy of the whole document, for debugging."""
        return copy.deepcopy(self.store.data)

    # -------------------------- users --------------------------
    def get_user(self, uid: Any) -> dict:
        return self._find(self.users, "uid", uid, "User")

    def username_exists(self, uname: str) -> bool:
        return any(user["uname"] == uname for user in self.users)

    def list_user_summaries(self) -> list[dict]:
        return [user_summary(user) for user in self.users]

    def add_user(self, name: str, uname: str, hashed_pass: str) -> int:
        if self.username_exists(uname):
            raise UsernameTakenError(uname)
        uid = self._new_id(self.users, "uid")
        self.users.append({"uid": uid, "name": name, "uname": uname, "hashedPass": hashed_pass})
        self.store.save()
        logger.info("Registered user %s (%s)", uid, uname)
        return uid

    def edit_username(self, uid: Any, new_uname: str) -> None:
        user = self.get_user(uid)
        if user["uname"] == new_uname:
            return
        if self.username_exists(new_uname):
            raise UsernameTakenError(new_uname)
        user["uname"] = new_uname
        self.store.save()

    def edit_user(self, uid: Any, name: str, hashed_pass: str) -> None:
        user = self.get_user(uid)
        user["name"] = name
        user["hashedPass"] = hashed_pass
        self.store.save()

    def delete_user(self, uid: Any) -> None:
        """Delete a user, their events and tasks, and unshare them everywhere."""
        uid = self._check_user(uid)
        data = self.store.data
        data["users"] = [user for user in self.users if user["uid"] != uid]
        data["events"] = [event for event in self.events if event["owner"] != uid]
        data["tasks"] = [task for task in self.tasks if task["owner"] != uid]
        for event in data["events"]:
            event["sharedUsers"] = [shared for shared in event["sharedUsers"] if shared != uid]
        self.store.save()
        logger.info("Deleted user %s", uid)

    # -------------------------- events --------------------------
    def get_event(self, eid: Any) -> dict:
        return self._find(self.events, "eid", eid, "Event")

    def list_event_summaries(self, uid: Any) -> list[dict]:
        uid = self._check_user(uid)
        return [event_summary(event) for event in self.events if event["owner"] == uid]

    def list_shared_event_summaries(self, uid: Any) -> list[dict]:
        uid = self._check_user(uid)
        return [event_summary(event) for event in self.events if uid in event["sharedUsers"]]

    def add_event(self, uid: Any, event_data: dict) -> int:
        uid = self._check_user(uid)
        eid = self._new_id(self.events, "eid")
        self.events.append(
            {
                "eid": eid,
                "title": event_data["title"],
                "time": event_data["time"],
                "description": event_data.get("description", ""),
                "owner": uid,
                "public": bool(event_data.get("public", False)),
                "sharedUsers": [],
            }
        )
        sort_newest_first(self.events)
        self.store.save()
        logger.info("Created event %s for user %s", eid, uid)
        return eid

    def edit_event(self, eid: Any, event_data: dict) -> None:
        event = self.get_event(eid)
        event["title"] = event_data["title"]
        event["time"] = event_data["time"]
        event["description"] = event_data.get("description", "")
        event["public"] = bool(event_data.get("public", False))
        sort_newest_first(self.events)
        self.store.save()

    def add_shared_user(self, eid: Any, uid: Any) -> None:
        uid = self._check_user(uid)
        event = self.get_event(eid)
        if uid in event["sharedUsers"]:
            return
        event["sharedUsers"].append(uid)
        self.store.save()

    def delete_event(self, eid: Any) -> None:
        eid = self.get_event(eid)["eid"]
        self.store.data["events"] = [event for event in self.events if event["eid"] != eid]
        self.store.save()
        logger.info("Deleted event %s", eid)

    # -------------------------- tasks --------------------------
    def get_task(self, tid: Any) -> dict:
        return self._find(self.tasks, "tid", tid, "Task")

    def _task_summaries(self, uid: Any, keep: Callable[[dict], bool] | None = None) -> list[dict]:
        uid = self._check_user(uid)
        return [
            task_summary(task)
            for task in self.tasks
            if task["owner"] == uid and (keep is None or keep(task))
        ]

    def list_task_summaries(self, uid: Any) -> list[dict]:
        return self._task_summaries(uid)

    def list_unfinished_task_summaries(self, uid: Any) -> list[dict]:
        return self._task_summaries(uid, lambda task: not task["done"])

    def list_finished_task_summaries(self, uid: Any) -> list[dict]:
        return self._task_summaries(uid, lambda task: bool(task["done"]))

    def add_task(self, uid: Any, task_data: dict) -> int:
        uid = self._check_user(uid)
        tid = self._new_id(self.tasks, "tid")
        self.tasks.append(
            {
                "tid": tid,
                "title": task_data["title"],
                "time": task_data["time"],
                "description": task_data.get("description", ""),
                "owner": uid,
                "done": False,
            }
        )
        sort_newest_first(self.tasks)
        self.store.save()
        logger.info("Created task %s for user %s", tid, uid)
        return tid

    def edit_task(self, tid: Any, task_data: dict) -> None:
        task = self.get_task(tid)
        task["title"] = task_data["title"]
        task["time"] = task_data["time"]
        task["description"] = task_data.get("description", "")
        sort_newest_first(self.tasks)
        self.store.save()

    def set_task_done(self, tid: Any, done: bool) -> None:
        task = self.get_task(tid)
        task["done"] = bool(done)
        self.store.save()

    def toggle_task_done(self, tid: Any) -> bool:
        task = self.get_task(tid)
        task["done"] = not task["done"]
        self.store.save()
        return task["done"]

    def delete_task(self, tid: Any) -> None:
        tid = self.get_task(tid)["tid"]
        self.store.data["tasks"] = [task for task in self.tasks if task["tid"] != tid]
        self.store.save()
        logger.info("Deleted task %s", tid)
