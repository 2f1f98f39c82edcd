from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from taskmaster.domain.entities import TaskEntity, TaskStats

logger = logging.getLogger(__name__)

StoreListener = Callable[["TaskListStore"], None]


class TaskListStore:
    """In-memory owner of the task list and the transient screen flags.

    Lives as long as the main window. Every write replaces ``tasks`` with a
    new list, so snapshots handed out by ``list_tasks`` never change under
    the caller.
    """

    def __init__(self) -> None:
        self.tasks: list[TaskEntity] = []
        self.next_id = 1
        self.busy = False
        self.dialog_open = False
        self._listeners: list[StoreListener] = []

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def list_tasks(self) -> list[TaskEntity]:
        return list(self.tasks)

    def get_task(self, task_id: int) -> TaskEntity | None:
        return next((t for t in self.tasks if t.id == task_id), None)

    def add_task(self, title: str, description: str = "") -> TaskEntity:
        task = TaskEntity(id=self.next_id, title=title, description=description)
        self.tasks = [*self.tasks, task]
        self.next_id += 1
        self._notify()
        return task

    def toggle_complete(self, task_id: int, completed: bool) -> None:
        task = self.get_task(task_id)
        if task is None:
            return
        updated = replace(task, is_completed=completed)
        self.tasks = [updated if t.id == task_id else t for t in self.tasks]
        self._notify()

    def remove_task(self, task_id: int) -> None:
        if self.get_task(task_id) is None:
            return
        self.tasks = [t for t in self.tasks if t.id != task_id]
        self._notify()

    def stats(self) -> TaskStats:
        total = len(self.tasks)
        completed = sum(1 for task in self.tasks if task.is_completed)
        return TaskStats(total=total, completed=completed, pending=total - completed)

    def set_busy(self, busy: bool) -> None:
        if self.busy == busy:
            return
        self.busy = busy
        self._notify()

    def open_dialog(self) -> None:
        if self.dialog_open:
            return
        self.dialog_open = True
        self._notify()

    def close_dialog(self) -> None:
        if not self.dialog_open:
            return
        self.dialog_open = False
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:  # noqa: BLE001
                logger.exception("Store listener %r failed", listener)
