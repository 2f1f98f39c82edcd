from __future__ import annotations

import logging
from concurrent.futures import Future

from taskmaster.domain.entities import TaskEntity, TaskStats
from taskmaster.domain.enums import OperationKind
from taskmaster.infra.store import TaskListStore
from taskmaster.services.operations import OperationQueue, Scheduler

logger = logging.getLogger(__name__)

DEFAULT_ADD_DELAY_MS = 500
DEFAULT_REMOVE_DELAY_MS = 300


class TaskService:
    def __init__(
        self,
        store: TaskListStore,
        scheduler: Scheduler,
        add_delay_ms: int = DEFAULT_ADD_DELAY_MS,
        remove_delay_ms: int = DEFAULT_REMOVE_DELAY_MS,
    ) -> None:
        self._store = store
        self._queue = OperationQueue(scheduler, on_busy_changed=store.set_busy)
        self.add_delay_ms = add_delay_ms
        self.remove_delay_ms = remove_delay_ms

    @property
    def is_busy(self) -> bool:
        return self._store.busy

    def list_tasks(self) -> list[TaskEntity]:
        return self._store.list_tasks()

    def get_task(self, task_id: int) -> TaskEntity | None:
        return self._store.get_task(task_id)

    def get_stats(self) -> TaskStats:
        return self._store.stats()

    def open_dialog(self) -> None:
        self._store.open_dialog()

    def dismiss_dialog(self) -> None:
        self._store.close_dialog()

    def create_task(self, title: str, description: str = "") -> Future | None:
        if not title or not title.strip():
            logger.debug("Ignoring task with blank title")
            return None
        return self._queue.submit(
            OperationKind.ADD,
            self.add_delay_ms,
            lambda: self._commit_add(title, description or ""),
        )

    def set_completed(self, task_id: int, completed: bool) -> None:
        self._store.toggle_complete(task_id, completed)

    def delete_task(self, task_id: int) -> Future:
        return self._queue.submit(
            OperationKind.REMOVE,
            self.remove_delay_ms,
            lambda: self._commit_remove(task_id),
        )

    def shutdown(self) -> None:
        self._queue.cancel_all()

    def _commit_add(self, title: str, description: str) -> TaskEntity:
        task = self._store.add_task(title, description)
        self._store.close_dialog()
        logger.info("Added task %d", task.id)
        return task

    def _commit_remove(self, task_id: int) -> None:
        if self._store.get_task(task_id) is None:
            logger.debug("Task %d already gone", task_id)
            return
        self._store.remove_task(task_id)
        logger.info("Removed task %d", task_id)
