from __future__ import annotations

from collections.abc import Callable

import pytest

from taskmaster.infra.store import TaskListStore
from taskmaster.services.task_service import TaskService


class FakeTimer:
    def __init__(self, due_ms: int, callback: Callable[[], None]) -> None:
        self.due_ms = due_ms
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Manual clock: timers only fire when ``advance`` moves time past them."""

    def __init__(self) -> None:
        self.now_ms = 0
        self.timers: list[FakeTimer] = []

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(self.now_ms + delay_ms, callback)
        self.timers.append(timer)
        return timer

    def active_timers(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.cancelled and not t.fired]

    def advance(self, ms: int) -> None:
        target = self.now_ms + ms
        while True:
            due = [t for t in self.active_timers() if t.due_ms <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.due_ms)
            self.now_ms = timer.due_ms
            timer.fired = True
            timer.callback()
        self.now_ms = target


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def store() -> TaskListStore:
    return TaskListStore()


@pytest.fixture()
def service(store: TaskListStore, scheduler: FakeScheduler) -> TaskService:
    return TaskService(store, scheduler, add_delay_ms=500, remove_delay_ms=300)
