"""
Delayed operations, committed one at a time in submission order.

Each submitted operation waits for every earlier one to commit (or be
cancelled) before its own delay starts. The caller gets a
``concurrent.futures.Future`` that resolves with the action's return value
and can be cancelled until the action runs.
"""

from __future__ import annotations

import itertools
import logging
from collections import deque
from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Any, Protocol

from taskmaster.domain.enums import OperationKind

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Runs a callback once after ``delay_ms`` on the caller's thread."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...


@dataclass(eq=False)
class _Operation:
    seq: int
    kind: OperationKind
    delay_ms: int
    action: Callable[[], Any]
    future: Future = field(default_factory=Future)
    timer: TimerHandle | None = None


class OperationQueue:
    def __init__(
        self,
        scheduler: Scheduler,
        on_busy_changed: Callable[[bool], None] | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._on_busy_changed = on_busy_changed
        self._pending: deque[_Operation] = deque()
        self._seq = itertools.count(1)

    @property
    def busy(self) -> bool:
        return bool(self._pending)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def submit(self, kind: OperationKind, delay_ms: int, action: Callable[[], Any]) -> Future:
        op = _Operation(seq=next(self._seq), kind=kind, delay_ms=max(int(delay_ms), 0), action=action)
        was_busy = self.busy
        self._pending.append(op)
        op.future.add_done_callback(lambda fut, op=op: self._on_done(op, fut))
        logger.debug("Queued %s #%d (delay %d ms)", op.kind, op.seq, op.delay_ms)
        if not was_busy:
            self._emit_busy(True)
        self._arm_head()
        return op.future

    def cancel_all(self) -> int:
        cancelled = 0
        for op in reversed(list(self._pending)):
            if op.future.cancel():
                cancelled += 1
        if cancelled:
            logger.warning("Cancelled %d pending operation(s)", cancelled)
        return cancelled

    def _arm_head(self) -> None:
        if not self._pending:
            return
        head = self._pending[0]
        if head.timer is not None:
            return
        head.timer = self._scheduler.call_later(head.delay_ms, lambda: self._fire(head))

    def _fire(self, op: _Operation) -> None:
        if not self._pending or self._pending[0] is not op:
            return
        op.timer = None
        if not op.future.set_running_or_notify_cancel():
            return
        try:
            result = op.action()
        except Exception as exc:
            logger.exception("Operation %s #%d failed", op.kind, op.seq)
            op.future.set_exception(exc)
        else:
            logger.debug("Committed %s #%d", op.kind, op.seq)
            op.future.set_result(result)

    def _on_done(self, op: _Operation, future: Future) -> None:
        if future.cancelled():
            logger.debug("Cancelled %s #%d", op.kind, op.seq)
            if op.timer is not None:
                op.timer.cancel()
                op.timer = None
        try:
            self._pending.remove(op)
        except ValueError:
            return
        if not self._pending:
            self._emit_busy(False)
        else:
            self._arm_head()

    def _emit_busy(self, busy: bool) -> None:
        if self._on_busy_changed:
            self._on_busy_changed(busy)
