from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, QTimer


class _QtTimerHandle:
    def __init__(self, timer: QTimer) -> None:
        self._timer = timer

    def cancel(self) -> None:
        if self._timer.isActive():
            self._timer.stop()
        self._timer.deleteLater()


class QtTimerScheduler:
    def __init__(self, parent: QObject) -> None:
        self._parent = parent

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> _QtTimerHandle:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setInterval(max(delay_ms, 0))

        def fire() -> None:
            timer.deleteLater()
            callback()

        timer.timeout.connect(fire)
        timer.start()
        return _QtTimerHandle(timer)
