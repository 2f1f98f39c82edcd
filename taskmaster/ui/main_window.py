from __future__ import annotations

import logging

from PySide6.QtCore import QTimer
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from taskmaster.config import SETTINGS
from taskmaster.domain.entities import TaskEntity
from taskmaster.infra.store import TaskListStore
from taskmaster.services.task_service import TaskService

from .dialogs import AddTaskDialog
from .scheduler import QtTimerScheduler
from .widgets import StatsCard, TaskListWidget

logger = logging.getLogger(__name__)


class MainWindow(QWidget):
    def __init__(self):
        super().__init__()
        self.setWindowTitle(SETTINGS.window_title)
        self.resize(480, 760)

        self.store = TaskListStore()
        self.service = TaskService(
            self.store,
            QtTimerScheduler(self),
            add_delay_ms=SETTINGS.add_delay_ms,
            remove_delay_ms=SETTINGS.remove_delay_ms,
        )

        self.add_dialog: AddTaskDialog | None = None
        self._rendered_tasks: list[TaskEntity] | None = None
        self._render_pending = False

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(16)

        header = QLabel(SETTINGS.window_title)
        header.setProperty("class", "panel-title")
        header.setStyleSheet("font-size: 18px; font-weight: 600;")

        self.stats_card = StatsCard()

        self.busy_bar = QProgressBar()
        self.busy_bar.setObjectName("BusyIndicator")
        self.busy_bar.setRange(0, 0)
        self.busy_bar.setTextVisible(False)
        self.busy_bar.setFixedHeight(6)
        self.busy_bar.setVisible(False)

        self.task_list = TaskListWidget(self.on_task_toggled, self.on_task_delete)
        self.task_list.setObjectName("TaskList")
        self.task_list.setFrameShape(QFrame.NoFrame)

        self.add_button = QPushButton("+")
        self.add_button.setObjectName("AddTaskButton")
        self.add_button.setToolTip("Add task")
        self.add_button.setFixedSize(56, 56)
        self.add_button.setStyleSheet("font-size: 24px; border-radius: 28px;")
        self.add_button.clicked.connect(self.new_task)

        fab_row = QHBoxLayout()
        fab_row.addStretch()
        fab_row.addWidget(self.add_button)

        layout.addWidget(header)
        layout.addWidget(self.stats_card)
        layout.addWidget(self.busy_bar)
        layout.addWidget(self.task_list, 1)
        layout.addLayout(fab_row)

        self._unsubscribe = self.store.subscribe(self._on_store_changed)
        QShortcut(QKeySequence("Ctrl+N"), self, self.new_task)

        self.render()

    def new_task(self) -> None:
        self.service.open_dialog()

    def on_task_toggled(self, task_id: int, completed: bool) -> None:
        self.service.set_completed(task_id, completed)

    def on_task_delete(self, task_id: int) -> None:
        self.service.delete_task(task_id)

    def on_dialog_submitted(self, title: str, description: str) -> None:
        self.service.create_task(title, description)

    def on_dialog_rejected(self) -> None:
        self.service.dismiss_dialog()

    def _on_store_changed(self, _store: TaskListStore) -> None:
        # Store changes can arrive from inside a card's own signal handler,
        # so the list is rebuilt on the next event loop pass.
        if self._render_pending:
            return
        self._render_pending = True
        QTimer.singleShot(0, self.render)

    def render(self) -> None:
        self._render_pending = False
        tasks = self.store.tasks
        if tasks is not self._rendered_tasks:
            self.task_list.set_tasks(tasks)
            self._rendered_tasks = tasks

        self.stats_card.set_stats(self.store.stats())
        self.busy_bar.setVisible(self.store.busy)
        self._sync_dialog()

    def _sync_dialog(self) -> None:
        if self.store.dialog_open and self.add_dialog is None:
            dialog = AddTaskDialog(self)
            dialog.submitted.connect(self.on_dialog_submitted)
            dialog.rejected.connect(self.on_dialog_rejected)
            self.add_dialog = dialog
            dialog.open()
            dialog.title_input.setFocus()
        elif not self.store.dialog_open and self.add_dialog is not None:
            dialog = self.add_dialog
            self.add_dialog = None
            if dialog.isVisible():
                dialog.accept()
            dialog.deleteLater()

        if self.add_dialog is not None:
            self.add_dialog.set_busy(self.store.busy)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self.service.shutdown()
        self._unsubscribe()
        logger.info("Window closed with %d task(s)", len(self.store.tasks))
        super().closeEvent(event)
