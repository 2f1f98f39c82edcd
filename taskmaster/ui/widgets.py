from __future__ import annotations

from PySide6.QtCore import QSize, Qt
from PySide6.QtWidgets import (
    QAbstractItemView,
    QCheckBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from taskmaster.domain.entities import TaskEntity, TaskStats

STAT_COLORS = {
    "total": "#6200EE",
    "completed": "#03DAC5",
    "pending": "#CF6679",
}


class StatItem(QWidget):
    def __init__(self, label: str, color: str, parent=None):
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        self.value_label = QLabel("0")
        self.value_label.setAlignment(Qt.AlignCenter)
        self.value_label.setStyleSheet(f"font-size: 24px; font-weight: 700; color: {color};")

        caption = QLabel(label)
        caption.setAlignment(Qt.AlignCenter)
        caption.setProperty("class", "stat-caption")

        layout.addWidget(self.value_label)
        layout.addWidget(caption)

    def set_value(self, value: int) -> None:
        self.value_label.setText(str(value))


class StatsCard(QFrame):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("StatsCard")
        self.setFrameShape(QFrame.StyledPanel)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)

        self.total_item = StatItem("Total", STAT_COLORS["total"])
        self.completed_item = StatItem("Completed", STAT_COLORS["completed"])
        self.pending_item = StatItem("Pending", STAT_COLORS["pending"])
        for item in (self.total_item, self.completed_item, self.pending_item):
            layout.addWidget(item, 1)

    def set_stats(self, stats: TaskStats) -> None:
        self.total_item.set_value(stats.total)
        self.completed_item.set_value(stats.completed)
        self.pending_item.set_value(stats.pending)


class TaskItemWidget(QFrame):
    def __init__(self, task: TaskEntity, on_toggle, on_delete, parent=None):
        super().__init__(parent)
        self.task = task
        self._on_toggle = on_toggle
        self._on_delete = on_delete

        self.setObjectName("TaskCard")
        self.setFrameShape(QFrame.StyledPanel)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        self.done_check = QCheckBox()
        self.done_check.setChecked(task.is_completed)
        self.done_check.toggled.connect(self._handle_toggle)

        text_column = QVBoxLayout()
        text_column.setSpacing(2)

        title = QLabel(task.title)
        title.setProperty("class", "task-title")
        title.setStyleSheet("font-weight: 700;")
        title.setWordWrap(True)
        text_column.addWidget(title)

        if task.description.strip():
            description = QLabel(task.description)
            description.setProperty("class", "task-meta")
            description.setStyleSheet("color: gray;")
            description.setWordWrap(True)
            text_column.addWidget(description)

        self.delete_button = QPushButton("Delete")
        self.delete_button.setProperty("variant", "danger")
        self.delete_button.setToolTip("Delete task")
        self.delete_button.clicked.connect(self._handle_delete)

        layout.addWidget(self.done_check, 0, Qt.AlignVCenter)
        layout.addLayout(text_column, 1)
        layout.addWidget(self.delete_button, 0, Qt.AlignVCenter)

    def _handle_toggle(self, checked: bool) -> None:
        self._on_toggle(self.task.id, checked)

    def _handle_delete(self) -> None:
        self._on_delete(self.task.id)


class TaskListWidget(QListWidget):
    def __init__(self, on_toggle, on_delete, parent=None):
        super().__init__(parent)
        self._on_toggle = on_toggle
        self._on_delete = on_delete
        self.setSelectionMode(QAbstractItemView.NoSelection)
        self.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.setSpacing(4)

    def resizeEvent(self, event) -> None:  # type: ignore[override]
        super().resizeEvent(event)
        self.sync_item_sizes()

    def set_tasks(self, tasks: list[TaskEntity]) -> None:
        self.clear()
        for task in tasks:
            item = QListWidgetItem()
            item.setData(Qt.UserRole, task.id)
            widget = TaskItemWidget(task, self._on_toggle, self._on_delete)
            self.addItem(item)
            self.setItemWidget(item, widget)
            item.setSizeHint(widget.sizeHint())
        self.sync_item_sizes()

    def task_ids(self) -> list[int]:
        return [self.item(i).data(Qt.UserRole) for i in range(self.count())]

    def sync_item_sizes(self) -> None:
        viewport_width = self.viewport().width()
        for index in range(self.count()):
            item = self.item(index)
            widget = self.itemWidget(item)
            if widget:
                widget.setFixedWidth(viewport_width)
                widget.adjustSize()
                item.setSizeHint(QSize(viewport_width, widget.sizeHint().height()))
