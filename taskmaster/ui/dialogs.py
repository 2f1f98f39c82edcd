from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
)


class AddTaskDialog(QDialog):
    submitted = Signal(str, str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("New Task")
        self.setObjectName("AddTaskDialog")
        self.setMinimumWidth(360)

        self.title_input = QLineEdit()
        self.title_input.setPlaceholderText("Title")

        self.description_input = QTextEdit()
        self.description_input.setPlaceholderText("Description")
        line_height = self.description_input.fontMetrics().lineSpacing()
        self.description_input.setFixedHeight(line_height * 3 + 16)

        self.add_button = QPushButton("Add")
        self.add_button.setDefault(True)
        self.add_button.clicked.connect(self._handle_confirm)

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.setProperty("variant", "ghost")
        self.cancel_button.clicked.connect(self.reject)

        buttons = QHBoxLayout()
        buttons.addStretch()
        buttons.addWidget(self.cancel_button)
        buttons.addWidget(self.add_button)

        layout = QVBoxLayout(self)
        layout.setSpacing(8)
        layout.addWidget(QLabel("Title"))
        layout.addWidget(self.title_input)
        layout.addWidget(QLabel("Description"))
        layout.addWidget(self.description_input)
        layout.addLayout(buttons)

    def set_busy(self, busy: bool) -> None:
        self.add_button.setEnabled(not busy)
        self.title_input.setReadOnly(busy)
        self.description_input.setReadOnly(busy)

    def _handle_confirm(self) -> None:
        if not self.add_button.isEnabled():
            return
        title = self.title_input.text()
        if not title.strip():
            return
        self.set_busy(True)
        self.submitted.emit(title, self.description_input.toPlainText())
