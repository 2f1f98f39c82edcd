from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import Qt
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QApplication

from taskmaster.domain.entities import TaskStats
from taskmaster.ui.dialogs import AddTaskDialog
from taskmaster.ui.main_window import MainWindow


@pytest.fixture(scope="module")
def qapp() -> QApplication:
    return QApplication.instance() or QApplication([])


@pytest.fixture()
def window(qapp: QApplication):
    win = MainWindow()
    win.service.add_delay_ms = 150
    win.service.remove_delay_ms = 100
    win.show()
    yield win
    win.close()
    win.deleteLater()
    QTest.qWait(10)


def _open_dialog(window: MainWindow) -> AddTaskDialog:
    window.new_task()
    QTest.qWait(20)
    assert window.add_dialog is not None
    return window.add_dialog


def _stat_values(window: MainWindow) -> tuple[str, str, str]:
    card = window.stats_card
    return (
        card.total_item.value_label.text(),
        card.completed_item.value_label.text(),
        card.pending_item.value_label.text(),
    )


def test_enter_in_title_submits_once(qapp: QApplication) -> None:
    dialog = AddTaskDialog()
    submitted: list[tuple[str, str]] = []
    dialog.submitted.connect(lambda title, description: submitted.append((title, description)))
    dialog.show()

    QTest.keyClicks(dialog.title_input, "Buy milk")
    QTest.keyClick(dialog.title_input, Qt.Key_Return)
    QTest.keyClick(dialog.title_input, Qt.Key_Return)

    assert submitted == [("Buy milk", "")]
    assert not dialog.add_button.isEnabled()
    dialog.close()


def test_set_busy_toggles_add_button(qapp: QApplication) -> None:
    dialog = AddTaskDialog()

    dialog.set_busy(True)
    assert not dialog.add_button.isEnabled()
    assert dialog.title_input.isReadOnly()

    dialog.set_busy(False)
    assert dialog.add_button.isEnabled()
    assert not dialog.title_input.isReadOnly()


def test_enter_creates_single_task(window: MainWindow) -> None:
    dialog = _open_dialog(window)

    QTest.keyClicks(dialog.title_input, "Buy milk")
    QTest.keyClick(dialog.title_input, Qt.Key_Return)
    QTest.qWait(400)

    assert [t.title for t in window.store.tasks] == ["Buy milk"]
    assert window.store.stats() == TaskStats(total=1, completed=0, pending=1)
    assert window.task_list.task_ids() == [1]
    assert window.add_dialog is None


def test_double_click_add_creates_single_task(window: MainWindow) -> None:
    dialog = _open_dialog(window)

    QTest.keyClicks(dialog.title_input, "Report")
    dialog.add_button.click()
    dialog.add_button.click()
    QTest.qWait(400)

    assert window.task_list.task_ids() == [1]


def test_blank_title_keeps_dialog_open(window: MainWindow) -> None:
    dialog = _open_dialog(window)

    QTest.keyClick(dialog.title_input, Qt.Key_Return)
    dialog.add_button.click()
    QTest.qWait(300)

    assert window.store.tasks == []
    assert window.store.dialog_open
    assert window.add_dialog is dialog
    assert dialog.isVisible()
    assert dialog.add_button.isEnabled()
    assert window.busy_bar.isHidden()


def test_cancel_dismisses_without_changes(window: MainWindow) -> None:
    dialog = _open_dialog(window)
    QTest.keyClicks(dialog.title_input, "Never saved")

    dialog.cancel_button.click()
    QTest.qWait(300)

    assert not window.store.dialog_open
    assert window.add_dialog is None
    assert window.store.tasks == []


def test_escape_dismisses_without_changes(window: MainWindow) -> None:
    dialog = _open_dialog(window)

    QTest.keyClick(dialog, Qt.Key_Escape)
    QTest.qWait(20)

    assert not window.store.dialog_open
    assert window.add_dialog is None
    assert window.store.tasks == []


def test_busy_bar_visible_only_while_busy(window: MainWindow) -> None:
    assert window.busy_bar.isHidden()
    dialog = _open_dialog(window)

    QTest.keyClicks(dialog.title_input, "Slow")
    QTest.keyClick(dialog.title_input, Qt.Key_Return)
    QTest.qWait(20)
    assert not window.busy_bar.isHidden()
    assert not dialog.add_button.isEnabled()

    QTest.qWait(400)
    assert window.busy_bar.isHidden()


def test_stats_card_follows_add_toggle_remove(window: MainWindow) -> None:
    assert _stat_values(window) == ("0", "0", "0")

    dialog = _open_dialog(window)
    QTest.keyClicks(dialog.title_input, "Buy milk")
    dialog.add_button.click()
    QTest.qWait(400)
    assert _stat_values(window) == ("1", "0", "1")

    card = window.task_list.itemWidget(window.task_list.item(0))
    card.done_check.setChecked(True)
    QTest.qWait(20)
    assert _stat_values(window) == ("1", "1", "0")
    assert window.store.get_task(1).is_completed

    card = window.task_list.itemWidget(window.task_list.item(0))
    card.delete_button.click()
    QTest.qWait(400)
    assert _stat_values(window) == ("0", "0", "0")
    assert window.task_list.task_ids() == []
