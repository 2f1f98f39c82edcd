from __future__ import annotations

import logging
import sys

from PySide6.QtWidgets import QApplication, QMessageBox, QStyleFactory

from taskmaster.infra.logging import setup_logging
from taskmaster.ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging()
    app = QApplication(sys.argv)
    app.setStyle(QStyleFactory.create("Fusion"))

    try:
        window = MainWindow()
    except Exception as exc:  # noqa: BLE001
        logger.exception("Failed to start")
        QMessageBox.critical(None, "Startup error", str(exc))
        return

    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
