"""
Main Application Window
=======================
Hosts the calculator form and the File menu.
"""
from __future__ import annotations

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QMainWindow

from yplustool.app.state import CalculatorStore
from yplustool.app.ui.calculator_panel import CalculatorPanel
from yplustool.config import VISIBLE_APP_NAME, WINDOW_SIZE


class MainWindow(QMainWindow):
    def __init__(self, store: CalculatorStore | None = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*WINDOW_SIZE)

        self.store = store if store is not None else CalculatorStore()

        self.panel = CalculatorPanel(self.store, parent=self)
        self.setCentralWidget(self.panel)

        self._create_actions()
        self._create_menus()

    def _create_actions(self) -> None:
        self.act_reset = QAction(self.tr("Reset"), self)
        self.act_reset.setShortcut("Ctrl+R")
        self.act_reset.triggered.connect(self.store.reset)

        self.act_exit = QAction(self.tr("Exit"), self)
        self.act_exit.setShortcut("Ctrl+Q")
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        file_menu = self.menuBar().addMenu(self.tr("&File"))
        file_menu.addAction(self.act_reset)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)
