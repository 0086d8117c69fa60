"""
Calculator Form Panel
"""
from __future__ import annotations

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGridLayout, QLabel, QLineEdit, QPushButton, QHBoxLayout, QSizePolicy
)

from yplustool.app.state import CalculatorStore, FormState
from yplustool.model.calculator import CalculationResult, format_value

# (field key, label, unit)
INPUT_ROWS = [
    ("velocity", "Characteristic Velocity:", "m/s"),
    ("density", "Fluid Density:", "kg/m³"),
    ("viscosity", "Viscosity:", "Pa·s"),
    ("length", "Characteristic Length:", "m"),
    ("target_yplus", "Target Y+:", ""),
]


class CalculatorPanel(QWidget):
    def __init__(self, store: CalculatorStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.inputs: dict[str, QLineEdit] = {}

        layout = QVBoxLayout(self)

        heading = QLabel(self.tr("Calculate Y+"), self)
        heading.setStyleSheet("font-size: 16px; font-weight: bold;")
        layout.addWidget(heading)

        self.grid = QGridLayout()
        self.grid.setColumnMinimumWidth(0, 180)
        self.grid.setVerticalSpacing(4)
        layout.addLayout(self.grid)

        # --- Inputs ---
        for row, (key, label, unit) in enumerate(INPUT_ROWS):
            lab = QLabel(self.tr(label), self)
            if unit:
                lab.setToolTip(unit)
            edit = QLineEdit(getattr(store.form, key), self)
            edit.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
            lab.setBuddy(edit)
            edit.textChanged.connect(lambda text, k=key: self.store.set_field(k, text))
            edit.returnPressed.connect(self.on_calculate_clicked)
            self.grid.addWidget(lab, row, 0)
            self.grid.addWidget(edit, row, 1)
            self.inputs[key] = edit

        # --- Action ---
        row = len(INPUT_ROWS)
        self.btn_calculate = QPushButton(self.tr("Calculate"), self)
        self.btn_calculate.clicked.connect(self.on_calculate_clicked)
        btn_row = QHBoxLayout()
        btn_row.addStretch()
        btn_row.addWidget(self.btn_calculate)
        btn_row.addStretch()
        self.grid.addLayout(btn_row, row, 0, 1, 2)

        # --- Outputs ---
        self.out_reynolds = self._add_output(row + 1, "Reynolds Number:")
        self.out_first_layer = self._add_output(row + 2, "First Layer Height:")

        layout.addStretch()

        self.store.inputs_changed.connect(self.on_inputs_changed)
        self.store.result_changed.connect(self.on_result_changed)
        self.on_result_changed(self.store.result)

    def _add_output(self, row: int, label: str) -> QLineEdit:
        self.grid.addWidget(QLabel(self.tr(label), self), row, 0)
        out = QLineEdit(self)
        out.setReadOnly(True)
        out.setAlignment(Qt.AlignmentFlag.AlignLeft)
        self.grid.addWidget(out, row, 1)
        return out

    # --- SLOTS ---

    @Slot()
    def on_calculate_clicked(self) -> None:
        self.store.calculate()

    @Slot(object)
    def on_inputs_changed(self, form: FormState) -> None:
        for key, edit in self.inputs.items():
            text = getattr(form, key)
            if edit.text() != text:
                edit.setText(text)

    @Slot(object)
    def on_result_changed(self, result: CalculationResult) -> None:
        self.out_reynolds.setText(format_value(result.reynolds))
        self.out_first_layer.setText(format_value(result.first_layer_height))
