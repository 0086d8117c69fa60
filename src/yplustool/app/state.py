from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
import logging

from PySide6.QtCore import QObject, Signal

from yplustool.model.calculator import (
    DEFAULT_INPUTS, EMPTY_RESULT, CalculationInput, CalculationResult, compute
)

logger = logging.getLogger(__name__)


@dataclass
class FormState:
    """Current text of the five input fields."""
    velocity: str = DEFAULT_INPUTS["velocity"]
    density: str = DEFAULT_INPUTS["density"]
    viscosity: str = DEFAULT_INPUTS["viscosity"]
    length: str = DEFAULT_INPUTS["length"]
    target_yplus: str = DEFAULT_INPUTS["target_yplus"]

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def to_input(self) -> CalculationInput:
        return CalculationInput.from_texts(
            self.velocity, self.density, self.viscosity, self.length, self.target_yplus
        )


class CalculatorStore(QObject):
    """Central state store with signals for form/output sync."""
    inputs_changed = Signal(object)
    result_changed = Signal(object)

    def __init__(self) -> None:
        super().__init__()
        self.form = FormState()
        self.result: CalculationResult = EMPTY_RESULT

    def set_field(self, name: str, text: str) -> None:
        if name not in FormState.field_names():
            raise KeyError(f"Unknown input field '{name}'.")
        if getattr(self.form, name) == text:
            return
        self.form = replace(self.form, **{name: text})
        self.inputs_changed.emit(self.form)

    def calculate(self) -> CalculationResult:
        self.result = compute(self.form.to_input())
        logger.info(
            f"Calculated Re={self.result.reynolds:.6g}, y1={self.result.first_layer_height:.6g} m"
        )
        self.result_changed.emit(self.result)
        return self.result

    def reset(self) -> None:
        """Restore the default texts and clear the last result."""
        self.form = FormState()
        self.result = EMPTY_RESULT
        self.inputs_changed.emit(self.form)
        self.result_changed.emit(self.result)
        logger.info("Calculator state has been reset.")
