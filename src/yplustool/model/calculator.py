"""
First Layer Height Calculator
=============================
Closed-form estimate of the wall-adjacent cell height for a target Y+.

The flat-plate skin-friction correlation gives the wall shear stress, from
which the friction velocity and finally the wall distance follow:

    Re   = rho * U * L / mu
    Cf   = 0.058 * Re^(-0.2)
    tau  = 0.5 * Cf * rho * U^2
    u_t  = sqrt(tau / rho)
    y1   = y+ * mu / (u_t * rho)

Invalid input is represented by NaN, which propagates through every quantity
that depends on it. Nothing in this module raises for bad user input.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import Callable, Dict

import numpy as np

logger = logging.getLogger(__name__)

SKIN_FRICTION_COEFFICIENT = 0.058
SKIN_FRICTION_EXPONENT = -0.2

Predicate = Callable[[float], bool]


def is_positive(value: float) -> bool:
    return value > 0.0


def is_non_negative(value: float) -> bool:
    return value >= 0.0


# Domain rule per input field
FIELD_PREDICATES: Dict[str, Predicate] = {
    "velocity": is_positive,
    "density": is_positive,
    "viscosity": is_positive,
    "length": is_positive,
    "target_yplus": is_positive,
}

# Placeholder texts shown in a fresh form (air at ~20 °C, 1 m/s, 1 m plate)
DEFAULT_INPUTS: Dict[str, str] = {
    "velocity": "1.0",
    "density": "1.205",
    "viscosity": "1.82e-5",
    "length": "1.0",
    "target_yplus": "1.0",
}


def parse_field(text: str, predicate: Predicate = is_positive) -> float:
    """
    Parse a text field into a float.

    Args:
        text: Raw text from the input widget.
        predicate: Domain rule the parsed value must satisfy.

    Returns:
        The parsed value, or NaN when the text is not a finite number or the
        value fails the predicate.
    """
    try:
        value = float(text.strip())
    except (ValueError, TypeError, AttributeError):
        logger.debug(f"Could not parse {text!r} as a number.")
        return math.nan

    if not math.isfinite(value) or not predicate(value):
        logger.debug(f"Value {value!r} is outside the valid domain.")
        return math.nan

    return value


@dataclass(frozen=True)
class CalculationInput:
    velocity: float
    density: float
    viscosity: float
    length: float
    target_yplus: float

    @classmethod
    def from_texts(
        cls,
        velocity: str,
        density: str,
        viscosity: str,
        length: str,
        target_yplus: str,
    ) -> CalculationInput:
        """Build an input from raw field texts, applying each field's domain rule."""
        texts = {
            "velocity": velocity,
            "density": density,
            "viscosity": viscosity,
            "length": length,
            "target_yplus": target_yplus,
        }
        values = {name: parse_field(text, FIELD_PREDICATES[name]) for name, text in texts.items()}
        return cls(**values)


@dataclass(frozen=True)
class CalculationResult:
    reynolds: float
    first_layer_height: float

    @property
    def is_valid(self) -> bool:
        return math.isfinite(self.reynolds) and math.isfinite(self.first_layer_height)


EMPTY_RESULT = CalculationResult(reynolds=math.nan, first_layer_height=math.nan)


def compute(inp: CalculationInput) -> CalculationResult:
    """
    Evaluate the Reynolds number and first layer height.

    Uses IEEE-754 float64 arithmetic throughout, so NaN and infinities
    propagate instead of raising (e.g. zero velocity gives an infinite skin
    friction coefficient and a NaN height).
    """
    rho = np.float64(inp.density)
    u = np.float64(inp.velocity)
    mu = np.float64(inp.viscosity)
    length = np.float64(inp.length)
    yplus = np.float64(inp.target_yplus)

    with np.errstate(all="ignore"):
        reynolds = rho * u * length / mu
        cf = SKIN_FRICTION_COEFFICIENT * np.power(reynolds, SKIN_FRICTION_EXPONENT)
        tau_w = 0.5 * cf * rho * u ** 2
        u_tau = np.sqrt(tau_w / rho)
        y1 = yplus * mu / (u_tau * rho)

    result = CalculationResult(reynolds=float(reynolds), first_layer_height=float(y1))
    logger.debug(f"Re={result.reynolds}, Cf={float(cf)}, u_tau={float(u_tau)} -> y1={result.first_layer_height}")
    return result


def calculate(
    velocity: str,
    density: str,
    viscosity: str,
    length: str,
    target_yplus: str,
) -> CalculationResult:
    """Parse the raw field texts and compute the result in one step."""
    return compute(CalculationInput.from_texts(velocity, density, viscosity, length, target_yplus))


def format_value(value: float) -> str:
    """Render a result value the way the output fields display it."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return repr(value)
