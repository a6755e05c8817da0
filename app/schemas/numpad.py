"""Numeric entry pad state and transitions."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from app.core.enums import BarType, NumpadMode

NumpadAction = Literal[
    "show",
    "hide",
    "append_digit",
    "delete_digit",
    "clear",
    "quick_adjust",
    "toggle_plate_calculator",
    "set_bar_type",
]


class NumpadState(BaseModel):
    """Serializable numpad state. Only changed through the transitions in app.services.numpad."""

    model_config = ConfigDict(frozen=True)

    is_visible: bool = False
    mode: NumpadMode = NumpadMode.WEIGHT
    # Kept as a string so "12." and "0.5" survive editing
    current_value: str = ""
    is_plate_calculator_expanded: bool = False
    bar_type: BarType = BarType.OLYMPIC


class NumpadTransition(BaseModel):
    state: NumpadState = NumpadState()
    action: NumpadAction
    digit: str | None = None
    delta: float | None = None
    mode: NumpadMode | None = None
    initial_value: float | None = None
    bar_type: BarType | None = None


class NumpadTransitionResult(BaseModel):
    state: NumpadState
    value: float | None = None
