"""Numpad transitions. Each returns a new NumpadState; states are never edited in place."""

from __future__ import annotations

from app.core.constants import NUMPAD_MAX_DECIMAL_PLACES, NUMPAD_MAX_DIGITS
from app.core.enums import BarType, NumpadMode
from app.schemas.numpad import NumpadState, NumpadTransition
from app.services.units import format_number

DIGITS = frozenset("0123456789.")


def show(state: NumpadState, mode: NumpadMode, initial_value: float | None = None) -> NumpadState:
    """Open for a set field. The plate calculator starts collapsed for each new input."""
    value = "" if initial_value is None else format_number(initial_value)
    return state.model_copy(
        update={
            "is_visible": True,
            "mode": mode,
            "current_value": value,
            "is_plate_calculator_expanded": False,
        }
    )


def hide(state: NumpadState) -> NumpadState:
    return state.model_copy(update={"is_visible": False})


def append_digit(state: NumpadState, digit: str) -> NumpadState:
    if digit not in DIGITS or len(digit) != 1:
        raise ValueError(f"Invalid numpad key: {digit!r}")
    value = state.current_value

    if digit == ".":
        if state.mode == NumpadMode.REPS or "." in value:
            return state
        if value == "":
            return state.model_copy(update={"current_value": "0."})

    if len(value.replace(".", "")) >= NUMPAD_MAX_DIGITS:
        return state
    if "." in value and len(value.split(".", 1)[1]) >= NUMPAD_MAX_DECIMAL_PLACES:
        return state

    # No leading zeros except "0."
    if value == "0" and digit != ".":
        return state.model_copy(update={"current_value": digit})
    return state.model_copy(update={"current_value": value + digit})


def delete_digit(state: NumpadState) -> NumpadState:
    if not state.current_value:
        return state
    return state.model_copy(update={"current_value": state.current_value[:-1]})


def clear(state: NumpadState) -> NumpadState:
    return state.model_copy(update={"current_value": ""})


def apply_quick_adjust(state: NumpadState, delta: float) -> NumpadState:
    """Add delta (e.g. +5 / -2.5), floored at 0 and rounded to 2 decimals."""
    current = numpad_value_to_number(state.current_value) or 0.0
    adjusted = round(max(0.0, current + delta), 2)
    return state.model_copy(update={"current_value": format_number(adjusted)})


def toggle_plate_calculator(state: NumpadState) -> NumpadState:
    return state.model_copy(update={"is_plate_calculator_expanded": not state.is_plate_calculator_expanded})


def set_bar_type(state: NumpadState, bar_type: BarType) -> NumpadState:
    return state.model_copy(update={"bar_type": bar_type})


def numpad_value_to_number(value: str) -> float | None:
    """Numpad string -> number for storage; None for empty or a lone "."."""
    if value in ("", "."):
        return None
    try:
        return float(value)
    except ValueError:
        return None


def apply_transition(transition: NumpadTransition) -> NumpadState:
    """Dispatch a named transition. Raises ValueError when a required argument is missing."""
    state = transition.state
    action = transition.action
    if action == "show":
        return show(state, transition.mode or state.mode, transition.initial_value)
    if action == "hide":
        return hide(state)
    if action == "append_digit":
        if transition.digit is None:
            raise ValueError("append_digit requires 'digit'")
        return append_digit(state, transition.digit)
    if action == "delete_digit":
        return delete_digit(state)
    if action == "clear":
        return clear(state)
    if action == "quick_adjust":
        if transition.delta is None:
            raise ValueError("quick_adjust requires 'delta'")
        return apply_quick_adjust(state, transition.delta)
    if action == "toggle_plate_calculator":
        return toggle_plate_calculator(state)
    if action == "set_bar_type":
        if transition.bar_type is None:
            raise ValueError("set_bar_type requires 'bar_type'")
        return set_bar_type(state, transition.bar_type)
    raise ValueError(f"Unknown numpad action: {action}")
