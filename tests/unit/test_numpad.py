import pytest

from app.core.enums import BarType, NumpadMode
from app.schemas.numpad import NumpadState, NumpadTransition
from app.services import numpad


def _type(state, keys):
    for key in keys:
        state = numpad.append_digit(state, key)
    return state


@pytest.fixture
def weight_state():
    return numpad.show(NumpadState(), NumpadMode.WEIGHT)


def test_show_sets_mode_value_and_collapses_plate_calculator():
    state = NumpadState(is_plate_calculator_expanded=True)
    shown = numpad.show(state, NumpadMode.WEIGHT, 102.5)
    assert shown.is_visible is True
    assert shown.current_value == "102.5"
    assert shown.is_plate_calculator_expanded is False
    assert numpad.show(state, NumpadMode.REPS, 8).current_value == "8"
    assert numpad.show(state, NumpadMode.REPS).current_value == ""


def test_hide():
    state = numpad.hide(numpad.show(NumpadState(), NumpadMode.WEIGHT, 5))
    assert state.is_visible is False


def test_transitions_return_new_states(weight_state):
    typed = numpad.append_digit(weight_state, "4")
    assert weight_state.current_value == ""
    assert typed.current_value == "4"
    with pytest.raises(Exception):
        typed.current_value = "5"


def test_decimal_rules(weight_state):
    assert _type(weight_state, ".").current_value == "0."
    assert _type(weight_state, "12..5").current_value == "12.5"
    # at most two decimals
    assert _type(weight_state, "2.555").current_value == "2.55"


def test_no_decimal_in_reps_mode():
    state = numpad.show(NumpadState(), NumpadMode.REPS)
    assert _type(state, "1.2").current_value == "12"


def test_max_six_digits(weight_state):
    assert _type(weight_state, "12345678").current_value == "123456"


def test_leading_zero_replaced(weight_state):
    assert _type(weight_state, "05").current_value == "5"
    assert _type(weight_state, "0.5").current_value == "0.5"


def test_invalid_key_raises(weight_state):
    with pytest.raises(ValueError):
        numpad.append_digit(weight_state, "x")
    with pytest.raises(ValueError):
        numpad.append_digit(weight_state, "12")


def test_delete_and_clear(weight_state):
    state = _type(weight_state, "135")
    assert numpad.delete_digit(state).current_value == "13"
    assert numpad.delete_digit(weight_state).current_value == ""
    assert numpad.clear(state).current_value == ""


def test_quick_adjust(weight_state):
    state = _type(weight_state, "0.1")
    assert numpad.apply_quick_adjust(state, 0.2).current_value == "0.3"
    assert numpad.apply_quick_adjust(weight_state, 5).current_value == "5"
    assert numpad.apply_quick_adjust(_type(weight_state, "2"), -5).current_value == "0"


def test_plate_calculator_toggle_and_bar_type(weight_state):
    state = numpad.toggle_plate_calculator(weight_state)
    assert state.is_plate_calculator_expanded is True
    assert numpad.toggle_plate_calculator(state).is_plate_calculator_expanded is False
    assert numpad.set_bar_type(state, BarType.EZ).bar_type == BarType.EZ


@pytest.mark.parametrize(
    "value,expected",
    [("", None), (".", None), ("0.", 0.0), ("102.5", 102.5), ("8", 8.0)],
)
def test_numpad_value_to_number(value, expected):
    assert numpad.numpad_value_to_number(value) == expected


def test_apply_transition_dispatch():
    state = numpad.apply_transition(NumpadTransition(action="show", mode=NumpadMode.WEIGHT, initial_value=60))
    state = numpad.apply_transition(NumpadTransition(state=state, action="append_digit", digit="5"))
    assert state.current_value == "605"
    state = numpad.apply_transition(NumpadTransition(state=state, action="quick_adjust", delta=-5))
    assert state.current_value == "600"


def test_apply_transition_missing_argument():
    with pytest.raises(ValueError):
        numpad.apply_transition(NumpadTransition(action="append_digit"))
    with pytest.raises(ValueError):
        numpad.apply_transition(NumpadTransition(action="set_bar_type"))
