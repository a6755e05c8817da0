"""QoL tools: plate calculator, bar catalogue, numpad entry."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from app.core.config import Settings, get_settings
from app.core.constants import BAR_WEIGHTS
from app.core.enums import BarType, WeightUnit
from app.schemas.numpad import NumpadTransition, NumpadTransitionResult
from app.schemas.plates import BarWeightsRead, PlateCalculatorResponse
from app.services.numpad import apply_transition, numpad_value_to_number
from app.services.plate_solver import (
    denominations_for,
    format_plate_count,
    get_bar_weight,
    solve_plates,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _parse_plates(available_plates: str | None, unit: WeightUnit) -> list[float]:
    """Comma-separated plate weights, or the standard set for the unit."""
    if not available_plates:
        return list(denominations_for(unit))
    try:
        plates = [float(x.strip()) for x in available_plates.split(",") if x.strip()]
    except ValueError:
        raise HTTPException(status_code=400, detail="available_plates must be comma-separated numbers")
    if not plates or any(p <= 0 for p in plates):
        raise HTTPException(status_code=400, detail="available_plates must be positive numbers")
    return plates


# ---- Plate calculator (pure logic, no DB) ----


@router.get("/plate-calculator", response_model=PlateCalculatorResponse)
async def plate_calculator(
    target_weight: float = Query(..., description="Total weight to load (bar included)"),
    unit: WeightUnit | None = None,
    bar_type: BarType = BarType.OLYMPIC,
    bar_weight: float | None = Query(None, ge=0, description="Bar weight when bar_type=custom"),
    available_plates: str | None = Query(
        None,
        description="Comma-separated plate weights (each side); defaults to the standard set for the unit",
    ),
    settings: Settings = Depends(get_settings),
):
    """
    Returns which plates to put on each side of the bar to reach the target weight.
    result is null when the target is not a usable number (e.g. negative).
    """
    unit = unit or settings.weight_unit
    plates = _parse_plates(available_plates, unit)
    bar = get_bar_weight(bar_type, unit, bar_weight)
    result = solve_plates(target_weight, bar, plates)
    if result is None:
        logger.info("Plate calculator: no result for target %s", target_weight)
        return PlateCalculatorResponse(unit=unit, target_weight=target_weight)
    return PlateCalculatorResponse(
        unit=unit,
        target_weight=target_weight,
        result=result,
        plate_labels=[format_plate_count(p.plate, p.count, unit) for p in result.plates_per_side],
    )


@router.get("/bars", response_model=list[BarWeightsRead])
async def bar_weights():
    """Bar weights and standard plates per unit."""
    return [
        BarWeightsRead(unit=unit, bars=dict(bars), plates=list(denominations_for(unit)))
        for unit, bars in BAR_WEIGHTS.items()
    ]


# ---- Numpad (stateless: client posts its state, gets the next one) ----


@router.post("/numpad", response_model=NumpadTransitionResult)
async def numpad_transition(payload: NumpadTransition):
    """Apply one named transition (append_digit, delete_digit, clear, ...) to a numpad state."""
    try:
        state = apply_transition(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return NumpadTransitionResult(state=state, value=numpad_value_to_number(state.current_value))
