"""Plate calculator schemas."""

from pydantic import BaseModel, ConfigDict, computed_field

from app.core.enums import WeightUnit


class PlateCount(BaseModel):
    """One denomination loaded on a single side of the bar."""

    model_config = ConfigDict(frozen=True)

    plate: float
    count: int


class LoadingResult(BaseModel):
    """Plates for ONE side of the bar (the other side mirrors it)."""

    model_config = ConfigDict(frozen=True)

    plates_per_side: tuple[PlateCount, ...] = ()
    weight_per_side: float
    total_weight: float  # bar + both sides
    bar_weight: float
    is_approximate: bool = False
    difference: float = 0.0  # achieved - requested; positive = over

    @computed_field
    @property
    def total_plate_count(self) -> int:
        """Plates needed across both sides."""
        return sum(p.count for p in self.plates_per_side) * 2


class PlateCalculatorResponse(BaseModel):
    unit: WeightUnit
    target_weight: float
    result: LoadingResult | None = None
    # Human readable "2 × 45lbs" lines for the summary view
    plate_labels: list[str] = []


class BarWeightsRead(BaseModel):
    unit: WeightUnit
    bars: dict[str, float]
    plates: list[float]
