"""
Band value objects and band configuration.

Bands are colour-coded elastic tools with a relative difficulty ordering.
The ``order`` drives every comparison; ``resistance`` is informational only.
"""

from enum import Enum
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BandType(str, Enum):
    """
    How a band interacts with the movement.

    - RESISTANCE: the band adds load; harder means more resistance (higher order)
    - ASSISTANCE: the band removes load; harder means less assistance (lower order)
    """

    RESISTANCE = "resistance"
    ASSISTANCE = "assistance"


class Direction(str, Enum):
    """Direction of a band change relative to difficulty."""

    HARDER = "harder"
    EASIER = "easier"


class BandSpec(BaseModel):
    """Configured resistance value and order index for a single colour."""

    model_config = ConfigDict(frozen=True)

    resistance: float = Field(..., ge=0, description="Nominal resistance value")
    order: int = Field(..., description="Difficulty order (ascending = more resistance)")


class Band(BaseModel):
    """
    A configured band.

    Examples:
        >>> band = Band(color="red", resistance=10, order=1)
        >>> band.display_name
        'Red'
    """

    model_config = ConfigDict(frozen=True)

    color: str = Field(..., min_length=1, description="Colour identifier, e.g. 'red'")
    resistance: float = Field(..., ge=0, description="Nominal resistance value")
    order: int = Field(..., description="Difficulty order (ascending = more resistance)")

    @property
    def display_name(self) -> str:
        """Capitalised colour for display."""
        return self.color.capitalize()


DEFAULT_BAND_COLORS: Dict[str, BandSpec] = {
    "red": BandSpec(resistance=10, order=1),
    "blue": BandSpec(resistance=20, order=2),
    "green": BandSpec(resistance=30, order=3),
    "black": BandSpec(resistance=40, order=4),
}


class BandConfig(BaseModel):
    """
    Immutable band configuration injected into the band services.

    Examples:
        >>> config = BandConfig(
        ...     colors={"red": {"resistance": 10, "order": 1}},
        ...     max_reps_before_band_change=15,
        ...     default_reps_on_band_change=8,
        ... )
    """

    model_config = ConfigDict(frozen=True)

    colors: Dict[str, BandSpec] = Field(
        default_factory=lambda: dict(DEFAULT_BAND_COLORS),
        description="Map of colour -> {resistance, order}",
    )
    max_reps_before_band_change: int = Field(
        default=15,
        ge=1,
        description="Rep count at which the next band is suggested",
    )
    default_reps_on_band_change: int = Field(
        default=8,
        ge=1,
        description="Reps suggested immediately after a band change",
    )

    @field_validator("colors")
    @classmethod
    def validate_unique_orders(cls, v: Dict[str, BandSpec]) -> Dict[str, BandSpec]:
        """Ensure every band has a distinct order index."""
        orders = [spec.order for spec in v.values()]
        if len(orders) != len(set(orders)):
            raise ValueError("Band order values must be unique")
        return {color.strip().lower(): spec for color, spec in v.items()}
