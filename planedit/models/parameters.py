"""Corner editing parameters."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .corner import CornerSide


DEFAULT_TOLERANCE_FACTOR = 0.5      # Match radius as a fraction of wall thickness
DEFAULT_ANGLE_EPSILON_DEG = 0.5     # Walls closer than this to (anti-)parallel are collinear
DEFAULT_MAX_BEVEL_FRACTION = 1 / 3  # Longest trim as a fraction of the shorter wall
DEFAULT_MIN_BEVEL_LENGTH = 1e-3     # Shorter bevels leave the corner untouched
DEFAULT_BEVEL_ACTION = "Bevel wall corner"
CORNER_MIN_ANGLE_DEG = 15.0         # Corner drags may not pinch a corner below this
CORNER_MAX_ANGLE_DEG = 165.0        # or open it beyond this


class EditParams(BaseModel):
    """User-adjustable parameters for corner bevel editing."""
    tolerance_factor: float = Field(default=DEFAULT_TOLERANCE_FACTOR, ge=0)
    angle_epsilon_deg: float = Field(default=DEFAULT_ANGLE_EPSILON_DEG, ge=0)
    max_bevel_fraction: float = Field(default=DEFAULT_MAX_BEVEL_FRACTION, gt=0, lt=1)
    min_bevel_length: float = Field(default=DEFAULT_MIN_BEVEL_LENGTH, ge=0)
    bevel_action: str = DEFAULT_BEVEL_ACTION   # History label for a committed bevel
    side: CornerSide = CornerSide.OUTER        # Handle the pointer drags
