import math

from pydantic import BaseModel, field_validator

from shared.constants import (
    DEFAULT_SMOOTH,
    DEFAULT_X_ORIGIN,
    DEFAULT_X_STEP,
    DEFAULT_Y_ORIGIN,
    DEFAULT_Y_STEP,
)


class GridSettings(BaseModel):
    """
    Grid description and output options, fixed before any tracing.

    The model is frozen: derive variants with ``model_copy(update=...)``.
    """

    model_config = {
        'frozen': True,
        'extra': 'ignore',  # ignore unknown keys from profiles
    }

    # Number of columns / rows of the value buffer
    width: int
    height: int

    # Interpolate crossings linearly (False keeps cell-edge midpoints)
    smooth: bool = DEFAULT_SMOOTH

    # Output coordinates: origin + step * grid coordinate
    x_origin: float = DEFAULT_X_ORIGIN
    y_origin: float = DEFAULT_Y_ORIGIN
    x_step: float = DEFAULT_X_STEP
    y_step: float = DEFAULT_Y_STEP

    @field_validator('width', 'height')
    @classmethod
    def validate_dimension(cls, v: int) -> int:
        if v <= 0:
            msg = 'Grid dimension must be a positive integer'
            raise ValueError(msg)
        return v

    @field_validator('x_origin', 'y_origin', 'x_step', 'y_step')
    @classmethod
    def validate_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            msg = 'Origin and step must be finite numbers'
            raise ValueError(msg)
        return v

    @property
    def is_identity_transform(self) -> bool:
        return (self.x_origin, self.y_origin, self.x_step, self.y_step) == (
            0.0,
            0.0,
            1.0,
            1.0,
        )

    def transform_point(self, point: tuple[float, float]) -> tuple[float, float]:
        x, y = point
        return (self.x_origin + self.x_step * x, self.y_origin + self.y_step * y)
