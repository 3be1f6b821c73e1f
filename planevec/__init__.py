"""Mutable, chainable 2D vectors."""

from .errors import (
    BoundTypeMismatchError,
    DivisionByZeroError,
    InvalidNumberError,
    OutOfRangeError,
    VectorError,
)
from .math import (
    Polar,
    Vector,
    VectorLike,
    clamp_to_range,
    degrees_to_radians,
    is_vector_like,
    radians_to_degrees,
    random_in_range,
    validate_number,
)
from .settings_schema import VectorSettings, apply_settings, load_last_used, save_last_used

__all__ = [
    "BoundTypeMismatchError",
    "DivisionByZeroError",
    "InvalidNumberError",
    "OutOfRangeError",
    "Polar",
    "Vector",
    "VectorError",
    "VectorLike",
    "VectorSettings",
    "apply_settings",
    "clamp_to_range",
    "degrees_to_radians",
    "is_vector_like",
    "load_last_used",
    "radians_to_degrees",
    "random_in_range",
    "save_last_used",
    "validate_number",
]
