"""Vector type and numeric helpers."""

from .helpers import (
    DEGREES,
    clamp_to_range,
    degrees_to_radians,
    is_vector_like,
    radians_to_degrees,
    random_in_range,
    seed,
    validate_number,
)
from .vector import Polar, Vector, VectorLike

__all__ = [
    "DEGREES",
    "Polar",
    "Vector",
    "VectorLike",
    "clamp_to_range",
    "degrees_to_radians",
    "is_vector_like",
    "radians_to_degrees",
    "random_in_range",
    "seed",
    "validate_number",
]
