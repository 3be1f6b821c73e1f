"""Stateless numeric helpers shared by the vector type."""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Mapping
from numbers import Real
from typing import Any

from planevec.errors import InvalidNumberError

logger = logging.getLogger(__name__)

DEGREES = 180 / math.pi

_rng = random.Random()


def validate_number(value: Any) -> float:
    """Return value unchanged if it is a finite real number.

    bool is rejected even though it subclasses int, and numeric strings are
    never coerced.
    """
    if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value):
        raise InvalidNumberError(value)
    return value


def degrees_to_radians(deg: float) -> float:
    return deg / DEGREES


def radians_to_degrees(rad: float) -> float:
    return rad * DEGREES


def seed(value: int | None = None) -> None:
    """Reseed the generator used by random_in_range and coin_flip."""
    logger.debug("Reseeding vector RNG with %r", value)
    _rng.seed(value)


def random_in_range(min_value: float, max_value: float) -> float:
    """Uniform float in [min_value, max_value)."""
    return _rng.random() * (max_value - min_value) + min_value


def coin_flip() -> bool:
    return _rng.random() < 0.5


def clamp_to_range(value: float, lo: float, hi: float) -> float:
    """Clamp value to the inclusive range [lo, hi]."""
    validate_number(value)
    validate_number(lo)
    validate_number(hi)
    return min(max(value, lo), hi)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def is_vector_like(value: Any) -> bool:
    """True for a mapping with numeric "x"/"y" keys or an object with numeric x/y attributes."""
    if value is None:
        return False
    if isinstance(value, Mapping):
        return _is_number(value.get("x")) and _is_number(value.get("y"))
    return _is_number(getattr(value, "x", None)) and _is_number(getattr(value, "y", None))


def read_axis(value: Any, axis: str) -> Any:
    """Read one component off a vector-like value."""
    if isinstance(value, Mapping):
        return value.get(axis)
    return getattr(value, axis, None)
