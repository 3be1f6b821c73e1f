"""Mutable 2D vector with chainable in-place operations."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, TypedDict

from planevec import config
from planevec.errors import (
    BoundTypeMismatchError,
    DivisionByZeroError,
    InvalidNumberError,
    OutOfRangeError,
)

from .helpers import (
    clamp_to_range,
    coin_flip,
    degrees_to_radians,
    is_vector_like,
    radians_to_degrees,
    random_in_range,
    read_axis,
    validate_number,
)


class VectorLike(TypedDict):
    x: float
    y: float


class Polar(TypedDict):
    r: float
    theta: float


def _check_factor(factor: float) -> float:
    validate_number(factor)
    if factor < 0 or factor > 1:
        raise OutOfRangeError(f"The factor must be between 0 and 1, got {factor}")
    return factor


def _axis_bounds(axis: str, first: Any, second: Any) -> tuple[float | None, float]:
    """Resolve clamp arguments for one axis into (lo, hi).

    A single bound is an upper bound and lo is None. Two bounds may be given
    in either order.
    """
    if second is None:
        bound = read_axis(first, axis) if is_vector_like(first) else first
        return None, validate_number(bound)

    first_is_vector = is_vector_like(first)
    if first_is_vector != is_vector_like(second):
        raise BoundTypeMismatchError(first, second)
    if first_is_vector:
        first, second = read_axis(first, axis), read_axis(second, axis)
    validate_number(first)
    validate_number(second)
    return min(first, second), max(first, second)


def _clamp_component(value: float, bounds: tuple[float | None, float]) -> float:
    lo, hi = bounds
    if lo is None:
        return min(value, hi)
    return clamp_to_range(value, lo, hi)


def _magnitude_bound(bound: Any) -> float:
    if is_vector_like(bound):
        bound = math.hypot(read_axis(bound, "x"), read_axis(bound, "y"))
    validate_number(bound)
    if bound < 0:
        raise OutOfRangeError(f"Magnitude bounds must not be negative, got {bound}")
    return bound


def _round_half_up(value: float) -> float:
    floor = math.floor(value)
    if value - floor >= 0.5:
        floor += 1
    return float(floor)


@dataclass
class Vector:
    """2D vector with mutable x and y components.

    Nearly every method mutates the vector in place and returns it so calls
    can be chained; clone() is the only way to get an independent copy.
    Vectors passed as arguments are only read.

    Instances carry no locking. Share one across threads only behind an
    external lock.
    """

    x: float = 0
    y: float = 0

    def __post_init__(self) -> None:
        validate_number(self.x)
        validate_number(self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return self.to_string()

    # Construction and conversion

    @classmethod
    def from_array(cls, values: Sequence[float]) -> "Vector":
        """Build a vector from the first two items of a sequence.

        Items must already be numbers; numeric strings are rejected.
        """
        try:
            size = len(values)
        except TypeError:
            raise InvalidNumberError(values) from None
        if size < 2:
            raise InvalidNumberError(values)
        return cls(values[0], values[1])

    @classmethod
    def from_object(cls, obj: Any) -> "Vector":
        """Build a vector from a {"x", "y"} mapping or an object with x/y attributes."""
        return cls(read_axis(obj, "x"), read_axis(obj, "y"))

    @classmethod
    def from_polar(cls, radians: float, magnitude: float) -> "Vector":
        validate_number(radians)
        validate_number(magnitude)
        return cls(magnitude * math.cos(radians), magnitude * math.sin(radians))

    @classmethod
    def random_unit_vector(cls) -> "Vector":
        return cls.from_polar(random_in_range(0, 2 * math.pi), 1)

    def clone(self) -> "Vector":
        return Vector(self.x, self.y)

    def copy_x(self, vec: "Vector") -> "Vector":
        self.x = vec.x
        return self

    def copy_y(self, vec: "Vector") -> "Vector":
        self.y = vec.y
        return self

    def copy(self, vec: "Vector") -> "Vector":
        self.x = vec.x
        self.y = vec.y
        return self

    def zero(self) -> "Vector":
        self.x = 0
        self.y = 0
        return self

    def to_array(self) -> list[float]:
        return [self.x, self.y]

    def to_object(self) -> VectorLike:
        return {"x": self.x, "y": self.y}

    def to_string(self) -> str:
        return f"x:{self.x}, y:{self.y}"

    def to_polar(self) -> Polar:
        """Return radius and angle; the angle of a zero vector is 0."""
        theta = 0.0 if self.is_zero() else self.horizontal_angle()
        return {"r": self.length(), "theta": theta}

    # Addition

    def add_x(self, vec: "Vector") -> "Vector":
        self.x += vec.x
        return self

    def add_y(self, vec: "Vector") -> "Vector":
        self.y += vec.y
        return self

    def add(self, vec: "Vector") -> "Vector":
        self.x += vec.x
        self.y += vec.y
        return self

    def add_scalar(self, scalar: float) -> "Vector":
        validate_number(scalar)
        self.x += scalar
        self.y += scalar
        return self

    def add_scalar_x(self, scalar: float) -> "Vector":
        self.x += validate_number(scalar)
        return self

    def add_scalar_y(self, scalar: float) -> "Vector":
        self.y += validate_number(scalar)
        return self

    # Subtraction

    def subtract_x(self, vec: "Vector") -> "Vector":
        self.x -= vec.x
        return self

    def subtract_y(self, vec: "Vector") -> "Vector":
        self.y -= vec.y
        return self

    def subtract(self, vec: "Vector") -> "Vector":
        self.x -= vec.x
        self.y -= vec.y
        return self

    def subtract_scalar(self, scalar: float) -> "Vector":
        validate_number(scalar)
        self.x -= scalar
        self.y -= scalar
        return self

    def subtract_scalar_x(self, scalar: float) -> "Vector":
        self.x -= validate_number(scalar)
        return self

    def subtract_scalar_y(self, scalar: float) -> "Vector":
        self.y -= validate_number(scalar)
        return self

    # Multiplication

    def multiply_x(self, vec: "Vector") -> "Vector":
        self.x *= vec.x
        return self

    def multiply_y(self, vec: "Vector") -> "Vector":
        self.y *= vec.y
        return self

    def multiply(self, vec: "Vector") -> "Vector":
        self.x *= vec.x
        self.y *= vec.y
        return self

    def multiply_scalar(self, scalar: float) -> "Vector":
        validate_number(scalar)
        self.x *= scalar
        self.y *= scalar
        return self

    def multiply_scalar_x(self, scalar: float) -> "Vector":
        self.x *= validate_number(scalar)
        return self

    def multiply_scalar_y(self, scalar: float) -> "Vector":
        self.y *= validate_number(scalar)
        return self

    # Division. Every divisor is checked before any component changes.

    def divide_x(self, vec: "Vector") -> "Vector":
        if vec.x == 0:
            raise DivisionByZeroError()
        self.x /= vec.x
        return self

    def divide_y(self, vec: "Vector") -> "Vector":
        if vec.y == 0:
            raise DivisionByZeroError()
        self.y /= vec.y
        return self

    def divide(self, vec: "Vector") -> "Vector":
        if vec.x == 0 or vec.y == 0:
            raise DivisionByZeroError()
        self.x /= vec.x
        self.y /= vec.y
        return self

    def divide_scalar(self, scalar: float) -> "Vector":
        if validate_number(scalar) == 0:
            raise DivisionByZeroError()
        self.x /= scalar
        self.y /= scalar
        return self

    def divide_scalar_x(self, scalar: float) -> "Vector":
        if validate_number(scalar) == 0:
            raise DivisionByZeroError()
        self.x /= scalar
        return self

    def divide_scalar_y(self, scalar: float) -> "Vector":
        if validate_number(scalar) == 0:
            raise DivisionByZeroError()
        self.y /= scalar
        return self

    # Inversion and reflection

    def invert_x(self) -> "Vector":
        self.x *= -1
        return self

    def invert_y(self) -> "Vector":
        self.y *= -1
        return self

    def invert(self) -> "Vector":
        self.x *= -1
        self.y *= -1
        return self

    def reflect(self, surface_normal: "Vector") -> "Vector":
        """Reflect about the line whose normal is surface_normal.

        Computes v - 2 (v . n) n with n a normalized copy of the normal.
        """
        normal = surface_normal.clone().normalize()
        factor = 2 * self.dot(normal)
        self.x -= factor * normal.x
        self.y -= factor * normal.y
        return self

    # Magnitude

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    mag = length
    magnitude = length

    def length_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    mag_sq = length_sq

    def normalize(self) -> "Vector":
        return self.divide_scalar(self.length())

    norm = normalize

    def resize(self, new_magnitude: float | None = None) -> "Vector":
        """Keep the direction and set the magnitude.

        A negative magnitude points the vector the opposite way. resize(0)
        leaves a zero vector, whose horizontal angle reads as 0.
        """
        validate_number(new_magnitude)
        return self.normalize().multiply_scalar(new_magnitude)

    def limit_x(self, max_value: float, factor: float) -> "Vector":
        validate_number(max_value)
        validate_number(factor)
        if abs(self.x) > max_value:
            self.x *= factor
        return self

    def limit_y(self, max_value: float, factor: float) -> "Vector":
        validate_number(max_value)
        validate_number(factor)
        if abs(self.y) > max_value:
            self.y *= factor
        return self

    def limit(self, max_value: float, factor: float) -> "Vector":
        """Multiply each component whose absolute value exceeds max_value by factor."""
        return self.limit_x(max_value, factor).limit_y(max_value, factor)

    # Clamping. Bounds are numbers or vectors, never one of each.

    def clamp_x(self, first: Any, second: Any = None) -> "Vector":
        """Clamp x below first, or between first and second in either order."""
        self.x = _clamp_component(self.x, _axis_bounds("x", first, second))
        return self

    def clamp_y(self, first: Any, second: Any = None) -> "Vector":
        """Clamp y below first, or between first and second in either order."""
        self.y = _clamp_component(self.y, _axis_bounds("y", first, second))
        return self

    def clamp_axes(self, first: Any, second: Any = None) -> "Vector":
        x_bounds = _axis_bounds("x", first, second)
        y_bounds = _axis_bounds("y", first, second)
        self.x = _clamp_component(self.x, x_bounds)
        self.y = _clamp_component(self.y, y_bounds)
        return self

    def clamp_mag(self, first: Any, second: Any = None) -> "Vector":
        """Clamp the magnitude while keeping the direction.

        With one bound it is the maximum and the minimum is 0. Vector bounds
        contribute their magnitude. Negative bounds raise OutOfRangeError.
        """
        if second is None:
            lo, hi = 0.0, _magnitude_bound(first)
        else:
            if is_vector_like(first) != is_vector_like(second):
                raise BoundTypeMismatchError(first, second)
            a, b = _magnitude_bound(first), _magnitude_bound(second)
            lo, hi = min(a, b), max(a, b)

        current = self.length()
        target = clamp_to_range(current, lo, hi)
        if target != current:
            self.resize(target)
        return self

    # Angles

    def horizontal_angle(self) -> float:
        return math.atan2(self.y + 0.0, self.x + 0.0)

    angle = horizontal_angle
    direction = horizontal_angle

    def horizontal_angle_deg(self) -> float:
        return radians_to_degrees(self.horizontal_angle())

    angle_deg = horizontal_angle_deg

    def vertical_angle(self) -> float:
        return math.atan2(self.x + 0.0, self.y + 0.0)

    def vertical_angle_deg(self) -> float:
        return radians_to_degrees(self.vertical_angle())

    def _unit_components(self) -> tuple[float, float]:
        length = self.length()
        return self.x / length, self.y / length

    def angle_with(self, vec: "Vector") -> float:
        """Unsigned angle in [0, pi] between both vectors, 0 if either is zero."""
        if self.is_zero() or vec.is_zero():
            return 0.0
        ux, uy = self._unit_components()
        vx, vy = vec._unit_components()
        return math.acos(clamp_to_range(ux * vx + uy * vy, -1.0, 1.0))

    def angle_deg_with(self, vec: "Vector") -> float:
        return radians_to_degrees(self.angle_with(vec))

    def oriented_angle_with(self, vec: "Vector") -> float:
        """Signed angle in (-pi, pi] from this vector to vec, 0 if either is zero."""
        if self.is_zero() or vec.is_zero():
            return 0.0
        ux, uy = self._unit_components()
        vx, vy = vec._unit_components()
        return math.atan2(ux * vy - uy * vx + 0.0, ux * vx + uy * vy)

    def oriented_angle_deg_with(self, vec: "Vector") -> float:
        return radians_to_degrees(self.oriented_angle_with(vec))

    def slope(self) -> float:
        """y / x. Vertical vectors have a slope of +inf."""
        if self.x == 0:
            if self.y == 0:
                raise DivisionByZeroError()
            return math.inf
        result = self.y / self.x
        if result == 0:
            return 0.0
        if result == -math.inf:
            return math.inf
        return result

    # Rotation

    def rotate_by(self, angle: float) -> "Vector":
        validate_number(angle)
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        x = self.x * cos_a - self.y * sin_a
        y = self.x * sin_a + self.y * cos_a
        self.x = x
        self.y = y
        return self

    rotate = rotate_by

    def rotate_by_deg(self, angle: float) -> "Vector":
        return self.rotate_by(degrees_to_radians(validate_number(angle)))

    rotate_deg = rotate_by_deg

    def rotate_to(self, angle: float) -> "Vector":
        return self.rotate_by(validate_number(angle) - self.horizontal_angle())

    def rotate_to_deg(self, angle: float) -> "Vector":
        return self.rotate_to(degrees_to_radians(validate_number(angle)))

    def rotate_towards(self, vec: "Vector", max_angle: float) -> "Vector":
        """Rotate toward vec's direction by at most max_angle radians.

        Turns the shorter way round and stops once aligned with vec.
        """
        validate_number(max_angle)
        if max_angle <= 0:
            raise OutOfRangeError(f"The max angle must be positive, got {max_angle}")
        step = min(self.angle_with(vec), max_angle)
        if self.cross(vec) < 0:
            step = -step
        return self.rotate_by(step)

    def rotate_towards_deg(self, vec: "Vector", max_angle: float) -> "Vector":
        return self.rotate_towards(vec, degrees_to_radians(validate_number(max_angle)))

    # Distances

    def distance_x(self, vec: "Vector") -> float:
        return self.x - vec.x

    def abs_distance_x(self, vec: "Vector") -> float:
        return abs(self.distance_x(vec))

    def distance_y(self, vec: "Vector") -> float:
        return self.y - vec.y

    def abs_distance_y(self, vec: "Vector") -> float:
        return abs(self.distance_y(vec))

    def distance(self, vec: "Vector") -> float:
        return math.hypot(self.distance_x(vec), self.distance_y(vec))

    def distance_sq(self, vec: "Vector") -> float:
        dx = self.distance_x(vec)
        dy = self.distance_y(vec)
        return dx * dx + dy * dy

    def distance_manhattan(self, vec: "Vector") -> float:
        return self.abs_distance_x(vec) + self.abs_distance_y(vec)

    def distance_chebyshev(self, vec: "Vector") -> float:
        return max(self.abs_distance_x(vec), self.abs_distance_y(vec))

    # Products

    def dot(self, vec: "Vector") -> float:
        return self.x * vec.x + self.y * vec.y

    def cross(self, vec: "Vector") -> float:
        """2D cross product returning a scalar (z-component)."""
        return self.x * vec.y - self.y * vec.x

    def project_onto(self, vec: "Vector") -> "Vector":
        length_sq = vec.length_sq()
        if length_sq == 0:
            raise DivisionByZeroError()
        coeff = self.dot(vec) / length_sq
        self.x = coeff * vec.x
        self.y = coeff * vec.y
        return self

    # Comparison

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def is_equal_to(self, vec: "Vector") -> bool:
        """Exact equality. Use is_close_to after any trigonometric operation."""
        return self.x == vec.x and self.y == vec.y

    def is_close_to(self, vec: "Vector", epsilon: float = config.DEFAULT_EPSILON) -> bool:
        validate_number(epsilon)
        return abs(self.x - vec.x) <= epsilon and abs(self.y - vec.y) <= epsilon

    def is_parallel_to(self, vec: "Vector") -> bool:
        return abs(self.cross(vec)) < config.PARALLEL_TOLERANCE

    def is_perpendicular_to(self, vec: "Vector") -> bool:
        return abs(self.dot(vec)) < config.PARALLEL_TOLERANCE

    # Interpolation

    def mix_x(self, vec: "Vector", factor: float = config.DEFAULT_MIX_FACTOR) -> "Vector":
        _check_factor(factor)
        self.x = (1 - factor) * self.x + factor * vec.x
        return self

    def mix_y(self, vec: "Vector", factor: float = config.DEFAULT_MIX_FACTOR) -> "Vector":
        _check_factor(factor)
        self.y = (1 - factor) * self.y + factor * vec.y
        return self

    def mix(self, vec: "Vector", factor: float = config.DEFAULT_MIX_FACTOR) -> "Vector":
        _check_factor(factor)
        return self.mix_x(vec, factor).mix_y(vec, factor)

    # Precision

    def unfloat(self) -> "Vector":
        """Round both components to the nearest integer, halves rounding up."""
        self.x = _round_half_up(self.x)
        self.y = _round_half_up(self.y)
        return self

    def fix_precision(self, digits: int = config.DEFAULT_PRECISION) -> "Vector":
        validate_number(digits)
        digits = int(digits)
        self.x = round(self.x, digits)
        self.y = round(self.y, digits)
        return self

    # Randomization

    def randomize_x(self, top_left: "Vector", bottom_right: "Vector") -> "Vector":
        low = min(top_left.x, bottom_right.x)
        high = max(top_left.x, bottom_right.x)
        self.x = random_in_range(low, high)
        return self

    def randomize_y(self, top_left: "Vector", bottom_right: "Vector") -> "Vector":
        low = min(top_left.y, bottom_right.y)
        high = max(top_left.y, bottom_right.y)
        self.y = random_in_range(low, high)
        return self

    def randomize(self, top_left: "Vector", bottom_right: "Vector") -> "Vector":
        return self.randomize_x(top_left, bottom_right).randomize_y(top_left, bottom_right)

    def randomize_any(self, top_left: "Vector", bottom_right: "Vector") -> "Vector":
        """Randomize exactly one axis, picked with even odds."""
        if coin_flip():
            return self.randomize_x(top_left, bottom_right)
        return self.randomize_y(top_left, bottom_right)
