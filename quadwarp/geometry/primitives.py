"""Point, rectangle and 4x4 matrix primitives."""

import math
from numbers import Real
from typing import Iterable, List, Mapping, NamedTuple, Optional

import numpy as np

from quadwarp.errors import InvalidInputError, MalformedMatrixError


class Point(NamedTuple):
    """A 2D point in canvas pixels."""
    x: float
    y: float


class Rect(NamedTuple):
    """Axis-aligned rectangle."""
    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> Point:
        return Point(self.left + self.width / 2, self.top + self.height / 2)


def _coordinate(value, label: str) -> float:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (Real, np.number)):
        raise InvalidInputError(f"{label} must be a number, got {value!r}")
    result = float(value)
    if not math.isfinite(result):
        raise InvalidInputError(f"{label} must be finite, got {result}")
    return result


def as_point(value, index: Optional[int] = None) -> Point:
    """
    Convert a point-like value to a Point.

    Accepts Point, (x, y) sequences, length-2 arrays and mappings with
    ``x`` and ``y`` keys. Coordinates must be finite numbers.
    """
    where = "point" if index is None else f"point {index}"

    if isinstance(value, Mapping):
        if 'x' not in value or 'y' not in value:
            raise InvalidInputError(f"{where} mapping needs 'x' and 'y' keys")
        x, y = value['x'], value['y']
    elif isinstance(value, (tuple, list, np.ndarray)):
        if len(value) != 2:
            raise InvalidInputError(f"{where} must have 2 coordinates, got {len(value)}")
        x, y = value[0], value[1]
    else:
        raise InvalidInputError(f"{where} is not point-like: {value!r}")

    return Point(_coordinate(x, f"{where}.x"), _coordinate(y, f"{where}.y"))


def as_points(values: Iterable, count: Optional[int] = None,
              label: str = "points") -> List[Point]:
    """Convert a sequence of point-like values, optionally enforcing its length."""
    if values is None or isinstance(values, (str, bytes, Mapping)):
        raise InvalidInputError(f"{label} must be a sequence of points")
    try:
        items = list(values)
    except TypeError:
        raise InvalidInputError(f"{label} must be a sequence of points") from None

    if count is not None and len(items) != count:
        raise InvalidInputError(
            f"{label} must contain exactly {count} points, got {len(items)}")

    return [as_point(item, i) for i, item in enumerate(items)]


def identity() -> np.ndarray:
    """Return a fresh 4x4 identity matrix."""
    return np.eye(4, dtype=float)


def as_matrix(value) -> np.ndarray:
    """Return ``value`` as a new float 4x4 array or raise MalformedMatrixError."""
    if value is None:
        raise MalformedMatrixError("Matrix is None")
    try:
        matrix = np.array(value, dtype=float)
    except (TypeError, ValueError) as e:
        raise MalformedMatrixError(f"Matrix is not numeric: {e}") from e

    if matrix.shape != (4, 4):
        raise MalformedMatrixError(f"Invalid matrix shape {matrix.shape}, expected (4, 4)")

    return matrix
