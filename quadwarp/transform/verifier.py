"""Re-projection check for solved transforms."""

import math
from typing import Iterable, List, NamedTuple

import numpy as np

from quadwarp.geometry.primitives import Point, as_matrix, as_points


class Discrepancy(NamedTuple):
    """A correspondence the matrix does not reproduce."""
    index: int
    expected: Point
    actual: Point
    error: float


def apply_matrix(matrix: np.ndarray, point: Point) -> Point:
    """Map a point through a 4x4 matrix with perspective divide (w of 0 counts as 1)."""
    transformed = matrix @ np.array([point.x, point.y, 0.0, 1.0])
    w = transformed[3]
    if w == 0 or not math.isfinite(w):
        w = 1.0
    return Point(float(transformed[0] / w), float(transformed[1] / w))


class TransformVerifier:
    """Flag correspondences that drift after re-projection."""

    def __init__(self, tolerance: float = 1e-6):
        self.tolerance = tolerance

    def verify(self, matrix, src_points: Iterable, dst_points: Iterable) -> List[Discrepancy]:
        """Return one Discrepancy per pair whose error exceeds the tolerance."""
        H = as_matrix(matrix)
        src = as_points(src_points, label="from")
        dst = as_points(dst_points, count=len(src), label="to")

        discrepancies = []
        with np.errstate(all='ignore'):
            for i, (f, t) in enumerate(zip(src, dst)):
                actual = apply_matrix(H, f)
                error = math.hypot(actual.x - t.x, actual.y - t.y)
                # NaN errors are reported too
                if not error <= self.tolerance:
                    discrepancies.append(Discrepancy(i, t, actual, error))
        return discrepancies

    def reprojection_error(self, matrix, src_points: Iterable, dst_points: Iterable) -> float:
        """Mean Euclidean re-projection error in pixels."""
        H = as_matrix(matrix)
        src = as_points(src_points, label="from")
        dst = as_points(dst_points, count=len(src), label="to")
        if not src:
            return 0.0

        with np.errstate(all='ignore'):
            errors = [math.hypot(a.x - t.x, a.y - t.y)
                      for a, t in ((apply_matrix(H, f), t) for f, t in zip(src, dst))]
        return float(np.mean(errors))
