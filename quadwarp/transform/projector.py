"""Recover control point positions from a stored matrix."""

import logging
import math
from typing import Iterable, List

import numpy as np

from quadwarp.errors import MalformedMatrixError
from quadwarp.geometry.primitives import Point, as_matrix, as_points
from quadwarp.transform.verifier import apply_matrix

logger = logging.getLogger(__name__)


def _finite_or_zero(value: float) -> float:
    return value if math.isfinite(value) else 0.0


class ControlPointProjector:
    """Forward-apply a matrix to reference corners."""

    def project(self, reference: Iterable, matrix) -> List[Point]:
        """
        Map reference points through ``matrix``.

        Args:
            reference: Reference corners (usually the untransformed rectangle)
            matrix: 4x4 transform, e.g. as persisted by the editor

        Returns:
            Transformed points; the reference points unchanged if the
            matrix is malformed
        """
        points = as_points(reference, label="reference")

        try:
            H = as_matrix(matrix)
        except MalformedMatrixError as e:
            logger.warning("Cannot project control points, keeping reference: %s", e)
            return list(points)

        projected = []
        with np.errstate(all='ignore'):
            for point in points:
                x, y = apply_matrix(H, point)
                projected.append(Point(_finite_or_zero(x), _finite_or_zero(y)))
        return projected


def project(reference: Iterable, matrix) -> List[Point]:
    return ControlPointProjector().project(reference, matrix)
