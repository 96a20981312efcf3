"""Conversions between the 4x4 matrix and the forms consumed outside the engine."""

import math
from typing import Dict, Iterable, List

import numpy as np

from quadwarp.errors import InvalidInputError
from quadwarp.geometry.primitives import as_matrix
from quadwarp.transform.homography import params_to_matrix


class MatrixCodec:
    """Flatten matrices for the renderer and pack them for persistence."""

    def __init__(self, precision: int = 10, transform_origin: str = "0 0"):
        self.precision = precision
        self.transform_origin = transform_origin

    def _round(self, value: float) -> float:
        # + 0.0 turns -0.0 into 0.0
        return round(float(value), self.precision) + 0.0

    def encode(self, matrix) -> List[float]:
        """
        Flatten a row-major matrix into 16 column-major values.

        Args:
            matrix: 4x4 matrix

        Returns:
            List of 16 floats rounded to ``precision`` decimals
        """
        H = as_matrix(matrix)
        return [self._round(v) for v in H.T.flatten()]

    def to_css(self, matrix) -> str:
        """Format the matrix as a CSS ``matrix3d(...)`` value."""
        values = ", ".join(f"{v:.{self.precision}f}" for v in self.encode(matrix))
        return f"matrix3d({values})"

    def transform_style(self, matrix, origin: str = None) -> Dict[str, str]:
        """Style properties that apply the matrix to a drawable element."""
        return {
            "transform": self.to_css(matrix),
            "transform-origin": origin if origin is not None else self.transform_origin,
        }

    def to_params(self, matrix) -> List[float]:
        """The 8 free parameters h0..h7 of a matrix built by the solver."""
        H = as_matrix(matrix)
        return [float(H[0, 0]), float(H[0, 1]), float(H[0, 3]),
                float(H[1, 0]), float(H[1, 1]), float(H[1, 3]),
                float(H[3, 0]), float(H[3, 1])]

    def from_params(self, params: Iterable) -> np.ndarray:
        """Rebuild a matrix from 8 persisted parameters."""
        try:
            values = [float(v) for v in params]
        except (TypeError, ValueError):
            raise InvalidInputError("Matrix parameters must be numbers") from None

        if len(values) != 8:
            raise InvalidInputError(f"Expected 8 matrix parameters, got {len(values)}")
        if not all(math.isfinite(v) for v in values):
            raise InvalidInputError("Matrix parameters must be finite")

        return params_to_matrix(values)

    def to_nested(self, matrix) -> List[List[float]]:
        """Plain nested lists, row-major, for JSON storage."""
        return as_matrix(matrix).tolist()


def encode(matrix) -> List[float]:
    """Encode with default precision."""
    return MatrixCodec().encode(matrix)


def to_css(matrix) -> str:
    return MatrixCodec().to_css(matrix)
