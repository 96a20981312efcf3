"""Gaussian elimination for the fixed-size 8x8 correspondence system."""

import numpy as np

from quadwarp.errors import SingularSystemError

SYSTEM_SIZE = 8


def solve_8x8(A: np.ndarray, b: np.ndarray, pivot_tolerance: float = 1e-12) -> np.ndarray:
    """
    Solve ``A @ h = b`` with partial pivoting.

    The largest absolute entry of each column (from the diagonal down) is
    swapped into the pivot row, first occurrence winning ties, so results
    are reproducible. Inputs are not modified.

    Args:
        A: 8x8 coefficient matrix
        b: 8-vector of targets
        pivot_tolerance: pivots smaller than this times the largest
            coefficient magnitude are treated as zero

    Returns:
        Solution vector of length 8

    Raises:
        SingularSystemError: if a pivot vanishes or the solution is not finite
    """
    M = np.array(A, dtype=float)
    rhs = np.array(b, dtype=float).reshape(-1)
    if M.shape != (SYSTEM_SIZE, SYSTEM_SIZE) or rhs.shape != (SYSTEM_SIZE,):
        raise ValueError(f"Expected an 8x8 system, got {M.shape} and {rhs.shape}")

    scale = float(np.max(np.abs(M)))
    if not np.isfinite(scale) or scale == 0.0:
        raise SingularSystemError("Coefficient matrix is zero or not finite")
    threshold = pivot_tolerance * scale

    for col in range(SYSTEM_SIZE):
        pivot_row = col + int(np.argmax(np.abs(M[col:, col])))
        pivot = M[pivot_row, col]
        if abs(pivot) <= threshold:
            raise SingularSystemError(
                f"Pivot {pivot:.3e} in column {col} is below tolerance {threshold:.3e}")

        if pivot_row != col:
            M[[col, pivot_row]] = M[[pivot_row, col]]
            rhs[[col, pivot_row]] = rhs[[pivot_row, col]]

        factors = M[col + 1:, col] / M[col, col]
        M[col + 1:, col:] -= np.outer(factors, M[col, col:])
        rhs[col + 1:] -= factors * rhs[col]

    h = np.zeros(SYSTEM_SIZE)
    for row in range(SYSTEM_SIZE - 1, -1, -1):
        h[row] = (rhs[row] - M[row, row + 1:] @ h[row + 1:]) / M[row, row]

    if not np.all(np.isfinite(h)):
        raise SingularSystemError("Solution contains non-finite values")

    return h
