"""Homography calculation from four point correspondences."""

import logging
from typing import Iterable, List, NamedTuple, Optional, Tuple

import numpy as np

from quadwarp.errors import SingularSystemError
from quadwarp.geometry.primitives import Point, as_points, identity
from quadwarp.transform.elimination import solve_8x8
from quadwarp.transform.verifier import Discrepancy, TransformVerifier

logger = logging.getLogger(__name__)

STATUS_OK = "ok"
STATUS_DEGENERATE = "degenerate"


class SolveResult(NamedTuple):
    """Outcome of a solve: always carries a usable matrix."""
    status: str
    matrix: np.ndarray
    reason: Optional[str] = None
    discrepancies: Tuple[Discrepancy, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


def build_system(src: List[Point], dst: List[Point]) -> Tuple[np.ndarray, np.ndarray]:
    """Build the 8x8 coefficient matrix and target vector (x-row, y-row per pair)."""
    A = np.zeros((8, 8))
    b = np.zeros(8)

    for i, (f, t) in enumerate(zip(src, dst)):
        A[2 * i] = [f.x, f.y, 1, 0, 0, 0, -f.x * t.x, -f.y * t.x]
        A[2 * i + 1] = [0, 0, 0, f.x, f.y, 1, -f.x * t.y, -f.y * t.y]
        b[2 * i] = t.x
        b[2 * i + 1] = t.y

    return A, b


def params_to_matrix(h) -> np.ndarray:
    """Assemble the 4x4 matrix from the free parameters h0..h7."""
    return np.array([
        [h[0], h[1], 0.0, h[2]],
        [h[3], h[4], 0.0, h[5]],
        [0.0, 0.0, 1.0, 0.0],
        [h[6], h[7], 0.0, 1.0],
    ], dtype=float)


def degeneracy_reason(H: np.ndarray, src: List[Point], tolerance: float = 1e-10) -> Optional[str]:
    """
    Explain why a solved matrix cannot warp the reference quad, or return None.

    The planar 3x3 part must be non-singular, measured against the size of
    the terms in its determinant expansion so translation does not mask a
    collapse. The homogeneous ``w`` of every reference corner must be
    clearly non-zero and share one sign, otherwise a corner is sent to
    infinity or the quad folds through the horizon.
    """
    h0, h1, h2 = H[0, 0], H[0, 1], H[0, 3]
    h3, h4, h5 = H[1, 0], H[1, 1], H[1, 3]
    h6, h7 = H[3, 0], H[3, 1]

    terms = np.array([h0 * h4, -h0 * h5 * h7, -h1 * h3, h1 * h5 * h6, h2 * h3 * h7, -h2 * h4 * h6])
    det = float(np.sum(terms))
    magnitude = float(np.sum(np.abs(terms)))
    if not np.isfinite(det) or abs(det) <= tolerance * magnitude:
        return f"Transform is singular (det {det:.3e})"

    w = np.array([h6 * p.x + h7 * p.y + 1.0 for p in src])
    if np.min(np.abs(w)) <= tolerance * np.max(np.abs(w)):
        return f"Reference corner {int(np.argmin(np.abs(w)))} maps to infinity"
    if np.any(np.sign(w) != np.sign(w[0])):
        return "Quad folds across the vanishing line"

    return None


class HomographySolver:
    """Calculate the perspective transform mapping four points onto four others."""

    def __init__(self, pivot_tolerance: float = 1e-12, verify: bool = False,
                 verifier: Optional[TransformVerifier] = None,
                 degeneracy_tolerance: float = 1e-10):
        self.pivot_tolerance = pivot_tolerance
        self.degeneracy_tolerance = degeneracy_tolerance
        self.verify = verify
        self.verifier = verifier or TransformVerifier()

    def solve(self, src_points: Iterable, dst_points: Iterable) -> SolveResult:
        """
        Solve for the transform taking ``src_points`` onto ``dst_points``.

        Args:
            src_points: 4 reference corners
            dst_points: 4 target corners, in the same order

        Returns:
            SolveResult; on a degenerate configuration the status is
            ``degenerate`` and the matrix is the identity

        Raises:
            InvalidInputError: wrong point count or non-finite coordinates
        """
        src = as_points(src_points, count=4, label="from")
        dst = as_points(dst_points, count=4, label="to")

        A, b = build_system(src, dst)
        try:
            h = solve_8x8(A, b, self.pivot_tolerance)
        except SingularSystemError as e:
            logger.warning("Degenerate correspondences, falling back to identity: %s", e)
            return SolveResult(STATUS_DEGENERATE, identity(), str(e))

        H = params_to_matrix(h)

        reason = degeneracy_reason(H, src, self.degeneracy_tolerance)
        if reason is not None:
            logger.warning("Degenerate correspondences, falling back to identity: %s", reason)
            return SolveResult(STATUS_DEGENERATE, identity(), reason)

        discrepancies = ()
        if self.verify:
            discrepancies = tuple(self.verifier.verify(H, src, dst))
            for d in discrepancies:
                logger.warning(
                    "Transform verification failed for point %d: expected %s, actual %s, error %.3e",
                    d.index, tuple(d.expected), tuple(d.actual), d.error)

        return SolveResult(STATUS_OK, H, discrepancies=discrepancies)

    def get_transform(self, src_points: Iterable, dst_points: Iterable) -> np.ndarray:
        """Return just the matrix; degenerate input yields the identity."""
        return self.solve(src_points, dst_points).matrix


def solve(src_points: Iterable, dst_points: Iterable) -> SolveResult:
    """Solve with default settings."""
    return HomographySolver().solve(src_points, dst_points)


def get_transform(src_points: Iterable, dst_points: Iterable) -> np.ndarray:
    """Matrix-only form of :func:`solve`."""
    return HomographySolver().get_transform(src_points, dst_points)
