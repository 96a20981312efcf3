"""
Quadwarp Core Processor
Entry point used by the canvas editor's drag handler and reload path
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from quadwarp.config import merge_config
from quadwarp.errors import InvalidInputError
from quadwarp.geometry.bounding_box import bounding_box
from quadwarp.geometry.primitives import Point, as_point, as_points
from quadwarp.transform.codec import MatrixCodec
from quadwarp.transform.homography import HomographySolver
from quadwarp.transform.projector import ControlPointProjector
from quadwarp.transform.verifier import TransformVerifier
from quadwarp.utils.metrics import PerformanceMetrics

logger = logging.getLogger(__name__)


def rect_corners(width: float, height: float) -> List[Point]:
    """Reference corners of a width x height box in handle order.

    Handles are ordered top-left, bottom-left, top-right, bottom-right.
    """
    return as_points([(0, 0), (0, height), (width, 0), (width, height)])


class WarpProcessor:
    """Ties solver, verifier, codec and projector together for the editor"""

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialize processor

        Args:
            config: Configuration overrides merged over DEFAULT_CONFIG (optional)
        """
        self.config = merge_config(config)

        solver_cfg = self.config["solver"]
        codec_cfg = self.config["codec"]
        editor_cfg = self.config["editor"]

        self.verifier = TransformVerifier(tolerance=self.config["verifier"]["tolerance"])
        self.solver = HomographySolver(
            pivot_tolerance=solver_cfg["pivot_tolerance"],
            degeneracy_tolerance=solver_cfg["degeneracy_tolerance"],
            verify=solver_cfg["verify"],
            verifier=self.verifier,
        )
        self.codec = MatrixCodec(
            precision=codec_cfg["precision"],
            transform_origin=codec_cfg["transform_origin"],
        )
        self.projector = ControlPointProjector()
        self.canvas_width = float(editor_cfg["canvas_width"])
        self.canvas_height = float(editor_cfg["canvas_height"])

    def reference_corners(self, width: float = None, height: float = None) -> List[Point]:
        """Undeformed corners, defaulting to the configured canvas size."""
        return rect_corners(self.canvas_width if width is None else width,
                            self.canvas_height if height is None else height)

    def move_handle(self, points: Iterable, index: int, x: float, y: float,
                    width: float = None, height: float = None) -> List[Point]:
        """
        Move one handle, clamped to the canvas.

        Args:
            points: Current handle positions
            index: Handle being dragged
            x, y: Pointer position relative to the canvas
            width, height: Canvas size (configured size when omitted)

        Returns:
            New list of handle positions; ``points`` is left untouched
        """
        handles = as_points(points, label="handles")
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(handles):
            raise InvalidInputError(f"Handle index {index!r} out of range")

        width = self.canvas_width if width is None else width
        height = self.canvas_height if height is None else height
        target = as_point((x, y))

        handles[index] = Point(max(0.0, min(float(width), target.x)),
                               max(0.0, min(float(height), target.y)))
        return handles

    def process_frame(self, reference: Iterable, targets: Iterable) -> Dict[str, Any]:
        """
        Compute the transform for one drag frame.

        Args:
            reference: 4 undeformed corners
            targets: 4 handle positions, same order

        Returns:
            Dictionary with the matrix in the forms the editor consumes
        """
        metrics = PerformanceMetrics()
        metrics.start_timer('frame')

        reference = as_points(reference, count=4, label="reference")
        targets = as_points(targets, count=4, label="targets")

        result = self.solver.solve(reference, targets)
        if not result.ok:
            logger.debug("Frame kept undeformed: %s", result.reason)

        frame = {
            "status": result.status,
            "reason": result.reason,
            "matrix": self.codec.to_nested(result.matrix),
            "matrix3d": self.codec.encode(result.matrix),
            "style": self.codec.transform_style(result.matrix),
            "bounding_box": bounding_box(targets)._asdict(),
            "discrepancies": [d._asdict() for d in result.discrepancies],
        }
        frame["processing_time_ms"] = round(metrics.stop_timer('frame'), 4)
        return frame

    def restore_handles(self, reference: Iterable, matrix: Optional[Any]) -> List[Point]:
        """Handle positions for a persisted matrix (nested lists or array)."""
        return self.projector.project(reference, matrix)
