"""
Quadwarp - perspective transform engine for four-handle canvas warps.
"""

from .errors import InvalidInputError, MalformedMatrixError, QuadwarpError, SingularSystemError
from .geometry.primitives import Point, Rect, identity
from .geometry.bounding_box import bounding_box
from .transform.homography import HomographySolver, SolveResult, get_transform, solve
from .transform.verifier import Discrepancy, TransformVerifier
from .transform.codec import MatrixCodec, encode, to_css
from .transform.projector import ControlPointProjector, project
from .core import WarpProcessor, rect_corners

__all__ = [
    'Point', 'Rect', 'identity', 'bounding_box',
    'HomographySolver', 'SolveResult', 'solve', 'get_transform',
    'TransformVerifier', 'Discrepancy',
    'MatrixCodec', 'encode', 'to_css',
    'ControlPointProjector', 'project',
    'WarpProcessor', 'rect_corners',
    'QuadwarpError', 'InvalidInputError', 'SingularSystemError', 'MalformedMatrixError',
]
__version__ = '1.0.0'
