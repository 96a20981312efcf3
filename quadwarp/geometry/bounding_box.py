"""Axis-aligned envelopes of point sets."""

from typing import Iterable, List

from quadwarp.errors import InvalidInputError
from quadwarp.geometry.primitives import Point, Rect, as_point, as_points


def bounding_box(points: Iterable) -> Rect:
    """
    Calculate the axis-aligned bounding box of a point set.

    Args:
        points: One or more point-like values

    Returns:
        Rect with left/top at the minimum coordinates
    """
    pts = as_points(points)
    if not pts:
        raise InvalidInputError("Cannot compute a bounding box of zero points")

    xs = [p.x for p in pts]
    ys = [p.y for p in pts]
    left = min(xs)
    top = min(ys)

    return Rect(left=left, top=top, width=max(xs) - left, height=max(ys) - top)


def handle_centers(rects: Iterable) -> List[Point]:
    """Centres of handle rectangles given as Rect or (left, top, width, height)."""
    centers = []
    for i, rect in enumerate(rects):
        try:
            left, top, width, height = (float(v) for v in rect)
        except (TypeError, ValueError):
            raise InvalidInputError(f"handle {i} is not a (left, top, width, height) rect") from None
        centers.append(as_point(Rect(left, top, width, height).center, i))
    return centers
