"""Internal Bezier curve flattening algorithms.

This is an internal module containing helper functions for flatten_path.
Not intended for public use.
"""

import math

from pathgeom.domain import PathPoint

# Subdivision depth limit; 2**16 pieces per curve at most.
_MAX_DEPTH = 16


def _mid(a: PathPoint, b: PathPoint) -> PathPoint:
    return ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)


def _distance_to_line(p: PathPoint, a: PathPoint, b: PathPoint) -> float:
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    length = math.hypot(dx, dy)
    if length < 1e-12:
        return math.hypot(p[0] - a[0], p[1] - a[1])
    return abs(dx * (a[1] - p[1]) - dy * (a[0] - p[0])) / length


def flatten_quadratic(
    p0: PathPoint, p1: PathPoint, p2: PathPoint, tolerance: float, depth: int = 0
) -> list[PathPoint]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    The start point is not included in the result.

    Args:
        p0: Start point
        p1: Control point
        p2: End point
        tolerance: Maximum distance from true curve

    Returns:
        Points approximating the curve after p0, ending with p2
    """
    # The curve deviates from its chord by at most half the control distance
    if depth >= _MAX_DEPTH or _distance_to_line(p1, p0, p2) / 2 <= tolerance:
        return [p2]

    # Subdivide at t=0.5
    q1 = _mid(p0, p1)
    r1 = _mid(p1, p2)
    mid = _mid(q1, r1)

    left = flatten_quadratic(p0, q1, mid, tolerance, depth + 1)
    right = flatten_quadratic(mid, r1, p2, tolerance, depth + 1)
    return left + right


def flatten_cubic(
    p0: PathPoint,
    p1: PathPoint,
    p2: PathPoint,
    p3: PathPoint,
    tolerance: float,
    depth: int = 0,
) -> list[PathPoint]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision. The start point is not
    included in the result.

    Args:
        p0: Start point
        p1: First control point
        p2: Second control point
        p3: End point
        tolerance: Maximum distance from true curve

    Returns:
        Points approximating the curve after p0, ending with p3
    """
    flatness = max(_distance_to_line(p1, p0, p3), _distance_to_line(p2, p0, p3))
    if depth >= _MAX_DEPTH or flatness * 0.75 <= tolerance:
        return [p3]

    # First level
    q1 = _mid(p0, p1)
    q2 = _mid(p1, p2)
    q3 = _mid(p2, p3)

    # Second level
    r1 = _mid(q1, q2)
    r2 = _mid(q2, q3)

    # Third level (midpoint)
    mid = _mid(r1, r2)

    left = flatten_cubic(p0, q1, r1, mid, tolerance, depth + 1)
    right = flatten_cubic(mid, r2, q3, p3, tolerance, depth + 1)
    return left + right
