"""Curve flattening pre-pass.

The reader only accepts straight segments. Paths coming from fonts or SVG
usually hold curves, so this module replaces every curved segment with a
``PolyLineSegment`` approximating it within a tolerance. Straight segments
are copied unchanged.
"""

from pathgeom.core._bezier import flatten_cubic, flatten_quadratic
from pathgeom.domain import (
    BezierSegment,
    PathFigure,
    PathGeometry,
    PolyLineSegment,
    QuadraticBezierSegment,
)


def flatten_figure(figure: PathFigure, tolerance: float) -> PathFigure:
    """Flatten the curved segments of one figure.

    Args:
        figure: Figure to flatten
        tolerance: Maximum distance between curve and polyline

    Returns:
        New figure without curved segments
    """
    segments = []
    current = figure.start_point

    for segment in figure.segments:
        if isinstance(segment, QuadraticBezierSegment):
            points = flatten_quadratic(current, segment.control, segment.point, tolerance)
            segments.append(PolyLineSegment(tuple(points)))
        elif isinstance(segment, BezierSegment):
            points = flatten_cubic(
                current, segment.control1, segment.control2, segment.point, tolerance
            )
            segments.append(PolyLineSegment(tuple(points)))
        else:
            segments.append(segment)
        current = getattr(segment, "end_point", current)

    return PathFigure(
        start_point=figure.start_point,
        segments=segments,
        is_closed=figure.is_closed,
        is_filled=figure.is_filled,
    )


def flatten_path(path: PathGeometry, tolerance: float = 0.25) -> PathGeometry:
    """Flatten all curved segments of a path.

    Args:
        path: Path possibly containing curves
        tolerance: Maximum distance between curve and polyline

    Returns:
        New path with ``may_have_curves == False`` unless it holds segments
        of an unknown kind
    """
    if tolerance <= 0:
        raise ValueError(f"Flattening tolerance must be positive, got {tolerance}")

    return PathGeometry(
        figures=[flatten_figure(figure, tolerance) for figure in path.figures],
        fill_rule=path.fill_rule,
    )
