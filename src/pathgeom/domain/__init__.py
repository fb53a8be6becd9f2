"""Domain models for pathgeom.

This module contains the models describing input paths and the intermediate
units the reconstruction works on. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of shapely and fontTools implementation details

Key classes:
- PathGeometry / PathFigure: The input vector path
- LineSegment, PolyLineSegment: Straight segments
- QuadraticBezierSegment, BezierSegment: Curved segments
- Coordinate: A point in geometry space
- SubFigure: One extracted figure
- RingCluster: A shell ring with its holes
"""

from pathgeom.domain.figure import Coordinate, Ring, RingCluster, SubFigure, close_ring
from pathgeom.domain.path import (
    BezierSegment,
    FillRule,
    LineSegment,
    PathFigure,
    PathGeometry,
    PathPoint,
    PolyLineSegment,
    QuadraticBezierSegment,
    Segment,
)

__all__: list[str] = [
    # Enums
    "FillRule",
    # Input model
    "BezierSegment",
    "LineSegment",
    "PathFigure",
    "PathGeometry",
    "PathPoint",
    "PolyLineSegment",
    "QuadraticBezierSegment",
    "Segment",
    # Reconstruction units
    "Coordinate",
    "Ring",
    "RingCluster",
    "SubFigure",
    "close_ring",
]
