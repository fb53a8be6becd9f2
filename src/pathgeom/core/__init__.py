"""Core reconstruction algorithms for pathgeom.

This module contains the algorithms that turn a flat path into geometry:

- Figure extraction (coordinate sequences, Y inversion)
- Ring classification (points, lines, shell/hole clusters)
- Polygon resolution (noding, polygonization, fill rules)

The extractor, classifier and resolver keep no state between calls, so a
single reader can be shared freely; batch conversion runs them in worker
processes.

Key functions:
- signed_area: Calculate ring area using shoelace formula
- is_counter_clockwise: Ring orientation test
- winding_number: Winding number of a point against rings
- flatten_path: Replace curves by polylines

Key classes:
- FigureExtractor: Extracts sub-figures from a path
- RingClassifier: Groups rings into shell/hole clusters
- PolygonResolver: Resolves a cluster into polygons
- PathGeometryReader: Runs the full reconstruction
- FontConverter: Converts font glyphs in parallel
"""

from pathgeom.core.builder import build_geometry
from pathgeom.core.classifier import (
    LineItem,
    PointItem,
    RingClassifier,
    contained_in_shell,
    counter_clockwise_hole,
    hole_predicate_for,
)
from pathgeom.core.extractor import FigureExtractor
from pathgeom.core.flatten import flatten_path
from pathgeom.core.geometry import (
    is_counter_clockwise,
    point_in_ring,
    signed_area,
    winding_number,
)
from pathgeom.core.kernel import (
    GeometryKernel,
    ShapelyNoder,
    ShapelyPolygonizer,
    ShapelyUnioner,
)
from pathgeom.core.processor import FontConverter, PathBatchConverter, convert_path
from pathgeom.core.reader import PathGeometryReader, read_path, read_svg_path
from pathgeom.core.resolver import (
    PRECISION_SCALE,
    Degenerate,
    PolygonResolver,
    Resolved,
)

__all__ = [
    "PRECISION_SCALE",
    "Degenerate",
    "FigureExtractor",
    "FontConverter",
    "GeometryKernel",
    "LineItem",
    "PathBatchConverter",
    "PathGeometryReader",
    "PointItem",
    "PolygonResolver",
    "Resolved",
    "RingClassifier",
    "ShapelyNoder",
    "ShapelyPolygonizer",
    "ShapelyUnioner",
    "build_geometry",
    "contained_in_shell",
    "convert_path",
    "counter_clockwise_hole",
    "flatten_path",
    "hole_predicate_for",
    "is_counter_clockwise",
    "point_in_ring",
    "read_path",
    "read_svg_path",
    "signed_area",
    "winding_number",
]
