"""Input and output adapters for pathgeom.

This module connects the reconstruction to the outside world. Paths are
built through fontTools pens, so anything fontTools can draw is a valid
source; results are written with shapely's serializers.

Key responsibilities:
- Record pen drawing commands as PathGeometry
- Parse SVG path data
- Load glyph outlines from TTF/OTF fonts
- Write WKT and GeoJSON

Key classes:
- PathGeometryPen: fontTools pen producing PathGeometry
- FontReader: Load fonts and draw glyph paths
"""

from pathgeom.io.pen import PathGeometryPen
from pathgeom.io.reader import FontReader
from pathgeom.io.svg import parse_svg_path
from pathgeom.io.writer import (
    dumps,
    to_feature_collection,
    to_geojson,
    to_wkt,
    write_feature_collection,
)

__all__ = [
    "FontReader",
    "PathGeometryPen",
    "dumps",
    "parse_svg_path",
    "to_feature_collection",
    "to_geojson",
    "to_wkt",
    "write_feature_collection",
]
