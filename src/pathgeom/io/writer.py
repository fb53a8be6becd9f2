"""Serialization of converted geometry.

Writes shapely geometry as WKT or GeoJSON. Named geometries (e.g. the glyphs
of a font) are written as a GeoJSON FeatureCollection with one feature per
name and a collection-wide bounding box.
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from shapely import wkt
from shapely.geometry import mapping
from shapely.geometry.base import BaseGeometry

from pathgeom.config import OutputFormat


def to_wkt(geometry: BaseGeometry, precision: int = 6) -> str:
    """Serialize a geometry to WKT.

    Args:
        geometry: Geometry to serialize
        precision: Decimal places kept; trailing zeros are trimmed

    Returns:
        WKT text
    """
    return wkt.dumps(geometry, rounding_precision=precision, trim=True)


def to_geojson(geometry: BaseGeometry) -> dict[str, Any]:
    """Convert a geometry to a GeoJSON geometry object."""
    return dict(mapping(geometry))


def to_feature_collection(geometries: Mapping[str, BaseGeometry]) -> dict[str, Any]:
    """Build a GeoJSON FeatureCollection from named geometries.

    Args:
        geometries: Geometry per feature name, in output order

    Returns:
        FeatureCollection dictionary; ``bbox`` is present when at least one
        geometry is non-empty
    """
    features = [
        {
            "type": "Feature",
            "properties": {"name": name},
            "geometry": to_geojson(geometry),
        }
        for name, geometry in geometries.items()
    ]
    collection: dict[str, Any] = {"type": "FeatureCollection", "features": features}

    bounds = [g.bounds for g in geometries.values() if not g.is_empty]
    if bounds:
        collection["bbox"] = [
            min(b[0] for b in bounds),
            min(b[1] for b in bounds),
            max(b[2] for b in bounds),
            max(b[3] for b in bounds),
        ]
    return collection


def dumps(geometry: BaseGeometry, output_format: OutputFormat, precision: int = 6) -> str:
    """Serialize a geometry in the requested format."""
    if output_format is OutputFormat.GEOJSON:
        return json.dumps(to_geojson(geometry))
    return to_wkt(geometry, precision)


def write_feature_collection(path: Path, geometries: Mapping[str, BaseGeometry]) -> None:
    """Write named geometries to a GeoJSON file.

    Args:
        path: Output file path
        geometries: Geometry per feature name
    """
    path.write_text(json.dumps(to_feature_collection(geometries), indent=2), encoding="utf-8")
