"""Vector path object model.

This module defines the input side of the conversion: a path is a list of
figures, each starting at a point and continued by segments. Coordinates are
in screen space (Y grows downward) and are stored as plain ``(x, y)`` tuples,
the same shape fontTools pens hand out.

- FillRule: Path-level rule deciding which regions are filled
- LineSegment / PolyLineSegment: Straight segments accepted by the reader
- QuadraticBezierSegment / BezierSegment: Curved segments (must be flattened)
- PathFigure: One sub-path with closed/filled flags
- PathGeometry: The whole path
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

PathPoint = tuple[float, float]


class FillRule(str, Enum):
    """Fill rule for overlapping or nested figures.

    - EVEN_ODD: A region is filled when a ray from it crosses an odd
      number of edges
    - NONZERO: A region is filled when the winding number around it is
      not zero
    """

    EVEN_ODD = "evenodd"
    NONZERO = "nonzero"


@dataclass(frozen=True, slots=True)
class LineSegment:
    """Straight line from the current point to ``point``."""

    point: PathPoint

    kind: ClassVar[str] = "line"
    is_curved: ClassVar[bool] = False

    @property
    def end_point(self) -> PathPoint:
        return self.point

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "point": list(self.point)}


@dataclass(frozen=True, slots=True)
class PolyLineSegment:
    """Batch of straight lines through each of ``points`` in order."""

    points: tuple[PathPoint, ...]

    kind: ClassVar[str] = "polyline"
    is_curved: ClassVar[bool] = False

    @property
    def end_point(self) -> PathPoint:
        return self.points[-1]

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "points": [list(p) for p in self.points]}


@dataclass(frozen=True, slots=True)
class QuadraticBezierSegment:
    """Quadratic Bezier curve with one control point."""

    control: PathPoint
    point: PathPoint

    kind: ClassVar[str] = "quadratic"
    is_curved: ClassVar[bool] = True

    @property
    def end_point(self) -> PathPoint:
        return self.point

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind, "control": list(self.control), "point": list(self.point)}


@dataclass(frozen=True, slots=True)
class BezierSegment:
    """Cubic Bezier curve with two control points."""

    control1: PathPoint
    control2: PathPoint
    point: PathPoint

    kind: ClassVar[str] = "cubic"
    is_curved: ClassVar[bool] = True

    @property
    def end_point(self) -> PathPoint:
        return self.point

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.kind,
            "control1": list(self.control1),
            "control2": list(self.control2),
            "point": list(self.point),
        }


Segment = LineSegment | PolyLineSegment | QuadraticBezierSegment | BezierSegment


def _point(value: Any) -> PathPoint:
    return (float(value[0]), float(value[1]))


def segment_from_dict(data: dict[str, Any]) -> Segment:
    """Deserialize a segment from its dictionary form.

    Args:
        data: Dictionary with a ``type`` key and the segment's points

    Returns:
        Segment instance

    Raises:
        ValueError: If the segment type is unknown
    """
    kind = data["type"]
    if kind == LineSegment.kind:
        return LineSegment(_point(data["point"]))
    if kind == PolyLineSegment.kind:
        return PolyLineSegment(tuple(_point(p) for p in data["points"]))
    if kind == QuadraticBezierSegment.kind:
        return QuadraticBezierSegment(_point(data["control"]), _point(data["point"]))
    if kind == BezierSegment.kind:
        return BezierSegment(
            _point(data["control1"]), _point(data["control2"]), _point(data["point"])
        )
    raise ValueError(f"Unknown segment type: {kind}")


@dataclass
class PathFigure:
    """A single sub-path of a vector path.

    Attributes:
        start_point: First point of the figure
        segments: Segments continuing from the start point, in order
        is_closed: Figure is a ring; the closing edge back to the start
            point is implied
        is_filled: Figure takes part in filling rather than being stroked only
    """

    start_point: PathPoint
    segments: list[Any] = field(default_factory=list)
    is_closed: bool = False
    is_filled: bool = True

    @property
    def may_have_curves(self) -> bool:
        """Check whether any segment of the figure is curved."""
        return any(getattr(segment, "is_curved", False) for segment in self.segments)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of the figure
        """
        return {
            "start": list(self.start_point),
            "segments": [segment.to_dict() for segment in self.segments],
            "closed": self.is_closed,
            "filled": self.is_filled,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathFigure":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a figure

        Returns:
            PathFigure instance
        """
        return cls(
            start_point=_point(data["start"]),
            segments=[segment_from_dict(s) for s in data["segments"]],
            is_closed=data["closed"],
            is_filled=data["filled"],
        )


@dataclass
class PathGeometry:
    """A vector path made of figures sharing one fill rule.

    Attributes:
        figures: Figures in drawing order
        fill_rule: Fill rule applied to all filled figures
        curve_flag: Producer-set flag saying the path may contain curves
            (None: derived from the segments)
    """

    figures: list[PathFigure] = field(default_factory=list)
    fill_rule: FillRule = FillRule.EVEN_ODD
    curve_flag: bool | None = None

    @property
    def may_have_curves(self) -> bool:
        """Check whether the path may contain curved segments.

        Returns:
            The stored curve flag if set, otherwise True if any figure holds
            a curved segment
        """
        if self.curve_flag is not None:
            return self.curve_flag
        return any(figure.may_have_curves for figure in self.figures)

    def is_empty(self) -> bool:
        """Check if the path has no figures."""
        return len(self.figures) == 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        data: dict[str, Any] = {
            "figures": [figure.to_dict() for figure in self.figures],
            "fill_rule": self.fill_rule.value,
        }
        if self.curve_flag is not None:
            data["curve_flag"] = self.curve_flag
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathGeometry":
        """Deserialize from dictionary."""
        return cls(
            figures=[PathFigure.from_dict(f) for f in data["figures"]],
            fill_rule=FillRule(data["fill_rule"]),
            curve_flag=data.get("curve_flag"),
        )
