"""fontTools pen recording drawing commands into a PathGeometry.

Anything that can draw into a fontTools pen (glyphs, SVG path parsers,
other pens) can be converted through this adapter:

- moveTo opens a new figure
- lineTo appends a LineSegment
- curveTo / qCurveTo append BezierSegment / QuadraticBezierSegment
- closePath closes the figure, endPath leaves it open
"""

from typing import Any

from fontTools.pens.basePen import BasePen

from pathgeom.domain import (
    BezierSegment,
    FillRule,
    LineSegment,
    PathFigure,
    PathGeometry,
    PathPoint,
    QuadraticBezierSegment,
)


def _pt(point: Any) -> PathPoint:
    return (float(point[0]), float(point[1]))


class PathGeometryPen(BasePen):
    """Pen building a ``PathGeometry`` from drawing commands.

    Example:
        pen = PathGeometryPen(fill_rule=FillRule.NONZERO)
        glyph_set["A"].draw(pen)
        path = pen.path
    """

    def __init__(
        self,
        glyphSet: Any = None,  # noqa: N803
        fill_rule: FillRule = FillRule.EVEN_ODD,
        filled: bool = True,
    ) -> None:
        """Initialize the pen.

        Args:
            glyphSet: Glyph set used to decompose components
            fill_rule: Fill rule of the resulting path
            filled: Whether recorded figures are filled
        """
        super().__init__(glyphSet)
        self.fill_rule = fill_rule
        self.filled = filled
        self.figures: list[PathFigure] = []
        self._figure: PathFigure | None = None

    @property
    def path(self) -> PathGeometry:
        """The path recorded so far; an unfinished figure is left open."""
        self._finish(closed=False)
        return PathGeometry(figures=list(self.figures), fill_rule=self.fill_rule)

    def _finish(self, closed: bool) -> None:
        if self._figure is not None:
            self._figure.is_closed = closed
            self.figures.append(self._figure)
            self._figure = None

    def _current_figure(self) -> PathFigure:
        if self._figure is None:
            raise ValueError("Drawing command issued before moveTo")
        return self._figure

    def _moveTo(self, pt: Any) -> None:
        self._finish(closed=False)
        self._figure = PathFigure(start_point=_pt(pt), is_filled=self.filled)

    def _lineTo(self, pt: Any) -> None:
        self._current_figure().segments.append(LineSegment(_pt(pt)))

    def _curveToOne(self, pt1: Any, pt2: Any, pt3: Any) -> None:
        self._current_figure().segments.append(
            BezierSegment(_pt(pt1), _pt(pt2), _pt(pt3))
        )

    def _qCurveToOne(self, pt1: Any, pt2: Any) -> None:
        self._current_figure().segments.append(
            QuadraticBezierSegment(_pt(pt1), _pt(pt2))
        )

    def _closePath(self) -> None:
        self._finish(closed=True)

    def _endPath(self) -> None:
        self._finish(closed=False)
