"""Figure extraction from flat vector paths.

Walks a ``PathGeometry`` and turns every figure into a ``SubFigure``: the
figure's start point followed by each segment's terminal point, moved from
screen space into geometry space by inverting Y. Nothing is deduplicated or
simplified.
"""

import structlog

from pathgeom.domain import (
    Coordinate,
    LineSegment,
    PathFigure,
    PathGeometry,
    PolyLineSegment,
    SubFigure,
)
from pathgeom.exceptions import NonLinearGeometryError, UnsupportedSegmentKindError

logger = structlog.get_logger(__name__)


class FigureExtractor:
    """Extracts coordinate sequences from a flat path.

    Example:
        extractor = FigureExtractor()
        for sub_figure in extractor.extract(path):
            print(sub_figure.is_closed, len(sub_figure))
    """

    def extract(self, path: PathGeometry) -> list[SubFigure]:
        """Extract one sub-figure per path figure.

        Args:
            path: Path to extract; must not contain curved segments

        Returns:
            Sub-figures in drawing order

        Raises:
            NonLinearGeometryError: If the path may contain curves. Checked
                before any figure is read.
            UnsupportedSegmentKindError: If a segment is not a straight line
        """
        if path.may_have_curves:
            raise NonLinearGeometryError()

        sub_figures = [self._extract_figure(figure) for figure in path.figures]
        logger.debug("Figures extracted", figures=len(sub_figures))
        return sub_figures

    def _extract_figure(self, figure: PathFigure) -> SubFigure:
        coordinates = [Coordinate.from_screen(*figure.start_point)]

        for segment in figure.segments:
            if isinstance(segment, PolyLineSegment):
                coordinates.extend(Coordinate.from_screen(*p) for p in segment.points)
            elif isinstance(segment, LineSegment):
                coordinates.append(Coordinate.from_screen(*segment.point))
            else:
                raise UnsupportedSegmentKindError(type(segment).__name__)

        return SubFigure(
            is_closed=figure.is_closed,
            is_filled=figure.is_filled,
            coordinates=tuple(coordinates),
        )


def extract(path: PathGeometry) -> list[SubFigure]:
    """Extract sub-figures from a flat path.

    Convenience wrapper around ``FigureExtractor().extract``.
    """
    return FigureExtractor().extract(path)
