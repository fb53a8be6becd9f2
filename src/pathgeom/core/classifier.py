"""Ring classification and shell/hole grouping.

Sub-figures are consumed left to right in a single pass with one look-ahead:

- a single coordinate becomes a point
- an open figure becomes a line string, whether it is filled or not
- a closed but unfilled figure is a stroked ring and becomes a line string
- a closed and filled figure starts a ring cluster. The following closed
  rings are appended as holes as long as the hole predicate accepts them.

The default hole predicate is the winding-order heuristic: producers emit
shells clockwise and holes counter-clockwise. Rings that break that
convention (two counter-clockwise shells in a row, say) are mis-grouped;
``contained_in_shell`` is a stricter alternative.
"""

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

import structlog

from pathgeom.config import HolePredicateKind
from pathgeom.core.geometry import is_counter_clockwise, point_in_ring
from pathgeom.domain import Coordinate, Ring, RingCluster, SubFigure, close_ring

logger = structlog.get_logger(__name__)

HolePredicate = Callable[[Ring, Ring], bool]
"""Decides whether ``ring`` is a hole of ``shell``: ``predicate(ring, shell)``."""


def counter_clockwise_hole(ring: Ring, shell: Ring) -> bool:  # noqa: ARG001
    """Accept any counter-clockwise ring as a hole, wherever it lies."""
    return is_counter_clockwise(ring)


def contained_in_shell(ring: Ring, shell: Ring) -> bool:
    """Accept a counter-clockwise ring only if it lies in the shell.

    Vertices exactly on the shell boundary may fall either way under ray
    casting, so the ring is accepted when at least half of its vertices
    test inside.
    """
    if not is_counter_clockwise(ring):
        return False
    inside = [point_in_ring(c.to_tuple(), shell) for c in ring]
    return sum(inside) * 2 >= len(inside)


def hole_predicate_for(kind: HolePredicateKind) -> HolePredicate:
    """Get the hole predicate for a configured kind."""
    if kind is HolePredicateKind.CONTAINMENT:
        return contained_in_shell
    return counter_clockwise_hole


@dataclass(frozen=True)
class PointItem:
    """A figure with a single coordinate."""

    coordinate: Coordinate


@dataclass(frozen=True)
class LineItem:
    """An open or stroked figure.

    Attributes:
        coordinates: Coordinates of the line; stroked rings are closed
            explicitly
    """

    coordinates: Ring


ClassifiedItem = PointItem | LineItem | RingCluster


class RingClassifier:
    """Partitions sub-figures into points, lines and ring clusters.

    Example:
        classifier = RingClassifier()
        for item in classifier.classify(sub_figures):
            if isinstance(item, RingCluster):
                ...
    """

    def __init__(self, hole_predicate: HolePredicate = counter_clockwise_hole) -> None:
        """Initialize the classifier.

        Args:
            hole_predicate: Predicate deciding whether a ring extends the
                current cluster's hole list
        """
        self.hole_predicate = hole_predicate

    def classify(self, sub_figures: Sequence[SubFigure]) -> Iterator[ClassifiedItem]:
        """Classify sub-figures in input order.

        Ring clusters are yielded as soon as their hole run ends, so a caller
        can resolve each one before the next figure is looked at.

        Args:
            sub_figures: Extracted sub-figures

        Yields:
            PointItem, LineItem or RingCluster for each group of figures
        """
        index = 0
        count = len(sub_figures)

        while index < count:
            figure = sub_figures[index]
            index += 1

            if len(figure) == 1:
                yield PointItem(figure.coordinates[0])
            elif not figure.is_closed:
                yield LineItem(figure.coordinates)
            elif not figure.is_filled:
                yield LineItem(close_ring(figure.coordinates))
            else:
                cluster = RingCluster(shell=close_ring(figure.coordinates))
                while index < count and self._is_hole(sub_figures[index], cluster.shell):
                    cluster.holes.append(close_ring(sub_figures[index].coordinates))
                    index += 1

                logger.debug(
                    "Ring cluster grouped",
                    shell_points=len(cluster.shell),
                    holes=len(cluster.holes),
                )
                yield cluster

    def _is_hole(self, candidate: SubFigure, shell: Ring) -> bool:
        if not candidate.is_closed or len(candidate) < 2:
            return False
        return self.hole_predicate(close_ring(candidate.coordinates), shell)


def classify(sub_figures: Sequence[SubFigure]) -> list[ClassifiedItem]:
    """Classify sub-figures with the default orientation heuristic."""
    return list(RingClassifier().classify(sub_figures))
