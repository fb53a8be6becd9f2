"""Polygon resolution of ring clusters.

A ring cluster is turned into valid polygons in three steps:

1. All rings are noded together on a fixed precision grid so no crossings
   remain between or within them.
2. The noded linework is polygonized into every bounded face.
3. Faces are selected against the original rings, not the noded linework,
   since noding merges edges shared by two rings. Under the even-odd rule a
   face survives when a ray from it crosses the rings an odd number of times,
   and the survivors are the final answer. Under the non-zero rule a face
   survives when its winding number is not zero, and the survivors are
   unioned into minimal polygons.

Resolution never raises for bad geometry. A cluster that cannot produce a
face yields a ``Degenerate`` result and the caller moves on.
"""

from dataclasses import dataclass, field

from shapely.errors import GEOSException
from shapely.geometry import Polygon

from pathgeom.core.geometry import XY, crossing_parity, distinct_count, winding_number
from pathgeom.core.kernel import GeometryKernel
from pathgeom.domain import FillRule, RingCluster
from pathgeom.exceptions import DegenerateClusterError

# Rings are noded on a grid of 1 / PRECISION_SCALE.
PRECISION_SCALE = 100_000_000.0


@dataclass(frozen=True)
class Resolved:
    """A cluster that produced polygons.

    Attributes:
        polygons: Polygons covering the cluster's filled area
    """

    polygons: list[Polygon] = field(default_factory=list)


@dataclass(frozen=True)
class Degenerate:
    """A cluster that produced no polygon.

    Attributes:
        error: Why the cluster could not be resolved
    """

    error: DegenerateClusterError

    @property
    def polygons(self) -> list[Polygon]:
        return []


ResolveResult = Resolved | Degenerate


class PolygonResolver:
    """Resolves ring clusters into polygons using a geometry kernel.

    Example:
        resolver = PolygonResolver()
        result = resolver.resolve(cluster, FillRule.EVEN_ODD)
        if isinstance(result, Resolved):
            polygons = result.polygons
    """

    def __init__(self, kernel: GeometryKernel | None = None) -> None:
        """Initialize the resolver.

        Args:
            kernel: Noding, polygonization and union primitives
                (default: shapely)
        """
        self.kernel = kernel or GeometryKernel()

    def resolve(self, cluster: RingCluster, fill_rule: FillRule) -> ResolveResult:
        """Resolve a cluster into polygons according to a fill rule.

        Args:
            cluster: Shell ring and its holes
            fill_rule: Fill rule of the path the cluster came from

        Returns:
            Resolved with one or more polygons, or Degenerate
        """
        for index, ring in enumerate(cluster.rings):
            if distinct_count(ring) < 3:
                return Degenerate(
                    DegenerateClusterError(
                        f"ring {index} has fewer than 3 distinct points"
                    )
                )

        try:
            noded = self.kernel.noder.node(cluster.rings, PRECISION_SCALE)
            if not noded:
                return Degenerate(DegenerateClusterError("noding produced no linework"))

            faces = self.kernel.polygonizer.polygonize(noded)
            if fill_rule is FillRule.EVEN_ODD:
                faces = self._even_odd_faces(faces, cluster)
            else:
                faces = self.kernel.unioner.union(self._winding_faces(faces, cluster))
        except (GEOSException, ValueError) as e:
            return Degenerate(DegenerateClusterError(str(e)))

        if not faces:
            return Degenerate(DegenerateClusterError("polygonization produced no faces"))

        return Resolved(list(faces))

    @staticmethod
    def _even_odd_faces(faces: list[Polygon], cluster: RingCluster) -> list[Polygon]:
        edges: list[tuple[XY, XY]] = []
        for ring in cluster.rings:
            points = [c.to_tuple() for c in ring]
            edges.extend(zip(points, points[1:]))

        kept = []
        for face in faces:
            point = face.representative_point()
            if crossing_parity((point.x, point.y), edges):
                kept.append(face)
        return kept

    @staticmethod
    def _winding_faces(faces: list[Polygon], cluster: RingCluster) -> list[Polygon]:
        kept = []
        for face in faces:
            point = face.representative_point()
            if winding_number((point.x, point.y), cluster.rings) != 0:
                kept.append(face)
        return kept


def resolve(cluster: RingCluster, fill_rule: FillRule) -> ResolveResult:
    """Resolve a cluster with the default shapely kernel."""
    return PolygonResolver().resolve(cluster, fill_rule)
