"""Intermediate types produced while reconstructing a path.

- Coordinate: A point in geometry space (Y grows upward)
- SubFigure: One extracted figure with its flags and coordinates
- RingCluster: A shell ring followed by the rings treated as its holes
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A point in geometry space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    @classmethod
    def from_screen(cls, x: float, y: float) -> "Coordinate":
        """Create a coordinate from a screen-space point by inverting Y.

        Args:
            x: Screen X
            y: Screen Y (growing downward)

        Returns:
            Coordinate with Y growing upward
        """
        return cls(float(x), 0.0 - float(y))

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)


Ring = tuple[Coordinate, ...]


def close_ring(coordinates: Ring) -> Ring:
    """Return the coordinates with the first one repeated at the end.

    Figures flagged closed imply the closing edge, so the stored sequence
    usually stops short of the start point.

    Args:
        coordinates: Ring coordinates, explicitly closed or not

    Returns:
        Explicitly closed coordinate sequence
    """
    if coordinates and coordinates[0] != coordinates[-1]:
        return (*coordinates, coordinates[0])
    return coordinates


@dataclass(frozen=True)
class SubFigure:
    """One extracted figure of a path.

    Attributes:
        is_closed: Figure is a ring (closing edge implied)
        is_filled: Figure takes part in fill-rule evaluation
        coordinates: Ordered coordinates in geometry space
    """

    is_closed: bool
    is_filled: bool
    coordinates: Ring

    def __len__(self) -> int:
        return len(self.coordinates)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "closed": self.is_closed,
            "filled": self.is_filled,
            "coordinates": [c.to_tuple() for c in self.coordinates],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SubFigure":
        """Deserialize from dictionary."""
        return cls(
            is_closed=data["closed"],
            is_filled=data["filled"],
            coordinates=tuple(Coordinate(x, y) for x, y in data["coordinates"]),
        )


@dataclass
class RingCluster:
    """A shell ring and the hole rings grouped after it.

    Attributes:
        shell: First ring of the cluster
        holes: Rings accepted as holes of the shell, in input order
    """

    shell: Ring
    holes: list[Ring] = field(default_factory=list)

    @property
    def rings(self) -> list[Ring]:
        """All rings of the cluster, shell first."""
        return [self.shell, *self.holes]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "shell": [c.to_tuple() for c in self.shell],
            "holes": [[c.to_tuple() for c in hole] for hole in self.holes],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RingCluster":
        """Deserialize from dictionary."""
        return cls(
            shell=tuple(Coordinate(x, y) for x, y in data["shell"]),
            holes=[tuple(Coordinate(x, y) for x, y in hole) for hole in data["holes"]],
        )
