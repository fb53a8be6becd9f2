"""Geometric predicates used by the reconstruction.

This module provides the small amount of planar math the reconstruction
needs on its own, outside the geometry kernel:
- Signed area calculation (shoelace formula)
- Orientation testing
- Point-in-ring testing (ray casting algorithm)
- Winding number and crossing parity of a point

All functions are pure, stateless, and designed for use in parallel processing.
"""

from collections.abc import Iterable, Sequence

from pathgeom.domain import Coordinate

XY = tuple[float, float]


def signed_area(points: Sequence[Coordinate]) -> float:
    """Calculate signed area of a ring using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    The ring may be explicitly closed or not; a repeated closing point adds
    nothing to the sum.

    Args:
        points: Coordinates forming the ring boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate rings.

    Examples:
        >>> square = [Coordinate(0, 0), Coordinate(1, 0), Coordinate(1, 1), Coordinate(0, 1)]
        >>> signed_area(square)  # CCW square
        1.0
        >>> signed_area(square[::-1])  # CW square
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def distinct_count(points: Iterable[Coordinate]) -> int:
    """Count distinct coordinates of a ring."""
    return len(set(points))


def is_counter_clockwise(points: Sequence[Coordinate]) -> bool:
    """Test whether a ring winds counter-clockwise.

    Rings with fewer than 3 distinct coordinates have no orientation and are
    never counter-clockwise.

    Args:
        points: Coordinates forming the ring boundary

    Returns:
        True if the ring's signed area is positive
    """
    if distinct_count(points) < 3:
        return False
    return signed_area(points) > 0


def point_in_ring(point: XY, ring: Sequence[Coordinate]) -> bool:
    """Determine if a point is inside a ring using ray casting.

    Casts a horizontal ray from the point to the right and counts crossings
    with ring edges. Odd number of crossings = inside, even = outside.

    Args:
        point: (x, y) of the point to test
        ring: Coordinates forming the ring boundary

    Returns:
        True if point is inside the ring, False otherwise
    """
    n = len(ring)
    if n < 3:
        return False

    inside = False
    x, y = point
    j = n - 1

    for i in range(n):
        xi, yi = ring[i].x, ring[i].y
        xj, yj = ring[j].x, ring[j].y

        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside


def _is_left(a: XY, b: XY, p: XY) -> float:
    return (b[0] - a[0]) * (p[1] - a[1]) - (p[0] - a[0]) * (b[1] - a[1])


def winding_number(point: XY, rings: Iterable[Sequence[Coordinate]]) -> int:
    """Calculate the winding number of a point around a set of rings.

    Each counter-clockwise loop around the point adds one, each clockwise
    loop subtracts one. Rings are treated as closed whether or not they
    repeat their first coordinate.

    Args:
        point: (x, y) of the point to test
        rings: Rings the point is tested against

    Returns:
        Sum of the winding numbers over all rings
    """
    total = 0
    for ring in rings:
        n = len(ring)
        if n < 3:
            continue
        for i in range(n):
            a = ring[i].to_tuple()
            b = ring[(i + 1) % n].to_tuple()
            if a[1] <= point[1]:
                if b[1] > point[1] and _is_left(a, b, point) > 0:
                    total += 1
            elif b[1] <= point[1] and _is_left(a, b, point) < 0:
                total -= 1
    return total


def crossing_parity(point: XY, segments: Iterable[tuple[XY, XY]]) -> bool:
    """Count crossings of a rightward ray with a set of segments.

    Uses the half-open rule of the ray casting test, so a ray through a
    shared vertex is counted once.

    Args:
        point: (x, y) where the ray starts
        segments: Undirected segments as pairs of (x, y) endpoints

    Returns:
        True if the number of crossings is odd
    """
    x, y = point
    odd = False
    for (xi, yi), (xj, yj) in segments:
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            odd = not odd
    return odd
