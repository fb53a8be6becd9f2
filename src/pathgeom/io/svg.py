"""SVG path data reader.

Parses the ``d`` attribute of an SVG ``<path>`` with fontTools' path parser
and records it into a ``PathGeometry``. Elliptical arcs are emitted by the
parser as cubic curves, so any path with C, S, Q, T or A commands needs
flattening before conversion.
"""

from fontTools.svgLib.path import parse_path

from pathgeom.domain import FillRule, PathGeometry
from pathgeom.exceptions import PathParseError
from pathgeom.io.pen import PathGeometryPen


def parse_svg_path(
    d: str,
    fill_rule: FillRule | str = FillRule.EVEN_ODD,
    filled: bool = True,
) -> PathGeometry:
    """Parse SVG path data into a PathGeometry.

    Args:
        d: SVG path data, e.g. ``"M 0 0 L 10 0 L 10 10 Z"``
        fill_rule: Fill rule of the path (``"evenodd"`` or ``"nonzero"``)
        filled: Whether the figures are filled; False for stroke-only paths

    Returns:
        PathGeometry with one figure per subpath

    Raises:
        PathParseError: If the path data is malformed
    """
    pen = PathGeometryPen(fill_rule=FillRule(fill_rule), filled=filled)
    try:
        parse_path(d, pen)
    except (ValueError, IndexError) as e:
        raise PathParseError(_shorten(d), str(e) or type(e).__name__) from e
    return pen.path


def _shorten(text: str, limit: int = 40) -> str:
    text = " ".join(text.split())
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."
