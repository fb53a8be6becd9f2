"""Exception hierarchy for pathgeom."""


class PathGeomError(Exception):
    """Base exception for all pathgeom errors."""

    pass


class PathError(PathGeomError):
    """Errors related to the input path representation."""

    pass


class NonLinearGeometryError(PathError):
    """Path may contain curved segments and must be flattened first."""

    def __init__(self, message: str = "Path geometry must not have non-linear segments") -> None:
        super().__init__(message)


class UnsupportedSegmentKindError(PathError):
    """A segment other than a straight line was found during extraction."""

    def __init__(self, segment_type: str) -> None:
        self.segment_type = segment_type
        super().__init__(f"'{segment_type}' is not supported")


class PathParseError(PathError):
    """Path source text could not be parsed."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to parse path '{source}': {reason}")


class GeometryError(PathGeomError):
    """Errors in geometric calculations."""

    pass


class DegenerateClusterError(GeometryError):
    """A ring cluster could not be noded or polygonized into any face.

    This error is never raised by the reader. It describes why a cluster
    contributed no polygons and travels inside a ``Degenerate`` result.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Degenerate ring cluster: {reason}")


class FontError(PathGeomError):
    """Errors related to font loading."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphNotFoundError(FontError):
    """Requested glyph not found in font."""

    def __init__(self, glyph_name: str) -> None:
        self.glyph_name = glyph_name
        super().__init__(f"Glyph '{glyph_name}' not found in font")
