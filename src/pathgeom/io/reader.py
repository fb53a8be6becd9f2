"""Font reader for loading glyph outlines as paths.

This module provides the FontReader class for loading font files and drawing
glyph outlines into PathGeometry objects.
"""

from collections.abc import Iterator
from pathlib import Path

from fontTools.pens.reverseContourPen import ReverseContourPen
from fontTools.pens.transformPen import TransformPen
from fontTools.ttLib import TTFont

from pathgeom.domain import FillRule, PathGeometry
from pathgeom.exceptions import GlyphNotFoundError
from pathgeom.io.pen import PathGeometryPen

# Fonts are Y-up; flipping here lets the reader's own Y inversion put the
# outline back upright.
FLIP_Y = (1, 0, 0, -1, 0, 0)


class FontReader:
    """Loads TTF/OTF fonts and draws glyphs into paths.

    Glyph outlines are drawn in screen orientation with outer contours
    clockwise, the convention the reconstruction expects. CFF outlines wind
    the other way and are reversed. Paths use the non-zero fill rule.

    Example:
        with FontReader(Path("font.ttf")) as reader:
            for name, path in reader.iter_glyph_paths():
                print(name, len(path.figures))
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the TTF or OTF font file
        """
        self._font_path = font_path
        self._font: TTFont | None = None

    def load(self) -> None:
        """Load the font file.

        Raises:
            FileNotFoundError: If font file does not exist
            Exception: If font file is invalid or cannot be loaded
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        self._font = TTFont(str(self._font_path))

    def _require_font(self) -> TTFont:
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def format(self) -> str:
        """Return font format.

        Returns:
            'TrueType' for TTF fonts, 'OpenType' for CFF-based fonts

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        font = self._require_font()
        if "CFF " in font or "CFF2" in font:
            return "OpenType"
        return "TrueType"

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return self._require_font()["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def glyph_names(self) -> list[str]:
        """Return glyph names in font order.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        return list(self._require_font().getGlyphOrder())

    def glyph_path(self, name: str) -> PathGeometry:
        """Draw a glyph into a path.

        Components are decomposed through the glyph set.

        Args:
            name: Name of the glyph

        Returns:
            PathGeometry of the glyph outline (may contain curves)

        Raises:
            RuntimeError: If font has not been loaded yet
            GlyphNotFoundError: If the font has no such glyph
        """
        font = self._require_font()
        glyph_set = font.getGlyphSet()
        if name not in glyph_set:
            raise GlyphNotFoundError(name)

        path_pen = PathGeometryPen(glyphSet=glyph_set, fill_rule=FillRule.NONZERO)
        pen = TransformPen(path_pen, FLIP_Y)
        if self.format == "OpenType":
            pen = ReverseContourPen(pen)
        glyph_set[name].draw(pen)
        return path_pen.path

    def iter_glyph_paths(
        self, names: list[str] | None = None
    ) -> Iterator[tuple[str, PathGeometry]]:
        """Iterate over glyph paths in font order.

        Args:
            names: Restrict to these glyph names (default: all glyphs)

        Yields:
            (glyph name, path) pairs

        Raises:
            RuntimeError: If font has not been loaded yet
            GlyphNotFoundError: If a requested glyph does not exist
        """
        for name in names if names is not None else self.glyph_names:
            yield name, self.glyph_path(name)

    def close(self) -> None:
        """Close the font file and free resources."""
        if self._font is not None:
            self._font.close()
            self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
