"""End-to-end tests against small fonts built with fontTools.

The fonts carry line-only "O" (square with a square counter) and "I" glyphs,
so conversion works both with and without flattening.
"""

import json
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from unittest.mock import patch

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.ttGlyphPen import TTGlyphPen
from shapely.geometry import Polygon
from typer.testing import CliRunner

from pathgeom.cli.app import app
from pathgeom.config import PathGeomSettings
from pathgeom.core import FontConverter, PathGeometryReader
from pathgeom.io import FontReader

GLYPH_ORDER = [".notdef", "space", "O", "I"]
CMAP = {32: "space", ord("O"): "O", ord("I"): "I"}

# Y-up contours, drawn clockwise for the outer ring of each glyph.
O_OUTER = [(100, 0), (100, 700), (500, 700), (500, 0)]
O_INNER = [(200, 100), (400, 100), (400, 600), (200, 600)]
I_STEM = [(250, 0), (250, 700), (350, 700), (350, 0)]

O_AREA = 400 * 700 - 200 * 500


def _draw(pen, contours) -> None:
    for contour in contours:
        pen.moveTo(contour[0])
        for point in contour[1:]:
            pen.lineTo(point)
        pen.closePath()


def _glyph_contours(reverse: bool) -> dict[str, list]:
    contours = {".notdef": [], "space": [], "O": [O_OUTER, O_INNER], "I": [I_STEM]}
    if reverse:
        return {name: [c[::-1] for c in rings] for name, rings in contours.items()}
    return contours


def _finish(builder: FontBuilder, path: Path) -> Path:
    # Left side bearings must equal each glyph's xMin or glyf outlines shift.
    metrics = {}
    for name, contours in _glyph_contours(reverse=False).items():
        xs = [x for contour in contours for x, _ in contour]
        metrics[name] = (600, min(xs) if xs else 0)
    builder.setupHorizontalMetrics(metrics)
    builder.setupHorizontalHeader(ascent=800, descent=-200)
    builder.setupNameTable({"familyName": "Pathgeom Test", "styleName": "Regular"})
    builder.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    builder.setupPost()
    builder.save(str(path))
    return path


@pytest.fixture
def truetype_font(tmp_path: Path) -> Path:
    builder = FontBuilder(1000, isTTF=True)
    builder.setupGlyphOrder(GLYPH_ORDER)
    builder.setupCharacterMap(CMAP)

    glyphs = {}
    for name, contours in _glyph_contours(reverse=False).items():
        pen = TTGlyphPen(None)
        _draw(pen, contours)
        glyphs[name] = pen.glyph()
    builder.setupGlyf(glyphs)
    return _finish(builder, tmp_path / "test.ttf")


@pytest.fixture
def cff_font(tmp_path: Path) -> Path:
    """A CFF font, whose outer contours run counter-clockwise."""
    builder = FontBuilder(1000, isTTF=False)
    builder.setupGlyphOrder(GLYPH_ORDER)
    builder.setupCharacterMap(CMAP)

    char_strings = {}
    for name, contours in _glyph_contours(reverse=True).items():
        pen = T2CharStringPen(600, None)
        _draw(pen, contours)
        char_strings[name] = pen.getCharString()
    builder.setupCFF("PathgeomTest-Regular", {"FullName": "Pathgeom Test"}, char_strings, {})
    return _finish(builder, tmp_path / "test.otf")


class TestFontReader:
    """Reading glyph outlines from real font files."""

    def test_truetype_metadata(self, truetype_font: Path) -> None:
        with FontReader(truetype_font) as reader:
            assert reader.format == "TrueType"
            assert reader.units_per_em == 1000
            assert reader.glyph_names == GLYPH_ORDER

    @pytest.mark.parametrize("font_fixture", ["truetype_font", "cff_font"])
    def test_glyph_with_counter(self, font_fixture: str, request) -> None:
        """Test that "O" reads back upright as a polygon with one hole."""
        font = request.getfixturevalue(font_fixture)
        with FontReader(font) as reader:
            path = reader.glyph_path("O")

        geometry = PathGeometryReader().read(path)
        assert isinstance(geometry, Polygon)
        assert len(geometry.interiors) == 1
        assert geometry.area == pytest.approx(O_AREA)
        assert geometry.bounds == pytest.approx((100.0, 0.0, 500.0, 700.0))

    def test_empty_glyph(self, truetype_font: Path) -> None:
        with FontReader(truetype_font) as reader:
            assert reader.glyph_path("space").is_empty()


class TestFontConverter:
    """Batch conversion of a whole font."""

    @patch("pathgeom.core.processor.ProcessPoolExecutor", ThreadPoolExecutor)
    def test_convert_all_glyphs(self, truetype_font: Path) -> None:
        geometries, stats = FontConverter(PathGeomSettings()).convert(truetype_font)

        assert list(geometries) == ["O", "I"]
        assert geometries["O"].area == pytest.approx(O_AREA)
        assert geometries["I"].area == pytest.approx(100 * 700)
        assert stats.converted_count == 2
        assert stats.skipped_count == 2
        assert stats.error_count == 0

    def test_convert_in_worker_processes(self, cff_font: Path) -> None:
        geometries, stats = FontConverter(PathGeomSettings()).convert(
            cff_font, glyph_names=["O"], max_workers=1
        )
        assert geometries["O"].area == pytest.approx(O_AREA)
        assert stats.converted_count == 1


class TestGlyphsCommand:
    """The glyphs command against a real font."""

    @patch("pathgeom.core.processor.ProcessPoolExecutor", ThreadPoolExecutor)
    def test_writes_geojson(self, truetype_font: Path, tmp_path: Path) -> None:
        output = tmp_path / "glyphs.geojson"
        result = CliRunner().invoke(
            app, ["--quiet", "glyphs", str(truetype_font), "-g", "O", "-g", "I", "-o", str(output)]
        )

        assert result.exit_code == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert [f["properties"]["name"] for f in data["features"]] == ["O", "I"]
        assert data["features"][0]["geometry"]["type"] == "Polygon"
        assert data["bbox"] == [100.0, 0.0, 500.0, 700.0]
