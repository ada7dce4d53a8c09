"""Tests for the raster and text renderers."""

from city_sim.render import COLORS, hex_to_rgb, legend, render_ascii, render_raster
from city_sim.sim.grid import Grid
from city_sim.sim.types import TileKind


class TestRaster:
    def test_shape_and_dtype(self):
        image = render_raster(Grid(4), cell_size=8)
        assert image.shape == (32, 32, 3)
        assert image.dtype.name == "uint8"

    def test_cell_fill_colors(self):
        grid = Grid(3)
        grid.set(0, 1, TileKind.ROAD)
        image = render_raster(grid)
        assert tuple(image[8, 8]) == (11, 16, 32)
        assert tuple(image[8, 24]) == (107, 114, 128)

    def test_grid_lines_are_blended(self):
        image = render_raster(Grid(3))
        assert tuple(image[0, 5]) == (24, 35, 69)

    def test_far_borders_are_drawn(self):
        image = render_raster(Grid(3))
        assert tuple(image[47, 5]) == (24, 35, 69)
        assert tuple(image[5, 47]) == (24, 35, 69)
        assert tuple(image[46, 5]) == (11, 16, 32)

    def test_development_marks(self):
        grid = Grid(3)
        grid.set(0, 0, TileKind.RESIDENTIAL)
        grid.set_level(0, 0, 2)
        image = render_raster(grid)
        base = hex_to_rgb(COLORS[TileKind.RESIDENTIAL])
        # one mark per level along the bottom of the cell
        assert all(image[8, 5] > base)
        assert all(image[8, 13] > base)
        assert tuple(image[3, 8]) == base

    def test_undeveloped_zone_has_no_mark(self):
        grid = Grid(3)
        grid.set(0, 0, TileKind.INDUSTRIAL)
        image = render_raster(grid)
        assert tuple(image[8, 5]) == hex_to_rgb(COLORS[TileKind.INDUSTRIAL])


class TestAscii:
    def test_glyphs_and_levels(self):
        grid = Grid(3)
        grid.set(0, 0, TileKind.ROAD)
        grid.set(0, 1, TileKind.RESIDENTIAL)
        grid.set(0, 2, TileKind.COMMERCIAL)
        grid.set_level(0, 2, 3)
        grid.set(1, 1, TileKind.SCHOOL)
        assert render_ascii(grid) == "#r3\n.s.\n..."

    def test_legend_covers_every_kind(self):
        assert set(legend()) == {kind.value for kind in TileKind}
