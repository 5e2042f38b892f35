import pytest

import tickgrid.cursor
import tickgrid.grid
import tickgrid.mapper
import tickgrid.pattern


@pytest.fixture
def mapper (sixteenths: tickgrid.grid.GridSpec, one_bar: tickgrid.pattern.PatternInfo) -> tickgrid.mapper.CoordinateMapper:

	"""Two pixels per tick, 20 pixel margin, 1/16 grid over 192 ticks."""

	return tickgrid.mapper.CoordinateMapper(sixteenths, one_bar, pixels_per_tick=2.0, margin=20)


def test_float_column_subtracts_margin (mapper: tickgrid.mapper.CoordinateMapper) -> None:

	"""Pixel offsets are measured from the margin and left unrounded."""

	assert mapper.to_float_column(20) == 0.0
	assert mapper.to_float_column(44) == 12.0
	assert mapper.to_float_column(31) == 5.5


def test_float_column_inside_margin_is_zero (mapper: tickgrid.mapper.CoordinateMapper) -> None:

	"""Pixels left of the margin map to tick 0."""

	assert mapper.to_float_column(5) == 0.0
	assert mapper.to_column(0) == 0
	assert mapper.to_grid_index(0) == 0


def test_grid_index_nearest_mark (mapper: tickgrid.mapper.CoordinateMapper) -> None:

	"""The grid index is the nearest mark, halves rounding up."""

	assert mapper.to_grid_index(44) == 1
	assert mapper.to_grid_index(31) == 0
	assert mapper.to_grid_index(32) == 1	# exactly half way: 6 ticks


def test_column_snaps_to_grid (mapper: tickgrid.mapper.CoordinateMapper) -> None:

	"""Without fine-grained mode the column is the nearest grid mark."""

	assert mapper.to_column(44) == 12
	assert mapper.to_column(31) == 0
	assert mapper.to_column(20 + 2 * 70) == 72


def test_column_fine_grained_bypasses_grid (mapper: tickgrid.mapper.CoordinateMapper) -> None:

	"""Fine-grained mode rounds to the nearest tick only."""

	assert mapper.to_column(31, fine_grained=True) == 6
	assert mapper.to_column(20 + 2 * 70, fine_grained=True) == 70


def test_column_clamped_to_pattern (mapper: tickgrid.mapper.CoordinateMapper) -> None:

	"""Positions past the pattern end clamp instead of wrapping."""

	x = 20 + 2 * 500

	assert mapper.to_column(x) == 180
	assert mapper.to_column(x, fine_grained=True) == 191


def test_column_always_inside_pattern (mapper: tickgrid.mapper.CoordinateMapper) -> None:

	"""Every pixel maps to a tick in [0, length)."""

	for x in range(0, 600):
		assert 0 <= mapper.to_column(x) < 192
		assert 0 <= mapper.to_column(x, fine_grained=True) < 192


@pytest.mark.parametrize("tuplet", [(4, 4), (3, 2), (5, 4), (7, 4)])
def test_snap_is_idempotent (one_bar: tickgrid.pattern.PatternInfo, tuplet: tuple) -> None:

	"""Snapping an already snapped tick changes nothing."""

	grid = tickgrid.grid.GridSpec(16, *tuplet)
	mapper = tickgrid.mapper.CoordinateMapper(grid, one_bar)

	for tick in range(-5, 200):
		once = mapper.snap(tick)
		assert mapper.snap(once) == once


def test_column_of_own_output_is_unchanged (mapper: tickgrid.mapper.CoordinateMapper) -> None:

	"""Drawing a snapped column and reading it back gives the same column."""

	for x in range(0, 450):
		column = mapper.to_column(x)
		assert mapper.to_column(mapper.to_pixel(column)) == column


def test_snap_fine_grained_only_clamps (mapper: tickgrid.mapper.CoordinateMapper) -> None:

	"""Fine-grained snapping keeps any tick inside the pattern."""

	assert mapper.snap(37, fine_grained=True) == 37
	assert mapper.snap(-4, fine_grained=True) == 0
	assert mapper.snap(400, fine_grained=True) == 191


def test_to_pixel (mapper: tickgrid.mapper.CoordinateMapper) -> None:

	"""Ticks and grid marks convert back to pixels."""

	assert mapper.to_pixel(0) == 20
	assert mapper.to_pixel(12) == 44
	assert mapper.index_to_pixel(1) == 44
	assert mapper.pattern_width() == 20 + 384


def test_index_to_pixel_uses_exact_mark (one_bar: tickgrid.pattern.PatternInfo) -> None:

	"""Tuplet marks are drawn at their exact, unrounded position."""

	grid = tickgrid.grid.GridSpec(16, 5, 4)
	mapper = tickgrid.mapper.CoordinateMapper(grid, one_bar, pixels_per_tick=2.0, margin=20)

	# 9.6 ticks * 2 = 19.2 pixels
	assert mapper.index_to_pixel(1) == 39


def test_cursor_pixel (mapper: tickgrid.mapper.CoordinateMapper, sixteenths: tickgrid.grid.GridSpec, one_bar: tickgrid.pattern.PatternInfo) -> None:

	"""The scroll target follows the cursor index."""

	cursor = tickgrid.cursor.Cursor(sixteenths, one_bar)
	cursor.set_index(3)

	assert mapper.cursor_pixel(cursor) == 20 + 72


def test_grid_change_is_seen_immediately (mapper: tickgrid.mapper.CoordinateMapper, sixteenths: tickgrid.grid.GridSpec) -> None:

	"""The mapper reads the shared grid; there is no copy to update."""

	sixteenths.set_tuplet_ratio(3, 2)

	assert mapper.to_column(20 + 2 * 9) == 8


def test_zoom (mapper: tickgrid.mapper.CoordinateMapper) -> None:

	"""Zoom steps by 1.5 and stays within bounds."""

	assert mapper.zoom_in() == 3.0
	assert mapper.zoom_out() == 2.0

	for _ in range(20):
		mapper.zoom_in()
	assert mapper.pixels_per_tick == tickgrid.mapper.MAX_PIXELS_PER_TICK

	for _ in range(20):
		mapper.zoom_out()
	assert mapper.pixels_per_tick == tickgrid.mapper.MIN_PIXELS_PER_TICK


def test_invalid_zoom (sixteenths: tickgrid.grid.GridSpec, one_bar: tickgrid.pattern.PatternInfo) -> None:

	"""A zero zoom factor is a programming error."""

	with pytest.raises(ValueError):
		tickgrid.mapper.CoordinateMapper(sixteenths, one_bar, pixels_per_tick=0)
