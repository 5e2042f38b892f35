"""Conversions between editor pixels, ticks and grid indices.

The rendering layer owns the zoom (pixels per tick) and the left margin
drawn before the first tick. Given a pixel ``x`` it asks this mapper where on
the timeline that is:

- :meth:`CoordinateMapper.to_float_column` - exact, unrounded tick position
- :meth:`CoordinateMapper.to_grid_index` - index of the nearest grid mark
- :meth:`CoordinateMapper.to_column` - tick of the nearest grid mark, or the
  nearest tick in fine-grained mode

Results of ``to_column`` always lie in ``[0, pattern length)``: positions
outside the pattern are clamped, never wrapped.
"""

import fractions
import typing

import tickgrid.cursor
import tickgrid.grid
import tickgrid.pattern
import tickgrid.tick_space


DEFAULT_MARGIN = 20
DEFAULT_PIXELS_PER_TICK = 3.0

MIN_PIXELS_PER_TICK = 0.5
MAX_PIXELS_PER_TICK = 15.0
ZOOM_STEP = 1.5


class CoordinateMapper:

	"""
	Map pixel offsets to ticks and grid indices, and back.

	Parameters:
		grid: The shared editing grid.
		pattern: The pattern being edited (for the right-hand bound).
		pixels_per_tick: Zoom factor; the drawn width of one tick.
		margin: Pixels before tick 0.
	"""

	def __init__ (
		self,
		grid: tickgrid.grid.GridSpec,
		pattern: tickgrid.pattern.PatternInfo,
		pixels_per_tick: float = DEFAULT_PIXELS_PER_TICK,
		margin: int = DEFAULT_MARGIN
	) -> None:

		if pixels_per_tick <= 0:
			raise ValueError("pixels_per_tick must be positive")

		if margin < 0:
			raise ValueError("margin cannot be negative")

		self.grid = grid
		self.pattern = pattern
		self.pixels_per_tick = pixels_per_tick
		self.margin = margin


	def _exact_column (self, x: int) -> fractions.Fraction:

		return fractions.Fraction(max(0, x - self.margin)) / fractions.Fraction(self.pixels_per_tick)

	def to_float_column (self, x: int) -> float:

		"""Unrounded tick position under pixel ``x``."""

		return float(self._exact_column(x))

	def to_grid_index (self, x: int) -> int:

		"""Index of the grid mark nearest to pixel ``x``."""

		return tickgrid.tick_space.round_half_away(self._exact_column(x) / self.grid.exact_granularity())

	def to_column (self, x: int, fine_grained: bool = False) -> int:

		"""
		Tick under pixel ``x``, snapped to the grid unless ``fine_grained``.
		"""

		if fine_grained:
			return self._clamp_tick(tickgrid.tick_space.round_half_away(self._exact_column(x)))

		return self._clamp_index(self.to_grid_index(x))

	def snap (self, tick: int, fine_grained: bool = False) -> int:

		"""
		Snap a tick position the same way :meth:`to_column` snaps pixels.

		Applying it to its own output changes nothing.
		"""

		if fine_grained:
			return self._clamp_tick(tick)

		index = tickgrid.tick_space.round_half_away(fractions.Fraction(max(0, tick)) / self.grid.exact_granularity())

		return self._clamp_index(index)

	def _clamp_tick (self, tick: int) -> int:

		return min(max(0, tick), self.pattern.length - 1)

	def _clamp_index (self, index: int) -> int:

		# Past the end, fall back to the last mark inside the pattern so the
		# result stays on the grid.
		index = min(max(0, index), tickgrid.cursor.last_index(self.grid, self.pattern.length))

		return self.grid.tick_at(index)


	def to_pixel (self, tick: typing.Union[int, float]) -> int:

		"""Pixel offset at which ``tick`` is drawn."""

		return self.margin + tickgrid.tick_space.round_half_away(fractions.Fraction(tick) * fractions.Fraction(self.pixels_per_tick))

	def index_to_pixel (self, index: int) -> int:

		"""Pixel offset of grid mark ``index``, drawn at its exact (unrounded) position."""

		return self.margin + tickgrid.tick_space.round_half_away(
			index * self.grid.exact_granularity() * fractions.Fraction(self.pixels_per_tick)
		)

	def cursor_pixel (self, cursor: tickgrid.cursor.Cursor) -> int:

		"""Pixel offset the view should scroll to so the cursor is visible."""

		return self.index_to_pixel(cursor.index)

	def pattern_width (self) -> int:

		"""Drawn width of the whole pattern, margin included."""

		return self.to_pixel(self.pattern.length)


	def zoom_in (self) -> float:

		"""Widen ticks by one zoom step."""

		self.pixels_per_tick = min(MAX_PIXELS_PER_TICK, self.pixels_per_tick * ZOOM_STEP)

		return self.pixels_per_tick

	def zoom_out (self) -> float:

		"""Narrow ticks by one zoom step."""

		self.pixels_per_tick = max(MIN_PIXELS_PER_TICK, self.pixels_per_tick / ZOOM_STEP)

		return self.pixels_per_tick
