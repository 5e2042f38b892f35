"""The pattern editing session.

One :class:`EditingSession` exists per open pattern editor. It owns the only
:class:`~tickgrid.grid.GridSpec`; the cursor and the coordinate mapper hold
references to that same object, so there is nothing to keep in sync when the
grid changes. Every view that draws the pattern reads the grid through the
session and redraws when the session emits an event:

- ``grid_changed`` (grid) - resolution or tuplet ratio changed
- ``cursor_moved`` (index, tick) - the cursor index changed
- ``pattern_size_changed`` (size) - a new ``PatternSize`` was published
- ``advisory`` (advisory) - an accepted input was stored approximately

Example::

	session = EditingSession(tickgrid.pattern.PatternInfo("drums"))
	session.events.on("advisory", lambda advisory: print(advisory.message))

	session.select_grid_menu(2)               # 1/16
	session.apply_length_text("3/4")          # 144 ticks
	session.apply_tuplet_text("3")            # 3:2 triplets
	session.move_cursor_right()
"""

import logging
import typing

import tickgrid.cursor
import tickgrid.event_emitter
import tickgrid.grid
import tickgrid.length_expression
import tickgrid.mapper
import tickgrid.pattern
import tickgrid.preferences
import tickgrid.results
import tickgrid.tuplet_expression


logger = logging.getLogger(__name__)


class EditingSession:

	"""
	Single owner of the grid, cursor and mapper for one pattern editor.

	Parameters:
		pattern: The pattern being edited. A one-bar 4/4 pattern by default.
		preferences: Restored preferences. The grid starts from them and
			grid changes are written back to them.
	"""

	def __init__ (
		self,
		pattern: typing.Optional[tickgrid.pattern.PatternInfo] = None,
		preferences: typing.Optional[tickgrid.preferences.Preferences] = None
	) -> None:

		self.preferences = preferences if preferences is not None else tickgrid.preferences.Preferences()
		self.pattern = pattern if pattern is not None else tickgrid.pattern.PatternInfo()

		self.grid = self.preferences.grid()
		self.cursor = tickgrid.cursor.Cursor(self.grid, self.pattern)
		self.mapper = tickgrid.mapper.CoordinateMapper(
			self.grid,
			self.pattern,
			pixels_per_tick = self.preferences.pixels_per_tick,
			margin = self.preferences.margin
		)

		self.events = tickgrid.event_emitter.EventEmitter()

		# Set by the transport; the pattern size is frozen while playing.
		self.playing = False


	# ── Pattern ──────────────────────────────────────────────────────

	def select_pattern (self, pattern: tickgrid.pattern.PatternInfo) -> None:

		"""Switch to another pattern. The cursor returns to the start."""

		self.pattern = pattern
		self.cursor.pattern = pattern
		self.mapper.pattern = pattern
		self.cursor.reset()

		logger.info(f"Pattern editor: {pattern.name or 'unnamed pattern'} ({pattern.text})")

		self._emit_cursor()

	@property
	def length_text (self) -> str:

		"""Display text of the pattern size."""

		return self.pattern.text

	@property
	def denominator_warning (self) -> bool:

		"""Return True if the pattern denominator does not divide the tick timeline."""

		return self.pattern.size.denominator_warning

	def apply_length_text (self, text: str) -> typing.Union[tickgrid.results.ParseResult, tickgrid.results.PatternLocked]:

		"""
		Parse ``text`` as a pattern size and apply it if accepted.

		Nothing changes unless the result is ``Accepted``. The new length and
		denominator are published together.
		"""

		if self.playing:
			return tickgrid.results.PatternLocked()

		if text.strip() == self.pattern.text:
			return tickgrid.results.Accepted(value=(self.pattern.length, self.pattern.denominator), unchanged=True)

		result = tickgrid.length_expression.parse(text, current_denominator=self.pattern.denominator)

		if not isinstance(result, tickgrid.results.Accepted):
			logger.info(f"Pattern size {text!r} rejected: {result.message}")
			return result

		length, denominator = result.value
		size = tickgrid.pattern.PatternSize(length=length, denominator=denominator)

		self.pattern.set_size(size)
		self._clamp_cursor()

		self.events.emit(tickgrid.event_emitter.PATTERN_SIZE_CHANGED, size)
		self._emit_advisories(result)

		return result


	# ── Grid ─────────────────────────────────────────────────────────

	@property
	def tuplet_text (self) -> str:

		"""Display text of the tuplet ratio (``"off"`` or ``"n:d"``)."""

		return self.grid.tuplet_text

	@property
	def menu_index (self) -> int:

		"""Grid menu index matching the current grid."""

		return tickgrid.grid.menu_index_for(self.grid.resolution, *self.grid.tuplet_ratio)

	def set_resolution (self, resolution: int) -> None:

		"""Change the grid resolution."""

		self.grid.set_resolution(resolution)
		self._grid_changed()

	def set_tuplet_ratio (self, numerator: int, denominator: int) -> None:

		"""Change both halves of the tuplet ratio."""

		self.grid.set_tuplet_ratio(numerator, denominator)
		self._grid_changed()

	def select_grid_menu (self, index: int) -> tickgrid.grid.GridMenuEntry:

		"""Apply a grid menu entry (see :data:`tickgrid.grid.GRID_MENU`)."""

		entry = tickgrid.grid.apply_menu_entry(self.grid, index)
		self._grid_changed()

		return entry

	def apply_tuplet_text (self, text: str) -> tickgrid.results.ParseResult:

		"""
		Parse ``text`` as a tuplet ratio and apply it if accepted.
		"""

		if text.strip() == self.grid.tuplet_text:
			return tickgrid.results.Accepted(value=self.grid.tuplet_ratio, unchanged=True)

		result = tickgrid.tuplet_expression.parse(text)

		if not isinstance(result, tickgrid.results.Accepted):
			logger.info(f"Tuplet ratio {text!r} rejected: {result.message}")
			return result

		self.set_tuplet_ratio(*result.value)

		return result

	def _grid_changed (self) -> None:

		self.preferences.store_grid(self.grid)

		logger.info(f"Grid: resolution {self.grid.resolution}, tuplet {self.grid.tuplet_text}, granularity {self.grid.granularity():.3f} ticks")

		self._clamp_cursor()
		self.events.emit(tickgrid.event_emitter.GRID_CHANGED, self.grid)


	# ── Cursor ───────────────────────────────────────────────────────

	def move_cursor_left (self) -> int:

		"""Move the cursor one grid mark left."""

		return self._move_cursor(self.cursor.move_left)

	def move_cursor_right (self) -> int:

		"""Move the cursor one grid mark right."""

		return self._move_cursor(self.cursor.move_right)

	def set_cursor_index (self, grid_index: int) -> int:

		"""Place the cursor on a grid index (clamped)."""

		return self._move_cursor(lambda: self.cursor.set_index(grid_index))

	def set_cursor_position (self, tick: int) -> int:

		"""Place the cursor on the grid mark nearest to a tick (clamped)."""

		return self._move_cursor(lambda: self.cursor.set_position(tick))

	def click (self, x: int) -> int:

		"""Place the cursor on the grid mark nearest to pixel ``x``."""

		return self.set_cursor_index(self.mapper.to_grid_index(x))

	def cursor_pixel (self) -> int:

		"""Pixel offset that keeps the cursor visible."""

		return self.mapper.cursor_pixel(self.cursor)

	def _move_cursor (self, move: typing.Callable[[], int]) -> int:

		previous = self.cursor.index
		index = move()

		if index != previous:
			self._emit_cursor()

		return index

	def _clamp_cursor (self) -> None:

		previous = self.cursor.index

		if self.cursor.clamp() != previous:
			self._emit_cursor()

	def _emit_cursor (self) -> None:

		self.events.emit(tickgrid.event_emitter.CURSOR_MOVED, self.cursor.index, self.cursor.position)


	def _emit_advisories (self, result: tickgrid.results.Accepted) -> None:

		for advisory in result.advisories:
			logger.warning(advisory.message.replace("\n", " "))
			self.events.emit(tickgrid.event_emitter.ADVISORY, advisory)
