"""Keyboard cursor over the editing grid.

The cursor is a grid index (count of grid marks from the pattern start), not
a tick. Its tick position is derived as ``round(index * granularity)``, so on
tuplet grids where marks fall between ticks each step still lands on the
nearest tick of the right mark.
"""

import fractions
import logging
import math

import tickgrid.grid
import tickgrid.pattern
import tickgrid.tick_space


logger = logging.getLogger(__name__)


def last_index (grid: tickgrid.grid.GridSpec, length: int) -> int:

	"""
	Highest grid index whose tick lies inside a pattern of ``length`` ticks.

	This is ``floor(length / granularity)``, stepped back one mark when that
	mark would sit exactly on (or round up to) the pattern end.
	"""

	index = math.floor(fractions.Fraction(length) / grid.exact_granularity())

	while index > 0 and grid.tick_at(index) >= length:
		index -= 1

	return index


class Cursor:

	"""
	A grid index bounded by the pattern length.

	The grid and pattern are shared references: changing either one changes
	what the cursor measures against. Call :meth:`clamp` after such a change.
	"""

	def __init__ (self, grid: tickgrid.grid.GridSpec, pattern: tickgrid.pattern.PatternInfo) -> None:

		"""
		Initialize the cursor at index 0.
		"""

		self.grid = grid
		self.pattern = pattern
		self.index = 0


	@property
	def position (self) -> int:

		"""Tick position of the cursor."""

		return self.grid.tick_at(self.index)

	def move_left (self) -> int:

		"""Step one grid mark left. Index 0 is a hard stop."""

		self.index = max(0, self.index - 1)

		return self.index

	def move_right (self) -> int:

		"""Step one grid mark right unless the next mark is past the pattern end."""

		if self.grid.tick_at(self.index + 1) < self.pattern.length:
			self.index += 1

		return self.index

	def set_index (self, grid_index: int) -> int:

		"""
		Move to ``grid_index``, clamped to ``[0, last_index]``.
		"""

		if grid_index < 0:
			self.index = 0
		elif self.grid.tick_at(grid_index) >= self.pattern.length:
			self.index = last_index(self.grid, self.pattern.length)
		else:
			self.index = grid_index

		return self.index

	def set_position (self, tick: int) -> int:

		"""
		Move to the grid mark nearest to ``tick``.
		"""

		if tick < 0:
			return self.set_index(0)

		if tick >= self.pattern.length:
			self.index = last_index(self.grid, self.pattern.length)
			return self.index

		return self.set_index(tickgrid.tick_space.round_half_away(fractions.Fraction(tick) / self.grid.exact_granularity()))

	def clamp (self) -> int:

		"""Re-apply the bounds after the pattern length or the grid changed."""

		previous = self.index
		self.set_index(self.index)

		if self.index != previous:
			logger.debug(f"Cursor clamped from index {previous} to {self.index}")

		return self.index

	def reset (self) -> None:

		"""Return to the pattern start."""

		self.index = 0
