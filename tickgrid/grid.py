"""Editing grid: resolution, tuplet ratio and the granularity derived from them.

A :class:`GridSpec` divides a whole note into ``resolution`` marks and then
reshapes them by a tuplet ratio. For standard triplets the ratio is 3:2: a
single 1/8 note under a triplet lasts 1/8 x 2/3 = 1/12 of a whole note.
Other common ratios are 5:4 (quintuplets) and 4:3 (quadruplets in compound
meter).

The granularity (tick distance between adjacent grid marks) is always derived
from the three fields and never stored.
"""

import dataclasses
import fractions
import logging
import typing

import tickgrid.constants
import tickgrid.tick_space


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class GridSpec:

	"""
	Grid resolution plus tuplet ratio.

	Parameters:
		resolution: Grid marks per whole note absent tuplets (16 = sixteenths).
			``RESOLUTION_OFF`` (192) means one mark per tick.
		tuplet_numerator: Notes played in the time of ``tuplet_denominator``.
		tuplet_denominator: See above. 4:4 is the canonical "no tuplet".

	Zero or negative values are programming errors and raise ``ValueError``.
	Callers validate user input (see :mod:`tickgrid.tuplet_expression`)
	before building or changing a grid.

	Example::

		grid = GridSpec(resolution=16)
		grid.granularity()            # 12.0 ticks per mark

		grid.set_tuplet_ratio(3, 2)
		grid.granularity()            # 8.0 ticks per mark
	"""

	resolution: int = 8
	tuplet_numerator: int = 4
	tuplet_denominator: int = 4

	def __post_init__ (self) -> None:
		_check_positive("resolution", self.resolution)
		_check_positive("tuplet_numerator", self.tuplet_numerator)
		_check_positive("tuplet_denominator", self.tuplet_denominator)


	def exact_granularity (self) -> fractions.Fraction:

		"""Tick distance between adjacent grid marks, as an exact fraction."""

		return fractions.Fraction(
			tickgrid.constants.TICKS_PER_WHOLE_NOTE * self.tuplet_denominator,
			self.tuplet_numerator * self.resolution
		)

	def granularity (self) -> float:

		"""
		Tick distance between adjacent grid marks.

		``TICKS_PER_WHOLE_NOTE * tuplet_denominator / (tuplet_numerator * resolution)``,
		unrounded: tuplet grids do not land on whole ticks.
		"""

		return float(self.exact_granularity())

	def tick_at (self, index: int) -> int:

		"""Tick position of grid mark ``index``."""

		return tickgrid.tick_space.round_half_away(index * self.exact_granularity())

	def marks_per_whole_note (self) -> fractions.Fraction:

		"""Number of grid marks in one whole note (``resolution * num / den``)."""

		return fractions.Fraction(self.resolution * self.tuplet_numerator, self.tuplet_denominator)


	def set_resolution (self, resolution: int) -> None:

		"""Replace the resolution."""

		_check_positive("resolution", resolution)
		self.resolution = resolution

	def set_tuplet_ratio (self, numerator: int, denominator: int) -> None:

		"""
		Replace both halves of the tuplet ratio together.

		Numerator and denominator are never set one at a time: the state in
		between would describe a different grid.
		"""

		_check_positive("tuplet_numerator", numerator)
		_check_positive("tuplet_denominator", denominator)
		self.tuplet_numerator, self.tuplet_denominator = numerator, denominator


	@property
	def tuplet_ratio (self) -> typing.Tuple[int, int]:

		"""The (numerator, denominator) pair."""

		return (self.tuplet_numerator, self.tuplet_denominator)

	@property
	def tuplet_off (self) -> bool:

		"""Return True if the ratio is the canonical "no tuplet" value."""

		return self.tuplet_ratio == tickgrid.constants.TUPLET_OFF

	@property
	def tuplet_text (self) -> str:

		"""Display form of the tuplet ratio: ``"off"`` or ``"n:d"``."""

		return format_tuplet(self.tuplet_numerator, self.tuplet_denominator)


def _check_positive (name: str, value: int) -> None:

	if value <= 0:
		raise ValueError(f"{name} must be positive, got {value}")


def format_tuplet (numerator: int, denominator: int) -> str:

	"""Render a tuplet ratio for display. (4, 4) shows as ``"off"``."""

	if (numerator, denominator) == tickgrid.constants.TUPLET_OFF:
		return "off"

	return f"{numerator}:{denominator}"


# ── Grid menu ────────────────────────────────────────────────────────


@dataclasses.dataclass(frozen=True)
class GridMenuEntry:

	"""
	One entry of the grid resolution menu.

	``tuplet`` is ``None`` for plain entries, which leave the current tuplet
	ratio alone.
	"""

	label: str
	resolution: int
	tuplet: typing.Optional[typing.Tuple[int, int]] = None


TRIPLET = (3, 2)

# ``None`` marks a separator; indices are those shown to the user.
GRID_MENU: typing.Tuple[typing.Optional[GridMenuEntry], ...] = (
	GridMenuEntry("1/4 - quarter", 4),
	GridMenuEntry("1/8 - eighth", 8),
	GridMenuEntry("1/16 - sixteenth", 16),
	GridMenuEntry("1/32 - thirty-second", 32),
	GridMenuEntry("1/64 - sixty-fourth", 64),
	None,
	GridMenuEntry("1/4T - quarter triplet", 4, TRIPLET),
	GridMenuEntry("1/8T - eighth triplet", 8, TRIPLET),
	GridMenuEntry("1/16T - sixteenth triplet", 16, TRIPLET),
	GridMenuEntry("1/32T - thirty-second triplet", 32, TRIPLET),
	None,
	GridMenuEntry("off", tickgrid.constants.RESOLUTION_OFF, tickgrid.constants.TUPLET_OFF),
)

_FIRST_PLAIN_INDEX = 0
_FIRST_TRIPLET_INDEX = 6
_OFF_INDEX = 11


def menu_entry (index: int) -> GridMenuEntry:

	"""Return the menu entry at ``index``. Separators and bad indices raise ``IndexError``."""

	entry = GRID_MENU[index] if 0 <= index < len(GRID_MENU) else None

	if entry is None:
		raise IndexError(f"No grid menu entry at index {index}")

	return entry


def apply_menu_entry (grid: GridSpec, index: int) -> GridMenuEntry:

	"""
	Apply the menu entry at ``index`` to ``grid``.

	The tuplet ratio (if the entry carries one) is set before the resolution
	so the grid never pairs a triplet resolution with the old ratio.
	"""

	entry = menu_entry(index)

	if entry.tuplet is not None:
		grid.set_tuplet_ratio(*entry.tuplet)

	grid.set_resolution(entry.resolution)

	return entry


def menu_index_for (resolution: int, tuplet_numerator: int, tuplet_denominator: int) -> int:

	"""
	Find the menu index that represents a persisted grid.

	Resolutions with no menu entry log an error and fall back to the first
	entry of the matching family (plain or triplet).
	"""

	if resolution == tickgrid.constants.RESOLUTION_OFF:
		return _OFF_INDEX

	triplet = (tuplet_numerator, tuplet_denominator) == TRIPLET
	first = _FIRST_TRIPLET_INDEX if triplet else _FIRST_PLAIN_INDEX

	for index, entry in enumerate(GRID_MENU):
		if entry is None or index == _OFF_INDEX:
			continue
		if (entry.tuplet == TRIPLET) == triplet and entry.resolution == resolution:
			return index

	logger.error(f"Wrong grid resolution: {resolution}")
	return first
