"""The pattern size as seen by the editing grid.

A pattern stores its length in ticks together with the note-value
denominator used to display that length as a fraction ("3/8" is 72 ticks
with denominator 8). The two values are only meaningful together, so they
live in one immutable :class:`PatternSize` and :class:`PatternInfo` swaps
the whole pair in a single assignment. A reader on another thread (the
audio engine) reads ``info.size`` once and always sees a matching pair.
"""

import dataclasses
import logging

import tickgrid.constants
import tickgrid.tick_space


logger = logging.getLogger(__name__)


DENOMINATOR_WARNING = (
	"Only notes as small as 1/{ticks} of a whole note can be represented, "
	"so note values that do not divide it exactly are approximated. "
	"Supported denominators: {supported}"
)


@dataclasses.dataclass(frozen=True)
class PatternSize:

	"""
	A pattern length in ticks and the denominator it is displayed in.
	"""

	length: int
	denominator: int

	def __post_init__ (self) -> None:
		if not 0 < self.length <= tickgrid.constants.MAX_PATTERN_TICKS:
			raise ValueError(f"length must be in (0, {tickgrid.constants.MAX_PATTERN_TICKS}], got {self.length}")
		if not 0 < self.denominator <= tickgrid.constants.TICKS_PER_WHOLE_NOTE:
			raise ValueError(f"denominator must be in (0, {tickgrid.constants.TICKS_PER_WHOLE_NOTE}], got {self.denominator}")

	@property
	def exact (self) -> bool:

		"""Return True if the length is a whole number of 1/denominator notes."""

		return (self.length * self.denominator) % tickgrid.constants.TICKS_PER_WHOLE_NOTE == 0

	@property
	def text (self) -> str:

		"""
		Render the size as ``numerator/denominator``.

		Exact sizes print an integer numerator ("3/8"). Otherwise the numerator
		gets three decimals ("0.990/5"): one tick is 1/192 = 0.0052 of a whole
		note, so three digits tell neighbouring tick counts apart.
		"""

		if self.exact:
			numerator = (self.length * self.denominator) // tickgrid.constants.TICKS_PER_WHOLE_NOTE
			return f"{numerator}/{self.denominator}"

		numerator_float = self.length * self.denominator / tickgrid.constants.TICKS_PER_WHOLE_NOTE
		return f"{numerator_float:.3f}/{self.denominator}"

	@property
	def denominator_warning (self) -> bool:

		"""
		Return True if the denominator does not divide the tick timeline.

		This holds even when the displayed numerator is a whole number (5/5):
		the denominator itself is still not supported.
		"""

		return not tickgrid.tick_space.divides_timeline(self.denominator)


def denominator_warning_message () -> str:

	"""Informational text explaining which denominators are supported."""

	return DENOMINATOR_WARNING.format(
		ticks = tickgrid.constants.TICKS_PER_WHOLE_NOTE,
		supported = ", ".join(f"1/{d}" for d in tickgrid.constants.SUPPORTED_DENOMINATORS)
	)


class PatternInfo:

	"""
	The pattern entity's size fields, shared with the editing grid.

	Only :meth:`set_size` changes the size, always as a whole pair.
	"""

	def __init__ (self, name: str = "", length: int = tickgrid.constants.TICKS_PER_WHOLE_NOTE, denominator: int = 4) -> None:

		"""
		Initialize a pattern, one whole note (4/4) long by default.
		"""

		self.name = name
		self._size = PatternSize(length=length, denominator=denominator)


	@property
	def size (self) -> PatternSize:

		"""The current (length, denominator) pair."""

		return self._size

	@property
	def length (self) -> int:

		"""Pattern length in ticks."""

		return self._size.length

	@property
	def denominator (self) -> int:

		"""Display denominator of the pattern length."""

		return self._size.denominator

	@property
	def text (self) -> str:

		"""Display text of the pattern size, e.g. ``"4/4"``."""

		return self._size.text


	def set_size (self, size: PatternSize) -> None:

		"""
		Publish a new size. Length and denominator change together.
		"""

		self._size = size
		logger.info(f"Pattern '{self.name}' size: {size.text} ({size.length} ticks)")
