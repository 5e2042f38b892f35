"""Tick arithmetic on the fixed 192 ticks-per-whole-note timeline.

Every conversion that lands on a tick goes through :func:`round_half_away`,
the one rounding mode used across the package. Halves round away from zero
(2.5 -> 3, -2.5 -> -3), as C's ``round()`` does, and unlike Python's built-in
``round()`` which rounds halves to even. Working on ``Fraction`` input keeps
the result exact: a value that is mathematically ``x.5`` is never nudged to
either side by binary floating point.
"""

import fractions
import math
import typing

import tickgrid.constants


Number = typing.Union[int, float, fractions.Fraction]


def round_half_away (value: Number) -> int:

	"""
	Round to the nearest integer, halves away from zero.
	"""

	if isinstance(value, float) and not math.isfinite(value):
		raise ValueError(f"Cannot round non-finite value {value!r}")

	exact = fractions.Fraction(value)
	magnitude = math.floor(abs(exact) + fractions.Fraction(1, 2))

	return -magnitude if exact < 0 else magnitude


def divides_timeline (denominator: int) -> bool:

	"""Return True if 1/denominator of a whole note is a whole number of ticks."""

	return denominator > 0 and tickgrid.constants.TICKS_PER_WHOLE_NOTE % denominator == 0


def ticks_for (numerator: Number, denominator: int) -> int:

	"""
	Length in ticks of ``numerator`` notes of value 1/``denominator``.

	This is the canonical pattern-length formula:
	``round(TICKS_PER_WHOLE_NOTE / denominator * numerator)``.
	"""

	if denominator <= 0:
		raise ValueError("denominator must be positive")

	return round_half_away(fractions.Fraction(tickgrid.constants.TICKS_PER_WHOLE_NOTE, denominator) * fractions.Fraction(numerator))


def whole_notes (ticks: int) -> fractions.Fraction:

	"""Convert a tick count to an exact number of whole notes."""

	return fractions.Fraction(ticks, tickgrid.constants.TICKS_PER_WHOLE_NOTE)
