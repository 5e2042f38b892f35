"""Parse tuplet ratio expressions such as ``"3:2"``, ``"5"`` or ``"4"``.

**Syntax:** ``numerator[:denominator]``

When the denominator is left out the usual notation convention applies: it
is the largest power of two not above the numerator ("3" is 3:2, "5" is 5:4,
"7" is 7:4). Ratios whose two halves are equal (1:1, 2:2, 8:8) change
nothing and are normalised to 4:4, the canonical "off" value, so typing "4"
turns tuplets off.
"""

import re

import tickgrid.constants
import tickgrid.length_expression
import tickgrid.results


_INTEGER = re.compile(r"^[+-]?\d+$")


def default_denominator (numerator: int) -> int:

	"""Largest power of two that does not exceed ``numerator``."""

	denominator = 1

	while 2 * denominator <= numerator:
		denominator *= 2

	return denominator


def parse (text: str) -> tickgrid.results.ParseResult:

	"""
	Validate a tuplet ratio expression.

	Returns:
		``Accepted`` with ``value = (numerator, denominator)``, or
		``InvalidExpression`` / ``OutOfRange``.

	Example:
		```python
		parse("3:2").value     # (3, 2)
		parse("5").value       # (5, 4)
		parse("8").value       # (4, 4) - off
		parse("25")            # OutOfRange
		```
	"""

	parts = text.split(":")

	if len(parts) > 2:
		return tickgrid.results.InvalidExpression(text, "Text rejected: more than one ':'")

	numerator_text = parts[0].strip()

	if not _INTEGER.match(numerator_text):
		return tickgrid.results.InvalidExpression(text)

	numerator = tickgrid.length_expression.bounded_int(numerator_text, tickgrid.constants.MAX_TUPLET_NUMERATOR)

	if numerator <= 0:
		return tickgrid.results.OutOfRange(text, "numerator > 0", "Tuplet numerator must be positive")

	if len(parts) == 2:
		denominator_text = parts[1].strip()
		if not _INTEGER.match(denominator_text):
			return tickgrid.results.InvalidExpression(text)
		denominator = tickgrid.length_expression.bounded_int(denominator_text, tickgrid.constants.TICKS_PER_WHOLE_NOTE)
	else:
		denominator = default_denominator(numerator)

	if numerator > tickgrid.constants.MAX_TUPLET_NUMERATOR:
		maximum = tickgrid.constants.MAX_TUPLET_NUMERATOR
		return tickgrid.results.OutOfRange(text, f"<= {maximum}", f"Tuplet numerator too big.\nMaximum = {maximum}")

	if not 0 < denominator <= tickgrid.constants.TICKS_PER_WHOLE_NOTE:
		bound = f"(0, {tickgrid.constants.TICKS_PER_WHOLE_NOTE}]"
		return tickgrid.results.OutOfRange(text, bound, f"Denominator value rejected.\nLimits: {bound}")

	if denominator > tickgrid.constants.MAX_TUPLET_NUMERATOR:
		maximum = tickgrid.constants.MAX_TUPLET_NUMERATOR
		return tickgrid.results.OutOfRange(text, f"<= {maximum}", f"Tuplet denominator too big.\nMaximum = {maximum}")

	if numerator == denominator:
		return tickgrid.results.Accepted(value=tickgrid.constants.TUPLET_OFF)

	return tickgrid.results.Accepted(value=(numerator, denominator))
