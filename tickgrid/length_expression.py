"""Parse pattern size expressions such as ``"3/8"``, ``"7"`` or ``"2,5/4"``.

**Syntax:** ``numerator[/denominator]``

- The numerator may be fractional. Both ``.`` and ``,`` are accepted as the
  decimal separator.
- The denominator, if present, is an integer note value (4 = quarter notes).
  Left out, the pattern's current denominator is kept.
- Plain decimal notation only: no exponents, at most 12 decimals. Digit runs
  longer than any in-range value are reported out of range unconverted.

The accepted value is a ``(length_in_ticks, denominator)`` pair where::

	length = round(TICKS_PER_WHOLE_NOTE / denominator * numerator)

rounded half away from zero (see :func:`tickgrid.tick_space.round_half_away`).

Two advisories may be attached to an accepted size. They are independent:

- ``UNSUPPORTED_DENOMINATOR`` - the denominator does not divide 192, so
  1/denominator notes fall between ticks. Such denominators are still
  accepted: "1/5" is a more meaningful way to ask for 38 ticks than "0.79/4".
- ``SIZE_APPROXIMATED`` - the stored length, shown back with three decimals,
  no longer reads as the numerator that was typed.
"""

import fractions
import re
import typing

import tickgrid.constants
import tickgrid.pattern
import tickgrid.results
import tickgrid.tick_space


_NUMBER = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")
_INTEGER = re.compile(r"^[+-]?\d+$")

# Digits kept past the decimal point; more than a tick needs, few enough to stay cheap.
_MAX_DECIMALS = 12

# The largest numerator that can pass is 16/4 written as 768/192.
_MAX_NUMERATOR_DIGITS = len(str(tickgrid.constants.MAX_PATTERN_WHOLE_NOTES * tickgrid.constants.TICKS_PER_WHOLE_NOTE))
_TOO_BIG = 10 ** _MAX_NUMERATOR_DIGITS


def bounded_int (text: str, ceiling: int) -> int:

	"""
	Convert integer text, standing in ``ceiling + 1`` (or ``-1``) for any
	value too long to be in range.
	"""

	negative = text.startswith("-")
	digits = text.lstrip("+-").lstrip("0") or "0"

	if len(digits) > len(str(ceiling)):
		return -1 if negative else ceiling + 1

	return -int(digits) if negative else int(digits)


def parse (text: str, current_denominator: int) -> tickgrid.results.ParseResult:

	"""
	Validate a pattern size expression.

	Parameters:
		text: The expression as typed by the user.
		current_denominator: The pattern's denominator, used when ``text``
			has no ``/denominator`` part.

	Returns:
		``Accepted`` with ``value = (length, denominator)``, or
		``InvalidExpression`` / ``OutOfRange``.

	Example:
		```python
		parse("3/8", 4).value      # (72, 8)
		parse("5", 4).value        # (240, 4)
		parse("1/5", 4).value      # (38, 5), with advisories
		```
	"""

	parts = text.split("/")

	if len(parts) > 2:
		return tickgrid.results.InvalidExpression(text, "Text rejected: more than one '/'")

	numerator_text = parts[0].strip().replace(",", ".")

	if not _NUMBER.match(numerator_text):
		return tickgrid.results.InvalidExpression(text)

	negative = numerator_text.startswith("-")
	whole_digits, _, decimals = numerator_text.lstrip("+-").partition(".")
	whole_digits = whole_digits.lstrip("0") or "0"

	if len(decimals) > _MAX_DECIMALS:
		return tickgrid.results.InvalidExpression(text, f"Text rejected: more than {_MAX_DECIMALS} decimals")

	# A long run of digits is out of range whatever it says; skip converting it.
	if len(whole_digits) > _MAX_NUMERATOR_DIGITS:
		numerator = fractions.Fraction(-1 if negative else _TOO_BIG)
	else:
		numerator = fractions.Fraction(f"{whole_digits}.{decimals or 0}")
		if negative:
			numerator = -numerator

	if numerator <= 0:
		return tickgrid.results.OutOfRange(text, "numerator > 0", "Pattern size must be positive")

	if len(parts) == 2:
		denominator_text = parts[1].strip()
		if not _INTEGER.match(denominator_text):
			return tickgrid.results.InvalidExpression(text)
		denominator = bounded_int(denominator_text, tickgrid.constants.TICKS_PER_WHOLE_NOTE)
	else:
		denominator = current_denominator

	if not 0 < denominator <= tickgrid.constants.TICKS_PER_WHOLE_NOTE:
		bound = f"(0, {tickgrid.constants.TICKS_PER_WHOLE_NOTE}]"
		return tickgrid.results.OutOfRange(text, bound, f"Denominator value rejected.\nLimits: {bound}")

	if numerator / denominator > tickgrid.constants.MAX_PATTERN_WHOLE_NOTES:
		maximum = f"{tickgrid.constants.MAX_PATTERN_WHOLE_NOTES * 4}/4"
		return tickgrid.results.OutOfRange(text, f"<= {maximum}", f"Pattern size too big.\nMaximum = {maximum}")

	length = tickgrid.tick_space.ticks_for(numerator, denominator)

	if length <= 0:
		return tickgrid.results.OutOfRange(text, ">= 1 tick", "Pattern size too small.\nMinimum = 1 tick")

	advisories = _advisories(numerator, length, denominator)

	return tickgrid.results.Accepted(value=(length, denominator), advisories=advisories)


def _advisories (numerator: fractions.Fraction, length: int, denominator: int) -> typing.Tuple[tickgrid.results.Advisory, ...]:

	"""
	Work out which approximation notices apply to an accepted size.
	"""

	advisories: typing.List[tickgrid.results.Advisory] = []

	if not tickgrid.tick_space.divides_timeline(denominator):
		advisories.append(tickgrid.results.Advisory(
			tickgrid.results.AdvisoryKind.UNSUPPORTED_DENOMINATOR,
			f"Pattern length in 1/{denominator} notes is not supported. Length may be approximated."
		))

	# Compare what will be displayed (3 decimals) with what was typed.
	displayed_x1000 = tickgrid.tick_space.round_half_away(tickgrid.tick_space.whole_notes(length) * denominator * 1000)
	typed_x1000 = tickgrid.tick_space.round_half_away(numerator * 1000)

	if displayed_x1000 != typed_x1000:
		advisories.append(tickgrid.results.Advisory(
			tickgrid.results.AdvisoryKind.SIZE_APPROXIMATED,
			f"Pattern size was approximated.\n(resolution = {tickgrid.constants.TICKS_PER_QUARTER_NOTE} ticks/quarter note)"
		))

	return tuple(advisories)


def format_size (length: int, denominator: int) -> str:

	"""
	Render a ``(length, denominator)`` pair the way the editor displays it.

	The inverse of :func:`parse` for exact sizes: ``format_size(72, 8) == "3/8"``.
	"""

	return tickgrid.pattern.PatternSize(length=length, denominator=denominator).text
