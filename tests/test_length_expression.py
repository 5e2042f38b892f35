import pytest

import tickgrid.constants
import tickgrid.length_expression
import tickgrid.results


AdvisoryKind = tickgrid.results.AdvisoryKind


def _accepted (text: str, current_denominator: int = 4) -> tickgrid.results.Accepted:

	result = tickgrid.length_expression.parse(text, current_denominator)
	assert isinstance(result, tickgrid.results.Accepted), result
	return result


def test_three_eighths () -> None:

	"""3/8 is 72 ticks, exact, and displays as 3/8 again."""

	result = _accepted("3/8")

	assert result.ok
	assert result.value == (72, 8)
	assert result.advisories == ()
	assert tickgrid.length_expression.format_size(*result.value) == "3/8"


@pytest.mark.parametrize("denominator", tickgrid.constants.SUPPORTED_DENOMINATORS)
@pytest.mark.parametrize("numerator", [1, 3, 4])
def test_exact_fractions_display_unchanged (numerator: int, denominator: int) -> None:

	"""Sizes in supported denominators display exactly as typed."""

	text = f"{numerator}/{denominator}"
	result = _accepted(text)

	assert result.advisories == ()
	assert tickgrid.length_expression.format_size(*result.value) == text


def test_one_fifth_is_approximated () -> None:

	"""1/5 is accepted as 38 ticks with both advisories."""

	result = _accepted("1/5")

	assert result.value == (38, 5)
	assert result.has_advisory(AdvisoryKind.UNSUPPORTED_DENOMINATOR)
	assert result.has_advisory(AdvisoryKind.SIZE_APPROXIMATED)
	assert "1/5" in result.message
	assert tickgrid.length_expression.format_size(38, 5) == "0.990/5"


def test_unsupported_denominator_without_drift () -> None:

	"""5/5 is exactly one whole note but still flags the denominator."""

	result = _accepted("5/5")

	assert result.value == (192, 5)
	assert result.has_advisory(AdvisoryKind.UNSUPPORTED_DENOMINATOR)
	assert not result.has_advisory(AdvisoryKind.SIZE_APPROXIMATED)


def test_drift_without_unsupported_denominator () -> None:

	"""0,79/4 rounds to 38 ticks, which displays as 0.792/4."""

	result = _accepted("0,79/4")

	assert result.value == (38, 4)
	assert result.advisories[0].kind is AdvisoryKind.SIZE_APPROXIMATED
	assert len(result.advisories) == 1


def test_decimal_numerator () -> None:

	"""Fractional numerators are stored exactly when they land on a tick."""

	result = _accepted("2.5/4")

	assert result.value == (120, 4)
	assert result.advisories == ()
	assert tickgrid.length_expression.format_size(120, 4) == "2.500/4"


def test_comma_and_point_are_equivalent () -> None:

	"""Comma and point both work as the decimal separator."""

	assert _accepted("1,5/4").value == _accepted("1.5/4").value == (72, 4)


def test_length_rounds_half_away_from_zero () -> None:

	"""1.5/64 of a whole note is 4.5 ticks, stored as 5."""

	result = _accepted("1.5/64")

	assert result.value == (5, 64)
	assert result.has_advisory(AdvisoryKind.SIZE_APPROXIMATED)


def test_omitted_denominator_keeps_current () -> None:

	"""A bare numerator uses the pattern's current denominator."""

	assert _accepted("7", current_denominator=8).value == (168, 8)
	assert _accepted("4").value == (192, 4)


def test_whitespace_is_ignored () -> None:

	"""Spaces around the parts are ignored."""

	assert _accepted(" 3 / 8 ").value == (72, 8)


def test_maximum_size () -> None:

	"""16/4 is the largest accepted size."""

	assert _accepted("16/4").value == (768, 4)
	assert _accepted("4/1").value == (768, 1)


@pytest.mark.parametrize("text", ["1/2/3", "", "abc", "3/x", "3/2.0", "nan", "inf/4", "1_0/4", "/4", "3/", "1e5/4", "1e-99999999/4", "1E2", "0.1234567890123/4"])
def test_malformed_text (text: str) -> None:

	"""Text outside the grammar is an invalid expression."""

	result = tickgrid.length_expression.parse(text, 4)

	assert isinstance(result, tickgrid.results.InvalidExpression)
	assert not result.ok
	assert result.message.startswith("Text rejected")


@pytest.mark.parametrize("text", ["0/4", "-1/4", "0"])
def test_numerator_must_be_positive (text: str) -> None:

	"""Zero and negative sizes are out of range."""

	result = tickgrid.length_expression.parse(text, 4)

	assert isinstance(result, tickgrid.results.OutOfRange)
	assert result.bound == "numerator > 0"


@pytest.mark.parametrize("text", ["3/0", "3/193", "3/-8"])
def test_denominator_range (text: str) -> None:

	"""Denominators must lie in (0, 192]."""

	result = tickgrid.length_expression.parse(text, 4)

	assert isinstance(result, tickgrid.results.OutOfRange)
	assert result.bound == "(0, 192]"
	assert "Limits: (0, 192]" in result.message


def test_finest_denominator () -> None:

	"""1/192 is a single tick."""

	assert _accepted("1/192").value == (1, 192)


@pytest.mark.parametrize("text", ["17/4", "4.001/1", "33/8"])
def test_too_big (text: str) -> None:

	"""More than four whole notes is rejected."""

	result = tickgrid.length_expression.parse(text, 4)

	assert isinstance(result, tickgrid.results.OutOfRange)
	assert "Maximum = 16/4" in result.message


def test_too_small () -> None:

	"""A size that rounds to zero ticks is rejected."""

	result = tickgrid.length_expression.parse("0.001/4", 4)

	assert isinstance(result, tickgrid.results.OutOfRange)
	assert result.bound == ">= 1 tick"


@pytest.mark.parametrize("text", ["9" * 5000 + "/4", "1" + "0" * 5000 + ".5", "1000/192"])
def test_long_numerator_is_too_big (text: str) -> None:

	"""Numerators with more digits than any valid size are rejected without converting them."""

	result = tickgrid.length_expression.parse(text, 4)

	assert isinstance(result, tickgrid.results.OutOfRange)
	assert "Maximum = 16/4" in result.message


def test_long_negative_numerator () -> None:

	"""A long negative numerator is still reported as non-positive."""

	result = tickgrid.length_expression.parse("-" + "9" * 5000 + "/4", 4)

	assert isinstance(result, tickgrid.results.OutOfRange)
	assert result.bound == "numerator > 0"


@pytest.mark.parametrize("text", ["3/" + "9" * 5000, "3/-" + "9" * 5000])
def test_long_denominator_out_of_range (text: str) -> None:

	"""Denominators with thousands of digits report the (0, 192] bound."""

	result = tickgrid.length_expression.parse(text, 4)

	assert isinstance(result, tickgrid.results.OutOfRange)
	assert result.bound == "(0, 192]"


def test_leading_zeros_are_ignored () -> None:

	"""Zero padding, however long, does not change the value."""

	assert _accepted("0" * 5000 + "3/" + "0" * 5000 + "8").value == (72, 8)
	assert _accepted("0768.000/192").value == (768, 192)
