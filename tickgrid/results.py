"""Typed outcomes of parsing user-entered expressions.

Parsers never raise for bad input. They return one of:

- :class:`Accepted` - the value is valid and should be applied. It may carry
  :class:`Advisory` notices (the value was stored approximately).
- :class:`InvalidExpression` - the text does not match the grammar.
- :class:`OutOfRange` - a value parsed fine but broke a bound.

:class:`PatternLocked` is returned by the editing session when the pattern
size cannot change at all right now.

Every result has ``ok`` and a user-facing ``message``.

Example::

	result = tickgrid.length_expression.parse("1/5", current_denominator=4)

	if result.ok:
		length, denominator = result.value
		for advisory in result.advisories:
			print(advisory.message)
	else:
		print(result.message)
"""

import dataclasses
import enum
import typing


class AdvisoryKind (enum.Enum):

	"""Reasons an accepted value may not be exactly what was typed."""

	UNSUPPORTED_DENOMINATOR = "unsupported_denominator"
	SIZE_APPROXIMATED = "size_approximated"


@dataclasses.dataclass(frozen=True)
class Advisory:

	"""An informational notice attached to an accepted value."""

	kind: AdvisoryKind
	message: str


@dataclasses.dataclass(frozen=True)
class Accepted:

	"""
	A validated value.

	``unchanged`` is True when the text matched what was already shown and
	nothing was applied.
	"""

	value: typing.Tuple[int, int]
	advisories: typing.Tuple[Advisory, ...] = ()
	unchanged: bool = False

	ok: typing.ClassVar[bool] = True

	@property
	def message (self) -> str:
		return "\n".join(advisory.message for advisory in self.advisories)

	def has_advisory (self, kind: AdvisoryKind) -> bool:

		"""Return True if an advisory of ``kind`` is attached."""

		return any(advisory.kind is kind for advisory in self.advisories)


@dataclasses.dataclass(frozen=True)
class InvalidExpression:

	"""The text could not be parsed."""

	text: str
	reason: str = "Text rejected"

	ok: typing.ClassVar[bool] = False

	@property
	def message (self) -> str:
		return self.reason


@dataclasses.dataclass(frozen=True)
class OutOfRange:

	"""
	A parsed value broke a bound.

	``bound`` names the violated limit (e.g. ``"(0, 192]"``).
	"""

	text: str
	bound: str
	message: str

	ok: typing.ClassVar[bool] = False


@dataclasses.dataclass(frozen=True)
class PatternLocked:

	"""The pattern size cannot be changed in the current state."""

	message: str = "The pattern size cannot be changed while playing."

	ok: typing.ClassVar[bool] = False


Rejection = typing.Union[InvalidExpression, OutOfRange, PatternLocked]
ParseResult = typing.Union[Accepted, InvalidExpression, OutOfRange]
