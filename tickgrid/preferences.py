"""Persisted pattern editor preferences.

The grid resolution and tuplet ratio survive restarts as plain integers in a
YAML file::

	pattern_editor:
	  grid_resolution: 16
	  grid_tuplet_numerator: 3
	  grid_tuplet_denominator: 2
	  pixels_per_tick: 3.0
	  margin: 20

Values outside their valid range are reported and replaced by the default;
they never reach a :class:`~tickgrid.grid.GridSpec`.
"""

import dataclasses
import logging
import os
import typing

import yaml

import tickgrid.constants
import tickgrid.grid
import tickgrid.mapper


logger = logging.getLogger(__name__)


SECTION = "pattern_editor"


class PreferencesError (Exception):
	pass


@dataclasses.dataclass
class Preferences:

	"""
	Pattern editor settings restored at startup.
	"""

	grid_resolution: int = 8
	grid_tuplet_numerator: int = tickgrid.constants.TUPLET_OFF[0]
	grid_tuplet_denominator: int = tickgrid.constants.TUPLET_OFF[1]
	pixels_per_tick: float = tickgrid.mapper.DEFAULT_PIXELS_PER_TICK
	margin: int = tickgrid.mapper.DEFAULT_MARGIN


	def grid (self) -> tickgrid.grid.GridSpec:

		"""Build a grid from the stored resolution and tuplet ratio."""

		return tickgrid.grid.GridSpec(
			resolution = self.grid_resolution,
			tuplet_numerator = self.grid_tuplet_numerator,
			tuplet_denominator = self.grid_tuplet_denominator
		)

	def store_grid (self, grid: tickgrid.grid.GridSpec) -> None:

		"""Remember the current grid."""

		self.grid_resolution = grid.resolution
		self.grid_tuplet_numerator, self.grid_tuplet_denominator = grid.tuplet_ratio

	def to_dict (self) -> typing.Dict[str, typing.Any]:

		"""Return the YAML document structure."""

		return {SECTION: dataclasses.asdict(self)}


def _valid_resolution (value: typing.Any) -> bool:
	return isinstance(value, int) and value in tickgrid.constants.GRID_RESOLUTIONS


def _valid_tuplet_part (value: typing.Any) -> bool:
	return isinstance(value, int) and 0 < value <= tickgrid.constants.MAX_TUPLET_NUMERATOR


def _valid_zoom (value: typing.Any) -> bool:
	return isinstance(value, (int, float)) and tickgrid.mapper.MIN_PIXELS_PER_TICK <= value <= tickgrid.mapper.MAX_PIXELS_PER_TICK


def _valid_margin (value: typing.Any) -> bool:
	return isinstance(value, int) and value >= 0


_VALIDATORS: typing.Dict[str, typing.Callable[[typing.Any], bool]] = {
	"grid_resolution": _valid_resolution,
	"grid_tuplet_numerator": _valid_tuplet_part,
	"grid_tuplet_denominator": _valid_tuplet_part,
	"pixels_per_tick": _valid_zoom,
	"margin": _valid_margin,
}


def from_dict (data: typing.Optional[typing.Dict[str, typing.Any]]) -> Preferences:

	"""
	Build preferences from a parsed YAML document.

	Unknown keys are ignored. Bad values log an error and keep the default.
	"""

	preferences = Preferences()

	if not data:
		return preferences

	if not isinstance(data, dict):
		raise PreferencesError(f"Expected a mapping, got {type(data).__name__}")

	section = data.get(SECTION) or {}

	if not isinstance(section, dict):
		raise PreferencesError(f"'{SECTION}' must be a mapping")

	for name, is_valid in _VALIDATORS.items():

		if name not in section:
			continue

		value = section[name]

		# bool is an int subclass; True is not a resolution.
		if isinstance(value, bool) or not is_valid(value):
			logger.error(f"Wrong {name.replace('_', ' ')}: {value!r}")
			continue

		setattr(preferences, name, value)

	if (preferences.grid_tuplet_numerator == preferences.grid_tuplet_denominator
			and preferences.grid_tuplet_numerator != tickgrid.constants.TUPLET_OFF[0]):
		preferences.grid_tuplet_numerator, preferences.grid_tuplet_denominator = tickgrid.constants.TUPLET_OFF

	return preferences


def load (path: str) -> Preferences:

	"""
	Load preferences from a YAML file. A missing file gives the defaults.
	"""

	if not os.path.exists(path):
		logger.warning(f"Preferences file {path} not found. Using defaults.")
		return Preferences()

	with open(path, 'r') as f:
		try:
			data = yaml.safe_load(f)
		except yaml.YAMLError as exc:
			raise PreferencesError(f"Cannot read preferences file {path}: {exc}") from exc

	return from_dict(data)


def save (preferences: Preferences, path: str) -> None:

	"""
	Write preferences to a YAML file.
	"""

	with open(path, 'w') as f:
		yaml.safe_dump(preferences.to_dict(), f, default_flow_style=False, sort_keys=False)

	logger.debug(f"Saved preferences to {path}")
