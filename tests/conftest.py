import pytest

import tickgrid.grid
import tickgrid.pattern
import tickgrid.preferences
import tickgrid.session


@pytest.fixture
def sixteenths () -> tickgrid.grid.GridSpec:

	"""A plain 1/16 grid: one mark every 12 ticks."""

	return tickgrid.grid.GridSpec(resolution=16)


@pytest.fixture
def one_bar () -> tickgrid.pattern.PatternInfo:

	"""A 4/4 pattern, 192 ticks long."""

	return tickgrid.pattern.PatternInfo("drums", length=192, denominator=4)


@pytest.fixture
def session (one_bar: tickgrid.pattern.PatternInfo) -> tickgrid.session.EditingSession:

	"""An editing session on a one-bar pattern with a 1/16 grid."""

	preferences = tickgrid.preferences.Preferences(grid_resolution=16)
	return tickgrid.session.EditingSession(one_bar, preferences)
