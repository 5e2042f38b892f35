"""Constants for tickgrid.

- ``tickgrid.constants.ticks`` - The fixed tick timeline and the bounds derived from it

The tick constants are re-exported here, so ``tickgrid.constants.TICKS_PER_WHOLE_NOTE``
works without importing the submodule.
"""

from tickgrid.constants.ticks import (
	GRID_RESOLUTIONS,
	MAX_PATTERN_TICKS,
	MAX_PATTERN_WHOLE_NOTES,
	MAX_TUPLET_NUMERATOR,
	RESOLUTION_OFF,
	SUPPORTED_DENOMINATORS,
	TICKS_PER_QUARTER_NOTE,
	TICKS_PER_WHOLE_NOTE,
	TUPLET_OFF,
)
