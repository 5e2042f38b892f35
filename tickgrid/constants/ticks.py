"""Tick timeline constants.

The pattern timeline uses **192 ticks per whole note** (48 per quarter note).
192 factors as 2^6 x 3, so it divides evenly by every standard note-value
denominator including the triplet families:

	1, 2, 3, 4, 6, 8, 12, 16, 24, 32, 48, 64, 96, 192

Any other denominator cannot subdivide the timeline exactly. Persisted
patterns store lengths and positions in these ticks, so the value must never
change without converting saved data.
"""

TICKS_PER_WHOLE_NOTE = 192
TICKS_PER_QUARTER_NOTE = TICKS_PER_WHOLE_NOTE // 4

# A pattern never holds more than 16 whole notes worth of ticks.
MAX_PATTERN_TICKS = 16 * TICKS_PER_WHOLE_NOTE

# Ceiling for sizes typed by the user (displayed as "16/4").
MAX_PATTERN_WHOLE_NOTES = 4

MAX_TUPLET_NUMERATOR = 20

SUPPORTED_DENOMINATORS = tuple(d for d in range(1, TICKS_PER_WHOLE_NOTE + 1) if TICKS_PER_WHOLE_NOTE % d == 0)

# Grid resolutions: marks per whole note. The finest one doubles as "off".
RESOLUTION_OFF = TICKS_PER_WHOLE_NOTE
GRID_RESOLUTIONS = (1, 2, 4, 8, 16, 32, 64, RESOLUTION_OFF)

# The canonical "no tuplet" ratio.
TUPLET_OFF = (4, 4)
