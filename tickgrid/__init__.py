"""
tickgrid - grid quantization and cursor positioning for a tick-based pattern editor.

Patterns live on a fixed timeline of 192 ticks per whole note. The editor
lays a grid over that timeline (a resolution such as 1/16, optionally
reshaped by a tuplet ratio such as 3:2) and places notes, the cursor and
selections on it. This package is the arithmetic behind that grid:

- **Grid.** ``GridSpec`` derives the tick distance between grid marks from
  the resolution and tuplet ratio, exactly, with one pinned rounding mode
  (half away from zero) wherever a tick is produced.
- **Pixels to ticks.** ``CoordinateMapper`` turns a pixel offset and zoom
  into an exact tick, the nearest grid index, or a snapped tick (or a
  fine-grained one that bypasses the grid), always clamped to the pattern.
- **Cursor.** ``Cursor`` walks grid indices left and right and stops at the
  pattern ends.
- **User input.** ``length_expression.parse("3/8", ...)`` and
  ``tuplet_expression.parse("5")`` turn typed text into validated values
  and return typed results instead of raising.
- **Session.** ``EditingSession`` owns one grid per editor, publishes pattern
  sizes atomically and notifies views through events.

Preferences (grid resolution, tuplet ratio, zoom) persist in a YAML file via
``tickgrid.preferences``. ``python -m tickgrid`` exercises the parsers from
a terminal.
"""

import tickgrid.constants
import tickgrid.cursor
import tickgrid.event_emitter
import tickgrid.grid
import tickgrid.length_expression
import tickgrid.mapper
import tickgrid.pattern
import tickgrid.preferences
import tickgrid.results
import tickgrid.session
import tickgrid.tick_space
import tickgrid.tuplet_expression

from tickgrid.constants import TICKS_PER_WHOLE_NOTE
from tickgrid.cursor import Cursor
from tickgrid.grid import GridSpec
from tickgrid.mapper import CoordinateMapper
from tickgrid.pattern import PatternInfo, PatternSize
from tickgrid.results import (
	Accepted,
	Advisory,
	AdvisoryKind,
	InvalidExpression,
	OutOfRange,
	PatternLocked,
)
from tickgrid.session import EditingSession
