import logging

import tickgrid
import tickgrid.event_emitter
import tickgrid.preferences

logging.basicConfig(level=logging.INFO)

PREFERENCES_FILE = "tickgrid.yaml"

preferences = tickgrid.preferences.load(PREFERENCES_FILE)

pattern = tickgrid.PatternInfo("drums")
session = tickgrid.EditingSession(pattern, preferences)

# Views redraw from events; here we just print them.
session.events.on(tickgrid.event_emitter.CURSOR_MOVED, lambda index, tick: print(f"cursor: mark {index}, tick {tick}"))
session.events.on(tickgrid.event_emitter.ADVISORY, lambda advisory: print(f"note: {advisory.message}"))

# 1/16 triplets from the grid menu, then a seven-eighths pattern.
session.select_grid_menu(8)
print(f"grid: {session.grid.granularity():.3f} ticks per mark, tuplet {session.tuplet_text}")

session.apply_length_text("7/8")
print(f"size: {session.length_text} ({pattern.length} ticks)")

# Walk the cursor to the end of the pattern.
while session.cursor.index != session.move_cursor_right():
	pass

# Quintuplets without an explicit denominator: "5" means 5:4.
session.apply_tuplet_text("5")
print(f"grid: {session.grid.granularity():.3f} ticks per mark, tuplet {session.tuplet_text}")

# A click 200 pixels in, snapped and fine-grained.
print(f"click at 200px: tick {session.mapper.to_column(200)} (fine: {session.mapper.to_column(200, fine_grained=True)})")

# Sizes outside the tick timeline are kept, with a notice.
session.apply_length_text("3/5")

tickgrid.preferences.save(preferences, PREFERENCES_FILE)
