"""Command line access to the pattern size and tuplet parsers.

	python -m tickgrid length 3/8
	python -m tickgrid length 5 --denominator 8
	python -m tickgrid tuplet 5
	python -m tickgrid grid --menu 8
"""

import argparse
import logging
import sys
import typing

import tickgrid.grid
import tickgrid.length_expression
import tickgrid.preferences
import tickgrid.results
import tickgrid.tuplet_expression


logger = logging.getLogger(__name__)


def _report (result: tickgrid.results.ParseResult, describe: typing.Callable[[typing.Tuple[int, int]], str]) -> int:

	"""Print a parse result and return the exit status."""

	if not isinstance(result, tickgrid.results.Accepted):
		print(f"Rejected: {result.message}")
		return 1

	print(describe(result.value))

	for advisory in result.advisories:
		print(f"Note: {advisory.message}")

	return 0


def _length (args: argparse.Namespace) -> int:

	result = tickgrid.length_expression.parse(args.expression, current_denominator=args.denominator)

	return _report(result, lambda value: f"{tickgrid.length_expression.format_size(*value)} = {value[0]} ticks")


def _tuplet (args: argparse.Namespace) -> int:

	result = tickgrid.tuplet_expression.parse(args.expression)

	return _report(result, lambda value: f"tuplet {tickgrid.grid.format_tuplet(*value)}")


def _grid (args: argparse.Namespace) -> int:

	try:
		preferences = tickgrid.preferences.load(args.preferences)
	except tickgrid.preferences.PreferencesError as exc:
		print(f"Rejected: {exc}")
		return 1

	grid = preferences.grid()

	if args.menu is not None:
		try:
			entry = tickgrid.grid.apply_menu_entry(grid, args.menu)
		except IndexError as exc:
			print(f"Rejected: {exc}")
			return 1
		print(f"grid: {entry.label}")

	print(f"resolution {grid.resolution}, tuplet {grid.tuplet_text}")
	print(f"granularity {grid.granularity():.4f} ticks, {grid.marks_per_whole_note()} marks per whole note")

	if args.save:
		preferences.store_grid(grid)
		tickgrid.preferences.save(preferences, args.preferences)

	return 0


def main (argv: typing.Optional[typing.List[str]] = None) -> int:

	"""
	Main entry point for the tickgrid command line.
	"""

	parser = argparse.ArgumentParser(prog="tickgrid", description="Pattern grid arithmetic on a 192 ticks-per-whole-note timeline")
	parser.add_argument("--verbose", action="store_true", help="Log debug output")
	commands = parser.add_subparsers(dest="command", required=True)

	length_parser = commands.add_parser("length", help="Parse a pattern size such as 3/8")
	length_parser.add_argument("expression")
	length_parser.add_argument("--denominator", type=int, default=4, help="Current pattern denominator (default: 4)")
	length_parser.set_defaults(handler=_length)

	tuplet_parser = commands.add_parser("tuplet", help="Parse a tuplet ratio such as 5:4")
	tuplet_parser.add_argument("expression")
	tuplet_parser.set_defaults(handler=_tuplet)

	grid_parser = commands.add_parser("grid", help="Show the grid stored in the preferences")
	grid_parser.add_argument("--preferences", default="tickgrid.yaml", help="Preferences file (default: tickgrid.yaml)")
	grid_parser.add_argument("--menu", type=int, help="Apply a grid menu entry by index")
	grid_parser.add_argument("--save", action="store_true", help="Write the resulting grid back to the preferences")
	grid_parser.set_defaults(handler=_grid)

	args = parser.parse_args(argv)

	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
	logger.debug(f"Running {args.command} command")

	return args.handler(args)


if __name__ == "__main__":
	sys.exit(main())
