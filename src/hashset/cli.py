"""
Command-line interface for hashset.

Small demonstrations of the HashSet type on values passed as arguments.
"""
# typer relies on function calls used as default values
# pyright: reportCallInDefaultInitializer=false

from __future__ import annotations

import logging
from collections.abc import Sequence

import typer
from rich.console import Console

from hashset.dedupe import first_repeated, unique
from hashset.env import env, level_number, parse_log_level
from hashset.hash_set import HashSet
from hashset.helpers import MISSING
from hashset.version import __version__

logger = logging.getLogger(__name__)

cli = typer.Typer(
	name="hashset",
	help="hashset - a set built on a key-presence mapping",
	no_args_is_help=True,
)

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def parse_values(values: Sequence[str], ints: bool) -> list[str] | list[int]:
	if not ints:
		return list(values)
	parsed: list[int] = []
	for raw in values:
		try:
			parsed.append(int(raw))
		except ValueError:
			raise typer.BadParameter(f"not an integer: {raw!r}") from None
	return parsed


def configure_logging(level: str | None) -> None:
	resolved = env.log_level
	if level is not None:
		parsed = parse_log_level(level)
		if parsed is None:
			raise typer.BadParameter(f"unknown log level: {level!r}")
		resolved = parsed
	logging.basicConfig(
		level=level_number(resolved),
		format="%(levelname)s %(name)s: %(message)s",
		force=True,
	)


@cli.callback()
def main_callback(
	log_level: str | None = typer.Option(
		None,
		"--log-level",
		help="Logging level (overrides HASHSET_LOG_LEVEL)",
	),
):
	configure_logging(log_level)


@cli.command("unique")
def unique_cmd(
	values: list[str] = typer.Argument(..., help="Values to load, in order"),
	ints: bool = typer.Option(False, "--ints", help="Parse values as integers"),
):
	"""Print the values with duplicates removed, in first-seen order."""
	for value in unique(parse_values(values, ints)):
		console.print(str(value), markup=False)


@cli.command("first-repeat")
def first_repeat_cmd(
	values: list[str] = typer.Argument(..., help="Values to load, in order"),
	ints: bool = typer.Option(False, "--ints", help="Parse values as integers"),
):
	"""Print the first value that appears twice."""
	parsed = parse_values(values, ints)
	repeated = first_repeated(parsed, default=MISSING)
	if repeated is MISSING:
		err_console.print("[yellow]All values are distinct[/yellow]")
		raise typer.Exit(1)
	console.print(str(repeated), markup=False)


@cli.command("inspect")
def inspect_cmd(
	values: list[str] = typer.Argument(..., help="Values to load, in order"),
	ints: bool = typer.Option(False, "--ints", help="Parse values as integers"),
):
	"""Print the set built from the values."""
	s = HashSet(parse_values(values, ints))
	logger.info("Built set with %d elements from %d values", s.size(), len(values))
	console.print(s.inspect(), markup=False)


@cli.command("version")
def version_cmd():
	"""Print the installed hashset version."""
	console.print(__version__, markup=False)


def main():
	"""Main CLI entry point."""
	try:
		cli()
	except KeyboardInterrupt:
		err_console.print("Interrupted")
		raise SystemExit(130)
	except Exception as e:
		logger.exception("Unhandled error")
		err_console.print(f"[red]Error:[/red] {e}", soft_wrap=True)
		raise SystemExit(1)


if __name__ == "__main__":
	main()
