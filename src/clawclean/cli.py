"""CLI interface for Clawclean."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from clawclean.core.executor import Executor
from clawclean.core.measure import measurer_for
from clawclean.core.scanner import TARGET_NAMES, Scanner
from clawclean.models.clean_result import Outcome, RunMode
from clawclean.models.scan_result import Match
from clawclean.settings import Settings

log = logging.getLogger(__name__)

_TARGETS_LINE = f"Targets: {', '.join(TARGET_NAMES)}"


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _resolve_mode(force: bool, dry_run: bool, confirm: bool) -> RunMode:
    """An explicit --dry-run always wins; dry run is also the default."""
    if dry_run:
        return RunMode.DRY_RUN
    if force:
        return RunMode.FORCE
    if confirm:
        return RunMode.CONFIRM
    return RunMode.DRY_RUN


def _split_args(args: tuple[str, ...]) -> tuple[list[str], list[str]]:
    """Split leftover arguments into (positional, unknown_flags)."""
    positional: list[str] = []
    unknown: list[str] = []
    for arg in args:
        if arg.startswith("-"):
            unknown.append(arg)
        else:
            positional.append(arg)
    return positional, unknown


def _build_scanner() -> Scanner:
    method = Settings().measure_method

    def on_match(match: Match) -> None:
        click.echo(".", nl=False)

    return Scanner(measurer=measurer_for(method), on_match=on_match)


@click.command(
    context_settings={"ignore_unknown_options": True, "help_option_names": ["-h", "--help"]},
    epilog=_TARGETS_LINE,
)
@click.option("-f", "--force", is_flag=True, help="Delete without confirmation (implies no dry run)")
@click.option("-n", "--dry-run", is_flag=True, help="Show what would be deleted (default)")
@click.option("-c", "--confirm", is_flag=True, help="Ask before deleting")
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.argument("args", nargs=-1, type=click.UNPROCESSED, metavar="[DIRECTORY]")
@click.pass_context
def main(
    ctx: click.Context,
    force: bool,
    dry_run: bool,
    confirm: bool,
    verbose: int,
    args: tuple[str, ...],
) -> None:
    """Clawclean: find and remove build artifacts and dependency caches.

    Scans DIRECTORY (default: current directory) for junk folders. Nothing
    is deleted unless --force or --confirm is given. Pass "help" to show
    this message.
    """
    _setup_logging(verbose)

    positional, unknown = _split_args(args)
    if "help" in positional:
        click.echo(ctx.get_help())
        ctx.exit(0)

    for flag in unknown:
        click.echo(f"Unknown flag: {flag}", err=True)
        log.debug("Ignoring unknown flag %s", flag)

    root = Path(positional[0]).resolve() if positional else Path.cwd()
    if len(positional) > 1:
        log.info("Ignoring extra arguments: %s", " ".join(positional[1:]))

    mode = _resolve_mode(force, dry_run, confirm)
    log.info("Running in %s mode", mode.value)

    click.echo(f"Scanning {click.format_filename(root)}...")
    result = _build_scanner().scan(root)
    click.echo("\n")

    report = Executor().execute(result, mode)

    if report.outcome is Outcome.DONE and report.failed:
        sys.exit(1)
