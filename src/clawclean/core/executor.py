"""Reports scan results and deletes matches according to the run mode."""

from __future__ import annotations

import logging
import shutil
from typing import Callable

import click

from clawclean.models.clean_result import CleanReport, Outcome, RunMode
from clawclean.models.scan_result import Match, ScanResult
from clawclean.utils import bytes_to_human, relative_display

log = logging.getLogger(__name__)

ConfirmCallback = Callable[[str], bool]

CONFIRM_MESSAGE = "Delete these folders?"


def prompt_confirm(message: str) -> bool:
    """Ask a yes/no question on the terminal.

    "y" and "yes" are accepted in any case and with surrounding whitespace.
    Anything else, including end of input, is a no.
    """
    try:
        answer = click.prompt(f"{message} [y/N]", default="", show_default=False)
    except click.exceptions.Abort:
        click.echo()
        return False
    return answer.strip().lower() in ("y", "yes")


class Executor:
    """Runs the report/confirm/delete sequence over a scan result.

    Output goes through ``click.echo``. The confirmation step is delegated
    to *confirm* so it can be scripted.
    """

    def __init__(self, confirm: ConfirmCallback = prompt_confirm) -> None:
        self.confirm = confirm

    def execute(self, result: ScanResult, mode: RunMode) -> CleanReport:
        """Report *result* and, depending on *mode*, delete its matches.

        Deletions happen in discovery order. A failure on one match is
        recorded and does not stop the others.
        """
        if not result:
            click.echo("✨ Clean! No junk found.")
            return CleanReport(outcome=Outcome.CLEAN)

        total = result.total_bytes
        self._print_listing(result, total)

        if mode is RunMode.DRY_RUN:
            click.echo("\nDry run complete. Use --force to delete.")
            return CleanReport(outcome=Outcome.REPORTED_ONLY)

        if mode is RunMode.CONFIRM and not self.confirm(CONFIRM_MESSAGE):
            click.echo("Aborted.")
            return CleanReport(outcome=Outcome.ABORTED)

        report = CleanReport(outcome=Outcome.DONE, reclaimed_bytes=total)
        click.echo("\nDeleting...")
        for match in result:
            self._delete(match, report)

        click.echo(f"\n✨ Done! Reclaimed {bytes_to_human(total)}.")
        if report.failed:
            click.echo(f"{len(report.failed)} folder(s) could not be deleted.", err=True)
        return report

    @staticmethod
    def _print_listing(result: ScanResult, total: int) -> None:
        click.echo("Found junk:")
        for match in result:
            size_str = bytes_to_human(match.size_bytes)
            click.echo(f"  {size_str:<10} {relative_display(match.path, result.root)}")
        click.echo(f"\nTotal reclaimable: {click.style(bytes_to_human(total), fg='green', bold=True)}")

    @staticmethod
    def _delete(match: Match, report: CleanReport) -> None:
        try:
            shutil.rmtree(match.path)
        except OSError as e:
            reason = e.strerror or str(e)
            log.warning("Failed to delete %s: %s", match.path, reason)
            report.failed.append((match.path, reason))
            click.echo(f"❌ Failed to delete {click.format_filename(match.path)}: {reason}", err=True)
            return
        report.deleted.append(match.path)
        click.echo(f"🗑️  Deleted {click.format_filename(match.path, shorten=True)}")
