# pathfile src/cli.py
import logging
from pathlib import Path
from typing import List, Optional

import typer

from adlistctl.blocker.config import ADLISTS_PATH, BACKUP_DIR, LOG_LEVEL
from adlistctl.errors import AdlistError
from adlistctl.gravity import trigger_reload
from adlistctl.runner import Settings, apply_changes, list_urls, restore

# Single-command typer app: the options below are the whole interface, e.g.
# adlistctl --add https://example.com/hosts --remove https://old.example/list

MANUAL = """\
ADLISTCTL(1)

NAME
    adlistctl - enable and disable Pi-hole blocklist sources

SYNOPSIS
    adlistctl [--add URL]... [--remove URL]... [--file PATH] [--no-refresh]
              [--backup] [--list] [--verbose]
    adlistctl --restore [--file PATH]
    adlistctl --man | --help

DESCRIPTION
    Edits the list of upstream blocklist URLs (one per line) and rebuilds
    the gravity database afterwards with `pihole -g`.

    Entries are never deleted. Removing a URL comments its line out with
    "# "; adding a URL that is commented out uncomments it in place. A URL
    that does not appear at all is appended to the end of the file. Every
    other line is left exactly as it was.

    URLs are matched literally and case-insensitively against the start of
    each line. All adds are applied before all removes, each group in the
    order given.

OPTIONS
    -a, --add URL       enable URL (repeatable)
    -r, --remove URL    disable URL (repeatable)
    -f, --file PATH     adlists file (default: /etc/pihole/adlists.list,
                        or $ADLISTS_PATH)
    -l, --list          print every source with its state
    --no-refresh        save the file without running `pihole -g`
    --backup            copy the file to the backup directory before saving
    --backup-dir PATH   backup directory (default: ~/.adlistctl_backups,
                        or $ADLISTCTL_BACKUP_DIR)
    --restore           copy the newest backup back in place and refresh
    -v, --verbose       debug logging
    --man               show this page

ENVIRONMENT
    ADLISTS_PATH, PIHOLE_BIN, ADLISTCTL_BACKUP_DIR, ADLISTCTL_LOG_LEVEL.
    Values are also read from a .env file in the working directory.

EXIT STATUS
    0 on success, 1 when the list file cannot be read or written or the
    refresh command cannot be started, 2 on usage errors.
"""

cli = typer.Typer(add_completion=False)


@cli.command()
def main(
    ctx: typer.Context,
    add: Optional[List[str]] = typer.Option(None, "--add", "-a", help="URL to enable (repeatable)."),
    remove: Optional[List[str]] = typer.Option(None, "--remove", "-r", help="URL to disable (repeatable)."),
    file: Path = typer.Option(ADLISTS_PATH, "--file", "-f", help="Adlists file to edit."),
    show: bool = typer.Option(False, "--list", "-l", help="Print every source with its state."),
    refresh: bool = typer.Option(True, "--refresh/--no-refresh", help="Rebuild gravity after saving."),
    backup: bool = typer.Option(False, "--backup", help="Back up the file before saving."),
    backup_dir: Path = typer.Option(BACKUP_DIR, "--backup-dir", help="Where backups are kept."),
    restore_backup: bool = typer.Option(False, "--restore", help="Restore the newest backup and refresh."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging."),
    man: bool = typer.Option(False, "--man", help="Show the full manual page."),
):
    """Enable or disable Pi-hole blocklist sources, then refresh gravity."""
    if man:
        typer.echo(MANUAL)
        raise typer.Exit()

    level = logging.getLevelName(LOG_LEVEL)
    if not isinstance(level, int):
        raise typer.BadParameter(f"unknown log level {LOG_LEVEL!r} in ADLISTCTL_LOG_LEVEL")

    logging.basicConfig(
        level=logging.DEBUG if verbose else level,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    settings = Settings(
        list_path=file, add=add or [], remove=remove or [], refresh=refresh, backup=backup,
        backup_dir=backup_dir,
    )

    if restore_backup:
        if settings.add or settings.remove:
            raise typer.BadParameter("--restore cannot be combined with --add or --remove")
        _run_restore(settings)
        return

    if not settings.add and not settings.remove and not show:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=2)

    try:
        if settings.add or settings.remove:
            report = apply_changes(settings, reload=trigger_reload)
            for change in report.changes:
                typer.echo(f"{change.url}: {change.outcome.value}")
            if report.refresh_output:
                typer.echo(report.refresh_output, nl=False)
        if show:
            for url, enabled in list_urls(settings):
                typer.echo(f"{'enabled' if enabled else 'disabled':<9} {url}")
    except AdlistError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _run_restore(settings: Settings):
    try:
        report = restore(settings, reload=trigger_reload)
    except AdlistError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if report is None:
        typer.echo(f"Error: no backup found in {settings.backup_dir}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Restored {settings.list_path} from {report.backup_path}")
    if report.refresh_output:
        typer.echo(report.refresh_output, nl=False)


if __name__ == "__main__":
    cli()
