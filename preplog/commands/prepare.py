"""
-----------------------------------------------------------------------------
/*
 * Copyright (C) 2025 preplog
 *
 * This program is free software; you can redistribute it and/or modify
 * it under the terms of the GNU General Public License as published by
 * the Free Software Foundation; Version 2.
 *
 * This program is distributed in the hope that it will be useful,
 * but WITHOUT ANY WARRANTY; without even the implied warranty of
 * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
 * GNU General Public License for more details.
 *
 * You should have received a copy of the GNU General Public License
 * along with this program; if not, see <https://www.gnu.org/licenses/>.
 */
-----------------------------------------------------------------------------
"""

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table

from preplog.context import GlobalContext, PrepareContext
from preplog.core.changes.tree_source import load_manifest
from preplog.core.data.changelog_entry import ChangelogEntry
from preplog.core.data.file_change import ChangeKind
from preplog.core.exceptions import handle_preplog_exception
from preplog.core.logging.utils import time_block
from preplog.core.progress.monitor import NullProgressMonitor, RichProgressMonitor
from preplog.core.validation import validate_manifest_path, validate_target_path
from preplog.pipelines.prepare_init import create_prepare_pipeline
from preplog.pipelines.prepare_pipeline import summarize
from preplog.runtimeutil import setup_signal_handlers


def _help_callback(ctx: typer.Context, param, value: bool):
    # Typer/Click help callback: show help and exit when --help is provided
    if not value or ctx.resilient_parsing:
        return
    typer.echo(ctx.get_help())
    raise typer.Exit()


def print_plan(entries: list[ChangelogEntry], console: Console | None = None) -> None:
    console = console or Console()
    table = Table(title="Planned ChangeLog entries")
    table.add_column("File", style="cyan")
    table.add_column("Change")
    table.add_column("Function", style="green")

    for entry in entries:
        table.add_row(
            entry.path,
            entry.file.kind.value,
            entry.default_note or entry.function_name or "-",
        )
    console.print(table)


@handle_preplog_exception
def main(
    ctx: typer.Context,
    help: bool = typer.Option(
        False,
        "--help",
        callback=_help_callback,
        is_eager=True,
        help="Show this message and exit.",
    ),
    target: str | None = typer.Argument(
        None, help="Path to a file or directory to limit the ChangeLog to."
    ),
    manifest: str | None = typer.Option(
        None,
        "--manifest",
        help="Read changes from a JSON change tree instead of git status.",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Show the planned entries without writing any ChangeLog.",
    ),
) -> None:
    """
    Prepares ChangeLog entries for the uncommitted changes of the repository.

    Removed files come first, then new files, then modified files with one
    entry per function touched.

    Examples:
        # Add entries for every change to the nearest ChangeLog files
        preplog prepare

        # Only look at src/, and just show what would be written
        preplog prepare src/ --dry-run
    """
    global_context: GlobalContext = ctx.obj

    prepare_context = PrepareContext(
        target=validate_target_path(target, global_context.repo_path),
        manifest=validate_manifest_path(manifest),
        dry_run=dry_run,
    )

    if prepare_context.manifest is not None:
        raw_changes = load_manifest(prepare_context.manifest)
    else:
        raw_changes = global_context.git_commands.get_raw_changes(prepare_context.target)

    if not raw_changes:
        logger.info("[yellow]No changes found[/yellow]")
        return

    pipeline = create_prepare_pipeline(global_context, dry_run=prepare_context.dry_run)

    monitor = NullProgressMonitor() if global_context.silent else RichProgressMonitor()
    setup_signal_handlers(monitor)

    with time_block("Prepare Command E2E"):
        entries = pipeline.run(raw_changes, monitor)

    if entries is None:
        raise typer.Exit(130)

    if prepare_context.dry_run:
        print_plan(entries)
    elif entries:
        counts = summarize(entries)
        logger.info(
            "[green]Added {count} ChangeLog entries[/green] "
            "(removed={removed}, new={added}, modified={modified} files)",
            count=len(entries),
            removed=counts[ChangeKind.REMOVED],
            added=counts[ChangeKind.ADDED],
            modified=counts[ChangeKind.MODIFIED],
        )
