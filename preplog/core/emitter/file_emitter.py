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

import os
from collections.abc import Callable, Sequence
from datetime import date
from pathlib import Path

from loguru import logger

from ..data.changelog_entry import ChangelogEntry
from ..exceptions import FileSystemError, no_changelog_target
from .interface import ChangelogFormatter
from .locator import ChangelogLocator


class FileChangelogEmitter:
    """Prepends one dated block per ChangeLog file touched by the plan."""

    def __init__(
        self,
        locator: ChangelogLocator,
        formatter: ChangelogFormatter,
        encoding: str = "utf-8",
        today: Callable[[], date] = date.today,
    ):
        self.locator = locator
        self.formatter = formatter
        self.encoding = encoding
        self.today = today

    def group_by_target(
        self, entries: Sequence[ChangelogEntry]
    ) -> dict[Path, list[ChangelogEntry]]:
        """Entries per ChangeLog, in plan order. Entries with no target are dropped."""
        targets: dict[str, Path | None] = {}
        grouped: dict[Path, list[ChangelogEntry]] = {}

        for entry in entries:
            if entry.path not in targets:
                targets[entry.path] = self.locator.locate(entry.path)
                if targets[entry.path] is None:
                    err = no_changelog_target(entry.path)
                    logger.error(f"{err.message}. {err.details}")

            target = targets[entry.path]
            if target is not None:
                grouped.setdefault(target, []).append(entry)

        return grouped

    def render_block(
        self,
        target: Path,
        entries: Sequence[ChangelogEntry],
        author_name: str,
        author_email: str,
    ) -> str:
        lines = [self.formatter.format_date_line(author_name, author_email, self.today()), "\n"]
        for entry in entries:
            lines.append(self.formatter.format_entry(entry, self._display_path(target, entry)))
        lines.append("\n")
        return "".join(lines)

    def emit(
        self,
        entries: Sequence[ChangelogEntry],
        author_name: str,
        author_email: str,
    ) -> list[Path]:
        written = []
        for target, target_entries in self.group_by_target(entries).items():
            block = self.render_block(target, target_entries, author_name, author_email)
            self._prepend(target, block)
            logger.info(f"Wrote {len(target_entries)} entries to {target}")
            written.append(target)
        return written

    def _display_path(self, target: Path, entry: ChangelogEntry) -> str:
        repo_root = self.locator.repo_root
        file_path = repo_root / entry.path
        return Path(os.path.relpath(file_path, target.parent)).as_posix()

    def _prepend(self, target: Path, block: str) -> None:
        try:
            existing = target.read_text(encoding=self.encoding) if target.exists() else ""
            target.write_text(block + existing, encoding=self.encoding)
        except (OSError, UnicodeError) as e:
            raise FileSystemError(f"Failed to write {target}", str(e)) from e
