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

from collections.abc import Sequence
from datetime import date
from pathlib import Path
from typing import Protocol

from ..data.changelog_entry import ChangelogEntry


class ChangelogFormatter(Protocol):
    """Owns the literal text layout of a ChangeLog block."""

    def format_date_line(self, author_name: str, author_email: str, day: date) -> str: ...

    def format_entry(self, entry: ChangelogEntry, display_path: str) -> str: ...


class ChangelogEmitter(Protocol):
    """
    Consumes an ordered entry plan and writes it out.

    Implementations must keep the plan order, and an entry's default note
    replaces any function-name text. Write failures are raised to the caller.
    """

    def emit(
        self,
        entries: Sequence[ChangelogEntry],
        author_name: str,
        author_email: str,
    ) -> list[Path]: ...
