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

from dataclasses import dataclass

from .file_change import ChangeKind, FileChange

NEW_FILE_NOTE = "New file."
REMOVED_FILE_NOTE = "Removed file."


@dataclass(frozen=True)
class ChangelogEntry:
    """One line item of a ChangeLog block."""

    file: FileChange
    function_name: str = ""
    default_note: str | None = None

    @property
    def path(self) -> str:
        return self.file.path

    @property
    def is_unnamed(self) -> bool:
        return not self.function_name

    @classmethod
    def for_whole_file(cls, file: FileChange) -> "ChangelogEntry":
        """Entry for an added/removed file, carrying the fixed note."""
        if file.kind is ChangeKind.ADDED:
            return cls(file, "", NEW_FILE_NOTE)
        if file.kind is ChangeKind.REMOVED:
            return cls(file, "", REMOVED_FILE_NOTE)
        return cls(file)
