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

from .changelog_entry import NEW_FILE_NOTE, REMOVED_FILE_NOTE, ChangelogEntry
from .file_change import ChangeKind, Direction, FileChange, LineRange, Side
from .raw_change import RawChange
from .result import Failed, Ok, Result, Unavailable

__all__ = [
    "ChangeKind",
    "ChangelogEntry",
    "Direction",
    "Failed",
    "FileChange",
    "LineRange",
    "NEW_FILE_NOTE",
    "Ok",
    "RawChange",
    "REMOVED_FILE_NOTE",
    "Result",
    "Side",
    "Unavailable",
]
