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
from typing import Any

from .file_change import ChangeKind, Direction


@dataclass(frozen=True)
class RawChange:
    """
    An unclassified change notification from a change-detection source.

    `resource` is whatever handle the snapshot reader needs to fetch the
    file's old/new text; it is only meaningful for modified files.
    """

    path: str
    kind: ChangeKind
    resource: Any = None
    direction: Direction = Direction.OUTGOING

    @property
    def file_name(self) -> str:
        return self.path.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]
