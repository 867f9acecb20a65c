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

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any


class ChangeKind(Enum):
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


class Direction(Enum):
    """Which side of a three-way diff diverged from the common ancestor."""

    OUTGOING = "outgoing"  # local change
    INCOMING = "incoming"  # remote update only
    CONFLICTING = "conflicting"


class Side(Enum):
    OLD = "old"  # indexes into the ancestor snapshot
    NEW = "new"  # indexes into the working snapshot


@dataclass(frozen=True)
class LineRange:
    """A half open span [start, end) of changed lines on one side of a diff."""

    start: int
    end: int
    side: Side

    def __post_init__(self):
        if self.end <= self.start:
            object.__setattr__(self, "end", self.start + 1)

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class FileChange:
    """
    One file touched by the change set.

    `ancestor` and `working` are opaque snapshot handles understood by the
    snapshot reader (for git, the repository relative path to read). Ranges
    are only ever kept for modified files.
    """

    path: str
    kind: ChangeKind
    ranges: tuple[LineRange, ...] = ()
    ancestor: Any = None
    working: Any = None
    direction: Direction = Direction.OUTGOING
    resource: Any = field(default=None, compare=False)

    def __post_init__(self):
        if self.kind is not ChangeKind.MODIFIED and self.ranges:
            object.__setattr__(self, "ranges", ())
        elif not isinstance(self.ranges, tuple):
            object.__setattr__(self, "ranges", tuple(self.ranges))

    @property
    def is_new_file(self) -> bool:
        return self.kind is ChangeKind.ADDED

    @property
    def is_removed_file(self) -> bool:
        return self.kind is ChangeKind.REMOVED

    @property
    def has_ancestor(self) -> bool:
        return self.ancestor is not None

    @property
    def file_name(self) -> str:
        return self.path.rsplit("/", 1)[-1]

    def with_ranges(self, ranges) -> "FileChange":
        return replace(self, ranges=tuple(ranges))

    def with_ancestor(self, ancestor) -> "FileChange":
        return replace(self, ancestor=ancestor)

    def old_ranges(self) -> list[LineRange]:
        return [r for r in self.ranges if r.side is Side.OLD]

    def new_ranges(self) -> list[LineRange]:
        return [r for r in self.ranges if r.side is Side.NEW]
