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

from collections.abc import Iterable
from dataclasses import dataclass, field

from loguru import logger

from preplog.constants import DEFAULT_CHANGELOG_NAME

from ..data.file_change import ChangeKind, FileChange
from ..data.raw_change import RawChange


@dataclass(frozen=True)
class OrderedGroups:
    """Classified changes, each group sorted by path."""

    removed: list[FileChange] = field(default_factory=list)
    added: list[FileChange] = field(default_factory=list)
    modified: list[FileChange] = field(default_factory=list)

    def ordered(self) -> list[FileChange]:
        """Removed files, then new files, then modified files."""
        return [*self.removed, *self.added, *self.modified]

    def is_empty(self) -> bool:
        return not (self.removed or self.added or self.modified)

    def __len__(self) -> int:
        return len(self.removed) + len(self.added) + len(self.modified)


def path_sort_key(path: str) -> tuple[tuple[str, ...], str]:
    """Order by path segments, falling back to the full string on ties."""
    normalized = path.replace("\\", "/")
    return tuple(s for s in normalized.split("/") if s), normalized


class DiffClassifier:
    """Partitions raw change notifications into ordered removed/added/modified groups."""

    def __init__(self, changelog_name: str = DEFAULT_CHANGELOG_NAME):
        self.changelog_name = changelog_name

    def classify(self, raw_changes: Iterable[RawChange]) -> OrderedGroups:
        buckets: dict[ChangeKind, list[FileChange]] = {
            ChangeKind.REMOVED: [],
            ChangeKind.ADDED: [],
            ChangeKind.MODIFIED: [],
        }

        for raw in raw_changes:
            # never report on our own output file
            if raw.file_name == self.changelog_name:
                logger.debug(f"Skipping changelog file {raw.path}")
                continue

            path = raw.path.replace("\\", "/")
            if raw.kind is ChangeKind.MODIFIED:
                change = FileChange(
                    path=path,
                    kind=raw.kind,
                    working=raw.resource,
                    direction=raw.direction,
                    resource=raw.resource,
                )
            else:
                change = FileChange(path=path, kind=raw.kind)

            buckets[raw.kind].append(change)

        for bucket in buckets.values():
            bucket.sort(key=lambda c: path_sort_key(c.path))

        groups = OrderedGroups(
            removed=buckets[ChangeKind.REMOVED],
            added=buckets[ChangeKind.ADDED],
            modified=buckets[ChangeKind.MODIFIED],
        )

        logger.debug(
            "Classified changes: removed={removed} added={added} modified={modified}",
            removed=len(groups.removed),
            added=len(groups.added),
            modified=len(groups.modified),
        )
        return groups
