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

from collections.abc import Callable, Iterable

from loguru import logger

from ..data.changelog_entry import ChangelogEntry
from ..data.file_change import ChangeKind, FileChange, Side
from ..data.result import Failed, Ok
from ..resolver.document import Document, DocumentSource
from ..resolver.interface import FunctionResolver
from ..resolver.registry import ResolverRegistry


class EntryPlanner:
    """
    Turns ordered file changes into an ordered plan of changelog entries.

    Added and removed files get a single entry with a fixed note. Modified
    files get one entry per distinct function name touched by their ranges,
    in the order the names were first seen.
    """

    def __init__(self, registry: ResolverRegistry, documents: DocumentSource):
        self.registry = registry
        self.documents = documents

    def plan(
        self,
        ordered_files: Iterable[FileChange],
        on_file_planned: Callable[[FileChange], None] | None = None,
    ) -> list[ChangelogEntry]:
        entries: list[ChangelogEntry] = []
        for file in ordered_files:
            entries.extend(self.plan_file(file))
            if on_file_planned is not None:
                on_file_planned(file)
        return entries

    def plan_file(self, file: FileChange) -> list[ChangelogEntry]:
        if file.kind is not ChangeKind.MODIFIED:
            return [ChangelogEntry.for_whole_file(file)]

        names = self.guess_function_names(file)
        if not names:
            return [ChangelogEntry(file)]
        return [ChangelogEntry(file, name) for name in names]

    def guess_function_names(self, file: FileChange) -> list[str]:
        """Unique non-empty function names touched by the file's ranges, first-seen order."""
        if file.kind is not ChangeKind.MODIFIED or not file.ranges:
            return []

        resolver = self.registry.resolver_for(file.path)
        if resolver is None:
            return []

        # dict keeps insertion order, later duplicates keep the first position
        seen: dict[str, None] = {}
        for line_range in file.ranges:
            document = self._document(file, line_range.side)
            if document is None:
                continue

            # both endpoints are inspected
            for line in range(line_range.start, line_range.end + 1):
                if not document.has_line(line):
                    continue
                name = self._resolve(resolver, document, line)
                if name and name not in seen:
                    seen[name] = None

        return list(seen)

    def _document(self, file: FileChange, side: Side) -> Document | None:
        result = self.documents.get(file, side)
        if isinstance(result, Ok):
            return result.value
        if isinstance(result, Failed):
            logger.warning(f"Cannot read {side.value} side of {file.path}: {result.reason}")
        return None

    @staticmethod
    def _resolve(resolver: FunctionResolver, document: Document, line: int) -> str:
        try:
            result = resolver.resolve(document, document.line_offset(line))
        except Exception as e:
            logger.debug(f"Resolver raised on {document.name}:{line}: {e}")
            return ""

        if isinstance(result, Ok):
            return (result.value or "").strip()
        if isinstance(result, Failed):
            logger.debug(f"Resolver failed on {document.name}:{line}: {result.reason}")
        return ""
