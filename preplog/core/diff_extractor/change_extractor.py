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

from loguru import logger

from ..data.file_change import ChangeKind, Direction, FileChange, LineRange, Side
from ..data.result import Failed, Ok, Unavailable
from ..file_reader.protocol import SnapshotReader
from .line_differ import BlockKind, LineDiffer, SequenceLineDiffer, split_lines


class ChangeExtractor:
    """Computes the changed line ranges of a modified file against its ancestor."""

    def __init__(self, reader: SnapshotReader, differ: LineDiffer | None = None):
        self.reader = reader
        self.differ = differ or SequenceLineDiffer()

    def extract(self, file: FileChange) -> FileChange:
        if file.kind is not ChangeKind.MODIFIED or file.working is None:
            return file

        # only local divergence from the common ancestor is described
        if file.direction is not Direction.OUTGOING:
            logger.debug(
                f"Skipping line extraction for {file.path} (direction={file.direction.value})"
            )
            return file

        ancestor = self.reader.read(file.working, old_content=True)
        if isinstance(ancestor, Failed):
            logger.warning(f"Ancestor of {file.path} unavailable: {ancestor.reason}")
            return file

        working = self.reader.read(file.working, old_content=False)
        if not isinstance(working, Ok):
            logger.warning(f"Working copy of {file.path} unavailable: {working.reason}")
            return file

        has_ancestor = isinstance(ancestor, Ok)
        left_lines = split_lines(ancestor.value) if has_ancestor else []
        right_lines = split_lines(working.value)

        ranges: list[LineRange] = []
        try:
            for block in self.differ.find_differences(left_lines, right_lines):
                if block.kind is not BlockKind.CHANGE:
                    continue

                right_length = max(block.right_length, 1)
                ranges.append(
                    LineRange(block.right_start, block.right_start + right_length, Side.NEW)
                )
                # the ancestor side may hold functions that were removed
                if has_ancestor:
                    left_length = max(block.left_length, 1)
                    ranges.append(
                        LineRange(block.left_start, block.left_start + left_length, Side.OLD)
                    )
        except Exception as e:
            logger.warning(
                f"Line extraction for {file.path} stopped after {len(ranges)} ranges: {e}"
            )

        if isinstance(ancestor, Unavailable):
            logger.debug(f"{file.path} has no ancestor, recording working copy ranges only")

        logger.debug(f"Extracted {len(ranges)} ranges from {file.path}")
        extracted = file.with_ranges(ranges)
        return extracted.with_ancestor(file.working) if has_ancestor else extracted
