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
from difflib import SequenceMatcher
from enum import Enum
from typing import Protocol


class BlockKind(Enum):
    CHANGE = "change"
    NOCHANGE = "nochange"


@dataclass(frozen=True)
class DiffBlock:
    """A block reported by a line differencer, in zero based line coordinates."""

    kind: BlockKind
    left_start: int
    left_length: int
    right_start: int
    right_length: int


class LineDiffer(Protocol):
    def find_differences(
        self, left_lines: list[str], right_lines: list[str]
    ) -> list[DiffBlock]: ...


class SequenceLineDiffer:
    """
    Two-way line differ built on difflib's longest matching block search.

    Every non-equal opcode (replace, insert, delete) is reported as a CHANGE
    block; pure insertions and deletions simply have a zero length side.
    """

    def __init__(self, autojunk: bool = False):
        self.autojunk = autojunk

    def find_differences(
        self, left_lines: list[str], right_lines: list[str]
    ) -> list[DiffBlock]:
        matcher = SequenceMatcher(None, left_lines, right_lines, autojunk=self.autojunk)
        blocks = []
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                continue
            blocks.append(DiffBlock(BlockKind.CHANGE, i1, i2 - i1, j1, j2 - j1))
        return blocks


def split_lines(text: str) -> list[str]:
    """
    Split text into lines without their terminators.

    Lines break at ``\\n`` only, the same as ``Document`` counts them, so line
    numbers agree across form feeds and other characters ``str.splitlines``
    treats as breaks. A final newline does not open another line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]
