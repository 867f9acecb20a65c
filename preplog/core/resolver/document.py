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

from bisect import bisect_right

from ..data.file_change import FileChange, Side
from ..data.result import Ok, Result, Unavailable
from ..file_reader.protocol import SnapshotReader


class Document:
    """
    Read-only text with line bookkeeping.

    A document has one more line than it has line delimiters, so text ending
    in a newline has a trailing empty line.
    """

    def __init__(self, name: str, text: str, side: Side = Side.NEW):
        self.name = name
        self.text = text
        self.side = side
        self._line_offsets = [0]
        for i, ch in enumerate(text):
            if ch == "\n":
                self._line_offsets.append(i + 1)

    @property
    def number_of_lines(self) -> int:
        return len(self._line_offsets)

    def has_line(self, line: int) -> bool:
        return 0 <= line < self.number_of_lines

    def line_offset(self, line: int) -> int:
        if not self.has_line(line):
            raise IndexError(f"line {line} out of range for {self.name}")
        return self._line_offsets[line]

    def line_of_offset(self, offset: int) -> int:
        if offset < 0 or offset > len(self.text):
            raise IndexError(f"offset {offset} out of range for {self.name}")
        return bisect_right(self._line_offsets, offset) - 1

    def line_text(self, line: int) -> str:
        start = self.line_offset(line)
        end = self._line_offsets[line + 1] if line + 1 < self.number_of_lines else len(self.text)
        return self.text[start:end].rstrip("\r\n")

    def __repr__(self) -> str:
        return f"Document({self.name!r}, side={self.side.value}, lines={self.number_of_lines})"


class DocumentSource:
    """Builds one document per (file, side), reading snapshots on demand."""

    def __init__(self, reader: SnapshotReader):
        self.reader = reader
        self._documents: dict[tuple[str, Side], Result[Document]] = {}

    def get(self, file: FileChange, side: Side) -> Result[Document]:
        key = (file.path, side)
        if key in self._documents:
            return self._documents[key]

        handle = file.ancestor if side is Side.OLD else file.working
        if handle is None:
            result = Unavailable(f"{file.path} has no {side.value} snapshot")
        else:
            text = self.reader.read(handle, old_content=side is Side.OLD)
            result = Ok(Document(file.path, text.value, side)) if isinstance(text, Ok) else text

        self._documents[key] = result
        return result
