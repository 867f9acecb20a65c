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

from ..data.result import Result
from .protocol import SnapshotReader


class CachingSnapshotReader:
    """Memoizes snapshot reads so extraction and resolution fetch each side once."""

    def __init__(self, reader: SnapshotReader):
        self.reader = reader
        self._cache: dict[tuple[str, bool], Result[str]] = {}

    def read(self, handle, old_content: bool = False) -> Result[str]:
        key = (str(handle), old_content)
        if key not in self._cache:
            self._cache[key] = self.reader.read(handle, old_content=old_content)
        return self._cache[key]

    def clear(self) -> None:
        self._cache.clear()
