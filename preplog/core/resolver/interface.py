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

from typing import Protocol, runtime_checkable

from ..data.result import Result
from .document import Document


@runtime_checkable
class FunctionResolver(Protocol):
    """Maps a position in a document to the name of its enclosing function."""

    def resolve(self, document: Document, line_offset: int) -> Result[str]:
        """
        Args:
            document: The document to look in (working copy or ancestor).
            line_offset: Character offset of the start of the line.

        Returns:
            Ok(name), Unavailable when nothing encloses the position,
            or Failed when the source could not be analysed.
        """
        ...
