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

from typing import Protocol

from ..data.result import Result


class SnapshotReader(Protocol):
    """An interface for reading the two sides of a changed file."""

    def read(self, handle, old_content: bool = False) -> Result[str]:
        """
        Reads the content of a file snapshot.

        Args:
            handle: The snapshot handle, usually the repository relative path.
            old_content: If True, read the ancestor version of the file.
                         If False, read the working copy.

        Returns:
            Ok(text) on success, Unavailable if that side does not exist
            (e.g. the ancestor of a brand new file), or Failed when the
            content could not be fetched or decoded.
        """
        ...
