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

from pathlib import Path

from loguru import logger

from ..data.result import Failed, Ok, Result, Unavailable
from ..exceptions import ContentUnavailableError
from ..git_interface.interface import GitInterface


class GitFileReader:
    """Reads the ancestor from a git revision and the working copy from disk."""

    def __init__(
        self,
        git: GitInterface,
        repo_path: Path,
        base_revision: str = "HEAD",
        encoding: str = "utf-8",
    ):
        self.git = git
        self.repo_path = Path(repo_path)
        self.base_revision = base_revision
        self.encoding = encoding

    def read(self, handle, old_content: bool = False) -> Result[str]:
        # rel_path should be in posix format for git
        rel_path = str(handle).replace("\\", "/").strip()
        if old_content:
            return self._read_ancestor(rel_path)
        return self._read_working(rel_path)

    def _read_ancestor(self, rel_path: str) -> Result[str]:
        obj = f"{self.base_revision}:{rel_path}"
        data = self.git.run_git_binary_out(["cat-file", "-p", obj])
        if data is None:
            return Unavailable(f"{obj} does not exist")
        return self._decode(data, obj)

    def _read_working(self, rel_path: str) -> Result[str]:
        file_path = self.repo_path / rel_path
        try:
            data = file_path.read_bytes()
        except FileNotFoundError:
            return Unavailable(f"{file_path} does not exist")
        except OSError as e:
            logger.debug(f"Failed to read {file_path}: {e}")
            return Failed(
                f"Could not read {file_path}",
                ContentUnavailableError(f"Could not read {file_path}", str(e)),
            )
        return self._decode(data, str(file_path))

    def _decode(self, data: bytes, source: str) -> Result[str]:
        try:
            return Ok(data.decode(self.encoding))
        except (UnicodeDecodeError, LookupError) as e:
            message = f"Could not decode {source} as {self.encoding}"
            return Failed(message, ContentUnavailableError(message, str(e)))
