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

from ..data.file_change import ChangeKind, Direction
from ..data.raw_change import RawChange
from ..exceptions import GitError
from ..git_interface.interface import GitInterface


class GitCommands:
    def __init__(self, git: GitInterface):
        self.git = git

    # -------------------------------
    # Repository state
    # -------------------------------

    def is_git_repo(self) -> bool:
        out = self.git.run_git_text_out(["rev-parse", "--is-inside-work-tree"])
        return out is not None and out.strip() == "true"

    def get_repo_root(self) -> Path:
        out = self.git.run_git_text_out(["rev-parse", "--show-toplevel"])
        if out is None:
            raise GitError("Could not determine the repository root")
        return Path(out.strip())

    def get_user_config(self, key: str) -> str | None:
        """Read a git config value such as user.name, or None when unset."""
        out = self.git.run_git_text_out(["config", "--get", key])
        if out is None:
            return None
        return out.strip() or None

    # -------------------------------
    # Change detection
    # -------------------------------

    def get_raw_changes(self, target: str | None = None) -> list[RawChange]:
        """
        Lists working tree changes against HEAD (staged, unstaged and untracked).
        """
        path_args = ["--", target] if target else []
        out = self.git.run_git_text_out(
            ["status", "--porcelain=v1", "-z", "--untracked-files=all"] + path_args
        )
        if out is None:
            raise GitError("Failed to read repository status")
        return self._parse_porcelain(out)

    def _parse_porcelain(self, status_output: str) -> list[RawChange]:
        """
        Parses `git status --porcelain=v1 -z` output.

        Records look like "XY path\\0"; renames and copies carry the source
        path as an extra NUL separated field: "R  new\\0old\\0".
        """
        changes: list[RawChange] = []
        fields = status_output.split("\0")
        i = 0
        while i < len(fields):
            record = fields[i]
            i += 1
            if len(record) < 4:
                continue

            code, path = record[:2], record[3:]
            x, y = code[0], code[1]

            if code == "!!":
                continue

            if code == "??":
                changes.append(RawChange(path, ChangeKind.ADDED))
            elif "U" in code or code in ("AA", "DD"):
                changes.append(
                    RawChange(path, ChangeKind.MODIFIED, path, Direction.CONFLICTING)
                )
            elif x in "RC":
                source = fields[i] if i < len(fields) else ""
                i += 1
                if x == "R" and source:
                    changes.append(RawChange(source, ChangeKind.REMOVED))
                changes.append(RawChange(path, ChangeKind.ADDED))
            elif code == "AD":
                # added to the index then deleted again, nothing to report
                continue
            elif "D" in code:
                changes.append(RawChange(path, ChangeKind.REMOVED))
            elif x == "A":
                changes.append(RawChange(path, ChangeKind.ADDED))
            elif "M" in code or "T" in code:
                changes.append(RawChange(path, ChangeKind.MODIFIED, path))
            else:
                logger.debug(f"Ignoring unknown status {code!r} for {path}")

        logger.debug(f"Found {len(changes)} raw changes")
        return changes
