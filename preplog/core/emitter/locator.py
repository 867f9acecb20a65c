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

from collections.abc import Callable
from pathlib import Path, PurePosixPath

import inquirer
from loguru import logger


def _ask_create(message: str) -> bool:
    return bool(inquirer.confirm(message, default=True))


class ChangelogLocator:
    """
    Finds the ChangeLog an entry belongs to.

    The nearest ChangeLog in the file's directory or one of its parents (up to
    the repository root) wins. Removed files are located the same way, since
    their directory usually still exists. When no ChangeLog exists at all, a
    new one at the repository root is offered once per run.
    """

    def __init__(
        self,
        repo_root: Path,
        changelog_name: str = "ChangeLog",
        auto_accept: bool = False,
        confirm: Callable[[str], bool] = _ask_create,
    ):
        self.repo_root = Path(repo_root)
        self.changelog_name = changelog_name
        self.auto_accept = auto_accept
        self.confirm = confirm
        self._create_at_root: bool | None = None

    def locate(self, rel_path: str) -> Path | None:
        parent = PurePosixPath(rel_path.replace("\\", "/")).parent
        while True:
            candidate = self.repo_root.joinpath(*parent.parts, self.changelog_name)
            if candidate.is_file():
                return candidate
            if parent == parent.parent:
                break
            parent = parent.parent

        return self._fallback(rel_path)

    def _fallback(self, rel_path: str) -> Path | None:
        root_changelog = self.repo_root / self.changelog_name
        if self._create_at_root is None:
            if self.auto_accept:
                self._create_at_root = True
            else:
                self._create_at_root = self.confirm(
                    f"No {self.changelog_name} found for {rel_path}. Create {root_changelog}?"
                )
            logger.debug(f"Create root changelog: {self._create_at_root}")

        return root_changelog if self._create_at_root else None
