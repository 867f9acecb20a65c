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

from .commands.git_commands import GitCommands
from .exceptions import ValidationError, not_git_repository, path_not_found


def validate_git_repository(commands: GitCommands) -> None:
    """Fail immediately when not inside a git working tree."""
    if not commands.is_git_repo():
        raise not_git_repository(str(commands.git.repo_path))


def validate_target_path(target: str | None, repo_path: Path) -> str | None:
    """Returns the target as given if it exists on disk, or None for the whole repository."""
    if target is None:
        return None

    target = target.strip()
    if not target:
        raise ValidationError("Target path cannot be empty")

    candidate = Path(target)
    if not candidate.is_absolute():
        candidate = Path(repo_path) / candidate
    if not candidate.exists():
        raise path_not_found(target)
    return target


def validate_manifest_path(manifest: str | None) -> Path | None:
    if manifest is None:
        return None

    path = Path(manifest)
    if not path.is_file():
        raise path_not_found(manifest)
    return path
