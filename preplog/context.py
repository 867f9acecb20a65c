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

from dataclasses import dataclass, fields
from pathlib import Path

from preplog.constants import (
    DEFAULT_CHANGELOG_NAME,
    DEFAULT_ENCODING,
    DEFAULT_FORMATTER,
)
from preplog.core.commands.git_commands import GitCommands
from preplog.core.git_interface.interface import GitInterface
from preplog.core.git_interface.SubprocessGitInterface import (
    SubprocessGitInterface,
)


@dataclass
class GlobalConfig:
    author_name: str | None = None
    author_email: str | None = None
    formatter: str = DEFAULT_FORMATTER
    changelog_name: str = DEFAULT_CHANGELOG_NAME
    encoding: str = DEFAULT_ENCODING
    auto_accept: bool = False
    verbose: bool = False
    silent: bool = False

    descriptions = {
        "author_name": "Author name for the ChangeLog date line (defaults to git user.name)",
        "author_email": "Author email for the ChangeLog date line (defaults to git user.email)",
        "formatter": "ChangeLog formatter to use",
        "changelog_name": "File name of ChangeLog files",
        "encoding": "Text encoding used to read sources and write ChangeLogs",
        "auto_accept": "Create missing ChangeLogs without asking",
        "verbose": "Show debug output",
        "silent": "Only show errors",
    }

    @classmethod
    def get_cli_params(cls) -> dict[str, tuple[type, object]]:
        """Every field as an optional CLI override: name -> (type, default None)."""
        params = {}
        for f in fields(cls):
            base = bool if f.type in (bool, "bool") else str
            params[f.name] = (base | None, None)
        return params


@dataclass(frozen=True)
class GlobalContext:
    repo_path: Path
    git_interface: GitInterface
    git_commands: GitCommands
    author_name: str
    author_email: str
    formatter: str
    changelog_name: str
    encoding: str
    auto_accept: bool
    verbose: bool
    silent: bool

    @classmethod
    def from_global_config(cls, config: GlobalConfig, repo_path: Path):
        git_interface = SubprocessGitInterface(repo_path)
        git_commands = GitCommands(git_interface)

        author_name = config.author_name or git_commands.get_user_config("user.name") or ""
        author_email = (
            config.author_email or git_commands.get_user_config("user.email") or ""
        )

        return GlobalContext(
            repo_path,
            git_interface,
            git_commands,
            author_name,
            author_email,
            config.formatter,
            config.changelog_name,
            config.encoding,
            config.auto_accept,
            config.verbose,
            config.silent,
        )


@dataclass(frozen=True)
class PrepareContext:
    target: str | None = None
    manifest: Path | None = None
    dry_run: bool = False
