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

import typer

from preplog.core.exceptions import handle_preplog_exception
from preplog.core.resolver.tree_sitter_resolver import load_language_configs


@handle_preplog_exception
def main() -> None:
    """List the languages whose functions can be named in ChangeLog entries."""
    for name in sorted(load_language_configs()):
        typer.echo(name)
