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

from datetime import date

from ..data.changelog_entry import ChangelogEntry
from ..exceptions import unknown_formatter
from .interface import ChangelogFormatter


class GnuChangelogFormatter:
    """GNU coding standards layout: a date line, then tab-indented starred items."""

    def format_date_line(self, author_name: str, author_email: str, day: date) -> str:
        line = f"{day.isoformat()}  {author_name}".rstrip()
        if author_email:
            line += f"  <{author_email}>"
        return line + "\n"

    def format_entry(self, entry: ChangelogEntry, display_path: str) -> str:
        if entry.default_note:
            return f"\t* {display_path}: {entry.default_note}\n"
        if entry.function_name:
            return f"\t* {display_path} ({entry.function_name}):\n"
        return f"\t* {display_path}:\n"


FORMATTERS: dict[str, type] = {
    "gnu": GnuChangelogFormatter,
}


def get_formatter(preference: str) -> ChangelogFormatter:
    formatter_cls = FORMATTERS.get(preference.lower().strip())
    if formatter_cls is None:
        raise unknown_formatter(preference)
    return formatter_cls()
