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
from unittest.mock import Mock

import pytest

from preplog.core.data import ChangeKind, ChangelogEntry, FileChange
from preplog.core.emitter.file_emitter import FileChangelogEmitter
from preplog.core.emitter.formatters import GnuChangelogFormatter, get_formatter
from preplog.core.emitter.locator import ChangelogLocator
from preplog.core.exceptions import ConfigurationError, FileSystemError

DAY = date(2024, 3, 1)


def entry(path, kind=ChangeKind.MODIFIED, name=""):
    file = FileChange(path, kind)
    if kind is ChangeKind.MODIFIED:
        return ChangelogEntry(file, name)
    return ChangelogEntry.for_whole_file(file)


# -----------------------------------------------------------------------------
# formatter
# -----------------------------------------------------------------------------


def test_gnu_date_line():
    line = GnuChangelogFormatter().format_date_line("Ada", "ada@example.org", DAY)
    assert line == "2024-03-01  Ada  <ada@example.org>\n"


def test_gnu_date_line_without_email():
    assert GnuChangelogFormatter().format_date_line("Ada", "", DAY) == "2024-03-01  Ada\n"


def test_gnu_entries():
    fmt = GnuChangelogFormatter()

    assert fmt.format_entry(entry("a.c", name="foo"), "a.c") == "\t* a.c (foo):\n"
    assert fmt.format_entry(entry("a.c"), "a.c") == "\t* a.c:\n"
    assert fmt.format_entry(entry("n.c", ChangeKind.ADDED), "n.c") == "\t* n.c: New file.\n"


def test_note_replaces_function_name():
    file = FileChange("r.c", ChangeKind.REMOVED)
    noted = ChangelogEntry(file, "ignored", "Removed file.")

    assert GnuChangelogFormatter().format_entry(noted, "r.c") == "\t* r.c: Removed file.\n"


def test_get_formatter():
    assert isinstance(get_formatter(" GNU "), GnuChangelogFormatter)
    with pytest.raises(ConfigurationError):
        get_formatter("keepachangelog")


# -----------------------------------------------------------------------------
# locator
# -----------------------------------------------------------------------------


def test_locator_prefers_nearest_changelog(tmp_path):
    (tmp_path / "ChangeLog").write_text("")
    (tmp_path / "lib").mkdir()
    (tmp_path / "lib" / "ChangeLog").write_text("")
    (tmp_path / "lib" / "sub").mkdir()
    locator = ChangelogLocator(tmp_path)

    assert locator.locate("lib/sub/x.c") == tmp_path / "lib" / "ChangeLog"
    assert locator.locate("src/y.c") == tmp_path / "ChangeLog"
    assert locator.locate("z.c") == tmp_path / "ChangeLog"


def test_locator_asks_once_to_create_root_changelog(tmp_path):
    confirm = Mock(return_value=True)
    locator = ChangelogLocator(tmp_path, confirm=confirm)

    assert locator.locate("a.c") == tmp_path / "ChangeLog"
    assert locator.locate("b/c.c") == tmp_path / "ChangeLog"
    confirm.assert_called_once()


def test_locator_declined(tmp_path):
    locator = ChangelogLocator(tmp_path, confirm=Mock(return_value=False))

    assert locator.locate("a.c") is None


def test_locator_auto_accept_never_asks(tmp_path):
    confirm = Mock()
    locator = ChangelogLocator(tmp_path, auto_accept=True, confirm=confirm)

    assert locator.locate("a.c") == tmp_path / "ChangeLog"
    confirm.assert_not_called()


# -----------------------------------------------------------------------------
# file emitter
# -----------------------------------------------------------------------------


def make_emitter(tmp_path, **locator_kwargs):
    locator = ChangelogLocator(tmp_path, **locator_kwargs)
    return FileChangelogEmitter(locator, GnuChangelogFormatter(), today=lambda: DAY)


def test_emit_prepends_block_in_plan_order(tmp_path):
    changelog = tmp_path / "ChangeLog"
    changelog.write_text("2023-01-01  Old  <old@example.org>\n\n\t* old.c:\n")
    emitter = make_emitter(tmp_path)
    plan = [
        entry("gone.c", ChangeKind.REMOVED),
        entry("src/new.c", ChangeKind.ADDED),
        entry("src/a.c", name="foo"),
        entry("src/a.c", name="bar"),
    ]

    written = emitter.emit(plan, "Ada", "ada@example.org")

    assert written == [changelog]
    assert changelog.read_text() == (
        "2024-03-01  Ada  <ada@example.org>\n"
        "\n"
        "\t* gone.c: Removed file.\n"
        "\t* src/new.c: New file.\n"
        "\t* src/a.c (foo):\n"
        "\t* src/a.c (bar):\n"
        "\n"
        "2023-01-01  Old  <old@example.org>\n\n\t* old.c:\n"
    )


def test_emit_splits_entries_per_changelog(tmp_path):
    (tmp_path / "ChangeLog").write_text("")
    (tmp_path / "lib").mkdir()
    (tmp_path / "lib" / "ChangeLog").write_text("")
    emitter = make_emitter(tmp_path)

    written = emitter.emit(
        [entry("lib/x.c", name="f"), entry("top.c")], "Ada", ""
    )

    assert written == [tmp_path / "lib" / "ChangeLog", tmp_path / "ChangeLog"]
    assert "\t* x.c (f):\n" in (tmp_path / "lib" / "ChangeLog").read_text()
    assert "\t* top.c:\n" in (tmp_path / "ChangeLog").read_text()


def test_emit_creates_root_changelog_when_accepted(tmp_path):
    emitter = make_emitter(tmp_path, auto_accept=True)

    emitter.emit([entry("a.c", ChangeKind.ADDED)], "Ada", "ada@example.org")

    assert (tmp_path / "ChangeLog").read_text().startswith("2024-03-01  Ada")


def test_emit_drops_entries_without_target(tmp_path):
    emitter = make_emitter(tmp_path, confirm=Mock(return_value=False))

    assert emitter.emit([entry("a.c")], "Ada", "") == []
    assert not (tmp_path / "ChangeLog").exists()


def test_empty_plan_writes_nothing(tmp_path):
    emitter = make_emitter(tmp_path, auto_accept=True)

    assert emitter.emit([], "Ada", "") == []
    assert not (tmp_path / "ChangeLog").exists()


def test_write_failure_raises_filesystem_error(tmp_path):
    # a directory in place of the ChangeLog file cannot be written
    (tmp_path / "lib").mkdir()
    (tmp_path / "lib" / "ChangeLog").mkdir()
    locator = Mock(repo_root=tmp_path)
    locator.locate.return_value = tmp_path / "lib" / "ChangeLog"
    emitter = FileChangelogEmitter(locator, GnuChangelogFormatter(), today=lambda: DAY)

    with pytest.raises(FileSystemError):
        emitter.emit([entry("lib/x.c")], "Ada", "")
