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

from unittest.mock import Mock

import pytest

from preplog.core.data import (
    NEW_FILE_NOTE,
    REMOVED_FILE_NOTE,
    ChangeKind,
    ChangelogEntry,
    FileChange,
    LineRange,
    Side,
)
from preplog.core.data.result import Failed, Ok, Unavailable
from preplog.core.planner.entry_planner import EntryPlanner
from preplog.core.resolver.document import DocumentSource
from preplog.core.resolver.registry import ResolverRegistry


class DictReader:
    def __init__(self, snapshots):
        self.snapshots = snapshots

    def read(self, handle, old_content=False):
        return self.snapshots.get((handle, old_content), Unavailable())


class LineTableResolver:
    """Answers with a fixed name per line number."""

    def __init__(self, names_by_line):
        self.names_by_line = names_by_line
        self.lines = []

    def resolve(self, document, line_offset):
        line = document.line_of_offset(line_offset)
        self.lines.append((document.side, line))
        name = self.names_by_line.get(line)
        if isinstance(name, Exception):
            raise name
        if name is None:
            return Unavailable()
        return Ok(name)


TEN_LINES = "".join(f"line {i}\n" for i in range(10))


def make_planner(resolver, snapshots=None):
    snapshots = snapshots or {("a.py", False): Ok(TEN_LINES)}
    registry = ResolverRegistry({"python": resolver}).freeze()
    return EntryPlanner(registry, DocumentSource(DictReader(snapshots)))


def modified(path="a.py", ranges=(), ancestor=None):
    return FileChange(
        path, ChangeKind.MODIFIED, ranges=ranges, working=path, ancestor=ancestor
    )


# -----------------------------------------------------------------------------
# added and removed files
# -----------------------------------------------------------------------------


@pytest.mark.parametrize(
    "kind, note", [(ChangeKind.ADDED, NEW_FILE_NOTE), (ChangeKind.REMOVED, REMOVED_FILE_NOTE)]
)
def test_whole_file_entries_never_consult_resolver(kind, note):
    resolver = Mock()
    planner = make_planner(resolver)

    entries = planner.plan_file(FileChange("a.py", kind))

    assert entries == [ChangelogEntry(FileChange("a.py", kind), "", note)]
    resolver.resolve.assert_not_called()


# -----------------------------------------------------------------------------
# function name guessing
# -----------------------------------------------------------------------------


def test_names_deduplicated_in_first_seen_order():
    resolver = LineTableResolver({0: "foo", 1: "bar", 2: "foo", 3: "baz"})
    file = modified(ranges=(LineRange(0, 3, Side.NEW),))

    entries = make_planner(resolver).plan_file(file)

    assert [e.function_name for e in entries] == ["foo", "bar", "baz"]
    assert all(e.file is file for e in entries)


def test_both_range_endpoints_are_inspected():
    resolver = LineTableResolver({})
    file = modified(ranges=(LineRange(2, 4, Side.NEW),))

    make_planner(resolver).guess_function_names(file)

    assert resolver.lines == [(Side.NEW, 2), (Side.NEW, 3), (Side.NEW, 4)]


def test_lines_past_document_end_are_skipped():
    resolver = LineTableResolver({9: "last"})
    # ten lines plus a trailing empty line: 11 lines in total
    file = modified(ranges=(LineRange(9, 15, Side.NEW),))

    names = make_planner(resolver).guess_function_names(file)

    assert names == ["last"]
    assert [line for _, line in resolver.lines] == [9, 10]


def test_old_ranges_read_the_ancestor():
    snapshots = {
        ("a.py", False): Ok("new\n"),
        ("a.py@base", True): Ok(TEN_LINES),
    }
    resolver = LineTableResolver({7: "removed_func", 0: "kept"})
    file = modified(
        ranges=(LineRange(0, 1, Side.NEW), LineRange(7, 8, Side.OLD)),
        ancestor="a.py@base",
    )

    names = make_planner(resolver, snapshots).guess_function_names(file)

    assert names == ["kept", "removed_func"]
    assert (Side.OLD, 7) in resolver.lines


def test_no_resolver_gives_single_unnamed_entry():
    resolver = Mock()
    file = FileChange(
        "notes.unknown-extension",
        ChangeKind.MODIFIED,
        ranges=(LineRange(0, 2, Side.NEW),),
        working="notes.unknown-extension",
    )

    entries = make_planner(resolver).plan_file(file)

    assert entries == [ChangelogEntry(file)]
    assert entries[0].is_unnamed
    resolver.resolve.assert_not_called()


def test_no_ranges_gives_single_unnamed_entry():
    entries = make_planner(LineTableResolver({0: "foo"})).plan_file(modified())

    assert len(entries) == 1
    assert entries[0].is_unnamed


def test_resolver_errors_count_as_no_match():
    resolver = LineTableResolver({0: RuntimeError("boom"), 1: "ok", 2: "   "})
    file = modified(ranges=(LineRange(0, 2, Side.NEW),))

    assert make_planner(resolver).guess_function_names(file) == ["ok"]


def test_failed_resolution_counts_as_no_match():
    resolver = Mock()
    resolver.resolve.return_value = Failed("parse error")
    file = modified(ranges=(LineRange(0, 1, Side.NEW),))

    entries = make_planner(resolver).plan_file(file)

    assert entries == [ChangelogEntry(file)]


def test_unreadable_document_is_skipped():
    snapshots = {("a.py", False): Failed("decode")}
    resolver = Mock()
    file = modified(ranges=(LineRange(0, 1, Side.NEW),))

    assert make_planner(resolver, snapshots).guess_function_names(file) == []
    resolver.resolve.assert_not_called()


# -----------------------------------------------------------------------------
# plan
# -----------------------------------------------------------------------------


def test_plan_preserves_file_order_and_is_repeatable():
    resolver = LineTableResolver({1: "foo"})
    files = [
        FileChange("gone.py", ChangeKind.REMOVED),
        FileChange("new.py", ChangeKind.ADDED),
        modified(ranges=(LineRange(1, 2, Side.NEW),)),
    ]
    planner = make_planner(resolver)
    planned = []

    first = planner.plan(files, on_file_planned=planned.append)
    second = planner.plan(files)

    assert [e.path for e in first] == ["gone.py", "new.py", "a.py"]
    assert first[2].function_name == "foo"
    assert first == second
    assert planned == files
