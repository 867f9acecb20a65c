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

from preplog.core.classifier.diff_classifier import DiffClassifier, path_sort_key
from preplog.core.data import ChangeKind, Direction, RawChange


def paths(changes):
    return [c.path for c in changes]


def test_classify_groups_and_drops_changelog():
    raw = {
        RawChange("b.c", ChangeKind.MODIFIED, "b.c"),
        RawChange("a.c", ChangeKind.ADDED),
        RawChange("c.c", ChangeKind.REMOVED),
        RawChange("ChangeLog", ChangeKind.MODIFIED, "ChangeLog"),
    }

    groups = DiffClassifier().classify(raw)

    assert paths(groups.removed) == ["c.c"]
    assert paths(groups.added) == ["a.c"]
    assert paths(groups.modified) == ["b.c"]
    assert paths(groups.ordered()) == ["c.c", "a.c", "b.c"]


def test_nested_changelogs_are_dropped():
    raw = [
        RawChange("lib/ChangeLog", ChangeKind.MODIFIED, "lib/ChangeLog"),
        RawChange("docs/ChangeLog", ChangeKind.ADDED),
        RawChange("lib/ChangeLog.old", ChangeKind.ADDED),
    ]

    groups = DiffClassifier().classify(raw)

    assert paths(groups.ordered()) == ["lib/ChangeLog.old"]


def test_custom_changelog_name():
    raw = [
        RawChange("CHANGES", ChangeKind.MODIFIED, "CHANGES"),
        RawChange("ChangeLog", ChangeKind.MODIFIED, "ChangeLog"),
    ]

    groups = DiffClassifier("CHANGES").classify(raw)

    assert paths(groups.modified) == ["ChangeLog"]


def test_each_group_sorted_by_path():
    raw = [
        RawChange("src/z.c", ChangeKind.MODIFIED, "src/z.c"),
        RawChange("src/a/b.c", ChangeKind.MODIFIED, "src/a/b.c"),
        RawChange("src/a.c", ChangeKind.MODIFIED, "src/a.c"),
        RawChange("README", ChangeKind.MODIFIED, "README"),
    ]

    groups = DiffClassifier().classify(raw)

    # segments compare one by one, so "a" sorts before "a.c"
    assert paths(groups.modified) == ["README", "src/a/b.c", "src/a.c", "src/z.c"]


def test_sort_is_independent_of_input_order():
    raw = [
        RawChange("x/y.c", ChangeKind.ADDED),
        RawChange("x-y.c", ChangeKind.ADDED),
        RawChange("x/a.c", ChangeKind.ADDED),
    ]

    first = DiffClassifier().classify(raw)
    second = DiffClassifier().classify(list(reversed(raw)))

    assert paths(first.added) == paths(second.added)


def test_path_sort_key_breaks_ties_on_full_string():
    assert path_sort_key("a//b.c") != path_sort_key("a/b.c")
    assert path_sort_key("a/b.c")[0] == ("a", "b.c")


def test_empty_input_gives_three_empty_groups():
    groups = DiffClassifier().classify(set())

    assert groups.removed == []
    assert groups.added == []
    assert groups.modified == []
    assert groups.is_empty()
    assert len(groups) == 0


def test_modified_keeps_handle_and_direction():
    raw = [RawChange("m.py", ChangeKind.MODIFIED, "handle", Direction.INCOMING)]

    (change,) = DiffClassifier().classify(raw).modified

    assert change.working == "handle"
    assert change.direction is Direction.INCOMING
    assert change.ranges == ()


def test_added_and_removed_have_no_snapshots():
    raw = [
        RawChange("n.py", ChangeKind.ADDED, "ignored"),
        RawChange("r.py", ChangeKind.REMOVED, "ignored"),
    ]

    groups = DiffClassifier().classify(raw)

    assert groups.added[0].working is None
    assert groups.removed[0].working is None


def test_backslash_paths_are_normalized():
    raw = [RawChange("src\\win.c", ChangeKind.ADDED)]

    groups = DiffClassifier().classify(raw)

    assert paths(groups.added) == ["src/win.c"]
