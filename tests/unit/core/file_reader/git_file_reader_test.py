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

from preplog.core.data.result import Failed, Ok, Unavailable
from preplog.core.exceptions import ContentUnavailableError
from preplog.core.file_reader.caching_reader import CachingSnapshotReader
from preplog.core.file_reader.git_file_reader import GitFileReader
from preplog.core.git_interface.interface import GitInterface


@pytest.fixture
def mock_git():
    return Mock(spec=GitInterface)


@pytest.fixture
def reader(mock_git, tmp_path):
    return GitFileReader(mock_git, tmp_path)


def test_read_ancestor_from_base_revision(reader, mock_git):
    mock_git.run_git_binary_out.return_value = b"old content"

    assert reader.read("path/to/file.txt", old_content=True) == Ok("old content")
    mock_git.run_git_binary_out.assert_called_once_with(
        ["cat-file", "-p", "HEAD:path/to/file.txt"]
    )


def test_read_ancestor_windows_path(reader, mock_git):
    mock_git.run_git_binary_out.return_value = b"content"

    reader.read("path\\to\\file.txt", old_content=True)

    mock_git.run_git_binary_out.assert_called_once_with(
        ["cat-file", "-p", "HEAD:path/to/file.txt"]
    )


def test_missing_ancestor_is_unavailable(reader, mock_git):
    mock_git.run_git_binary_out.return_value = None

    assert isinstance(reader.read("new.c", old_content=True), Unavailable)


def test_read_working_copy_from_disk(reader, mock_git, tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "a.c").write_bytes("int main() {}\n".encode())

    assert reader.read("src/a.c") == Ok("int main() {}\n")
    mock_git.run_git_binary_out.assert_not_called()


def test_missing_working_copy_is_unavailable(reader):
    assert isinstance(reader.read("nope.c"), Unavailable)


def test_working_directory_is_failed(reader, tmp_path):
    (tmp_path / "adir").mkdir()

    assert isinstance(reader.read("adir"), Failed)


def test_undecodable_content_is_failed(reader, mock_git):
    mock_git.run_git_binary_out.return_value = b"\xff\xfe\xfa"

    result = reader.read("bin.dat", old_content=True)

    assert isinstance(result, Failed)
    assert isinstance(result.error, ContentUnavailableError)
    assert "utf-8" in result.reason


def test_custom_encoding_and_revision(mock_git, tmp_path):
    mock_git.run_git_binary_out.return_value = "caf\xe9".encode("latin-1")
    reader = GitFileReader(mock_git, tmp_path, base_revision="v1.0", encoding="latin-1")

    assert reader.read("a.txt", old_content=True) == Ok("caf\xe9")
    mock_git.run_git_binary_out.assert_called_once_with(["cat-file", "-p", "v1.0:a.txt"])


def test_unknown_encoding_is_failed(mock_git, tmp_path):
    mock_git.run_git_binary_out.return_value = b"x"
    reader = GitFileReader(mock_git, tmp_path, encoding="no-such-codec")

    assert isinstance(reader.read("a.txt", old_content=True), Failed)


# -----------------------------------------------------------------------------
# CachingSnapshotReader
# -----------------------------------------------------------------------------


def test_caching_reader_reads_each_side_once():
    inner = Mock()
    inner.read.side_effect = lambda handle, old_content=False: Ok(f"{handle}:{old_content}")
    cache = CachingSnapshotReader(inner)

    assert cache.read("a.c") == Ok("a.c:False")
    assert cache.read("a.c") == Ok("a.c:False")
    assert cache.read("a.c", old_content=True) == Ok("a.c:True")
    assert inner.read.call_count == 2

    cache.clear()
    cache.read("a.c")
    assert inner.read.call_count == 3
