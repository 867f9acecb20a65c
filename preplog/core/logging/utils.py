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

import contextlib
from collections.abc import Sequence
from time import perf_counter

from loguru import logger

from ..data.file_change import ChangeKind, FileChange


@contextlib.contextmanager
def time_block(block_name: str):
    """
    A context manager to time the execution of a code block and log the result.
    """

    logger.debug(f"Starting {block_name}")
    start_time = perf_counter()

    try:
        yield
    finally:
        end_time = perf_counter()
        duration_ms = int((end_time - start_time) * 1000)

        logger.debug(
            f"Finished {block_name}. Timing(ms)={duration_ms}",
        )


def log_file_changes(process_step: str, files: Sequence[FileChange]):
    ranges = sum(len(f.ranges) for f in files)
    modified = sum(1 for f in files if f.kind is ChangeKind.MODIFIED)

    logger.debug(
        "{process_step}: files={count} modified={modified} ranges={ranges}",
        process_step=process_step,
        count=len(files),
        modified=modified,
        ranges=ranges,
    )
