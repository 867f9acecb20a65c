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

from typing import Protocol, runtime_checkable

from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn

from ..exceptions import OperationCancelled


@runtime_checkable
class ProgressMonitor(Protocol):
    def begin(self, total: int) -> None: ...

    def report_progress(self, units_completed: int) -> None: ...

    def is_cancelled(self) -> bool: ...

    def done(self) -> None: ...


class NullProgressMonitor:
    """Monitor that reports nowhere. It can still be cancelled."""

    def __init__(self):
        self.total = 0
        self.completed = 0
        self._cancelled = False

    def begin(self, total: int) -> None:
        self.total = total
        self.completed = 0

    def report_progress(self, units_completed: int) -> None:
        self.completed += units_completed

    def cancel(self) -> None:
        self._cancelled = True

    def is_cancelled(self) -> bool:
        return self._cancelled

    def done(self) -> None:
        pass


class RichProgressMonitor(NullProgressMonitor):
    """Shows a rich progress bar on the console."""

    def __init__(self, description: str = "Preparing ChangeLog", transient: bool = True):
        super().__init__()
        self.description = description
        self._progress = Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            transient=transient,
        )
        self._task = None

    def begin(self, total: int) -> None:
        super().begin(total)
        self._progress.start()
        self._task = self._progress.add_task(self.description, total=max(total, 1))

    def report_progress(self, units_completed: int) -> None:
        super().report_progress(units_completed)
        if self._task is not None:
            self._progress.advance(self._task, units_completed)

    def done(self) -> None:
        if self._task is not None:
            self._progress.stop()
            self._task = None


def checkpoint(monitor: ProgressMonitor, units: int = 1) -> None:
    """Report progress, then raise OperationCancelled if cancellation was requested."""
    monitor.report_progress(units)
    if monitor.is_cancelled():
        raise OperationCancelled("Operation cancelled by user")
