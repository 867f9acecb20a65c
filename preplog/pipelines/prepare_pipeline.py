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

from collections.abc import Iterable

from loguru import logger as default_logger

from ..core.classifier.diff_classifier import DiffClassifier, OrderedGroups
from ..core.data.changelog_entry import ChangelogEntry
from ..core.data.file_change import ChangeKind, FileChange
from ..core.data.raw_change import RawChange
from ..core.diff_extractor.change_extractor import ChangeExtractor
from ..core.emitter.interface import ChangelogEmitter
from ..core.exceptions import OperationCancelled
from ..core.logging.utils import log_file_changes, time_block
from ..core.planner.entry_planner import EntryPlanner
from ..core.progress.monitor import NullProgressMonitor, ProgressMonitor, checkpoint


class PreparePipeline:
    """
    classify -> extract -> plan -> emit, on one thread.

    Progress is reported (and cancellation checked) after classification,
    after each file's extraction and after each file's planning. A
    cancelled run discards its partial plan.

    ``logger`` receives the pipeline's own run messages (nothing to do,
    cancelled, plan and emit summaries). The classifier, extractor, planner
    and emitter keep logging through the module level loguru logger.
    """

    def __init__(
        self,
        classifier: DiffClassifier,
        extractor: ChangeExtractor,
        planner: EntryPlanner,
        emitter: ChangelogEmitter | None,
        author_name: str = "",
        author_email: str = "",
        logger=default_logger,
    ):
        self.classifier = classifier
        self.extractor = extractor
        self.planner = planner
        self.emitter = emitter
        self.author_name = author_name
        self.author_email = author_email
        self.logger = logger

    def build_plan(
        self,
        raw_changes: Iterable[RawChange],
        monitor: ProgressMonitor | None = None,
    ) -> list[ChangelogEntry] | None:
        """
        Runs classification, extraction and planning.

        Returns the ordered entry plan, an empty list when nothing changed,
        or None when the monitor cancelled the run.
        """
        monitor = monitor or NullProgressMonitor()

        try:
            with time_block("Classify"):
                groups = self.classifier.classify(raw_changes)

            if groups.is_empty():
                self.logger.info("No changes detected, nothing to add to the ChangeLog")
                return []

            # one unit for classification, one per extraction and planning step
            monitor.begin(1 + len(groups.modified) + len(groups))
            checkpoint(monitor)

            with time_block("Extract changed lines"):
                ordered = self._extract(groups, monitor)
            log_file_changes("Extracted", ordered)

            with time_block("Plan entries"):
                entries = self.planner.plan(
                    ordered, on_file_planned=lambda _: checkpoint(monitor)
                )
        except OperationCancelled:
            self.logger.info("Cancelled, discarding partial ChangeLog plan")
            return None
        finally:
            monitor.done()

        self.logger.debug(f"Planned {len(entries)} entries for {len(groups)} files")
        return entries

    def _extract(self, groups: OrderedGroups, monitor: ProgressMonitor) -> list[FileChange]:
        modified = []
        for file in groups.modified:
            modified.append(self.extractor.extract(file))
            checkpoint(monitor)
        return [*groups.removed, *groups.added, *modified]

    def run(
        self,
        raw_changes: Iterable[RawChange],
        monitor: ProgressMonitor | None = None,
    ) -> list[ChangelogEntry] | None:
        """Builds the plan and hands it to the emitter. The emitter is skipped for empty plans."""
        entries = self.build_plan(raw_changes, monitor)
        if not entries:
            return entries

        if self.emitter is None:
            return entries

        with time_block("Emit"):
            written = self.emitter.emit(entries, self.author_name, self.author_email)

        self.logger.debug(f"Updated ChangeLogs: {[str(p) for p in written]}")
        return entries


def summarize(entries: Iterable[ChangelogEntry]) -> dict[ChangeKind, int]:
    """Count of files per change kind in a plan."""
    seen: dict[str, ChangeKind] = {}
    for entry in entries:
        seen.setdefault(entry.path, entry.file.kind)
    counts = {kind: 0 for kind in ChangeKind}
    for kind in seen.values():
        counts[kind] += 1
    return counts
