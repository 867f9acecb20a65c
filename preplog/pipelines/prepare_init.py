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

from preplog.context import GlobalContext
from preplog.core.classifier.diff_classifier import DiffClassifier
from preplog.core.diff_extractor.change_extractor import ChangeExtractor
from preplog.core.emitter.file_emitter import FileChangelogEmitter
from preplog.core.emitter.formatters import get_formatter
from preplog.core.emitter.locator import ChangelogLocator
from preplog.core.file_reader.caching_reader import CachingSnapshotReader
from preplog.core.file_reader.git_file_reader import GitFileReader
from preplog.core.planner.entry_planner import EntryPlanner
from preplog.core.resolver.document import DocumentSource
from preplog.core.resolver.registry import ResolverRegistry
from preplog.core.resolver.tree_sitter_resolver import build_default_registry
from preplog.pipelines.prepare_pipeline import PreparePipeline


def create_prepare_pipeline(
    global_ctx: GlobalContext,
    dry_run: bool = False,
    registry: ResolverRegistry | None = None,
) -> PreparePipeline:
    repo_root = global_ctx.git_commands.get_repo_root()

    reader = CachingSnapshotReader(
        GitFileReader(
            global_ctx.git_interface,
            repo_root,
            base_revision="HEAD",
            encoding=global_ctx.encoding,
        )
    )

    if registry is None:
        registry = build_default_registry()

    emitter = None
    if not dry_run:
        # fail on a bad formatter preference before doing any work
        formatter = get_formatter(global_ctx.formatter)
        locator = ChangelogLocator(
            repo_root,
            changelog_name=global_ctx.changelog_name,
            auto_accept=global_ctx.auto_accept,
        )
        emitter = FileChangelogEmitter(locator, formatter, encoding=global_ctx.encoding)

    return PreparePipeline(
        DiffClassifier(global_ctx.changelog_name),
        ChangeExtractor(reader),
        EntryPlanner(registry, DocumentSource(reader)),
        emitter,
        author_name=global_ctx.author_name,
        author_email=global_ctx.author_email,
    )
