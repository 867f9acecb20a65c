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

"""
Raw changes from a synchronize-view style tree of nodes.

Some change sources present their results as a tree (directories holding
files, each node carrying a change kind). `collect_raw_changes` walks any
tree exposing the `ChangeNode` shape and flattens its leaves into
RawChange records. A JSON manifest loader is provided for feeding such a
tree from a file.
"""

import json
from collections.abc import Sequence
from pathlib import Path, PurePosixPath
from typing import Any, Protocol

from loguru import logger
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from ..data.file_change import ChangeKind, Direction
from ..data.raw_change import RawChange
from ..exceptions import ValidationError


class ChangeNode(Protocol):
    name: str

    def children(self) -> Sequence["ChangeNode"]: ...

    def kind(self) -> ChangeKind | None: ...

    def resource(self) -> Any: ...


def collect_raw_changes(root: ChangeNode, include_root_name: bool = False) -> list[RawChange]:
    """
    Flattens the leaves of a change tree into RawChange records, in tree order.

    Paths are built from node names along the way; inner nodes only
    contribute a path segment and leaves without a kind are skipped. A
    modified leaf with no resource of its own uses its path as the handle.
    """
    changes: list[RawChange] = []
    start = PurePosixPath(root.name) if include_root_name and root.name else PurePosixPath()
    worklist: list[tuple[ChangeNode, PurePosixPath]] = [(root, start)]

    while worklist:
        node, path = worklist.pop()
        children = node.children()
        if children:
            for child in reversed(children):
                worklist.append((child, path / child.name if child.name else path))
            continue

        kind = node.kind()
        if kind is None or str(path) == ".":
            continue

        resource = None
        if kind is ChangeKind.MODIFIED:
            resource = node.resource()
            if resource is None:
                resource = str(path)

        direction = getattr(node, "direction", Direction.OUTGOING)
        changes.append(RawChange(str(path), kind, resource, direction))

    return changes


class ManifestNode(BaseModel):
    """One node of a JSON change manifest."""

    name: str = ""
    change: ChangeKind | None = None
    direction: Direction = Direction.OUTGOING
    nodes: list["ManifestNode"] = Field(default_factory=list)

    def children(self) -> list["ManifestNode"]:
        return self.nodes

    def kind(self) -> ChangeKind | None:
        return self.change

    def resource(self) -> None:
        # snapshots are read by path
        return None


def load_manifest(path: Path) -> list[RawChange]:
    """Loads raw changes from a JSON manifest tree."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        root = ManifestNode.model_validate(data)
    except OSError as e:
        raise ValidationError(f"Cannot read change manifest {path}", str(e)) from e
    except (json.JSONDecodeError, PydanticValidationError) as e:
        raise ValidationError(f"Invalid change manifest {path}", str(e)) from e

    changes = collect_raw_changes(root)
    logger.debug(f"Loaded {len(changes)} changes from manifest {path}")
    return changes
