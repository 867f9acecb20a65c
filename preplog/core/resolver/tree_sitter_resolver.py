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

import json
from dataclasses import dataclass, field
from importlib.resources import files
from importlib.resources.abc import Traversable

from loguru import logger
from tree_sitter import Node
from tree_sitter_language_pack import get_parser

from ..data.result import Failed, Ok, Result, Unavailable
from ..exceptions import ConfigurationError
from .document import Document
from .registry import ResolverRegistry


@dataclass(frozen=True)
class LanguageConfig:
    language_name: str
    # definition node type -> field holding its name
    definitions: dict[str, str]
    # wrapper node type (e.g. decorators) -> field holding the wrapped definition
    wrappers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_json_dict(cls, name: str, json_dict: dict) -> "LanguageConfig":
        definitions = json_dict.get("definitions", {})
        if not isinstance(definitions, dict):
            raise ValueError(f"Invalid definitions entry for {name}")
        wrappers = json_dict.get("wrappers", {})
        if not isinstance(wrappers, dict):
            raise ValueError(f"Invalid wrappers entry for {name}")
        return cls(name, dict(definitions), dict(wrappers))


def default_language_config_path() -> Traversable:
    return files("preplog").joinpath("resources/language_config.json")


def load_language_configs(
    language_config_path: Traversable | None = None,
) -> dict[str, LanguageConfig]:
    path = language_config_path or default_language_config_path()
    try:
        with path.open("r", encoding="utf-8") as fh:
            config = json.load(fh)
    except OSError as e:
        raise ConfigurationError(f"Failed to read from {path}", str(e)) from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid language config {path}", str(e)) from e

    try:
        return {
            language_name: LanguageConfig.from_json_dict(language_name, language_config)
            for language_name, language_config in config.items()
        }
    except ValueError as e:
        raise ConfigurationError("Failed to parse language configs!", str(e)) from e


class TreeSitterFunctionResolver:
    """
    Resolves the enclosing function/class of a line with a tree-sitter parse.

    Nested definitions are joined outermost first, e.g. ``Parser.parse``.
    """

    def __init__(self, config: LanguageConfig):
        self.config = config
        self._parser = None
        # id(document) -> (document, root node); the document is kept alive with its tree
        self._trees: dict[int, tuple[Document, Node]] = {}

    @property
    def language_name(self) -> str:
        return self.config.language_name

    def _get_parser(self):
        if self._parser is None:
            self._parser = get_parser(self.config.language_name)
        return self._parser

    def _root_for(self, document: Document) -> Node:
        cached = self._trees.get(id(document))
        if cached is not None and cached[0] is document:
            return cached[1]

        tree = self._get_parser().parse(document.text.encode("utf8"))
        self._trees[id(document)] = (document, tree.root_node)
        return tree.root_node

    def resolve(self, document: Document, line_offset: int) -> Result[str]:
        try:
            root = self._root_for(document)
        except Exception as e:
            return Failed(f"Failed to parse {document.name} as {self.language_name}", e)

        row = document.line_of_offset(line_offset)
        line = document.line_text(row)
        # blank lines between definitions would only name the enclosing scope
        if not line.strip():
            return Unavailable(f"Line {row} of {document.name} is blank")

        indent = len(line) - len(line.lstrip())
        column = len(line[:indent].encode("utf8"))

        node = root.descendant_for_point_range((row, column), (row, column))
        names = []
        previous = None
        while node is not None:
            wrapped_field = self.config.wrappers.get(node.type)
            if wrapped_field is not None:
                # decorator lines belong to the definition they wrap
                inner = node.child_by_field_name(wrapped_field)
                if inner is not None and inner != previous:
                    self._add_name(inner, names)
            else:
                self._add_name(node, names)
            previous = node
            node = node.parent

        if not names:
            return Unavailable(f"No definition encloses line {row} of {document.name}")
        return Ok(".".join(reversed(names)))

    def _add_name(self, node: Node, names: list[str]) -> None:
        field_name = self.config.definitions.get(node.type)
        if field_name is None:
            return
        name = self._definition_name(node, field_name)
        if name:
            names.append(name)

    @staticmethod
    def _definition_name(node: Node, field_name: str) -> str | None:
        name_node = node.child_by_field_name(field_name)
        # C style declarators nest: function_declarator -> identifier
        while name_node is not None:
            inner = name_node.child_by_field_name("declarator")
            if inner is None:
                break
            name_node = inner

        if name_node is None or name_node.text is None:
            return None
        return name_node.text.decode("utf8", errors="replace").strip()


def build_default_registry(
    language_config_path: Traversable | None = None,
) -> ResolverRegistry:
    """Registers a tree-sitter resolver for every configured language and freezes the registry."""
    registry = ResolverRegistry()
    for name, config in load_language_configs(language_config_path).items():
        registry.register(name, TreeSitterFunctionResolver(config))
    logger.debug(f"Registered function resolvers: {registry.keys()}")
    return registry.freeze()
