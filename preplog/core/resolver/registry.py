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

from collections.abc import Mapping

from loguru import logger
from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

from ..exceptions import ConfigurationError
from .interface import FunctionResolver


class ResolverRegistry:
    """
    Maps file-type keys to function resolvers.

    Keys are tree-sitter language names. The registry is populated once and
    then frozen before the first lookup of a run.
    """

    LANGUAGE_MAPPING = {
        "python": "python",
        "python 3": "python",
        "python3": "python",
        "javascript": "javascript",
        "typescript": "typescript",
        "tsx": "tsx",
        "java": "java",
        "c": "c",
        "cpp": "cpp",
        "c++": "cpp",
        "csharp": "csharp",
        "c#": "csharp",
        "go": "go",
        "rust": "rust",
        "ruby": "ruby",
        "php": "php",
        "kotlin": "kotlin",
        "scala": "scala",
        "bash": "bash",
        "shell": "bash",
        "sh": "bash",
    }

    def __init__(self, resolvers: Mapping[str, FunctionResolver] | None = None):
        self._resolvers: dict[str, FunctionResolver] = dict(resolvers or {})
        self._frozen = False

    def register(self, key: str, resolver: FunctionResolver) -> None:
        if self._frozen:
            raise ConfigurationError(
                f"Cannot register resolver for '{key}'",
                "The resolver registry is frozen once a run has started",
            )
        self._resolvers[key] = resolver

    def freeze(self) -> "ResolverRegistry":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def keys(self) -> list[str]:
        return sorted(self._resolvers)

    def get(self, key: str | None) -> FunctionResolver | None:
        if key is None:
            return None
        return self._resolvers.get(key)

    def resolver_for(self, path: str) -> FunctionResolver | None:
        key = self.key_for(path)
        resolver = self.get(key)
        if resolver is None:
            logger.debug(f"No function resolver for {path} (key={key})")
        return resolver

    @classmethod
    def key_for(cls, path: str) -> str | None:
        """Derive the file-type key for a path from its name."""
        try:
            lexer = get_lexer_for_filename(path.rsplit("/", 1)[-1])
        except ClassNotFound:
            return None
        return cls._map_lexer_to_language(lexer.name)

    @classmethod
    def _map_lexer_to_language(cls, lexer_name: str) -> str | None:
        normalized_name = lexer_name.lower().strip()

        if normalized_name in cls.LANGUAGE_MAPPING:
            return cls.LANGUAGE_MAPPING[normalized_name]

        # Try some common variations
        if "python" in normalized_name:
            return "python"
        elif "typescript" in normalized_name:
            return "typescript"
        elif "javascript" in normalized_name:
            return "javascript"
        elif "java" in normalized_name:
            return "java"
        elif any(cpp_name in normalized_name for cpp_name in ["c++", "cpp", "cxx"]):
            return "cpp"

        return None
