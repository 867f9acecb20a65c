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

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A lookup that produced a value."""

    value: T


@dataclass(frozen=True)
class Unavailable:
    """Legitimately nothing there (no ancestor, no enclosing function, ...)."""

    reason: str = ""


@dataclass(frozen=True)
class Failed:
    """The lookup broke. Callers continue degraded."""

    reason: str
    error: Exception | None = None


Result = Ok[T] | Unavailable | Failed
