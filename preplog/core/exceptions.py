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
Custom exception hierarchy for the preplog CLI application.

This module defines the exception hierarchy used across the pipeline and
the command line, plus a small helper that turns any of them into a clean
user-facing error and exit code.
"""

import contextlib
import functools

import typer
from loguru import logger


class preplogError(Exception):
    """
    Base exception for all preplog-related errors.

    All preplog-specific exceptions should inherit from this class
    to enable consistent error handling throughout the application.
    """

    def __init__(self, message: str, details: str = None):
        """
        Initialize a preplogError.

        Args:
            message: Main error message for the user
            details: Additional technical details for logging
        """
        self.message = message
        self.details = details
        super().__init__(message)


class GitError(preplogError):
    """
    Errors related to git operations.

    Raised when git commands fail or when git repository
    state is invalid for the requested operation.
    """

    pass


class ValidationError(preplogError):
    """
    Input validation errors.

    Raised when user input fails validation checks,
    such as invalid file paths or malformed change manifests.
    """

    pass


class ConfigurationError(preplogError):
    """
    Configuration-related errors.

    Raised when configuration files are invalid, or when the resolver
    registry is modified after it was frozen.
    """

    pass


class ContentUnavailableError(preplogError):
    """
    A file snapshot could not be fetched or decoded.
    """

    pass


class FileSystemError(preplogError):
    """
    File system operation errors.

    Raised when writing a ChangeLog fails, such as permission issues
    or missing directories.
    """

    pass


class OperationCancelled(preplogError):
    """Raised inside the pipeline when the progress monitor reports cancellation."""

    pass


# Convenience functions for creating common errors
def not_git_repository(path: str = ".") -> GitError:
    """Create a GitError for when not in a git repository."""
    return GitError(
        f"Not a git repository: {path}",
        "Run 'git init' to initialize a git repository or navigate to an existing repository",
    )


def path_not_found(path: str) -> ValidationError:
    """Create a ValidationError for non-existent paths."""
    return ValidationError(
        f"Path not found: {path}",
        "Please check that the path exists and is accessible",
    )


def no_changelog_target(path: str) -> FileSystemError:
    """Create a FileSystemError for files with no ChangeLog to write to."""
    return FileSystemError(
        f"No ChangeLog found for {path}",
        "Create a ChangeLog file in the file's directory or one of its parents",
    )


def unknown_formatter(name: str) -> ConfigurationError:
    """Create a ConfigurationError for an unregistered formatter preference."""
    return ConfigurationError(
        f"Unknown changelog formatter: {name}",
        "Set 'formatter' to one of the built-in formatters (e.g. 'gnu')",
    )


class _ExceptionHandler(contextlib.ContextDecorator):
    def __init__(self, exit_on_fail: bool = True):
        self.exit_on_fail = exit_on_fail

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        if exc is None or not isinstance(exc, preplogError):
            return False

        if isinstance(exc, OperationCancelled):
            logger.info("[yellow]Operation cancelled[/yellow]")
        else:
            logger.error(f"[red]{exc.message}[/red]")
        if exc.details:
            logger.debug(f"Details: {exc.details}")

        if self.exit_on_fail:
            raise typer.Exit(1) from exc
        return True


def handle_preplog_exception(func=None, *, exit_on_fail: bool = True):
    """
    Log preplog errors cleanly instead of dumping a traceback.

    Usable both as a decorator and as a context manager:

        @handle_preplog_exception
        def main(...): ...

        with handle_preplog_exception(exit_on_fail=True):
            ...
    """
    if func is None:
        return _ExceptionHandler(exit_on_fail=exit_on_fail)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        with _ExceptionHandler(exit_on_fail=exit_on_fail):
            return func(*args, **kwargs)

    return wrapper
