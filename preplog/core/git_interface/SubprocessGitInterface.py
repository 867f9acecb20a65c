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

import subprocess
from pathlib import Path

from loguru import logger

from ..exceptions import GitError
from .interface import GitInterface


class SubprocessGitInterface(GitInterface):
    def __init__(self, repo_path: str | Path | None = None) -> None:
        self.repo_path = Path(repo_path) if repo_path is not None else Path(".")

    def run_git_text_out(
        self,
        args: list[str],
        input_text: str | None = None,
        cwd: str | Path | None = None,
    ) -> str | None:
        result = self.run_git_text(args, input_text, cwd)
        return result.stdout if result else None

    def run_git_binary_out(
        self,
        args: list[str],
        input_bytes: bytes | None = None,
        cwd: str | Path | None = None,
    ) -> bytes | None:
        result = self.run_git_binary(args, input_bytes, cwd)
        return result.stdout if result else None

    def run_git_text(
        self,
        args: list[str],
        input_text: str | None = None,
        cwd: str | Path | None = None,
    ) -> subprocess.CompletedProcess[str] | None:
        effective_cwd = str(cwd) if cwd is not None else str(self.repo_path)
        cmd = ["git"] + args
        logger.debug(f"Running git text command: {' '.join(cmd)} cwd={effective_cwd}")
        try:
            result = subprocess.run(
                cmd,
                input=input_text,
                text=True,
                encoding="utf-8",
                errors="replace",
                capture_output=True,
                check=True,
                cwd=effective_cwd,
            )
        except subprocess.CalledProcessError as e:
            logger.debug(
                f"Git text command failed: {' '.join(e.cmd)} code={e.returncode} stderr={e.stderr}"
            )
            return None
        except FileNotFoundError as e:
            raise GitError(
                "Git is not installed or not in PATH",
                "Please install git and ensure it's available in your PATH environment variable",
            ) from e

        if result.stdout:
            logger.debug(
                f"git stdout (text): {result.stdout[:2000]}"
                + ("...(truncated)" if len(result.stdout) > 2000 else "")
            )
        return result

    def run_git_binary(
        self,
        args: list[str],
        input_bytes: bytes | None = None,
        cwd: str | Path | None = None,
    ) -> subprocess.CompletedProcess[bytes] | None:
        effective_cwd = str(cwd) if cwd is not None else str(self.repo_path)
        cmd = ["git"] + args
        logger.debug(f"Running git binary command: {' '.join(cmd)} cwd={effective_cwd}")
        try:
            result = subprocess.run(
                cmd,
                input=input_bytes,
                text=False,
                capture_output=True,
                check=True,
                cwd=effective_cwd,
            )
        except subprocess.CalledProcessError as e:
            logger.debug(
                f"Git binary command failed: {' '.join(e.cmd)} code={e.returncode} stderr={e.stderr.decode('utf-8', errors='ignore')}"
            )
            return None
        except FileNotFoundError as e:
            raise GitError(
                "Git is not installed or not in PATH",
                "Please install git and ensure it's available in your PATH environment variable",
            ) from e

        if result.stdout:
            logger.debug(f"git stdout (binary length): {len(result.stdout)} bytes")
        return result
