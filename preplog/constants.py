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

from pathlib import Path

from platformdirs import user_config_path

APP_NAME = "preplog"
ENV_APP_PREFIX = "PREPLOG_"

DEFAULT_CHANGELOG_NAME = "ChangeLog"
DEFAULT_FORMATTER = "gnu"
DEFAULT_ENCODING = "utf-8"

LOCAL_CONFIG_FILE = Path(".preplog.toml")
GLOBAL_CONFIG_FILE = user_config_path(APP_NAME) / "preplog.toml"
