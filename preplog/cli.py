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

import inspect
import sys
from pathlib import Path

import typer
from colorama import init
from dotenv import load_dotenv
from loguru import logger

from preplog.commands import languages, prepare
from preplog.constants import (
    APP_NAME,
    ENV_APP_PREFIX,
    GLOBAL_CONFIG_FILE,
    LOCAL_CONFIG_FILE,
)
from preplog.context import GlobalConfig, GlobalContext
from preplog.core.config.config_loader import ConfigLoader
from preplog.core.exceptions import handle_preplog_exception
from preplog.core.logging.logging import setup_logger
from preplog.core.validation import validate_git_repository
from preplog.runtimeutil import (
    ensure_utf8_output,
    get_log_dir_callback,
    version_callback,
)

# Initialize colorama (colored output in terminal)
init(autoreset=True)

# main cli app
app = typer.Typer(
    help=f"{APP_NAME}: prepare ChangeLog entries from your uncommitted changes",
    pretty_exceptions_show_locals=False,
    pretty_exceptions_enable=False,
    add_completion=False,
)

app.command(name="prepare")(prepare.main)
app.command(name="languages")(languages.main)

# which commands do not require a global context
no_context_commands = {"languages"}


def load_global_config(custom_config_path: str | None, repo_path: Path, **input_args):
    # input args are the "runtime overrides" for configs
    config_args = {key: item for key, item in input_args.items() if item is not None}

    return ConfigLoader.get_full_config(
        GlobalConfig,
        config_args,
        local_config_path=repo_path / LOCAL_CONFIG_FILE,
        env_app_prefix=ENV_APP_PREFIX,
        global_config_path=GLOBAL_CONFIG_FILE,
        custom_config_path=Path(custom_config_path)
        if custom_config_path is not None
        else None,
    )


def create_global_callback():
    """
    Dynamically creates the main callback function with GlobalConfig parameters.
    This allows the CLI arguments to be automatically synced with GlobalConfig fields.
    """
    cli_params = GlobalConfig.get_cli_params()

    def callback(
        ctx: typer.Context,
        version: bool = typer.Option(
            False,
            "--version",
            "-V",
            callback=version_callback,
            help="Show version and exit",
        ),
        log_path: bool = typer.Option(
            False,
            "--log-dir",
            callback=get_log_dir_callback,
            help="Show log path (where logs for preplog live) and exit",
        ),
        repo_path: str = typer.Option(
            ".",
            "--repo",
            help="Path to the git repository to operate on.",
        ),
        custom_config: str | None = typer.Option(
            None,
            "--custom-config",
            help="Path to a custom config file",
        ),
        **kwargs,  # Dynamic GlobalConfig params injected here
    ) -> None:
        """
        Global setup callback. Initialize global context/config used by commands
        """
        with handle_preplog_exception(exit_on_fail=True):
            if ctx.invoked_subcommand is None:
                print(ctx.get_help())
                raise typer.Exit()

            # skip --help in subcommands
            if any(arg in ctx.help_option_names for arg in sys.argv):
                return

            if ctx.invoked_subcommand in no_context_commands:
                return

            config, used_config_sources, used_default = load_global_config(
                custom_config, Path(repo_path), **kwargs
            )

            setup_logger(ctx.invoked_subcommand, debug=config.verbose, silent=config.silent)

            logger.debug(f"Used {used_config_sources} to build global context.")
            global_context = GlobalContext.from_global_config(config, Path(repo_path))
            # fail immediately if we arent in a valid git repo as we expect one
            validate_git_repository(global_context.git_commands)

            ctx.obj = global_context

    # Dynamically add GlobalConfig parameters to function signature
    # This is necessary for typer to recognize them
    sig = inspect.signature(callback)
    params = [p for p in sig.parameters.values() if p.name != "kwargs"]
    for param_name, (param_type, param_default) in cli_params.items():
        params.append(
            inspect.Parameter(
                param_name,
                inspect.Parameter.KEYWORD_ONLY,
                default=typer.Option(
                    param_default, help=GlobalConfig.descriptions.get(param_name)
                ),
                annotation=param_type,
            )
        )

    callback.__signature__ = sig.replace(parameters=params)
    return callback


# Register the dynamically created callback
main = create_global_callback()
app.callback(invoke_without_command=True)(main)


def run_app():
    """Run the application with global exception handling."""
    # force stdout to be utf8
    ensure_utf8_output()
    # load any .env files (config values possibly set through env)
    load_dotenv()
    # launch cli
    app(prog_name=APP_NAME)


if __name__ == "__main__":
    run_app()
