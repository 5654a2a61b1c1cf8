"""Rich-click command line interface.

Purpose
-------
Provide ``lib_log_args info`` (metadata banner) and ``lib_log_args demo``
(showcase of the wrapped level methods), with traceback and ``.env``
switches shared by all commands.

Contents
--------
* :func:`cli` – root command group.
* :func:`cli_info` / :func:`cli_demo` – subcommands.
* :func:`main` – entry point delegating to :func:`lib_cli_exit_tools.run_cli`.
"""

from __future__ import annotations

import os
from collections.abc import Sequence

import lib_cli_exit_tools
import rich_click as click
from rich.console import Console
from rich.markup import escape

from . import __init__conf__, config
from .demo import run_demo
from .domain.levels import SeverityLevel

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_LEVEL_CHOICES = [level.method_name for level in SeverityLevel.ordered()]


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help="Load environment variables from the nearest .env before running commands.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool | None) -> None:
    """Root command storing global flags."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    if config.should_use_dotenv(explicit=use_dotenv, env_value=os.getenv(config.DOTENV_ENV_VAR)):
        config.enable_dotenv()
    if ctx.invoked_subcommand is None:
        __init__conf__.print_info()


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata."""

    __init__conf__.print_info()


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--level",
    type=click.Choice(_LEVEL_CHOICES, case_sensitive=False),
    default="debug",
    show_default=True,
    help="Threshold of the demo logger.",
)
@click.option("--payload-key", default=None, help="Record field for payloads (env: LOG_ARGS_PAYLOAD_KEY).")
@click.option(
    "--error-indicator-key",
    default=None,
    help="Record field flagging exceptions (env: LOG_ARGS_ERROR_INDICATOR_KEY).",
)
@click.option(
    "--always-show-error-indicator/--hide-error-indicator",
    default=None,
    help="Write the error indicator as false for non-exceptions (env: LOG_ARGS_ALWAYS_SHOW_ERROR_INDICATOR).",
)
def cli_demo(
    level: str,
    payload_key: str | None,
    error_indicator_key: str | None,
    always_show_error_indicator: bool | None,
) -> None:
    """Run the showcase calls and print returned values and written records."""

    options = config.options_from_env(
        payload_key=payload_key,
        error_indicator_key=error_indicator_key,
        always_show_error_indicator=always_show_error_indicator,
    )
    console = Console(highlight=False, soft_wrap=True)
    for outcome in run_demo(options=options, threshold=SeverityLevel.from_name(level)):
        returned = escape(repr(outcome.returned))
        console.print(f"[bold]{outcome.label}[/bold] ({outcome.level.method_name}) returned {returned}")
        if outcome.line is None:
            console.print("  suppressed: nothing written", style="dim")
        else:
            console.print(f"  {outcome.line}", markup=False)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI through :mod:`lib_cli_exit_tools`, restoring traceback settings afterwards."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        lib_cli_exit_tools.config.traceback = previous_traceback
        lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "cli_demo", "cli_info", "main"]
