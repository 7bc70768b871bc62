"""Click command group exposing the metadata banner and the log demo.

Purpose
-------
Give operators a quick way to see the leveled façade in action
(``lib_log_leveled logdemo``) and keep the packaging smoke tests
(``info``/``--version``) working.

Contents
--------
* :func:`cli` - root group with ``--traceback`` and ``--use-dotenv`` switches.
* :func:`cli_info`, :func:`cli_fail`, :func:`cli_logdemo` - subcommands.
* :func:`main` - runs the group through :func:`lib_cli_exit_tools.run_cli`.
"""

from __future__ import annotations

import os
from typing import Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from . import config as config_module
from .domain.levels import Level
from .lib_log_leveled import i_should_fail, logdemo, summary_info

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_LEVEL_CHOICES = [name.lower() for name, level in Level.__members__.items() if level not in (Level.FATAL, Level.PANIC)]


def _parse_fields(raw: Sequence[str]) -> dict[str, str]:
    """Turn ``KEY=VALUE`` strings into a mapping.

    >>> _parse_fields(["user=alice", "job=42"])
    {'user': 'alice', 'job': '42'}
    """
    fields: dict[str, str] = {}
    for item in raw:
        key, separator, value = item.partition("=")
        if not separator or not key.strip():
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}", param_hint="--field")
        fields[key.strip()] = value
    return fields


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
    help=f"Load a nearby .env before running (default: ${config_module.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool | None) -> None:
    """Root command storing global flags."""

    if config_module.should_use_dotenv(explicit=use_dotenv, env_value=os.getenv(config_module.DOTENV_ENV_VAR)):
        config_module.enable_dotenv()
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details."""

    click.echo(summary_info(), nl=False)


@cli.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Trigger the intentional failure helper to test error handling."""

    i_should_fail()


@cli.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--level",
    type=click.Choice(_LEVEL_CHOICES, case_sensitive=False),
    default=None,
    help=f"Console threshold (default: ${config_module.LEVEL_ENV_VAR} or trace).",
)
@click.option("--field", "fields", multiple=True, metavar="KEY=VALUE", help="Attribute bound to every demo record.")
@click.option("--no-color", is_flag=True, default=False, help="Disable colour output.")
def cli_logdemo(level: str | None, fields: tuple[str, ...], no_color: bool) -> None:
    """Emit sample records through the direct, formatted, line and lazy variants."""

    threshold = level or os.getenv(config_module.LEVEL_ENV_VAR) or "trace"
    try:
        result = logdemo(level=threshold, fields=_parse_fields(fields), no_color=no_color)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--level") from exc
    skipped = ", ".join(result["skipped"]) or "none"
    click.echo(f"emitted {result['emitted']} records at threshold {result['level']} (skipped: {skipped})")


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the command group and return its exit code.

    The traceback preferences of :mod:`lib_cli_exit_tools` are restored
    afterwards unless ``restore_traceback`` is ``False``.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
