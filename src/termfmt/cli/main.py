# topmark:header:start
#
#   project      : TermFmt
#   file         : main.py
#   file_relpath : src/termfmt/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the ``termfmt`` command.

Key ideas:
- Group-level options are resolved once into a console stored in ``ctx.obj``.
- The console configures stdout's formatting flags, so subcommands only
  push and pop modifiers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from termfmt.cli.commands.demo import demo_command
from termfmt.cli.commands.echo import echo_command
from termfmt.cli.commands.modifiers import modifiers_command
from termfmt.cli.commands.version import version_command
from termfmt.cli.console import ClickConsole
from termfmt.cli.errors import TermfmtConfigError
from termfmt.cli.options import (
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_verbosity,
)
from termfmt.config.loaders import load_config
from termfmt.config.logging import get_logger, resolve_env_log_level, setup_logging
from termfmt.core.errors import ConfigError
from termfmt.terminal import ColorMode, resolve_color_mode

if TYPE_CHECKING:
    from pathlib import Path

    from termfmt.cli.console import ConsoleLike
    from termfmt.config.model import Config

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    html: bool | None,
    config_file: Path | None,
    no_config: bool,
) -> None:
    """Initialize shared state (logging, config, color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        html (bool | None): Whether ``--html`` was passed (None: use config).
        config_file (Path | None): Explicit config file from ``--config``.
        no_config (bool): Whether ``--no-config`` was passed.
    """
    ctx.obj = ctx.obj or {}

    # Explicit -v/-q wins over TERMFMT_LOG_LEVEL.
    level_env = resolve_env_log_level()
    level = resolve_verbosity(verbose, quiet) if (verbose or quiet) else level_env
    setup_logging(level=level)

    try:
        config: Config = load_config(config_file, discover=not no_config)
    except ConfigError as exc:
        raise TermfmtConfigError(str(exc)) from exc

    if no_color:
        effective_mode = ColorMode.NEVER
    elif color_mode is not None:
        effective_mode = ColorMode(color_mode)
    else:
        effective_mode = config.color_mode
    enable_color = resolve_color_mode(color_mode_override=effective_mode)
    config = config.with_overrides(color_mode=effective_mode, html=True if html else None)

    ctx.color = enable_color
    logger.debug("Effective config: %s (color enabled: %s)", config, enable_color)

    console = ClickConsole(enable_color=enable_color, html=config.html, width=config.width)
    ctx.obj["console"] = console


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="TermFmt CLI: stream-scoped ANSI/HTML text formatting.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
    html: bool | None,
    config_file: Path | None,
    no_config: bool,
) -> None:
    """Entry point for the TermFmt CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        html=html,
        config_file=config_file,
        no_config=no_config,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'termfmt echo -m red TEXT' to print formatted text.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(echo_command)

cli.add_command(modifiers_command)

cli.add_command(demo_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
