# topmark:header:start
#
#   project      : MimeDetect
#   file         : config.py
#   file_relpath : src/mimedetect/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""MimeDetect `config` command.

Prints the effective configuration as TOML, after merging the bundled
defaults, discovered project files and any ``--config`` files. With
``--defaults`` it prints the bundled template instead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mimedetect.cli.cmd_common import build_config, freeze_config, get_ctx_console
from mimedetect.cli.options import config_source_options
from mimedetect.config.io import load_default_config_template_toml_text

if TYPE_CHECKING:
    from mimedetect.cli.console import ConsoleLike
    from mimedetect.config import Config


@click.command(
    name="config",
    help="Show the effective configuration as TOML.",
)
@click.option(
    "--defaults",
    "show_defaults",
    is_flag=True,
    help="Show the bundled default configuration instead.",
)
@config_source_options
def config_command(
    *,
    show_defaults: bool = False,
    config_paths: tuple[str, ...] = (),
    no_config: bool = False,
) -> None:
    """Print the effective (or default) configuration.

    Args:
        show_defaults (bool): Print the bundled template verbatim.
        config_paths (tuple[str, ...]): Explicit config files.
        no_config (bool): Skip config discovery.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_ctx_console(ctx)

    if show_defaults:
        console.print(load_default_config_template_toml_text(), nl=False)
        return

    config: Config = freeze_config(build_config(config_paths=config_paths, no_config=no_config))
    for path in config.config_files:
        console.print(f"# source: {path}")
    console.print(config.to_toml(), nl=False)
