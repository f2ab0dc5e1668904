# topmark:header:start
#
#   project      : MimeDetect
#   file         : cmd_common.py
#   file_relpath : src/mimedetect/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small helpers shared by several commands: reading the verbosity and console
from the context, and building the effective configuration from the
``--config``/``--no-config`` options.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Iterable

import click

from mimedetect.cli.console import get_console
from mimedetect.cli.errors import MimedetectConfigError
from mimedetect.config import Config, ConfigError, MutableConfig
from mimedetect.config.logging import get_logger

if TYPE_CHECKING:
    from mimedetect.cli.console import ConsoleLike

logger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the group (0 if unset)."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    return int(obj.get("verbosity_level", 0))


def get_ctx_console(ctx: click.Context) -> ConsoleLike:
    """Return the console created by the group callback."""
    return get_console(ctx)


def build_config(
    *,
    config_paths: Iterable[str],
    no_config: bool,
    cwd: Path | None = None,
) -> MutableConfig:
    """Merge the configuration sources selected on the command line.

    Args:
        config_paths (Iterable[str]): Values of ``--config`` in order.
        no_config (bool): Skip discovery of local config files.
        cwd (Path | None): Directory used for discovery (defaults to the CWD).

    Returns:
        MutableConfig: The merged builder; command flags are applied by the caller.

    Raises:
        MimedetectConfigError: If a source is unreadable or invalid.
    """
    try:
        return MutableConfig.load_merged(
            cwd=cwd,
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        raise MimedetectConfigError(str(e)) from e


def freeze_config(draft: MutableConfig) -> Config:
    """Freeze ``draft`` and log the resulting snapshot."""
    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config
