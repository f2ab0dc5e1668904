# topmark:header:start
#
#   project      : MimeDetect
#   file         : file_resolver.py
#   file_relpath : src/mimedetect/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve command-line paths into the list of files to inspect.

The resolver implements these semantics:
  1. **Candidates**: explicit paths are taken as given, including symbolic
     links named on the command line. Directories are expanded only when
     ``recursive`` is set; symbolic links met during the walk are followed
     only when ``follow_symlinks`` is set.
  2. **Exclusion**: gitignore-style ``exclude`` patterns are matched against
     each candidate's path relative to the working directory.
  3. **Result**: unique paths in sorted order, plus the inputs that do not
     exist and the directories that were skipped.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from mimedetect.config.logging import MimedetectLogger, get_logger

if TYPE_CHECKING:
    from mimedetect.config import Config

logger: MimedetectLogger = get_logger(__name__)


@dataclass
class ResolvedFiles:
    """Outcome of path resolution.

    Attributes:
        files (list[Path]): Files to inspect, sorted and unique.
        missing (list[Path]): Inputs that do not exist.
        skipped_dirs (list[Path]): Directories given without ``recursive``.
    """

    files: list[Path] = field(default_factory=lambda: [])
    missing: list[Path] = field(default_factory=lambda: [])
    skipped_dirs: list[Path] = field(default_factory=lambda: [])


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def _walk_directory(root: Path, *, follow_symlinks: bool) -> Iterable[Path]:
    """Yield the regular files below ``root``."""
    for dirpath, _dirnames, filenames in os.walk(root, followlinks=follow_symlinks):
        for name in filenames:
            p: Path = Path(dirpath) / name
            if p.is_symlink() and not follow_symlinks:
                logger.debug("Skipping symlink: %s", p)
                continue
            if p.is_file():
                yield p


def resolve_file_list(
    paths: Iterable[str | Path],
    config: Config,
    *,
    cwd: Path | None = None,
) -> ResolvedFiles:
    """Return the files to inspect for the given command-line ``paths``.

    Args:
        paths (Iterable[str | Path]): Files and directories from the command line.
        config (Config): Effective configuration (``recursive``,
            ``follow_symlinks`` and ``exclude`` are honored).
        cwd (Path | None): Base for exclusion matching (defaults to the CWD).

    Returns:
        ResolvedFiles: Files to inspect plus missing inputs and skipped directories.
    """
    base: Path = cwd or Path.cwd()
    result = ResolvedFiles()
    candidates: set[Path] = set()

    for raw in paths:
        p = Path(raw)
        if not p.exists():
            logger.warning("No such file or directory: %s", p)
            result.missing.append(p)
            continue
        if p.is_dir():
            if not config.recursive:
                logger.warning("Skipping directory %s (use --recursive to descend)", p)
                result.skipped_dirs.append(p)
                continue
            candidates.update(_walk_directory(p, follow_symlinks=config.follow_symlinks))
        else:
            candidates.add(p)

    if config.exclude:
        spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, list(config.exclude))
        kept: set[Path] = set()
        for p in candidates:
            if spec.match_file(_rel_for_match(p, base)):
                logger.debug("Excluded by pattern: %s", p)
            else:
                kept.add(p)
        candidates = kept

    result.files = sorted(candidates)
    logger.debug("Resolved %d file(s)", len(result.files))
    return result
