"""Probe discovery: find every regular file under a probe directory."""

import logging
import os
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)


def _is_regular_file(path: Path) -> bool:
    """True for regular files and for symlinks resolving to one."""
    try:
        return path.is_file()
    except OSError as e:
        logger.debug(f"Skipping unreadable entry {path}: {e}")
        return False


def discover_probes(root: Path) -> List[Path]:
    """
    Recursively collect probe files under root.

    Hidden files and directories are included. Symlinked directories are not
    descended into and dangling links are skipped. Entries that cannot be
    read are skipped without aborting the walk.

    Order is lexicographic within each directory, with a directory's files
    listed before its subdirectories' contents.

    Args:
        root: Probe directory

    Returns:
        List of probe paths, empty if root is missing or holds no files
    """
    root = Path(root)
    if not root.exists():
        logger.warning(f"Probe directory does not exist: {root}")
        return []
    if not root.is_dir():
        logger.warning(f"Probe path is not a directory: {root}")
        return []

    def _on_walk_error(error: OSError) -> None:
        logger.debug(f"Skipping unreadable directory: {error}")

    probes: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_walk_error):
        # os.walk honours in-place edits of dirnames for traversal order
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(dirpath) / name
            if _is_regular_file(path):
                probes.append(path)

    logger.debug(f"Discovered {len(probes)} probe(s) under {root}")
    return probes
