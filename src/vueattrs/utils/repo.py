"""
Project root detection utility.

Finds the project root by searching upward for a .vueattrs/ directory so
that catalog paths in config resolve against the project, not the cwd.
"""

from pathlib import Path

CONFIG_DIR = ".vueattrs"


def find_repo_root(start: Path = None, marker: str = CONFIG_DIR) -> Path:
    """
    Find the nearest ancestor of start containing the marker directory.

    Args:
        start: Starting directory (default: cwd)
        marker: Directory name identifying the project root

    Returns:
        Path to the project root, or start itself if no ancestor has the
        marker (commands then rely on an explicit --catalog)
    """
    origin = (start or Path.cwd()).resolve()

    for candidate in (origin, *origin.parents):
        if (candidate / marker).is_dir():
            return candidate

    return origin
