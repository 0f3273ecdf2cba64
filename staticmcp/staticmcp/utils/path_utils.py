"""Filesystem helpers for reading sources and writing bundles.

Provides functions to:
- Ensure directories exist
- Convert source files to resource URI paths
- Join bundle-relative "/" paths onto a bundle root
- Serialize bundle JSON
"""

import json
import shutil
from pathlib import Path
from typing import Any

from staticmcp.constants import MARKDOWN_EXTENSIONS


def ensure_directory(path: Path) -> Path:
    """Ensure directory exists, creating it and all parents if necessary.

    Args:
        path: Directory path to ensure exists

    Returns:
        The path (for chaining)

    Raises:
        OSError: If directory cannot be created
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def ensure_parent_directory(file_path: Path) -> Path:
    """Ensure parent directory of file path exists.

    Args:
        file_path: File path whose parent should exist

    Returns:
        The file path (for chaining)
    """
    ensure_directory(Path(file_path).parent)
    return file_path


def reset_directory(path: Path) -> Path:
    """Remove a directory tree if present and recreate it empty."""
    path = Path(path)
    if path.exists():
        shutil.rmtree(path)
    return ensure_directory(path)


def strip_markdown_suffix(name: str) -> str:
    """Drop a trailing .md or .mdx extension."""
    for suffix in MARKDOWN_EXTENSIONS:
        if name.endswith(suffix):
            return name[: -len(suffix)]
    return name


def to_uri_path(file_path: Path, root: Path) -> str:
    """Relative, extension-less, forward-slash path of a document.

    Example:
        site/docs/api/auth.md (root=site) -> "docs/api/auth"
    """
    relative = Path(file_path).relative_to(root).as_posix()
    return strip_markdown_suffix(relative)


def bundle_file(bundle_dir: Path, relative_path: str) -> Path:
    """Resolve a "/"-separated bundle path under bundle_dir."""
    return Path(bundle_dir).joinpath(*relative_path.split("/"))


def dump_json(data: Any) -> str:
    """Serialize data the way every bundle file is written."""
    return json.dumps(data, indent=2, ensure_ascii=False)
