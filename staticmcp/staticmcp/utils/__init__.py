"""staticmcp utility modules."""

from staticmcp.utils.logger import get_logger, is_debug_enabled
from staticmcp.utils.path_utils import (
    bundle_file,
    dump_json,
    ensure_directory,
    ensure_parent_directory,
    reset_directory,
    to_uri_path,
)

__all__ = [
    "get_logger",
    "is_debug_enabled",
    "bundle_file",
    "dump_json",
    "ensure_directory",
    "ensure_parent_directory",
    "reset_directory",
    "to_uri_path",
]
