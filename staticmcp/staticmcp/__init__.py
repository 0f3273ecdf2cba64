"""staticmcp: static MCP bundles for documentation sites."""

__version__ = "0.1.0"

from staticmcp.encoding import (
    encode_resource_identifier,
    encode_tool_call,
    resource_path,
    tool_path,
)
from staticmcp.frontmatter import ParsedDocument, parse_frontmatter
from staticmcp.yaml_subset import parse_yaml_subset

__all__ = [
    "encode_resource_identifier",
    "encode_tool_call",
    "resource_path",
    "tool_path",
    "ParsedDocument",
    "parse_frontmatter",
    "parse_yaml_subset",
]
