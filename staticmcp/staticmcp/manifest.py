"""mcp.json manifest assembly."""

from typing import Any, Dict, List

from staticmcp.config import GeneratorOptions
from staticmcp.models import Catalog
from staticmcp.tools import StaticTool

REQUIRED_FIELDS = ["protocolVersion", "serverInfo", "capabilities"]


def build_manifest(
    options: GeneratorOptions, catalog: Catalog, tools: List[StaticTool]
) -> Dict[str, Any]:
    return {
        "protocolVersion": options.protocol_version,
        "serverInfo": {
            "name": options.server_name,
            "version": options.server_version,
        },
        "capabilities": {
            "resources": [resource.to_dict() for resource in catalog.resources],
            "tools": [tool.manifest_entry() for tool in tools],
        },
    }
