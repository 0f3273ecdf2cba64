"""Operations published by a static bundle.

Each tool declares its MCP definition, the finite set of argument
combinations the generator pre-renders, and the response for a given
argument set. Responses use the MCP tool-result envelope:

    {"content": [{"type": "text", "text": "..."}]}
"""

import json
from typing import Any, Dict, List

from mcp.types import TextContent, Tool

from staticmcp.constants import ContentType, ToolName
from staticmcp.models import Catalog, SourceDocument

ALL_TYPES = "all"


def text_response(text: str) -> Dict[str, Any]:
    """Wrap text in a tool-result envelope."""
    content = TextContent(type="text", text=text)
    return {"content": [content.model_dump(exclude_none=True)]}


def resources_response(documents: List[SourceDocument]) -> Dict[str, Any]:
    return text_response(json.dumps([doc.resource.to_dict() for doc in documents], indent=2))


def normalize_tags(value: Any) -> List[str]:
    """Tags from a frontmatter value: a list, "a, b", or "[a, b]"."""
    if value is None:
        return []
    if isinstance(value, str):
        text = value.strip()
        if text.startswith("[") and text.endswith("]"):
            text = text[1:-1]
        parts = [p.strip().strip("'\"") for p in text.split(",")]
        return [p for p in parts if p]
    if isinstance(value, list):
        return [str(x).strip() for x in value if isinstance(x, (str, int, float)) and str(x).strip()]
    return []


class StaticTool:
    """Base class for pre-rendered tools."""

    name = ""
    description = ""

    def input_schema(self) -> Dict[str, Any]:
        return {"type": "object", "properties": {}}

    def definition(self) -> Tool:
        return Tool(name=self.name, description=self.description, inputSchema=self.input_schema())

    def manifest_entry(self) -> Dict[str, Any]:
        """Tool definition as published in mcp.json."""
        return self.definition().model_dump(by_alias=True, exclude_none=True)

    def sample_arguments(self, catalog: Catalog) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def handle(self, catalog: Catalog, **arguments: Any) -> Dict[str, Any]:
        raise NotImplementedError


class ListDocsTool(StaticTool):
    """List resources, optionally restricted to one content type."""

    name = ToolName.LIST_DOCS
    description = "List available documentation"

    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "type": {
                    "type": "string",
                    "enum": ContentType.ALL + [ALL_TYPES],
                    "description": "Type of content to list",
                }
            },
        }

    def sample_arguments(self, catalog: Catalog) -> List[Dict[str, Any]]:
        return [{}] + [{"type": value} for value in ContentType.ALL + [ALL_TYPES]]

    def handle(self, catalog: Catalog, **arguments: Any) -> Dict[str, Any]:
        content_type = arguments.get("type")
        if content_type == ALL_TYPES:
            content_type = None
        return resources_response(catalog.of_type(content_type))


class GetDocTool(StaticTool):
    """Return the markdown body of one resource."""

    name = ToolName.GET_DOC
    description = "Get the content of a documentation page by URI"

    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "uri": {"type": "string", "description": "Resource URI, e.g. docs://docs/intro"}
            },
            "required": ["uri"],
        }

    def sample_arguments(self, catalog: Catalog) -> List[Dict[str, Any]]:
        return [{"uri": doc.resource.uri} for doc in catalog]

    def handle(self, catalog: Catalog, **arguments: Any) -> Dict[str, Any]:
        uri = arguments["uri"]
        doc = catalog.find(uri)
        if doc is None:
            return text_response(f"Document not found: {uri}")
        return text_response(doc.body)


class ListDocsByTagTool(StaticTool):
    """List resources of one content type carrying a frontmatter tag."""

    name = ToolName.LIST_DOCS_BY_TAG
    description = "List documentation of a given type carrying a tag"

    def input_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "type": {
                    "type": "string",
                    "enum": ContentType.ALL,
                    "description": "Type of content to search",
                },
                "tag": {"type": "string", "description": "Frontmatter tag"},
            },
            "required": ["type", "tag"],
        }

    def sample_arguments(self, catalog: Catalog) -> List[Dict[str, Any]]:
        pairs = set()
        for doc in catalog:
            for tag in normalize_tags(doc.metadata.get("tags")):
                pairs.add((doc.content_type, tag))
        return [{"type": content_type, "tag": tag} for content_type, tag in sorted(pairs)]

    def handle(self, catalog: Catalog, **arguments: Any) -> Dict[str, Any]:
        tag = arguments["tag"]
        matches = [
            doc
            for doc in catalog.of_type(arguments["type"])
            if tag in normalize_tags(doc.metadata.get("tags"))
        ]
        return resources_response(matches)


def get_tools() -> List[StaticTool]:
    """Tools published by every bundle, in manifest order."""
    return [ListDocsTool(), GetDocTool(), ListDocsByTagTool()]
