"""Data model for the gather phase and generation results."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

from staticmcp.constants import MARKDOWN_MIME_TYPE


@dataclass(frozen=True)
class Resource:
    """One addressable document as advertised in the manifest."""

    uri: str
    name: str
    description: str
    mime_type: str = MARKDOWN_MIME_TYPE

    def to_dict(self) -> Dict[str, str]:
        """Manifest form (MCP field names)."""
        return {
            "uri": self.uri,
            "name": self.name,
            "description": self.description,
            "mimeType": self.mime_type,
        }


@dataclass(frozen=True)
class SourceDocument:
    """A parsed document and the resource it publishes."""

    resource: Resource
    content_type: str
    metadata: Dict[str, Any]
    body: str


@dataclass(frozen=True)
class Catalog:
    """Every document of a site, gathered before anything is rendered.

    Built once by the source walker and shared read-only by the manifest
    and tool renderers.
    """

    documents: Tuple[SourceDocument, ...] = ()

    def __iter__(self) -> Iterator[SourceDocument]:
        return iter(self.documents)

    def __len__(self) -> int:
        return len(self.documents)

    @property
    def resources(self) -> List[Resource]:
        return [doc.resource for doc in self.documents]

    def of_type(self, content_type: Optional[str]) -> List[SourceDocument]:
        """Documents of one content type, or all when content_type is None."""
        if content_type is None:
            return list(self.documents)
        return [doc for doc in self.documents if doc.content_type == content_type]

    def find(self, uri: str) -> Optional[SourceDocument]:
        for doc in self.documents:
            if doc.resource.uri == uri:
                return doc
        return None


@dataclass
class GenerationReport:
    """Summary of a generator run."""

    output_dir: str
    resources: int = 0
    tool_responses: int = 0
    files: List[str] = field(default_factory=list)
    collisions: List[Dict[str, str]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": "success",
            "output_dir": self.output_dir,
            "resources": self.resources,
            "tool_responses": self.tool_responses,
            "files": len(self.files),
            "collisions": self.collisions,
        }
