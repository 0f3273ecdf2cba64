"""StaticMCP bundle generator.

Turns a Docusaurus source tree into a static bundle:

    {output_dir}/
        mcp.json
        resources/{encoded uri}.json
        tools/{tool}.json
        tools/{tool}/{encoded arguments}.json

Every file path comes from staticmcp.encoding, the same functions a bridge
uses to resolve live requests.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from staticmcp.config import GeneratorOptions
from staticmcp.constants import MANIFEST_FILE, RESOURCES_DIR, TOOLS_DIR
from staticmcp.encoding import resource_path, tool_path
from staticmcp.errors import ConfigError, ErrorCode, SourceDirectoryError
from staticmcp.manifest import build_manifest
from staticmcp.models import Catalog, GenerationReport, SourceDocument
from staticmcp.sources import collect_catalog, is_docusaurus_source
from staticmcp.tools import StaticTool, get_tools
from staticmcp.utils.path_utils import (
    bundle_file,
    dump_json,
    ensure_directory,
    ensure_parent_directory,
    reset_directory,
)

logger = logging.getLogger(__name__)


def resource_response(doc: SourceDocument) -> Dict[str, Any]:
    """Resource read result stored for one document."""
    content: Dict[str, Any] = {
        "uri": doc.resource.uri,
        "mimeType": doc.resource.mime_type,
        "text": doc.body,
    }
    if doc.metadata:
        content["metadata"] = doc.metadata
    return {"contents": [content]}


class BundleWriter:
    """Writes JSON files under a bundle root, at most once per path.

    Two payloads encoded to the same path are a collision: the first one
    is kept and the collision is recorded. Paths that would leave the
    bundle root are refused.
    """

    def __init__(self, root: Path):
        self.root = Path(root)
        self._resolved_root = self.root.resolve()
        self._written: Dict[str, str] = {}
        self.collisions: List[Dict[str, str]] = []

    @property
    def files(self) -> List[str]:
        return list(self._written)

    def write(self, relative_path: str, payload: Any, source: str = "") -> bool:
        """Write payload to relative_path. Returns False when skipped."""
        serialized = dump_json(payload)

        previous = self._written.get(relative_path)
        if previous is not None:
            if previous != serialized:
                logger.warning(f"Path collision at {relative_path} ({source}), keeping first")
                self.collisions.append({
                    "code": ErrorCode.PATH_COLLISION.value,
                    "path": relative_path,
                    "source": source,
                })
            return False

        target = bundle_file(self.root, relative_path)
        if not target.resolve().is_relative_to(self._resolved_root):
            logger.warning(f"Refusing to write outside the bundle: {relative_path} ({source})")
            return False

        ensure_parent_directory(target)
        target.write_text(serialized, encoding="utf-8")
        self._written[relative_path] = serialized
        logger.debug(f"Wrote {relative_path}")
        return True


class StaticMCPGenerator:
    """Generate a static MCP bundle from a Docusaurus site."""

    def __init__(
        self,
        options: Optional[GeneratorOptions] = None,
        tools: Optional[List[StaticTool]] = None,
    ):
        self.options = options or GeneratorOptions()
        self.tools = tools if tools is not None else get_tools()

    def generate(self, source_root: Union[str, Path]) -> GenerationReport:
        """Build the bundle for source_root into options.output_dir.

        Raises:
            SourceDirectoryError: source_root is not a Docusaurus site
            ConfigError: output_dir is source_root or one of its parents
        """
        source_root = Path(source_root)
        logger.info(f"Generating StaticMCP server from: {source_root}")

        if not is_docusaurus_source(source_root):
            raise SourceDirectoryError(
                "Not a Docusaurus source directory "
                "(missing docusaurus.config.js or docusaurus.config.ts)",
                details={"path": str(source_root)},
            )

        output_path = Path(self.options.output_dir)
        if source_root.resolve().is_relative_to(output_path.resolve()):
            raise ConfigError(
                "Output directory must not contain the source directory",
                details={"output_dir": str(output_path), "source": str(source_root)},
            )

        catalog = collect_catalog(source_root, self.options.base_uri)

        output_dir = reset_directory(output_path)
        writer = BundleWriter(output_dir)

        resources = self.write_resources(writer, catalog)
        writer.write(MANIFEST_FILE, build_manifest(self.options, catalog, self.tools), "manifest")
        responses = self.write_tool_responses(writer, catalog)

        logger.info(f"StaticMCP server generated at: {output_dir}")
        return GenerationReport(
            output_dir=str(output_dir),
            resources=resources,
            tool_responses=responses,
            files=writer.files,
            collisions=writer.collisions,
        )

    def write_resources(self, writer: BundleWriter, catalog: Catalog) -> int:
        ensure_directory(writer.root / RESOURCES_DIR)
        count = 0
        for doc in catalog:
            if writer.write(resource_path(doc.resource.uri), resource_response(doc), doc.resource.uri):
                count += 1
        return count

    def write_tool_responses(self, writer: BundleWriter, catalog: Catalog) -> int:
        """Pre-render every sample call of every tool."""
        count = 0
        for tool in self.tools:
            ensure_directory(writer.root / TOOLS_DIR / tool.name)
            for arguments in tool.sample_arguments(catalog):
                response = tool.handle(catalog, **arguments)
                if writer.write(tool_path(tool.name, arguments), response, f"{tool.name}({arguments})"):
                    count += 1
        return count
