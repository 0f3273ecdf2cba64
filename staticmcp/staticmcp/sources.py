"""Docusaurus source discovery.

Walks the content sections of a Docusaurus site (docs/, blog/, src/pages/),
parses each markdown document and gathers the results into a Catalog.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Tuple

from staticmcp.constants import DOCUSAURUS_CONFIG_FILES, MARKDOWN_EXTENSIONS, ContentType
from staticmcp.frontmatter import parse_frontmatter
from staticmcp.models import Catalog, Resource, SourceDocument
from staticmcp.utils.path_utils import to_uri_path

logger = logging.getLogger(__name__)


def is_docusaurus_source(root: Path) -> bool:
    """True when the directory holds a docusaurus.config.js/.ts file."""
    return any((Path(root) / name).is_file() for name in DOCUSAURUS_CONFIG_FILES)


def iter_content_dirs(root: Path) -> Iterator[Tuple[str, Path]]:
    """Yield (content_type, directory) for each section present under root."""
    for content_type in ContentType.ALL:
        section = Path(root).joinpath(*ContentType.SOURCE_DIRS[content_type])
        if section.is_dir():
            yield content_type, section


def find_markdown_files(directory: Path) -> List[Path]:
    """All .md/.mdx files below directory, in a stable order."""
    return sorted(
        path
        for path in Path(directory).rglob("*")
        if path.is_file() and path.name.endswith(MARKDOWN_EXTENSIONS)
    )


def build_resource(
    uri: str, file_path: Path, content_type: str, metadata: dict
) -> Resource:
    title = metadata.get("title")
    name = title or file_path.stem
    description = metadata.get("description") or f"{content_type} content: {title or 'Untitled'}"
    return Resource(uri=uri, name=str(name), description=str(description))


def load_document(
    file_path: Path, root: Path, content_type: str, base_uri: str
) -> SourceDocument:
    """Parse one markdown file into a SourceDocument.

    The resource URI is "{base_uri}://{path relative to root}" without the
    markdown extension, e.g. docs://docs/guides/deployment.
    """
    text = Path(file_path).read_text(encoding="utf-8", errors="replace")
    parsed = parse_frontmatter(text)
    uri = f"{base_uri}://{to_uri_path(file_path, root)}"

    return SourceDocument(
        resource=build_resource(uri, Path(file_path), content_type, parsed.metadata),
        content_type=content_type,
        metadata=parsed.metadata,
        body=parsed.body,
    )


def collect_catalog(root: Path, base_uri: str) -> Catalog:
    """Gather every document of the site into an immutable Catalog."""
    root = Path(root)
    documents: List[SourceDocument] = []

    for content_type, section in iter_content_dirs(root):
        files = find_markdown_files(section)
        logger.info(f"Processing {len(files)} {content_type} file(s) in {section}")
        for file_path in files:
            documents.append(load_document(file_path, root, content_type, base_uri))

    return Catalog(documents=tuple(documents))
