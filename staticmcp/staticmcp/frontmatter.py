"""Frontmatter extraction for markdown documents.

Two block styles are recognized at the very start of a document, in order:

    ---                     {
    title: Intro              "title": "Intro"
    ---                     }
    body...                 body...

The dashed block is parsed with the subset YAML parser, the brace block as
a JSON object. A document without a recognizable block, or with a brace
block that is not valid JSON, has no metadata and keeps its full text as
the body.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict

from staticmcp.constants import FRONTMATTER_FENCE
from staticmcp.yaml_subset import load_strict_json, parse_yaml_subset

logger = logging.getLogger(__name__)

_YAML_BLOCK_RE = re.compile(
    r"^" + re.escape(FRONTMATTER_FENCE) + r"\s*\n(.*?)\n"
    + re.escape(FRONTMATTER_FENCE) + r"\s*\n(.*)\Z",
    re.DOTALL,
)
_JSON_BLOCK_RE = re.compile(r"^\{\s*\n(.*?)\n\}\s*\n(.*)\Z", re.DOTALL)


@dataclass(frozen=True)
class ParsedDocument:
    """Metadata mapping and remaining body of a document."""

    metadata: Dict[str, Any] = field(default_factory=dict)
    body: str = ""


def parse_frontmatter(text: str) -> ParsedDocument:
    """Split a document into (metadata, body).

    Never raises: absent or malformed metadata yields an empty mapping
    and the full text as body.
    """
    match = _YAML_BLOCK_RE.match(text)
    if match:
        return ParsedDocument(metadata=parse_yaml_subset(match.group(1)), body=match.group(2))

    match = _JSON_BLOCK_RE.match(text)
    if match:
        try:
            data = load_strict_json("{" + match.group(1) + "}")
        except ValueError as e:
            logger.warning(f"Failed to parse JSON frontmatter, treating as regular content: {e}")
        else:
            return ParsedDocument(metadata=data, body=match.group(2))

    return ParsedDocument(metadata={}, body=text)
