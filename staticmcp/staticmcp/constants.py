"""staticmcp constants

Bundle layout, path encoding alphabet and generator defaults.
"""

# Bundle layout. The bridge resolves every request relative to the bundle root:
#   mcp.json
#   resources/{encoded uri}.json
#   tools/{tool}.json, tools/{tool}/{...}.json
MANIFEST_FILE = "mcp.json"
RESOURCES_DIR = "resources"
TOOLS_DIR = "tools"
JSON_SUFFIX = ".json"

SCHEME_SEPARATOR = "://"

# Characters that are unsafe in file names on common filesystems.
# Each one is replaced by PATH_REPLACEMENT, nothing else is touched.
UNSAFE_PATH_CHARS = '*?"<>|'
PATH_REPLACEMENT = "_"

FRONTMATTER_FENCE = "---"

MARKDOWN_MIME_TYPE = "text/markdown"
MARKDOWN_EXTENSIONS = (".md", ".mdx")

DOCUSAURUS_CONFIG_FILES = ("docusaurus.config.js", "docusaurus.config.ts")

DEFAULT_OUTPUT_DIR = "./staticmcp"
DEFAULT_SERVER_NAME = "Docusaurus StaticMCP Server"
DEFAULT_SERVER_VERSION = "1.0.0"
DEFAULT_PROTOCOL_VERSION = "2024-11-05"
DEFAULT_BASE_URI = "docs"
CONFIG_FILE = "staticmcp.yaml"


class ContentType:
    """Content type constants."""

    DOCS = "docs"
    BLOG = "blog"
    PAGES = "pages"

    ALL = [DOCS, BLOG, PAGES]

    # Source directory of each content type, relative to the site root
    SOURCE_DIRS = {
        DOCS: ("docs",),
        BLOG: ("blog",),
        PAGES: ("src", "pages"),
    }


class ToolName:
    """Operation names published in the manifest."""

    LIST_DOCS = "list_docs"
    GET_DOC = "get_doc"
    LIST_DOCS_BY_TAG = "list_docs_by_tag"

    ALL = [LIST_DOCS, GET_DOC, LIST_DOCS_BY_TAG]
