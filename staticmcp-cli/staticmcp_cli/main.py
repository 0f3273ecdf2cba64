"""staticmcp CLI entry point.

Verbs:
- generate: write a bundle from a Docusaurus site
- check: verify a bundle the way a bridge reads it
- resolve: show the path a request resolves to
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from staticmcp_cli.output import die
from staticmcp_cli.verbs import check, generate, resolve


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="staticmcp",
        description="Static MCP bundles for documentation sites",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="verb", required=True)

    generate.register(sub)
    check.register(sub)
    resolve.register(sub)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    from staticmcp.errors import StaticMCPError
    from staticmcp.utils.logger import get_logger

    if args.debug:
        os.environ["STATICMCP_DEBUG"] = "true"
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(name)s] %(levelname)s: %(message)s",
            stream=sys.stderr,
        )
    else:
        get_logger("staticmcp")

    try:
        return args.handler(args)
    except StaticMCPError as e:
        die(e.message)


if __name__ == "__main__":
    sys.exit(main())
