"""staticmcp generate <input> [--output dir] [--name name] [--version v] [--base-uri uri]"""

from staticmcp_cli.output import print_result


def register(subparsers):
    p = subparsers.add_parser("generate", help="Generate a static MCP bundle from a Docusaurus site")
    p.add_argument("input_path", help="Docusaurus site root")
    p.add_argument("--output", dest="output_dir",
                   help="Output directory (default: ./staticmcp)")
    p.add_argument("--name", dest="server_name",
                   help='Server name (default: "Docusaurus StaticMCP Server")')
    p.add_argument("--version", dest="server_version",
                   help="Server version (default: 1.0.0)")
    p.add_argument("--base-uri", dest="base_uri",
                   help="Base URI scheme for resources (default: docs)")
    p.add_argument("--protocol-version", dest="protocol_version",
                   help="MCP protocol version (default: 2024-11-05)")
    p.add_argument("--config", dest="config_path",
                   help="YAML config file (default: <input>/staticmcp.yaml if present)")
    p.set_defaults(handler=handle)


def handle(args):
    from staticmcp.config import load_options
    from staticmcp.generator import StaticMCPGenerator

    options = load_options(
        config_path=args.config_path,
        source_root=args.input_path,
        output_dir=args.output_dir,
        server_name=args.server_name,
        server_version=args.server_version,
        base_uri=args.base_uri,
        protocol_version=args.protocol_version,
    )
    report = StaticMCPGenerator(options).generate(args.input_path)
    print_result(report.to_dict())
    return 0
