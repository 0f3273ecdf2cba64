"""staticmcp resolve (--uri URI | --tool NAME [--args '{...}'])

Prints the bundle-relative path a bridge reads for a request.
"""

from staticmcp_cli.output import print_result, parse_args_json


def register(subparsers):
    p = subparsers.add_parser("resolve", help="Print the bundle path of a resource or tool call")
    target = p.add_mutually_exclusive_group(required=True)
    target.add_argument("--uri", help="Resource URI (e.g., docs://docs/intro)")
    target.add_argument("--tool", help="Tool name (e.g., list_docs)")
    p.add_argument("--args", default="{}", dest="args_json",
                   help="Tool arguments as JSON string (default: {})")
    p.set_defaults(handler=handle)


def handle(args):
    from staticmcp.encoding import resource_path, tool_path

    if args.uri is not None:
        print_result({"uri": args.uri, "path": resource_path(args.uri)})
    else:
        arguments = parse_args_json(args.args_json)
        print_result({
            "tool": args.tool,
            "arguments": arguments,
            "path": tool_path(args.tool, arguments),
        })
    return 0
