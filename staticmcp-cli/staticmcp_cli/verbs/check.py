"""staticmcp check <bundle> [--threshold 80]

Exits 0 when every section passes, 1 otherwise.
"""

from staticmcp_cli.output import print_result


def register(subparsers):
    p = subparsers.add_parser("check", help="Check a bundle for bridge compatibility")
    p.add_argument("bundle_path", help="Generated bundle directory")
    p.add_argument("--threshold", type=float, default=80.0,
                   help="Minimum compatibility rate per section, in percent (default: 80)")
    p.add_argument("--compact", action="store_true", help="Single-line JSON output")
    p.set_defaults(handler=handle)


def handle(args):
    from staticmcp.bridge import BridgeChecker

    report = BridgeChecker(args.bundle_path, threshold=args.threshold).run()
    print_result(report.to_dict(), compact=args.compact)
    return 0 if report.passed else 1
