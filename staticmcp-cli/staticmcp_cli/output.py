"""Shared output utilities for CLI verbs."""

import json
import sys
from typing import Any, Dict, NoReturn


def print_result(result: Dict, compact: bool = False) -> None:
    """Print a result dict as JSON to stdout."""
    indent = None if compact else 2
    print(json.dumps(result, indent=indent, default=str, ensure_ascii=False))


def die(msg: str, code: int = 1) -> NoReturn:
    """Print error to stderr and exit."""
    print(f"error: {msg}", file=sys.stderr)
    sys.exit(code)


def parse_args_json(raw: str) -> Dict[str, Any]:
    """Parse a JSON arguments string, exiting on invalid JSON."""
    try:
        params = json.loads(raw)
    except json.JSONDecodeError as e:
        die(f"invalid JSON in --args: {e}")
    if not isinstance(params, dict):
        die("--args must be a JSON object")
    return params
