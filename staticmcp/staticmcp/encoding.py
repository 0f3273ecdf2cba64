"""Canonical bundle paths for resources and tool calls.

This module is the wire contract between the generator, which writes
pre-rendered responses, and any bridge that later resolves live requests
to files. Both sides must call the same functions; a change here is a
breaking change to every published bundle.

Resource identifiers:
    docs://guides/intro      -> guides/intro
    a*b?                     -> a_b_

Tool calls, relative to the tools directory:
    list_docs {}                       -> list_docs.json
    list_docs {type: docs}             -> list_docs/docs.json
    get_doc {uri: docs://x/y}          -> get_doc/x/y.json
    find {type: docs, tag: api}        -> find/api/docs.json   (values sorted)
    search {a: 1, b: 2, c: 3}          -> search/YT0xJmI9MiZjPTM.json

Values are rendered the way JavaScript renders them (true, 1, 1.5, compact
JSON), since bridges in other runtimes were written against that form.
"""

import base64
import json
import math
from decimal import Decimal
from typing import Any, Mapping

from staticmcp.constants import (
    JSON_SUFFIX,
    PATH_REPLACEMENT,
    RESOURCES_DIR,
    SCHEME_SEPARATOR,
    TOOLS_DIR,
    UNSAFE_PATH_CHARS,
)

_UNSAFE_TABLE = str.maketrans({char: PATH_REPLACEMENT for char in UNSAFE_PATH_CHARS})

# Above this magnitude JavaScript switches integers to exponent notation
_MAX_PLAIN_INTEGER = 10**21
_NON_FINITE = ("NaN", "Infinity", "-Infinity")


def replace_unsafe_chars(text: str) -> str:
    """Replace each of * ? " < > | with an underscore."""
    return text.translate(_UNSAFE_TABLE)


def strip_scheme(identifier: str) -> str:
    """Return the part after "://" when the identifier has exactly one."""
    parts = identifier.split(SCHEME_SEPARATOR)
    if len(parts) == 2:
        return parts[1]
    return identifier


def encode_resource_identifier(identifier: str) -> str:
    """Map a resource URI (or bare path) to its bundle path, without suffix."""
    return replace_unsafe_chars(strip_scheme(identifier))


def resource_path(identifier: str) -> str:
    """Bundle-relative file path of a stored resource."""
    return f"{RESOURCES_DIR}/{encode_resource_identifier(identifier)}{JSON_SUFFIX}"


def format_number(value: Any) -> str:
    """Render an int or float like JavaScript's Number.prototype.toString."""
    if isinstance(value, int):
        if abs(value) < _MAX_PLAIN_INTEGER:
            return str(value)
        try:
            value = float(value)
        except OverflowError:
            value = math.inf if value > 0 else -math.inf

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < _MAX_PLAIN_INTEGER:
        # Shortest round-trip digits, not the exact binary value
        text = format(Decimal(repr(value)), "f")
        return text[:-2] if text.endswith(".0") else text

    text = repr(value)
    if "e" not in text:
        return text

    mantissa, exponent = text.split("e")
    power = int(exponent)
    if -7 < power < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def _compact_json(value: Any) -> str:
    # Matches JSON.stringify: no whitespace, insertion order, non-ASCII kept.
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return json_string(value)
    if isinstance(value, (int, float)):
        text = format_number(value)
        return "null" if text in _NON_FINITE else text
    if isinstance(value, Mapping):
        pairs = (
            f"{json_string(key if isinstance(key, str) else stringify_argument(key))}:{_compact_json(item)}"
            for key, item in value.items()
        )
        return "{" + ",".join(pairs) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_compact_json(item) for item in value) + "]"
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def json_string(text: str) -> str:
    """Quote a string as a JSON string literal, leaving non-ASCII as is."""
    return json.dumps(text, ensure_ascii=False)


def stringify_argument(value: Any) -> str:
    """Render a tool argument value as text.

    Strings are used verbatim, numbers and booleans in their canonical
    form, anything else as compact JSON.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    return _compact_json(value)


def _encode_segment(value: Any) -> str:
    if isinstance(value, str):
        # Resource URIs passed as arguments land on the resource's own path
        return encode_resource_identifier(value)
    return replace_unsafe_chars(stringify_argument(value))


def _utf16_key(text: str) -> bytes:
    # JavaScript compares strings by UTF-16 code unit
    return text.encode("utf-16-be", "surrogatepass")


def hash_arguments(arguments: Mapping[str, Any]) -> str:
    """Encode an argument set as an unpadded base64 segment.

    Arguments are sorted by name and joined as name=value pairs with "&";
    "/" and "+" become "_" so the result is a single path segment.
    """
    canonical = "&".join(
        f"{name}={stringify_argument(arguments[name])}" for name in sorted(arguments)
    )
    encoded = base64.b64encode(canonical.encode("utf-8")).decode("ascii")
    return encoded.replace("/", "_").replace("+", "_").replace("=", "")


def encode_tool_call(tool_name: str, arguments: Mapping[str, Any]) -> str:
    """Map a tool call to its path relative to the tools directory.

    Args:
        tool_name: Operation name, also the name of its directory
        arguments: Named call arguments

    Returns:
        Relative path with "/" separators and a .json suffix
    """
    if not arguments:
        return f"{tool_name}{JSON_SUFFIX}"

    if len(arguments) == 1:
        (value,) = arguments.values()
        return f"{tool_name}/{_encode_segment(value)}{JSON_SUFFIX}"

    if len(arguments) == 2:
        first, second = sorted(
            (_encode_segment(value) for value in arguments.values()), key=_utf16_key
        )
        return f"{tool_name}/{first}/{second}{JSON_SUFFIX}"

    return f"{tool_name}/{hash_arguments(arguments)}{JSON_SUFFIX}"


def tool_path(tool_name: str, arguments: Mapping[str, Any]) -> str:
    """Bundle-relative file path of a pre-rendered tool response."""
    return f"{TOOLS_DIR}/{encode_tool_call(tool_name, arguments)}"
