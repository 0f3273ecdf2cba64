"""Subset YAML parser for frontmatter blocks.

Handles the practical subset found in documentation frontmatter:

    key: plain string
    key: "quoted string"        (no escape processing)
    key: 42 / 1.5 / true
    key: ["json", "array"]
    key: |                      literal block, newlines kept
    key: >                      folded block, joined with spaces
    key:                        block array of "- item" lines

Anything outside the subset degrades to a best-effort string. The parser
never raises.
"""

import json
import math
import re
from typing import Any, Dict, List, Optional, Tuple, Union

Scalar = Union[str, int, float, bool]

LITERAL_MARKER = "|"
FOLDED_MARKER = ">"
BLOCK_MARKERS = ("", LITERAL_MARKER, FOLDED_MARKER)

_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_RADIX_RE = re.compile(r"^0([xXoObB])([0-9a-fA-F]+)$")
_RADIX_BASES = {"x": 16, "o": 8, "b": 2}

# Largest integer a double represents exactly
_MAX_SAFE_INTEGER = 2**53 - 1


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip())


def parse_number(value: str) -> Optional[Union[int, float]]:
    """Parse a numeric scalar, or return None when value is not a number.

    Accepts decimal and exponent forms plus 0x/0o/0b integers. Integral
    values come back as int so "1.0" and "1" serialize the same way.
    """
    match = _RADIX_RE.match(value)
    if match:
        try:
            return int(match.group(2), _RADIX_BASES[match.group(1).lower()])
        except ValueError:
            return None

    if not _DECIMAL_RE.match(value):
        return None

    number = float(value)
    if math.isinf(number):
        return None
    if number.is_integer() and abs(number) <= _MAX_SAFE_INTEGER:
        return int(number)
    return number


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def load_strict_json(text: str) -> Any:
    """json.loads without the NaN and Infinity extensions."""
    return json.loads(text, parse_constant=_reject_constant)


def parse_scalar(value: str) -> Any:
    """Resolve a single-line value: JSON array, quoted, bool, number, string."""
    if value.startswith("[") and value.endswith("]"):
        try:
            return load_strict_json(value)
        except ValueError:
            pass  # not strict JSON, keep the raw text

    if len(value) >= 2 and value[0] in ("'", '"') and value.endswith(value[0]):
        return value[1:-1]

    if value == "true":
        return True
    if value == "false":
        return False

    number = parse_number(value)
    if number is not None:
        return number

    return value


def _ends_block(line: str, base_indent: int) -> bool:
    return _indent(line) < base_indent


def _read_block(lines: List[str], start: int, marker: str) -> Tuple[Any, int]:
    """Read a multi-line value for the key on lines[start].

    Returns (value, next_index) where next_index is the first line that
    was not consumed.
    """
    base_indent = 0
    for line in lines[start + 1:]:
        if line.strip():
            base_indent = _indent(line)
            break

    i = start + 1

    if marker == LITERAL_MARKER:
        collected: List[str] = []
        while i < len(lines):
            line = lines[i]
            if not line.strip():
                collected.append("")
            elif _ends_block(line, base_indent):
                break
            else:
                collected.append(line[base_indent:])
            i += 1
        return "\n".join(collected), i

    if marker == FOLDED_MARKER:
        words: List[str] = []
        while i < len(lines):
            line = lines[i]
            if line.strip():
                if _ends_block(line, base_indent):
                    break
                words.append(line.strip())
            i += 1
        return " ".join(words), i

    items: List[str] = []
    while i < len(lines):
        line = lines[i]
        stripped = line.strip()
        if stripped:
            if _ends_block(line, base_indent):
                break
            if stripped.startswith("- "):
                items.append(stripped[2:])
            elif items:
                # continuation of the previous item
                items[-1] += " " + stripped
        i += 1
    return items, i


def parse_yaml_subset(text: str) -> Dict[str, Any]:
    """Parse frontmatter text into a key/value mapping.

    Args:
        text: Lines between the frontmatter fences

    Returns:
        Mapping of key to scalar, list, or string. Later duplicate keys win.
    """
    result: Dict[str, Any] = {}
    lines = text.split("\n")

    i = 0
    while i < len(lines):
        line = lines[i].strip()
        if not line or line.startswith("#"):
            i += 1
            continue

        key, sep, value = line.partition(":")
        if not sep:
            i += 1
            continue

        key = key.strip()
        value = value.strip()

        if value in BLOCK_MARKERS:
            result[key], i = _read_block(lines, i, value)
            continue

        result[key] = parse_scalar(value)
        i += 1

    return result
