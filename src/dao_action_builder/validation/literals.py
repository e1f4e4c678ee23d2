"""
Text-literal helpers shared by the validators and normalizers.

Composite values travel as JSON text. Once a JSON array or object is parsed,
each element is turned back into text before it reaches a scalar validator,
so scalar validators only ever see strings.
"""

from __future__ import annotations

import json
import re
from typing import Any, Optional

_DECIMAL_PATTERN = re.compile(r"^[+-]?[0-9]+$")
_PREFIXED_PATTERN = re.compile(r"^0([xXoObB])([0-9a-fA-F]+)$")
_RADIX = {"x": 16, "o": 8, "b": 2}


def to_text(value: Any) -> str:
    """
    Render a parsed JSON value (or a caller-supplied Python value) as text.

    Strings pass through untouched, booleans become ``true``/``false``,
    and containers and None are re-serialized as compact JSON.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None or isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def parse_integer_literal(text: str) -> Optional[int]:
    """
    Parse an arbitrary-precision integer literal.

    Accepts signed decimal (``-42``) and unsigned ``0x``/``0o``/``0b``
    prefixed forms. Whitespace, underscores, fractions and exponents are
    rejected.

    Returns:
        The integer, or None when the text is not an integer literal.
    """
    if _DECIMAL_PATTERN.match(text):
        return int(text, 10)

    match = _PREFIXED_PATTERN.match(text)
    if not match:
        return None
    try:
        return int(match.group(2), _RADIX[match.group(1).lower()])
    except ValueError:
        # digits outside the radix, e.g. 0b102
        return None


def load_json(text: str) -> Any:
    """
    Parse JSON text; raises ValueError on malformed input.

    Fractional and exponent numerals (``1.5``, ``1e30``) stay as their source
    text so they never pass through a float.
    """
    return json.loads(text, parse_float=str)


def dump_json(value: Any) -> str:
    """Serialize a composite display value as compact JSON."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
