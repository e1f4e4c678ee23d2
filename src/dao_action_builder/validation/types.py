"""
Solidity type grammar parser.

Turns an ABI type string such as ``uint256``, ``address[]``, ``bytes32[4][]``
or ``tuple[2]`` into a TypeDescriptor that the validators and normalizers
dispatch on.

Array dimensions are stored outermost first. In Solidity ``T[2][3]`` is an
array of three ``T[2]`` values, so its dimensions are ``(3, 2)``: the last
bracket group is the outermost array.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Sequence, Tuple

_ARRAY_SUFFIX_PATTERN = re.compile(r"^(.*?)((?:\[\d*\])+)$")
_DIMENSION_PATTERN = re.compile(r"\[(\d*)\]")

TUPLE_TYPE = "tuple"

Dimension = Optional[int]
"""A fixed array size, or None for a dynamic ``[]`` dimension."""


@dataclass(frozen=True)
class TypeDescriptor:
    """
    Parsed form of a Solidity type string.

    Attributes:
        base_type: Type left after all array suffixes are stripped
        is_array: Whether at least one array suffix is present
        array_dimensions: One entry per suffix, outermost first
        is_tuple: Whether the base type is ``tuple``
    """

    base_type: str
    is_array: bool = False
    array_dimensions: Tuple[Dimension, ...] = ()
    is_tuple: bool = False

    @property
    def expected_length(self) -> Optional[int]:
        """Required element count of the outermost dimension (None if dynamic)."""
        if not self.array_dimensions:
            return None
        return self.array_dimensions[0]

    def element_type(self) -> str:
        """
        Type string of one element of the outermost array.

        ``uint256[2][3]`` yields ``uint256[2]``; a single-dimension array
        yields its base type.
        """
        return format_type(self.base_type, self.array_dimensions[1:])


def format_type(base_type: str, dimensions: Sequence[Dimension] = ()) -> str:
    """Render a base type and outermost-first dimensions in Solidity syntax."""
    suffix = "".join(
        f"[{'' if dim is None else dim}]" for dim in reversed(tuple(dimensions))
    )
    return f"{base_type}{suffix}"


@lru_cache(maxsize=1024)
def parse_type(type_string: str) -> TypeDescriptor:
    """
    Parse a Solidity type string.

    Never raises: strings the grammar does not recognize come back as an
    opaque base type with no array or tuple markers, and the dispatcher
    decides what to do with them.

    Example:
        >>> parse_type("uint256[2][3]")
        TypeDescriptor(base_type='uint256', is_array=True, array_dimensions=(3, 2), is_tuple=False)
    """
    match = _ARRAY_SUFFIX_PATTERN.match(type_string)
    if not match:
        return TypeDescriptor(
            base_type=type_string,
            is_tuple=type_string == TUPLE_TYPE,
        )

    base_type, suffix = match.group(1), match.group(2)
    # Solidity writes the innermost dimension first
    dimensions = tuple(
        int(size) if size else None
        for size in reversed(_DIMENSION_PATTERN.findall(suffix))
    )
    return TypeDescriptor(
        base_type=base_type,
        is_array=True,
        array_dimensions=dimensions,
        is_tuple=base_type == TUPLE_TYPE,
    )
