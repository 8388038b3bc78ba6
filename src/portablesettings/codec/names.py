"""Escaping of arbitrary names into valid XML local names.

Characters that may not appear in an XML local name are written as
``_xHHHH_`` (``_xHHHHHHHH_`` above the BMP). An underscore that would
otherwise start such a sequence is escaped too, which keeps the mapping
a bijection: ``decode_name(encode_local_name(s)) == s`` for every ``s``
and distinct names never share an encoding.
"""

from __future__ import annotations

import re
from typing import Final

_ESCAPE_RE: Final = re.compile(r"_x([0-9A-Fa-f]{8}|[0-9A-Fa-f]{4})_")

# NameStartChar ranges from XML 1.0 (fifth edition), ':' excluded
_NAME_START_RANGES: Final = (
    (ord("A"), ord("Z")),
    (ord("_"), ord("_")),
    (ord("a"), ord("z")),
    (0xC0, 0xD6),
    (0xD8, 0xF6),
    (0xF8, 0x2FF),
    (0x370, 0x37D),
    (0x37F, 0x1FFF),
    (0x200C, 0x200D),
    (0x2070, 0x218F),
    (0x2C00, 0x2FEF),
    (0x3001, 0xD7FF),
    (0xF900, 0xFDCF),
    (0xFDF0, 0xFFFD),
    (0x10000, 0xEFFFF),
)

_NAME_EXTRA_RANGES: Final = (
    (ord("-"), ord("-")),
    (ord("."), ord(".")),
    (ord("0"), ord("9")),
    (0xB7, 0xB7),
    (0x300, 0x36F),
    (0x203F, 0x2040),
)


def _in_ranges(code: int, ranges: tuple[tuple[int, int], ...]) -> bool:
    return any(low <= code <= high for low, high in ranges)


def _is_name_start_char(char: str) -> bool:
    return _in_ranges(ord(char), _NAME_START_RANGES)


def _is_name_char(char: str) -> bool:
    return _is_name_start_char(char) or _in_ranges(ord(char), _NAME_EXTRA_RANGES)


def _escape_char(char: str) -> str:
    code = ord(char)
    if code > 0xFFFF:
        return f"_x{code:08X}_"
    return f"_x{code:04X}_"


def is_valid_local_name(name: str) -> bool:
    """Return True if *name* can be used as an element name without escaping."""
    if not name:
        return False
    return _is_name_start_char(name[0]) and all(_is_name_char(c) for c in name[1:])


def encode_local_name(name: str) -> str:
    """Escape *name* into a valid XML local name.

    Args:
        name: Logical group or property name

    Returns:
        Element name; identical to *name* when nothing needed escaping

    Raises:
        ValueError: If *name* is empty
    """
    if not name:
        raise ValueError("Cannot encode an empty name as an XML element name")

    parts: list[str] = []
    for index, char in enumerate(name):
        if char == "_" and name[index + 1 : index + 2] == "x":
            parts.append(_escape_char(char))
        elif index == 0 and not _is_name_start_char(char):
            parts.append(_escape_char(char))
        elif index > 0 and not _is_name_char(char):
            parts.append(_escape_char(char))
        else:
            parts.append(char)
    return "".join(parts)


def _unescape(match: re.Match[str]) -> str:
    code = int(match.group(1), 16)
    if code > 0x10FFFF:
        return match.group(0)
    return chr(code)


def decode_name(name: str) -> str:
    """Reverse :func:`encode_local_name`."""
    return _ESCAPE_RE.sub(_unescape, name)
