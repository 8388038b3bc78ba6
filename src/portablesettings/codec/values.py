"""Property node content <-> serialized setting value."""

from __future__ import annotations

import re
from typing import Final, Optional
from xml.sax.saxutils import escape

from lxml import etree

from portablesettings.common.enums import SerializeAs
from portablesettings.document.model import settings_parser

# Characters outside the XML 1.0 Char production
_INVALID_XML_CHAR_RE: Final = re.compile(
    "[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)


def find_invalid_xml_char(text: str) -> Optional[str]:
    """Return the first character of *text* that XML 1.0 cannot hold, or None."""
    match = _INVALID_XML_CHAR_RE.search(text)
    return match.group(0) if match else None


def _replace_content(node: etree._Element) -> None:
    """Drop children, text and attributes of *node*, keeping its tail."""
    tail = node.tail
    node.clear()
    node.tail = tail


def decode_value(node: etree._Element, kind: SerializeAs) -> str:
    """Read the serialized value held by a property node.

    Args:
        node: Property element
        kind: Declared serialization kind of the property

    Returns:
        Plain text for ``STRING`` properties; for ``XML`` properties the
        raw inner markup, namespace declarations included, left for the
        caller to deserialize
    """
    if kind is SerializeAs.XML:
        text = node.text or ""
        inner = escape(text) if text.strip() else ""
        inner += "".join(etree.tostring(child, encoding="unicode") for child in node)
        return inner.strip()
    return node.text or ""


def encode_value(node: etree._Element, value: Optional[str], kind: SerializeAs) -> None:
    """Replace the content of a property node with *value*.

    Args:
        node: Property element to fill
        value: Serialized value; None is stored as empty text
        kind: Declared serialization kind of the property

    Raises:
        ValueError: If a ``STRING`` value contains characters XML cannot store
        lxml.etree.XMLSyntaxError: If an ``XML`` value is not a well-formed
            standalone element
    """
    if kind is SerializeAs.XML and value is not None:
        fragment = etree.fromstring(value.encode("utf-8"), settings_parser())
        fragment.tail = None
        _replace_content(node)
        node.append(fragment)
        return

    if value is not None:
        bad = find_invalid_xml_char(value)
        if bad is not None:
            raise ValueError(f"Character U+{ord(bad):04X} cannot be stored in an XML settings file")

    _replace_content(node)
    node.text = value if value is not None else ""
