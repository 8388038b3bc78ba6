"""In-memory settings document.

The tree always has the shape::

    configuration
      userSettings
        Roaming | PC_<machine>      scope roots
          <group>                   escaped group names
            <property>              escaped property names

Element names passed to this module are already escaped. Nothing here
touches the file system.
"""

from __future__ import annotations

from typing import Optional, Union

from lxml import etree

from portablesettings.constants import (
    HEADER_COMMENT_TEMPLATE,
    ROAMING_SCOPE,
    ROOT_ELEMENT,
    USER_SETTINGS_ELEMENT,
)

_INDENT = "  "


def _child(parent: etree._Element, tag: str) -> Optional[etree._Element]:
    """First direct child named *tag*, matched literally (no path syntax)."""
    return next((child for child in parent if child.tag == tag), None)


def _get_or_create(parent: etree._Element, tag: str) -> etree._Element:
    child = _child(parent, tag)
    if child is None:
        child = etree.SubElement(parent, tag)
    return child


def comment_safe(text: str) -> str:
    """Make *text* legal inside ``<!-- -->``: no ``--`` and no trailing ``-``."""
    while "--" in text:
        text = text.replace("--", "- -")
    if text.endswith("-"):
        text += " "
    return text


def settings_parser() -> etree.XMLParser:
    """Parser for settings files and XML values; no entity or network access."""
    return etree.XMLParser(resolve_entities=False, no_network=True)


class SettingsDocument:
    """Ephemeral tree of persisted settings.

    Built fresh for every get/set batch and discarded afterwards.
    """

    def __init__(self, root: etree._Element, header_comment: Optional[str] = None) -> None:
        """Wrap an existing ``configuration`` element.

        Args:
            root: The ``configuration`` element
            header_comment: Text of the leading comment, if any

        Raises:
            ValueError: If *root* is not a ``configuration`` element
        """
        if root.tag != ROOT_ELEMENT:
            raise ValueError(f"Expected <{ROOT_ELEMENT}> root element, got <{root.tag}>")
        self.root = root
        self.header_comment = header_comment
        self.user_settings = _get_or_create(root, USER_SETTINGS_ELEMENT)

    @classmethod
    def create(cls, app_name: str, version: str) -> SettingsDocument:
        """Create an empty document with the version comment and a ``Roaming`` root."""
        root = etree.Element(ROOT_ELEMENT)
        user_settings = etree.SubElement(root, USER_SETTINGS_ELEMENT)
        etree.SubElement(user_settings, ROAMING_SCOPE)
        comment = HEADER_COMMENT_TEMPLATE.format(app_name=app_name, version=version)
        return cls(root, header_comment=comment_safe(comment))

    # ---- scope roots ----
    def scope_root(self, name: str) -> Optional[etree._Element]:
        """Return the scope root *name* or None."""
        return _child(self.user_settings, name)

    def ensure_scope_root(self, name: str) -> etree._Element:
        """Return the scope root *name*, creating it if needed."""
        return _get_or_create(self.user_settings, name)

    # ---- groups ----
    @staticmethod
    def group(scope_root: etree._Element, name: str) -> Optional[etree._Element]:
        """Return group *name* under *scope_root* or None."""
        return _child(scope_root, name)

    @staticmethod
    def ensure_group(scope_root: etree._Element, name: str) -> etree._Element:
        """Return group *name* under *scope_root*, creating it if needed."""
        return _get_or_create(scope_root, name)

    # ---- properties ----
    @staticmethod
    def property_node(group: etree._Element, name: str) -> Optional[etree._Element]:
        """Return property *name* under *group* or None."""
        return _child(group, name)

    @staticmethod
    def ensure_property_node(group: etree._Element, name: str) -> etree._Element:
        """Return property *name* under *group*, appending it if needed."""
        return _get_or_create(group, name)

    # ---- serialization ----
    def _indent(self, elem: etree._Element, level: int) -> None:
        """Indent structural levels; property nodes keep their content verbatim."""
        pad = "\n" + _INDENT * level
        # configuration(0) > userSettings(1) > scope(2) > group(3) > property(4)
        if level < 4 and len(elem):
            elem.text = pad + _INDENT
            for child in elem:
                if isinstance(child.tag, str):
                    self._indent(child, level + 1)
                child.tail = pad + _INDENT
            elem[-1].tail = pad
        elif level < 4:
            elem.text = None

    def to_string(self) -> str:
        """Serialize the whole document, including the XML declaration and comment.

        Carriage returns are written as ``&#13;`` so the parser's end-of-line
        normalization does not turn them into line feeds on the next load.
        """
        self._indent(self.root, 0)
        body = etree.tostring(self.root, encoding="unicode").replace("\r", "&#13;")
        parts = ['<?xml version="1.0" encoding="utf-8"?>']
        if self.header_comment is not None:
            parts.append(f"<!--{comment_safe(self.header_comment)}-->")
        parts.append(body)
        return "\n".join(parts) + "\n"

    @classmethod
    def parse(cls, data: Union[str, bytes]) -> SettingsDocument:
        """Parse a serialized document from text or raw file bytes.

        Raises:
            lxml.etree.XMLSyntaxError: If *data* is not well-formed XML
            ValueError: If the root element is not ``configuration``
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        root = etree.fromstring(data, settings_parser())
        header: Optional[str] = None
        for sibling in root.itersiblings(preceding=True):
            if sibling.tag is etree.Comment:
                header = sibling.text
        return cls(root, header_comment=header)
