"""Tests for the in-memory settings document."""

import pytest
from lxml import etree

from portablesettings.document.model import SettingsDocument, comment_safe

EXISTING = """<?xml version="1.0" encoding="utf-8"?>
<!--Portable settings file. Generated by OldApp v.1.2.3.-->
<configuration>
  <userSettings>
    <Roaming>
      <GroupA>
        <Language>de</Language>
      </GroupA>
    </Roaming>
    <PC_HOST>
      <GroupB>
        <Bounds><Rect><W>10</W></Rect></Bounds>
      </GroupB>
    </PC_HOST>
  </userSettings>
</configuration>
"""


def test_create_has_comment_and_empty_roaming() -> None:
    doc = SettingsDocument.create("App", "2.0")
    text = doc.to_string()

    assert doc.header_comment == "Portable settings file. Generated by App v.2.0."
    assert "<!--Portable settings file. Generated by App v.2.0.-->" in text
    assert [root.tag for root in doc.user_settings] == ["Roaming"]
    assert "<Roaming/>" in text


def test_parse_existing_document() -> None:
    doc = SettingsDocument.parse(EXISTING.encode("utf-8"))

    assert doc.header_comment == "Portable settings file. Generated by OldApp v.1.2.3."
    roaming = doc.scope_root("Roaming")
    assert roaming is not None
    group = doc.group(roaming, "GroupA")
    assert group is not None
    node = doc.property_node(group, "Language")
    assert node is not None and node.text == "de"
    assert doc.scope_root("PC_OTHER") is None


def test_header_comment_survives_round_trip() -> None:
    doc = SettingsDocument.parse(EXISTING)
    again = SettingsDocument.parse(doc.to_string())
    assert again.header_comment == "Portable settings file. Generated by OldApp v.1.2.3."


def test_parse_rejects_wrong_root() -> None:
    with pytest.raises(ValueError):
        SettingsDocument.parse("<settings><userSettings /></settings>")


def test_parse_rejects_malformed_xml() -> None:
    with pytest.raises(etree.XMLSyntaxError):
        SettingsDocument.parse("<configuration><userSettings>")


def test_parse_adds_missing_user_settings() -> None:
    doc = SettingsDocument.parse("<configuration />")
    assert doc.user_settings.tag == "userSettings"
    assert len(doc.root.findall("userSettings")) == 1


def test_ensure_is_idempotent() -> None:
    doc = SettingsDocument.create("App", "1.0")
    first = doc.ensure_scope_root("PC_HOST")
    second = doc.ensure_scope_root("PC_HOST")
    assert first is second

    group = doc.ensure_group(first, "Group")
    assert doc.ensure_group(first, "Group") is group
    prop = doc.ensure_property_node(group, "Prop")
    assert doc.ensure_property_node(group, "Prop") is prop

    assert len(doc.user_settings.findall("PC_HOST")) == 1
    assert len(first.findall("Group")) == 1
    assert len(group.findall("Prop")) == 1


def test_to_string_keeps_property_content_verbatim() -> None:
    doc = SettingsDocument.create("App", "1.0")
    roaming = doc.ensure_scope_root("Roaming")
    group = doc.ensure_group(roaming, "Group")
    prop = doc.ensure_property_node(group, "Bounds")
    prop.append(etree.fromstring("<Rect><W>10</W><H>20</H></Rect>"))

    text = doc.to_string()
    assert "<Bounds><Rect><W>10</W><H>20</H></Rect></Bounds>" in text
    assert "\n    <Roaming>" in text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("plain", "plain"),
        ("My--App", "My- -App"),
        ("a---b", "a- - -b"),
        ("ends-", "ends- "),
    ],
)
def test_comment_safe(text: str, expected: str) -> None:
    assert comment_safe(text) == expected


def test_header_comment_with_dashes_stays_well_formed() -> None:
    doc = SettingsDocument.create("My--App", "1.0-")
    text = doc.to_string()

    assert "--" not in text.split("<!--", 1)[1].split("-->", 1)[0]
    again = SettingsDocument.parse(text)
    assert again.header_comment == "Portable settings file. Generated by My- -App v.1.0-."


def test_carriage_returns_survive_round_trip() -> None:
    doc = SettingsDocument.create("App", "1.0")
    group = doc.ensure_group(doc.ensure_scope_root("Roaming"), "Group")
    doc.ensure_property_node(group, "Notes").text = "line one\r\nline two\r"

    text = doc.to_string()
    assert "\r" not in text

    again = SettingsDocument.parse(text)
    group = again.group(again.scope_root("Roaming"), "Group")
    assert again.property_node(group, "Notes").text == "line one\r\nline two\r"
