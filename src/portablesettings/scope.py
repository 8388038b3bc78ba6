"""Mapping a setting to its place in the settings document."""

from __future__ import annotations

from typing import Optional

from lxml import etree

from portablesettings.codec.names import encode_local_name
from portablesettings.constants import MACHINE_SCOPE_PREFIX, ROAMING_SCOPE
from portablesettings.document.model import SettingsDocument
from portablesettings.models.setting import SettingProperty


def machine_scope_name(machine_name: str) -> str:
    """Return the scope root element name for *machine_name*."""
    return MACHINE_SCOPE_PREFIX + encode_local_name(machine_name)


class ScopeResolver:
    """Resolves settings to ``Roaming`` or ``PC_<machine>`` subtrees.

    Application-scoped settings have no location; callers check
    :meth:`is_persisted` first and skip them.
    """

    def __init__(self, machine_name: str) -> None:
        self.machine_scope = machine_scope_name(machine_name)

    @staticmethod
    def is_persisted(setting: SettingProperty) -> bool:
        """Only user-scoped settings are stored."""
        return setting.user_scoped

    def scope_root_name(self, setting: SettingProperty) -> str:
        """Name of the scope root *setting* belongs under."""
        return ROAMING_SCOPE if setting.roaming else self.machine_scope

    def find(
        self, document: SettingsDocument, group_name: str, setting: SettingProperty
    ) -> Optional[etree._Element]:
        """Look up the property node for *setting*.

        Args:
            document: Loaded settings document
            group_name: Escaped group element name
            setting: Setting to locate

        Returns:
            The property node, or None if the setting is not persisted or
            any level of its path is missing
        """
        if not self.is_persisted(setting):
            return None
        scope_root = document.scope_root(self.scope_root_name(setting))
        if scope_root is None:
            return None
        group = document.group(scope_root, group_name)
        if group is None:
            return None
        return document.property_node(group, encode_local_name(setting.name))

    def ensure(
        self, document: SettingsDocument, group_name: str, setting: SettingProperty
    ) -> Optional[etree._Element]:
        """Return the property node for *setting*, creating missing levels.

        Returns:
            The property node, or None if *setting* is not persisted
        """
        if not self.is_persisted(setting):
            return None
        scope_root = document.ensure_scope_root(self.scope_root_name(setting))
        group = document.ensure_group(scope_root, group_name)
        return document.ensure_property_node(group, encode_local_name(setting.name))
