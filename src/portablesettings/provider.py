"""Portable settings provider.

Stores user-scoped settings in ``portable.config`` next to the running
program. The document is reloaded at the start of every batch and, for
writes, saved as a whole at the end, so several providers (in this process
or in others) can share one file without holding stale copies. Concurrent
writers are last-writer-wins: a save replaces the entire file, including
properties another writer changed since this batch loaded it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final, Iterable, Optional

from portablesettings.codec.names import encode_local_name
from portablesettings.codec.values import decode_value, encode_value
from portablesettings.document.store import DocumentStore
from portablesettings.errors import (
    DocumentSaveError,
    OperationStatus,
    PreviousVersionNotSupportedError,
)
from portablesettings.models.setting import SettingProperty, SettingValue
from portablesettings.options import ProviderOptions
from portablesettings.scope import ScopeResolver
from portablesettings.utils.file import remove_file

logger: Final = logging.getLogger(__name__)


class PortableSettingsProvider:
    """Settings engine backed by a single portable XML file.

    Loading and saving never raise: a broken file reads as empty and a
    failed save is dropped. The outcome of the latest batch is kept in
    :attr:`last_status` for callers that want to know.

    Examples:
        provider = PortableSettingsProvider()
        provider.initialize("MyApp")

        width = SettingProperty(name="Width", default_value="800")
        provider.set_values("MyApp.Settings", [SettingValue(setting=width, serialized_value="1024")])
        values = provider.get_values("MyApp.Settings", [width])
    """

    def __init__(self, options: Optional[ProviderOptions] = None) -> None:
        """Initialize the provider.

        Args:
            options: File location and labelling; defaults to the program directory
        """
        self.options = options or ProviderOptions()
        self.application_name = self.options.application_name
        self.resolver = ScopeResolver(self.options.current_machine())
        self.last_status = OperationStatus()

    @property
    def settings_file(self) -> Path:
        """Path of the settings file this provider reads and writes."""
        return self.options.settings_file

    @property
    def store(self) -> DocumentStore:
        """Store bound to the current file path and application name."""
        return DocumentStore(self.settings_file, self.application_name, self.options.version)

    def initialize(self, application_name: str) -> None:
        """Bind the provider to an application name.

        The name only labels newly generated files; it does not change the
        settings file location.
        """
        if application_name:
            self.application_name = application_name
        logger.debug(
            "Portable settings for %s stored at %s", self.application_name, self.settings_file
        )

    def get_values(
        self, group_name: str, properties: Iterable[SettingProperty]
    ) -> list[SettingValue]:
        """Read a batch of settings for one group.

        Args:
            group_name: Settings group, unescaped
            properties: Settings to read

        Returns:
            One value per requested setting, in order. Settings that are
            application-scoped or not stored yet carry their default.
        """
        status = OperationStatus()
        document = self.store.load(status)
        group = encode_local_name(group_name)

        values: list[SettingValue] = []
        for setting in properties:
            node = self.resolver.find(document, group, setting)
            if node is None:
                value = SettingValue(
                    setting=setting,
                    serialized_value=setting.default_or_empty,
                    is_dirty=False,
                    from_default=True,
                )
            else:
                value = SettingValue(
                    setting=setting,
                    serialized_value=decode_value(node, setting.serialize_as),
                    is_dirty=False,
                )
            values.append(value)

        self.last_status = status
        return values

    def set_values(self, group_name: str, values: Iterable[SettingValue]) -> OperationStatus:
        """Write a batch of settings for one group and save the file.

        Application-scoped values are skipped. Missing scope roots and
        groups are created.

        Args:
            group_name: Settings group, unescaped
            values: Values to store

        Returns:
            Outcome of the load and save; failures are reported here, not raised
        """
        status = OperationStatus()
        document = self.store.load(status)
        group = encode_local_name(group_name)

        for value in values:
            node = self.resolver.ensure(document, group, value.setting)
            if node is None:
                logger.debug("Skipping application-scoped setting %s", value.name)
                continue
            try:
                encode_value(node, value.serialized_value, value.setting.serialize_as)
            except ValueError as exc:
                # the whole batch is dropped; the file on disk stays as it was
                status.save_error = DocumentSaveError(
                    f"Value of {value.name} cannot be stored", self.settings_file, exc
                )
                logger.warning("Not saving settings to %s: %s", self.settings_file, exc)
                self.last_status = status
                return status

        self.store.save(document, status)
        self.last_status = status
        return status

    def reset(self) -> None:
        """Delete the settings file; a missing file is not an error."""
        try:
            if remove_file(self.settings_file):
                logger.info("Removed settings file %s", self.settings_file)
        except OSError as exc:
            logger.warning("Could not remove settings file %s: %s", self.settings_file, exc)

    def get_previous_version(self, group_name: str, setting: SettingProperty) -> SettingValue:
        """Not supported; earlier versions of settings are not kept."""
        raise PreviousVersionNotSupportedError(
            f"Previous versions are not available for {group_name}.{setting.name}"
        )

    def upgrade(self, group_name: str, properties: Iterable[SettingProperty]) -> None:
        """Do nothing; settings from earlier versions are not migrated."""
        return None
