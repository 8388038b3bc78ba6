"""Portable settings persistence.

This package provides:
- PortableSettingsProvider: read/write settings in ``portable.config``
- SettingProperty / SettingValue: descriptors and values exchanged with it
- ProviderOptions: file location and labelling
"""

from portablesettings.common.enums import SerializeAs
from portablesettings.constants import VERSION
from portablesettings.errors import (
    DocumentParseError,
    DocumentSaveError,
    OperationStatus,
    PortableSettingsError,
    PreviousVersionNotSupportedError,
)
from portablesettings.models.setting import SettingProperty, SettingValue
from portablesettings.options import ProviderOptions
from portablesettings.provider import PortableSettingsProvider

__version__ = VERSION

__all__ = [
    "DocumentParseError",
    "DocumentSaveError",
    "OperationStatus",
    "PortableSettingsError",
    "PortableSettingsProvider",
    "PreviousVersionNotSupportedError",
    "ProviderOptions",
    "SerializeAs",
    "SettingProperty",
    "SettingValue",
]
