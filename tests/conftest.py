from pathlib import Path
from typing import Callable, Optional

import pytest

from portablesettings import PortableSettingsProvider, ProviderOptions, SerializeAs, SettingProperty

ProviderFactory = Callable[..., PortableSettingsProvider]


@pytest.fixture
def make_provider(tmp_path: Path) -> ProviderFactory:
    """Build providers sharing one settings directory, one per machine name."""

    def _make(machine_name: str = "M1", settings_dir: Optional[Path] = None) -> PortableSettingsProvider:
        options = ProviderOptions(
            settings_dir=settings_dir or tmp_path,
            application_name="TestApp",
            version="9.9.9",
            machine_name=machine_name,
        )
        return PortableSettingsProvider(options)

    return _make


@pytest.fixture
def provider(make_provider: ProviderFactory) -> PortableSettingsProvider:
    return make_provider()


@pytest.fixture
def local_text() -> SettingProperty:
    return SettingProperty(name="WindowTitle", default_value="Untitled")


@pytest.fixture
def local_xml() -> SettingProperty:
    return SettingProperty(
        name="Bounds", default_value="", serialize_as=SerializeAs.XML
    )


@pytest.fixture
def roaming_text() -> SettingProperty:
    return SettingProperty(name="Language", default_value="en", roaming=True)


@pytest.fixture
def app_scoped() -> SettingProperty:
    return SettingProperty(name="UpdateServer", default_value="https://example.invalid", user_scoped=False)
