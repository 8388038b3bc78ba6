"""Provider options: where the settings file lives and how it is labelled."""

from __future__ import annotations

import platform
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from portablesettings.constants import DEFAULT_APPLICATION_NAME, SETTINGS_FILE_NAME, VERSION
from portablesettings.utils.file import application_directory


class ProviderOptions(BaseModel):
    """Options for :class:`~portablesettings.provider.PortableSettingsProvider`.

    Every field has a default matching normal portable use: the file sits in
    the program's own directory and machine-local settings are keyed by the
    host name. Tests and embedding hosts override individual fields.
    """

    settings_dir: Optional[Path] = Field(
        None, description="Directory holding the settings file (default: program directory)"
    )
    file_name: str = Field(SETTINGS_FILE_NAME, min_length=1, description="Settings file name")
    application_name: str = Field(
        DEFAULT_APPLICATION_NAME, min_length=1, description="Name written into new files"
    )
    version: str = Field(VERSION, description="Version written into new files")
    machine_name: Optional[str] = Field(
        None, description="Machine identifier for local settings (default: host name)"
    )

    # ---- validators ----
    @field_validator("file_name")
    @classmethod
    def validate_file_name(cls, v: str) -> str:
        if "/" in v or "\\" in v or v in (".", ".."):
            raise ValueError("file_name must be a bare file name, not a path")
        return v

    @field_validator("machine_name")
    @classmethod
    def validate_machine_name(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("machine_name cannot be blank")
        return v

    # ---- convenience methods ----
    @property
    def settings_file(self) -> Path:
        """Full path of the settings file."""
        directory = self.settings_dir if self.settings_dir is not None else application_directory()
        return directory / self.file_name

    def current_machine(self) -> str:
        """Return the configured machine name, or this host's name."""
        return self.machine_name or platform.node() or "localhost"
