"""Fixed names used in the portable settings document."""

from typing import Final

# Settings file written next to the running program
SETTINGS_FILE_NAME: Final = "portable.config"

# Structural element names
ROOT_ELEMENT: Final = "configuration"
USER_SETTINGS_ELEMENT: Final = "userSettings"

# Scope roots
ROAMING_SCOPE: Final = "Roaming"
MACHINE_SCOPE_PREFIX: Final = "PC_"

# Header comment template for freshly generated documents
HEADER_COMMENT_TEMPLATE: Final = "Portable settings file. Generated by {app_name} v.{version}."

DEFAULT_APPLICATION_NAME: Final = "PortableSettings"

# Library version, recorded in the header comment of new settings files
VERSION: Final = "1.0.0"
