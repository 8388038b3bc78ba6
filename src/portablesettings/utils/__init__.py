"""Common utility functions for the portablesettings package."""

from portablesettings.utils.file import application_directory, remove_file, write_text_atomic

__all__ = [
    "application_directory",
    "remove_file",
    "write_text_atomic",
]
