"""Settings document model and its on-disk store."""

from portablesettings.document.model import SettingsDocument
from portablesettings.document.store import DocumentStore

__all__ = ["DocumentStore", "SettingsDocument"]
