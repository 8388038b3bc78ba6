"""Loading and saving the settings document.

Neither direction raises on I/O or parse problems. A file that cannot be
parsed is treated as absent and replaced with a fresh document on the next
save; a save that fails leaves the previous file untouched. Both outcomes
are logged and recorded on the :class:`OperationStatus` passed in.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final, Optional

from lxml import etree

from portablesettings.document.model import SettingsDocument
from portablesettings.errors import DocumentParseError, DocumentSaveError, OperationStatus
from portablesettings.utils.file import write_text_atomic

logger: Final = logging.getLogger(__name__)


class DocumentStore:
    """Reads and writes one settings file as a whole."""

    def __init__(self, path: Path, app_name: str, version: str) -> None:
        """Initialize the store.

        Args:
            path: Settings file location
            app_name: Application name for freshly created documents
            version: Version string for freshly created documents
        """
        self.path = path
        self.app_name = app_name
        self.version = version

    def new_document(self) -> SettingsDocument:
        """Synthesize an empty document without touching disk."""
        return SettingsDocument.create(self.app_name, self.version)

    def load(self, status: Optional[OperationStatus] = None) -> SettingsDocument:
        """Load the settings file, or synthesize a new document.

        Args:
            status: Outcome record to fill in

        Returns:
            Parsed document, or a fresh one if the file is missing or broken
        """
        status = status if status is not None else OperationStatus()

        if not self.path.exists():
            logger.debug("Settings file %s not found, starting empty", self.path)
            return self.new_document()

        try:
            data = self.path.read_bytes()
        except OSError as exc:
            status.load_error = DocumentParseError(
                "Settings file could not be read", self.path, "unreadable", exc
            )
            logger.warning("Discarding unreadable settings file %s: %s", self.path, exc)
            return self.new_document()

        try:
            document = SettingsDocument.parse(data)
        except (etree.XMLSyntaxError, ValueError) as exc:
            status.load_error = DocumentParseError(
                "Settings file is not a valid settings document", self.path, "invalid", exc
            )
            logger.warning("Discarding invalid settings file %s: %s", self.path, exc)
            return self.new_document()

        status.loaded_from_file = True
        return document

    def save(self, document: SettingsDocument, status: Optional[OperationStatus] = None) -> bool:
        """Write *document* over the settings file.

        Args:
            document: Document to persist
            status: Outcome record to fill in

        Returns:
            True if the file was written
        """
        status = status if status is not None else OperationStatus()
        try:
            write_text_atomic(self.path, document.to_string())
        except OSError as exc:
            status.save_error = DocumentSaveError("Settings file could not be written", self.path, exc)
            logger.warning("Failed to save settings to %s: %s", self.path, exc)
            return False

        status.saved = True
        return True
