"""Exception classes and call outcomes for the portable settings engine.

Load and save failures are recovered inside the engine and never raised to
callers. They are recorded on an :class:`OperationStatus` instead, so a host
application can inspect or log what happened to a given call.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional

ParseFailureReason = Literal["unreadable", "invalid"]


class PortableSettingsError(Exception):
    """Base class for all portable settings errors."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            path: Settings file involved, when known
        """
        super().__init__(message if path is None else f"{message} ({path})")
        self.message: str = message
        self.path: Optional[Path] = path


class DocumentParseError(PortableSettingsError):
    """The settings file exists but could not be turned into a document.

    ``reason`` separates a file that could not be read at all (locked,
    permissions) from one whose content is not a valid settings document.
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        reason: ParseFailureReason = "invalid",
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize with parse failure details.

        Args:
            message: Description of the failure
            path: Settings file that failed to load
            reason: ``"unreadable"`` for I/O errors, ``"invalid"`` for bad content
            original_error: The original exception that was caught
        """
        super().__init__(message, path)
        self.reason: ParseFailureReason = reason
        self.original_error = original_error

    @property
    def is_transient(self) -> bool:
        """Whether the failure may go away on retry (read error, not bad XML)."""
        return self.reason == "unreadable"


class DocumentSaveError(PortableSettingsError):
    """The settings document could not be written.

    Never raised to callers; recorded on :attr:`OperationStatus.save_error`
    while the existing file is left as it was.
    """

    def __init__(
        self,
        message: str,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, path)
        self.original_error = original_error


class PreviousVersionNotSupportedError(PortableSettingsError, NotImplementedError):
    """Raised by ``get_previous_version``; older versions are never kept."""

    pass


@dataclass
class OperationStatus:
    """Outcome of one ``get_values``/``set_values`` batch.

    Attributes:
        loaded_from_file: True if an existing settings file was parsed
        load_error: Recovered parse failure, if the file had to be discarded
        saved: True if the document was written to disk
        save_error: Swallowed write failure, if any
    """

    loaded_from_file: bool = False
    load_error: Optional[DocumentParseError] = None
    saved: bool = False
    save_error: Optional[DocumentSaveError] = None

    @property
    def ok(self) -> bool:
        """True when nothing had to be recovered or swallowed."""
        return self.load_error is None and self.save_error is None
