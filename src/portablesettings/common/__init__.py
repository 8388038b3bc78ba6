"""Shared enumerations."""

from portablesettings.common.enums import SerializeAs

__all__ = ["SerializeAs"]
