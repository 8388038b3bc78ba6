"""Setting descriptors and the values read or written for them."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from portablesettings.common.enums import SerializeAs


class SettingProperty(BaseModel):
    """Static description of one setting, supplied by the caller per access.

    Scope is plain data here: ``user_scoped`` decides whether the setting is
    persisted at all, ``roaming`` decides whether it lives in the shared
    ``Roaming`` subtree or the current machine's subtree.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Property name, unescaped")
    group: Optional[str] = Field(None, description="Owning settings group, informational")
    default_value: Optional[str] = Field(None, description="Serialized default value")
    user_scoped: bool = Field(True, description="Persist per user; False means application-scoped")
    roaming: bool = Field(False, description="Store under Roaming instead of the machine subtree")
    serialize_as: SerializeAs = Field(
        SerializeAs.STRING, description="Stored as plain text or as a nested XML element"
    )

    @property
    def default_or_empty(self) -> str:
        """Default value, with a missing default read back as an empty string."""
        return self.default_value if self.default_value is not None else ""


class SettingValue(BaseModel):
    """A setting paired with its serialized value.

    ``is_dirty`` is False on everything returned by ``get_values``;
    ``from_default`` tells whether the value came from the file or from
    the descriptor's default.
    """

    setting: SettingProperty
    serialized_value: Optional[str] = None
    is_dirty: bool = True
    from_default: bool = False

    @property
    def name(self) -> str:
        """Name of the underlying setting."""
        return self.setting.name
