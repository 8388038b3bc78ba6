"""Descriptor and value models passed between the host application and the engine."""

from portablesettings.models.setting import SettingProperty, SettingValue

__all__ = ["SettingProperty", "SettingValue"]
