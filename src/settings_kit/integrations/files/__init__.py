from settings_kit.integrations.files.abc import SettingsFileReader
from settings_kit.integrations.files.fake import FakeSettingsFileReader
from settings_kit.integrations.files.real import RealSettingsFileReader

__all__ = [
    "FakeSettingsFileReader",
    "RealSettingsFileReader",
    "SettingsFileReader",
]
