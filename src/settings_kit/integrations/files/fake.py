"""Fake settings file reader for testing.

FakeSettingsFileReader serves files from memory and records every read, so
tests can assert whether resolution touched the filesystem at all.
"""

import errno

from settings_kit.integrations.files.abc import SettingsFileReader


class FakeSettingsFileReader(SettingsFileReader):
    """In-memory fake implementation that tracks reads.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        files: dict[str, str] | None = None,
        errors: dict[str, OSError] | None = None,
    ) -> None:
        """Create FakeSettingsFileReader.

        Args:
            files: Mapping of path to file contents
            errors: Mapping of path to the error reading it should raise
        """
        self._files = files or {}
        self._errors = errors or {}
        self._read_calls: list[str] = []

    @property
    def read_calls(self) -> list[str]:
        """Get the paths passed to read_text(), in order.

        This property is for test assertions only.
        """
        return self._read_calls

    def read_text(self, path: str) -> str:
        self._read_calls.append(path)
        if path in self._errors:
            raise self._errors[path]
        if path not in self._files:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        return self._files[path]
