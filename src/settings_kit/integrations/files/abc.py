"""Settings file reading abstraction for testing.

Input resolution decides between inline JSON and a file path based on how
the read fails, so the read is injected rather than done directly.
"""

from abc import ABC, abstractmethod


class SettingsFileReader(ABC):
    """Abstract file reads for dependency injection."""

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Read a settings file as UTF-8 text.

        Args:
            path: Filesystem path, exactly as the user gave it

        Returns:
            File contents

        Raises:
            FileNotFoundError: If nothing exists at path
            OSError: For any other read failure (permissions, I/O)
        """
        ...
