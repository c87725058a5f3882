"""Real settings file reader using pathlib."""

import errno
from pathlib import Path

from settings_kit.integrations.files.abc import SettingsFileReader


class RealSettingsFileReader(SettingsFileReader):
    """Production implementation reading from the local filesystem."""

    def read_text(self, path: str) -> str:
        """Read path as UTF-8 text.

        An empty path names no file, so it is reported as not found rather
        than resolving to the current directory. So is a name too long for
        the filesystem, which cannot exist.
        """
        if not path:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        try:
            return Path(path).read_text(encoding="utf-8")
        except OSError as e:
            if e.errno == errno.ENAMETOOLONG:
                raise FileNotFoundError(errno.ENOENT, "No such file or directory", path) from e
            raise
