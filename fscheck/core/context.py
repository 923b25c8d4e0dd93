"""Execution context for testability."""

import os
from pathlib import Path


class Context:
    """
    Wraps host calls for testability.

    In production: queries the real filesystem
    In tests: can be replaced with MockContext
    """

    def statvfs(self, path: str) -> os.statvfs_result:
        """
        Return raw filesystem statistics for the filesystem holding path.

        Raises:
            FileNotFoundError: If path does not exist
            OSError: If the filesystem cannot be queried
        """
        return os.statvfs(path)

    def read_file(self, path: str) -> str:
        """Read file contents."""
        return Path(path).read_text()

    def file_exists(self, path: str) -> bool:
        """Check if file exists."""
        return Path(path).exists()

    def get_env(self, key: str, default: str | None = None) -> str | None:
        """Get environment variable."""
        return os.environ.get(key, default)
