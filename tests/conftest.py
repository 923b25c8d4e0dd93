"""Shared test fixtures."""

import sys
from collections import namedtuple
from pathlib import Path

import pytest

# Add project root to path for package imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from fscheck.core.snapshot import FilesystemSnapshot, InodeUsage  # noqa: E402

# Same fields as os.statvfs_result
StatVfs = namedtuple(
    "StatVfs",
    "f_bsize f_frsize f_blocks f_bfree f_bavail f_files f_ffree f_favail f_flag f_namemax",
)


def make_statvfs(
    blocks: int = 1000,
    bfree: int = 400,
    bavail: int = 350,
    files: int = 500,
    ffree: int = 300,
    favail: int = 300,
    frsize: int = 1024,
) -> StatVfs:
    """Build a fake statvfs result; counts are in frsize units."""
    return StatVfs(
        f_bsize=frsize,
        f_frsize=frsize,
        f_blocks=blocks,
        f_bfree=bfree,
        f_bavail=bavail,
        f_files=files,
        f_ffree=ffree,
        f_favail=favail,
        f_flag=0,
        f_namemax=255,
    )


def make_snapshot(
    path: str = "/",
    total: int = 1000,
    used: int = 600,
    free: int = 400,
    avail: int = 350,
    per: int = 64,
    inodes: InodeUsage | None = None,
) -> FilesystemSnapshot:
    """Build a snapshot directly, without going through statvfs."""
    return FilesystemSnapshot(
        path=path,
        total_blocks=total,
        used_blocks=used,
        free_blocks=free,
        available_blocks=avail,
        used_percent=per,
        inodes=inodes,
    )


class MockContext:
    """Mock Context for testing checks without real system access."""

    def __init__(
        self,
        statvfs_results: dict[str, StatVfs | Exception] | None = None,
        file_contents: dict[str, str] | None = None,
        env: dict[str, str] | None = None,
    ):
        self.statvfs_results = statvfs_results or {}
        self.file_contents = file_contents or {}
        self.env = env or {}
        self.paths_statted: list[str] = []

    def statvfs(self, path: str) -> StatVfs:
        """Return mocked filesystem statistics."""
        self.paths_statted.append(path)
        if path not in self.statvfs_results:
            raise FileNotFoundError(2, "No such file or directory", path)

        result = self.statvfs_results[path]
        if isinstance(result, Exception):
            raise result
        return result

    def read_file(self, path: str) -> str:
        """Return mocked file content."""
        if path not in self.file_contents:
            raise FileNotFoundError(f"No mock content for: {path}")
        return self.file_contents[path]

    def file_exists(self, path: str) -> bool:
        """Check if path is in mocked files."""
        return path in self.file_contents

    def get_env(self, key: str, default: str | None = None) -> str | None:
        """Return mocked environment variable."""
        return self.env.get(key, default)


@pytest.fixture
def mock_context():
    """Factory fixture for creating MockContext instances."""
    def _create(**kwargs) -> MockContext:
        return MockContext(**kwargs)
    return _create


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with no project or user config files in scope."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    return tmp_path
