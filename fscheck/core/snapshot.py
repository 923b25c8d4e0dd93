"""Filesystem usage snapshot."""

from dataclasses import dataclass

# All block figures are in fixed 1 KiB units.
BLOCK_SIZE = 1024


@dataclass(frozen=True)
class InodeUsage:
    """Inode accounting for a filesystem that reports it."""

    total: int
    used: int
    free: int
    available: int
    used_percent: int


@dataclass(frozen=True)
class FilesystemSnapshot:
    """
    Block and inode usage of one filesystem at one instant.

    used + free == total is expected but never enforced; the numbers are
    passed through exactly as the provider reported them.
    """

    path: str
    total_blocks: int
    used_blocks: int
    free_blocks: int
    available_blocks: int
    used_percent: int
    inodes: InodeUsage | None = None

    @property
    def has_inodes(self) -> bool:
        """True if the filesystem reports inode accounting."""
        return self.inodes is not None
