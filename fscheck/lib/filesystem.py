"""Filesystem statistics for checks."""

from typing import TYPE_CHECKING

from fscheck.core.snapshot import BLOCK_SIZE, FilesystemSnapshot, InodeUsage

if TYPE_CHECKING:
    from fscheck.core.context import Context


class SnapshotError(Exception):
    """Filesystem statistics could not be obtained."""

    pass


def used_percent(used: int, available: int) -> int:
    """
    Percentage used, rounded up, as df reports it.

    Based on the space available to unprivileged users, so reserved
    blocks count as neither used nor available.
    """
    denominator = used + available
    if denominator <= 0:
        return 0
    return -(-100 * used // denominator)


def take_snapshot(
    path: str,
    context: "Context | None" = None,
) -> FilesystemSnapshot:
    """
    Measure block and inode usage of the filesystem holding path.

    A regular file resolves to its containing filesystem, like df. Whether
    path is really a mount point is not checked.

    Args:
        path: Mount point (or any path) to measure
        context: Execution context (for testing)

    Returns:
        FilesystemSnapshot in 1 KiB blocks

    Raises:
        SnapshotError: If path does not exist or cannot be statted (including
            paths holding a null byte)
    """
    if context is None:
        from fscheck.core.context import Context
        context = Context()

    try:
        st = context.statvfs(path)
    except FileNotFoundError:
        raise SnapshotError(f'File "{path}" not found!')
    except OSError as e:
        raise SnapshotError(f'Cannot stat "{path}": {e.strerror or e}')
    except ValueError as e:
        raise SnapshotError(f"Cannot stat {path!r}: {e}")

    fragment = st.f_frsize or st.f_bsize

    def to_blocks(count: int) -> int:
        return count * fragment // BLOCK_SIZE

    total = to_blocks(st.f_blocks)
    free = to_blocks(st.f_bfree)
    avail = to_blocks(st.f_bavail)
    used = total - free

    inodes = None
    # Some filesystems (NFS, FAT, ...) report no inode accounting at all.
    if st.f_files > 0:
        iused = st.f_files - st.f_ffree
        inodes = InodeUsage(
            total=st.f_files,
            used=iused,
            free=st.f_ffree,
            available=st.f_favail,
            used_percent=used_percent(iused, st.f_favail),
        )

    return FilesystemSnapshot(
        path=path,
        total_blocks=total,
        used_blocks=used,
        free_blocks=free,
        available_blocks=avail,
        used_percent=used_percent(used, avail),
        inodes=inodes,
    )
