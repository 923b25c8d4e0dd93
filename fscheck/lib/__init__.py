"""Host access helpers for fscheck."""

from fscheck.lib.filesystem import SnapshotError, take_snapshot, used_percent

__all__ = [
    "SnapshotError",
    "take_snapshot",
    "used_percent",
]
