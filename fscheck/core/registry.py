"""Check type registry: the fixed table of metrics fscheck can alert on."""

import enum
from dataclasses import dataclass
from typing import Callable

from fscheck.core.snapshot import FilesystemSnapshot


class UnknownMetricError(Exception):
    """Requested check type is not in the registry."""

    pass


class Direction(enum.Enum):
    """Which side of a threshold is the failure side."""

    CEILING = "ceiling"  # alert when value >= threshold
    FLOOR = "floor"  # alert when value <= threshold

    @property
    def operator(self) -> str:
        return "≥" if self is Direction.CEILING else "≤"

    def breached(self, value: int, threshold: float) -> bool:
        if self is Direction.CEILING:
            return value >= threshold
        return value <= threshold


@dataclass(frozen=True)
class MetricDescriptor:
    """One check type and how to measure it."""

    key: str
    extract: Callable[[FilesystemSnapshot], int]
    direction: Direction
    unit: str
    label: str
    requires_inodes: bool = False

    def describe(self, value: int) -> str:
        """Format a measured value, e.g. '42% used' or '1200 free inodes'."""
        return f"{value}{self.unit} {self.label}"


def percent_of(part: int, whole: int) -> int:
    """Integer percentage, truncated. A zero-sized whole yields 0."""
    if whole <= 0:
        return 0
    return 100 * part // whole


_KB = "kB"
_PCT = "%"

# Listing order matches the historical check_fs help output.
METRICS: dict[str, MetricDescriptor] = {
    m.key: m
    for m in (
        MetricDescriptor("total", lambda s: s.total_blocks, Direction.CEILING, _KB, "total"),
        MetricDescriptor("used", lambda s: s.used_blocks, Direction.CEILING, _KB, "used"),
        MetricDescriptor(
            "perfree", lambda s: 100 - s.used_percent, Direction.FLOOR, _PCT, "free"
        ),
        MetricDescriptor("free", lambda s: s.free_blocks, Direction.FLOOR, _KB, "free"),
        MetricDescriptor("avail", lambda s: s.available_blocks, Direction.FLOOR, _KB, "available"),
        MetricDescriptor(
            "peravail",
            lambda s: percent_of(s.available_blocks, s.total_blocks),
            Direction.FLOOR,
            _PCT,
            "available",
        ),
        MetricDescriptor("per", lambda s: s.used_percent, Direction.CEILING, _PCT, "used"),
        MetricDescriptor(
            "itotal", lambda s: s.inodes.total, Direction.CEILING, "", "total inodes", True
        ),
        MetricDescriptor(
            "iused", lambda s: s.inodes.used, Direction.CEILING, "", "used inodes", True
        ),
        MetricDescriptor(
            "perifree",
            lambda s: 100 - s.inodes.used_percent,
            Direction.FLOOR,
            _PCT,
            "free inodes",
            True,
        ),
        MetricDescriptor(
            "periavail",
            lambda s: percent_of(s.inodes.available, s.inodes.total),
            Direction.FLOOR,
            _PCT,
            "available inodes",
            True,
        ),
        MetricDescriptor(
            "ifree", lambda s: s.inodes.free, Direction.FLOOR, "", "free inodes", True
        ),
        MetricDescriptor(
            "iavail", lambda s: s.inodes.available, Direction.FLOOR, "", "available inodes", True
        ),
        MetricDescriptor(
            "iper", lambda s: s.inodes.used_percent, Direction.CEILING, _PCT, "used inodes", True
        ),
    )
}


def metric_keys() -> list[str]:
    """All valid check type keys, in listing order."""
    return list(METRICS)


def resolve(key: str) -> MetricDescriptor:
    """
    Look up a check type.

    Args:
        key: Check type key, e.g. 'per' or 'ifree'

    Returns:
        The matching MetricDescriptor

    Raises:
        UnknownMetricError: If the key is not registered. The message lists
            every valid key, so '-t list' doubles as a listing.
    """
    try:
        return METRICS[key]
    except KeyError:
        choices = " ".join(f'"{k}"' for k in METRICS)
        raise UnknownMetricError(
            f'Unknown check type: "{key}". Check types are: {choices}'
        ) from None
