"""Performance data in the monitoring-plugin convention.

Every token reads 'label'=value[UOM];warn;crit;min;max. Block figures are
published in bytes, inode figures as bare counts. All measured quantities
are published whatever check type raised the alert, so they can be graphed.
"""

from dataclasses import dataclass

from fscheck.core.snapshot import BLOCK_SIZE, FilesystemSnapshot


def format_number(value: int | float) -> str:
    """Render a number without a spurious '.0'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class PerfDatum:
    """A single performance data token."""

    label: str
    value: int
    uom: str = ""
    warn: int | float | None = None
    crit: int | float | None = None
    min: int | None = None
    max: int | None = None

    def __str__(self) -> str:
        fields = [f"{self.value}{self.uom}"]
        fields.append("" if self.warn is None else format_number(self.warn))
        fields.append("" if self.crit is None else format_number(self.crit))
        if self.min is not None or self.max is not None:
            fields.append("" if self.min is None else str(self.min))
            fields.append("" if self.max is None else str(self.max))
        return f"'{self.label}'=" + ";".join(fields)

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "value": self.value,
            "uom": self.uom,
            "warn": self.warn,
            "crit": self.crit,
            "min": self.min,
            "max": self.max,
        }


def build_perfdata(
    snapshot: FilesystemSnapshot,
    warning: int | float,
    critical: int | float,
) -> list[PerfDatum]:
    """
    Build the full set of performance data for a snapshot.

    Args:
        snapshot: Measured filesystem usage
        warning: Warning threshold as given by the user (kB for block sizes)
        critical: Critical threshold as given by the user

    Returns:
        Block tokens (percent, total, used, free, avail), followed by inode
        tokens (ipercent, itotal, iused, ifree, iavail) when the snapshot
        carries inode accounting.
    """
    warn_b = warning * BLOCK_SIZE
    crit_b = critical * BLOCK_SIZE
    size_b = snapshot.total_blocks * BLOCK_SIZE

    data = [
        PerfDatum("percent", snapshot.used_percent, "%", warning, critical),
        PerfDatum("total", size_b, "B", warn_b, crit_b),
        PerfDatum("used", snapshot.used_blocks * BLOCK_SIZE, "B", warn_b, crit_b, 0, size_b),
        PerfDatum("free", snapshot.free_blocks * BLOCK_SIZE, "B", warn_b, crit_b, 0, size_b),
        PerfDatum("avail", snapshot.available_blocks * BLOCK_SIZE, "B", warn_b, crit_b, 0, size_b),
    ]

    inodes = snapshot.inodes
    if inodes is not None:
        data += [
            PerfDatum("ipercent", inodes.used_percent, "%", warning, critical),
            PerfDatum("itotal", inodes.total, "", warning, critical),
            PerfDatum("iused", inodes.used, "", warning, critical, 0, inodes.total),
            PerfDatum("ifree", inodes.free, "", warning, critical, 0, inodes.total),
            PerfDatum("iavail", inodes.available, "", warning, critical, 0, inodes.total),
        ]

    return data


def format_perfdata(data: list[PerfDatum]) -> str:
    """Join tokens with single spaces."""
    return " ".join(str(d) for d in data)
