"""Threshold evaluation: snapshot + check type + thresholds -> verdict."""

import enum
from dataclasses import dataclass, field

from fscheck.core.perfdata import PerfDatum, build_perfdata, format_number
from fscheck.core.registry import MetricDescriptor
from fscheck.core.snapshot import FilesystemSnapshot

NO_INODE_NOTE = "(no inode data)"


class MissingInodeDataError(Exception):
    """An inode check type was requested on a filesystem without inode accounting."""

    pass


class Severity(enum.IntEnum):
    """Monitoring-plugin status, valued as the process exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


@dataclass(frozen=True)
class Verdict:
    """Outcome of one check."""

    severity: Severity
    message: str
    perfdata: list[PerfDatum] = field(default_factory=list)
    path: str | None = None
    metric: str | None = None
    value: int | None = None

    @property
    def exit_code(self) -> int:
        return int(self.severity)

    @classmethod
    def unknown(cls, reason: str, path: str | None = None, metric: str | None = None) -> "Verdict":
        """Verdict for a check that could not be carried out."""
        return cls(Severity.UNKNOWN, f"UNKNOWN {reason}", path=path, metric=metric)


def classify(value: int, descriptor: MetricDescriptor, warning: float, critical: float) -> Severity:
    """Critical is tested first, so a value equal to both thresholds is CRITICAL."""
    if descriptor.direction.breached(value, critical):
        return Severity.CRITICAL
    if descriptor.direction.breached(value, warning):
        return Severity.WARNING
    return Severity.OK


def evaluate(
    descriptor: MetricDescriptor,
    snapshot: FilesystemSnapshot,
    warning: int | float,
    critical: int | float,
) -> Verdict:
    """
    Evaluate one check type against a snapshot.

    Args:
        descriptor: Resolved check type
        snapshot: Filesystem usage to check
        warning: Warning threshold (kB, count or percent depending on check type)
        critical: Critical threshold

    Returns:
        Verdict with message and the full performance data set

    Raises:
        MissingInodeDataError: If the check type needs inode data the
            snapshot does not have
    """
    if descriptor.requires_inodes and not snapshot.has_inodes:
        raise MissingInodeDataError(
            f'No inode data for "{snapshot.path}", cannot check "{descriptor.key}"'
        )

    value = descriptor.extract(snapshot)
    severity = classify(value, descriptor, warning, critical)
    measured = descriptor.describe(value)

    if severity is Severity.OK:
        message = f"OK {snapshot.path} {measured}"
    else:
        threshold = critical if severity is Severity.CRITICAL else warning
        limit = f"({descriptor.direction.operator}{format_number(threshold)}{descriptor.unit})"
        message = f"{snapshot.path} {severity.name} {measured} {limit}"

    if not snapshot.has_inodes:
        message = f"{message} {NO_INODE_NOTE}"

    return Verdict(
        severity=severity,
        message=message,
        perfdata=build_perfdata(snapshot, warning, critical),
        path=snapshot.path,
        metric=descriptor.key,
        value=value,
    )
