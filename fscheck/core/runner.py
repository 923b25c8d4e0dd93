"""Check execution: resolve, measure, evaluate."""

from typing import TYPE_CHECKING

from fscheck.core.config import CheckSpec
from fscheck.core.evaluator import MissingInodeDataError, Verdict, evaluate
from fscheck.core.registry import UnknownMetricError, resolve
from fscheck.lib.filesystem import SnapshotError, take_snapshot

if TYPE_CHECKING:
    from fscheck.core.context import Context


def run_check(spec: CheckSpec, context: "Context | None" = None) -> Verdict:
    """
    Run one check.

    The check type is resolved before the filesystem is touched. Any
    failure along the way ends the run with an UNKNOWN verdict; exactly
    one check type is evaluated per run.

    Args:
        spec: What to check
        context: Optional execution context (for testing)

    Returns:
        Verdict to report
    """
    try:
        descriptor = resolve(spec.metric)
    except UnknownMetricError as e:
        return Verdict.unknown(str(e), path=spec.path, metric=spec.metric)

    try:
        snapshot = take_snapshot(spec.path, context=context)
    except SnapshotError as e:
        return Verdict.unknown(str(e), path=spec.path, metric=spec.metric)

    try:
        return evaluate(descriptor, snapshot, spec.warning, spec.critical)
    except MissingInodeDataError as e:
        return Verdict.unknown(str(e), path=spec.path, metric=spec.metric)
