"""Core fscheck functionality."""

from fscheck.core.config import CheckSpec, ConfigError, build_spec, load_settings
from fscheck.core.context import Context
from fscheck.core.evaluator import MissingInodeDataError, Severity, Verdict, evaluate
from fscheck.core.output import Output
from fscheck.core.registry import UnknownMetricError, metric_keys, resolve
from fscheck.core.snapshot import FilesystemSnapshot, InodeUsage

__all__ = [
    "CheckSpec",
    "ConfigError",
    "Context",
    "FilesystemSnapshot",
    "InodeUsage",
    "MissingInodeDataError",
    "Output",
    "Severity",
    "UnknownMetricError",
    "Verdict",
    "build_spec",
    "evaluate",
    "load_settings",
    "metric_keys",
    "resolve",
]
