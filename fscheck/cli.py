"""Command-line interface for fscheck."""

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from fscheck import __version__
from fscheck.core import ConfigError, Output, Severity, Verdict, build_spec, load_settings
from fscheck.core.logging import CheckLogger, get_log_path
from fscheck.core.registry import METRICS, Direction
from fscheck.core.runner import run_check

if TYPE_CHECKING:
    from fscheck.core.context import Context

FORMATS = ("plain", "json")


class UsageError(Exception):
    """Malformed command line."""

    pass


class _ArgumentParser(argparse.ArgumentParser):
    """Parser that reports errors to the caller instead of exiting with 2."""

    def error(self, message: str):
        raise UsageError(message)


def _metric_table() -> str:
    lines = ["check types:"]
    for m in METRICS.values():
        side = "max" if m.direction is Direction.CEILING else "min"
        unit = m.unit or "count"
        lines.append(f"  {m.key:10} {m.label:18} {side} limit, {unit}")
    lines.append("")
    lines.append("Block sizes are in 1 kB blocks; thresholds for them are in kB.")
    lines.append("Performance data is published in bytes for all block figures.")
    return "\n".join(lines)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = _ArgumentParser(
        prog="check_fs",
        description=(
            "Check used/free/available blocks or inodes of a filesystem "
            "against warning and critical thresholds."
        ),
        epilog=_metric_table(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show this help and exit")
    parser.add_argument(
        "--version",
        action="version",
        version=f"fscheck {__version__}",
    )
    parser.add_argument(
        "-f",
        dest="path",
        metavar="PATH",
        help="Filesystem mount point, or any path on it (default: /)",
    )
    parser.add_argument(
        "-t",
        dest="metric",
        metavar="TYPE",
        help="Check type (default: per); '-t list' shows them all",
    )
    parser.add_argument(
        "-w",
        dest="warning",
        metavar="THRESHOLD",
        help="Warning threshold (default: 90)",
    )
    parser.add_argument(
        "-c",
        dest="critical",
        metavar="THRESHOLD",
        help="Critical threshold (default: 98)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML file with default settings",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        help="Append a JSONL record of each run under this directory",
    )
    parser.add_argument(
        "--format",
        choices=FORMATS,
        help="Output format (default: plain)",
    )
    return parser


def _write_log(log_dir: Path, verdict: Verdict, **extra) -> None:
    try:
        with CheckLogger(get_log_path(Path(log_dir))) as logger:
            logger.record(verdict, **extra)
    except OSError as e:
        print(f"check_fs: cannot write log: {e}", file=sys.stderr)


def main(argv: list[str] | None = None, context: "Context | None" = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])
        context: Optional execution context (for testing)

    Returns:
        Exit code: 0 OK, 1 WARNING, 2 CRITICAL, 3 UNKNOWN
    """
    parser = create_parser()
    output = Output()
    args = sys.argv[1:] if argv is None else argv

    try:
        opts = parser.parse_args(args)
    except UsageError as e:
        # -h wins over any other mistake on the command line
        if "-h" in args or "--help" in args:
            parser.print_help()
            return Severity.UNKNOWN
        output.emit(Verdict.unknown(f"Wrong command line: {e}"))
        output.render()
        return Severity.UNKNOWN

    if opts.help:
        parser.print_help()
        return Severity.UNKNOWN

    try:
        settings = load_settings(opts.config, context)
        spec = build_spec(settings, {
            "path": opts.path,
            "metric": opts.metric,
            "warning": opts.warning,
            "critical": opts.critical,
        })
        fmt = opts.format or settings["format"]
        if fmt not in FORMATS:
            raise ConfigError(f'Invalid format: "{fmt}"')
    except ConfigError as e:
        verdict = Verdict.unknown(str(e), path=opts.path, metric=opts.metric)
        output.emit(verdict)
        output.render(opts.format or "plain")
        if opts.log_dir:
            _write_log(opts.log_dir, verdict)
        return verdict.exit_code

    verdict = run_check(spec, context=context)
    output.emit(verdict)
    output.render(fmt)

    log_dir = opts.log_dir or settings["log_dir"]
    if log_dir:
        _write_log(log_dir, verdict, warning=spec.warning, critical=spec.critical)

    return verdict.exit_code


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
