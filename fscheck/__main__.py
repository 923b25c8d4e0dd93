"""Allow running as python -m fscheck."""

from fscheck.cli import run

run()
