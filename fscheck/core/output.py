"""Rendering of a verdict as the single line a supervisor reads."""

import json

from fscheck.core.evaluator import Verdict
from fscheck.core.perfdata import format_perfdata


class Output:
    """Holds the verdict of a run and prints it exactly once."""

    def __init__(self):
        self.verdict: Verdict | None = None
        self._printed: bool = False

    def emit(self, verdict: Verdict) -> None:
        """Store the verdict to report."""
        self.verdict = verdict

    @property
    def summary(self) -> str:
        """Status text without performance data."""
        if self.verdict is None:
            return ""
        return self.verdict.message

    def to_plain(self) -> str:
        """Return '<status text>|<perfdata>', or just the status text."""
        if self.verdict is None:
            return ""
        if not self.verdict.perfdata:
            return self.verdict.message
        return f"{self.verdict.message}|{format_perfdata(self.verdict.perfdata)}"

    def to_json(self) -> str:
        """Return the verdict as one line of JSON."""
        v = self.verdict
        if v is None:
            return "{}"
        return json.dumps({
            "status": v.severity.name,
            "code": v.exit_code,
            "path": v.path,
            "metric": v.metric,
            "value": v.value,
            "message": v.message,
            "perfdata": [d.to_dict() for d in v.perfdata],
        }, ensure_ascii=False)

    def render(self, format: str = "plain") -> None:
        """Print output in the specified format ("plain" or "json")."""
        if self._printed or self.verdict is None:
            return
        self._printed = True

        if format == "json":
            print(self.to_json())
        else:
            print(self.to_plain())
