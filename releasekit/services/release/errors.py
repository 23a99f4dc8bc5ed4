from __future__ import annotations

from typing import Optional

from releasekit.domain.dataclasses.reports import ReleaseReport


class ReleaseError(RuntimeError):
    """A pipeline step failed. `step` names it; `report` holds what ran before."""

    def __init__(self, step: str, message: str, report: Optional[ReleaseReport] = None) -> None:
        super().__init__(f"{step} failed: {message}")
        self.step = step
        self.report = report
