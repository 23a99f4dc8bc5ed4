# releasekit/domain/dataclasses/reports.py
from __future__ import annotations

from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from releasekit.domain.dataclasses.release import ReleaseArtifacts


@dataclass
class ReleaseReport:
    """What a pipeline run did, step by step.
    - timing: started_at / finished_at
    - steps: ordered (step, detail) pairs, e.g. ("rename", "<new name>")
    - error capture: error_details
    """
    source_path: str = ""
    release_name: str = ""
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    steps: List[Tuple[str, str]] = field(default_factory=list)
    # Each tuple is (step, message)
    error_details: List[Tuple[str, str]] = field(default_factory=list)
    artifacts: Optional[ReleaseArtifacts] = None

    def start(self) -> None:
        if self.started_at is None:
            self.started_at = datetime.now()

    def stop(self) -> None:
        self.finished_at = datetime.now()

    def record(self, step: str, detail: str = "") -> None:
        self.steps.append((step, detail))

    def add_error(self, step: str, message: str) -> None:
        self.error_details.append((step, message))

    @property
    def ok(self) -> bool:
        return not self.error_details

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
