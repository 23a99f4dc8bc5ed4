from __future__ import annotations
from pathlib import Path
from typing import Protocol
from releasekit.domain.entities.fact_sheet import FactSheet

class MediaProbePort(Protocol):
    def probe(self, path: Path) -> FactSheet: ...
