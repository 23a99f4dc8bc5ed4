# releasekit/domain/policies/piece_planner.py
from __future__ import annotations

import os
from pathlib import Path
from typing import List, Tuple

from releasekit.common.logging import get_logger
from releasekit.common.strings.units import GIB, MIB
from releasekit.domain.dataclasses.release import PiecePlan

logger = get_logger(__name__)

# (inclusive upper bound on payload size, piece length)
_STAIRCASE: List[Tuple[int, int]] = [
    (1 * GIB, 1 * MIB),
    (2 * GIB, 2 * MIB),
    (4 * GIB, 4 * MIB),
    (8 * GIB, 8 * MIB),
]
MAX_PIECE_LENGTH = 16 * MIB


def piece_length_for(total_size: int) -> int:
    """Pick a piece length from a fixed staircase: <=1 GiB -> 1 MiB ... >8 GiB -> 16 MiB."""
    for upper, piece in _STAIRCASE:
        if total_size <= upper:
            return piece
    return MAX_PIECE_LENGTH


def directory_size(path: Path | str) -> int:
    """
    Recursive sum of regular-file sizes under `path`. Symlinks are not
    followed and add nothing.
    Best effort: entries that cannot be listed or stat'ed are skipped
    and the sum continues with the rest.
    """
    total = 0
    try:
        entries = list(os.scandir(path))
    except OSError as e:
        logger.debug("skipping unreadable directory %s: %s", path, e)
        return 0

    for entry in entries:
        try:
            if entry.is_dir(follow_symlinks=False):
                total += directory_size(entry.path)
            elif entry.is_file(follow_symlinks=False):
                total += entry.stat(follow_symlinks=False).st_size
        except OSError as e:
            logger.debug("skipping %s: %s", entry.path, e)
    return total


def plan_layout(path: Path | str) -> PiecePlan:
    """
    Size the payload at `path` (file or directory) and choose a piece length.
    The path itself must exist; only nested entries are best effort.
    """
    p = Path(path)
    if p.is_dir():
        total = directory_size(p)
        return PiecePlan(path=p, total_size=total, piece_length=piece_length_for(total), is_directory=True)
    total = p.stat().st_size
    return PiecePlan(path=p, total_size=total, piece_length=piece_length_for(total))
