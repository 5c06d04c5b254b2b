# ranking.py
# Ordering of (path, score) entries from blur to clarity.

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class RankedEntry:
    path: str
    score: Optional[float]
    reason: Optional[str] = None  # why score is undefined

    @property
    def is_defined(self) -> bool:
        return self.score is not None


def score_key(entry: RankedEntry):
    """Sort key: defined scores ascending, undefined entries after all of them."""
    if entry.score is None:
        return (1, 0.0)
    return (0, entry.score)


def rank_entries(entries: List[RankedEntry]) -> List[RankedEntry]:
    return sorted(entries, key=score_key)


def is_ranked(entries: List[RankedEntry]) -> bool:
    keys = [score_key(e) for e in entries]
    return all(a <= b for a, b in zip(keys, keys[1:]))
