# clarity.py
# Batch scoring of a directory of images and the blur-to-clarity report.

import logging
import os
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from config import (
    EXIT_ITEM_FAILURES,
    EXIT_OK,
    REPORT_HEADER,
    REPORT_LABELS,
    TENG_KSIZE,
)
from focus_measures import MEASURES, UndefinedFocusMeasure, configure_measures
from image_utils import list_entries, load_image
from ranking import RankedEntry, rank_entries

logger = logging.getLogger(__name__)

# name -> (score, reason); score is None when the measure is undefined
Scores = Dict[str, Tuple[Optional[float], Optional[str]]]


@dataclass
class ItemFailure:
    path: str
    reason: str


@dataclass
class BatchResult:
    lapm: List[RankedEntry] = field(default_factory=list)
    lapv: List[RankedEntry] = field(default_factory=list)
    teng: List[RankedEntry] = field(default_factory=list)
    glvn: List[RankedEntry] = field(default_factory=list)
    failures: List[ItemFailure] = field(default_factory=list)
    processed: int = 0

    def table(self, name: str) -> List[RankedEntry]:
        return getattr(self, name)

    @property
    def exit_code(self) -> int:
        return EXIT_ITEM_FAILURES if self.failures else EXIT_OK


def score_image(img: np.ndarray, ksize: int = TENG_KSIZE) -> Scores:
    """Run every focus measure on one image."""
    scores: Scores = {}
    for name, measure in configure_measures(ksize).items():
        try:
            value = measure(img)
            scores[name] = (value, None)
        except UndefinedFocusMeasure as e:
            scores[name] = (None, str(e))
    return scores


def run_batch(
    root: str,
    ksize: int = TENG_KSIZE,
    on_scored: Optional[Callable[[str, Scores], None]] = None,
) -> BatchResult:
    """
    Score every file directly under root and rank each measure independently.

    Entries that are not regular files or cannot be decoded are skipped and recorded in
    BatchResult.failures. Raises FileNotFoundError / NotADirectoryError
    before any processing if root is not a directory.
    """
    paths = list_entries(root)
    result = BatchResult()

    for path in paths:
        if not os.path.isfile(path):
            logger.warning(f"Not a regular file: {path}")
            result.failures.append(ItemFailure(path=path, reason="not a regular file"))
            continue

        logger.debug(f"Loading {path}")
        img = load_image(path)
        if img is None:
            logger.warning(f"Could not read the image: {path}")
            result.failures.append(ItemFailure(path=path, reason="could not decode image"))
            continue

        scores = score_image(img, ksize=ksize)
        del img

        for name, (value, reason) in scores.items():
            if value is None:
                logger.warning(f"{name} undefined for {path}: {reason}")
            result.table(name).append(RankedEntry(path=path, score=value, reason=reason))
        result.processed += 1

        if on_scored is not None:
            on_scored(path, scores)

    for name in MEASURES:
        setattr(result, name, rank_entries(result.table(name)))

    logger.info(
        f"Scored {result.processed} image(s), {len(result.failures)} failure(s) in {root}"
    )
    return result


def _format_value(score: Optional[float], reason: Optional[str]) -> str:
    if score is None:
        return f"undefined ({reason})" if reason else "undefined"
    return f"{score:g}"


def format_scores(path: str, scores: Scores) -> str:
    """Per-image lines printed while the batch runs."""
    lines = [path]
    for name in MEASURES:
        score, reason = scores[name]
        lines.append(f"{name.capitalize()} :{_format_value(score, reason)}")
    return "\n".join(lines) + "\n"


def format_report(result: BatchResult) -> str:
    """
    Ranked report, one block per rank index.

    Row i shows the i-th entry of each measure's own ranking, so the four
    lines of a block can name different images.
    """
    lines = [REPORT_HEADER]
    for i in range(len(result.lapm)):
        for name in MEASURES:
            entry = result.table(name)[i]
            label = REPORT_LABELS[name]
            lines.append(f"{entry.path} ({label}): {_format_value(entry.score, entry.reason)}")
        lines.append("")
    return "\n".join(lines) + "\n"


def format_report_by_image(result: BatchResult) -> str:
    """Alternative report: one block per image with its rank under each measure."""
    total = result.processed
    positions: Dict[str, Dict[str, Tuple[int, RankedEntry]]] = {}
    for name in MEASURES:
        for rank, entry in enumerate(result.table(name), start=1):
            positions.setdefault(entry.path, {})[name] = (rank, entry)

    lines = ["Ranks per image (1 = most blurred):"]
    for path in sorted(positions):
        lines.append(path)
        for name in MEASURES:
            rank, entry = positions[path][name]
            label = REPORT_LABELS[name]
            lines.append(
                f"  ({label}) {rank}/{total}: {_format_value(entry.score, entry.reason)}"
            )
        lines.append("")
    return "\n".join(lines) + "\n"


def format_failures(result: BatchResult) -> str:
    if not result.failures:
        return ""
    lines = [f"{len(result.failures)} entries skipped:"]
    for failure in result.failures:
        lines.append(f"  {failure.path}: {failure.reason}")
    return "\n".join(lines) + "\n"
