# src/valency/core/batch.py
"""
Batch analyzer: fan check() out over a worker pool.

Results come back in input order, not completion order. One word failing
has no effect on the others.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from valency.core.analysis import AnalysisResult
from valency.core.checker import ValencyChecker
from valency.core.result import Result

logger = logging.getLogger(__name__)


def check_batch(
    checker: ValencyChecker,
    words: Sequence[str],
    max_workers: int | None = None,
) -> list[Result[AnalysisResult]]:
    words = list(words)
    if not words:
        return []

    workers = min(max_workers or os.cpu_count() or 1, len(words))
    logger.debug("checking %d words on %d workers", len(words), workers)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(checker.check, words))
