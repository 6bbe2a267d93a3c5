# src/valency/core/config.py
"""
Engine configuration. Everything has a default; nothing is read from the
environment.
"""

import os
from dataclasses import dataclass, replace


DEFAULT_KB_PRECISION = 2
DEFAULT_SCORE_PRECISION = 4


@dataclass(frozen=True)
class EngineConfig:
    max_workers: int | None = None      # batch pool size; None → cpu count
    kb_precision: int = DEFAULT_KB_PRECISION
    score_precision: int = DEFAULT_SCORE_PRECISION

    def __post_init__(self):
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.kb_precision < 0 or self.score_precision < 0:
            raise ValueError("precision must be non-negative")

    @property
    def workers(self) -> int:
        return self.max_workers or os.cpu_count() or 1

    def with_workers(self, max_workers: int | None) -> "EngineConfig":
        return replace(self, max_workers=max_workers)
