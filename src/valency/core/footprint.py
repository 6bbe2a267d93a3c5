# src/valency/core/footprint.py
"""
Serialized size of the lexicon and stemma tables.

Size is the UTF-8 length of the table as compact, key-sorted JSON, so the
same tables always report the same numbers.
"""

import json

from valency.core.analysis import FootprintReport
from valency.core.config import DEFAULT_KB_PRECISION
from valency.core.lexicon import Lexicon
from valency.core.stemma import Stemma


def serialized_size(table: dict) -> int:
    return len(json.dumps(table, sort_keys=True, separators=(",", ":")).encode("utf-8"))


def memory_footprint(
    lexicon: Lexicon,
    stemma: Stemma,
    precision: int = DEFAULT_KB_PRECISION,
) -> FootprintReport:
    lexicon_bytes = serialized_size(lexicon.to_dict())
    stemma_bytes = serialized_size(stemma.to_dict())
    total_bytes = lexicon_bytes + stemma_bytes

    return FootprintReport(
        lexicon_bytes=lexicon_bytes,
        stemma_bytes=stemma_bytes,
        total_bytes=total_bytes,
        lexicon_kb=round(lexicon_bytes / 1024, precision),
        stemma_kb=round(stemma_bytes / 1024, precision),
        total_kb=round(total_bytes / 1024, precision),
    )
