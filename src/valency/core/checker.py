# src/valency/core/checker.py
"""
Word analyzer: single-word valency lookup over the lexicon and stemma.

    check("eating") → stem "eat", valency 2, required agent + patient
"""

import logging

from valency.core.analysis import AnalysisResult
from valency.core.lexicon import LexicalEntry, Lexicon
from valency.core.result import Result
from valency.core.roles import ErrorKind, format_roles
from valency.core.stemma import Stemma

logger = logging.getLogger(__name__)

BASE_AMBIGUITY = 0.1
OPTIONAL_WEIGHT = 0.1
VALENCY_WEIGHT = 0.05


def ambiguity_score(pattern: LexicalEntry) -> float:
    """More optional slots and higher valency read as more ambiguous."""
    return (
        BASE_AMBIGUITY
        + OPTIONAL_WEIGHT * len(pattern.optional)
        + VALENCY_WEIGHT * pattern.valency
    )


def format_interpretation(stem: str, pattern: LexicalEntry) -> str:
    return (
        f'The verb "{stem}" has valency {pattern.valency}.\n'
        f"Required semantic roles: {format_roles(pattern.required)}\n"
        f"Optional semantic roles: {format_roles(pattern.optional)}\n"
        f"\n"
        f'This means "{stem}" requires {pattern.valency} core argument(s) and can\n'
        f"optionally take additional contextual information.\n"
    )


class ValencyChecker:
    def __init__(self, lexicon: Lexicon, stemma: Stemma):
        self.lexicon = lexicon
        self.stemma = stemma

    def get_stem(self, word: str) -> str:
        return self.stemma.lookup_stem(word)

    def get_valency_pattern(self, stem: str) -> Result[LexicalEntry]:
        return self.lexicon.lookup_pattern(stem)

    def check(self, word: str) -> Result[AnalysisResult]:
        if not isinstance(word, str):
            raise TypeError(f"word must be str, got {type(word).__name__}")

        if not word.strip():
            return Result.failure(ErrorKind.EMPTY_INPUT)

        stem = self.get_stem(word.lower())
        found = self.get_valency_pattern(stem)
        if not found.ok:
            return Result.failure(found.error)

        pattern = found.value
        logger.debug("%r → %s (valency %d)", word, stem, pattern.valency)
        return Result.success(AnalysisResult(
            word=word,
            stem=stem,
            valency=pattern.valency,
            required_roles=pattern.required,
            optional_roles=pattern.optional,
            ambiguity_score=ambiguity_score(pattern),
            interpretation=format_interpretation(stem, pattern),
        ))
