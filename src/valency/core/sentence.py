# src/valency/core/sentence.py
"""
Sentence processing: whitespace tokenization, ambiguity ranking and
main-verb role analysis.

Any token that analyzes counts as a verb. There is no grammatical verb
detection, and punctuation stays attached ("data." fails lookup).
"""

import logging
import re

from valency.core.analysis import AnalysisResult, Interpretation, RoleMap
from valency.core.checker import ValencyChecker
from valency.core.extract import extract_roles
from valency.core.result import Result
from valency.core.roles import ErrorKind

logger = logging.getLogger(__name__)


def tokenize(sentence: str) -> list[str]:
    """Split on runs of whitespace."""
    return re.findall(r"\S+", sentence)


def eliminate_ambiguity(checker: ValencyChecker, sentence: str) -> Result[list[Interpretation]]:
    """
    Rank every analyzable token of the sentence by ambiguity score.

    Lowest score first; equal scores keep sentence order.
    """
    analyses = [r.value for r in map(checker.check, tokenize(sentence)) if r.ok]
    if not analyses:
        return Result.failure(ErrorKind.NO_VERBS_FOUND)

    interpretations = sorted(
        (Interpretation.from_analysis(a) for a in analyses),
        key=lambda i: i.score,
    )
    logger.debug("ranked %s", [i.verb for i in interpretations])
    return Result.success(interpretations)


def find_main_verb(checker: ValencyChecker, tokens: list[str]) -> Result[AnalysisResult]:
    """First token, left to right, that analyzes."""
    for token in tokens:
        result = checker.check(token)
        if result.ok:
            return result
    return Result.failure(ErrorKind.NO_VERB_FOUND)


def analyze_roles(checker: ValencyChecker, sentence: str) -> Result[RoleMap]:
    tokens = tokenize(sentence)

    found = find_main_verb(checker, tokens)
    if not found.ok:
        return Result.failure(found.error)

    verb = found.value
    return Result.success(RoleMap(verb=verb.stem, roles=extract_roles(tokens, verb.pattern)))
