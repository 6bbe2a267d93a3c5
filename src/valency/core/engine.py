# src/valency/core/engine.py
"""
Engine: every public operation in one place, over injected tables.

    engine = Engine()                       # default tables
    engine = Engine(lexicon=my_lexicon)     # test fixture tables
"""

from typing import Sequence

from valency.core.analysis import AnalysisResult, FootprintReport, Interpretation, RoleMap
from valency.core.batch import check_batch
from valency.core.checker import ValencyChecker
from valency.core.config import EngineConfig
from valency.core.display import visualize
from valency.core.footprint import memory_footprint
from valency.core.lexicon import LexicalEntry, Lexicon, default_lexicon
from valency.core.result import Result
from valency.core.sentence import analyze_roles, eliminate_ambiguity
from valency.core.stemma import Stemma, default_stemma


class Engine:
    def __init__(
        self,
        lexicon: Lexicon | None = None,
        stemma: Stemma | None = None,
        config: EngineConfig | None = None,
    ):
        self.lexicon = lexicon if lexicon is not None else default_lexicon()
        self.stemma = stemma if stemma is not None else default_stemma()
        self.config = config or EngineConfig()
        self.checker = ValencyChecker(self.lexicon, self.stemma)

    def check(self, word: str) -> Result[AnalysisResult]:
        return self.checker.check(word)

    def check_batch(self, words: Sequence[str]) -> list[Result[AnalysisResult]]:
        return check_batch(self.checker, words, max_workers=self.config.workers)

    def get_stem(self, word: str) -> str:
        return self.checker.get_stem(word)

    def get_valency_pattern(self, stem: str) -> Result[LexicalEntry]:
        return self.checker.get_valency_pattern(stem)

    def eliminate_ambiguity(self, sentence: str) -> Result[list[Interpretation]]:
        return eliminate_ambiguity(self.checker, sentence)

    def analyze_roles(self, sentence: str) -> Result[RoleMap]:
        return analyze_roles(self.checker, sentence)

    def memory_footprint(self) -> FootprintReport:
        return memory_footprint(self.lexicon, self.stemma, precision=self.config.kb_precision)

    def visualize(self, analysis: AnalysisResult) -> str:
        return visualize(analysis, precision=self.config.score_precision)


_default_engine: Engine | None = None


def get_engine() -> Engine:
    """Process-wide engine over the default tables, built on first use."""
    global _default_engine
    if _default_engine is None:
        _default_engine = Engine()
    return _default_engine
