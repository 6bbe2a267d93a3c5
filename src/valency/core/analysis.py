# src/valency/core/analysis.py
"""
Derived values produced per call: word analyses, ranked interpretations,
role maps and footprint reports. None of these are stored.
"""

from dataclasses import dataclass, field

from valency.core.lexicon import LexicalEntry
from valency.core.roles import SemanticRole


@dataclass(frozen=True)
class AnalysisResult:
    word: str                                   # input as given
    stem: str
    valency: int
    required_roles: tuple[SemanticRole, ...]
    optional_roles: tuple[SemanticRole, ...]
    ambiguity_score: float                      # lower is less ambiguous
    interpretation: str

    @property
    def pattern(self) -> LexicalEntry:
        return LexicalEntry(self.valency, self.required_roles, self.optional_roles)

    def to_dict(self) -> dict:
        return {
            "word": self.word,
            "stem": self.stem,
            "valency": self.valency,
            "required_roles": [r.value for r in self.required_roles],
            "optional_roles": [r.value for r in self.optional_roles],
            "ambiguity_score": self.ambiguity_score,
            "interpretation": self.interpretation,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "AnalysisResult":
        return cls(
            word=d["word"],
            stem=d["stem"],
            valency=d["valency"],
            required_roles=tuple(SemanticRole(r) for r in d["required_roles"]),
            optional_roles=tuple(SemanticRole(r) for r in d["optional_roles"]),
            ambiguity_score=d["ambiguity_score"],
            interpretation=d["interpretation"],
        )


@dataclass(frozen=True)
class Interpretation:
    verb: str
    valency: int
    roles: tuple[SemanticRole, ...]
    score: float
    description: str

    @classmethod
    def from_analysis(cls, analysis: AnalysisResult) -> "Interpretation":
        return cls(
            verb=analysis.stem,
            valency=analysis.valency,
            roles=analysis.required_roles,
            score=analysis.ambiguity_score,
            description=f"{analysis.stem} requires {analysis.valency} argument(s)",
        )

    def to_dict(self) -> dict:
        return {
            "verb": self.verb,
            "valency": self.valency,
            "roles": [r.value for r in self.roles],
            "score": self.score,
            "description": self.description,
        }


@dataclass
class RoleMap:
    verb: str
    roles: dict[SemanticRole, str] = field(default_factory=dict)

    def get(self, role: SemanticRole) -> str | None:
        return self.roles.get(role)

    def to_dict(self) -> dict:
        d = {"verb": self.verb}
        for role, token in self.roles.items():
            d[role.value] = token
        return d


@dataclass(frozen=True)
class FootprintReport:
    lexicon_bytes: int
    stemma_bytes: int
    total_bytes: int
    lexicon_kb: float
    stemma_kb: float
    total_kb: float

    def to_dict(self) -> dict:
        return {
            "lexicon_bytes": self.lexicon_bytes,
            "stemma_bytes": self.stemma_bytes,
            "total_bytes": self.total_bytes,
            "lexicon_kb": self.lexicon_kb,
            "stemma_kb": self.stemma_kb,
            "total_kb": self.total_kb,
        }
