# src/valency/core/lexicon.py
"""
Lexicon of valency patterns.

Maps a canonical verb stem to the semantic roles it requires and admits.
"give" → valency 3: agent, patient, recipient (+ location, time)

Built once, read-only afterwards; safe to share between threads.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping

from valency.core.result import Result
from valency.core.roles import ErrorKind, SemanticRole

logger = logging.getLogger(__name__)

A = SemanticRole.AGENT
P = SemanticRole.PATIENT
R = SemanticRole.RECIPIENT
I = SemanticRole.INSTRUMENT
L = SemanticRole.LOCATION
T = SemanticRole.TIME
M = SemanticRole.MANNER


@dataclass(frozen=True)
class LexicalEntry:
    valency: int
    required: tuple[SemanticRole, ...]
    optional: tuple[SemanticRole, ...] = ()

    def __post_init__(self):
        if self.valency < 0:
            raise ValueError(f"valency must be non-negative, got {self.valency}")
        if self.valency != len(self.required):
            raise ValueError(
                f"valency {self.valency} does not match {len(self.required)} required roles"
            )

    @property
    def roles(self) -> tuple[SemanticRole, ...]:
        """Required roles followed by optional ones."""
        return self.required + self.optional

    def admits(self, role: SemanticRole) -> bool:
        return role in self.required or role in self.optional

    def to_dict(self) -> dict:
        return {
            "valency": self.valency,
            "required": [r.value for r in self.required],
            "optional": [r.value for r in self.optional],
        }

    @classmethod
    def from_dict(cls, d: dict) -> "LexicalEntry":
        return cls(
            valency=d["valency"],
            required=tuple(SemanticRole(r) for r in d["required"]),
            optional=tuple(SemanticRole(r) for r in d.get("optional", [])),
        )


def entry(*required: SemanticRole, optional: tuple[SemanticRole, ...] = ()) -> LexicalEntry:
    return LexicalEntry(len(required), tuple(required), tuple(optional))


DEFAULT_LEXICON: dict[str, LexicalEntry] = {
    # Monovalent: subject only
    "sleep": entry(A, optional=(L, T)),
    "run": entry(A, optional=(L, M)),
    "exist": entry(A, optional=(L, T)),
    "fall": entry(P, optional=(L, M)),

    # Divalent: subject + object
    "eat": entry(A, P, optional=(I, L)),
    "read": entry(A, P, optional=(L, T)),
    "detect": entry(A, P, optional=(I, M)),
    "process": entry(A, P, optional=(M, T)),
    "analyze": entry(A, P, optional=(I, L)),
    "see": entry(A, P, optional=(L, M)),
    "find": entry(A, P, optional=(L, T)),

    # Trivalent: subject + direct object + indirect object
    "give": entry(A, P, R, optional=(L, T)),
    "send": entry(A, P, R, optional=(I, M)),
    "tell": entry(A, P, R, optional=(M, T)),
    "show": entry(A, P, R, optional=(L, I)),

    # Semantic processing verbs
    "disambiguate": entry(A, P, optional=(I, M)),
    "classify": entry(A, P, optional=(I, M)),
    "extract": entry(A, P, optional=(L, I)),
    "transform": entry(A, P, optional=(M, I)),
}


class Lexicon:
    def __init__(self, entries: Mapping[str, LexicalEntry]):
        self._entries = MappingProxyType(dict(entries))

    def lookup_pattern(self, stem: str) -> Result[LexicalEntry]:
        """Exact-match lookup of a stem's valency pattern."""
        pattern = self._entries.get(stem)
        if pattern is None:
            logger.debug("not in lexicon: %r", stem)
            return Result.failure(ErrorKind.NOT_IN_LEXICON)
        return Result.success(pattern)

    def stems(self) -> list[str]:
        return sorted(self._entries)

    def items(self):
        return self._entries.items()

    def to_dict(self) -> dict:
        return {stem: e.to_dict() for stem, e in self._entries.items()}

    def __contains__(self, stem: object) -> bool:
        return stem in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def default_lexicon() -> Lexicon:
    return Lexicon(DEFAULT_LEXICON)
