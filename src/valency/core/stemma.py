# src/valency/core/stemma.py
"""
Stemma: inflected word form → canonical stem.

"running" → "run", "ate" → "eat"
Words not in the table are their own stem.
"""

from types import MappingProxyType
from typing import Mapping


def _forms(stem: str, *inflected: str) -> dict[str, str]:
    return {form: stem for form in inflected}


DEFAULT_STEMMA: dict[str, str] = {
    **_forms("sleep", "sleeping", "sleeps", "slept"),
    **_forms("run", "running", "runs", "ran"),
    **_forms("eat", "eating", "eats", "ate", "eaten"),
    **_forms("read", "reading", "reads"),
    **_forms("detect", "detecting", "detects", "detected"),
    **_forms("process", "processing", "processes", "processed"),
    **_forms("analyze", "analyzing", "analyzes", "analyzed"),
    **_forms("see", "seeing", "sees", "saw", "seen"),
    **_forms("find", "finding", "finds", "found"),
    **_forms("give", "giving", "gives", "gave", "given"),
    **_forms("send", "sending", "sends", "sent"),
    **_forms("tell", "telling", "tells", "told"),
    **_forms("show", "showing", "shows", "showed", "shown"),
    **_forms("disambiguate", "disambiguating", "disambiguates", "disambiguated"),
    **_forms("classify", "classifying", "classifies", "classified"),
    **_forms("extract", "extracting", "extracts", "extracted"),
    **_forms("transform", "transforming", "transforms", "transformed"),
}


class Stemma:
    def __init__(self, forms: Mapping[str, str]):
        self._forms = MappingProxyType({k.lower(): v.lower() for k, v in forms.items()})

    def lookup_stem(self, word: str) -> str:
        """Case-insensitive; unknown words map to themselves (lowercased)."""
        normalized = word.lower()
        return self._forms.get(normalized, normalized)

    def forms_of(self, stem: str) -> list[str]:
        return [form for form, s in self._forms.items() if s == stem]

    def to_dict(self) -> dict:
        return dict(self._forms)

    def __contains__(self, word: object) -> bool:
        return word in self._forms

    def __len__(self) -> int:
        return len(self._forms)


def default_stemma() -> Stemma:
    return Stemma(DEFAULT_STEMMA)
