# src/valency/core/extract.py
"""
Role extractor: positional heuristic, not parsing.

    agent   ← first token
    patient ← third token
    manner  ← last token

A role is filled only when the verb's pattern admits it (required or
optional) and the sentence is long enough to have that position.
"""

from valency.core.lexicon import LexicalEntry
from valency.core.roles import SemanticRole


# role → token index (negative counts from the end)
ROLE_POSITIONS: tuple[tuple[SemanticRole, int], ...] = (
    (SemanticRole.AGENT, 0),
    (SemanticRole.PATIENT, 2),
    (SemanticRole.MANNER, -1),
)


def _token_at(tokens: list[str], index: int) -> str | None:
    if -len(tokens) <= index < len(tokens):
        return tokens[index]
    return None


def extract_roles(tokens: list[str], pattern: LexicalEntry) -> dict[SemanticRole, str]:
    roles = {}
    for role, index in ROLE_POSITIONS:
        if not pattern.admits(role):
            continue
        token = _token_at(tokens, index)
        if token is not None:
            roles[role] = token
    return roles
