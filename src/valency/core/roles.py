# src/valency/core/roles.py
"""
Closed vocabularies: semantic roles and error kinds.
"""

from enum import Enum


class SemanticRole(Enum):
    AGENT = "agent"
    PATIENT = "patient"
    RECIPIENT = "recipient"
    INSTRUMENT = "instrument"
    LOCATION = "location"
    TIME = "time"
    MANNER = "manner"


class ErrorKind(Enum):
    EMPTY_INPUT = "empty_input"         # word is empty or whitespace-only
    NOT_IN_LEXICON = "not_in_lexicon"   # stem has no valency pattern
    NO_VERBS_FOUND = "no_verbs_found"   # ambiguity resolution found nothing
    NO_VERB_FOUND = "no_verb_found"     # role analysis found no main verb


def format_roles(roles) -> str:
    return ", ".join(r.value for r in roles)
