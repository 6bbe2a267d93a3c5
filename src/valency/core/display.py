# src/valency/core/display.py
"""
Plain-text rendering of an analysis.
"""

from valency.core.analysis import AnalysisResult
from valency.core.config import DEFAULT_SCORE_PRECISION
from valency.core.roles import format_roles


def visualize(analysis: AnalysisResult, precision: int = DEFAULT_SCORE_PRECISION) -> str:
    lines = [
        "Valency Analysis",
        "================",
        f"Word: {analysis.word}",
        f"Stem: {analysis.stem}",
        f"Valency: {analysis.valency}",
        f"Required Roles: {format_roles(analysis.required_roles)}",
        f"Optional Roles: {format_roles(analysis.optional_roles)}",
        f"Ambiguity Score: {round(analysis.ambiguity_score, precision)} (lower is better)",
        "",
        "Interpretation:",
        analysis.interpretation,
    ]
    return "\n".join(lines)
