"""Screenplay text analysis for ScriptPace."""

from __future__ import annotations

from .models import AnalysisResult, CharacterRelation, ReadingRates
from .screenplay import ScreenplayAnalyzer, analyze_screenplay

__all__ = [
    "AnalysisResult",
    "CharacterRelation",
    "ReadingRates",
    "ScreenplayAnalyzer",
    "analyze_screenplay",
]
