"""ScriptPace: screenplay pacing analysis and PDF reports.

ScriptPace scans plain-text screenplays for speakers, scenes, reading time,
and which characters talk to each other, and renders the result as a PDF.
"""

from scriptpace.analyzer import (
    AnalysisResult,
    CharacterRelation,
    ReadingRates,
    ScreenplayAnalyzer,
    analyze_screenplay,
)
from scriptpace.config import ScriptPaceSettings, get_settings
from scriptpace.exceptions import ScriptPaceError

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "AnalysisResult",
    "CharacterRelation",
    "ReadingRates",
    "ScreenplayAnalyzer",
    "ScriptPaceError",
    "ScriptPaceSettings",
    "__version__",
    "analyze_screenplay",
    "get_settings",
]
