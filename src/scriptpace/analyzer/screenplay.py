"""Single-pass screenplay analyzer.

Scans raw screenplay text line by line and collects speakers, a weighted
word time, the scene count, and how often pairs of characters speak back to
back. Each call works on its own accumulators, so an analyzer instance can be
shared freely between callers.
"""

from __future__ import annotations

import math

from scriptpace.analyzer.models import AnalysisResult, CharacterRelation, ReadingRates
from scriptpace.analyzer.patterns import (
    is_action_line,
    is_character_cue,
    is_scene_heading,
    speaker_name,
    trim,
    word_count,
)
from scriptpace.config import get_logger
from scriptpace.exceptions import AnalysisInputError

logger = get_logger(__name__)


def _round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; 2.5 must become 3
    return math.floor(value + 0.5)


class ScreenplayAnalyzer:
    """Extract speaker, pacing, and interaction metrics from screenplay text."""

    def __init__(self, rates: ReadingRates | None = None) -> None:
        """Initialize analyzer.

        Args:
            rates: Reading speeds used to weight each kind of line. Defaults
                to 150/100/75 words per minute for dialogue/action/description.
        """
        self.rates = rates or ReadingRates()

    @property
    def name(self) -> str:
        """Name used to identify this analyzer in logs."""
        return "screenplay"

    def analyze(self, text: str) -> AnalysisResult:
        """Analyze screenplay text.

        Args:
            text: Raw screenplay text, newline-delimited

        Returns:
            AnalysisResult with speakers, weighted word time, dialogue block
            count, character relations, and scene count

        Raises:
            AnalysisInputError: If text is not a string
        """
        if not isinstance(text, str):
            raise AnalysisInputError(
                message="Screenplay text must be a string",
                hint="Decode file contents before analyzing them",
                details={"received_type": type(text).__name__},
            )

        dialogue_weight = self.rates.dialogue / 60
        action_weight = self.rates.action / 60
        description_weight = self.rates.description / 60

        speakers: dict[str, None] = {}
        relations: dict[tuple[str, str], int] = {}
        weighted_total = 0.0
        scenes = 1
        in_dialogue = False
        current_speaker: str | None = None

        lines = text.split("\n")
        for line in lines:
            trimmed = trim(line)

            if is_scene_heading(trimmed):
                scenes += 1
                current_speaker = None
                continue

            if is_character_cue(trimmed):
                speaker = speaker_name(line)
                speakers.setdefault(speaker, None)
                in_dialogue = True
                if current_speaker:
                    a, b = sorted((current_speaker, speaker))
                    relations[(a, b)] = relations.get((a, b), 0) + 1
                current_speaker = speaker
            elif in_dialogue:
                weighted_total += word_count(line) * dialogue_weight
            elif is_action_line(trimmed):
                weighted_total += word_count(line) * action_weight
            else:
                weighted_total += word_count(line) * description_weight

            if trimmed == "":
                in_dialogue = False

        result = AnalysisResult(
            speakers=list(speakers),
            total_words=_round_half_up(weighted_total),
            total_dialogue_blocks=len(speakers),
            character_relations=[
                CharacterRelation(characters=pair, interactions=count)
                for pair, count in relations.items()
            ],
            scenes=scenes,
        )

        logger.debug(
            "Screenplay analyzed",
            analyzer=self.name,
            lines=len(lines),
            scenes=result.scenes,
            speakers=len(result.speakers),
            total_words=result.total_words,
        )
        return result


def analyze_screenplay(text: str, rates: ReadingRates | None = None) -> AnalysisResult:
    """Analyze screenplay text with a throwaway analyzer.

    Args:
        text: Raw screenplay text
        rates: Optional reading speeds

    Returns:
        AnalysisResult for the text
    """
    return ScreenplayAnalyzer(rates).analyze(text)
