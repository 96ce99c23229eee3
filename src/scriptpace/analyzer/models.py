"""Data structures produced and consumed by the screenplay analyzer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ReadingRates:
    """Assumed reading speeds, in words per minute, per kind of line.

    Each line contributes ``word_count * rate / 60`` to the weighted word
    time, which approximates seconds of reading.
    """

    dialogue: float = 150.0
    action: float = 100.0
    description: float = 75.0


@dataclass
class CharacterRelation:
    """How often two characters spoke back to back.

    ``characters`` is always alphabetically sorted, so the pair is unordered.
    """

    characters: tuple[str, str]
    interactions: int = 1

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "characters": list(self.characters),
            "interactions": self.interactions,
        }


@dataclass
class AnalysisResult:
    """Outcome of analyzing one screenplay text.

    Attributes:
        speakers: Distinct speaker names in order of first appearance
        total_words: Weighted word time, rounded to an integer
        total_dialogue_blocks: Number of distinct speakers
        character_relations: Interaction counts for consecutively cued pairs
        scenes: Scene count; starts at 1 and grows with every scene heading

    Example:
        >>> result = AnalysisResult()
        >>> result.scenes
        1
        >>> result.total_dialogue_blocks
        0
    """

    speakers: list[str] = field(default_factory=list)
    total_words: int = 0
    total_dialogue_blocks: int = 0
    character_relations: list[CharacterRelation] = field(default_factory=list)
    scenes: int = 1

    def interactions_between(self, first: str, second: str) -> int:
        """Return how many times two characters spoke consecutively."""
        pair = tuple(sorted((first, second)))
        for relation in self.character_relations:
            if relation.characters == pair:
                return relation.interactions
        return 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "speakers": list(self.speakers),
            "total_words": self.total_words,
            "total_dialogue_blocks": self.total_dialogue_blocks,
            "character_relations": [r.to_dict() for r in self.character_relations],
            "scenes": self.scenes,
        }
