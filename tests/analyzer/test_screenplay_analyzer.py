"""Unit tests for the ScreenplayAnalyzer."""

import pytest

from scriptpace.analyzer import (
    AnalysisResult,
    CharacterRelation,
    ReadingRates,
    ScreenplayAnalyzer,
    analyze_screenplay,
)
from scriptpace.exceptions import AnalysisInputError, ScriptPaceError


@pytest.fixture
def analyzer():
    """Analyzer with the default reading rates."""
    return ScreenplayAnalyzer()


class TestBasicAnalysis:
    """Core behavior on small inputs."""

    def test_empty_text(self, analyzer):
        """Empty input yields an empty single-scene result."""
        result = analyzer.analyze("")

        assert result == AnalysisResult()
        assert result.to_dict() == {
            "speakers": [],
            "total_words": 0,
            "total_dialogue_blocks": 0,
            "character_relations": [],
            "scenes": 1,
        }

    def test_single_speaker_dialogue(self, analyzer):
        """Dialogue words are weighted at 150 words per minute."""
        result = analyzer.analyze("JOHN\nHello there.\n")

        assert result.speakers == ["JOHN"]
        assert result.total_words == 5
        assert result.total_dialogue_blocks == 1
        assert result.character_relations == []
        assert result.scenes == 1

    def test_two_speakers_make_one_interaction(self, analyzer):
        """Consecutive cues separated by a blank line form a pair."""
        result = analyzer.analyze("JOHN\nHi.\n\nMARY\nHey.\n")

        assert result.speakers == ["JOHN", "MARY"]
        assert result.total_dialogue_blocks == 2
        assert result.total_words == 5
        assert result.character_relations == [
            CharacterRelation(characters=("JOHN", "MARY"), interactions=1)
        ]

    def test_module_function_matches_analyzer(self, analyzer, sample_screenplay):
        """analyze_screenplay is a shortcut for ScreenplayAnalyzer().analyze."""
        assert analyze_screenplay(sample_screenplay) == analyzer.analyze(
            sample_screenplay
        )

    def test_sample_screenplay(self, analyzer, sample_screenplay):
        """A realistic snippet exercises every kind of line."""
        result = analyzer.analyze(sample_screenplay)

        assert result.speakers == ["JOHN", "MARY OS", "MARY"]
        assert result.total_dialogue_blocks == 3
        assert result.scenes == 3
        assert result.total_words == 50
        assert result.interactions_between("MARY OS", "JOHN") == 2
        assert result.interactions_between("JOHN", "MARY") == 0


class TestSceneHeadings:
    """Scene heading detection and its side effects."""

    def test_heading_increments_scenes(self, analyzer):
        """Each INT/EXT line adds a scene on top of the initial one."""
        result = analyzer.analyze("INT. OFFICE - DAY\n\nEXT. STREET - NIGHT\n")
        assert result.scenes == 3

    def test_heading_contributes_no_words(self, analyzer):
        """Scene headings are skipped for reading time."""
        result = analyzer.analyze("INT. HOUSE - NIGHT")
        assert result.total_words == 0
        assert result.scenes == 2

    def test_heading_resets_current_speaker(self, analyzer):
        """A cue after a heading does not pair with the previous scene."""
        result = analyzer.analyze("JOHN\nHi.\n\nINT. OFFICE - DAY\n\nMARY\nHey.\n")

        assert result.scenes == 2
        assert result.speakers == ["JOHN", "MARY"]
        assert result.character_relations == []

    def test_heading_detection_is_case_sensitive(self, analyzer):
        """Lowercase int. lines are plain description."""
        result = analyzer.analyze("int. house")
        assert result.scenes == 1
        assert result.total_words == 3  # 2 words * 1.25 = 2.5, rounded up

    def test_heading_prefix_only(self, analyzer):
        """Any line starting with INT counts, even INTERCUT."""
        result = analyzer.analyze("INTERCUT WITH PHONE")
        assert result.scenes == 2
        assert result.speakers == []

    def test_heading_keeps_dialogue_state(self, analyzer):
        """Without a blank line, text after a heading still reads as dialogue."""
        result = analyzer.analyze("JOHN\nHi.\nINT. ROOM\nThe door opens.\n")
        # 1 dialogue word + 3 dialogue words, 2.5 each
        assert result.total_words == 10

    def test_heading_after_byte_order_mark(self, analyzer):
        """A byte order mark before the first heading is ignored."""
        result = analyzer.analyze("\ufeffINT. HOUSE - DAY\nJOHN\nHi.")
        assert result.scenes == 2
        assert result.speakers == ["JOHN"]
        assert result.total_words == 3


class TestCharacterCues:
    """Character cue detection and speaker naming."""

    def test_parenthetical_letters_are_kept(self, analyzer):
        """Only punctuation is stripped from the cue."""
        result = analyzer.analyze("JOHN (O.S.)\nWho's there?\n")
        assert result.speakers == ["JOHN OS"]

    def test_indented_cue(self, analyzer):
        """Cue lines are matched after trimming."""
        result = analyzer.analyze("        JOHN\n    Hello there.\n")
        assert result.speakers == ["JOHN"]
        assert result.total_words == 5

    def test_crlf_line_endings(self, analyzer):
        """Carriage returns do not leak into speaker names."""
        result = analyzer.analyze("JOHN\r\nHi.\r\n\r\nMARY\r\nHey.\r\n")
        assert result.speakers == ["JOHN", "MARY"]
        assert result.interactions_between("JOHN", "MARY") == 1

    def test_cue_after_byte_order_mark(self, analyzer):
        """A byte order mark before the first cue is ignored."""
        result = analyzer.analyze("\ufeffJOHN\nHello there.")
        assert result.speakers == ["JOHN"]
        assert result.total_words == 5

    def test_separator_characters_are_not_blanks(self, analyzer):
        """Control separators keep a cue line from matching."""
        result = analyzer.analyze("JOHN\x1c\nHello there.")
        assert result.speakers == []
        # 3 description words, 1.25 each
        assert result.total_words == 4

    def test_single_letter_is_not_a_cue(self, analyzer):
        """Cues need at least two characters."""
        result = analyzer.analyze("I")
        assert result.speakers == []
        assert result.total_words == 1

    def test_mixed_case_is_not_a_cue(self, analyzer):
        """Names must be all uppercase."""
        result = analyzer.analyze("John\nHello there.")
        assert result.speakers == []

    def test_duplicate_speakers_collapse(self, analyzer):
        """Speakers are distinct and counted once."""
        result = analyzer.analyze("JOHN\nHi.\n\nMARY\nHey.\n\nJOHN\nBye.\n")
        assert result.speakers == ["JOHN", "MARY"]
        assert result.total_dialogue_blocks == 2

    def test_cue_without_blank_line(self, analyzer):
        """A cue is recognized even while still in dialogue."""
        result = analyzer.analyze("JOHN\nHi.\nMARY\nHey.")
        assert result.interactions_between("JOHN", "MARY") == 1


class TestCharacterRelations:
    """Interaction pair bookkeeping."""

    def test_reverse_order_merges(self, analyzer):
        """(A, B) and (B, A) count toward the same pair."""
        result = analyzer.analyze("MARY\nHi.\n\nJOHN\nHey.\n\nMARY\nBye.\n")
        assert result.character_relations == [
            CharacterRelation(characters=("JOHN", "MARY"), interactions=2)
        ]

    def test_pairs_are_sorted(self, analyzer):
        """Each pair lists names alphabetically."""
        result = analyzer.analyze("JOHN\nA.\n\nMARY\nB.\n\nALICE\nC.\n")
        assert [r.characters for r in result.character_relations] == [
            ("JOHN", "MARY"),
            ("ALICE", "MARY"),
        ]

    def test_same_speaker_twice(self, analyzer):
        """Back-to-back cues for one character pair them with themselves."""
        result = analyzer.analyze("JOHN\nHi.\n\nJOHN\nAgain.\n")
        assert result.character_relations == [
            CharacterRelation(characters=("JOHN", "JOHN"), interactions=1)
        ]

    def test_blank_line_keeps_current_speaker(self, analyzer):
        """Description between cues does not break the pair."""
        result = analyzer.analyze("JOHN\nHi.\n\nHe waits.\n\nMARY\nHey.\n")
        assert result.interactions_between("JOHN", "MARY") == 1

    def test_to_dict_lists_pairs(self, analyzer):
        """Pairs serialize as two-element lists."""
        result = analyzer.analyze("JOHN\nHi.\n\nMARY\nHey.\n")
        assert result.to_dict()["character_relations"] == [
            {"characters": ["JOHN", "MARY"], "interactions": 1}
        ]


class TestWordWeights:
    """Reading-rate weighting for each kind of line."""

    def test_action_line(self, analyzer):
        """Asterisk-wrapped lines read at 100 words per minute."""
        result = analyzer.analyze("*He runs for the door.*")
        assert result.total_words == 8  # 5 * 100 / 60 = 8.33

    def test_description_line(self, analyzer):
        """Plain prose reads at 75 words per minute."""
        result = analyzer.analyze("The room is dark.")
        assert result.total_words == 5

    def test_single_asterisk_is_description(self, analyzer):
        """A lone asterisk is not an action line."""
        result = analyzer.analyze("*")
        assert result.total_words == 1  # 1 * 1.25

    def test_dialogue_spans_lines_until_blank(self, analyzer):
        """Every line after a cue is dialogue until a blank line."""
        result = analyzer.analyze("JOHN\nHello there.\nHow are you?\n\nThe end.")
        # (2 + 3) * 2.5 = 12.5 dialogue, 2 * 1.25 = 2.5 description
        assert result.total_words == 15

    def test_rounds_half_up(self, analyzer):
        """2.5 rounds to 3, not to the even 2."""
        result = analyzer.analyze("JOHN\nHi.\n")
        assert result.total_words == 3

    def test_custom_rates(self):
        """Reading rates are configurable per analyzer."""
        slow = ScreenplayAnalyzer(ReadingRates(dialogue=60, action=60, description=60))
        result = slow.analyze("JOHN\nHello there.\n\n*Runs.*\nQuietly now.")
        assert result.total_words == 5


class TestInputHandling:
    """Input guards and statelessness."""

    @pytest.mark.parametrize("bad_input", [None, 42, b"JOHN\nHi."])
    def test_rejects_non_string(self, analyzer, bad_input):
        """Non-text input raises a ScriptPace error."""
        with pytest.raises(AnalysisInputError) as exc_info:
            analyzer.analyze(bad_input)

        assert isinstance(exc_info.value, ScriptPaceError)
        assert exc_info.value.details["received_type"] == type(bad_input).__name__

    def test_repeated_calls_are_independent(self, analyzer, sample_screenplay):
        """Nothing carries over between calls."""
        first = analyzer.analyze(sample_screenplay)
        analyzer.analyze("BOB\nSomething else entirely.\n")
        second = analyzer.analyze(sample_screenplay)

        assert first == second
        assert first is not second
