"""Line classification heuristics for plain-text screenplays.

These are simple pattern checks, not a screenplay grammar. Ambiguous lines
are classified silently: a short all-caps description line reads as a
character cue, and an action line without asterisks reads as description.
"""

from __future__ import annotations

import re

# Blank characters for trimming and word splitting. Includes the byte order
# mark and no-break spaces; excludes the \x1c-\x1f separators and U+0085,
# which str.strip() and str.split() would otherwise treat as blanks.
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
# Any character except a line break
_IN_LINE = "[^\n\r\u2028\u2029]"

SCENE_HEADING_PATTERN = re.compile(r"^(INT|EXT)")
CHARACTER_CUE_PATTERN = re.compile(rf"^[A-Z][A-Z ]+(\({_IN_LINE}*\))?\Z")
ACTION_LINE_PATTERN = re.compile(rf"^\*{_IN_LINE}*\*\Z")
_NON_NAME_CHARS = re.compile(r"[^a-zA-Z ]")
_WORD_SEPARATOR = re.compile(f"[{re.escape(WHITESPACE)}]+")


def trim(line: str) -> str:
    """Strip leading and trailing blanks, including a byte order mark."""
    return line.strip(WHITESPACE)


def is_scene_heading(line: str) -> bool:
    """Return True if the line opens a new scene (INT or EXT prefix)."""
    return SCENE_HEADING_PATTERN.match(trim(line)) is not None


def is_character_cue(line: str) -> bool:
    """Return True if the line names the next speaker.

    Matches uppercase letters and spaces, optionally followed by a
    parenthetical such as ``(O.S.)``.
    """
    return CHARACTER_CUE_PATTERN.match(trim(line)) is not None


def is_action_line(line: str) -> bool:
    """Return True if the line is wrapped in single asterisks."""
    return ACTION_LINE_PATTERN.match(trim(line)) is not None


def speaker_name(line: str) -> str:
    """Extract the speaker from a cue line.

    Everything except ASCII letters and spaces is dropped, so the letters of
    a parenthetical survive: ``JOHN (O.S.)`` becomes ``JOHN OS``.
    """
    return _NON_NAME_CHARS.sub("", line).strip(" ")


def word_count(line: str) -> int:
    """Count blank-delimited tokens in a line."""
    return sum(1 for word in _WORD_SEPARATOR.split(line) if word)
