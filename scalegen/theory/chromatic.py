from __future__ import annotations

"""Chromatic tables and pattern-driven scale generation for 12-TET.

Provides the sharp- and flat-spelled chromatic alphabets, single-step
lookup, chromatic scale generation and scale generation from step
patterns such as ``"MMmMMMm"``.
"""

from types import MappingProxyType
from typing import List, Mapping, Sequence, Tuple

from .errors import InvalidStepCodeError, TonicNotFoundError


SHARP = "sharp"
FLAT = "flat"

CHROMATIC_SHARP: Tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
CHROMATIC_FLAT: Tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

_TABLES: Mapping[str, Tuple[str, ...]] = MappingProxyType({SHARP: CHROMATIC_SHARP, FLAT: CHROMATIC_FLAT})

STEPS: Mapping[str, int] = MappingProxyType({"m": 1, "M": 2, "A": 3})

# Raw tokens, case-sensitive: lowercase entries are minor keys.
FLAT_TONICS = frozenset({"F", "Bb", "Eb", "Ab", "Db", "Gb", "d", "g", "c", "f", "bb", "eb"})


def semitones(step: str) -> int:
    """Return the semitone count for a step code ("m", "M" or "A")."""
    try:
        return STEPS[step]
    except KeyError:
        raise InvalidStepCodeError(step) from None


def normalize_tonic(tonic: str) -> str:
    """Upper-case the letter of a tonic, leaving the accidental untouched."""
    return tonic[:1].upper() + tonic[1:]


def scale_index(scale: Sequence[str], tonic: str) -> int:
    try:
        return list(scale).index(tonic)
    except ValueError:
        raise TonicNotFoundError(tonic, scale) from None


def wrap_index(scale: Sequence[str], index: int) -> int:
    return index % len(scale)


def step(scale: Sequence[str], tonic: str, step: str) -> str:
    """Find the note one interval (`step`) above `tonic` in `scale`.

    The tonic must be spelled exactly as it appears in `scale`; no
    normalization happens here.

    Given the tonic "D" in the sharp chromatic scale:

        "m" -> "D#", "M" -> "E", "A" -> "F"
    """
    offset = semitones(step)
    return scale[wrap_index(scale, scale_index(scale, tonic) + offset)]


def select_spelling(tonic: str) -> str:
    """Return FLAT for tonics on the flat allow-list, SHARP otherwise.

    Membership is checked against the raw token, so "d" (D minor) is flat
    while "D" (D major) is sharp. Call this before normalize_tonic.
    """
    return FLAT if tonic in FLAT_TONICS else SHARP


def chromatic_table(spelling: str) -> Tuple[str, ...]:
    try:
        return _TABLES[spelling]
    except KeyError:
        raise ValueError(f"Unsupported spelling: {spelling!r} (expected 'sharp' or 'flat')") from None


def _full_scale(table: Sequence[str], tonic: str) -> List[str]:
    start = scale_index(table, normalize_tonic(tonic))
    doubled = list(table) + list(table)
    return doubled[start : start + len(table) + 1]


def chromatic_scale(tonic: str = "C") -> List[str]:
    """Sharp-spelled chromatic scale from `tonic` up to its octave (13 notes).

    "C" -> C C# D D# E F F# G G# A A# B C
    """
    return _full_scale(CHROMATIC_SHARP, tonic)


def flat_chromatic_scale(tonic: str = "C") -> List[str]:
    """Flat-spelled chromatic scale from `tonic` up to its octave (13 notes).

    "C" -> C Db D Eb E F Gb G Ab A Bb B C
    """
    return _full_scale(CHROMATIC_FLAT, tonic)


def find_chromatic_scale(tonic: str) -> List[str]:
    """Chromatic scale in the spelling the key of `tonic` calls for."""
    return _full_scale(chromatic_table(select_spelling(tonic)), tonic)


def scale(tonic: str, pattern: str) -> List[str]:
    """Build a scale from `tonic` by walking a step pattern.

    Each note is taken at the cumulative offset from the tonic, so the
    result holds the tonic followed by one note per pattern element:

        scale("C", "MMmMMMm") -> C D E F G A B C

    Args:
        tonic: Tonic note, case-insensitive. Lowercase selects minor-key
            (flat) spelling where the allow-list says so.
        pattern: String of step codes ("m", "M", "A").

    Returns:
        List of len(pattern) + 1 note names.
    """
    offsets = [semitones(code) for code in pattern]
    table = chromatic_table(select_spelling(tonic))
    root = normalize_tonic(tonic)
    start = scale_index(table, root)

    notes = [root]
    total = 0
    for offset in offsets:
        total += offset
        notes.append(table[wrap_index(table, start + total)])
    return notes
