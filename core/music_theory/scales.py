"""
core/music_theory/scales.py — Static scale table and scale-note derivation.

The table is built once at import time from plain tuples, validated by
ScaleDefinition.__post_init__, and exposed through a read-only mapping.
Nothing here ever mutates it.

Lookups fail softly: an unknown scale name yields an empty result rather
than an exception, because callers only ever offer known names.

Exports:
    SCALES                   read-only mapping key → ScaleDefinition
    SCALE_ALIASES            alternative names ("major", "minor", ...)
    INTERVAL_NAMES           12 degree labels, R through 7

    get_scale(name) → ScaleDefinition | None
    scale_notes(root_pc, name) → tuple[int, ...]
    interval_name(root_pc, target_pc) → str
    scale_info(root, name, policy) → ScaleInfo | None
    available_scales(category) → list[ScaleDefinition]
"""

from __future__ import annotations

from types import MappingProxyType

from core.music_theory.notes import parse_pitch_class, spell_pitch_class
from core.music_theory.types import ScaleDefinition, ScaleInfo

# ---------------------------------------------------------------------------
# Scale table: (key, display name, intervals, step pattern, category)
# ---------------------------------------------------------------------------

_SCALE_ROWS: tuple[tuple[str, str, tuple[int, ...], str, str], ...] = (
    ("ionian", "Ionian (Major)", (0, 2, 4, 5, 7, 9, 11), "W-W-H-W-W-W-H", "modes"),
    ("dorian", "Dorian", (0, 2, 3, 5, 7, 9, 10), "W-H-W-W-W-H-W", "modes"),
    ("phrygian", "Phrygian", (0, 1, 3, 5, 7, 8, 10), "H-W-W-W-H-W-W", "modes"),
    ("lydian", "Lydian", (0, 2, 4, 6, 7, 9, 11), "W-W-W-H-W-W-H", "modes"),
    ("mixolydian", "Mixolydian", (0, 2, 4, 5, 7, 9, 10), "W-W-H-W-W-H-W", "modes"),
    ("aeolian", "Aeolian (Natural Minor)", (0, 2, 3, 5, 7, 8, 10), "W-H-W-W-H-W-W", "modes"),
    ("locrian", "Locrian", (0, 1, 3, 5, 6, 8, 10), "H-W-W-H-W-W-W", "modes"),
    ("major-pentatonic", "Major Pentatonic", (0, 2, 4, 7, 9), "W-W-WH-W-WH", "pentatonic"),
    ("minor-pentatonic", "Minor Pentatonic", (0, 3, 5, 7, 10), "WH-W-W-WH-W", "pentatonic"),
    ("harmonic-minor", "Harmonic Minor", (0, 2, 3, 5, 7, 8, 11), "W-H-W-W-H-WH-H", "other"),
    ("melodic-minor", "Melodic Minor", (0, 2, 3, 5, 7, 9, 11), "W-H-W-W-W-W-H", "other"),
    ("blues", "Blues Scale", (0, 3, 5, 6, 7, 10), "WH-W-H-H-WH-W", "other"),
    ("whole-tone", "Whole Tone", (0, 2, 4, 6, 8, 10), "W-W-W-W-W-W", "other"),
)

SCALES: MappingProxyType[str, ScaleDefinition] = MappingProxyType(
    {row[0]: ScaleDefinition(*row) for row in _SCALE_ROWS}
)

SCALE_ALIASES: MappingProxyType[str, str] = MappingProxyType(
    {
        "major": "ionian",
        "minor": "aeolian",
        "natural minor": "aeolian",
        "natural-minor": "aeolian",
        "harmonic minor": "harmonic-minor",
        "melodic minor": "melodic-minor",
        "pentatonic major": "major-pentatonic",
        "pentatonic minor": "minor-pentatonic",
    }
)

INTERVAL_NAMES: tuple[str, ...] = (
    "R",
    "b2",
    "2",
    "b3",
    "3",
    "4",
    "b5",
    "5",
    "b6",
    "6",
    "b7",
    "7",
)


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


def get_scale(name: str) -> ScaleDefinition | None:
    """Resolve a scale key or alias (case-insensitive). None if unknown."""
    key = name.strip().lower()
    key = SCALE_ALIASES.get(key, key)
    return SCALES.get(key)


def scale_notes(root_pc: int, name: str) -> tuple[int, ...]:
    """Return the pitch classes of a scale in ascending degree order.

    Args:
        root_pc: Root pitch class (taken mod 12)
        name:    Scale key or alias, e.g. "dorian", "minor-pentatonic"

    Returns:
        One pitch class per scale degree (5–7 for the built-in table),
        or an empty tuple when the scale name is unknown.
    """
    scale = get_scale(name)
    if scale is None:
        return ()
    return tuple((root_pc + interval) % 12 for interval in scale.intervals)


def interval_name(root_pc: int, target_pc: int) -> str:
    """Return the degree label of target relative to root, e.g. (7, 11) → '3'."""
    return INTERVAL_NAMES[(target_pc - root_pc + 12) % 12]


def scale_info(root: str, name: str, policy: str = "auto") -> ScaleInfo | None:
    """Resolve a scale against a written root note for display.

    Args:
        root:   Root note as written, e.g. "G", "Bb" (drives auto spelling)
        name:   Scale key or alias
        policy: Spelling policy for the note names

    Returns:
        ScaleInfo, or None if either the root or the scale is unknown
    """
    scale = get_scale(name)
    root_pc = parse_pitch_class(root)
    if scale is None or root_pc is None:
        return None
    notes = tuple(
        spell_pitch_class(pc, policy, tonic=root) for pc in scale_notes(root_pc, scale.key)
    )
    return ScaleInfo(root=root, scale=scale, notes=notes)


def available_scales(category: str | None = None) -> list[ScaleDefinition]:
    """Return table entries in table order, optionally filtered by category."""
    return [s for s in SCALES.values() if category is None or s.category == category]
