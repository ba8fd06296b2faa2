"""
core/fretboard/mapper.py — Pitch-class sequence → (string, fret) positions.

map_to_fretboard() places one note at a time, greedily, with no
backtracking. Each note is placed relative to the previous one only, which
keeps the hand moving in small local steps instead of chasing a globally
optimal fingering.

Algorithm (per note):
    1. Candidate strings: the step's preferred string if one is given
       (sweep / up-down traversal), otherwise every string
    2. Scan frets window.min..window.max on each candidate string, keep
       frets whose pitch class equals the target
    3. Score each candidate:
           |fret - prev_fret|
         + (top_index - string_index) × STRING_WEIGHT
         + |midi // 12 - (octave_bias + 1)| × OCTAVE_WEIGHT
    4. Lowest score wins; ties go to the first candidate in scan order
       (string order, then ascending fret)
    5. No candidate → rescan with the window widened by FALLBACK_EXPANSION
       frets each side (clamped to [0, 18]) on every string, same score
    6. Still nothing → the note is dropped and its step recorded

State carried between notes: prev_fret and octave_bias, both updated from
the chosen position. The first note is scored against the window centre
and an octave bias of 3.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from core.fretboard.types import FretPosition, PositionWindow, Tuning

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

STRING_WEIGHT: float = 0.1
OCTAVE_WEIGHT: float = 0.2
FALLBACK_EXPANSION: int = 2
INITIAL_OCTAVE_BIAS: int = 3  # favours the lower-mid register (MIDI 48–59)


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MappedNote:
    """A sequence step that was placed on the neck.

    Attributes:
        step:         Index into the input pitch-class sequence
        pitch_class:  Target pitch class for the step
        position:     Chosen string/fret/midi
        fallback:     True if the note came from the widened window
    """

    step: int
    pitch_class: int
    position: FretPosition
    fallback: bool = False


@dataclass(frozen=True)
class FretboardMapping:
    """Output of map_to_fretboard().

    Attributes:
        notes:         Placed notes in sequence order
        dropped_steps: Steps that could not be placed anywhere
    """

    notes: tuple[MappedNote, ...]
    dropped_steps: tuple[int, ...] = ()

    @property
    def dropped(self) -> int:
        return len(self.dropped_steps)


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


def position_cost(
    position: FretPosition,
    *,
    prev_fret: float,
    octave_bias: int,
    top_index: int,
) -> float:
    """Score a candidate position; lower is better.

    Args:
        position:    Candidate position
        prev_fret:   Fret of the previous note (window centre for the first)
        octave_bias: Register of the previous note (midi // 12 - 1)
        top_index:   Index of the highest string on the instrument

    Returns:
        Non-negative cost
    """
    return (
        abs(position.fret - prev_fret)
        + (top_index - position.string_index) * STRING_WEIGHT
        + abs(position.octave - (octave_bias + 1)) * OCTAVE_WEIGHT
    )


def _best_candidate(
    pitch_class: int,
    strings: Sequence[int],
    fret_range: tuple[int, int],
    tuning: Tuning,
    prev_fret: float,
    octave_bias: int,
) -> FretPosition | None:
    best: FretPosition | None = None
    best_cost = 0.0
    low, high = fret_range
    for string_index in strings:
        open_midi = tuning.open_midi[string_index]
        for fret in range(low, high + 1):
            if (open_midi + fret) % 12 != pitch_class:
                continue
            candidate = tuning.position(string_index, fret)
            cost = position_cost(
                candidate,
                prev_fret=prev_fret,
                octave_bias=octave_bias,
                top_index=tuning.top_index,
            )
            # Strict < keeps the first candidate in scan order on ties.
            if best is None or cost < best_cost:
                best, best_cost = candidate, cost
    return best


def select_position(
    pitch_class: int,
    window: PositionWindow,
    tuning: Tuning,
    *,
    prev_fret: float,
    octave_bias: int,
    preferred_string: int | None = None,
) -> tuple[FretPosition | None, bool]:
    """Choose the lowest-cost position for one note.

    Args:
        pitch_class:      Target pitch class (0–11)
        window:           Hand-position window
        tuning:           Instrument tuning
        prev_fret:        Fret of the previous note
        octave_bias:      Register of the previous note
        preferred_string: Restrict the in-window scan to this string index

    Returns:
        (position, used_fallback). position is None if the note cannot be
        placed even in the widened window.
    """
    all_strings = range(tuning.string_count)
    strings = [preferred_string] if preferred_string is not None else all_strings

    best = _best_candidate(
        pitch_class,
        strings,
        (window.min_fret, window.max_fret),
        tuning,
        prev_fret,
        octave_bias,
    )
    if best is not None:
        return best, False

    best = _best_candidate(
        pitch_class,
        all_strings,
        window.expanded(FALLBACK_EXPANSION),
        tuning,
        prev_fret,
        octave_bias,
    )
    return best, best is not None


def map_to_fretboard(
    pitch_classes: Sequence[int],
    window: PositionWindow,
    tuning: Tuning,
    string_order: Sequence[int] | None = None,
) -> FretboardMapping:
    """Map a pitch-class sequence onto the neck, one note at a time.

    Args:
        pitch_classes: Target pitch classes in playing order
        window:        Hand-position window
        tuning:        Instrument tuning
        string_order:  Optional per-step preferred string index (cycled if
                       shorter than the sequence)

    Returns:
        FretboardMapping with placed notes and the steps that were dropped.
    """
    prev_fret = window.center
    octave_bias = INITIAL_OCTAVE_BIAS
    notes: list[MappedNote] = []
    dropped: list[int] = []

    for step, pc in enumerate(pitch_classes):
        preferred = string_order[step % len(string_order)] if string_order else None
        position, fallback = select_position(
            pc % 12,
            window,
            tuning,
            prev_fret=prev_fret,
            octave_bias=octave_bias,
            preferred_string=preferred,
        )
        if position is None:
            logger.debug("Step %d: pitch class %d has no position near %s", step, pc, window.name)
            dropped.append(step)
            continue
        if fallback:
            logger.debug(
                "Step %d: pitch class %d placed outside %s window at fret %d",
                step,
                pc,
                window.name,
                position.fret,
            )

        notes.append(MappedNote(step=step, pitch_class=pc % 12, position=position, fallback=fallback))
        prev_fret = position.fret
        octave_bias = position.octave - 1

    return FretboardMapping(notes=tuple(notes), dropped_steps=tuple(dropped))
