"""
core/arpeggio/sequencer.py — Chord/scale + pattern → timed fretboard events.

generate_arpeggio() is the programmatic entry point:
    1. Build the source intervals (chord quality, or a named scale) on the key
    2. Order them by pattern and cycle/truncate to the requested length
    3. For sweep / up-down, pair each step with a preferred string so the
       line crosses the strings instead of running along one
    4. Place each note with the fretboard mapper
    5. Assign time, duration and finger; render the ASCII tab

Patterns (chord tones 1-3-5-7 shown as a b c d):
    ascending   a b c d a b c d ...
    descending  d c b a d c b a ...
    updown      a b c d c b a b c d c b ...   (no repeated turn-around note)
    sweep       a b c d a b ...               (string order low → high → low)

Timing is a fixed grid: step = (60 / tempo) / subdivision, event i starts at
i × step and lasts NOTE_GAP_RATIO × step, so a line never overlaps itself.
Notes the mapper cannot place are dropped; later events close up the gap.

Input bounds are the caller's job (see core.config.GenerationLimits).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from itertools import cycle, islice

from core.arpeggio.tab import render_ascii_tab
from core.arpeggio.types import ArpeggioEvent, ArpeggioMeta, ArpeggioRequest, ArpeggioResult
from core.config import NOTE_GAP_RATIO
from core.fretboard.mapper import map_to_fretboard
from core.fretboard.positions import estimate_finger, get_window
from core.fretboard.tunings import get_tuning
from core.fretboard.types import Tuning
from core.music_theory.chords import parse_chord
from core.music_theory.notes import midi_to_note_name, note_to_pitch_class
from core.music_theory.scales import get_scale

logger = logging.getLogger(__name__)

#: Patterns whose notes are paired with a string traversal
TRAVERSAL_PATTERNS: frozenset[str] = frozenset({"sweep", "updown"})


# ---------------------------------------------------------------------------
# Sequence building
# ---------------------------------------------------------------------------


def build_pitch_sequence(
    root_pc: int,
    intervals: Sequence[int],
    pattern: str,
    length: int,
) -> tuple[int, ...]:
    """Expand an interval set into an ordered pitch-class sequence.

    Args:
        root_pc:   Root pitch class
        intervals: Ascending semitone offsets from the root
        pattern:   "ascending", "descending", "updown" or "sweep"
        length:    Number of pitch classes to return

    Returns:
        Exactly `length` pitch classes (empty if intervals is empty)

    Raises:
        ValueError: If the pattern is unknown
    """
    order = [(root_pc + i) % 12 for i in intervals]
    if pattern == "descending":
        order.reverse()
    elif pattern == "updown":
        order = order + order[-2:0:-1]
    elif pattern not in ("ascending", "sweep"):
        raise ValueError(f"Unknown pattern {pattern!r}")
    if not order:
        return ()
    return tuple(islice(cycle(order), length))


def build_string_traversal(length: int, string_count: int = 6) -> tuple[int, ...]:
    """Per-step preferred string indices: lowest → highest → lowest, repeating.

    On a six-string this walks strings 6→1 then back towards 6 (indices
    0,1,2,3,4,5,4,3,2,1,0,...) without repeating the turn-around string.
    """
    up = list(range(string_count))
    down = list(range(string_count - 2, 0, -1))
    return tuple(islice(cycle(up + down), length))


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


def _resolve_tuning(tuning: str | Tuning) -> Tuning:
    return tuning if isinstance(tuning, Tuning) else get_tuning(tuning)


def _source_intervals(request: ArpeggioRequest) -> tuple[int, ...]:
    """Return the intervals to arpeggiate from the key.

    Only the chord symbol's quality is used: "Am7" in the key of C plays
    C Eb G Bb. A named scale replaces the chord.
    """
    if request.scale is not None:
        scale = get_scale(request.scale)
        if scale is None:
            raise ValueError(f"Unknown scale {request.scale!r}")
        return scale.intervals
    return parse_chord(request.chord).intervals


def generate_arpeggio(request: ArpeggioRequest) -> ArpeggioResult:
    """Generate a playable arpeggio with timing and ASCII tab.

    Args:
        request: Pre-validated ArpeggioRequest

    Returns:
        ArpeggioResult with at most request.length events

    Raises:
        InvalidNoteError: If request.key is not a note name
        ValueError:       If the pattern, position, tuning or scale is unknown
    """
    key_pc = note_to_pitch_class(request.key)
    tuning = _resolve_tuning(request.tuning)
    window = get_window(request.position)
    intervals = _source_intervals(request)

    pitch_classes = build_pitch_sequence(key_pc, intervals, request.pattern, request.length)
    string_order = (
        build_string_traversal(request.length, tuning.string_count)
        if request.pattern in TRAVERSAL_PATTERNS
        else None
    )
    mapping = map_to_fretboard(pitch_classes, window, tuning, string_order)

    step = request.seconds_per_step
    events = tuple(
        ArpeggioEvent(
            time=i * step,
            duration=step * NOTE_GAP_RATIO,
            note=midi_to_note_name(n.position.midi, request.spelling, tonic=request.key),
            string=tuning.string_count - n.position.string_index,
            fret=n.position.fret,
            finger=estimate_finger(n.position.fret, window),
        )
        for i, n in enumerate(mapping.notes)
    )

    if mapping.dropped:
        logger.warning(
            "Dropped %d of %d notes for %s %s in %s position",
            mapping.dropped,
            len(pitch_classes),
            request.chord,
            request.pattern,
            request.position,
        )

    ascii_tab = render_ascii_tab(events, step, request.length, labels=tuning.tab_labels)

    meta = ArpeggioMeta(
        key=request.key,
        chord=request.chord,
        pattern=request.pattern,
        position=request.position,
        tempo=request.tempo,
        subdivision=request.subdivision,
        tuning=tuning.key,
    )
    return ArpeggioResult(
        meta=meta,
        events=events,
        ascii=ascii_tab,
        dropped=mapping.dropped,
        seconds_per_step=step,
    )
