"""
Theory lookup routes.

Read-only views over the music theory engine, for the UI's pickers and
fretboard diagram:

    GET  /api/scales                  — scale table (optionally by category)
    GET  /api/scales/{root}/{scale}   — a scale resolved against a root
    GET  /api/scales/{root}/{scale}/chords — the scale harmonized in triads
    GET  /api/chords/{symbol}         — a parsed chord symbol
    GET  /api/tunings                 — tuning presets
    GET  /api/fretboard               — per-fret note grid (preset or custom strings)
    POST /api/progressions            — roman numerals → chords in a key

Unknown roots, scales and tunings are 404s here: they are lookups, not
generation requests.
"""

import logging

from fastapi import APIRouter, HTTPException, Query

from api.schemas.theory import (
    ChordOut,
    FretboardCellOut,
    FretboardOut,
    ProgressionChordOut,
    ProgressionRequest,
    ProgressionResponse,
    ScaleInfoOut,
    ScaleOut,
    SpellingPolicy,
    TuningOut,
)
from core.fretboard.grid import MAX_GRID_FRETS, fretboard_grid
from core.fretboard.tunings import available_tunings, get_tuning, tuning_from_notes
from core.music_theory.chords import chord_root_text, parse_chord
from core.music_theory.notes import midi_to_note_name, parse_pitch_class, spell_pitch_class
from core.music_theory.progressions import build_progression, diatonic_chords
from core.music_theory.scales import available_scales, get_scale, interval_name, scale_info
from core.music_theory.types import SCALE_CATEGORIES, DiatonicChord

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["theory"])


def _require_root(root: str) -> int:
    pc = parse_pitch_class(root)
    if pc is None:
        raise HTTPException(status_code=404, detail=f"unknown root {root!r}")
    return pc


def _require_scale(scale: str) -> None:
    if get_scale(scale) is None:
        raise HTTPException(status_code=404, detail=f"unknown scale {scale!r}")


def _chord_out(chord: DiatonicChord) -> ProgressionChordOut:
    return ProgressionChordOut(
        symbol=chord.symbol,
        roman=chord.roman,
        degree=chord.degree,
        quality=chord.quality,
        notes=list(chord.notes),
    )


# ---------------------------------------------------------------------------
# Scales
# ---------------------------------------------------------------------------


@router.get("/scales", response_model=list[ScaleOut])
def list_scales(category: str | None = None) -> list[ScaleOut]:
    """Return the scale table, optionally filtered by category."""
    if category is not None and category not in SCALE_CATEGORIES:
        raise HTTPException(status_code=404, detail=f"unknown category {category!r}")
    return [
        ScaleOut(
            key=s.key,
            name=s.name,
            intervals=list(s.intervals),
            pattern=s.pattern,
            category=s.category,
        )
        for s in available_scales(category)
    ]


@router.get("/scales/{root}/{scale}", response_model=ScaleInfoOut)
def get_scale_info(root: str, scale: str, spelling: SpellingPolicy = "auto") -> ScaleInfoOut:
    """Return the notes and degree labels of a scale on a root."""
    root_pc = _require_root(root)
    _require_scale(scale)
    info = scale_info(root, scale, spelling)
    if info is None:
        raise HTTPException(status_code=404, detail=f"unknown scale {scale!r}")
    return ScaleInfoOut(
        label=info.label,
        root=info.root,
        scale=info.scale.key,
        notes=list(info.notes),
        degrees=[interval_name(root_pc, (root_pc + i) % 12) for i in info.scale.intervals],
        pattern=info.pattern,
    )


@router.get("/scales/{root}/{scale}/chords", response_model=ProgressionResponse)
def get_scale_chords(
    root: str, scale: str, spelling: SpellingPolicy = "auto"
) -> ProgressionResponse:
    """Return the triad on every degree of a seven-note scale."""
    _require_root(root)
    _require_scale(scale)
    definition = get_scale(scale)
    if definition.degree_count != 7:
        raise HTTPException(
            status_code=400,
            detail=f"scale {scale!r} has {definition.degree_count} degrees; harmonizing needs 7",
        )
    return ProgressionResponse(
        root=root,
        scale=definition.key,
        chords=[_chord_out(c) for c in diatonic_chords(root, scale, spelling)],
    )


# ---------------------------------------------------------------------------
# Chords
# ---------------------------------------------------------------------------


@router.get("/chords/{symbol}", response_model=ChordOut)
def get_chord(symbol: str, spelling: SpellingPolicy = "auto") -> ChordOut:
    """Parse a chord symbol. Unknown suffix tokens are ignored, never rejected."""
    parsed = parse_chord(symbol)
    written_root = chord_root_text(symbol)
    return ChordOut(
        symbol=parsed.symbol,
        root=written_root,
        quality=parsed.quality,
        seventh=parsed.seventh,
        intervals=list(parsed.intervals),
        notes=[spell_pitch_class(pc, spelling, tonic=written_root) for pc in parsed.pitch_classes],
    )


# ---------------------------------------------------------------------------
# Tunings / fretboard
# ---------------------------------------------------------------------------


@router.get("/tunings", response_model=list[TuningOut])
def list_tunings() -> list[TuningOut]:
    """Return the tuning presets, lowest string first in each."""
    return [
        TuningOut(
            key=t.key,
            name=t.name,
            strings=t.string_count,
            notes=[midi_to_note_name(m) for m in t.open_midi],
            open_midi=list(t.open_midi),
        )
        for t in available_tunings()
    ]


@router.get("/fretboard", response_model=FretboardOut)
def get_fretboard(
    root: str,
    scale: str = "major",
    tuning: str = "standard-6",
    frets: int = Query(default=12, ge=0, le=MAX_GRID_FRETS),
    spelling: SpellingPolicy = "auto",
    strings: list[str] | None = Query(default=None),
) -> FretboardOut:
    """Return the note grid for a tuning, annotated against a root and scale.

    Repeating ``strings`` (``?strings=D2&strings=A2&...``, lowest first, 4-8
    of them) supplies a custom tuning in place of the ``tuning`` preset.
    """
    _require_root(root)
    _require_scale(scale)
    if strings:
        try:
            resolved = tuning_from_notes(strings)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail="invalid strings") from exc
    else:
        try:
            resolved = get_tuning(tuning)
        except ValueError as exc:
            raise HTTPException(status_code=404, detail=f"unknown tuning {tuning!r}") from exc

    grid = fretboard_grid(resolved, root, scale, max_frets=frets, policy=spelling)
    return FretboardOut(
        root=root,
        scale=get_scale(scale).key,
        tuning=resolved.key,
        frets=frets,
        strings=[
            [
                FretboardCellOut(
                    fret=c.fret,
                    note=c.note,
                    interval=c.interval,
                    is_root=c.is_root,
                    is_in_scale=c.is_in_scale,
                )
                for c in row
            ]
            for row in grid
        ],
    )


# ---------------------------------------------------------------------------
# Progressions
# ---------------------------------------------------------------------------


@router.post("/progressions", response_model=ProgressionResponse)
def progressions(body: ProgressionRequest) -> ProgressionResponse:
    """Build chords from roman numerals in a key. Unknown numerals are skipped."""
    _require_root(body.root)
    _require_scale(body.scale)
    scale = get_scale(body.scale)
    if scale.degree_count != 7:
        raise HTTPException(
            status_code=400,
            detail=f"scale {body.scale!r} has {scale.degree_count} degrees; progressions need 7",
        )

    chords = build_progression(body.root, body.scale, body.numerals, body.spelling)
    if len(chords) < len(body.numerals):
        logger.info(
            "Skipped %d unrecognized numerals in %s",
            len(body.numerals) - len(chords),
            body.numerals,
        )
    return ProgressionResponse(
        root=body.root,
        scale=scale.key,
        chords=[_chord_out(c) for c in chords],
    )
