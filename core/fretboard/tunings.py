"""
core/fretboard/tunings.py — Tuning presets and custom tunings.

Presets live in core/fretboard/templates/tunings.yaml as note names with
octave ("E2", "F#1"). The file is parsed once per process and converted
into frozen Tuning objects; callers get the same objects on every lookup.

Exports:
    get_tuning(key) → Tuning
    available_tunings() → list[Tuning]
    tuning_from_notes(notes, key, name) → Tuning
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Sequence
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml  # PyYAML

from core.fretboard.types import Tuning
from core.music_theory.notes import note_name_to_midi

logger = logging.getLogger(__name__)

_TEMPLATES_DIR: Path = Path(__file__).parent / "templates"
_TUNINGS_FILE: Path = _TEMPLATES_DIR / "tunings.yaml"


def tuning_from_notes(
    notes: Sequence[str],
    key: str = "custom",
    name: str = "Custom",
) -> Tuning:
    """Build a Tuning from open-string note names, lowest string first.

    Args:
        notes: e.g. ["D2", "A2", "D3", "G3", "B3", "E4"]
        key:   Identifier for the tuning
        name:  Display name

    Raises:
        InvalidNoteError: If a note name cannot be parsed
        ValueError:       If the string count or a pitch is out of range
    """
    return Tuning(key=key, name=name, open_midi=tuple(note_name_to_midi(n) for n in notes))


@functools.cache
def _load_presets() -> MappingProxyType[str, Tuning]:
    """Parse tunings.yaml once and return an immutable key → Tuning mapping."""
    with _TUNINGS_FILE.open(encoding="utf-8") as fh:
        raw: dict[str, Any] = yaml.safe_load(fh) or {}

    presets = {
        key: tuning_from_notes(entry["strings"], key=key, name=entry["name"])
        for key, entry in raw.items()
    }
    logger.debug("Loaded %d tuning presets from %s", len(presets), _TUNINGS_FILE.name)
    return MappingProxyType(presets)


def get_tuning(key: str) -> Tuning:
    """Return a tuning preset by key (case-insensitive).

    Raises:
        ValueError: If the preset does not exist
    """
    presets = _load_presets()
    tuning = presets.get(key.strip().lower())
    if tuning is None:
        raise ValueError(f"Unknown tuning {key!r}. Available: {sorted(presets)}")
    return tuning


def available_tunings() -> list[Tuning]:
    """Return all presets in file order."""
    return list(_load_presets().values())

