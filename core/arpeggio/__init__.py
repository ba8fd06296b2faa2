"""
core/arpeggio/ — Arpeggio sequencing and tablature.

Exports:
    Types:     ArpeggioRequest, ArpeggioEvent, ArpeggioMeta, ArpeggioResult
    Sequencer: generate_arpeggio, build_pitch_sequence, build_string_traversal
    Tab:       render_ascii_tab
"""

from core.arpeggio.sequencer import (
    build_pitch_sequence,
    build_string_traversal,
    generate_arpeggio,
)
from core.arpeggio.tab import render_ascii_tab
from core.arpeggio.types import ArpeggioEvent, ArpeggioMeta, ArpeggioRequest, ArpeggioResult

__all__ = [
    # Types
    "ArpeggioRequest",
    "ArpeggioEvent",
    "ArpeggioMeta",
    "ArpeggioResult",
    # Sequencer
    "generate_arpeggio",
    "build_pitch_sequence",
    "build_string_traversal",
    # Tab
    "render_ascii_tab",
]
