"""CLI script: generate an arpeggio and print its ASCII tab.

Usage:
    # Gmaj7 up and down in the middle of the neck:
    python -m scripts.render_arpeggio G Gmaj7 --pattern updown --position mid --length 16

    # Arpeggiate a scale instead of a chord, on a drop-D guitar:
    python -m scripts.render_arpeggio D D5 --scale dorian --tuning drop-d

    # A custom tuning, lowest string first:
    python -m scripts.render_arpeggio E E7 --strings E1 A1 D2 G2

    # Print the events too, as JSON:
    python -m scripts.render_arpeggio A Am7 --json

Output:
    ASCII tab on stdout (one line per string, highest string first).
    With --json, the full result (meta, events, ascii, dropped).

Exit codes:
    0 — success
    2 — bad arguments (unknown key, tuning, scale or string, or out-of-range numbers)
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from collections.abc import Sequence

from core.arpeggio import ArpeggioRequest, generate_arpeggio
from core.config import (
    DEFAULT_ARPEGGIO,
    DEFAULT_LIMITS,
    VALID_PATTERNS,
    VALID_POSITIONS,
    VALID_SPELLINGS,
)
from core.fretboard.tunings import available_tunings, tuning_from_notes
from core.music_theory.notes import InvalidNoteError

logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate a fretboard arpeggio and print it as ASCII tab."
    )
    parser.add_argument("key", help="Tonic note, e.g. G, Bb, F#.")
    parser.add_argument("chord", help="Chord symbol, e.g. Gmaj7, Am7b5, Cdim7.")
    parser.add_argument(
        "--pattern",
        choices=sorted(VALID_PATTERNS),
        default=DEFAULT_ARPEGGIO.pattern,
    )
    parser.add_argument(
        "--position",
        choices=sorted(VALID_POSITIONS),
        default=DEFAULT_ARPEGGIO.position,
    )
    parser.add_argument("--length", type=int, default=DEFAULT_ARPEGGIO.length, metavar="N")
    parser.add_argument("--tempo", type=float, default=DEFAULT_ARPEGGIO.tempo, metavar="BPM")
    parser.add_argument(
        "--subdivision", type=int, default=DEFAULT_ARPEGGIO.subdivision, metavar="N"
    )
    parser.add_argument(
        "--tuning",
        choices=[t.key for t in available_tunings()],
        default=DEFAULT_ARPEGGIO.tuning,
    )
    parser.add_argument(
        "--strings",
        nargs="+",
        default=None,
        metavar="NOTE",
        help="Custom open strings, lowest first (e.g. D2 A2 D3 G3 B3 E4). Overrides --tuning.",
    )
    parser.add_argument(
        "--spelling",
        choices=sorted(VALID_SPELLINGS),
        default=DEFAULT_ARPEGGIO.spelling,
    )
    parser.add_argument(
        "--scale",
        default=None,
        help="Arpeggiate this scale from the key instead of the chord tones.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the full result as JSON instead of only the tab.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False)
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    problem = DEFAULT_LIMITS.check(
        length=args.length, tempo=args.tempo, subdivision=args.subdivision
    )
    if problem is not None:
        logger.error("%s", problem)
        return 2

    try:
        tuning = tuning_from_notes(args.strings) if args.strings else args.tuning
        request = ArpeggioRequest(
            key=args.key,
            chord=args.chord,
            pattern=args.pattern,
            position=args.position,
            length=args.length,
            tempo=args.tempo,
            subdivision=args.subdivision,
            tuning=tuning,
            spelling=args.spelling,
            scale=args.scale,
        )
        result = generate_arpeggio(request)
    except (InvalidNoteError, ValueError) as exc:
        logger.error("%s", exc)
        return 2

    if args.json:
        print(
            json.dumps(
                {
                    "meta": dataclasses.asdict(result.meta),
                    "events": [dataclasses.asdict(e) for e in result.events],
                    "ascii": result.ascii,
                    "dropped": result.dropped,
                },
                indent=2,
                ensure_ascii=False,
            )
        )
    else:
        print(result.ascii)
        if result.dropped:
            print(f"({result.dropped} notes had no playable position)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
