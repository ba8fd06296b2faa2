"""
Arpeggio generation route.

``POST /api/arpeggio/generate`` — chord + pattern + position → timed
fretboard events and an ASCII tab.

The request schema has already rejected missing fields, out-of-range
numbers, unknown enum values, unknown tunings/scales and unparseable keys
(→ 400 via the validation handler in api.main). What is left here is the
call into the core, metrics, and turning unexpected failures into a
500 with a stable body.
"""

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from api.schemas.arpeggio import (
    ArpeggioEventOut,
    ArpeggioGenerateRequest,
    ArpeggioGenerateResponse,
    ArpeggioMetaOut,
    ErrorResponse,
)
from core.arpeggio import ArpeggioRequest, generate_arpeggio
from core.fretboard.tunings import tuning_from_notes
from core.music_theory.notes import InvalidNoteError
from infrastructure.metrics import LatencyTimer, record_arpeggio

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/arpeggio", tags=["arpeggio"])


@router.post(
    "/generate",
    response_model=ArpeggioGenerateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def generate(body: ArpeggioGenerateRequest) -> ArpeggioGenerateResponse | JSONResponse:
    """Generate a playable arpeggio for a chord in a hand position.

    Events are spaced evenly at (60 / tempo) / subdivision seconds. Notes
    with no playable position are left out and counted in ``dropped``.
    A ``strings`` list replaces the ``tuning`` preset with a custom tuning.
    """
    request = ArpeggioRequest(
        key=body.key,
        chord=body.chord,
        pattern=body.pattern,
        position=body.position,
        length=body.length,
        tempo=body.tempo,
        subdivision=body.subdivision,
        tuning=tuning_from_notes(body.strings) if body.strings is not None else body.tuning,
        spelling=body.spelling,
        scale=body.scale,
    )

    try:
        with LatencyTimer() as timer:
            result = generate_arpeggio(request)
    except (InvalidNoteError, ValueError) as exc:
        logger.info("Arpeggio request rejected: %s", exc)
        record_arpeggio(status="rejected", pattern=body.pattern, position=body.position)
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception:
        logger.exception(
            "Arpeggio generation failed for %s %s (%s, %s)",
            body.key,
            body.chord,
            body.pattern,
            body.position,
        )
        record_arpeggio(status="error", pattern=body.pattern, position=body.position)
        return JSONResponse(status_code=500, content={"error": "internal_error"})

    record_arpeggio(
        status="success",
        pattern=body.pattern,
        position=body.position,
        latency_seconds=timer.elapsed,
        dropped=result.dropped,
    )
    logger.debug(
        "Generated %d events for %s %s in %.2fms",
        len(result.events),
        body.chord,
        body.pattern,
        timer.elapsed * 1000,
    )

    meta = result.meta
    return ArpeggioGenerateResponse(
        meta=ArpeggioMetaOut(
            key=meta.key,
            chord=meta.chord,
            pattern=meta.pattern,
            position=meta.position,
            tempo=meta.tempo,
            subdivision=meta.subdivision,
            tuning=meta.tuning,
        ),
        events=[
            ArpeggioEventOut(
                time=e.time,
                duration=e.duration,
                note=e.note,
                string=e.string,
                fret=e.fret,
                finger=e.finger,
            )
            for e in result.events
        ],
        ascii=result.ascii,
        dropped=result.dropped,
    )
