import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes.arpeggio import router as arpeggio_router
from api.routes.theory import router as theory_router
from infrastructure.metrics import get_metrics_response, record_arpeggio

logger = logging.getLogger(__name__)

app = FastAPI(title="Fretboard Arpeggio Engine")

# CORS: the fretboard UI dev servers call the API directly
# localhost and 127.0.0.1 are distinct origins to a browser
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(arpeggio_router)
app.include_router(theory_router)


# ---------------------------------------------------------------------------
# Error bodies: every 4xx/5xx is {"error": "..."}
# ---------------------------------------------------------------------------

_REQUIRED_ERROR_TYPES = frozenset({"missing", "string_too_short"})


def _validation_message(exc: RequestValidationError) -> str:
    """Reduce the first validation error to '<field> is required' or 'invalid <field>'."""
    errors = exc.errors()
    if not errors:
        return "invalid request"
    first = errors[0]
    field = next((str(p) for p in reversed(first.get("loc", ())) if isinstance(p, str)), "request")
    if first.get("type") in _REQUIRED_ERROR_TYPES:
        return f"{field} is required"
    return f"invalid {field}"


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Map schema validation failures to 400 with a one-line message."""
    message = _validation_message(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    if request.url.path.startswith("/api/arpeggio"):
        record_arpeggio(status="rejected", pattern="unknown", position="unknown")
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTPException detail as {"error": detail}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


# ---------------------------------------------------------------------------
# Health / metrics
# ---------------------------------------------------------------------------


@app.get("/api/health")
def health() -> dict[str, bool]:
    """Return a simple liveness check."""
    return {"ok": True}


@app.get("/metrics")
def metrics() -> Response:
    """Prometheus metrics endpoint.

    Returns metrics in Prometheus text exposition format.
    """
    body, content_type = get_metrics_response()
    return Response(content=body, media_type=content_type)
