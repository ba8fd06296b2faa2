"""Prometheus metrics for the fretboard arpeggio service.

Metrics carry musical context (pattern, position) so dashboards show which
requests are slow or lossy, not just generic HTTP stats.

Metrics:
    fretboard_arpeggio_requests_total    Counter by status (success/rejected/error) and pattern
    fretboard_arpeggio_latency_seconds   Histogram of generation latency by position
    fretboard_dropped_notes_total        Notes the mapper could not place, by position

Usage::

    from infrastructure.metrics import LatencyTimer, record_arpeggio

    with LatencyTimer() as t:
        result = generate_arpeggio(request)
    record_arpeggio(status="success", pattern="sweep", position="mid",
                    latency_seconds=t.elapsed, dropped=result.dropped)
"""

from __future__ import annotations

import time

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)

_REGISTRY = CollectorRegistry()

arpeggio_requests_total = Counter(
    "fretboard_arpeggio_requests_total",
    "Total arpeggio generation requests by status and pattern",
    ["status", "pattern"],
    registry=_REGISTRY,
)

arpeggio_latency_seconds = Histogram(
    "fretboard_arpeggio_latency_seconds",
    "Arpeggio generation latency in seconds",
    ["position"],
    buckets=[0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1],
    registry=_REGISTRY,
)

dropped_notes_total = Counter(
    "fretboard_dropped_notes_total",
    "Sequence notes with no playable position, by hand position",
    ["position"],
    registry=_REGISTRY,
)


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------


def record_arpeggio(
    *,
    status: str,
    pattern: str,
    position: str,
    latency_seconds: float = 0.0,
    dropped: int = 0,
) -> None:
    """Record a completed arpeggio request.

    Args:
        status: One of "success", "rejected", "error".
        pattern: Requested pattern, or "unknown" if the request was rejected early.
        position: Requested hand position.
        latency_seconds: Generation wall-clock time in seconds.
        dropped: Number of notes the mapper dropped.
    """
    arpeggio_requests_total.labels(status=status, pattern=pattern).inc()
    if status == "success":
        arpeggio_latency_seconds.labels(position=position).observe(latency_seconds)
    if dropped:
        dropped_notes_total.labels(position=position).inc(dropped)


def get_metrics_response() -> tuple[bytes, str]:
    """Generate Prometheus text exposition format.

    Returns:
        Tuple of (body_bytes, content_type_string).
    """
    return generate_latest(_REGISTRY), CONTENT_TYPE_LATEST


class LatencyTimer:
    """Context manager for measuring latency.

    Usage::

        with LatencyTimer() as t:
            result = generate_arpeggio(request)
        record_arpeggio(status="success", pattern="ascending", position="low",
                        latency_seconds=t.elapsed)
    """

    def __init__(self) -> None:
        """Initialize timer."""
        self._start: float = 0.0
        self.elapsed: float = 0.0

    def __enter__(self) -> LatencyTimer:
        """Start timing."""
        self._start = time.perf_counter()
        return self

    def __exit__(self, *_: object) -> None:
        """Stop timing and record elapsed."""
        self.elapsed = time.perf_counter() - self._start
