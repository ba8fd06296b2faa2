"""Tests for infrastructure/metrics.py — Prometheus counter recording.

Verifies that:
- record_arpeggio() increments the request counter with status + pattern labels
- Latency is observed only for successful requests
- Dropped notes accumulate per position
- get_metrics_response() exposes the fretboard metric families
- LatencyTimer measures elapsed time correctly

Counters are cumulative within the module's private registry, so every test
compares before/after values instead of absolute numbers.
"""

from __future__ import annotations

import time

from infrastructure import metrics as metrics_module

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _sample(name: str, **labels: str) -> float:
    """Read a sample from the metrics registry (0.0 if not yet created)."""
    value = metrics_module._REGISTRY.get_sample_value(name, labels)
    return value or 0.0


# ---------------------------------------------------------------------------
# record_arpeggio
# ---------------------------------------------------------------------------


class TestRecordArpeggio:
    def test_success_increments_counter(self) -> None:
        before = _sample("fretboard_arpeggio_requests_total", status="success", pattern="sweep")
        metrics_module.record_arpeggio(status="success", pattern="sweep", position="mid")
        after = _sample("fretboard_arpeggio_requests_total", status="success", pattern="sweep")
        assert after == before + 1

    def test_success_observes_latency(self) -> None:
        before = _sample("fretboard_arpeggio_latency_seconds_count", position="high")
        metrics_module.record_arpeggio(
            status="success", pattern="ascending", position="high", latency_seconds=0.002
        )
        after = _sample("fretboard_arpeggio_latency_seconds_count", position="high")
        assert after == before + 1

    def test_rejected_skips_latency(self) -> None:
        before = _sample("fretboard_arpeggio_latency_seconds_count", position="open")
        metrics_module.record_arpeggio(status="rejected", pattern="unknown", position="open")
        after = _sample("fretboard_arpeggio_latency_seconds_count", position="open")
        assert after == before

    def test_dropped_notes_accumulate(self) -> None:
        before = _sample("fretboard_dropped_notes_total", position="multi")
        metrics_module.record_arpeggio(status="success", pattern="updown", position="multi", dropped=3)
        metrics_module.record_arpeggio(status="success", pattern="updown", position="multi", dropped=2)
        after = _sample("fretboard_dropped_notes_total", position="multi")
        assert after == before + 5

    def test_burst(self) -> None:
        before = _sample("fretboard_arpeggio_requests_total", status="error", pattern="descending")
        for _ in range(25):
            metrics_module.record_arpeggio(status="error", pattern="descending", position="low")
        after = _sample("fretboard_arpeggio_requests_total", status="error", pattern="descending")
        assert after == before + 25


# ---------------------------------------------------------------------------
# Exposition
# ---------------------------------------------------------------------------


class TestMetricsResponse:
    def test_exposition_contains_metric_families(self) -> None:
        metrics_module.record_arpeggio(status="success", pattern="ascending", position="low")
        body, content_type = metrics_module.get_metrics_response()
        text = body.decode()
        assert "fretboard_arpeggio_requests_total" in text
        assert "fretboard_arpeggio_latency_seconds" in text
        assert content_type.startswith("text/plain")


# ---------------------------------------------------------------------------
# LatencyTimer
# ---------------------------------------------------------------------------


class TestLatencyTimer:
    def test_measures_elapsed(self) -> None:
        with metrics_module.LatencyTimer() as t:
            time.sleep(0.01)
        assert t.elapsed >= 0.01

    def test_zero_before_exit(self) -> None:
        timer = metrics_module.LatencyTimer()
        assert timer.elapsed == 0.0
