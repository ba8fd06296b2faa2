"""Infrastructure layer for the fretboard arpeggio engine.

Modules:
    metrics     Prometheus metrics registry for arpeggio generation.
"""
