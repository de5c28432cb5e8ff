"""Decathlon points scoring.

Each event converts a raw measurement into points with one of two forms:
  - Track events (times, lower is better):   A * (B - m) ** C
  - Field events (distances, higher is better): A * (m - B) ** C

Results are truncated toward zero. Track times are in seconds, jumps in
centimetres, throws in metres.
"""

import logging
import math

from .models import ScoreResult

logger = logging.getLogger(__name__)


TRACK = 'track'
FIELD = 'field'

# event -> (A, B, C, kind)
EVENT_FORMULAS = {
    '100M': (25.4347, 18.00, 1.81, TRACK),
    '110M': (5.74352, 28.50, 1.92, TRACK),
    '400M': (1.53775, 82.00, 1.81, TRACK),
    '1500M': (0.03768, 480.00, 1.85, TRACK),
    'DISCUS': (12.91, 4.00, 1.10, FIELD),
    'JAVELIN': (10.14, 7.00, 1.08, FIELD),
    'SHOT': (51.39, 1.50, 1.05, FIELD),
    'LONG': (0.14354, 220.00, 1.40, FIELD),
    'HIGH': (0.8465, 75.00, 1.42, FIELD),
    'POLE': (0.2797, 100.00, 1.35, FIELD),
}

UNSUPPORTED_EVENT = 'unsupported_event'
OUT_OF_RANGE = 'out_of_range'


def points(event: str, measurement: float) -> ScoreResult:
    """Score a measurement for an event.

    Args:
        event: Event identifier; matched case-insensitively.
        measurement: Time or distance for the event.

    Returns:
        ScoreResult with the truncated points, or a failure of
        UNSUPPORTED_EVENT for an unknown event, or OUT_OF_RANGE when the
        formula has no finite real value (e.g. a time slower than the
        formula's baseline).
    """
    formula = EVENT_FORMULAS.get(event.upper())
    if formula is None:
        return ScoreResult(failure=UNSUPPORTED_EVENT)

    a, b, c, kind = formula
    base = b - measurement if kind == TRACK else measurement - b
    try:
        raw = a * math.pow(base, c)
    except (ValueError, OverflowError):
        logger.debug("No real score for %s %r", event, measurement)
        return ScoreResult(failure=OUT_OF_RANGE)
    if not math.isfinite(raw):
        return ScoreResult(failure=OUT_OF_RANGE)

    return ScoreResult(points=int(raw))
