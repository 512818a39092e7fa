"""Length formatting for dimension labels."""

from __future__ import annotations
import logging
import math

from floorplan.models.parameters import Units


logger = logging.getLogger(__name__)

INCHES_PER_METER = 39.3701
SIXTEENTHS = 16


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_imperial(meters: float) -> str:
    """Format a metric length as feet, inches and sixteenths.

    1.0 -> 3'3 3/8", 3.6576 -> 12', 0.0254 -> 1". A fraction that rounds
    up to 16/16 carries into the inches, and 12 inches carry into the feet.
    """
    if not math.isfinite(meters):
        logger.warning("Cannot format non-finite length %r", meters)
        return '0"'
    if meters < 0:
        return "-" + format_imperial(-meters)

    total_inches = meters * INCHES_PER_METER
    if not math.isfinite(total_inches):
        logger.warning("Cannot format length %r: out of range", meters)
        return '0"'
    whole = math.floor(total_inches)
    feet, inches = divmod(int(whole), 12)
    numerator = _round_half_up((total_inches - whole) * SIXTEENTHS)

    if numerator == SIXTEENTHS:
        numerator = 0
        inches += 1
        if inches == 12:
            inches = 0
            feet += 1

    if numerator == 0:
        if feet > 0:
            return f"{feet}'" if inches == 0 else f"{feet}'{inches}\""
        return f'{inches}"'

    divisor = math.gcd(numerator, SIXTEENTHS)
    fraction = f"{numerator // divisor}/{SIXTEENTHS // divisor}"
    if feet > 0:
        return f"{feet}'{inches} {fraction}\""
    if inches > 0:
        return f'{inches} {fraction}"'
    return f'{fraction}"'


def format_metric(meters: float) -> str:
    if not math.isfinite(meters):
        logger.warning("Cannot format non-finite length %r", meters)
        return "0.0 m"
    return f"{meters:.1f} m"


def format_length(meters: float, units: Units = Units.IMPERIAL) -> str:
    if units == Units.METRIC:
        return format_metric(meters)
    return format_imperial(meters)
