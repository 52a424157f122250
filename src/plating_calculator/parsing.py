"""
Parsing helpers for Plating Calculator.

Form fields arrive as raw text. Every helper here returns a number and never
raises: text that cannot be parsed yields a documented default instead. This
keeps the "always show a number" policy in one auditable place.
"""

import logging
import math
import re

from plating_calculator.config import (
    FALLBACK_FLASK_AREA_CM2,
    MAX_INTEGER_INPUT,
    MIN_INTEGER_INPUT,
)

logger = logging.getLogger(__name__)

# Optional sign and ASCII digits only
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _clean(text: str | None) -> str:
    """Strip surrounding whitespace; None becomes an empty string."""
    if text is None:
        return ""
    return str(text).strip()


def parse_float_or_default(text: str | None, default: float = 0.0) -> float:
    """
    Parse a decimal number typed into a form field.

    Accepts plain and exponent notation ("12", "0.028", "1e3", "-5").
    Empty text, non-numeric text, non-finite values ("nan", "inf") and
    digit-group underscores ("1_000") all yield the default.

    Args:
        text: Raw field text
        default: Value returned when the text is not a valid number

    Returns:
        Parsed value, or the default
    """
    cleaned = _clean(text)
    if not cleaned or "_" in cleaned:
        return default

    try:
        value = float(cleaned)
    except (ValueError, TypeError):
        logger.debug("Could not parse %r as a number, using %s", text, default)
        return default

    if not math.isfinite(value):
        logger.debug("Non-finite value %r, using %s", text, default)
        return default

    return value


def parse_int_or_default(text: str | None, default: int = 0) -> int:
    """
    Parse an integer typed into a form field.

    Only ASCII integer literals within the 32-bit range are accepted: "75.0",
    "7.5e1", non-ASCII digits and values beyond MAX_INTEGER_INPUT all yield
    the default.

    Args:
        text: Raw field text
        default: Value returned when the text is not a valid integer

    Returns:
        Parsed value, or the default
    """
    cleaned = _clean(text)
    if not _INTEGER_PATTERN.fullmatch(cleaned):
        if cleaned:
            logger.debug("Could not parse %r as an integer, using %s", text, default)
        return default

    # More significant digits than the limit can never be in range
    significant = cleaned.lstrip("+-").lstrip("0")
    if len(significant) > len(str(MAX_INTEGER_INPUT)):
        logger.debug("Integer %r out of range, using %s", text, default)
        return default

    value = int(cleaned)
    if not MIN_INTEGER_INPUT <= value <= MAX_INTEGER_INPUT:
        logger.debug("Integer %r out of range, using %s", text, default)
        return default

    return value


def parse_custom_area(text: str | None) -> int:
    """
    Parse a custom flask area in cm².

    Args:
        text: Raw area text, or None if no custom area was entered

    Returns:
        Positive area, or FALLBACK_FLASK_AREA_CM2 if missing, invalid or <= 0
    """
    area = parse_int_or_default(text, default=FALLBACK_FLASK_AREA_CM2)
    if area <= 0:
        logger.debug("Non-positive custom area %r, using %s", text, FALLBACK_FLASK_AREA_CM2)
        return FALLBACK_FLASK_AREA_CM2
    return area


def is_valid_custom_area(text: str | None) -> bool:
    """
    Check whether custom area text can be confirmed.

    Args:
        text: Raw area text from the custom area prompt

    Returns:
        True if the text is a positive integer
    """
    return parse_int_or_default(text, default=0) > 0
