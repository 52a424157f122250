"""
Display formatting for Plating Calculator.

Turns full-precision results into the text and tables shown on the form.
Values are rounded half-up on their shortest decimal form, so 13.95 shows as
"14.0" even though the nearest double is slightly below 13.95.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

import pandas as pd

from plating_calculator.config import (
    DENSITY_COLUMN_PER_CM2,
    DENSITY_COLUMN_PER_FLASK,
    DENSITY_ROW_CELLS,
    DENSITY_ROW_MEDIA,
    DISPLAY_DECIMALS,
    RECIPE_COLUMN_COMPONENT,
    RECIPE_COLUMN_VOLUME,
    RECIPE_ROW_CELL_SUSPENSION,
    RECIPE_ROW_MEDIA,
)
from plating_calculator.models import RecipeResult


def format_decimal(value: float, decimals: int = DISPLAY_DECIMALS) -> str:
    """
    Format a value with a fixed number of decimal places, rounding half-up.

    Args:
        value: Value to format
        decimals: Decimal places to keep

    Returns:
        Formatted string, e.g. format_decimal(1.05) == "1.1"
    """
    if not math.isfinite(value):
        return str(value)

    # repr() gives the shortest text that round-trips to the same float
    with localcontext() as ctx:
        ctx.prec = 400  # enough digits for any finite double
        quantum = Decimal(1).scaleb(-decimals)
        return str(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))


def density_table(
    result: RecipeResult,
    cells_per_cm2_text: str,
    media_per_cm2_text: str,
) -> pd.DataFrame:
    """
    Build the seeding parameter table.

    Args:
        result: Computed recipe
        cells_per_cm2_text: Seeding density as typed
        media_per_cm2_text: Media density as typed

    Returns:
        DataFrame with a label column, per-cm² values and per-flask values
    """
    return pd.DataFrame({
        "": [DENSITY_ROW_CELLS, DENSITY_ROW_MEDIA],
        DENSITY_COLUMN_PER_CM2: [cells_per_cm2_text, media_per_cm2_text],
        DENSITY_COLUMN_PER_FLASK: [
            format_decimal(result.cells_per_flask),
            format_decimal(result.media_per_flask),
        ],
    })


def recipe_table(result: RecipeResult) -> pd.DataFrame:
    """
    Build the recipe table: what to pipette into the flask.

    Args:
        result: Computed recipe

    Returns:
        DataFrame with Component and Volume (mL) columns
    """
    return pd.DataFrame({
        RECIPE_COLUMN_COMPONENT: [RECIPE_ROW_CELL_SUSPENSION, RECIPE_ROW_MEDIA],
        RECIPE_COLUMN_VOLUME: [
            format_decimal(result.cell_suspension_volume_ml),
            # Clamped before rounding
            format_decimal(result.display_media_volume_ml),
        ],
    })
