"""
Computation engine for Plating Calculator.

This module handles:
- Flask area resolution (table lookup or custom area)
- Per-flask cell and media amounts from the per-cm² densities
- The plating recipe: cell suspension and media volumes

Every function is pure: the same inputs always give the same result, and
nothing is cached between calls.
"""

import math

from plating_calculator.config import FALLBACK_FLASK_AREA_CM2
from plating_calculator.models import PlatingInputs, RecipeResult, create_flask_spec
from plating_calculator.parsing import parse_float_or_default


def resolve_flask_area(flask_name: str, custom_area_text: str | None = None) -> int:
    """
    Look up the surface area of the selected flask.

    Args:
        flask_name: Selected flask option (T25, T75, T175, T225 or Custom)
        custom_area_text: Raw custom area text, only used for Custom

    Returns:
        Area in cm²; FALLBACK_FLASK_AREA_CM2 for unknown flasks and for a
        missing, invalid or non-positive custom area
    """
    return create_flask_spec(flask_name, custom_area_text).area_cm2


def compute_per_flask(amount_per_cm2: float, flask_area_cm2: float) -> float:
    """
    Scale a per-cm² amount up to a whole flask.

    Formula: per_flask = per_cm2 × area

    Args:
        amount_per_cm2: Amount per cm² (millions of cells, or mL of media)
        flask_area_cm2: Flask surface area in cm²

    Returns:
        Amount for the whole flask
    """
    return amount_per_cm2 * flask_area_cm2


def compute_cell_suspension_volume(
    cells_per_flask: float,
    cells_harvested_millions: float,
    suspension_volume_ml: float,
) -> float:
    """
    Volume of harvested suspension that holds the cells for one flask.

    Formula: V_susp = (cells_per_flask / cells_harvested) × suspension_volume

    Args:
        cells_per_flask: Millions of cells to plate
        cells_harvested_millions: Millions of cells in the harvested suspension
        suspension_volume_ml: Volume of the harvested suspension (mL)

    Returns:
        Suspension volume in mL, or 0 when no cells were harvested or none
        are needed
    """
    if cells_harvested_millions > 0 and cells_per_flask > 0:
        return (cells_per_flask / cells_harvested_millions) * suspension_volume_ml
    return 0.0


def compute_media_volume(media_per_flask: float, cell_suspension_volume_ml: float) -> float:
    """
    Media to top the flask up after adding the cell suspension.

    Not clamped: a negative value means the suspension alone exceeds the
    flask's media volume.
    """
    return media_per_flask - cell_suspension_volume_ml


def resolve_numeric_area(flask_area_cm2: int | float) -> int | float:
    """
    Check a flask area passed in as a number.

    Returns:
        The area, or FALLBACK_FLASK_AREA_CM2 if it is non-positive, not finite
        or too large to use as a float
    """
    try:
        area_as_float = float(flask_area_cm2)
    except (OverflowError, TypeError, ValueError):
        return FALLBACK_FLASK_AREA_CM2

    if not math.isfinite(area_as_float) or area_as_float <= 0:
        return FALLBACK_FLASK_AREA_CM2
    return flask_area_cm2


def derive_recipe(
    cells_per_cm2: float,
    media_per_cm2: float,
    flask_area_cm2: int | float,
    cells_harvested_millions: float,
    suspension_volume_ml: float,
) -> RecipeResult:
    """
    Derive the recipe from parsed values and a resolved flask area.

    Algorithm:
    1. cells_per_flask = cells_per_cm2 × area
    2. media_per_flask = media_per_cm2 × area
    3. Cell suspension volume (0 unless cells harvested and needed)
    4. media_volume = media_per_flask - cell suspension volume

    Returns:
        RecipeResult with full-precision values
    """
    cells_per_flask = compute_per_flask(cells_per_cm2, flask_area_cm2)
    media_per_flask = compute_per_flask(media_per_cm2, flask_area_cm2)

    cell_suspension_volume_ml = compute_cell_suspension_volume(
        cells_per_flask, cells_harvested_millions, suspension_volume_ml
    )

    return RecipeResult(
        cells_per_flask=cells_per_flask,
        media_per_flask=media_per_flask,
        cell_suspension_volume_ml=cell_suspension_volume_ml,
        media_volume_ml=compute_media_volume(media_per_flask, cell_suspension_volume_ml),
    )


def compute_recipe_from_inputs(inputs: PlatingInputs) -> RecipeResult:
    """
    Compute the plating recipe for a snapshot of the form.

    Args:
        inputs: Parsed form values; the flask area comes from the FlaskSpec

    Returns:
        RecipeResult with full-precision values
    """
    return derive_recipe(
        inputs.density.cells_per_cm2,
        inputs.density.media_per_cm2,
        inputs.flask.area_cm2,
        inputs.harvest.cells_harvested_millions,
        inputs.harvest.suspension_volume_ml,
    )


def compute_recipe(
    cells_harvested_millions: str | None,
    suspension_volume_ml: str | None,
    flask_area_cm2: int | float,
    cells_per_cm2: str | None,
    media_per_cm2: str | None,
) -> RecipeResult:
    """
    Compute the plating recipe from raw form text and a flask area.

    Text that cannot be parsed counts as 0. A flask area that is non-positive,
    not finite or too large for a float takes FALLBACK_FLASK_AREA_CM2.

    Args:
        cells_harvested_millions: Raw cells harvested text (millions)
        suspension_volume_ml: Raw suspension volume text (mL)
        flask_area_cm2: Flask surface area in cm²
        cells_per_cm2: Raw seeding density text (millions of cells per cm²)
        media_per_cm2: Raw media density text (mL per cm²)

    Returns:
        RecipeResult with full-precision values
    """
    return derive_recipe(
        parse_float_or_default(cells_per_cm2),
        parse_float_or_default(media_per_cm2),
        resolve_numeric_area(flask_area_cm2),
        parse_float_or_default(cells_harvested_millions),
        parse_float_or_default(suspension_volume_ml),
    )
