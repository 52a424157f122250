"""
Data models for Plating Calculator using Pydantic.

This module defines the core data structures used throughout the application,
with runtime validation and type safety provided by Pydantic.

Input snapshots and results are frozen: the form owns mutable state and builds
a fresh PlatingInputs on every change, and per-flask values only ever exist as
part of a computed RecipeResult.
"""

from pydantic import BaseModel, Field, field_validator

from plating_calculator.config import (
    CUSTOM_FLASK,
    DEFAULT_CELLS_PER_CM2,
    DEFAULT_FLASK,
    DEFAULT_MEDIA_PER_CM2,
    FALLBACK_FLASK_AREA_CM2,
    FLASK_AREAS_CM2,
    get_flask_choices,
)
from plating_calculator.parsing import parse_custom_area, parse_float_or_default


# ============================================================================
# Input Data Models
# ============================================================================


class FlaskSpec(BaseModel):
    """
    A culture flask and its surface area.

    Standard flasks take their area from FLASK_AREAS_CM2; the custom flask
    carries a user-supplied area.
    """

    name: str = Field(DEFAULT_FLASK, description="Flask identifier (T25, T75, T175, T225 or Custom)")
    area_cm2: int = Field(FALLBACK_FLASK_AREA_CM2, gt=0, description="Culture surface area in cm²")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure the flask is one of the known options."""
        if v not in get_flask_choices():
            raise ValueError(f"Unknown flask '{v}', expected one of {get_flask_choices()}")
        return v

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {"name": "T75", "area_cm2": 75},
                {"name": "Custom", "area_cm2": 150},
            ]
        },
    }


class SeedingDensity(BaseModel):
    """
    Seeding parameters per cm² of culture surface.

    These are the only editable density values; per-flask figures are derived.
    """

    cells_per_cm2: float = Field(DEFAULT_CELLS_PER_CM2, description="Millions of cells per cm²")
    media_per_cm2: float = Field(DEFAULT_MEDIA_PER_CM2, description="mL of media per cm²")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {"cells_per_cm2": 0.028, "media_per_cm2": 0.2},
            ]
        },
    }


class HarvestSpec(BaseModel):
    """The harvested cell suspension: how many cells, in how much liquid."""

    cells_harvested_millions: float = Field(0.0, description="Cells harvested (millions)")
    suspension_volume_ml: float = Field(0.0, description="Volume the harvested cells are suspended in (mL)")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {"cells_harvested_millions": 10.0, "suspension_volume_ml": 5.0},
            ]
        },
    }


class PlatingInputs(BaseModel):
    """
    Snapshot of every value the recipe depends on.

    Built from the current form state on each change.
    """

    harvest: HarvestSpec = Field(default_factory=HarvestSpec)
    density: SeedingDensity = Field(default_factory=SeedingDensity)
    flask: FlaskSpec = Field(default_factory=FlaskSpec)

    model_config = {"frozen": True}


# ============================================================================
# Result Models
# ============================================================================


class RecipeResult(BaseModel):
    """
    Derived per-flask amounts and the plating recipe.

    Values are full precision; rounding and clamping happen at display time.
    """

    cells_per_flask: float = Field(..., description="Millions of cells to plate in the flask")
    media_per_flask: float = Field(..., description="Total liquid volume for the flask (mL)")
    cell_suspension_volume_ml: float = Field(..., description="Cell suspension to add (mL)")
    media_volume_ml: float = Field(..., description="Media to add (mL), may be negative")

    @property
    def display_media_volume_ml(self) -> float:
        """Media volume clamped at zero for display."""
        return max(0.0, self.media_volume_ml)

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "cells_per_flask": 2.1,
                    "media_per_flask": 15.0,
                    "cell_suspension_volume_ml": 1.05,
                    "media_volume_ml": 13.95,
                }
            ]
        },
    }


# ============================================================================
# Helper Functions for Model Creation
# ============================================================================


def create_flask_spec(flask_name: str, custom_area_text: str | None = None) -> FlaskSpec:
    """
    Create a FlaskSpec from the selected flask and the custom area text.

    Args:
        flask_name: Selected flask option
        custom_area_text: Raw custom area, only used for the custom flask

    Returns:
        FlaskSpec; unknown flasks resolve to the default T75
    """
    if flask_name == CUSTOM_FLASK:
        return FlaskSpec(name=CUSTOM_FLASK, area_cm2=parse_custom_area(custom_area_text))

    if flask_name in FLASK_AREAS_CM2:
        return FlaskSpec(name=flask_name, area_cm2=FLASK_AREAS_CM2[flask_name])

    return FlaskSpec(name=DEFAULT_FLASK, area_cm2=FALLBACK_FLASK_AREA_CM2)


def create_plating_inputs(
    cells_harvested_millions: str | None,
    suspension_volume_ml: str | None,
    cells_per_cm2: str | None,
    media_per_cm2: str | None,
    flask_name: str = DEFAULT_FLASK,
    custom_area_text: str | None = None,
) -> PlatingInputs:
    """
    Create PlatingInputs from raw form text.

    Numeric text that cannot be parsed becomes 0.

    Args:
        cells_harvested_millions: Raw "Cells Harvested (millions)" text
        suspension_volume_ml: Raw "Cells Volume (mL)" text
        cells_per_cm2: Raw "M cells per cm²" text
        media_per_cm2: Raw "ml media per cm²" text
        flask_name: Selected flask option
        custom_area_text: Raw custom area text

    Returns:
        Validated PlatingInputs instance
    """
    return PlatingInputs(
        harvest=HarvestSpec(
            cells_harvested_millions=parse_float_or_default(cells_harvested_millions),
            suspension_volume_ml=parse_float_or_default(suspension_volume_ml),
        ),
        density=SeedingDensity(
            cells_per_cm2=parse_float_or_default(cells_per_cm2),
            media_per_cm2=parse_float_or_default(media_per_cm2),
        ),
        flask=create_flask_spec(flask_name, custom_area_text),
    )
