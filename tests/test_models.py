"""
Unit tests for Pydantic data models.

Tests defaults, validation, immutability and helper functions for all models.
"""

import pytest
from pydantic import ValidationError

from plating_calculator.models import (
    FlaskSpec,
    HarvestSpec,
    PlatingInputs,
    RecipeResult,
    SeedingDensity,
    create_flask_spec,
    create_plating_inputs,
)


# ============================================================================
# FlaskSpec Tests
# ============================================================================


def test_flask_spec_defaults():
    """FlaskSpec should default to a T75 flask."""
    flask = FlaskSpec()
    assert flask.name == "T75"
    assert flask.area_cm2 == 75


def test_flask_spec_custom():
    """FlaskSpec should accept a custom flask with its own area."""
    flask = FlaskSpec(name="Custom", area_cm2=150)
    assert flask.name == "Custom"
    assert flask.area_cm2 == 150


def test_flask_spec_unknown_name_fails():
    """Unknown flask names should raise ValidationError."""
    with pytest.raises(ValidationError) as exc_info:
        FlaskSpec(name="T999", area_cm2=999)
    assert "Unknown flask" in str(exc_info.value)


@pytest.mark.parametrize("area", [0, -25])
def test_flask_spec_non_positive_area_fails(area):
    """Non-positive areas should raise ValidationError."""
    with pytest.raises(ValidationError):
        FlaskSpec(name="Custom", area_cm2=area)


def test_flask_spec_is_frozen():
    """FlaskSpec should not allow its area to be changed."""
    flask = FlaskSpec()
    with pytest.raises(ValidationError):
        flask.area_cm2 = 25


# ============================================================================
# SeedingDensity / HarvestSpec Tests
# ============================================================================


def test_seeding_density_defaults():
    """SeedingDensity should default to 0.028 M cells and 0.2 mL media per cm²."""
    density = SeedingDensity()
    assert density.cells_per_cm2 == 0.028
    assert density.media_per_cm2 == 0.2


def test_harvest_spec_defaults():
    """HarvestSpec should default to no cells in no volume."""
    harvest = HarvestSpec()
    assert harvest.cells_harvested_millions == 0.0
    assert harvest.suspension_volume_ml == 0.0


def test_plating_inputs_defaults():
    """PlatingInputs should combine the default harvest, density and flask."""
    inputs = PlatingInputs()
    assert inputs.harvest == HarvestSpec()
    assert inputs.density == SeedingDensity()
    assert inputs.flask == FlaskSpec()


# ============================================================================
# RecipeResult Tests
# ============================================================================


def test_recipe_result_keeps_negative_media():
    """RecipeResult should store a negative media volume unclamped."""
    result = RecipeResult(
        cells_per_flask=2.1,
        media_per_flask=15.0,
        cell_suspension_volume_ml=18.0,
        media_volume_ml=-3.0,
    )
    assert result.media_volume_ml == -3.0
    assert result.display_media_volume_ml == 0.0


def test_recipe_result_display_media_positive():
    """display_media_volume_ml should pass positive volumes through."""
    result = RecipeResult(
        cells_per_flask=2.1,
        media_per_flask=15.0,
        cell_suspension_volume_ml=1.05,
        media_volume_ml=13.95,
    )
    assert result.display_media_volume_ml == 13.95


def test_recipe_result_requires_all_fields():
    """RecipeResult should require every derived value."""
    with pytest.raises(ValidationError):
        RecipeResult(cells_per_flask=2.1, media_per_flask=15.0)


# ============================================================================
# Helper Function Tests
# ============================================================================


@pytest.mark.parametrize(
    "name, area",
    [("T25", 25), ("T75", 75), ("T175", 175), ("T225", 225)],
)
def test_create_flask_spec_standard(name, area):
    """create_flask_spec should look up the standard flask areas."""
    flask = create_flask_spec(name)
    assert flask.name == name
    assert flask.area_cm2 == area


def test_create_flask_spec_custom():
    """create_flask_spec should parse the custom area."""
    flask = create_flask_spec("Custom", "150")
    assert flask.name == "Custom"
    assert flask.area_cm2 == 150


def test_create_flask_spec_custom_invalid_area():
    """create_flask_spec should fall back to 75 cm² for an invalid custom area."""
    flask = create_flask_spec("Custom", "abc")
    assert flask.name == "Custom"
    assert flask.area_cm2 == 75


def test_create_flask_spec_ignores_custom_area_for_standard_flask():
    """create_flask_spec should only use the custom area for the custom flask."""
    assert create_flask_spec("T25", "150").area_cm2 == 25


def test_create_flask_spec_unknown_flask():
    """create_flask_spec should resolve unknown flasks to T75."""
    flask = create_flask_spec("T999")
    assert flask.name == "T75"
    assert flask.area_cm2 == 75


def test_create_plating_inputs_parses_text():
    """create_plating_inputs should parse every numeric field."""
    inputs = create_plating_inputs("10", "5", "0.028", "0.2", flask_name="T175")

    assert inputs.harvest.cells_harvested_millions == 10.0
    assert inputs.harvest.suspension_volume_ml == 5.0
    assert inputs.density.cells_per_cm2 == 0.028
    assert inputs.density.media_per_cm2 == 0.2
    assert inputs.flask.area_cm2 == 175


def test_create_plating_inputs_invalid_text_is_zero():
    """create_plating_inputs should treat invalid numeric text as 0."""
    inputs = create_plating_inputs("", "abc", "x", None)

    assert inputs.harvest.cells_harvested_millions == 0.0
    assert inputs.harvest.suspension_volume_ml == 0.0
    assert inputs.density.cells_per_cm2 == 0.0
    assert inputs.density.media_per_cm2 == 0.0
    assert inputs.flask.name == "T75"


def test_create_plating_inputs_equal_for_equal_text():
    """Identical form text should produce equal snapshots."""
    first = create_plating_inputs("10", "5", "0.028", "0.2", "Custom", "150")
    second = create_plating_inputs("10", "5", "0.028", "0.2", "Custom", "150")
    assert first == second
