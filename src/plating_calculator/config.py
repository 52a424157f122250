"""
Configuration constants and defaults for Plating Calculator.

This module contains the flask table, default seeding parameters, display
settings and labels used throughout the application.
"""

import os
from typing import Final

# ============================================================================
# Flask Table
# ============================================================================

# Culture surface area (cm²) for the standard flask sizes, in display order
FLASK_AREAS_CM2: Final[dict[str, int]] = {
    "T25": 25,
    "T75": 75,
    "T175": 175,
    "T225": 225,
}

# Flask option whose area is entered by the user
CUSTOM_FLASK: Final[str] = "Custom"

# Flask selected when the form opens, and after cancelling an empty custom area
DEFAULT_FLASK: Final[str] = "T75"

# Area used when the flask is unknown or the custom area is missing/invalid
FALLBACK_FLASK_AREA_CM2: Final[int] = 75

# ============================================================================
# Default Seeding Parameters
# ============================================================================

# Millions of cells per cm² at plating
DEFAULT_CELLS_PER_CM2: Final[float] = 0.028

# mL of media per cm²
DEFAULT_MEDIA_PER_CM2: Final[float] = 0.2

# Text shown in the density fields when the form opens
DEFAULT_CELLS_PER_CM2_TEXT: Final[str] = "0.028"
DEFAULT_MEDIA_PER_CM2_TEXT: Final[str] = "0.2"

# ============================================================================
# Input Limits
# ============================================================================

# Integer fields accept the signed 32-bit range; anything wider is invalid text
MIN_INTEGER_INPUT: Final[int] = -(2**31)
MAX_INTEGER_INPUT: Final[int] = 2**31 - 1

# ============================================================================
# Display Settings
# ============================================================================

# Decimal places for per-flask and recipe volumes
DISPLAY_DECIMALS: Final[int] = 1

# ============================================================================
# Table Labels
# ============================================================================

DENSITY_ROW_CELLS: Final[str] = "M cells"
DENSITY_ROW_MEDIA: Final[str] = "ml media"
DENSITY_COLUMN_PER_CM2: Final[str] = "per cm²"
DENSITY_COLUMN_PER_FLASK: Final[str] = "per flask"

RECIPE_COLUMN_COMPONENT: Final[str] = "Component"
RECIPE_COLUMN_VOLUME: Final[str] = "Volume (mL)"
RECIPE_ROW_CELL_SUSPENSION: Final[str] = "Cell Suspension"
RECIPE_ROW_MEDIA: Final[str] = "Media"

# ============================================================================
# Application Metadata
# ============================================================================

APP_NAME: Final[str] = "Cell Plating Recipe"
APP_DESCRIPTION: Final[str] = "Cell suspension and media volumes for plating a flask"

# ============================================================================
# Server Settings (environment)
# ============================================================================

# When running in Docker, set GRADIO_SERVER_NAME=0.0.0.0
DEFAULT_SERVER_NAME: Final[str] = "127.0.0.1"
DEFAULT_SERVER_PORT: Final[int] = 7860
DEFAULT_LOG_LEVEL: Final[str] = "INFO"

# ============================================================================
# Helper Functions
# ============================================================================


def get_flask_choices() -> list[str]:
    """
    Get the flask options in display order.

    Returns:
        Standard flask names followed by the custom option
    """
    return list(FLASK_AREAS_CM2) + [CUSTOM_FLASK]


def get_server_settings() -> tuple[str, int]:
    """
    Read the Gradio server address from the environment.

    Returns:
        Tuple of (server_name, server_port)
    """
    server_name = os.getenv("GRADIO_SERVER_NAME", DEFAULT_SERVER_NAME)
    server_port = int(os.getenv("GRADIO_SERVER_PORT", str(DEFAULT_SERVER_PORT)))
    return server_name, server_port


def get_log_level() -> str:
    """Read the log level name from the LOG_LEVEL environment variable."""
    return os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
