"""
Gradio UI for Plating Calculator

This module provides a web-based form that computes a cell plating recipe as
the inputs change. The form owns all mutable state; every change rebuilds a
PlatingInputs snapshot and recomputes the recipe.
"""

import logging

import gradio as gr
import pandas as pd

from plating_calculator import __version__
from plating_calculator.compute import compute_recipe_from_inputs
from plating_calculator.config import (
    APP_DESCRIPTION,
    APP_NAME,
    CUSTOM_FLASK,
    DEFAULT_CELLS_PER_CM2_TEXT,
    DEFAULT_FLASK,
    DEFAULT_MEDIA_PER_CM2_TEXT,
    get_flask_choices,
    get_log_level,
    get_server_settings,
)
from plating_calculator.display import density_table, recipe_table
from plating_calculator.models import create_plating_inputs
from plating_calculator.parsing import is_valid_custom_area

logger = logging.getLogger(__name__)


# ============================================================================
# Event Handlers
# ============================================================================


def update_recipe(
    cells_harvested: str,
    cells_volume: str,
    flask: str,
    custom_area: str,
    cells_per_cm2: str,
    media_per_cm2: str,
) -> tuple[pd.DataFrame, pd.DataFrame]:
    """
    Recompute the density and recipe tables from the current form values.

    Args:
        cells_harvested: Cells harvested (millions), as typed
        cells_volume: Cells volume (mL), as typed
        flask: Selected flask option
        custom_area: Confirmed custom area (cm²), empty if none
        cells_per_cm2: Seeding density, as typed
        media_per_cm2: Media density, as typed

    Returns:
        Tuple of (density_df, recipe_df)
    """
    inputs = create_plating_inputs(
        cells_harvested,
        cells_volume,
        cells_per_cm2,
        media_per_cm2,
        flask_name=flask,
        custom_area_text=custom_area,
    )
    result = compute_recipe_from_inputs(inputs)
    logger.debug("Recipe for %s (%s cm²): %s", inputs.flask.name, inputs.flask.area_cm2, result)

    return (
        density_table(result, cells_per_cm2, media_per_cm2),
        recipe_table(result),
    )


def flask_label(flask: str, custom_area: str) -> str:
    """
    Label for the selected flask.

    The custom flask shows its area once one has been confirmed.
    """
    if flask == CUSTOM_FLASK and custom_area:
        return f"{CUSTOM_FLASK} ({custom_area} cm²)"
    return flask


def open_custom_prompt(flask: str, custom_area: str) -> tuple[bool, str]:
    """
    Show the custom area prompt when the custom flask is chosen.

    Returns:
        Tuple of (prompt_visible, prompt_text), the text prefilled with the
        confirmed custom area
    """
    return flask == CUSTOM_FLASK, custom_area


def show_edit_area_button(flask: str) -> bool:
    """The Edit Area button is only shown while the custom flask is selected."""
    return flask == CUSTOM_FLASK


def confirm_custom_area(value: str, custom_area: str) -> tuple[str, bool]:
    """
    Store the custom area typed into the prompt.

    Invalid text leaves the stored area unchanged and keeps the prompt open.

    Returns:
        Tuple of (custom_area, prompt_visible)
    """
    if not is_valid_custom_area(value):
        return custom_area, True
    return value.strip(), False


def cancel_custom_prompt(custom_area: str) -> tuple[str, bool]:
    """
    Close the custom area prompt without changing the stored area.

    Falls back to the default flask if no custom area was ever confirmed.

    Returns:
        Tuple of (flask, prompt_visible)
    """
    if not custom_area:
        return DEFAULT_FLASK, False
    return CUSTOM_FLASK, False


# ============================================================================
# App
# ============================================================================


def build_app() -> gr.Blocks:
    """
    Build and return the Gradio interface.

    Returns:
        Configured Gradio Blocks interface
    """
    initial_density, initial_recipe = update_recipe(
        "", "", DEFAULT_FLASK, "", DEFAULT_CELLS_PER_CM2_TEXT, DEFAULT_MEDIA_PER_CM2_TEXT
    )

    with gr.Blocks(title=APP_NAME) as app:
        gr.Markdown(
            f"""
            # 🧫 {APP_NAME}
            **Version {__version__}**

            {APP_DESCRIPTION}.
            """
        )

        # Confirmed custom area, empty until the prompt is accepted
        custom_area_state = gr.State(value="")

        gr.Markdown("## Cell Suspension Specification")

        cells_harvested = gr.Textbox(label="Cells Harvested (millions)", value="")
        cells_volume = gr.Textbox(label="Cells Volume (mL)", value="")

        gr.Markdown("## Plating Specification")

        flask = gr.Radio(
            label="Flask Selection",
            choices=get_flask_choices(),
            value=DEFAULT_FLASK,
        )
        flask_summary = gr.Markdown(value=f"Selected: **{DEFAULT_FLASK}**")
        edit_area_btn = gr.Button("Edit Area", size="sm", visible=False)

        with gr.Group(visible=False) as custom_prompt:
            custom_area_input = gr.Textbox(
                label="Surface Area (cm²)",
                info="Enter the surface area in cm²",
            )
            with gr.Row():
                custom_ok_btn = gr.Button("OK", variant="primary", interactive=False)
                custom_cancel_btn = gr.Button("Cancel")

        gr.Markdown("### Seeding Parameters")

        with gr.Row():
            cells_per_cm2 = gr.Textbox(label="M cells per cm²", value=DEFAULT_CELLS_PER_CM2_TEXT)
            media_per_cm2 = gr.Textbox(label="ml media per cm²", value=DEFAULT_MEDIA_PER_CM2_TEXT)

        density_output = gr.DataFrame(value=initial_density, interactive=False)

        gr.Markdown("## Recipe")

        recipe_output = gr.DataFrame(value=initial_recipe, interactive=False)

        recipe_inputs = [
            cells_harvested,
            cells_volume,
            flask,
            custom_area_state,
            cells_per_cm2,
            media_per_cm2,
        ]
        recipe_outputs = [density_output, recipe_output]

        def refresh(*args):
            density_df, recipe_df = update_recipe(*args)
            return density_df, recipe_df, f"Selected: **{flask_label(args[2], args[3])}**"

        for component in [cells_harvested, cells_volume, flask, cells_per_cm2, media_per_cm2]:
            component.change(
                fn=refresh,
                inputs=recipe_inputs,
                outputs=recipe_outputs + [flask_summary],
            )

        # Custom area prompt
        def open_wrapper(flask_value, custom_area):
            visible, text = open_custom_prompt(flask_value, custom_area)
            return gr.update(visible=visible), text

        flask.input(
            fn=open_wrapper,
            inputs=[flask, custom_area_state],
            outputs=[custom_prompt, custom_area_input],
        )

        # Reopens the prompt while Custom is already selected
        edit_area_btn.click(
            fn=lambda custom_area: open_wrapper(CUSTOM_FLASK, custom_area),
            inputs=[custom_area_state],
            outputs=[custom_prompt, custom_area_input],
        )

        flask.change(
            fn=lambda flask_value: gr.update(visible=show_edit_area_button(flask_value)),
            inputs=[flask],
            outputs=[edit_area_btn],
        )

        custom_area_input.change(
            fn=lambda value: gr.update(interactive=is_valid_custom_area(value)),
            inputs=[custom_area_input],
            outputs=[custom_ok_btn],
        )

        def confirm_wrapper(value, custom_area):
            stored, visible = confirm_custom_area(value, custom_area)
            return stored, gr.update(visible=visible)

        custom_ok_btn.click(
            fn=confirm_wrapper,
            inputs=[custom_area_input, custom_area_state],
            outputs=[custom_area_state, custom_prompt],
        ).then(
            fn=refresh,
            inputs=recipe_inputs,
            outputs=recipe_outputs + [flask_summary],
        )

        def cancel_wrapper(custom_area):
            flask_value, visible = cancel_custom_prompt(custom_area)
            return flask_value, gr.update(visible=visible)

        custom_cancel_btn.click(
            fn=cancel_wrapper,
            inputs=[custom_area_state],
            outputs=[flask, custom_prompt],
        )

    return app


def main():
    """Main entry point to launch the Gradio app."""
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = build_app()
    server_name, server_port = get_server_settings()
    logger.info("Starting %s v%s on http://%s:%s", APP_NAME, __version__, server_name, server_port)

    app.launch(
        server_name=server_name,
        server_port=server_port,
        share=False,
        show_error=True,
    )


if __name__ == "__main__":
    main()
