"""Gradio UI for Journal Guru."""

import logging

import gradio as gr

from journalguru.api.handler import PromptGenerationHandler
from journalguru.core.config import JournalGuruConfig
from journalguru.core.models import AGE_RANGE, LENS, PROMPT_COUNT, SITUATION, STYLE
from journalguru.core.options import AGE_RANGES, LENSES, PROMPT_COUNTS, SITUATIONS, STYLES

from .handlers import (
    build_llm_prompt,
    make_copy_handler,
    make_copy_reverter,
    make_field_updater,
    make_generate_handler,
    reset_form,
)
from .models import COPY_LABEL, FORM_FIELDS, PROMPT_HEADING, FormState

logger = logging.getLogger(__name__)

# Runs in the browser before the Python copy handler.
_CLIPBOARD_JS = "(text) => { navigator.clipboard.writeText(text ?? ''); }"


def create_ui(handler: PromptGenerationHandler, config: JournalGuruConfig) -> gr.Blocks:
    """Create the journal prompt form.

    Args:
        handler: Generation handler shared with the HTTP endpoint
        config: Settings (copy indicator duration, mode)

    Returns:
        Gradio Blocks app, ready to launch or mount
    """
    app = gr.Blocks(title="Journal Guru")

    with app:
        # Session state - one instance per user
        ui_state = gr.State(FormState())

        gr.Markdown(
            """
            # Journal Prompt Generator
            ### Create personalized journal prompts tailored to your life situation and philosophical perspective
            """
        )

        with gr.Column():
            dropdowns = {
                AGE_RANGE: gr.Dropdown(
                    label="What is your age?",
                    choices=AGE_RANGES,
                    value=None,
                ),
                SITUATION: gr.Dropdown(
                    label="What issue are you hoping to explore with journal prompts?",
                    choices=SITUATIONS,
                    value=None,
                ),
                LENS: gr.Dropdown(
                    label="What lens would you like the prompts to take on?",
                    choices=LENSES,
                    value=None,
                ),
                STYLE: gr.Dropdown(
                    label="What style or tone should the prompts have?",
                    choices=STYLES,
                    value=None,
                    allow_custom_value=True,
                    info="Optional for the LLM prompt, required for generated prompts",
                ),
                PROMPT_COUNT: gr.Dropdown(
                    label="How many prompts would you like to start with?",
                    choices=PROMPT_COUNTS,
                    value=None,
                ),
            }

            with gr.Row():
                build_btn = gr.Button("Generate LLM Prompt", variant="primary", size="lg")
                generate_btn = gr.Button("Generate Prompts", variant="secondary", size="lg")

            if config.mock_mode:
                gr.Markdown("*No API key configured: generated prompts use mock mode.*")

        # Results - hidden until something has been rendered
        with gr.Column(visible=False) as results_group:
            with gr.Row():
                heading = gr.Markdown(PROMPT_HEADING)
                copy_btn = gr.Button(COPY_LABEL, size="sm", scale=0)
            output_text = gr.Textbox(
                show_label=False,
                lines=16,
                interactive=False,
            )
            hint = gr.Markdown(visible=False)
            reset_btn = gr.Button("Create Another Prompt", variant="secondary")

        gr.Markdown(
            "*Use this generated prompt with any LLM to receive thoughtful, "
            "personalized journal prompts*"
        )

    # Event handlers
    with app:
        for name, dropdown in dropdowns.items():
            dropdown.change(
                fn=make_field_updater(name),
                inputs=[dropdown, ui_state],
                outputs=[ui_state],
            )

        result_outputs = [heading, output_text, hint, results_group, ui_state]

        build_btn.click(
            fn=build_llm_prompt,
            inputs=[ui_state],
            outputs=result_outputs,
        )

        generate_btn.click(
            fn=make_generate_handler(handler),
            inputs=[ui_state],
            outputs=result_outputs,
        )

        copy_btn.click(
            fn=None,
            inputs=[output_text],
            js=_CLIPBOARD_JS,
        ).then(
            fn=make_copy_handler(config.copy_indicator_seconds),
            inputs=[ui_state],
            outputs=[copy_btn, ui_state],
        ).then(
            fn=make_copy_reverter(config.copy_indicator_seconds),
            inputs=[ui_state],
            outputs=[copy_btn],
            concurrency_limit=None,
        )

        reset_btn.click(
            fn=reset_form,
            inputs=[ui_state],
            outputs=[
                *(dropdowns[name] for name in FORM_FIELDS),
                output_text,
                results_group,
                copy_btn,
                ui_state,
            ],
        )

    return app


def main():
    """Launch the form on its own, without the REST API."""
    from journalguru.core.config import config

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting Journal Guru form...")

    app = create_ui(PromptGenerationHandler(config), config)

    logger.info(f"Launching Gradio UI on {config.server_host}:{config.server_port}")
    app.launch(
        server_name=config.server_host,
        server_port=config.server_port,
        show_error=True,
        inbrowser=False,
    )


if __name__ == "__main__":
    main()
