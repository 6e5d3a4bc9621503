import logging

import gradio as gr

from response_mapper.config import AUTH_TYPES, HTTP_METHODS, SCHEDULE_UNITS, AppSettings, IntegrationConfig
from response_mapper.handlers import (
    MAPPING_HEADERS,
    default_mapping_rows,
    export_results_handler,
    format_change_handler,
    load_sample_handler,
    preview_results_handler,
    save_integration_handler,
)
from response_mapper.models import MappingConfig

settings = AppSettings()
defaults = IntegrationConfig()
default_mapping = MappingConfig()

# --- UI Definition ---
with gr.Blocks(title="API Integration") as demo:
    gr.Markdown("# API Integration")
    gr.Markdown("Describe an external data source, inspect a sample response and map its fields onto internal fields.")

    # State
    sample_data_state = gr.State()

    with gr.Tab("1. Integration"):
        name_input = gr.Textbox(label="Integration Name", value=defaults.name)
        description_input = gr.Textbox(label="Description", value=defaults.description)
        with gr.Row():
            schedule_value_input = gr.Number(label="Sync Every", value=defaults.schedule_value, precision=0)
            schedule_unit_input = gr.Dropdown(label="Unit", choices=list(SCHEDULE_UNITS), value=defaults.schedule_unit)

    with gr.Tab("2. API Details"):
        endpoint_input = gr.Textbox(label="Endpoint URL", placeholder="https://api.example.com/v1/properties")
        with gr.Row():
            method_input = gr.Radio(label="Method", choices=list(HTTP_METHODS), value=defaults.method)
            auth_type_input = gr.Dropdown(label="Authentication", choices=list(AUTH_TYPES), value=defaults.auth_type)
        api_key_input = gr.Textbox(label="API Key", type="password")
        request_body_input = gr.Code(label="Request Body (POST only)", language="json")

    with gr.Tab("3. Map Data Fields"):
        with gr.Row():
            # Left Panel: Sample response
            with gr.Column(scale=1):
                gr.Markdown("### Sample Response")
                file_input = gr.File(label="Upload Sample Response", file_types=[".json"])
                override_input = gr.Code(label="Or paste expected response data", language="json")
                demo_input = gr.Checkbox(label="Use demo data", value=True)
                load_btn = gr.Button("Load Sample")
                status_msg = gr.Textbox(label="Status", interactive=False)
                format_warning = gr.Textbox(label="Format Hint", interactive=False)
                index_preview = gr.Dataframe(
                    headers=["Index", "Sample Value"],
                    datatype=["number", "str"],
                    interactive=False,
                    label="Positional Sample (first record)",
                )

            # Right Panel: Mapping
            with gr.Column(scale=1):
                target_input = gr.Radio(
                    label="Target",
                    choices=[("Portfolio (single entity)", "portfolio"), ("Organizations (array of elements)", "organizations")],
                    value=default_mapping.target.value,
                )
                format_input = gr.Radio(
                    label="Response Format",
                    choices=[("JSON (keyed)", "json"), ("Positional array", "positional")],
                    value=default_mapping.response_format.value,
                )
                key_path_input = gr.Dropdown(
                    label="Entity Key Path (JSON)",
                    choices=[],
                    allow_custom_value=True,
                    interactive=True,
                )
                key_index_input = gr.Number(label="Entity Key Index (Positional)", value=default_mapping.key_index, precision=0)
                mapping_table = gr.Dataframe(
                    headers=MAPPING_HEADERS,
                    datatype=["str", "str", "str"],
                    value=default_mapping_rows(),
                    col_count=(3, "fixed"),
                    interactive=True,
                    label="Field Mappings (Type: attributes | data)",
                )

    with gr.Tab("4. Results"):
        with gr.Row():
            preview_btn = gr.Button("Preview Results")
            save_btn = gr.Button("Save Integration", variant="primary")
        results_status = gr.Textbox(label="Status", interactive=False)
        results_preview = gr.JSON(label="Mapped Results")
        payload_preview = gr.JSON(label="Integration Configuration")
        with gr.Row():
            export_format = gr.Radio(choices=["CSV", "JSON"], value="CSV", label="Export Format")
            export_filename = gr.Textbox(label="Output Filename (optional)", placeholder="mapped_results")
        export_btn = gr.Button("Export Results")
        download_output = gr.File(label="Download Result")

    mapping_inputs = [sample_data_state, target_input, format_input, key_path_input, key_index_input, mapping_table]

    load_btn.click(
        fn=load_sample_handler,
        inputs=[file_input, override_input, format_input, demo_input],
        outputs=[sample_data_state, status_msg, key_path_input, index_preview, format_warning],
    )

    demo.load(
        fn=load_sample_handler,
        inputs=[file_input, override_input, format_input, demo_input],
        outputs=[sample_data_state, status_msg, key_path_input, index_preview, format_warning],
    )

    format_input.change(
        fn=format_change_handler,
        inputs=[sample_data_state, format_input],
        outputs=[format_warning],
    )

    preview_btn.click(
        fn=preview_results_handler,
        inputs=mapping_inputs,
        outputs=[results_preview, results_status],
    )

    export_btn.click(
        fn=export_results_handler,
        inputs=mapping_inputs + [export_format, export_filename],
        outputs=[download_output, results_status],
    )

    save_btn.click(
        fn=save_integration_handler,
        inputs=[
            name_input,
            description_input,
            endpoint_input,
            method_input,
            auth_type_input,
            api_key_input,
            request_body_input,
            schedule_value_input,
            schedule_unit_input,
            target_input,
            format_input,
            key_path_input,
            key_index_input,
            mapping_table,
        ],
        outputs=[payload_preview, results_status],
    )

if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    demo.launch(server_name=settings.server_name, server_port=settings.server_port)
