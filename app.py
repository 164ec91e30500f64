import gradio as gr

from remittance_tabulator.config import get_settings
from remittance_tabulator.export import OUTPUT_FORMATS
from remittance_tabulator.handlers import (
    export_data_handler,
    handle_file_upload,
    handle_paste,
    handle_remove,
    handle_reset,
)
from remittance_tabulator.logging_utils import configure_logging

settings = get_settings()
configure_logging(settings.LOG_LEVEL)

# --- UI Definition ---
with gr.Blocks(title="JSON to Excel Converter") as demo:
    gr.Markdown("# JSON to Excel Converter")
    gr.Markdown("Upload remittance JSON files and convert them to a single spreadsheet.")

    # State
    documents_state = gr.State(value=[])

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload JSON Files", file_types=[".json"], file_count="multiple")
            paste_input = gr.Textbox(label="Or paste JSON directly", lines=8, placeholder="Paste your JSON here...")
            add_paste_btn = gr.Button("Add Pasted JSON")

            gr.Markdown("### 2. Loaded Files")
            loaded_files = gr.Textbox(label="Files", interactive=False, lines=4)
            remove_selector = gr.Dropdown(label="Remove File", choices=[], value=None, interactive=False)
            remove_btn = gr.Button("Remove Selected")

        # Right Panel: Preview & Export
        with gr.Column(scale=1):
            status_msg = gr.Textbox(label="Status", interactive=False)
            error_msg = gr.Textbox(label="Errors", interactive=False, lines=3)

            gr.Markdown("### 3. Preview")
            preview_table = gr.Dataframe(label=f"Preview (first {settings.PREVIEW_LIMIT} rows)", interactive=False)
            preview_caption = gr.Markdown()

            gr.Markdown("### 4. Export")
            output_format = gr.Radio(choices=list(OUTPUT_FORMATS), value="XLSX", label="Output Format")
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder=settings.DEFAULT_FILE_NAME)
            with gr.Row():
                export_btn = gr.Button("Convert to Excel", variant="primary")
                reset_btn = gr.Button("Start Over")
            download_output = gr.File(label="Download Result")

    refresh_outputs = [
        documents_state,
        remove_selector,
        loaded_files,
        status_msg,
        error_msg,
        preview_table,
        preview_caption,
    ]

    file_input.upload(
        fn=handle_file_upload,
        inputs=[file_input, documents_state],
        outputs=refresh_outputs,
    )

    add_paste_btn.click(
        fn=handle_paste,
        inputs=[paste_input, documents_state],
        outputs=refresh_outputs,
    )

    remove_btn.click(
        fn=handle_remove,
        inputs=[remove_selector, documents_state],
        outputs=refresh_outputs,
    )

    reset_btn.click(
        fn=handle_reset,
        inputs=[],
        outputs=refresh_outputs + [paste_input, download_output],
    )

    export_btn.click(
        fn=export_data_handler,
        inputs=[documents_state, output_format, output_filename],
        outputs=[download_output, status_msg, error_msg],
    )

if __name__ == "__main__":
    demo.launch()
