"""NiceGUI analysis form: one question, one file, one markdown answer."""

from nicegui import events, ui

from src.client.analyze_client import send_message
from src.composer.payload import ACCEPT_ATTRIBUTE, guess_media_type, is_supported_file
from src.ui.state import AnalyzeSession

EXAMPLE_URL = "https://storage.googleapis.com/q4-24-techie-meetup/images/ingredients.jpg"

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f0fdf4; min-height: 100vh; }

    .app-card {
        background: white;
        border-radius: 12px;
        box-shadow: 0 10px 15px rgba(0, 0, 0, 0.1);
    }

    .drop-zone {
        border: 2px dashed #6b7280;
        border-radius: 8px;
        background: #f9fafb;
        transition: background 0.2s;
    }
    .drop-zone:hover { background: #f3f4f6; }
    .drop-zone.disabled { border-color: #d1d5db; background: #f3f4f6; }

    .answer-panel {
        background: #f9fafb;
        border-radius: 8px;
        box-shadow: 0 4px 6px rgba(0, 0, 0, 0.07);
        animation: fade-in 0.6s ease-out;
    }

    @keyframes fade-in {
        from { opacity: 0; transform: translateY(10px); }
        to { opacity: 1; transform: translateY(0); }
    }
</style>
"""


@ui.page("/")
def analyze_page() -> None:
    """Main analysis page."""
    ui.add_head_html(CUSTOM_CSS)
    session = AnalyzeSession(on_change=lambda: refresh())

    prompt_input: ui.input
    upload: ui.upload
    analyze_btn: ui.button

    @ui.refreshable
    def error_alert() -> None:
        if session.error_message:
            with ui.element("div").classes(
                "w-full p-4 text-sm text-red-800 rounded-lg bg-red-50"
            ).props("role=alert"), ui.row().classes("gap-1"):
                ui.label("Error:").classes("font-bold")
                ui.label(session.error_message)

    @ui.refreshable
    def file_badge() -> None:
        selected = session.form.selected_file
        if selected is not None:
            ui.label(selected.name).classes(
                "w-full p-4 text-sm text-gray-800 rounded-lg bg-gray-50 font-bold"
            )

    @ui.refreshable
    def answer_panel() -> None:
        if session.result_text:
            with ui.element("div").classes("w-full mt-6 p-4 answer-panel"):
                ui.markdown(session.result_text)

    def sync_controls() -> None:
        """Enable or disable inputs to match the loading flag."""
        loading = session.is_loading
        for control in (prompt_input, upload, analyze_btn):
            control.set_enabled(not loading)
        if loading:
            upload.classes("disabled")
            analyze_btn.set_text("Processing...")
            analyze_btn.props("icon=hourglass_empty")
        else:
            upload.classes(remove="disabled")
            analyze_btn.set_text("Analyze")
            analyze_btn.props(remove="icon")

    def refresh() -> None:
        error_alert.refresh()
        file_badge.refresh()
        answer_panel.refresh()
        sync_controls()

    async def handle_upload(e: events.UploadEventArguments) -> None:
        name = e.file.name
        if not is_supported_file(name):
            ui.notify(f"Unsupported file: {name}", type="warning")
            upload.reset()
            return
        content = await e.file.read()
        session.select_file(name, guess_media_type(name, e.file.content_type), content)
        upload.reset()
        file_badge.refresh()

    async def handle_submit() -> None:
        if session.is_loading:
            return
        if not prompt_input.validate():
            return

        session.set_prompt(prompt_input.value)
        await session.submit(send_message)
        if session.error_message:
            ui.notify(session.error_message, type="negative")

    def handle_clear() -> None:
        session.clear()
        prompt_input.value = ""
        prompt_input.error = None
        upload.reset()
        # clear() leaves an in-flight Loading untouched and fires no change
        file_badge.refresh()

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen flex items-center justify-center"),
        ui.column().classes("app-card px-10 py-8 max-w-lg w-full gap-6"),
    ):
        error_alert()

        ui.label("Ask about your nutrition:").classes("text-gray-700 font-bold")
        prompt_input = (
            ui.input(
                placeholder="e.g. Is this good for me?",
                validation={"Prompt is required": lambda v: bool(v and v.strip())},
            )
            .props("outlined dense")
            .classes("w-full")
            .without_auto_validation()
            .on("keydown.enter", handle_submit)
        )

        with ui.column().classes("w-full gap-1"):
            file_badge()
            # The uploader itself is the drop target; its header carries the hint
            upload = (
                ui.upload(
                    label="Drag & Drop your file here or click + to browse",
                    on_upload=handle_upload,
                    auto_upload=True,
                    max_files=1,
                )
                .props(f'accept="{ACCEPT_ATTRIBUTE}" flat color=grey-2 text-color=grey-9')
                .classes("w-full drop-zone")
            )
            with ui.row().classes("text-sm text-gray-500 gap-1"):
                ui.label("For example:")
                ui.link("A drink's ingredients list", EXAMPLE_URL, new_tab=True).classes(
                    "text-blue-600"
                )

        with ui.row().classes("w-full items-center justify-between"):
            analyze_btn = ui.button("Analyze", on_click=handle_submit).props(
                "color=positive unelevated"
            )
            ui.button("Clear", on_click=handle_clear).props("color=grey-4 text-color=grey-9 flat")

        answer_panel()


def main() -> None:
    ui.run(title="Nutrition Lens", port=8080, reload=False)


if __name__ == "__main__":
    main()
