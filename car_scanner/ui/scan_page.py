"""NiceGUI car scanner page."""

import logging

from nicegui import events, ui

from car_scanner.models.schemas import MAX_IMAGE_SIZE, ImageAsset, InvalidImageError
from car_scanner.scanner.analyzer import get_car_analyzer
from car_scanner.ui.scan_state import (
    Failed,
    Idle,
    Loading,
    ScanController,
    ScanState,
    Success,
)

logger = logging.getLogger(__name__)

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;800&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #0f172a; color: white; min-height: 100vh; }

    .title {
        background: linear-gradient(90deg, #60a5fa 0%, #5eead4 100%);
        -webkit-background-clip: text;
        background-clip: text;
        color: transparent;
    }

    .dropzone {
        background: #1e293b;
        border: 2px dashed #475569;
        border-radius: 16px;
        transition: background 0.3s;
    }
    .dropzone:hover { background: #334155; }

    .result-card { background: #1e293b; border-radius: 16px; }
    .result-item { background: rgba(51, 65, 85, 0.5); border-radius: 8px; }

    .error-banner {
        background: rgba(239, 68, 68, 0.2);
        border: 1px solid #ef4444;
        color: #fca5a5;
        border-radius: 8px;
    }

    .scan-btn { background: #2563eb !important; }

    .fade-in { animation: fade-in 0.5s ease-out forwards; }
    @keyframes fade-in {
        from { opacity: 0; transform: translateY(10px); }
        to { opacity: 1; transform: translateY(0); }
    }
</style>
"""


def build_scan_page(controller: ScanController) -> None:
    """Build the scanner UI around a controller.

    Args:
        controller: State machine the page renders and forwards actions to.
    """
    ui.add_head_html(CUSTOM_CSS)

    async def handle_upload(e: events.UploadEventArguments) -> None:
        data = await e.file.read()
        try:
            asset = ImageAsset.from_upload(e.file.name, e.file.content_type, data)
        except InvalidImageError as err:
            logger.warning(f"Rejected upload {e.file.name}: {err}")
            ui.notify(str(err), type="negative")
            return
        controller.select_image(asset)

    async def handle_scan() -> None:
        if controller.can_scan:
            await controller.scan()

    def render_uploader(label: str, large: bool) -> None:
        upload = ui.upload(
            on_upload=handle_upload,
            on_rejected=lambda: ui.notify(
                "Only images up to 20MB are accepted", type="negative"
            ),
            auto_upload=True,
            max_files=1,
            max_file_size=MAX_IMAGE_SIZE,
        ).props('accept="image/*" flat color=blue-5')
        if large:
            upload.classes("w-full dropzone p-8")
            with ui.column().classes("w-full items-center gap-2 -mt-2"):
                ui.icon("cloud_upload").classes("text-5xl text-blue-400")
                ui.label(label).classes("text-xl font-semibold text-slate-200")
                ui.label("Drag & drop or click to select a file").classes("text-slate-400")
        else:
            upload.props(f'label="{label}"').classes("w-full max-w-xs")

    def render_result(state: Success) -> None:
        with ui.column().classes("w-full result-card p-6 gap-4 fade-in"):
            with ui.row().classes("items-center gap-3"):
                ui.icon("auto_awesome").classes("text-2xl text-green-400")
                ui.label("Analysis Complete").classes("text-2xl font-bold text-white")
            with ui.grid(columns=2).classes("w-full gap-4"):
                for label, value in state.result.display_fields():
                    with ui.column().classes("result-item p-4 gap-1"):
                        ui.label(label).classes("text-sm font-medium text-slate-400")
                        ui.label(value).classes("text-lg font-semibold text-white truncate")

    def render_scan_button(state: ScanState) -> None:
        button = ui.button(on_click=handle_scan).props("unelevated no-caps").mark("scan-button")
        button.classes("w-full max-w-xs scan-btn text-white font-bold text-lg py-3")
        with button:
            if isinstance(state, Loading):
                ui.spinner("dots", size="lg", color="white")
                ui.label("Scanning...").classes("ml-2")
            else:
                ui.label("Scan Image")
        if not controller.can_scan:
            button.disable()

    @ui.refreshable
    def render_state() -> None:
        state = controller.state

        if isinstance(state, Idle):
            render_uploader("Upload Car Image", large=True)
            return

        with ui.column().classes("w-full items-center gap-6 fade-in"):
            with ui.element("div").classes("relative w-full max-w-lg"):
                ui.image(state.asset.open_preview()).classes("rounded-2xl shadow-2xl w-full")
                ui.button(icon="close", on_click=controller.reset).props(
                    "round dense unelevated color=black"
                ).classes("absolute top-3 right-3 opacity-75").tooltip("Remove image")

            if not isinstance(state, Success):
                render_scan_button(state)

            if isinstance(state, Failed):
                with ui.row().classes("error-banner px-4 py-3 fade-in"):
                    ui.label("Error:").classes("font-bold")
                    ui.label(state.message)

            if isinstance(state, Success):
                with ui.column().classes("w-full max-w-lg items-center gap-4"):
                    render_result(state)
                    ui.button("Scan Another Car", on_click=controller.reset).props(
                        "unelevated no-caps color=grey-8"
                    ).classes("w-full max-w-xs font-bold text-lg py-3")

            render_uploader("Choose another image", large=False)

    controller.subscribe(lambda _state: render_state.refresh())

    # === UI Layout ===
    with ui.column().classes("w-full max-w-4xl mx-auto items-center p-4 md:p-8 gap-8"):
        with ui.column().classes("w-full items-center gap-2"):
            with ui.row().classes("items-center gap-4"):
                ui.icon("directions_car").classes("text-5xl text-blue-400")
                ui.label("Car Scanner v1").classes("title text-5xl font-extrabold")
            ui.label("Identify any car from an image with the power of AI.").classes(
                "text-lg text-slate-400"
            )

        with ui.column().classes("w-full max-w-lg items-center"):
            render_state()

        ui.label("Powered by Google Gemini").classes("text-sm text-slate-500 mt-auto pt-8")


@ui.page("/")
def scan_page() -> None:
    """Main scanner page."""
    build_scan_page(ScanController(get_car_analyzer()))
