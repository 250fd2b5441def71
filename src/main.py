"""Main application entry point.

Serves the analysis API and the NiceGUI form. Environment variables are
loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))


def run_integrated() -> None:
    """Serve API routes and the form from one FastAPI app on PORT."""
    import uvicorn
    from nicegui import ui

    from src.api.app import create_app
    from src.ui.analyze_page import analyze_page  # noqa: F401 - Registers the page

    app = create_app()

    ui.run_with(
        app,
        title="Nutrition Lens",
        favicon="🥗",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "nutrition-lens-secret"),
    )

    logger.info(f"Form available at http://localhost:{PORT}/")
    logger.info(f"API docs available at http://localhost:{PORT}/docs")

    uvicorn.run(
        app,
        host=HOST,
        port=PORT,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_separate() -> None:
    """Run the API (PORT) and the NiceGUI form (8080) as two processes.

    The form reaches the API through API_BASE_URL.
    """
    import asyncio
    import subprocess

    async def run_servers() -> None:
        logger.info(f"Starting API on http://localhost:{PORT}")
        logger.info("Starting form on http://localhost:8080")

        api_proc = subprocess.Popen(
            [
                sys.executable,
                "-m",
                "uvicorn",
                "src.api.app:app",
                "--host",
                HOST,
                "--port",
                str(PORT),
            ]
        )
        ui_proc = subprocess.Popen(
            [sys.executable, "-c", "from src.ui.analyze_page import main; main()"]
        )

        try:
            while api_proc.poll() is None and ui_proc.poll() is None:
                await asyncio.sleep(1)
        except KeyboardInterrupt:
            logger.info("Shutting down servers...")
        finally:
            for proc in (api_proc, ui_proc):
                proc.terminate()
                proc.wait()

    asyncio.run(run_servers())


def main() -> None:
    """Application entry point.

    Set RUN_MODE=separate to run the API and the form on different ports.
    Default is integrated mode (both on PORT).
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting Nutrition Lens in {mode} mode")

    if mode == "separate":
        run_separate()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
