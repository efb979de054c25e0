"""Startup script for the SEO Doctor API.

Reads host and port from settings (``API_HOST`` / ``API_PORT``, with
``PORT`` taking precedence for platforms that inject it) and replaces the
current process with uvicorn.
"""

import os
import signal
import sys

from api.config import get_settings


def start_api() -> None:
    """Start the FastAPI application with uvicorn."""
    settings = get_settings()
    port = os.getenv("PORT", str(settings.api_port))
    workers = os.getenv("API_WORKERS", "1")

    print(f"Starting API server on {settings.api_host}:{port} with {workers} worker(s)...")

    os.execvp(
        "uvicorn",
        [
            "uvicorn",
            "api.main:app",
            "--host",
            settings.api_host,
            "--port",
            port,
            "--workers",
            workers,
            "--proxy-headers",
        ],
    )


def signal_handler(signum: int, _frame: object) -> None:
    """Handle shutdown signals gracefully."""
    print(f"Received signal {signum}, shutting down...")
    sys.exit(0)


def main() -> None:
    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)
    start_api()


if __name__ == "__main__":
    main()
