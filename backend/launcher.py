"""Desktop entry point: serve the calculator locally and open it in a browser.

Host, port and log level come from ``tilearea.config.settings``
(``TILEAREA_HOST``, ``TILEAREA_PORT``, ``TILEAREA_LOG_LEVEL``). A port of
0 asks the OS for a free one.
"""

from __future__ import annotations

import logging
import socket
import sys
import threading
import time
import webbrowser
from pathlib import Path

import uvicorn

from tilearea.config import Settings, settings

logger = logging.getLogger("tilearea.launcher")

CRASH_LOG_NAME = "tilearea_crash.log"
WORKSHEET_DOCS_PATH = "/docs#/worksheet"


def crash_log_path() -> Path:
    """Crash log sits next to the frozen executable, or next to this file."""
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent / CRASH_LOG_NAME
    return Path(__file__).resolve().parent / CRASH_LOG_NAME


def resolve_port(host: str, requested: int) -> int:
    """Return ``requested``, or a free port on ``host`` when it is 0."""
    if requested:
        return requested
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind((host, 0))
        return s.getsockname()[1]


def worksheet_url(host: str, port: int) -> str:
    return f"http://{host}:{port}{WORKSHEET_DOCS_PATH}"


def wait_until_listening(host: str, port: int, attempts: int = 50, delay: float = 0.1) -> bool:
    for _ in range(attempts):
        try:
            with socket.create_connection((host, port), timeout=delay):
                return True
        except OSError:
            time.sleep(delay)
    return False


def _open_when_ready(host: str, port: int) -> None:
    if wait_until_listening(host, port):
        webbrowser.open(worksheet_url(host, port))
    else:
        logger.warning("Server on %s:%d did not come up; not opening a browser", host, port)


def run(cfg: Settings = settings) -> None:
    port = resolve_port(cfg.host, cfg.port)
    logger.info("Tile Area Calculator at %s", worksheet_url(cfg.host, port))

    if cfg.open_browser:
        threading.Thread(target=_open_when_ready, args=(cfg.host, port), daemon=True).start()

    uvicorn.run(
        "tilearea.main:app",
        host=cfg.host,
        port=port,
        log_level=cfg.log_level.lower(),
    )


def main() -> int:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    try:
        run()
    except KeyboardInterrupt:
        return 0
    except Exception:
        log_path = crash_log_path()
        handler = logging.FileHandler(log_path, encoding="utf-8")
        logger.addHandler(handler)
        logger.exception("Tile Area Calculator crashed; details in %s", log_path)
        handler.close()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
