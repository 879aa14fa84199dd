"""Basics Codelab - Main application entry point."""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

import flet as ft
from codelab.app.state import Store
from codelab.app.ui.layouts.shell import build_shell
from codelab.app.ui.theme import apply_theme
from codelab.shared.core.configuration import SystemConfig, ValidationLevel, get_config

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
CONSOLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

log_level_map = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(log_dir: Optional[Path] = None, level: Optional[str] = None) -> Path:
    """Configure root logging.

    File handler logs everything at the configured level (``LOG_LEVEL``,
    default DEBUG) to ``<log_dir>/codelab.log``; the console only gets
    warnings and errors.

    Returns:
        Path of the log file
    """
    log_dir = Path(log_dir or os.getenv("CODELAB_LOG_DIR") or Path.cwd() / "data" / "logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file_path = log_dir / "codelab.log"

    level_str = (level or os.getenv("LOG_LEVEL", "DEBUG")).upper()
    file_log_level = log_level_map.get(level_str, logging.DEBUG)

    root_logger = logging.getLogger()
    root_logger.setLevel(file_log_level)

    # Remove existing handlers to avoid duplicates
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(file_log_level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    root_logger.addHandler(console_handler)

    # Suppress verbose third-party library logs
    logging.getLogger("flet").setLevel(logging.WARNING)
    logging.getLogger("flet_controls").setLevel(logging.WARNING)
    logging.getLogger("flet_transport").setLevel(logging.WARNING)
    logging.getLogger("fletx.core.state").setLevel(logging.CRITICAL)

    # Importing fletx disables logging globally unless FLETX_ENABLE_LOGGING is set
    logging.disable(logging.NOTSET)

    logger.info(f"Logging configured: file={log_file_path}, console=WARNING+")
    return log_file_path


def _show_shell(page: ft.Page, store: Store) -> None:
    page.views.clear()
    page.views.append(build_shell(page, store))
    page.update()


def make_main(config: SystemConfig):
    """Build the Flet entry point bound to ``config``."""

    def main(page: ft.Page) -> None:
        """Main Flet application entry point."""
        logger.info("Initializing Basics Codelab...")

        page.title = "Basics Codelab"
        page.window.width = config.ui.window_width
        page.window.height = config.ui.window_height
        apply_theme(page, config.ui.primary_color, config.ui.theme_mode)

        # One store per page; sessions never share state
        page.data = Store(config)

        def _on_brightness_change(e) -> None:
            # Configuration change: rebuild the screen from saved state
            logger.info("Platform brightness changed, recreating view")
            page.data = page.data.recreate()
            _show_shell(page, page.data)

        page.on_platform_brightness_change = _on_brightness_change

        _show_shell(page, page.data)
        logger.info("Application initialized successfully")

    return main


def run() -> None:
    """Console entry point: load settings and start the Flet app."""
    load_dotenv()
    configure_logging()
    config = get_config(ValidationLevel.LENIENT)
    main = make_main(config)

    if config.ui.flet_web_mode:
        port = config.ui.flet_port
        renderer_env = config.ui.flet_web_renderer.lower()
        renderer = ft.WebRenderer.CANVAS_KIT if renderer_env == "canvaskit" else ft.WebRenderer.AUTO
        logger.info(f"Starting Flet app in WEB mode on port {port} (renderer: {renderer_env})")
        ft.run(
            main,
            view=ft.AppView.WEB_BROWSER,
            port=port,
            host="127.0.0.1",
            web_renderer=renderer,
        )
    else:
        logger.info("Starting Flet app in DESKTOP mode")
        ft.run(main, view=ft.AppView.FLET_APP)


if __name__ == "__main__":
    run()
