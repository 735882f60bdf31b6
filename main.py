import logging
import os
import threading
import time

import uvicorn
from dotenv import load_dotenv

from console.browser_menu import BrowserMenu
from console.prompts import ConsoleOutcome
from console.task_console import TaskConsole
from core.application.url_strategy_registry import UrlStrategyRegistry
from infrastructure.container import get_task_engine, get_url_strategy_registry
from infrastructure.mongo.session.client import close_client

load_dotenv()

logger = logging.getLogger(__name__)

APP_PATH = "backend_fastapi.main:app"
_STARTUP_POLL_SECS = 0.1


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _request_exit(server: uvicorn.Server) -> None:
    logger.info("Grace period over, stopping HTTP server")
    server.should_exit = True


def schedule_shutdown(server: uvicorn.Server, grace_secs: float) -> threading.Timer:
    """
    Programa la parada del servidor tras un breve margen para que la salida
    pendiente de la consola llegue a la terminal. No se puede cancelar.
    """
    timer = threading.Timer(grace_secs, _request_exit, args=(server,))
    timer.daemon = True
    timer.start()
    return timer


def supervise(
    outcome: ConsoleOutcome,
    server: uvicorn.Server,
    server_thread: threading.Thread,
    grace_secs: float,
) -> None:
    """Actúa según lo que devolvió la consola y espera a que el servidor termine."""
    if outcome is ConsoleOutcome.SHUTDOWN:
        schedule_shutdown(server, grace_secs)
    else:
        print("API still running. Press Ctrl+C to stop.")

    try:
        server_thread.join()
    except KeyboardInterrupt:
        server.should_exit = True
        server_thread.join()


def auto_open_browser(registry: UrlStrategyRegistry, browser_menu: BrowserMenu) -> None:
    if not _as_bool(os.getenv("BROWSER_AUTO_OPEN", "false")):
        print(
            "Auto-open disabled. Enable with BROWSER_AUTO_OPEN=true in your .env"
        )
        return

    if _as_bool(os.getenv("BROWSER_INTERACTIVE", "false")):
        strategy = browser_menu.choose()
    else:
        name = os.getenv("BROWSER_STRATEGY", "apiEndpoint")
        strategy = registry.resolve_by_name(name)
        if strategy is None:
            available = ", ".join(registry.names())
            print(f"Strategy '{name}' not found. Available: {available}")

    if strategy is not None:
        browser_menu.open(strategy)


def _start_server_thread(server: uvicorn.Server) -> threading.Thread:
    thread = threading.Thread(target=server.run, name="uvicorn", daemon=True)
    thread.start()
    while not server.started and thread.is_alive():
        time.sleep(_STARTUP_POLL_SECS)
    return thread


def run() -> None:
    host = os.getenv("HOST", "127.0.0.1")
    port_str = os.getenv("PORT", "8000")
    port = int(port_str)
    console_enabled = _as_bool(os.getenv("CONSOLE_ENABLED", "false"))
    # Con la consola activa, los logs informativos se mezclarían con los menús.
    log_level = os.getenv("LOG_LEVEL", "warning" if console_enabled else "info").lower()
    grace_secs = float(os.getenv("SHUTDOWN_GRACE_SECONDS", "1.0"))

    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    registry = get_url_strategy_registry()
    browser_menu = BrowserMenu(registry, port)

    if not console_enabled:
        reload = _as_bool(os.getenv("RELOAD", "true"))
        print(f"Starting server at http://{host}:{port} (Reload: {reload})")

        # El navegador se abre cuando el servidor ya está escuchando.
        opener = threading.Timer(1.5, auto_open_browser, args=(registry, browser_menu))
        opener.daemon = True
        opener.start()

        uvicorn.run(APP_PATH, host=host, port=port, reload=reload, log_level=log_level)
        close_client()
        return

    print(f"Starting server at http://{host}:{port} (Console: enabled)")
    server = uvicorn.Server(
        uvicorn.Config(APP_PATH, host=host, port=port, log_level=log_level)
    )
    server_thread = _start_server_thread(server)
    if not server.started:
        logger.error("HTTP server failed to start, console not launched")
        return

    auto_open_browser(registry, browser_menu)

    outcome = TaskConsole(get_task_engine(), browser_menu).run()
    logger.info(f"Console finished with {outcome.value}")
    supervise(outcome, server, server_thread, grace_secs)
    close_client()


if __name__ == "__main__":
    run()
