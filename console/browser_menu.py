import logging
from typing import Callable

from console.prompts import (
    ConsoleOutcome,
    InputFunc,
    InputParseError,
    read_int,
    rule,
)
from core.application.url_strategy_registry import UrlStrategyRegistry
from core.domain.ports.url_strategy import UrlStrategy
from infrastructure.browser.opener import open_external

logger = logging.getLogger(__name__)

CONTINUE_CHOICE = 0
SHUTDOWN_CHOICE = 9


class BrowserMenu:
    """
    Submenú para abrir páginas de la aplicación en el navegador.

    Args:
        registry:   Estrategias disponibles.
        port:       Puerto del servidor HTTP, usado para resolver las URLs.
        opener:     Lanza el navegador; devuelve False si no pudo.
        input_func: Fuente de entrada del operador (por defecto `input`).
    """

    def __init__(
        self,
        registry: UrlStrategyRegistry,
        port: int,
        opener: Callable[[str], bool] = open_external,
        input_func: InputFunc = input,
    ) -> None:
        self._registry = registry
        self._port = port
        self._opener = opener
        self._input = input_func

    def run(self) -> ConsoleOutcome | None:
        """
        Muestra el submenú hasta que el operador elige continuar o apagar.

        Returns:
            None para volver al menú principal, o ConsoleOutcome.SHUTDOWN.
        """
        while True:
            self._show_menu(skip_label="Continue to Task Manager")
            try:
                choice = read_int(self._input, "\nYour choice: ")
            except InputParseError:
                print("⚠️ Invalid input. Please enter a number.")
                continue

            if choice == CONTINUE_CHOICE:
                print("➡️ Continuing to Task Manager...")
                return None
            if choice == SHUTDOWN_CHOICE:
                print("👋 Shutting down application...")
                return ConsoleOutcome.SHUTDOWN

            strategy = self._registry.resolve_by_index(choice)
            if strategy is None:
                print(
                    f"⚠️ Invalid choice: {choice} is out of range "
                    f"(1-{len(self._registry)})."
                )
                continue

            self.open(strategy)

    def choose(self) -> UrlStrategy | None:
        """Selección única al arrancar: 0 (o una entrada inválida) no abre nada."""
        self._show_menu(skip_label="Skip (don't open browser)", with_shutdown=False)
        try:
            choice = read_int(self._input, "\nYour choice: ")
        except InputParseError:
            print("Invalid input. Skipping browser auto-open.")
            return None
        except (EOFError, KeyboardInterrupt):
            logger.info("No operator input at startup, browser not opened")
            print("\nSkipped browser auto-open")
            return None

        if choice == CONTINUE_CHOICE:
            print("Skipped browser auto-open")
            return None

        strategy = self._registry.resolve_by_index(choice)
        if strategy is None:
            print("Invalid choice. Skipping browser auto-open.")
        return strategy

    def open(self, strategy: UrlStrategy) -> bool:
        url = strategy.get_url(self._port)
        if self._opener(url):
            print(f"🌐 Browser opened: {strategy.name} - {url}")
            return True

        logger.warning(f"Could not open {url}")
        print(f"❌ Failed to open browser. Please open manually: {url}")
        return False

    def _show_menu(self, skip_label: str, with_shutdown: bool = True) -> None:
        print("\n" + rule())
        print("🌐 BROWSER MENU - select which page to open")
        print(rule())
        for index, strategy in self._registry.list_all():
            print(f"{index}. {strategy.name} - {strategy.get_url(self._port)}")
        print(f"{CONTINUE_CHOICE}. {skip_label}")
        if with_shutdown:
            print(f"{SHUTDOWN_CHOICE}. 🛑 Shutdown Application")
        print(rule())
