import logging
import webbrowser

logger = logging.getLogger(__name__)


def open_external(url: str) -> bool:
    """
    Abre `url` en el navegador del sistema.

    Nunca lanza: cualquier fallo se registra y se devuelve como False.
    """
    try:
        opened = webbrowser.open(url)
    except Exception as e:  # webbrowser.Error and platform launcher errors
        logger.warning(f"Failed to open browser for {url}: {e}")
        return False

    if not opened:
        logger.warning(f"No browser available to open {url}")
    return bool(opened)
