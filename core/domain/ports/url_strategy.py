from abc import ABC, abstractmethod


class UrlStrategy(ABC):
    """Resuelve una página de la aplicación a partir del puerto del servidor."""

    @property
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def get_url(self, port: int) -> str:
        raise NotImplementedError
