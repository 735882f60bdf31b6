from typing import Mapping

from core.domain.ports.url_strategy import UrlStrategy


class UrlStrategyRegistry:
    """
    Conjunto fijo de estrategias de URL, construido al arrancar el proceso.

    Se puede enumerar y resolver por nombre o por índice (1-based, tal como
    se numeran en el menú). No admite registro en tiempo de ejecución.
    """

    def __init__(self, strategies: Mapping[str, UrlStrategy]) -> None:
        self._strategies: tuple[tuple[str, UrlStrategy], ...] = tuple(
            strategies.items()
        )

    def __len__(self) -> int:
        return len(self._strategies)

    def names(self) -> list[str]:
        return [name for name, _ in self._strategies]

    def list_all(self) -> list[tuple[int, UrlStrategy]]:
        return [
            (index, strategy)
            for index, (_, strategy) in enumerate(self._strategies, start=1)
        ]

    def resolve_by_name(self, name: str) -> UrlStrategy | None:
        for key, strategy in self._strategies:
            if key == name:
                return strategy
        return None

    def resolve_by_index(self, index: int) -> UrlStrategy | None:
        if 1 <= index <= len(self._strategies):
            return self._strategies[index - 1][1]
        return None
