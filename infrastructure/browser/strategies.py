from core.domain.ports.url_strategy import UrlStrategy


class ApiEndpointStrategy(UrlStrategy):
    @property
    def name(self) -> str:
        return "API Endpoint"

    def get_url(self, port: int) -> str:
        return f"http://localhost:{port}/api/tasks"


class ApiDocsStrategy(UrlStrategy):
    @property
    def name(self) -> str:
        return "API Docs"

    def get_url(self, port: int) -> str:
        return f"http://localhost:{port}/docs"


class HomePageStrategy(UrlStrategy):
    @property
    def name(self) -> str:
        return "Home Page"

    def get_url(self, port: int) -> str:
        return f"http://localhost:{port}"


def default_strategies() -> dict[str, UrlStrategy]:
    """Estrategias disponibles, en el orden en que se muestran al operador."""
    return {
        "apiEndpoint": ApiEndpointStrategy(),
        "apiDocs": ApiDocsStrategy(),
        "homePage": HomePageStrategy(),
    }
