import httpx
import pytest
from fastapi.testclient import TestClient

from og_preview.config import Settings
from og_preview.main import create_app, get_client_factory
from og_preview.services import fetcher


ARTICLE_HTML = """
<html>
  <head>
    <title>Ignored title</title>
    <meta property="og:site_name" content="Example Site" />
    <meta property="og:title" content="An Example Article" />
    <meta property="og:description" content="Something worth sharing" />
    <meta property="og:image" content="https://example.com/cover.png" />
    <meta property="og:url" content="https://canonical.example/" />
    <meta property="og:type" content="article" />
  </head>
  <body></body>
</html>
"""


def mock_client(handler) -> httpx.AsyncClient:
    return fetcher.build_client(Settings(), transport=httpx.MockTransport(handler))


@pytest.fixture
def make_app():
    def _make(handler, settings=None):
        app = create_app(settings or Settings())
        app.state.clients_built = 0

        def _build():
            app.state.clients_built += 1
            return mock_client(handler)

        app.dependency_overrides[get_client_factory] = lambda: _build
        return TestClient(app)

    return _make
