from __future__ import annotations

import json
import logging
from functools import partial
from typing import Callable, Optional

import httpx
import uvicorn
from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from .config import APP_NAME, Settings
from .services import assembler, fetcher


logger = logging.getLogger(__name__)


def get_client_factory(request: Request) -> Callable[[], httpx.AsyncClient]:
    """Builds one outbound client per fetched URL."""
    return partial(fetcher.build_client, request.app.state.settings)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(title=APP_NAME)
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.origin_allowed],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["X-Requested-With"],
    )

    @app.api_route("/", methods=["GET", "OPTIONS"])
    async def preview(
        url: Optional[str] = Query(None),
        make_client: Callable[[], httpx.AsyncClient] = Depends(get_client_factory),
    ) -> Response:
        """Fetch ``url`` and return its Open Graph metadata as JSON."""
        if not url:
            logger.error("Missing URL argument")
            return Response()

        logger.info(f"Visiting {url}")
        async with make_client() as client:
            record = await assembler.collect(client, url)

        try:
            body = json.dumps(record.to_dict(), ensure_ascii=False, separators=(",", ":"))
        except (TypeError, ValueError):
            logger.error("Failed to serialize response", exc_info=True)
            return Response()

        return Response(
            content=body,
            media_type="application/json",
            headers={
                "Access-Control-Allow-Origin": settings.origin_allowed,
                "Access-Control-Allow-Headers": "Content-Type",
            },
        )

    @app.get("/health", tags=["system"])
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok", "app": APP_NAME}

    return app


def run() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    settings = Settings.from_env()
    logging.getLogger().setLevel(settings.log_level)
    logger.info(f"Listening on {settings.host}:{settings.port}")
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    # example usage: curl -s 'http://127.0.0.1:8080/?url=https://example.com/'
    run()
