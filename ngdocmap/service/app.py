"""FastAPI application entrypoint for ngdocmap service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..loader import LoadError, comments_from_data
from ..mapper import MalformedCommentError, NgdocMapper
from ..render import to_data


class MapRequest(BaseModel):
    comments: List[Dict[str, Any]]


class MapResponse(BaseModel):
    modules: List[Dict[str, Any]]


class HealthResponse(BaseModel):
    status: str


def create_app(
    mapper_factory: Callable[[], NgdocMapper] = NgdocMapper,
) -> FastAPI:
    """Create the FastAPI application exposing the comment mapper."""

    app = FastAPI(title="ngdocmap Service", version="1.0.0")

    async def get_mapper() -> NgdocMapper:
        return mapper_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/map", response_model=MapResponse)
    async def map_comments(
        payload: MapRequest,
        mapper: NgdocMapper = Depends(get_mapper),
    ) -> MapResponse:
        def _run_map() -> List[Dict[str, Any]]:
            comments = comments_from_data(payload.comments)
            return to_data(mapper.map(comments))

        loop = asyncio.get_running_loop()
        modules = await loop.run_in_executor(None, _run_map)
        return MapResponse(modules=modules)

    @app.exception_handler(LoadError)
    async def load_error_handler(_: Any, exc: LoadError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(MalformedCommentError)
    async def malformed_comment_handler(_: Any, exc: MalformedCommentError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "missing": exc.missing},
        )

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    import uvicorn

    app = create_app()
    uvicorn.run(app, host=host, port=port)
