"""Journal Guru: FastAPI Application.

This module is the single entry point for the web application.  It defines
the application factory, the module-level ``app`` instance, all REST API
routes, and the ``main()`` CLI function that launches the uvicorn server.

Architecture
------------
The application follows a stateless REST pattern:

- **Configuration** is a :class:`~journalguru.core.config.JournalGuruConfig`
  injected into :func:`create_app`; the module-level ``app`` uses the global
  instance loaded from the environment.
- **Prompt generation** is performed by
  :class:`~journalguru.api.handler.PromptGenerationHandler`, stored on
  ``app.state.handler`` and shared with the Gradio UI.
- **The form** is a Gradio Blocks app mounted at ``config.ui_path``.
- **No persistence**: every request is independent.

Endpoints
---------
========  ============================  ====================================
Method    Path                          Purpose
========  ============================  ====================================
GET       ``/``                         Redirect to the Gradio form
POST      ``/api/generate-prompts``     Generate journal prompts
other     ``/api/generate-prompts``     405 ``{"error": "Method not allowed"}``
GET       ``/api/options``              Form choices and mode
GET       ``/health``                   Liveness and mode
========  ============================  ====================================

Usage
-----
CLI (installed entry point)::

    journalguru

Direct invocation::

    python -m journalguru.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse

from journalguru import __version__
from journalguru.core.config import JournalGuruConfig
from journalguru.core.config import config as default_config
from journalguru.core.options import (
    AGE_RANGES,
    LENSES,
    PROMPT_COUNTS,
    SITUATIONS,
    STYLES,
    as_options,
)

from .handler import (
    HandlerResult,
    PromptGenerationHandler,
    generation_failed,
    method_not_allowed,
)
from .models import ErrorResponse, GeneratePromptsRequest, PromptsResponse

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate-prompts"

router = APIRouter()


def _respond(result: HandlerResult, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=result.status_code, content=result.body, headers=headers)


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@router.post(
    GENERATE_PATH,
    response_model=PromptsResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing required fields"},
        500: {"model": ErrorResponse, "description": "Generation failed"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": GeneratePromptsRequest.model_json_schema()}},
        }
    },
)
async def generate_prompts(request: Request) -> JSONResponse:
    """Generate personalised journal prompts.

    The body is decoded as raw JSON and handed to the
    :class:`PromptGenerationHandler` on ``app.state``.  A body that is not
    valid JSON is an unexpected failure and answers 500.

    Returns:
        200 ``{"prompts": ...}``, 400 ``{"error": ...}`` or
        500 ``{"error": ..., "details": ...}``.
    """
    handler: PromptGenerationHandler = request.app.state.handler
    try:
        payload = await request.json()
    except ValueError as e:
        return _respond(generation_failed(e))

    result = await handler.handle(payload)
    return _respond(result)


@router.api_route(
    GENERATE_PATH,
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"],
    include_in_schema=False,
)
async def generate_prompts_wrong_method() -> JSONResponse:
    """Reject every request kind other than POST."""
    return _respond(method_not_allowed(), headers={"Allow": "POST"})


@router.get("/api/options")
async def get_options(request: Request) -> dict[str, Any]:
    """Return the form choices and the current generation mode.

    Returns:
        Dictionary with keys ``version``, ``mock_mode``, ``age_ranges``,
        ``situations``, ``lenses``, ``styles`` and ``prompt_counts``.
    """
    handler: PromptGenerationHandler = request.app.state.handler
    return {
        "version": __version__,
        "mock_mode": handler.mock_mode,
        "age_ranges": as_options(AGE_RANGES),
        "situations": as_options(SITUATIONS),
        "lenses": as_options(LENSES),
        "styles": as_options(STYLES),
        "prompt_counts": as_options(PROMPT_COUNTS),
    }


@router.get("/health")
async def health(request: Request) -> dict[str, Any]:
    """Liveness probe."""
    return {"status": "ok", "mock_mode": request.app.state.handler.mock_mode}


# ---------------------------------------------------------------------------
# Application factory.
# ---------------------------------------------------------------------------


def create_app(
    config: JournalGuruConfig | None = None,
    generator: Any | None = None,
    *,
    mount_ui: bool = True,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: Settings to use.  Defaults to the global instance.
        generator: Optional text generator passed to the handler (tests use
            a fake).  Defaults to a :class:`TextGenerator`.
        mount_ui: Mount the Gradio form at ``config.ui_path``.

    Returns:
        A configured FastAPI instance.
    """
    cfg = config if config is not None else default_config
    handler = PromptGenerationHandler(cfg, generator=generator)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            f"Journal Guru {__version__} ready "
            f"({'mock mode' if cfg.mock_mode else f'model {cfg.model_id}'})"
        )
        yield
        close = getattr(handler.generator, "close", None)
        if close is not None:
            await close()
            logger.info("Text generator closed on shutdown.")

    app = FastAPI(
        title="Journal Guru",
        description="Personalised journal prompt generation.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.handler = handler
    app.state.config = cfg

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)

    if mount_ui:
        import gradio as gr

        from journalguru.ui.app import create_ui

        @app.get("/", include_in_schema=False)
        async def index() -> RedirectResponse:
            return RedirectResponse(url=cfg.ui_path)

        blocks = create_ui(handler, cfg)
        app = gr.mount_gradio_app(app, blocks, path=cfg.ui_path)

    return app


app = create_app()


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host, port and log level from the global
    :data:`~journalguru.core.config.config` (``JOURNALGURU_SERVER_HOST``,
    ``JOURNALGURU_SERVER_PORT``, ``JOURNALGURU_LOG_LEVEL``).  Defaults to
    ``0.0.0.0:7860``.

    This function is registered as the ``journalguru`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=default_config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if default_config.mock_mode:
        logger.warning("ANTHROPIC_API_KEY is not set; serving mock prompts.")

    uvicorn.run(
        "journalguru.api.main:app",
        host=default_config.server_host,
        port=default_config.server_port,
        reload=False,
    )


if __name__ == "__main__":
    main()
