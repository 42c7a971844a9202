"""
Boardshot inference API server.

FastAPI application exposing one procedure (POST /api/moves) that takes a
base64-encoded chessboard image and returns the best move for each side as
suggested by a Gemini multimodal model.

Architecture notes:
- Sync endpoint (not async): the google-genai call blocks, and FastAPI runs
  sync handlers in its thread pool, so concurrent requests do not serialize.
- The app is built by a factory. Configuration is read when the app is
  constructed, so a missing API key fails at startup rather than per request.
- Stateless per request: nothing is shared between invocations except the
  model client handle.
"""

from __future__ import annotations

import argparse
import logging

import uvicorn
from fastapi import FastAPI, HTTPException

from boardshot import __version__
from boardshot.core.wire import MoveResultPayload, MovesRequest
from boardshot.inference import (
    PARSE_FAILURE_MESSAGE,
    InvalidImageError,
    ModelCallError,
    MoveInferenceService,
    ResponseParseError,
    load_settings,
)

_log = logging.getLogger(__name__)

API_NAME = "Boardshot Move API"
MODEL_FAILURE_MESSAGE = "Model request failed"


def create_app(service: MoveInferenceService | None = None) -> FastAPI:
    """
    Build the API application.

    Args:
        service: Inference service to use. When omitted, one is created from
                 the environment (see :func:`boardshot.inference.load_settings`).

    Raises:
        ConfigError: No service was given and GEMINI_API_KEY is missing.
    """
    if service is None:
        service = MoveInferenceService.from_settings(load_settings())

    app = FastAPI(
        title=API_NAME,
        description="Best-move suggestions from chessboard images",
        version=__version__,
    )
    app.state.inference = service

    @app.get("/")
    def root() -> dict[str, str]:
        """API root endpoint."""
        return {"name": API_NAME, "version": __version__, "status": "running"}

    @app.get("/health")
    def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "model": service.model_name}

    @app.post("/api/moves", response_model=MoveResultPayload)
    def suggest_moves(request: MovesRequest) -> MoveResultPayload:
        """
        Suggest the best move for each side of the pictured position.

        Args:
            request: MovesRequest with the base64 image and its MIME type.

        Returns:
            MoveResultPayload with whiteBestMove / blackBestMove (either may be null).

        Raises:
            HTTPException 400: The payload is not a decodable image.
            HTTPException 502: The model failed or answered in an invalid shape.
        """
        try:
            result = service.infer(request.image_base64, request.mime_type)
        except InvalidImageError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except ModelCallError as exc:
            raise HTTPException(status_code=502, detail=MODEL_FAILURE_MESSAGE) from exc
        except ResponseParseError as exc:
            raise HTTPException(status_code=502, detail=PARSE_FAILURE_MESSAGE) from exc

        _log.info(
            "Moves white=%s black=%s",
            "yes" if result.white_best_move else "none",
            "yes" if result.black_best_move else "none",
        )
        return MoveResultPayload.from_result(result)

    return app


def run_server(host: str | None = None, port: int | None = None, reload: bool = False) -> None:
    """Run the API server."""
    settings = load_settings()
    host = host or settings.host
    port = port or settings.port
    _log.info("Starting %s on %s:%d (model=%s)", API_NAME, host, port, settings.model)
    if reload:
        uvicorn.run(
            "boardshot.server.app:create_app",
            host=host,
            port=port,
            reload=True,
            factory=True,
        )
    else:
        uvicorn.run(create_app(MoveInferenceService.from_settings(settings)), host=host, port=port)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Boardshot move suggestion API server")
    parser.add_argument("--host", default=None, help="Host to bind to")
    parser.add_argument("--port", type=int, default=None, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    run_server(args.host, args.port, reload=args.reload)


if __name__ == "__main__":
    main()
