"""
TshaBot backend
Routes:
  GET|POST /api/init  issue the auth_token cookie
  POST     /api/chat  ask TshaBot a question (requires auth_token)
  GET      /health

Config comes from the environment (see .env.example). OPENAI_API_KEY is required.
"""

import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from tshabot import __version__
from tshabot.auth import TokenGate
from tshabot.config import ConfigError, Settings, load_settings
from tshabot.exceptions import ApiError, error_body, error_status
from tshabot.logging_setup import setup_logging
from tshabot.provider import CompletionProvider, OpenAIProvider
from tshabot.relay import ChatRelay
from tshabot.responses import write_json

# every verb reaches the relay so it answers non-POST with its own 405
RELAY_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]


def create_app(settings: Settings, provider: CompletionProvider | None = None) -> FastAPI:
    """Wire the gate, the relay and the provider into a FastAPI app.

    Pass a provider to replace the OpenAI client (tests use stubs).
    """
    owns_provider = provider is None
    if provider is None:
        provider = OpenAIProvider(settings.openai_api_key, settings.openai_base_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("TshaBot backend started")
        yield
        if owns_provider:
            await provider.close()

    app = FastAPI(title="TshaBot Backend", version=__version__, lifespan=lifespan)

    gate = TokenGate(settings.jwt_secret)
    relay = ChatRelay(provider)

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        return write_json(error_status(exc), error_body(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return write_json(exc.status_code, {"error": exc.detail}, headers=exc.headers)

    app.add_api_route("/api/init", gate.init_handler, methods=["GET", "POST"])
    app.add_api_route("/api/chat", gate.protect(relay.handle), methods=RELAY_METHODS)

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": "chat"}

    return app


def main() -> None:
    setup_logging()
    try:
        settings = load_settings()
    except ConfigError as e:
        logger.critical(str(e))
        sys.exit(1)

    setup_logging(settings.log_level)
    app = create_app(settings)

    logger.info(f"Backend service is listening on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
