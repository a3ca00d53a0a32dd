"""
Context Chat - Main Application Entry Point

Chat proxy to a hosted NLP chatbot with local conversation history.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from contextchat import __version__
from contextchat.core.config import get_settings
from contextchat.core.exceptions import (
    ChatAppError,
    StoreError,
    UpstreamError,
    ValidationError,
)
from contextchat.core.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup
    settings = get_settings()

    # Fails fast when the model or API key is missing
    from contextchat.api.deps import get_chatbot_provider

    chatbot = get_chatbot_provider()

    from contextchat.infrastructure.local.database import get_engine, init_db

    await init_db()

    logger.info(
        f"Server is running on port {settings.PORT} | "
        f"Model: {chatbot.get_model_name()} | Token Limit: {settings.TOKEN_LIMIT}"
    )

    yield

    # Shutdown
    logger.info("Shutting down Context Chat...")
    await get_engine().dispose()


def register_exception_handlers(app: FastAPI) -> None:
    """Translate application errors into ``{"error": ...}`` responses."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError):
        logger.error(f"Upstream error on {request.url.path}: status={exc.status} detail={exc.detail}")
        return JSONResponse(status_code=500, content={"error": "An error occurred"})

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(ChatAppError)
    async def app_error_handler(request: Request, exc: ChatAppError):
        logger.error(f"Unhandled application error on {request.url.path}: {exc.message}")
        return JSONResponse(status_code=500, content={"error": "An error occurred"})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Context Chat",
        description="Chat proxy to a hosted NLP chatbot with local conversation history",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    from contextchat.api import chat

    app.include_router(chat.router, prefix="/api", tags=["chat"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "model": settings.NLP_MODEL,
            "token_limit": settings.TOKEN_LIMIT,
            "version": __version__,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
