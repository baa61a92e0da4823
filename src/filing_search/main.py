"""FastAPI application factory, lifespan and entry point."""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from filing_search.api.router import api_router
from filing_search.config import Settings
from filing_search.models import CrossOriginRejectedError, ErrorResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("Starting filing search (allowed origins: %s)", ", ".join(settings.allowed_origins))
    yield
    logger.info("Shutting down filing search")


def create_app(settings: Settings | None = None) -> FastAPI:
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="Filing Search",
        version="0.1.0",
        description="Look up SEC filers by name or ticker and browse their recent filings",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Registered after CORSMiddleware so it runs first and also covers preflights
    @app.middleware("http")
    async def reject_foreign_origins(request: Request, call_next):
        origin = request.headers.get("origin")
        if origin and origin not in settings.allowed_origins:
            logger.warning("Rejected request to %s from origin %s", request.url.path, origin)
            body = ErrorResponse(error=CrossOriginRejectedError.error)
            return JSONResponse(
                status_code=CrossOriginRejectedError.status_code,
                content=body.model_dump(exclude_none=True),
            )
        return await call_next(request)

    app.include_router(api_router)

    return app


def run() -> None:
    """Serve the app with uvicorn using the environment configuration."""
    import uvicorn

    settings = Settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


app = create_app()

if __name__ == "__main__":
    run()
