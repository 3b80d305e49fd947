# portfolio_api/main.py
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from portfolio_api.api.api import api_router
from portfolio_api.core.config import Settings, settings as default_settings
from portfolio_api.core.errors import validation_exception_handler
from portfolio_api.core.logging import configure_logging, logger
from portfolio_api.services.blog import BlogPostStore
from portfolio_api.services.portfolio import PortfolioItemStore
from portfolio_api.services.storage import PortfolioStorage, create_storage


def warn_on_generated_secret(settings: Settings) -> None:
    if settings.AUTH_MODE == "token" and settings.secret_key_is_generated:
        logger.warning(
            "AUTH_MODE=token is using a generated SECRET_KEY; issued tokens stop "
            "verifying after a restart and are not shared between workers. Set SECRET_KEY."
        )


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[PortfolioStorage] = None,
    blog_store: Optional[BlogPostStore] = None,
    portfolio_store: Optional[PortfolioItemStore] = None,
) -> FastAPI:
    """
    Build the application. Components not passed in are constructed from
    the settings; all of them are shared by every request via app.state.
    """
    settings = settings or default_settings
    configure_logging(settings)
    warn_on_generated_secret(settings)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_PREFIX}/openapi.json"
    )

    app.state.settings = settings
    app.state.storage = storage or create_storage(settings)
    app.state.blog_store = blog_store or BlogPostStore(settings.DATA_DIR)
    app.state.portfolio_store = portfolio_store or PortfolioItemStore(settings.DATA_DIR)

    # Set up CORS
    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Add logging middleware
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        logger.info(f"Request: {request.method} {request.url.path} - Status: {response.status_code} - Time: {process_time:.2f}s")
        return response

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.get("/")
    async def root():
        return {"message": f"Welcome to the {settings.PROJECT_NAME}"}

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    app.include_router(api_router, prefix=settings.API_PREFIX)
    logger.info("API router included")

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting {default_settings.PROJECT_NAME} in development mode")
    uvicorn.run("portfolio_api.main:app", host="0.0.0.0", port=8000, reload=True)
