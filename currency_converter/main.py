import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .routers import convert, health, rates, ui
from .services.amounts import AmountFormatError
from .services.rates.providers import make_rate_provider
from .services.rates.store import RateStore
from .services.rates.table import RateUnavailableError

logger = logging.getLogger("currency_converter")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One fetch per process; failures are logged by the store and leave the table empty
    table = await run_in_threadpool(app.state.rate_store.load)
    logger.info("rate table ready with %d currencies", len(table))
    yield


def create_app(
    settings_override: Settings | None = None, rate_store: RateStore | None = None
) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    (e.g., provider='static'). Falls back to cached get_settings().
    rate_store: inject a prepared store to bypass the configured provider.
    """
    settings = settings_override or get_settings()
    if settings_override is not None:
        settings.init_post_load()
    # Initialize logging early
    init_logging(debug=settings.debug)

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        version=settings.version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.rate_store = rate_store or RateStore(make_rate_provider(settings))

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(AmountFormatError, errors.amount_format_handler)
    app.add_exception_handler(RateUnavailableError, errors.rate_unavailable_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(rates.router)
    app.include_router(convert.router)
    app.include_router(ui.router)

    return app


app = create_app()
