import logging
from contextlib import asynccontextmanager
from typing import Iterable

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from spendcat import __version__
from spendcat.api.middleware.error_handler import (
    handle_generic_error,
    handle_http_error,
    handle_spendcat_error,
    handle_validation_error,
)
from spendcat.api.middleware.logging import RequestLoggingMiddleware
from spendcat.api.routes import router as api_router
from spendcat.api.routes.status import router as status_router
from spendcat.config import settings
from spendcat.core.exceptions import SpendcatError
from spendcat.core.ids import IdFactory, new_id
from spendcat.core.seed import load_seed
from spendcat.models.category import Category
from spendcat.models.question import Question
from spendcat.repositories.category import CategoryRepository
from spendcat.repositories.question import QuestionRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(
        "spendcat started",
        extra={"categories": len(app.state.category_repository)},
    )
    yield
    # Shutdown


def create_app(
    categories: Iterable[Category] | None = None,
    questions: Iterable[Question] | None = None,
    id_factory: IdFactory = new_id,
) -> FastAPI:
    """Build the application with its in-memory stores.

    When neither collection is given and ``settings.seed_file`` is set, the
    stores are preloaded from that snapshot.
    """
    if categories is None and questions is None and settings.seed_file:
        categories, questions = load_seed(settings.seed_file)

    app = FastAPI(
        title="spendcat",
        description="Spending categories and per-category questions",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.category_repository = CategoryRepository(categories, id_factory=id_factory)
    app.state.question_repository = QuestionRepository(questions, id_factory=id_factory)

    # Add request logging middleware
    app.add_middleware(RequestLoggingMiddleware)

    # Register exception handlers (order matters - most specific first)
    app.add_exception_handler(SpendcatError, handle_spendcat_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_generic_error)

    # Register routers
    app.include_router(status_router)
    app.include_router(api_router)

    return app
