"""FastAPI dependency injection for stores, services and request bodies."""

from typing import Callable, TypeVar

from fastapi import Depends, Request
from pydantic import BaseModel, ValidationError

from spendcat.core.errors import ErrorKind
from spendcat.core.exceptions import RequestShapeError
from spendcat.repositories.category import CategoryRepository
from spendcat.repositories.question import QuestionRepository
from spendcat.services.category import CategoryService
from spendcat.services.question import QuestionService

M = TypeVar("M", bound=BaseModel)


def get_category_repository(request: Request) -> CategoryRepository:
    """Category store attached to the application in ``create_app``."""
    return request.app.state.category_repository


def get_question_repository(request: Request) -> QuestionRepository:
    """Question store attached to the application in ``create_app``."""
    return request.app.state.question_repository


def get_category_service(
    categories: CategoryRepository = Depends(get_category_repository),
    questions: QuestionRepository = Depends(get_question_repository),
) -> CategoryService:
    return CategoryService(categories, questions)


def get_question_service(
    categories: CategoryRepository = Depends(get_category_repository),
    questions: QuestionRepository = Depends(get_question_repository),
) -> QuestionService:
    return QuestionService(categories, questions)


def json_body(model: type[M]) -> Callable:
    """
    Build a dependency that decodes the raw request body into ``model``.

    Malformed JSON, a non-object document, or a wrongly typed field are all
    reported as InvalidJSON. Absent keys decode to ``None`` and are left for
    the stores to report.

    Args:
        model: Request schema to validate against

    Returns:
        Async dependency callable
    """

    async def decode(request: Request) -> M:
        raw = await request.body()
        try:
            return model.model_validate_json(raw)
        except ValidationError as exc:
            raise RequestShapeError(
                ErrorKind.INVALID_JSON,
                details={"errors": exc.errors(include_url=False, include_input=False)},
            )

    return decode
