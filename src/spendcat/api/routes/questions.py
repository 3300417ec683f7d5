"""Question endpoints, nested under their category."""

from fastapi import APIRouter, Depends, Response, status

from spendcat.api.deps import get_question_service, json_body
from spendcat.schemas.common import ErrorResponse, StatusResponse
from spendcat.schemas.question import (
    QuestionCreateRequest,
    QuestionListResult,
    QuestionRenameRequest,
    QuestionResponse,
)
from spendcat.services.question import QuestionService

router = APIRouter(prefix="/categories/{category_id}/questions", tags=["questions"])


@router.get(
    "",
    response_model=QuestionListResult,
    response_model_exclude_none=True,
    summary="List a category's questions",
)
async def list_questions(
    category_id: str,
    service: QuestionService = Depends(get_question_service),
) -> QuestionListResult:
    """List questions for a category; an empty list when it has none."""
    question_list = service.list_questions(category_id)
    return QuestionListResult(
        questions=[QuestionResponse.from_domain(q) for q in question_list.questions]
    )


@router.get(
    "/{question_id}",
    response_model=QuestionResponse,
    response_model_exclude_none=True,
    summary="Get question",
    responses={
        404: {
            "model": ErrorResponse,
            "description": "QuestionNotFound, QuestionDoesntBelongToCategory",
        },
    },
)
async def get_question(
    category_id: str,
    question_id: str,
    service: QuestionService = Depends(get_question_service),
) -> QuestionResponse:
    question = service.get_question(category_id, question_id)
    return QuestionResponse.from_domain(question)


@router.post(
    "",
    response_model=QuestionResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create question",
    description="""
    Create a question for an existing category.

    - `title` must be unique across all questions
    - `type` is `number` or `string`
    - `options` (string questions only) is a list of distinct, non-empty titles
    - The new resource URL is returned in the `Location` header
    """,
    responses={
        400: {
            "model": ErrorResponse,
            "description": "InvalidJSON, TitleEmpty, TypeEmpty, InvalidType, "
            "OptionsInvalid, OptionEmpty, DuplicateOption",
        },
        404: {"model": ErrorResponse, "description": "CategoryNotFound"},
        409: {"model": ErrorResponse, "description": "DuplicateTitle"},
        422: {"model": ErrorResponse, "description": "InvalidTitle"},
    },
)
async def create_question(
    category_id: str,
    response: Response,
    payload: QuestionCreateRequest = Depends(json_body(QuestionCreateRequest)),
    service: QuestionService = Depends(get_question_service),
) -> QuestionResponse:
    question = service.create_question(
        category_id, payload.title, payload.type, payload.options
    )
    response.headers["Location"] = f"/categories/{category_id}/questions/{question.id}"
    return QuestionResponse.from_domain(question)


@router.patch(
    "/{question_id}",
    response_model=QuestionResponse,
    response_model_exclude_none=True,
    summary="Rename question",
    responses={
        400: {"model": ErrorResponse, "description": "InvalidJSON, FieldMissing"},
        404: {
            "model": ErrorResponse,
            "description": "CategoryNotFound, QuestionNotFound, QuestionDoesntBelongToCategory",
        },
        409: {"model": ErrorResponse, "description": "DuplicateTitle"},
        422: {"model": ErrorResponse, "description": "InvalidTitle"},
    },
)
async def rename_question(
    category_id: str,
    question_id: str,
    payload: QuestionRenameRequest = Depends(json_body(QuestionRenameRequest)),
    service: QuestionService = Depends(get_question_service),
) -> QuestionResponse:
    question = service.rename_question(category_id, question_id, payload.title)
    return QuestionResponse.from_domain(question)


@router.delete(
    "/{question_id}",
    response_model=StatusResponse,
    summary="Delete question",
    responses={
        404: {
            "model": ErrorResponse,
            "description": "CategoryNotFound, QuestionNotFound, QuestionDoesntBelongToCategory",
        },
    },
)
async def delete_question(
    category_id: str,
    question_id: str,
    service: QuestionService = Depends(get_question_service),
) -> StatusResponse:
    service.delete_question(category_id, question_id)
    return StatusResponse(status="deleted")
