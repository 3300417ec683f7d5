"""Category management endpoints."""

from fastapi import APIRouter, Depends, Response, status

from spendcat.api.deps import get_category_service, json_body
from spendcat.schemas.category import (
    CategoryCreateRequest,
    CategoryDetailResponse,
    CategoryListResult,
    CategoryRenameRequest,
    CategoryResponse,
)
from spendcat.schemas.common import ErrorResponse, StatusResponse
from spendcat.services.category import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get(
    "",
    response_model=CategoryListResult,
    summary="List categories",
)
async def list_categories(
    service: CategoryService = Depends(get_category_service),
) -> CategoryListResult:
    """List all categories in the order they were created."""
    category_list = service.list_categories()
    return CategoryListResult(
        categories=[CategoryResponse.from_domain(c) for c in category_list.categories]
    )


@router.get(
    "/{category_id}",
    response_model=CategoryDetailResponse,
    summary="Get category with children",
    responses={404: {"model": ErrorResponse, "description": "CategoryNotFound"}},
)
async def get_category(
    category_id: str,
    service: CategoryService = Depends(get_category_service),
) -> CategoryDetailResponse:
    """
    Get a category and its direct subcategories.

    Args:
        category_id: Category ID
        service: Category service

    Returns:
        Category fields plus ``children`` (empty for leaves)
    """
    category, children = service.get_category(category_id)
    return CategoryDetailResponse.from_domain_with_children(category, children)


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
    description="""
    Create a top-level category (`parentID` empty) or a subcategory.

    - `name` must be unique across all categories
    - `parentID` must refer to an existing top-level category
    - The new resource URL is returned in the `Location` header
    """,
    responses={
        400: {"model": ErrorResponse, "description": "InvalidJSON, FieldMissing"},
        409: {"model": ErrorResponse, "description": "DuplicateCategoryName"},
        422: {
            "model": ErrorResponse,
            "description": "InvalidCategoryName, ParentIDNotFound, CategoryTooNested",
        },
    },
)
async def create_category(
    response: Response,
    payload: CategoryCreateRequest = Depends(json_body(CategoryCreateRequest)),
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    category = service.create_category(payload.name, payload.parent_id)
    response.headers["Location"] = f"/categories/{category.id}"
    return CategoryResponse.from_domain(category)


@router.patch(
    "/{category_id}",
    response_model=CategoryResponse,
    summary="Rename category",
    responses={
        400: {"model": ErrorResponse, "description": "InvalidJSON, FieldMissing"},
        404: {"model": ErrorResponse, "description": "CategoryNotFound"},
        409: {"model": ErrorResponse, "description": "DuplicateCategoryName"},
        422: {"model": ErrorResponse, "description": "InvalidCategoryName"},
    },
)
async def rename_category(
    category_id: str,
    payload: CategoryRenameRequest = Depends(json_body(CategoryRenameRequest)),
    service: CategoryService = Depends(get_category_service),
) -> CategoryResponse:
    category = service.rename_category(category_id, payload.name)
    return CategoryResponse.from_domain(category)


@router.delete(
    "/{category_id}",
    response_model=StatusResponse,
    summary="Delete category",
    description="""
    Delete a category. A category that still has questions cannot be deleted.
    """,
    responses={
        404: {"model": ErrorResponse, "description": "CategoryNotFound"},
        409: {"model": ErrorResponse, "description": "CategoryHasQuestions"},
    },
)
async def delete_category(
    category_id: str,
    service: CategoryService = Depends(get_category_service),
) -> StatusResponse:
    service.delete_category(category_id)
    return StatusResponse(status="deleted")
