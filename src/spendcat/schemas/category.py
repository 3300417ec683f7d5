"""Pydantic schemas for category API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from spendcat.models.category import Category


class CategoryCreateRequest(BaseModel):
    """Body of ``POST /categories``. ``None`` means the key was absent."""

    name: StrictStr | None = None
    parent_id: StrictStr | None = Field(None, alias="parentID")


class CategoryRenameRequest(BaseModel):
    """Body of ``PATCH /categories/{id}``."""

    name: StrictStr | None = None


class CategoryResponse(BaseModel):
    """Category data for API responses."""

    id: str
    name: str
    parent_id: str = Field("", alias="parentID", description="Parent category ID, empty for top level")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, category: Category) -> "CategoryResponse":
        return cls(id=category.id, name=category.name, parent_id=category.parent_id)


class CategoryDetailResponse(CategoryResponse):
    """Category with its direct children."""

    children: list[CategoryResponse] = Field(default_factory=list)

    @classmethod
    def from_domain_with_children(
        cls, category: Category, children: list[Category]
    ) -> "CategoryDetailResponse":
        return cls(
            id=category.id,
            name=category.name,
            parent_id=category.parent_id,
            children=[CategoryResponse.from_domain(c) for c in children],
        )


class CategoryListResult(BaseModel):
    """All categories in insertion order."""

    categories: list[CategoryResponse]
