"""Pydantic schemas for question API requests and responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from spendcat.models.question import Question


class QuestionCreateRequest(BaseModel):
    """Body of ``POST /categories/{cid}/questions``.

    ``options`` is kept raw so its shape can be reported as OptionsInvalid
    rather than as a decoding failure.
    """

    title: StrictStr | None = None
    type: StrictStr | None = None
    options: Any = None


class QuestionRenameRequest(BaseModel):
    """Body of ``PATCH /categories/{cid}/questions/{id}``."""

    title: StrictStr | None = None


class OptionResponse(BaseModel):
    id: str
    title: str


class QuestionResponse(BaseModel):
    """Question data for API responses. ``options`` is omitted for number questions."""

    id: str
    title: str
    category_id: str = Field(alias="categoryID")
    type: str = Field(description="Answer type: number or string")
    options: list[OptionResponse] | None = None

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, question: Question) -> "QuestionResponse":
        return cls(
            id=question.id,
            title=question.title,
            category_id=question.category_id,
            type=question.type,
            options=(
                None
                if question.options is None
                else [OptionResponse(id=o.id, title=o.title) for o in question.options]
            ),
        )


class QuestionListResult(BaseModel):
    """Questions for one category."""

    questions: list[QuestionResponse]
