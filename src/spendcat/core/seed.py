"""Load an initial snapshot of categories and questions from JSON.

The snapshot uses the wire format of the list endpoints::

    {
        "categories": [{"id": "...", "name": "...", "parentID": ""}],
        "questions": [{"id": "...", "title": "...", "categoryID": "...",
                       "type": "string", "options": [{"id": "...", "title": "..."}]}]
    }

The snapshot is trusted: it is loaded as-is, without running the write
validation rules.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from spendcat.models.category import Category
from spendcat.models.question import Option, Question
from spendcat.schemas.category import CategoryResponse
from spendcat.schemas.question import QuestionResponse

logger = logging.getLogger(__name__)


class SeedSnapshot(BaseModel):
    categories: list[CategoryResponse] = Field(default_factory=list)
    questions: list[QuestionResponse] = Field(default_factory=list)


def parse_seed(raw: str | bytes) -> tuple[list[Category], list[Question]]:
    """Parse snapshot JSON into domain objects.

    Raises:
        pydantic.ValidationError: If the document does not match the snapshot shape
    """
    snapshot = SeedSnapshot.model_validate_json(raw)

    categories = [
        Category(id=c.id, name=c.name, parent_id=c.parent_id) for c in snapshot.categories
    ]
    questions = [
        Question(
            id=q.id,
            title=q.title,
            category_id=q.category_id,
            type=q.type,
            options=(
                None if q.options is None else [Option(id=o.id, title=o.title) for o in q.options]
            ),
        )
        for q in snapshot.questions
    ]
    return categories, questions


def load_seed(path: Path) -> tuple[list[Category], list[Question]]:
    """Read and parse a snapshot file."""
    categories, questions = parse_seed(Path(path).read_bytes())
    logger.info(
        f"Loaded seed snapshot from {path}: "
        f"{len(categories)} categories, {len(questions)} questions"
    )
    return categories, questions


def dump_seed(categories: list[Category], questions: list[Question]) -> str:
    """Serialise stores' contents into snapshot JSON (inverse of ``parse_seed``)."""
    snapshot = SeedSnapshot(
        categories=[CategoryResponse.from_domain(c) for c in categories],
        questions=[QuestionResponse.from_domain(q) for q in questions],
    )
    return snapshot.model_dump_json(by_alias=True, exclude_none=True, indent=2)
