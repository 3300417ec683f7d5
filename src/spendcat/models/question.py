"""Question model: a per-category prompt with optional answer options."""

from dataclasses import dataclass, field
from enum import Enum


class QuestionType(str, Enum):
    """Answer types a question can have."""

    NUMBER = "number"
    STRING = "string"


@dataclass
class Option:
    """An enumerated answer choice, owned by its question."""

    id: str
    title: str


@dataclass
class Question:
    """A question attached to a category.

    ``options`` is ``None`` for number questions and a (possibly empty)
    list for string questions.
    """

    id: str
    title: str
    category_id: str
    type: str
    options: list[Option] | None = None

    def belongs_to(self, category_id: str) -> bool:
        return self.category_id == category_id

    def __repr__(self) -> str:
        return f"<Question(id={self.id}, title={self.title!r}, category_id={self.category_id})>"


@dataclass
class QuestionList:
    """Ordered collection of questions (insertion order)."""

    questions: list[Question] = field(default_factory=list)
