"""Question repository with category-scoped access."""
import copy
import logging
from typing import Any

from spendcat.core import validation
from spendcat.models.question import Option, Question, QuestionList
from spendcat.repositories.base import InMemoryRepository

logger = logging.getLogger(__name__)


class QuestionRepository(InMemoryRepository[Question]):
    """In-memory store owning questions and, through them, their options.

    Category existence is not checked here; the service layer does that
    against the category repository before calling in.
    """

    def add(
        self,
        category_id: str,
        title: str | None,
        type: str | None,
        options: Any = None,
    ) -> Question:
        """Create a question under ``category_id``.

        ``options`` is the raw decoded JSON value (``None`` when absent).
        """
        with self._lock:
            validation.validate_new_title(title)
            validation.ensure_unique_title(title, self._items.values())
            question_type = validation.validate_question_type(type)
            option_titles = validation.validate_options(question_type, options)

            question = Question(
                id=self._new_id(),
                title=title,
                category_id=category_id,
                type=question_type.value,
                options=(
                    None
                    if option_titles is None
                    else [Option(id=self._new_id(), title=t) for t in option_titles]
                ),
            )
            logger.debug("Question stored", extra={"question_id": question.id})
            return self._insert(question)

    def rename(self, id: str, category_id: str, title: str | None) -> Question:
        """Change a question's title; only the title is mutable."""
        with self._lock:
            validation.require_field(title, "title")
            validation.validate_title(title)
            validation.ensure_unique_title(title, self._items.values(), exclude_id=id)
            question = validation.find_owned_question(self._items, id, category_id)

            question.title = title
            return copy.deepcopy(question)

    def remove(self, id: str, category_id: str) -> None:
        with self._lock:
            validation.find_owned_question(self._items, id, category_id)
            self._delete(id)

    def get(self, id: str, category_id: str) -> Question:
        with self._lock:
            return copy.deepcopy(validation.find_owned_question(self._items, id, category_id))

    def list_all(self) -> QuestionList:
        return QuestionList(questions=self._snapshot())

    def list_for_category(self, category_id: str) -> QuestionList:
        """Questions belonging to a category; empty when there are none."""
        with self._lock:
            return QuestionList(
                questions=[
                    copy.deepcopy(q) for q in self._items.values() if q.belongs_to(category_id)
                ]
            )

    def references_category(self, category_id: str) -> bool:
        with self._lock:
            return any(q.belongs_to(category_id) for q in self._items.values())
