"""Question service: category existence checks before question store writes."""
import logging
from typing import Any

from spendcat.core.errors import ErrorKind
from spendcat.core.exceptions import NotFoundError
from spendcat.models.question import Question, QuestionList
from spendcat.repositories.category import CategoryRepository
from spendcat.repositories.question import QuestionRepository

logger = logging.getLogger(__name__)


class QuestionService:
    """Service layer for question operations."""

    def __init__(self, categories: CategoryRepository, questions: QuestionRepository):
        self.categories = categories
        self.questions = questions

    def _require_category(self, category_id: str) -> None:
        if not self.categories.exists(category_id):
            raise NotFoundError(
                ErrorKind.CATEGORY_NOT_FOUND, details={"category_id": category_id}
            )

    def list_questions(self, category_id: str) -> QuestionList:
        return self.questions.list_for_category(category_id)

    def get_question(self, category_id: str, question_id: str) -> Question:
        return self.questions.get(question_id, category_id)

    def create_question(
        self,
        category_id: str,
        title: str | None,
        type: str | None,
        options: Any = None,
    ) -> Question:
        """Create a question under an existing category.

        Args:
            category_id: Owning category ID (must exist)
            title: Question title
            type: "number" or "string"
            options: Raw options value; only a list of strings on string questions

        Returns:
            The stored question with assigned IDs

        Raises:
            NotFoundError: CategoryNotFound if the category is unknown
            SpendcatError: Any validation failure from the question store
        """
        self._require_category(category_id)
        question = self.questions.add(category_id, title, type, options)
        logger.info(
            "Question created",
            extra={"question_id": question.id, "category_id": category_id},
        )
        return question

    def rename_question(self, category_id: str, question_id: str, title: str | None) -> Question:
        self._require_category(category_id)
        question = self.questions.rename(question_id, category_id, title)
        logger.info("Question renamed", extra={"question_id": question_id})
        return question

    def delete_question(self, category_id: str, question_id: str) -> None:
        self._require_category(category_id)
        self.questions.remove(question_id, category_id)
        logger.info(
            "Question deleted",
            extra={"question_id": question_id, "category_id": category_id},
        )
