"""Category service: orchestration across the category and question stores."""
import logging

from spendcat.core.errors import ErrorKind
from spendcat.core.exceptions import ConflictError
from spendcat.models.category import Category, CategoryList
from spendcat.repositories.category import CategoryRepository
from spendcat.repositories.question import QuestionRepository

logger = logging.getLogger(__name__)


class CategoryService:
    """Service layer for category operations."""

    def __init__(self, categories: CategoryRepository, questions: QuestionRepository):
        """Initialize category service with both stores.

        Args:
            categories: Category store (mutated here)
            questions: Question store (queried for references before removal)
        """
        self.categories = categories
        self.questions = questions

    def list_categories(self) -> CategoryList:
        return self.categories.list()

    def get_category(self, category_id: str) -> tuple[Category, list[Category]]:
        """Get a category together with its direct children.

        Args:
            category_id: Category ID

        Returns:
            Tuple of the category and its children (possibly empty)

        Raises:
            NotFoundError: CategoryNotFound if the ID is unknown
        """
        category = self.categories.get(category_id)
        return category, self.categories.children_of(category.id)

    def create_category(self, name: str | None, parent_id: str | None) -> Category:
        category = self.categories.add(name, parent_id)
        logger.info(
            "Category created",
            extra={"category_id": category.id, "parent_id": category.parent_id},
        )
        return category

    def rename_category(self, category_id: str, name: str | None) -> Category:
        category = self.categories.rename(category_id, name)
        logger.info("Category renamed", extra={"category_id": category.id})
        return category

    def delete_category(self, category_id: str) -> None:
        """Remove a category that no question refers to.

        The reference check and the removal lock different stores, so a
        question created in between is not seen. Acceptable for a
        single-writer deployment.

        Raises:
            NotFoundError: CategoryNotFound if the ID is unknown
            ConflictError: CategoryHasQuestions if any question references it
        """
        self.categories.get(category_id)
        if self.questions.references_category(category_id):
            raise ConflictError(
                ErrorKind.CATEGORY_HAS_QUESTIONS, details={"category_id": category_id}
            )
        self.categories.remove(category_id)
        logger.info("Category deleted", extra={"category_id": category_id})
