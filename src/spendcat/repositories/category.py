"""Category repository with hierarchy-aware writes."""
from __future__ import annotations

import copy
import logging

from spendcat.core import validation
from spendcat.models.category import Category, CategoryList
from spendcat.repositories.base import InMemoryRepository

logger = logging.getLogger(__name__)


class CategoryRepository(InMemoryRepository[Category]):
    """In-memory store owning the category collection."""

    def add(self, name: str | None, parent_id: str | None) -> Category:
        """Create a category.

        ``None`` for either argument means the key was absent from the
        request. Checks run in order: name present, name format, name
        uniqueness, parent present, parent exists, parent is top level.
        """
        with self._lock:
            validation.require_field(name, "name")
            validation.validate_category_name(name)
            validation.ensure_unique_name(name, self._items.values())
            validation.require_field(parent_id, "parentID")
            validation.ensure_valid_parent(parent_id, self._items.values())

            category = Category(id=self._new_id(), name=name, parent_id=parent_id)
            logger.debug("Category stored", extra={"category_id": category.id})
            return self._insert(category)

    def rename(self, id: str, name: str | None) -> Category:
        """Rename a category in place; its own current name does not conflict."""
        with self._lock:
            validation.require_field(name, "name")
            validation.validate_category_name(name)
            validation.ensure_unique_name(name, self._items.values(), exclude_id=id)
            category = validation.find_category(self._items, id)

            category.name = name
            return copy.deepcopy(category)

    def remove(self, id: str) -> None:
        with self._lock:
            validation.find_category(self._items, id)
            self._delete(id)

    def get(self, id: str) -> Category:
        with self._lock:
            return copy.deepcopy(validation.find_category(self._items, id))

    def list(self) -> CategoryList:
        """All categories in insertion order."""
        return CategoryList(categories=self._snapshot())

    def children_of(self, id: str) -> list[Category]:
        """Direct children of a category, in insertion order."""
        with self._lock:
            return [copy.deepcopy(c) for c in self._items.values() if c.parent_id == id]
