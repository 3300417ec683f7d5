"""Category model: a node in the two-level spending hierarchy."""

from dataclasses import dataclass, field


@dataclass
class Category:
    """A spending category.

    ``parent_id`` is the empty string for top-level categories.
    """

    id: str
    name: str
    parent_id: str = ""

    @property
    def is_top_level(self) -> bool:
        return self.parent_id == ""

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name!r}, parent_id={self.parent_id!r})>"


@dataclass
class CategoryList:
    """Ordered collection of categories (insertion order)."""

    categories: list[Category] = field(default_factory=list)
