"""Validation rules shared by the category and question stores.

Every function here is pure: it inspects the proposed value and the current
collection it is given, and either returns or raises a ``SpendcatError``
subclass carrying the error kind. Nothing is mutated.

Uniqueness is case-sensitive, exact string match, across the whole
collection (names are not scoped to siblings, titles are not scoped to
categories).
"""

from __future__ import annotations

import re
from typing import Any, Iterable

from spendcat.core.errors import ErrorKind
from spendcat.core.exceptions import (
    ConflictError,
    InvalidValueError,
    NotFoundError,
    RequestShapeError,
)
from spendcat.models.category import Category
from spendcat.models.question import Question, QuestionType

# Letters and digits (any script), spaces, and a small punctuation whitelist.
_NAME_RE = re.compile(r"(?:[^\W_]|[ \-',.?&():])+")


def is_valid_name(value: str) -> bool:
    """Check a category name or question title against the allowed character set."""
    if not value or not value.strip():
        return False
    return _NAME_RE.fullmatch(value) is not None


def require_field(value: Any, field: str) -> None:
    """Raise FieldMissing when a required key was absent from the body."""
    if value is None:
        raise RequestShapeError(ErrorKind.FIELD_MISSING, details={"field": field})


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


def validate_category_name(name: str) -> None:
    if not is_valid_name(name):
        raise InvalidValueError(ErrorKind.INVALID_CATEGORY_NAME, details={"name": name})


def ensure_unique_name(
    name: str, categories: Iterable[Category], exclude_id: str | None = None
) -> None:
    """Reject a name already used by any category other than ``exclude_id``."""
    for category in categories:
        if category.id != exclude_id and category.name == name:
            raise ConflictError(
                ErrorKind.DUPLICATE_CATEGORY_NAME, details={"existing_id": category.id}
            )


def ensure_valid_parent(parent_id: str, categories: Iterable[Category]) -> None:
    """Check that a new category may hang off ``parent_id``.

    An empty parent ID means top level and is always accepted. Otherwise the
    parent must exist and must itself be top level.
    """
    if parent_id == "":
        return

    parent = next((c for c in categories if c.id == parent_id), None)
    if parent is None:
        raise InvalidValueError(ErrorKind.PARENT_ID_NOT_FOUND, details={"parent_id": parent_id})
    if not parent.is_top_level:
        raise InvalidValueError(
            ErrorKind.CATEGORY_TOO_NESTED,
            details={"parent_id": parent_id, "grandparent_id": parent.parent_id},
        )


def find_category(categories: dict[str, Category], category_id: str) -> Category:
    category = categories.get(category_id)
    if category is None:
        raise NotFoundError(ErrorKind.CATEGORY_NOT_FOUND, details={"category_id": category_id})
    return category


# ---------------------------------------------------------------------------
# Questions
# ---------------------------------------------------------------------------


def validate_new_title(title: str | None) -> None:
    """Titles on creation must be present and non-empty, then well-formed."""
    if not title:
        raise RequestShapeError(ErrorKind.TITLE_EMPTY)
    validate_title(title)


def validate_title(title: str) -> None:
    if not is_valid_name(title):
        raise InvalidValueError(ErrorKind.INVALID_TITLE, details={"title": title})


def ensure_unique_title(
    title: str, questions: Iterable[Question], exclude_id: str | None = None
) -> None:
    """Reject a title already used by any question other than ``exclude_id``."""
    for question in questions:
        if question.id != exclude_id and question.title == title:
            raise ConflictError(ErrorKind.DUPLICATE_TITLE, details={"existing_id": question.id})


def validate_question_type(question_type: str | None) -> QuestionType:
    if not question_type:
        raise RequestShapeError(ErrorKind.TYPE_EMPTY)
    try:
        return QuestionType(question_type)
    except ValueError:
        raise InvalidValueError(ErrorKind.INVALID_TYPE, details={"type": question_type})


def validate_options(question_type: QuestionType, options: Any) -> list[str] | None:
    """Check the raw ``options`` value for a question of the given type.

    Returns the option titles to store: ``None`` for number questions, a
    list (empty when ``options`` was absent) for string questions.
    """
    if question_type is QuestionType.NUMBER:
        if options is not None:
            raise RequestShapeError(
                ErrorKind.OPTIONS_INVALID, details={"reason": "number questions take no options"}
            )
        return None

    if options is None:
        return []
    if not isinstance(options, list) or not all(isinstance(o, str) for o in options):
        raise RequestShapeError(ErrorKind.OPTIONS_INVALID, details={"reason": "not a list of strings"})

    seen: set[str] = set()
    for title in options:
        if title == "":
            raise RequestShapeError(ErrorKind.OPTION_EMPTY)
        if title in seen:
            raise RequestShapeError(ErrorKind.DUPLICATE_OPTION, details={"option": title})
        seen.add(title)
    return list(options)


def find_owned_question(
    questions: dict[str, Question], question_id: str, category_id: str
) -> Question:
    """Look up a question and check it is addressed through its own category."""
    question = questions.get(question_id)
    if question is None:
        raise NotFoundError(ErrorKind.QUESTION_NOT_FOUND, details={"question_id": question_id})
    if not question.belongs_to(category_id):
        raise NotFoundError(
            ErrorKind.QUESTION_DOESNT_BELONG_TO_CATEGORY,
            details={"question_id": question_id, "category_id": category_id},
        )
    return question
