"""Error kinds and the HTTP catalog.

Every failure the service can report has an ``ErrorKind``. The catalog
maps each kind to:
- status: HTTP status code returned to the client
- message: Technical description (for logs)

The kind string itself is what clients see in the error body.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable error titles returned in ``{"error": {"title": ...}}``."""

    # Request shape
    INVALID_JSON = "InvalidJSON"
    INVALID_REQUEST = "InvalidRequest"
    FIELD_MISSING = "FieldMissing"

    # Categories
    INVALID_CATEGORY_NAME = "InvalidCategoryName"
    DUPLICATE_CATEGORY_NAME = "DuplicateCategoryName"
    PARENT_ID_NOT_FOUND = "ParentIDNotFound"
    CATEGORY_TOO_NESTED = "CategoryTooNested"
    CATEGORY_NOT_FOUND = "CategoryNotFound"
    CATEGORY_HAS_QUESTIONS = "CategoryHasQuestions"

    # Questions
    TITLE_EMPTY = "TitleEmpty"
    INVALID_TITLE = "InvalidTitle"
    DUPLICATE_TITLE = "DuplicateTitle"
    TYPE_EMPTY = "TypeEmpty"
    INVALID_TYPE = "InvalidType"
    OPTIONS_INVALID = "OptionsInvalid"
    OPTION_EMPTY = "OptionEmpty"
    DUPLICATE_OPTION = "DuplicateOption"
    QUESTION_NOT_FOUND = "QuestionNotFound"
    QUESTION_DOESNT_BELONG_TO_CATEGORY = "QuestionDoesntBelongToCategory"

    # Transport
    NOT_FOUND = "NotFound"
    METHOD_NOT_ALLOWED = "MethodNotAllowed"
    INTERNAL_SERVER_ERROR = "InternalServerError"
    UNKNOWN = "Unknown"


ERROR_CATALOG: dict[ErrorKind, dict] = {
    ErrorKind.INVALID_JSON: {
        "status": 400,
        "message": "Request body is not a valid JSON object",
    },
    ErrorKind.INVALID_REQUEST: {
        "status": 400,
        "message": "Request parameters failed validation",
    },
    ErrorKind.FIELD_MISSING: {
        "status": 400,
        "message": "A required field is missing from the request body",
    },
    ErrorKind.INVALID_CATEGORY_NAME: {
        "status": 422,
        "message": "Category name contains characters outside the allowed set",
    },
    ErrorKind.DUPLICATE_CATEGORY_NAME: {
        "status": 409,
        "message": "A category with this name already exists",
    },
    ErrorKind.PARENT_ID_NOT_FOUND: {
        "status": 422,
        "message": "Parent category does not exist",
    },
    ErrorKind.CATEGORY_TOO_NESTED: {
        "status": 422,
        "message": "Categories can only be nested two levels deep",
    },
    ErrorKind.CATEGORY_NOT_FOUND: {
        "status": 404,
        "message": "Category not found",
    },
    ErrorKind.CATEGORY_HAS_QUESTIONS: {
        "status": 409,
        "message": "Category is still referenced by one or more questions",
    },
    ErrorKind.TITLE_EMPTY: {
        "status": 400,
        "message": "Question title is empty",
    },
    ErrorKind.INVALID_TITLE: {
        "status": 422,
        "message": "Question title contains characters outside the allowed set",
    },
    ErrorKind.DUPLICATE_TITLE: {
        "status": 409,
        "message": "A question with this title already exists",
    },
    ErrorKind.TYPE_EMPTY: {
        "status": 400,
        "message": "Question type is empty",
    },
    ErrorKind.INVALID_TYPE: {
        "status": 400,
        "message": "Question type is not one of the supported types",
    },
    ErrorKind.OPTIONS_INVALID: {
        "status": 400,
        "message": "Question options must be a list of strings on a string question",
    },
    ErrorKind.OPTION_EMPTY: {
        "status": 400,
        "message": "Question option title is empty",
    },
    ErrorKind.DUPLICATE_OPTION: {
        "status": 400,
        "message": "Question option titles must be unique",
    },
    ErrorKind.QUESTION_NOT_FOUND: {
        "status": 404,
        "message": "Question not found",
    },
    ErrorKind.QUESTION_DOESNT_BELONG_TO_CATEGORY: {
        "status": 404,
        "message": "Question belongs to a different category",
    },
    ErrorKind.NOT_FOUND: {
        "status": 404,
        "message": "Resource not found",
    },
    ErrorKind.METHOD_NOT_ALLOWED: {
        "status": 405,
        "message": "Method not allowed on this resource",
    },
    ErrorKind.INTERNAL_SERVER_ERROR: {
        "status": 500,
        "message": "Internal server error",
    },
}


def get_error(error_code: ErrorKind | str) -> dict:
    """Get error definition by kind.

    Args:
        error_code: Error kind (enum member or its string value)

    Returns:
        Dict with ``status`` and ``message``; unknown kinds map to a
        generic 500 entry.
    """
    try:
        kind = ErrorKind(error_code)
    except ValueError:
        kind = ErrorKind.UNKNOWN

    if kind not in ERROR_CATALOG:
        return {
            "status": 500,
            "message": f"Unknown error code: {error_code}",
        }
    return ERROR_CATALOG[kind]


def get_status(error_code: ErrorKind | str) -> int:
    """Get the HTTP status code for an error kind."""
    return get_error(error_code)["status"]


def error_body(error_code: ErrorKind | str) -> dict:
    """Build the JSON error body returned to clients."""
    title = error_code.value if isinstance(error_code, ErrorKind) else error_code
    return {"error": {"title": title}}
