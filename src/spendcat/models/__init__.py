from spendcat.models.category import Category, CategoryList
from spendcat.models.question import Option, Question, QuestionList, QuestionType

__all__ = [
    "Category",
    "CategoryList",
    "Option",
    "Question",
    "QuestionList",
    "QuestionType",
]
