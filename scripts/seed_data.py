"""Write a starter seed snapshot of categories and questions.

Every entry goes through the repositories, so the snapshot obeys the same
name, depth and option rules as the API. Point ``SPENDCAT_SEED_FILE`` at the
output to preload a server.

Usage: python scripts/seed_data.py [output.json]
"""

import sys
from pathlib import Path

from spendcat.core.seed import dump_seed
from spendcat.repositories.category import CategoryRepository
from spendcat.repositories.question import QuestionRepository

SPENDING_CATEGORIES = {
    "accommodation": ["hostel", "apartment", "hotel"],
    "food and drink": ["groceries", "restaurants", "coffee"],
    "transport": ["bus", "train", "taxi"],
    "bills & utilities": [],
    "entertainment": [],
}

QUESTIONS = [
    ("accommodation", "how many nights?", "number", None),
    ("restaurants", "which meal?", "string", ["breakfast", "lunch", "dinner"]),
    ("train", "which class?", "string", ["standard", "first"]),
]


def build_seed() -> str:
    categories = CategoryRepository()
    questions = QuestionRepository()

    ids: dict[str, str] = {}
    for parent_name, children in SPENDING_CATEGORIES.items():
        parent = categories.add(parent_name, "")
        ids[parent_name] = parent.id
        for child_name in children:
            ids[child_name] = categories.add(child_name, parent.id).id

    for category_name, title, type_, options in QUESTIONS:
        questions.add(ids[category_name], title, type_, options)

    return dump_seed(categories.list().categories, questions.list_all().questions)


def main() -> None:
    output = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("seed.json")
    print("Starting seed data script...")

    output.write_text(build_seed())

    print(f"\n✅ Seed snapshot written to {output}")
    print(f"   Top-level categories: {len(SPENDING_CATEGORIES)}")
    print(f"   Questions: {len(QUESTIONS)}")


if __name__ == "__main__":
    main()
