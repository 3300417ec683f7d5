import sys
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

sys.path.append(str(Path(__file__).parents[1] / "src"))

from spendcat.main import create_app
from spendcat.models.category import Category
from spendcat.models.question import Option, Question


@pytest.fixture
async def make_client():
    """Build AsyncClients bound to an app; all are closed after the test."""
    clients: list[AsyncClient] = []

    def _make(app) -> AsyncClient:
        client = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.aclose()


@pytest.fixture
def hierarchy() -> list[Category]:
    """Two top-level categories, one with two subcategories."""
    return [
        Category(id="1234", name="accommodation", parent_id=""),
        Category(id="2345", name="food and drink", parent_id=""),
        Category(id="abcdef", name="hostel", parent_id="1234"),
        Category(id="ghijkm", name="apartment", parent_id="1234"),
    ]


@pytest.fixture
def questions() -> list[Question]:
    return [
        Question(id="1", title="how many nights?", category_id="1234", type="number"),
        Question(
            id="2",
            title="which meal?",
            category_id="2345",
            type="string",
            options=[Option(id="1", title="brekkie")],
        ),
    ]


@pytest.fixture
def app(hierarchy, questions):
    """Application preloaded with the sample hierarchy and questions."""
    return create_app(categories=hierarchy, questions=questions)


@pytest.fixture
async def client(app, make_client):
    """Provide test client for the preloaded application."""
    return make_client(app)
