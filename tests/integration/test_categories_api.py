"""Integration tests for category API endpoints."""

import pytest
from httpx import AsyncClient

from spendcat.core.ids import is_valid_id
from spendcat.main import create_app
from spendcat.models.category import Category, CategoryList
from spendcat.models.question import Question


def assert_error(response, status_code: int, title: str) -> None:
    assert response.status_code == status_code
    assert response.headers["content-type"] == "application/json"
    assert response.json() == {"error": {"title": title}}


class TestCategoryList:
    """Test category listing endpoint."""

    @pytest.mark.asyncio
    async def test_list_categories(self, client: AsyncClient):
        response = await client.get("/categories")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {
            "categories": [
                {"id": "1234", "name": "accommodation", "parentID": ""},
                {"id": "2345", "name": "food and drink", "parentID": ""},
                {"id": "abcdef", "name": "hostel", "parentID": "1234"},
                {"id": "ghijkm", "name": "apartment", "parentID": "1234"},
            ]
        }

    @pytest.mark.asyncio
    async def test_list_empty(self, make_client):
        client = make_client(create_app(categories=[], questions=[]))

        response = await client.get("/categories")

        assert response.status_code == 200
        assert response.json() == {"categories": []}


class TestCategoryDetail:
    """Test category detail endpoint."""

    @pytest.mark.asyncio
    async def test_not_found(self, client: AsyncClient):
        response = await client.get("/categories/5678")
        assert_error(response, 404, "CategoryNotFound")

    @pytest.mark.asyncio
    async def test_get_category_with_children(self, client: AsyncClient):
        response = await client.get("/categories/1234")

        assert response.status_code == 200
        assert response.json() == {
            "id": "1234",
            "name": "accommodation",
            "parentID": "",
            "children": [
                {"id": "abcdef", "name": "hostel", "parentID": "1234"},
                {"id": "ghijkm", "name": "apartment", "parentID": "1234"},
            ],
        }

    @pytest.mark.asyncio
    async def test_get_category_without_children(self, client: AsyncClient):
        response = await client.get("/categories/2345")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "food and drink"
        assert data["children"] == []


class TestCreateCategory:
    """Test category creation endpoint."""

    @pytest.fixture
    def existing(self) -> list[Category]:
        return [
            Category(id="1234", name="existing category name", parent_id=""),
            Category(id="2345", name="existing subcategory name", parent_id="1234"),
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body, status_code, title",
        [
            ('"foo"', 400, "InvalidJSON"),
            ('{"name":', 400, "InvalidJSON"),
            ("", 400, "InvalidJSON"),
            ('{"name": 12, "parentID": ""}', 400, "InvalidJSON"),
            ("{}", 400, "FieldMissing"),
            ('{"name": null, "parentID": ""}', 400, "FieldMissing"),
            ('{"name":"existing category name"}', 409, "DuplicateCategoryName"),
            ('{"name":"existing subcategory name", "parentID":""}', 409, "DuplicateCategoryName"),
            ('{"name":"abc123!@£"}', 422, "InvalidCategoryName"),
            ('{"name":"groceries\\n", "parentID":""}', 422, "InvalidCategoryName"),
            ('{"name":"valid name"}', 400, "FieldMissing"),
            ('{"name":"valid name", "parent_id":""}', 400, "FieldMissing"),
            ('{"name":"foo", "parentID":"5678"}', 422, "ParentIDNotFound"),
            ('{"name":"foo", "parentID":"2345"}', 422, "CategoryTooNested"),
        ],
    )
    async def test_failures_leave_store_unchanged(
        self, make_client, existing, body, status_code, title
    ):
        app = create_app(categories=existing)
        client = make_client(app)

        response = await client.post(
            "/categories", content=body, headers={"Content-Type": "application/json"}
        )

        assert_error(response, status_code, title)
        assert app.state.category_repository.list() == CategoryList(categories=existing)

    @pytest.mark.asyncio
    async def test_create_top_level(self, make_client, existing):
        app = create_app(categories=existing)
        client = make_client(app)

        response = await client.post(
            "/categories", json={"name": "new category name", "parentID": ""}
        )

        assert response.status_code == 201
        assert response.headers["content-type"] == "application/json"
        data = response.json()
        assert is_valid_id(data["id"])
        assert data == {"id": data["id"], "name": "new category name", "parentID": ""}

        stored = app.state.category_repository.list().categories[2]
        assert stored == Category(id=data["id"], name="new category name", parent_id="")
        assert response.headers["Location"] == f"/categories/{stored.id}"

    @pytest.mark.asyncio
    async def test_create_subcategory(self, make_client, existing):
        app = create_app(categories=existing)
        client = make_client(app)

        response = await client.post(
            "/categories", json={"name": "another new category name", "parentID": "1234"}
        )

        assert response.status_code == 201
        data = response.json()
        assert data["parentID"] == "1234"
        stored = app.state.category_repository.list().categories[2]
        assert stored.parent_id == "1234"
        assert response.headers["Location"] == f"/categories/{stored.id}"

    @pytest.mark.asyncio
    async def test_location_round_trip(self, client: AsyncClient):
        created = await client.post("/categories", json={"name": "transport", "parentID": ""})

        response = await client.get(created.headers["Location"])

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == created.json()["id"]
        assert data["name"] == "transport"
        assert data["parentID"] == ""
        assert data["children"] == []

    @pytest.mark.asyncio
    async def test_new_child_listed_under_parent(self, client: AsyncClient):
        created = await client.post("/categories", json={"name": "camping", "parentID": "1234"})

        response = await client.get("/categories/1234")

        child_ids = [c["id"] for c in response.json()["children"]]
        assert child_ids == ["abcdef", "ghijkm", created.json()["id"]]


class TestRenameCategory:
    """Test category rename endpoint."""

    @pytest.fixture
    def existing(self) -> list[Category]:
        return [
            Category(id="1234", name="accommodation", parent_id=""),
            Category(id="2345", name="food and drink", parent_id=""),
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "category_id, body, status_code, title",
        [
            ("1234", '{"foo":', 400, "InvalidJSON"),
            ("1234", '{"foo":"bar"}', 400, "FieldMissing"),
            ("1234", '{"name":"foo/*!bar"}', 422, "InvalidCategoryName"),
            ("1234", '{"name":"food and drink"}', 409, "DuplicateCategoryName"),
            ("5678", '{"name":"irrelevant"}', 404, "CategoryNotFound"),
        ],
    )
    async def test_failures_leave_store_unchanged(
        self, make_client, existing, category_id, body, status_code, title
    ):
        app = create_app(categories=existing)
        client = make_client(app)

        response = await client.patch(
            f"/categories/{category_id}",
            content=body,
            headers={"Content-Type": "application/json"},
        )

        assert_error(response, status_code, title)
        assert app.state.category_repository.list() == CategoryList(categories=existing)

    @pytest.mark.asyncio
    async def test_rename(self, make_client, existing):
        app = create_app(categories=existing)
        client = make_client(app)

        response = await client.patch("/categories/1234", json={"name": "new category name"})

        assert response.status_code == 200
        assert response.json() == {"id": "1234", "name": "new category name", "parentID": ""}
        categories = app.state.category_repository.list().categories
        assert categories[0].name == "new category name"
        assert categories[1] == existing[1]

    @pytest.mark.asyncio
    async def test_rename_to_same_name(self, make_client, existing):
        client = make_client(create_app(categories=existing))

        response = await client.patch("/categories/1234", json={"name": "accommodation"})

        assert response.status_code == 200
        assert response.json()["name"] == "accommodation"


class TestDeleteCategory:
    """Test category delete endpoint."""

    @pytest.mark.asyncio
    async def test_not_found(self, make_client):
        existing = [Category(id="1234", name="accommodation")]
        app = create_app(categories=existing)
        client = make_client(app)

        response = await client.delete("/categories/5678")

        assert_error(response, 404, "CategoryNotFound")
        assert app.state.category_repository.list() == CategoryList(categories=existing)

    @pytest.mark.asyncio
    async def test_delete(self, make_client):
        app = create_app(categories=[Category(id="1234", name="accommodation")])
        client = make_client(app)

        response = await client.delete("/categories/1234")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {"status": "deleted"}
        assert len(app.state.category_repository.list().categories) == 0

    @pytest.mark.asyncio
    async def test_delete_referenced_category_fails(self, make_client):
        categories = [Category(id="1234", name="accommodation")]
        questions = [Question(id="1", title="how many nights?", category_id="1234", type="number")]
        app = create_app(categories=categories, questions=questions)
        client = make_client(app)

        response = await client.delete("/categories/1234")

        assert_error(response, 409, "CategoryHasQuestions")
        assert app.state.category_repository.list().categories == categories
        assert app.state.question_repository.list_all().questions == questions

    @pytest.mark.asyncio
    async def test_delete_after_questions_removed(self, client: AsyncClient):
        blocked = await client.delete("/categories/1234")
        assert blocked.status_code == 409

        await client.delete("/categories/1234/questions/1")
        response = await client.delete("/categories/1234")

        assert response.status_code == 200
        assert (await client.get("/categories/1234")).status_code == 404
