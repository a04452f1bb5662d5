"""Tests for word sets API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from vocabmaster import models


class TestListWordSets:
    """Test suite for GET /word-sets endpoint."""

    def test_list_public_word_sets(
        self,
        client: TestClient,
        test_word_set: models.WordSet,
        private_word_set: models.WordSet,
        foreign_public_word_set: models.WordSet,
    ) -> None:
        """Test the public catalogue hides private sets."""
        response = client.get("/api/v1/word-sets")

        assert response.status_code == status.HTTP_200_OK
        ids = [ws["id"] for ws in response.json()["word_sets"]]
        assert set(ids) == {test_word_set.id, foreign_public_word_set.id}
        assert private_word_set.id not in ids

    def test_list_newest_first_by_default(
        self,
        client: TestClient,
        test_word_set: models.WordSet,
        foreign_public_word_set: models.WordSet,
    ) -> None:
        """Test default ordering is newest first and ascending reverses it."""
        newest_first = client.get("/api/v1/word-sets").json()["word_sets"]
        oldest_first = client.get("/api/v1/word-sets?ascending=true").json()["word_sets"]

        assert [ws["id"] for ws in newest_first] == [foreign_public_word_set.id, test_word_set.id]
        assert [ws["id"] for ws in oldest_first] == [test_word_set.id, foreign_public_word_set.id]

    def test_list_with_limit_and_category(
        self,
        client: TestClient,
        test_word_set: models.WordSet,
        foreign_public_word_set: models.WordSet,
    ) -> None:
        """Test category filter and limit."""
        by_category = client.get("/api/v1/word-sets?category=verbs").json()["word_sets"]
        limited = client.get("/api/v1/word-sets?limit=1").json()["word_sets"]

        assert [ws["id"] for ws in by_category] == [test_word_set.id]
        assert len(limited) == 1

    def test_list_rejects_invalid_limit(self, client: TestClient) -> None:
        """Test limit below 1 is a request validation error."""
        response = client.get("/api/v1/word-sets?limit=0")

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_list_mine_only_collection(
        self,
        client: TestClient,
        test_word_set: models.WordSet,
        foreign_public_word_set: models.WordSet,
    ) -> None:
        """Test scope=mine lists only imported sets."""
        response = client.get("/api/v1/word-sets?scope=mine")

        assert response.status_code == status.HTTP_200_OK
        ids = [ws["id"] for ws in response.json()["word_sets"]]
        assert ids == [test_word_set.id]


class TestCreateWordSet:
    """Test suite for POST /word-sets endpoint."""

    def test_create_word_set_success(
        self, client: TestClient, db_session: Session, test_user_id: int
    ) -> None:
        """Test creating a word set adds it to the creator's collection."""
        response = client.post(
            "/api/v1/word-sets",
            json={
                "title": "  Kitchen  ",
                "description": "Things in the kitchen",
                "category": "nouns",
                "difficulty": "intermediate",
                "tags": ["home", " "],
                "is_public": False,
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["title"] == "Kitchen"
        assert data["owner_id"] == test_user_id
        assert data["difficulty"] == "intermediate"
        assert data["tags"] == ["home"]
        assert data["is_public"] is False
        assert data["word_count"] == 0

        mine = client.get("/api/v1/word-sets?scope=mine").json()["word_sets"]
        assert [ws["id"] for ws in mine] == [data["id"]]

        link = (
            db_session.query(models.UserWordSet)
            .filter_by(user_id=test_user_id, word_set_id=data["id"])
            .first()
        )
        assert link is not None

    def test_create_word_set_defaults_to_public(self, client: TestClient) -> None:
        """Test is_public defaults to true."""
        response = client.post("/api/v1/word-sets", json={"title": "Colors"})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["is_public"] is True

    def test_create_word_set_empty_title(self, client: TestClient) -> None:
        """Test an empty title fails schema validation."""
        response = client.post("/api/v1/word-sets", json={"title": ""})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_create_word_set_blank_title(self, client: TestClient) -> None:
        """Test a whitespace title is rejected by the domain."""
        response = client.post("/api/v1/word-sets", json={"title": "   "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "Title cannot be empty"

    def test_create_word_set_title_too_long(self, client: TestClient) -> None:
        """Test a title over 100 characters is rejected."""
        response = client.post("/api/v1/word-sets", json={"title": "x" * 101})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_create_word_set_unknown_difficulty(self, client: TestClient) -> None:
        """Test difficulty must be one of the known levels."""
        response = client.post(
            "/api/v1/word-sets", json={"title": "Colors", "difficulty": "expert"}
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT


class TestGetWordSet:
    """Test suite for GET /word-sets/:id endpoint."""

    def test_get_own_word_set(self, client: TestClient, test_word_set: models.WordSet) -> None:
        """Test fetching an owned word set."""
        response = client.get(f"/api/v1/word-sets/{test_word_set.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["title"] == "Everyday Verbs"
        assert data["tags"] == ["daily"]

    def test_get_foreign_private_word_set(
        self, client: TestClient, private_word_set: models.WordSet
    ) -> None:
        """Test another user's private set looks missing."""
        response = client.get(f"/api/v1/word-sets/{private_word_set.id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_get_private_word_set_as_owner(
        self,
        client: TestClient,
        private_word_set: models.WordSet,
        other_user_headers: dict[str, str],
        other_user_id: int,
    ) -> None:
        """Test the owner can see their private set."""
        response = client.get(
            f"/api/v1/word-sets/{private_word_set.id}", headers=other_user_headers
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["owner_id"] == other_user_id

    def test_get_word_set_not_found(self, client: TestClient) -> None:
        """Test fetching a non-existent word set."""
        response = client.get("/api/v1/word-sets/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Word set with id 99999 not found"

    def test_get_word_set_words_in_deck_order(
        self,
        client: TestClient,
        test_word_set: models.WordSet,
        test_words: list[models.Word],
    ) -> None:
        """Test words are listed oldest first."""
        response = client.get(f"/api/v1/word-sets/{test_word_set.id}/words")

        assert response.status_code == status.HTTP_200_OK
        words = response.json()["words"]
        assert [w["english"] for w in words] == ["run", "eat", "sleep"]
        assert words[0]["pronunciation"] == "/rʌn/"


class TestImportWordSet:
    """Test suite for /word-sets/:id/import endpoints."""

    def test_import_word_set(
        self, client: TestClient, foreign_public_word_set: models.WordSet
    ) -> None:
        """Test importing a public set puts it in the collection."""
        url = f"/api/v1/word-sets/{foreign_public_word_set.id}/import"

        assert client.get(url).json() == {
            "word_set_id": foreign_public_word_set.id,
            "imported": False,
        }

        response = client.post(url)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["success"] is True
        assert data["word_set"]["id"] == foreign_public_word_set.id
        assert client.get(url).json()["imported"] is True

        mine = client.get("/api/v1/word-sets?scope=mine").json()["word_sets"]
        assert [ws["id"] for ws in mine] == [foreign_public_word_set.id]

    def test_import_twice_is_rejected(
        self, client: TestClient, foreign_public_word_set: models.WordSet
    ) -> None:
        """Test importing an already imported set is a validation error."""
        url = f"/api/v1/word-sets/{foreign_public_word_set.id}/import"
        client.post(url)

        response = client.post(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "already" in response.json()["detail"]

    def test_import_foreign_private_word_set(
        self, client: TestClient, private_word_set: models.WordSet
    ) -> None:
        """Test a private set of another user cannot be imported."""
        response = client.post(f"/api/v1/word-sets/{private_word_set.id}/import")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_remove_imported_word_set_is_idempotent(
        self, client: TestClient, foreign_public_word_set: models.WordSet
    ) -> None:
        """Test removing twice succeeds both times."""
        url = f"/api/v1/word-sets/{foreign_public_word_set.id}/import"
        client.post(url)

        first = client.delete(url)
        second = client.delete(url)

        assert first.status_code == status.HTTP_200_OK
        assert second.status_code == status.HTTP_200_OK
        assert client.get(url).json()["imported"] is False
