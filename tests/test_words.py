"""Tests for words API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from vocabmaster import models


class TestCreateWord:
    """Test suite for POST /words endpoint."""

    def test_create_word_success(
        self, client: TestClient, db_session: Session, test_word_set: models.WordSet
    ) -> None:
        """Test creating a word increments the set's word count."""
        response = client.post(
            "/api/v1/words",
            json={
                "word_set_id": test_word_set.id,
                "english": " walk ",
                "chinese": "走",
                "pronunciation": "/wɔːk/",
                "example": "",
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["success"] is True
        word = data["word"]
        assert word["english"] == "walk"
        assert word["chinese"] == "走"
        assert word["example"] is None
        assert word["word_set_id"] == test_word_set.id

        db_session.refresh(test_word_set)
        assert test_word_set.word_count == 1

    def test_create_word_in_imported_set(
        self,
        client: TestClient,
        db_session: Session,
        foreign_public_word_set: models.WordSet,
    ) -> None:
        """Test words can be added to an imported set."""
        client.post(f"/api/v1/word-sets/{foreign_public_word_set.id}/import")

        response = client.post(
            "/api/v1/words",
            json={"word_set_id": foreign_public_word_set.id, "english": "ticket", "chinese": "票"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        db_session.refresh(foreign_public_word_set)
        assert foreign_public_word_set.word_count == 1

    def test_create_word_outside_collection(
        self, client: TestClient, foreign_public_word_set: models.WordSet
    ) -> None:
        """Test a visible set that is not in the collection cannot be edited."""
        response = client.post(
            "/api/v1/words",
            json={"word_set_id": foreign_public_word_set.id, "english": "ticket", "chinese": "票"},
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_create_word_in_foreign_private_set(
        self, client: TestClient, private_word_set: models.WordSet
    ) -> None:
        """Test a private set of another user looks missing."""
        response = client.post(
            "/api/v1/words",
            json={"word_set_id": private_word_set.id, "english": "door", "chinese": "门"},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_create_word_empty_english(
        self, client: TestClient, test_word_set: models.WordSet
    ) -> None:
        """Test an empty word fails schema validation."""
        response = client.post(
            "/api/v1/words",
            json={"word_set_id": test_word_set.id, "english": "", "chinese": "空"},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_create_word_blank_translation(
        self, client: TestClient, test_word_set: models.WordSet
    ) -> None:
        """Test a whitespace translation is rejected by the domain."""
        response = client.post(
            "/api/v1/words",
            json={"word_set_id": test_word_set.id, "english": "blank", "chinese": "   "},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestGetWord:
    """Test suite for GET /words/:id endpoint."""

    def test_get_word(self, client: TestClient, test_words: list[models.Word]) -> None:
        """Test fetching a word."""
        response = client.get(f"/api/v1/words/{test_words[0].id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["english"] == "run"

    def test_get_word_not_found(self, client: TestClient) -> None:
        """Test fetching a non-existent word."""
        response = client.get("/api/v1/words/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Word with id 99999 not found"

    def test_get_word_in_foreign_private_set(
        self, client: TestClient, db_session: Session, private_word_set: models.WordSet
    ) -> None:
        """Test words of another user's private set look missing."""
        word = db_session.query(models.Word).filter_by(word_set_id=private_word_set.id).one()

        response = client.get(f"/api/v1/words/{word.id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestUpdateWord:
    """Test suite for PUT /words/:id endpoint."""

    def test_update_word_success(
        self, client: TestClient, db_session: Session, test_words: list[models.Word]
    ) -> None:
        """Test replacing a word's content."""
        word = test_words[1]

        response = client.put(
            f"/api/v1/words/{word.id}",
            json={"english": "eat up", "chinese": "吃光", "category": "phrasal"},
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["word"]
        assert data["english"] == "eat up"
        assert data["category"] == "phrasal"
        assert data["word_set_id"] == word.word_set_id

        db_session.refresh(word)
        assert word.chinese == "吃光"

    def test_update_word_outside_collection(
        self,
        client: TestClient,
        db_session: Session,
        test_words: list[models.Word],
        other_user_headers: dict[str, str],
    ) -> None:
        """Test another user cannot edit words of a set they have not imported."""
        response = client.put(
            f"/api/v1/words/{test_words[0].id}",
            json={"english": "sprint", "chinese": "冲刺"},
            headers=other_user_headers,
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN


class TestDeleteWord:
    """Test suite for DELETE /words/:id endpoint."""

    def test_delete_word_success(
        self,
        client: TestClient,
        db_session: Session,
        test_word_set: models.WordSet,
        test_words: list[models.Word],
    ) -> None:
        """Test deleting a word decrements the set's word count."""
        word_id = test_words[0].id

        response = client.delete(f"/api/v1/words/{word_id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True
        assert db_session.get(models.Word, word_id) is None
        db_session.refresh(test_word_set)
        assert test_word_set.word_count == 2

    def test_delete_word_count_floors_at_zero(
        self,
        client: TestClient,
        db_session: Session,
        test_word_set: models.WordSet,
        test_words: list[models.Word],
    ) -> None:
        """Test a drifted word count never goes negative."""
        test_word_set.word_count = 0
        db_session.commit()

        response = client.delete(f"/api/v1/words/{test_words[0].id}")

        assert response.status_code == status.HTTP_200_OK
        db_session.refresh(test_word_set)
        assert test_word_set.word_count == 0

    def test_delete_word_not_found(self, client: TestClient) -> None:
        """Test deleting a non-existent word."""
        response = client.delete("/api/v1/words/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestSearchWords:
    """Test suite for GET /words endpoint."""

    def test_search_by_keyword(self, client: TestClient, test_words: list[models.Word]) -> None:
        """Test keyword matches english, chinese and example case-insensitively."""
        by_english = client.get("/api/v1/words?q=SLE").json()["words"]
        by_chinese = client.get("/api/v1/words?q=吃").json()["words"]
        by_example = client.get("/api/v1/words?q=morning").json()["words"]

        assert [w["english"] for w in by_english] == ["sleep"]
        assert [w["english"] for w in by_chinese] == ["eat"]
        assert [w["english"] for w in by_example] == ["run"]

    def test_search_treats_wildcards_literally(
        self, client: TestClient, test_words: list[models.Word]
    ) -> None:
        """Test SQL wildcards in the keyword do not match everything."""
        response = client.get("/api/v1/words?q=%25")

        assert response.json()["words"] == []

    def test_search_hides_foreign_private_words(
        self,
        client: TestClient,
        test_words: list[models.Word],
        private_word_set: models.WordSet,
    ) -> None:
        """Test words of another user's private set are never returned."""
        response = client.get("/api/v1/words?q=key")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["words"] == []

    def test_search_filters_and_ordering(
        self, client: TestClient, test_word_set: models.WordSet, test_words: list[models.Word]
    ) -> None:
        """Test word set, category, ordering and limit options."""
        base = f"/api/v1/words?word_set_id={test_word_set.id}"

        newest_first = client.get(base).json()["words"]
        oldest_first = client.get(f"{base}&ascending=true&limit=2").json()["words"]
        by_category = client.get(f"{base}&category=verbs").json()["words"]

        assert [w["english"] for w in newest_first] == ["sleep", "eat", "run"]
        assert [w["english"] for w in oldest_first] == ["run", "eat"]
        assert [w["english"] for w in by_category] == ["run"]
