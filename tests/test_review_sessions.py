"""Tests for review sessions API endpoints."""

from datetime import UTC, datetime
from typing import Any

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from vocabmaster import models


def _start(client: TestClient, word_set_id: int) -> dict[str, Any]:
    response = client.post(f"/api/v1/word-sets/{word_set_id}/review-sessions")
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


class TestStartReviewSession:
    """Test suite for POST /word-sets/:id/review-sessions endpoint."""

    def test_start_review_session(
        self,
        client: TestClient,
        test_word_set: models.WordSet,
        test_words: list[models.Word],
    ) -> None:
        """Test a new session starts on the first card, face up."""
        session = _start(client, test_word_set.id)

        assert session["word_set_id"] == test_word_set.id
        assert session["word_set_title"] == "Everyday Verbs"
        state = session["state"]
        assert state["cursor"] == 0
        assert state["is_flipped"] is False
        assert state["correct_count"] == 0
        assert state["incorrect_count"] == 0
        assert state["undo_available"] is False
        assert state["card_count"] == 3
        card = state["current_card"]
        assert card["id"] == test_words[0].id
        assert card["front_text"] == "run"
        assert card["back_text"] == "跑"
        assert card["phonetic"] == "/rʌn/"
        assert card["example_sentence"] == "I run every morning."
        assert card["tag"] == "verbs"

    def test_start_review_session_empty_word_set(
        self, client: TestClient, test_word_set: models.WordSet
    ) -> None:
        """Test an empty set gives a session whose operations report an empty deck."""
        session = _start(client, test_word_set.id)
        assert session["state"]["card_count"] == 0
        assert session["state"]["current_card"] is None

        flip = client.post(f"/api/v1/review-sessions/{session['id']}/flip")
        grade = client.post(
            f"/api/v1/review-sessions/{session['id']}/grade", json={"outcome": "correct"}
        )

        assert flip.status_code == status.HTTP_200_OK
        assert flip.json()["result"] == "empty_deck"
        assert grade.json()["result"] == "empty_deck"
        assert grade.json()["session"]["state"] == session["state"]

    def test_start_review_session_foreign_private_set(
        self, client: TestClient, private_word_set: models.WordSet
    ) -> None:
        """Test another user's private set cannot be reviewed."""
        response = client.post(f"/api/v1/word-sets/{private_word_set.id}/review-sessions")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestReviewOperations:
    """Test suite for flip, grade and undo endpoints."""

    def test_flip_grade_undo_round_trip(
        self,
        client: TestClient,
        test_word_set: models.WordSet,
        test_words: list[models.Word],
    ) -> None:
        """Test undo restores the card and flip state the grade left behind."""
        session_id = _start(client, test_word_set.id)["id"]
        base = f"/api/v1/review-sessions/{session_id}"

        flipped = client.post(f"{base}/flip").json()
        assert flipped["result"] == "applied"
        assert flipped["session"]["state"]["is_flipped"] is True

        graded = client.post(f"{base}/grade", json={"outcome": "incorrect"}).json()
        state = graded["session"]["state"]
        assert graded["result"] == "applied"
        assert state["cursor"] == 1
        assert state["is_flipped"] is False
        assert state["incorrect_count"] == 1
        assert state["graded_count"] == 1
        assert state["undo_available"] is True
        assert state["current_card"]["front_text"] == "eat"

        undone = client.post(f"{base}/undo").json()
        state = undone["session"]["state"]
        assert undone["result"] == "applied"
        assert state["cursor"] == 0
        assert state["is_flipped"] is True
        assert state["incorrect_count"] == 0
        assert state["graded_count"] == 0
        assert state["undo_available"] is False

    def test_undo_on_fresh_session(
        self,
        client: TestClient,
        test_word_set: models.WordSet,
        test_words: list[models.Word],
    ) -> None:
        """Test undo without grades reports unavailable."""
        session_id = _start(client, test_word_set.id)["id"]

        response = client.post(f"/api/v1/review-sessions/{session_id}/undo")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["result"] == "undo_unavailable"

    def test_grade_wraps_around(
        self,
        client: TestClient,
        test_word_set: models.WordSet,
        test_words: list[models.Word],
    ) -> None:
        """Test grading past the last card returns to the first."""
        session_id = _start(client, test_word_set.id)["id"]

        cursors = []
        for _ in range(3):
            body = client.post(
                f"/api/v1/review-sessions/{session_id}/grade", json={"outcome": "correct"}
            ).json()
            cursors.append(body["session"]["state"]["cursor"])

        assert cursors == [1, 2, 0]
        state = client.get(f"/api/v1/review-sessions/{session_id}").json()["state"]
        assert state["correct_count"] == 3

    def test_grade_rejects_unknown_outcome(
        self,
        client: TestClient,
        test_word_set: models.WordSet,
        test_words: list[models.Word],
    ) -> None:
        """Test the outcome must be correct or incorrect."""
        session_id = _start(client, test_word_set.id)["id"]

        response = client.post(
            f"/api/v1/review-sessions/{session_id}/grade", json={"outcome": "maybe"}
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_session_of_another_user(
        self,
        client: TestClient,
        test_word_set: models.WordSet,
        test_words: list[models.Word],
        other_user_headers: dict[str, str],
    ) -> None:
        """Test another user's session looks missing."""
        session_id = _start(client, test_word_set.id)["id"]

        response = client.post(
            f"/api/v1/review-sessions/{session_id}/flip", headers=other_user_headers
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_unknown_session(self, client: TestClient) -> None:
        """Test operating on an unknown session ID."""
        response = client.get("/api/v1/review-sessions/00000000-0000-0000-0000-000000000000")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestCloseReviewSession:
    """Test suite for DELETE /review-sessions/:id endpoint."""

    def test_close_writes_study_record(
        self,
        client: TestClient,
        db_session: Session,
        test_word_set: models.WordSet,
        test_words: list[models.Word],
        test_user_id: int,
    ) -> None:
        """Test closing a graded session credits today's study record."""
        session_id = _start(client, test_word_set.id)["id"]
        base = f"/api/v1/review-sessions/{session_id}"
        client.post(f"{base}/grade", json={"outcome": "correct"})
        client.post(f"{base}/grade", json={"outcome": "incorrect"})

        response = client.delete(base)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["success"] is True
        assert data["duration_minutes"] == 1
        assert data["session"]["state"]["graded_count"] == 2
        today = datetime.now(UTC).date()
        assert data["study_record"]["study_date"] == today.isoformat()
        assert data["study_record"]["words_count"] == 2
        assert data["study_record"]["study_time_minutes"] == 1

        record = (
            db_session.query(models.StudyRecord)
            .filter_by(user_id=test_user_id, study_date=today)
            .one()
        )
        assert record.words_count == 2

        # The session is gone once closed
        assert client.get(base).status_code == status.HTTP_404_NOT_FOUND

    def test_close_adds_to_existing_record(
        self,
        client: TestClient,
        db_session: Session,
        test_word_set: models.WordSet,
        test_words: list[models.Word],
        test_user_id: int,
    ) -> None:
        """Test a second session on the same day adds to the same record."""
        for _ in range(2):
            session_id = _start(client, test_word_set.id)["id"]
            client.post(
                f"/api/v1/review-sessions/{session_id}/grade", json={"outcome": "correct"}
            )
            client.delete(f"/api/v1/review-sessions/{session_id}")

        records = db_session.query(models.StudyRecord).filter_by(user_id=test_user_id).all()
        assert len(records) == 1
        assert records[0].words_count == 2
        assert records[0].study_time_minutes == 2

    def test_close_without_grades_writes_nothing(
        self,
        client: TestClient,
        db_session: Session,
        test_word_set: models.WordSet,
        test_words: list[models.Word],
    ) -> None:
        """Test undone grades do not count toward the study record."""
        session_id = _start(client, test_word_set.id)["id"]
        base = f"/api/v1/review-sessions/{session_id}"
        client.post(f"{base}/grade", json={"outcome": "correct"})
        client.post(f"{base}/undo")

        response = client.delete(base)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["study_record"] is None
        assert db_session.query(models.StudyRecord).count() == 0

    def test_close_twice(
        self,
        client: TestClient,
        test_word_set: models.WordSet,
        test_words: list[models.Word],
    ) -> None:
        """Test a closed session cannot be closed again."""
        session_id = _start(client, test_word_set.id)["id"]
        client.delete(f"/api/v1/review-sessions/{session_id}")

        response = client.delete(f"/api/v1/review-sessions/{session_id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
