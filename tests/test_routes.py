import pytest
from fastapi.testclient import TestClient

from quiz_admin.app import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


def test_validate_blocks_endpoint(client: TestClient) -> None:
    response = client.post(
        "/api/content/blocks/validate",
        json={"blocks": [{"type": "image", "url": ""}]},
    )
    assert response.status_code == 200
    assert response.json() == {
        "valid": False,
        "errors": ["Image block 1: Image URL is required"],
    }


def test_validate_blocks_rejects_unknown_variant(client: TestClient) -> None:
    response = client.post(
        "/api/content/blocks/validate",
        json={"blocks": [{"type": "audio", "url": "x"}]},
    )
    assert response.status_code == 422


def test_validate_blocks_reports_null_fields(client: TestClient) -> None:
    response = client.post(
        "/api/content/blocks/validate",
        json={"blocks": [{"type": "text", "content": "Q", "content_hi": None}]},
    )
    assert response.status_code == 200
    assert response.json() == {
        "valid": False,
        "errors": ["Text block 1: Hindi content is required"],
    }


def test_validate_options_endpoint(client: TestClient) -> None:
    response = client.post(
        "/api/content/options/validate",
        json={
            "options": [
                {"type": "text", "content": "Paris", "content_hi": "पेरिस"},
                {"type": "text", "content": "Lyon", "content_hi": "ल्यों"},
            ]
        },
    )
    assert response.json() == {"valid": True, "errors": []}


def test_extract_endpoint(client: TestClient) -> None:
    response = client.post(
        "/api/content/extract",
        json={
            "blocks": [
                {"type": "text", "content": "Look", "content_hi": "देखो"},
                {"type": "image", "url": "https://cdn.example.com/a.png"},
                {"type": "text", "content": "here", "content_hi": "यहाँ"},
            ]
        },
    )
    assert response.json() == {
        "text": "Look here",
        "text_hi": "देखो यहाँ",
        "image_urls": ["https://cdn.example.com/a.png"],
    }


def test_validate_question_endpoint(client: TestClient) -> None:
    response = client.post(
        "/api/questions/validate",
        json={
            "exam_id": "e1",
            "subject_id": "s1",
            "topic_id": "t1",
            "question_content": [{"type": "text", "content": "2+2?", "content_hi": "2+2?"}],
            "options": [
                {"type": "text", "content": "4", "content_hi": "४"},
                {"type": "image", "image_url": "https://cdn.example.com/5.png"},
            ],
            "correct_option": 2,
        },
    )
    body = response.json()
    assert response.status_code == 200
    assert body["valid"] is False
    assert body["errors"] == {"correct_option": "Correct option must be between 1 and 2"}


def test_validate_comprehension_group_endpoint(client: TestClient) -> None:
    response = client.post(
        "/api/questions/comprehension-groups/validate",
        json={
            "title": "Passage",
            "title_hi": "गद्यांश",
            "passage_content": [{"type": "text", "content": "Text", "content_hi": "पाठ"}],
        },
    )
    assert response.json() == {"valid": True, "errors": {}}


def test_validate_quiz_endpoint(client: TestClient) -> None:
    response = client.post("/api/quizzes/validate", json={"title": "Mock"})
    body = response.json()
    assert body["valid"] is False
    assert "Quiz title (Hindi) is required" in body["errors"]


def test_build_quiz_endpoint(client: TestClient) -> None:
    response = client.post(
        "/api/quizzes/build",
        json={
            "quiz_id": "quiz-9",
            "sections": [{"id": "temp-1", "name": "A", "name_hi": "अ", "display_order": 1}],
            "questions": [
                {"temp_id": "x1", "question_id": "q1", "marks": 2, "section_id": "temp-1"},
                {"temp_id": "x2", "question_id": "q2", "section_id": "gone"},
            ],
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["total_marks"] == 3
    assert [q["section_temp_id"] for q in body["questions"]] == ["temp-1", None]


def test_build_empty_quiz_is_rejected(client: TestClient) -> None:
    response = client.post("/api/quizzes/build", json={"quiz_id": "quiz-9"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please add at least one question to the quiz"
