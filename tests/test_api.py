import pytest
from fastapi.testclient import TestClient

from fluxed.main import app
from fluxed.state import session_store


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


def correct_index(session_id):
    return session_store.get_session(session_id).current_question.correct_answer_index


def wrong_index(session_id):
    question = session_store.get_session(session_id).current_question
    return (question.correct_answer_index + 1) % len(question.options)


def submit(client, session_id, index, question_id=None):
    """Answer the question currently shown, unless another id is given."""
    if question_id is None and session_store.has_session(session_id):
        current = session_store.get_session(session_id).current_question
        question_id = current.id if current else "none"
    return client.post("/api/quiz/submit", json={
        "session_id": session_id,
        "question_id": question_id or "none",
        "selected_option_index": index,
    })


def start(client, subject="Math", user_id=None):
    resp = client.post("/api/quiz/start", json={"subject": subject, "user_id": user_id})
    assert resp.status_code == 200
    return resp.json()


class TestQuizApi:
    def test_subjects(self, client):
        resp = client.get("/api/quiz/subjects")
        assert resp.json() == {"subjects": ["Math", "EVS", "English"]}

    def test_start_hides_answer(self, client):
        body = start(client)
        assert body["state"]["difficulty"] == "easy"
        assert body["state"]["outcome"] == "in-progress"
        assert body["question"]["id"] == "m1"
        assert "correct_answer_index" not in body["question"]

    def test_start_unknown_subject(self, client):
        resp = client.post("/api/quiz/start", json={"subject": "Astrology"})
        assert resp.status_code == 422
        assert resp.json()["error"] == "EmptyCandidatePool"

    def test_promotion_over_http(self, client):
        sid = start(client)["session_id"]
        for _ in range(3):
            resp = submit(client, sid, correct_index(sid))
        body = resp.json()
        assert body["state"]["difficulty"] == "medium"
        assert body["state"]["score"] == 30
        assert body["feedback"]["difficulty_change"] == "increase"
        assert body["next_question"]["difficulty"] == "medium"

    def test_wrong_answer_carries_hint(self, client):
        sid = start(client)["session_id"]
        resp = submit(client, sid, wrong_index(sid))
        feedback = resp.json()["feedback"]
        assert feedback["signal"] == "negative"
        assert feedback["hint"] == "Think of a slice of pizza! 🍕"

    def test_needs_revision_and_invalid_follow_up(self, client):
        sid = start(client)["session_id"]
        for _ in range(3):
            resp = submit(client, sid, wrong_index(sid))
        body = resp.json()
        assert body["state"]["outcome"] == "needs-revision"
        assert body["next_question"] is None

        resp = submit(client, sid, 0)
        assert resp.status_code == 409
        assert resp.json()["error"] == "InvalidOperation"

    def test_repeated_submit_for_answered_question_is_rejected(self, client):
        body = start(client)
        sid, shown = body["session_id"], body["question"]["id"]
        first = submit(client, sid, correct_index(sid), question_id=shown)
        assert first.status_code == 200
        before = first.json()["state"]

        again = submit(client, sid, 1, question_id=shown)
        assert again.status_code == 409
        assert again.json()["error"] == "InvalidOperation"
        state = client.get("/api/quiz/state", params={"session_id": sid}).json()["state"]
        assert state == before
        assert state["question_index"] == 1

    def test_out_of_range_option(self, client):
        sid = start(client)["session_id"]
        resp = submit(client, sid, 9)
        assert resp.status_code == 409
        state = client.get("/api/quiz/state", params={"session_id": sid}).json()["state"]
        assert state["question_index"] == 0

    def test_unknown_session(self, client):
        resp = submit(client, "nope", 0)
        assert resp.status_code == 404

    def test_finish_logs_progress_once(self, client):
        sid = start(client, subject="EVS", user_id="kid-1")["session_id"]
        for _ in range(10):
            resp = submit(client, sid, correct_index(sid))
        assert resp.json()["state"]["outcome"] == "finished"
        assert resp.json()["state"]["question_index"] == 10

        entries = client.get("/api/student/progress/kid-1").json()
        assert len(entries) == 1
        assert entries[0]["kind"] == "adaptive_quiz"
        assert entries[0]["score"] == 100
        assert entries[0]["details"]["outcome"] == "finished"

    def test_reset(self, client):
        sid = start(client)["session_id"]
        submit(client, sid, correct_index(sid))
        resp = client.post("/api/quiz/reset", json={"session_id": sid, "subject": "English"})
        body = resp.json()
        assert body["state"] == {
            "subject": "English",
            "difficulty": "easy",
            "score": 0,
            "question_index": 0,
            "consecutive_correct": 0,
            "consecutive_wrong": 0,
            "outcome": "in-progress",
        }
        assert body["question"]["id"] == "en1"


class TestSchoolApi:
    def test_login_and_me(self, client):
        resp = client.post("/api/auth/login", json={"email": "t@fluxed.edu", "name": "Teacher", "role": "teacher"})
        token = resp.json()["token"]
        me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.json()["email"] == "t@fluxed.edu"

    def test_me_rejects_missing_or_bad_token(self, client):
        assert client.get("/api/auth/me").status_code == 401
        assert client.get("/api/auth/me", headers={"Authorization": "Bearer bogus"}).status_code == 401

    def test_classes(self, client):
        names = [c["name"] for c in client.get("/api/school/classes").json()]
        assert names == ["Class 1A", "Class 2B"]

    def test_quiz_crud(self, client):
        created = client.post("/api/school/quizzes", json={"title": "Shapes", "class_id": "c1", "question_ids": ["m1", "m4"]}).json()
        assert created["id"]
        listed = client.get("/api/school/quizzes").json()
        assert any(q["id"] == created["id"] for q in listed)

    def test_progress_log(self, client):
        entry = client.post("/api/student/progress", json={"user_id": "kid-2", "kind": "notes", "subject": "Math"}).json()
        assert entry["timestamp"]
        assert client.get("/api/student/progress/kid-2").json()[0]["id"] == entry["id"]


class TestCurriculumApi:
    def test_subjects_and_chapters(self, client):
        subjects = {s["subject"]: s["chapters"] for s in client.get("/api/curriculum").json()}
        assert subjects == {"Math": 2, "English": 1, "EVS": 1}
        assert client.get("/api/curriculum/Math").json()[0]["id"] == "c1"
        assert client.get("/api/curriculum/Art").status_code == 404

    def test_topic_test(self, client):
        resp = client.post("/api/curriculum/topics/t1/test", json={"answers": {"0": 1, "1": 2}, "notes": True, "video": True})
        body = resp.json()
        assert body["test_score"] == 100
        assert body["remark"] == "Excellent Mastery 🎯"

    def test_performance(self, client):
        resp = client.post("/api/curriculum/performance", json={"notes": True, "video": False})
        assert resp.json() == {"percentage": 33, "remark": "Requires More Practice"}

    def test_chapter_test_offline(self, client):
        resp = client.post("/api/curriculum/chapters/c1/test", json={"topic_scores": [90, None]})
        assert resp.json() == {"chapter_id": "c1", "difficulty": "Challenging", "average_score": 90, "questions": []}

    def test_library_filter(self, client):
        pdfs = client.get("/api/library", params={"subject": "Math", "grade": 1}).json()
        assert [p["id"] for p in pdfs] == ["p1"]


class TestAiApi:
    def test_chat_fallback(self, client):
        resp = client.post("/api/ai/chat", json={"message": "hi"})
        assert resp.json() == {"text": "I'm sorry, I couldn't process that."}

    def test_doubt_fallback(self, client):
        resp = client.post("/api/ai/doubt", json={"doubt": "why?", "format": "diagram"})
        assert resp.status_code == 200

    def test_revision_flashcards(self, client):
        body = client.post("/api/ai/revision", json={"topic": "Plants", "kind": "flashcards"}).json()
        assert body["flashcards"][0]["front"] == "Plants"
        assert body["summary"] is None
