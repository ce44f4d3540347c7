"""Shared fixtures for the FluxED test-suite."""
import pytest

from fluxed.config import settings
from fluxed.models import Question
from fluxed.services.adaptive_engine import AdaptiveQuizSession
from fluxed.services.question_bank import QuestionBank


def make_question(qid, difficulty, subject="Math", correct=0, hint=None):
    return Question(
        id=qid,
        text=f"{subject} {difficulty} question {qid}",
        options=["A", "B", "C", "D"],
        correct_answer_index=correct,
        subject=subject,
        difficulty=difficulty,
        hint=hint,
    )


@pytest.fixture(autouse=True)
def no_gemini_key(monkeypatch):
    """Keep every test offline: the explainer falls back without a key."""
    monkeypatch.setattr(settings, "gemini_api_key", None)


@pytest.fixture
def small_bank():
    """Two easy, one medium and two hard Math questions; all answers are option 0."""
    return QuestionBank([
        make_question("e1", "easy", hint="Count carefully"),
        make_question("e2", "easy"),
        make_question("m1", "medium", hint="Think twice"),
        make_question("h1", "hard"),
        make_question("h2", "hard"),
    ])


@pytest.fixture
def session(small_bank):
    return AdaptiveQuizSession(small_bank)


def answer(session, correct):
    """Submit the right (option 0) or a wrong (option 1) answer."""
    return session.submit_answer(0 if correct else 1)
