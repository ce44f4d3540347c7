import json

import pytest

from fluxed.config import settings
from fluxed.services import gemini_client
from fluxed.services.gemini_client import CHAT_FALLBACK, DOUBT_FALLBACK, GeminiExplainer


class FakeResponse:
    def __init__(self, text):
        self.text = text
        self.candidates = []


class FakeModel:
    """Stands in for genai.GenerativeModel and records what it was asked."""

    calls = []
    reply = ""

    def __init__(self, model_name, generation_config=None, system_instruction=None):
        self.model_name = model_name
        self.generation_config = generation_config
        self.system_instruction = system_instruction

    def generate_content(self, contents):
        FakeModel.calls.append({"contents": contents, "config": self.generation_config, "system": self.system_instruction})
        if isinstance(FakeModel.reply, Exception):
            raise FakeModel.reply
        return FakeResponse(FakeModel.reply)


@pytest.fixture
def explainer():
    return GeminiExplainer()


@pytest.fixture
def online(monkeypatch, tmp_path):
    FakeModel.calls = []
    FakeModel.reply = ""
    monkeypatch.setattr(settings, "gemini_api_key", "test-key")
    monkeypatch.setattr(settings, "log_dir", str(tmp_path))
    monkeypatch.setattr(gemini_client.genai, "GenerativeModel", FakeModel)
    return FakeModel


class TestOfflineFallbacks:
    def test_disabled_without_key(self, explainer):
        assert not explainer.enabled

    def test_chat(self, explainer):
        assert explainer.chat("hello") == CHAT_FALLBACK

    def test_doubt(self, explainer):
        assert explainer.solve_doubt("why is the sky blue?") == DOUBT_FALLBACK

    def test_revision_helpers(self, explainer):
        assert "Fractions" in explainer.revision_summary("Fractions")
        cards = explainer.flashcards("Fractions")
        assert len(cards) == 1 and cards[0].front == "Fractions"
        assert explainer.revision_questions("Fractions") == []


class TestParsing:
    def test_strip_code_fences(self, explainer):
        assert explainer._strip_code_fences("```json\n[1, 2]\n```") == "[1, 2]"
        assert explainer._strip_code_fences("  plain  ") == "plain"

    def test_parse_json_list_accepts_wrapped_object(self, explainer):
        raw = json.dumps({"flashcards": [{"front": "a", "back": "b"}, "junk"]})
        assert explainer._parse_json_list(raw, "flashcards") == [{"front": "a", "back": "b"}]

    def test_parse_json_list_slices_noisy_text(self, explainer):
        raw = 'Here you go: [{"text": "Q1"}] hope this helps'
        assert explainer._parse_json_list(raw, "questions") == [{"text": "Q1"}]

    def test_parse_json_list_gives_up_on_garbage(self, explainer):
        assert explainer._parse_json_list("not json at all", "questions") == []


class TestOnline:
    def test_chat_uses_persona_for_mode(self, explainer, online):
        online.reply = "Hi there! 👋"
        assert explainer.chat("hello", mode="school", user_name="Asha", progress={"stars": 3}) == "Hi there! 👋"
        call = online.calls[-1]
        assert call["contents"] == "hello"
        assert "teachers" in call["system"]
        assert '"stars": 3' in call["system"]

    def test_doubt_forwards_image(self, explainer, online):
        online.reply = "Step 1..."
        text = explainer.solve_doubt("help", fmt="story", image_b64="data:image/png;base64,aGVsbG8=")
        assert text == "Step 1..."
        parts = online.calls[-1]["contents"]
        assert "engaging story" in parts[0]
        assert parts[1] == {"mime_type": "image/png", "data": b"hello"}

    def test_flashcards_parsed_from_json(self, explainer, online):
        online.reply = "```json\n" + json.dumps([{"front": "H2O", "back": "Water"}, {"front": "", "back": "x"}]) + "\n```"
        cards = explainer.flashcards("Chemistry")
        assert [(c.front, c.back) for c in cards] == [("H2O", "Water")]
        assert online.calls[-1]["config"]["response_mime_type"] == "application/json"

    def test_revision_questions_drop_bad_answers(self, explainer, online):
        online.reply = json.dumps([
            {"text": "Q1", "options": ["a", "b"], "correct_answer": 1},
            {"text": "Q2", "options": ["a", "b"], "correct_answer": 5},
            {"options": ["a"]},
        ])
        questions = explainer.revision_questions("Plants", count=5)
        assert [q.text for q in questions] == ["Q1", "Q2"]
        assert questions[0].correct_answer == 1
        assert questions[1].correct_answer is None

    def test_api_failure_falls_back(self, explainer, online):
        online.reply = RuntimeError("quota exceeded")
        assert explainer.chat("hello") == CHAT_FALLBACK
        assert explainer.revision_questions("Plants") == []

    def test_session_log_written(self, explainer, online, tmp_path):
        online.reply = "summary"
        explainer.revision_summary("Plants", session_id="abc")
        lines = (tmp_path / "session_abc.jsonl").read_text(encoding="utf-8").splitlines()
        record = json.loads(lines[-1])
        assert record["event"] == "revision_summary"
        assert "ts" in record


class TestChapterTest:
    def test_prompt_carries_average_and_question_mix(self, explainer):
        prompt = explainer.prompt_builder.chapter_test("Shapes & Space", "Math", "Moderate", 64.6)
        assert 'Moderate level chapter test for "Shapes & Space" in Math' in prompt
        assert "average performance in this chapter is 65%" in prompt
        assert "2 MCQs, 2 Conceptual (True/False or short), 1 Application-based problem" in prompt
        assert '"mix": {"mcq": 2, "conceptual": 2, "application": 1}' in prompt

    def test_offline_returns_no_questions(self, explainer):
        assert explainer.chapter_test("Shapes & Space", "Math", "Moderate", 60) == []

    def test_mixed_answers_parsed(self, explainer, online):
        online.reply = json.dumps([
            {"text": "Which shape has 3 sides?", "type": "mcq", "options": ["Circle", "Triangle"], "correct_answer": 1},
            {"text": "A circle has corners. True or False?", "type": "conceptual", "correct_answer": "False"},
        ])
        questions = explainer.chapter_test("Shapes & Space", "Math", "Easy/Foundational", 30)
        assert [q.type for q in questions] == ["mcq", "conceptual"]
        assert questions[0].correct_answer == 1
        assert questions[1].correct_answer is None
        assert questions[1].answer_text == "False"
        sent = online.calls[-1]["contents"]
        assert "average performance in this chapter is 30%" in sent
