import os
import json
import base64
from typing import List, Dict, Any
import logging
from datetime import datetime, timezone
import google.generativeai as genai
from time import perf_counter
from ..config import settings
from ..models import Flashcard, PracticeQuestion
from .prompt_builder import PromptBuilder

logger = logging.getLogger("fluxed")

CHAT_FALLBACK = "I'm sorry, I couldn't process that."
DOUBT_FALLBACK = "Oops! I had trouble understanding that. Could you try rephrasing?"

class GeminiExplainer:
    """ExplanationService backed by the Gemini generative-language API.

    Every public call degrades to a fixed fallback when no API key is set or
    the model call fails, so the helpers never raise into request handlers.
    """

    def __init__(self) -> None:
        if settings.gemini_api_key:
            genai.configure(api_key=settings.gemini_api_key)
        self.model_name = settings.gemini_model
        self.text_config = {"temperature": 0.7}
        self.json_config = {
            "temperature": 0.4,
            "top_p": 0.9,
            "response_mime_type": "application/json",
        }
        self.prompt_builder = PromptBuilder()

    @property
    def enabled(self) -> bool:
        return bool(settings.gemini_api_key)

    def _session_log_path(self, session_id: str) -> str:
        return os.path.join(settings.log_dir, f"session_{session_id}.jsonl")

    def _append_log(self, session_id: str | None, record: Dict[str, Any]) -> None:
        if not session_id:
            return
        try:
            os.makedirs(settings.log_dir, exist_ok=True)
            enriched = dict(record)
            enriched.setdefault("ts", datetime.now(timezone.utc).isoformat())
            with open(self._session_log_path(session_id), 'a', encoding='utf-8') as f:
                f.write(json.dumps(enriched, ensure_ascii=False) + "\n")
        except Exception:
            logger.exception("session_log_write_failed")

    def _strip_code_fences(self, text: str) -> str:
        t = text.strip()
        if t.startswith("```"):
            parts = t.split("\n", 1)
            if len(parts) == 2:
                t = parts[1]
            if t.endswith("```"):
                t = t[:-3]
        if t.startswith("json\n"):
            t = t[5:]
        return t.strip()

    def _try_slice_to_array(self, text: str) -> List[Dict[str, Any]]:
        first = text.find("[")
        last = text.rfind("]")
        if first != -1 and last != -1 and last > first:
            try:
                return json.loads(text[first:last+1])
            except ValueError:
                return []
        return []

    def _coerce_payload_to_list(self, obj: Any, key: str) -> List[Dict[str, Any]]:
        if isinstance(obj, list):
            return [item for item in obj if isinstance(item, dict)]
        if isinstance(obj, dict) and isinstance(obj.get(key), list):
            return [item for item in obj[key] if isinstance(item, dict)]
        return []

    def _parse_json_list(self, raw_text: str, key: str) -> List[Dict[str, Any]]:
        cleaned = self._strip_code_fences(raw_text)
        try:
            payload_obj = json.loads(cleaned)
        except ValueError:
            payload_obj = self._try_slice_to_array(cleaned)
        return self._coerce_payload_to_list(payload_obj, key)

    def _response_text(self, response: Any) -> str:
        raw_text = ""
        try:
            raw_text = (response.text or "").strip()
        except ValueError:
            # .text raises when the candidate carries no simple text part
            raw_text = ""
        if not raw_text and getattr(response, "candidates", None):
            parts = response.candidates[0].content.parts
            raw_text = "".join(getattr(p, "text", "") for p in parts)
        return raw_text

    def _generate(self, contents: Any, *, as_json: bool = False, system_instruction: str | None = None, session_id: str | None = None, event: str = "generate") -> str:
        model = genai.GenerativeModel(
            self.model_name,
            generation_config=self.json_config if as_json else self.text_config,
            system_instruction=system_instruction,
        )
        t0 = perf_counter()
        response = model.generate_content(contents)
        latency_ms = int((perf_counter() - t0) * 1000)
        raw_text = self._response_text(response)
        logger.debug({"event": "gemini_response", "task": event, "preview": raw_text[:200], "latency_ms": latency_ms})
        self._append_log(session_id, {"event": event, "latency_ms": latency_ms, "chars": len(raw_text)})
        return raw_text

    def chat(self, message: str, *, mode: str = "individual", user_name: str = "Student", current_view: str = "dashboard", progress: Dict[str, Any] | None = None, session_id: str | None = None) -> str:
        if not self.enabled:
            logger.warning({"event": "gemini_no_api_key", "task": "chat"})
            return CHAT_FALLBACK
        system_instruction = self.prompt_builder.system_instruction(mode=mode, user_name=user_name, current_view=current_view, progress=progress)
        try:
            return self._generate(message, system_instruction=system_instruction, session_id=session_id, event="chat") or CHAT_FALLBACK
        except Exception:
            logger.exception("gemini_chat_failed")
            return CHAT_FALLBACK

    def solve_doubt(self, doubt: str, *, fmt: str = "step-by-step", user_name: str = "Student", image_b64: str | None = None, session_id: str | None = None) -> str:
        if not self.enabled:
            logger.warning({"event": "gemini_no_api_key", "task": "doubt"})
            return DOUBT_FALLBACK
        prompt = self.prompt_builder.doubt(doubt=doubt, fmt=fmt, user_name=user_name, has_image=bool(image_b64))
        parts: List[Any] = [prompt]
        try:
            if image_b64:
                # Data URLs arrive as "data:image/png;base64,<payload>"
                payload = image_b64.split(",", 1)[1] if "," in image_b64 else image_b64
                parts.append({"mime_type": "image/png", "data": base64.b64decode(payload)})
            return self._generate(parts, session_id=session_id, event="doubt") or DOUBT_FALLBACK
        except Exception:
            logger.exception("gemini_doubt_failed")
            return DOUBT_FALLBACK

    def revision_summary(self, topic: str, *, session_id: str | None = None) -> str:
        fallback = f"Quick revision: {topic}. Re-read your notes, list the key rules, and try a few practice questions."
        if not self.enabled:
            logger.warning({"event": "gemini_no_api_key", "task": "revision_summary"})
            return fallback
        try:
            return self._generate(self.prompt_builder.revision_summary(topic), session_id=session_id, event="revision_summary") or fallback
        except Exception:
            logger.exception("gemini_summary_failed")
            return fallback

    def flashcards(self, topic: str, *, session_id: str | None = None) -> List[Flashcard]:
        fallback = [Flashcard(front=topic, back=f"Review your notes on {topic}.")]
        if not self.enabled:
            logger.warning({"event": "gemini_no_api_key", "task": "flashcards"})
            return fallback
        try:
            raw = self._generate(self.prompt_builder.flashcards(topic), as_json=True, session_id=session_id, event="flashcards")
        except Exception:
            logger.exception("gemini_flashcards_failed")
            return fallback
        cards = [
            Flashcard(front=str(item["front"]), back=str(item["back"]))
            for item in self._parse_json_list(raw, "flashcards")
            if item.get("front") and item.get("back")
        ]
        if not cards:
            logger.warning({"event": "gemini_empty_flashcards", "topic": topic})
            return fallback
        return cards

    def _parse_practice_questions(self, raw: str, count: int) -> List[PracticeQuestion]:
        questions: List[PracticeQuestion] = []
        for item in self._parse_json_list(raw, "questions")[:count]:
            text_val = item.get("text")
            if not text_val:
                continue
            options = [str(o) for o in item.get("options") or []]
            answer = item.get("correct_answer", item.get("correctAnswer"))
            # Conceptual questions answer with text rather than an option index
            answer_text = answer if isinstance(answer, str) else None
            if not isinstance(answer, int) or not 0 <= answer < len(options):
                answer = None
            questions.append(PracticeQuestion(
                text=text_val,
                type=str(item.get("type") or "mcq"),
                options=options,
                correct_answer=answer,
                answer_text=answer_text,
                explanation=item.get("explanation"),
            ))
        return questions

    def revision_questions(self, topic: str, count: int = 5, *, session_id: str | None = None) -> List[PracticeQuestion]:
        if not self.enabled:
            logger.warning({"event": "gemini_no_api_key", "task": "revision_questions"})
            return []
        try:
            raw = self._generate(self.prompt_builder.revision_questions(topic, count), as_json=True, session_id=session_id, event="revision_questions")
        except Exception:
            logger.exception("gemini_questions_failed")
            return []
        return self._parse_practice_questions(raw, count)

    def chapter_test(self, chapter: str, subject: str, difficulty: str, avg_score: float, *, session_id: str | None = None) -> List[PracticeQuestion]:
        if not self.enabled:
            logger.warning({"event": "gemini_no_api_key", "task": "chapter_test"})
            return []
        prompt = self.prompt_builder.chapter_test(chapter, subject, difficulty, avg_score)
        try:
            raw = self._generate(prompt, as_json=True, session_id=session_id, event="chapter_test")
        except Exception:
            logger.exception("gemini_chapter_test_failed")
            return []
        return self._parse_practice_questions(raw, 5)
