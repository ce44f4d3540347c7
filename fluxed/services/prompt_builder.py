import json
from typing import Any, Dict

SCHOOL_PERSONA = (
	"You are Fluxy, an AI assistant for teachers on the FluxED platform. "
	"Your goal is to help teachers manage classes, analyze student performance, and assign homework. "
	"Tone: Professional, helpful, efficient. "
	"Keep responses short and clear. If the user wants to go to a page, tell them you can help them navigate."
)

STUDENT_PERSONA = (
	"You are Fluxy, a friendly AI book companion for students on the FluxED platform. "
	"Your goal is to help students learn, provide homework guidance (step-by-step, don't give answers directly), and motivate them. "
	"Tone: Friendly, encouraging, kid-friendly. "
	"Keep responses short and clear. Use emojis. If the user wants to go to a page, tell them you can help them navigate."
)

DOUBT_FORMATS = {
	"step-by-step": "Provide a clear, structured step-by-step explanation.",
	"real-life": "Explain this concept using a relatable real-life example.",
	"diagram": "Provide a text-based diagram (using ASCII or clear structure) and explain it.",
	"story": "Explain this concept using a simple and engaging story.",
	"video": "Provide a script for a short explanatory video and summarize the key points clearly.",
}

class PromptBuilder:
	def build(self, template_text: str, *, task: str, context: Dict[str, Any] | None = None) -> str:
		instructions = template_text + "\n" + task
		if not context:
			return instructions
		return instructions + "\n" + json.dumps(context, ensure_ascii=False)

	def system_instruction(self, *, mode: str, user_name: str, current_view: str, progress: Dict[str, Any] | None) -> str:
		persona = SCHOOL_PERSONA if mode == "school" else STUDENT_PERSONA
		context = {"current_view": current_view, "user": user_name, "progress": progress or {}}
		return self.build(persona, task="Use the CONTEXT JSON below to personalise the reply.", context=context)

	def doubt(self, *, doubt: str, fmt: str, user_name: str, has_image: bool) -> str:
		prompt = f'You are an expert AI tutor. A student named {user_name} has a doubt: "{doubt}". '
		if has_image:
			prompt += "The student has also provided an image for context. "
		prompt += DOUBT_FORMATS.get(fmt, DOUBT_FORMATS["step-by-step"])
		return prompt + " Use simple language and avoid unnecessary complexity."

	def revision_summary(self, topic: str) -> str:
		return self.build(
			f'Generate a one-minute summary for the topic: "{topic}".',
			task=(
				"Include: Core Concept, Key Formula or Rule (if applicable), Important Point to Remember. "
				"Keep it concise, structured, and readable within one minute."
			),
		)

	def flashcards(self, topic: str) -> str:
		return self.build(
			f'Generate 6-8 flashcards for the topic: "{topic}".',
			task="Output must be strict JSON only. Return a JSON array of objects matching format.card_shape.",
			context={"format": {"card_shape": {"front": "question or keyword", "back": "short answer or definition"}}},
		)

	def chapter_test(self, chapter: str, subject: str, difficulty: str, avg_score: float) -> str:
		return self.build(
			f'Generate a comprehensive {difficulty} level chapter test for "{chapter}" in {subject}. '
			f"The user's average performance in this chapter is {avg_score:.0f}%.",
			task=(
				"Include 5 questions: 2 MCQs, 2 Conceptual (True/False or short), 1 Application-based problem. "
				"Output must be strict JSON only. Return a JSON array of objects matching format.question_shape."
			),
			context={
				"format": {
					"num_questions": 5,
					"mix": {"mcq": 2, "conceptual": 2, "application": 1},
					"question_shape": {
						"text": "string",
						"type": "mcq|conceptual|application",
						"options": ["string (MCQ only)"],
						"correct_answer": "index into options, or the expected answer text",
						"explanation": "string",
					},
				}
			},
		)

	def revision_questions(self, topic: str, count: int) -> str:
		return self.build(
			f'Generate exactly {count} revision questions for the topic: "{topic}".',
			task=(
				"Mix conceptual and application-based questions. "
				"Output must be strict JSON only. Return a JSON array of objects matching format.question_shape."
			),
			context={
				"format": {
					"num_questions": count,
					"question_shape": {
						"text": "string",
						"options": ["string"],
						"correct_answer": "index into options",
						"explanation": "string",
					},
				}
			},
		)
