from typing import Any, Dict, Iterable, List, Tuple
from ..models import Question
from ..content import QUESTIONS

DIFFICULTY_ORDER = ["easy", "medium", "hard"]

class QuestionBank:
	"""Read-only question lookup keyed by subject and difficulty.

	Query results keep the bank's insertion order so that cycling through a
	candidate pool is reproducible.
	"""

	def __init__(self, questions: Iterable[Question]) -> None:
		self._questions: Tuple[Question, ...] = tuple(questions)

	@classmethod
	def from_records(cls, records: Iterable[Dict[str, Any]]) -> "QuestionBank":
		return cls(Question(**r) for r in records)

	@classmethod
	def default(cls) -> "QuestionBank":
		return cls.from_records(QUESTIONS)

	def query(self, subject: str, difficulty: str) -> List[Question]:
		return [q for q in self._questions if q.subject == subject and q.difficulty == difficulty]

	def subjects(self) -> List[str]:
		seen: List[str] = []
		for q in self._questions:
			if q.subject not in seen:
				seen.append(q.subject)
		return seen

	def has_full_coverage(self, subject: str) -> bool:
		return all(self.query(subject, d) for d in DIFFICULTY_ORDER)
