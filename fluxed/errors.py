class QuizError(Exception):
	"""Base class for adaptive quiz failures."""


class InvalidOperation(QuizError):
	"""Raised when an operation is not legal in the current session state.

	The session is left untouched when this is raised.
	"""


class EmptyCandidatePool(QuizError):
	"""Raised when no question matches the session's subject and difficulty."""

	def __init__(self, subject: str, difficulty: str) -> None:
		super().__init__(f"no questions for subject={subject!r} difficulty={difficulty!r}")
		self.subject = subject
		self.difficulty = difficulty
