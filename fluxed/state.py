import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional
from .models import ProgressEntry, ProgressEntryRequest, Quiz, QuizDraft, SchoolClass, SessionState, User
from .services.adaptive_engine import AdaptiveQuizSession
from .services.question_bank import QuestionBank

class QuizSessionData:
	def __init__(self, session: AdaptiveQuizSession, user_id: Optional[str]) -> None:
		self.session = session
		self.user_id = user_id
		self.progress_logged = False

class QuizSessionStore:
	def __init__(self, bank: QuestionBank) -> None:
		self.bank = bank
		self.sessions: Dict[str, QuizSessionData] = {}

	def create_session(self, session_id: str, user_id: Optional[str] = None) -> AdaptiveQuizSession:
		session = AdaptiveQuizSession(self.bank)
		self.sessions[session_id] = QuizSessionData(session, user_id)
		return session

	def has_session(self, session_id: str) -> bool:
		return session_id in self.sessions

	def get_session(self, session_id: str) -> AdaptiveQuizSession:
		return self.sessions[session_id].session

	def get_user_id(self, session_id: str) -> Optional[str]:
		return self.sessions[session_id].user_id

	def mark_progress_logged(self, session_id: str, logged: bool = True) -> None:
		self.sessions[session_id].progress_logged = logged

	def progress_logged(self, session_id: str) -> bool:
		return self.sessions[session_id].progress_logged

	def discard(self, session_id: str) -> None:
		self.sessions.pop(session_id, None)

class SchoolStore:
	"""Non-durable store for users, classes, quizzes and student progress."""

	def __init__(self) -> None:
		self.users: Dict[str, User] = {}
		self.tokens: Dict[str, str] = {}
		self.classes: List[SchoolClass] = [
			SchoolClass(id="c1", name="Class 1A", teacher_id="t1"),
			SchoolClass(id="c2", name="Class 2B", teacher_id="t1"),
		]
		self.quizzes: List[Quiz] = []
		self.progress: List[ProgressEntry] = []

	def login(self, email: str, name: str, role: str) -> tuple[str, User]:
		user = next((u for u in self.users.values() if u.email == email), None)
		if user is None:
			user = User(id=str(uuid.uuid4()), email=email, name=name, role=role)
			self.users[user.id] = user
		token = uuid.uuid4().hex
		self.tokens[token] = user.id
		return token, user

	def user_for_token(self, token: str) -> Optional[User]:
		user_id = self.tokens.get(token)
		return self.users.get(user_id) if user_id else None

	def list_classes(self) -> List[SchoolClass]:
		return list(self.classes)

	def add_quiz(self, draft: QuizDraft) -> Quiz:
		quiz = Quiz(id=str(uuid.uuid4()), **draft.model_dump())
		self.quizzes.append(quiz)
		return quiz

	def list_quizzes(self) -> List[Quiz]:
		return list(self.quizzes)

	def log_progress(self, entry: ProgressEntryRequest) -> ProgressEntry:
		record = ProgressEntry(id=str(uuid.uuid4()), timestamp=datetime.now(timezone.utc), **entry.model_dump())
		self.progress.append(record)
		return record

	def log_quiz_outcome(self, user_id: str, state: SessionState) -> ProgressEntry:
		return self.log_progress(ProgressEntryRequest(
			user_id=user_id,
			kind="adaptive_quiz",
			subject=state.subject,
			score=state.score,
			details={"outcome": state.outcome, "difficulty": state.difficulty, "question_index": state.question_index},
		))

	def progress_for(self, user_id: str) -> List[ProgressEntry]:
		return [p for p in self.progress if p.user_id == user_id]

question_bank = QuestionBank.default()
session_store = QuizSessionStore(question_bank)
school_store = SchoolStore()
