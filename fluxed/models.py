from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, Dict, List, Literal, Optional

Difficulty = Literal["easy", "medium", "hard"]
Outcome = Literal["in-progress", "finished", "needs-revision"]

class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    options: List[str] = Field(min_length=2)
    correct_answer_index: int
    subject: str
    difficulty: Difficulty
    hint: Optional[str] = None
    grade: Optional[int] = None

    @model_validator(mode="after")
    def _check_answer_index(self) -> "Question":
        if not 0 <= self.correct_answer_index < len(self.options):
            raise ValueError("correct_answer_index out of range")
        return self

class SessionState(BaseModel):
    subject: str
    difficulty: Difficulty = "easy"
    score: int = 0
    question_index: int = 0
    consecutive_correct: int = 0
    consecutive_wrong: int = 0
    outcome: Outcome = "in-progress"

class FeedbackSignal(BaseModel):
    correct: bool
    signal: Literal["positive", "negative"]
    message: str
    hint: Optional[str] = None
    points_awarded: int = 0
    difficulty_change: Optional[Literal["increase", "decrease"]] = None

class PublicQuestion(BaseModel):
    id: str
    text: str
    options: List[str]
    subject: str
    difficulty: Difficulty

    @classmethod
    def from_question(cls, question: Optional[Question]) -> Optional["PublicQuestion"]:
        if question is None:
            return None
        return cls(id=question.id, text=question.text, options=list(question.options), subject=question.subject, difficulty=question.difficulty)

# Quiz API

class StartQuizRequest(BaseModel):
    subject: str
    user_id: Optional[str] = None

class QuizStateResponse(BaseModel):
    session_id: str
    state: SessionState
    question: Optional[PublicQuestion] = None

class SubmitAnswerRequest(BaseModel):
    session_id: str
    question_id: str
    selected_option_index: int

class SubmitAnswerResponse(BaseModel):
    session_id: str
    state: SessionState
    feedback: FeedbackSignal
    next_question: Optional[PublicQuestion] = None

class ResetQuizRequest(BaseModel):
    session_id: str
    subject: Optional[str] = None

class SubjectsResponse(BaseModel):
    subjects: List[str]

# Auth and school API

class LoginRequest(BaseModel):
    email: str
    name: str
    role: Literal["student", "teacher", "parent"] = "student"

class User(BaseModel):
    id: str
    email: str
    name: str
    role: str

class LoginResponse(BaseModel):
    token: str
    user: User

class SchoolClass(BaseModel):
    id: str
    name: str
    teacher_id: str

class QuizDraft(BaseModel):
    title: str
    class_id: Optional[str] = None
    subject: Optional[str] = None
    question_ids: List[str] = Field(default_factory=list)
    due_date: Optional[str] = None

class Quiz(QuizDraft):
    id: str

class ProgressEntryRequest(BaseModel):
    user_id: str
    kind: str = "activity"
    subject: Optional[str] = None
    score: Optional[int] = None
    details: Dict[str, Any] = Field(default_factory=dict)

class ProgressEntry(ProgressEntryRequest):
    id: str
    timestamp: datetime

# Curriculum API

class PerformanceRequest(BaseModel):
    notes: bool = False
    video: bool = False
    test_score: Optional[float] = None

class PerformanceResponse(BaseModel):
    percentage: int
    remark: str

class CurriculumSubject(BaseModel):
    subject: str
    chapters: int

# AI helper API

class ChatRequest(BaseModel):
    message: str
    session_id: Optional[str] = None
    mode: Literal["school", "individual"] = "individual"
    user_name: str = "Student"
    current_view: str = "dashboard"
    stars: Optional[int] = None
    level: Optional[int] = None

class DoubtRequest(BaseModel):
    doubt: str
    session_id: Optional[str] = None
    format: Literal["step-by-step", "real-life", "diagram", "story", "video"] = "step-by-step"
    user_name: str = "Student"
    image_base64: Optional[str] = None

class TextResponse(BaseModel):
    text: str

class Flashcard(BaseModel):
    front: str
    back: str

class PracticeQuestion(BaseModel):
    text: str
    type: str = "mcq"
    options: List[str] = Field(default_factory=list)
    correct_answer: Optional[int] = None
    answer_text: Optional[str] = None
    explanation: Optional[str] = None

class RevisionRequest(BaseModel):
    topic: str
    kind: Literal["summary", "flashcards", "questions"] = "summary"
    count: int = Field(default=5, ge=1, le=10)
    session_id: Optional[str] = None

class RevisionResponse(BaseModel):
    topic: str
    summary: Optional[str] = None
    flashcards: List[Flashcard] = Field(default_factory=list)
    questions: List[PracticeQuestion] = Field(default_factory=list)

class TopicTestRequest(BaseModel):
    answers: Dict[int, int] = Field(default_factory=dict)
    notes: bool = False
    video: bool = False

class TopicTestResponse(BaseModel):
    topic_id: str
    test_score: float
    percentage: int
    remark: str

class ChapterTestRequest(BaseModel):
    topic_scores: List[Optional[float]] = Field(default_factory=list)
    session_id: Optional[str] = None

class ChapterTestResponse(BaseModel):
    chapter_id: str
    difficulty: str
    average_score: float
    questions: List[PracticeQuestion] = Field(default_factory=list)
