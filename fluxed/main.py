from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import ORJSONResponse
from fastapi.middleware.cors import CORSMiddleware
import logging
import uuid
from time import perf_counter
from datetime import datetime, timezone
from typing import List, Optional
from .state import question_bank, session_store, school_store
from .errors import EmptyCandidatePool, InvalidOperation
from .models import (
	ChapterTestRequest, ChapterTestResponse, ChatRequest, CurriculumSubject, DoubtRequest,
	LoginRequest, LoginResponse, PerformanceRequest, PerformanceResponse, ProgressEntry,
	ProgressEntryRequest, PublicQuestion, Quiz, QuizDraft, QuizStateResponse, ResetQuizRequest,
	RevisionRequest, RevisionResponse, SchoolClass, StartQuizRequest, SubjectsResponse,
	SubmitAnswerRequest, SubmitAnswerResponse, TextResponse, TopicTestRequest, TopicTestResponse, User,
)
from .services import curriculum
from .services.gemini_client import GeminiExplainer
from .services.performance import chapter_difficulty, score_topic_test, topic_performance
from .config import settings

logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s %(message)s")
logger = logging.getLogger("fluxed")

app = FastAPI(title="FluxED", default_response_class=ORJSONResponse)

app.add_middleware(
	CORSMiddleware,
	allow_origins=["*"],
	allow_credentials=True,
	allow_methods=["*"],
	allow_headers=["*"],
)

explainer = GeminiExplainer()

@app.on_event("startup")
def on_startup() -> None:
	logger.info({
		"event": "api_startup",
		"utc_time": datetime.now(timezone.utc).isoformat(),
		"model": settings.gemini_model,
		"gemini_enabled": explainer.enabled,
		"question_quota": settings.question_quota,
		"subjects": question_bank.subjects(),
	})

@app.middleware("http")
async def timing_middleware(request: Request, call_next):
	start = perf_counter()
	response = await call_next(request)
	duration_ms = int((perf_counter() - start) * 1000)
	logger.debug({
		"event": "request_timing",
		"method": request.method,
		"path": request.url.path,
		"status_code": response.status_code,
		"duration_ms": duration_ms,
	})
	return response

@app.exception_handler(InvalidOperation)
async def invalid_operation_handler(request: Request, exc: InvalidOperation):
	logger.info({"event": "invalid_operation", "path": request.url.path, "detail": str(exc)})
	return ORJSONResponse(status_code=409, content={"detail": str(exc), "error": "InvalidOperation"})

@app.exception_handler(EmptyCandidatePool)
async def empty_pool_handler(request: Request, exc: EmptyCandidatePool):
	logger.warning({"event": "empty_candidate_pool", "subject": exc.subject, "difficulty": exc.difficulty})
	return ORJSONResponse(status_code=422, content={"detail": str(exc), "error": "EmptyCandidatePool"})

def _require_session(session_id: str):
	if not session_store.has_session(session_id):
		raise HTTPException(status_code=404, detail="session_not_found")
	return session_store.get_session(session_id)

# Auth

@app.post("/api/auth/login", response_model=LoginResponse)
def login(payload: LoginRequest):
	token, user = school_store.login(payload.email, payload.name, payload.role)
	logger.debug({"event": "login", "user_id": user.id, "role": user.role})
	return LoginResponse(token=token, user=user)

@app.get("/api/auth/me", response_model=User)
def me(request: Request):
	header = request.headers.get("authorization", "")
	scheme, _, token = header.partition(" ")
	if scheme.lower() != "bearer" or not token:
		raise HTTPException(status_code=401, detail="unauthorized")
	user = school_store.user_for_token(token)
	if user is None:
		raise HTTPException(status_code=401, detail="invalid_token")
	return user

# School mode

@app.get("/api/school/classes", response_model=List[SchoolClass])
def list_classes():
	return school_store.list_classes()

@app.post("/api/school/quizzes", response_model=Quiz)
def create_quiz(payload: QuizDraft):
	quiz = school_store.add_quiz(payload)
	logger.debug({"event": "quiz_created", "quiz_id": quiz.id, "class_id": quiz.class_id})
	return quiz

@app.get("/api/school/quizzes", response_model=List[Quiz])
def list_quizzes():
	return school_store.list_quizzes()

# Individual mode

@app.post("/api/student/progress", response_model=ProgressEntry)
def log_progress(payload: ProgressEntryRequest):
	return school_store.log_progress(payload)

@app.get("/api/student/progress/{user_id}", response_model=List[ProgressEntry])
def get_progress(user_id: str):
	return school_store.progress_for(user_id)

# Curriculum

@app.get("/api/curriculum", response_model=List[CurriculumSubject])
def list_curriculum():
	return [CurriculumSubject(subject=s, chapters=n) for s, n in curriculum.subject_summaries()]

@app.get("/api/curriculum/{subject}")
def get_chapters(subject: str):
	chapters = curriculum.chapters_for(subject)
	if chapters is None:
		raise HTTPException(status_code=404, detail="subject_not_found")
	return chapters

@app.post("/api/curriculum/performance", response_model=PerformanceResponse)
def get_performance(payload: PerformanceRequest):
	percentage, remark = topic_performance(payload.notes, payload.video, payload.test_score)
	return PerformanceResponse(percentage=percentage, remark=remark)

@app.post("/api/curriculum/topics/{topic_id}/test", response_model=TopicTestResponse)
def submit_topic_test(topic_id: str, payload: TopicTestRequest):
	topic = curriculum.find_topic(topic_id)
	if topic is None:
		raise HTTPException(status_code=404, detail="topic_not_found")
	test_score = score_topic_test(topic["questions"], payload.answers)
	percentage, remark = topic_performance(payload.notes, payload.video, test_score)
	logger.debug({"event": "topic_test_scored", "topic_id": topic_id, "test_score": test_score})
	return TopicTestResponse(topic_id=topic_id, test_score=test_score, percentage=percentage, remark=remark)

@app.post("/api/curriculum/chapters/{chapter_id}/test", response_model=ChapterTestResponse)
def generate_chapter_test(chapter_id: str, payload: ChapterTestRequest):
	found = curriculum.find_chapter(chapter_id)
	if found is None:
		raise HTTPException(status_code=404, detail="chapter_not_found")
	subject, chapter = found
	difficulty, avg_score = chapter_difficulty(payload.topic_scores)
	questions = explainer.chapter_test(chapter["name"], subject, difficulty, avg_score, session_id=payload.session_id)
	logger.debug({"event": "chapter_test_generated", "chapter_id": chapter_id, "difficulty": difficulty, "avg_score": avg_score, "count": len(questions)})
	return ChapterTestResponse(chapter_id=chapter_id, difficulty=difficulty, average_score=avg_score, questions=questions)

@app.get("/api/library")
def get_library(grade: Optional[int] = None, subject: Optional[str] = None):
	return curriculum.library(grade=grade, subject=subject)

# Adaptive quiz

@app.get("/api/quiz/subjects", response_model=SubjectsResponse)
def list_quiz_subjects():
	return SubjectsResponse(subjects=[s for s in question_bank.subjects() if question_bank.has_full_coverage(s)])

@app.post("/api/quiz/start", response_model=QuizStateResponse)
def start_quiz(payload: StartQuizRequest):
	session_id = str(uuid.uuid4())
	session = session_store.create_session(session_id, user_id=payload.user_id)
	try:
		state, question = session.start(payload.subject)
	except EmptyCandidatePool:
		session_store.discard(session_id)
		raise
	logger.debug({"event": "session_started", "session_id": session_id, "subject": state.subject, "question_id": question.id})
	return QuizStateResponse(session_id=session_id, state=state, question=PublicQuestion.from_question(question))

@app.get("/api/quiz/state", response_model=QuizStateResponse)
def get_quiz_state(session_id: str):
	session = _require_session(session_id)
	return QuizStateResponse(session_id=session_id, state=session.state, question=PublicQuestion.from_question(session.current_question))

@app.post("/api/quiz/submit", response_model=SubmitAnswerResponse)
def submit_answer(payload: SubmitAnswerRequest):
	session = _require_session(payload.session_id)
	served = session.current_question
	# Terminal sessions have no current question; the engine reports those itself.
	if not session.is_terminal and served is not None and served.id != payload.question_id:
		raise InvalidOperation("question_not_active")
	state, feedback, next_question = session.submit_answer(payload.selected_option_index)
	logger.debug({
		"event": "submit_answer",
		"session_id": payload.session_id,
		"question_id": served.id if served else None,
		"is_correct": feedback.correct,
		"selected_option_index": payload.selected_option_index,
		"score": state.score,
		"difficulty": state.difficulty,
		"outcome": state.outcome,
	})
	if feedback.difficulty_change:
		logger.debug({"event": "difficulty_changed", "session_id": payload.session_id, "direction": feedback.difficulty_change, "difficulty": state.difficulty})
	user_id = session_store.get_user_id(payload.session_id)
	if state.outcome != "in-progress" and user_id and not session_store.progress_logged(payload.session_id):
		school_store.log_quiz_outcome(user_id, state)
		session_store.mark_progress_logged(payload.session_id)
		logger.debug({"event": "quiz_outcome_logged", "session_id": payload.session_id, "user_id": user_id, "outcome": state.outcome})
	return SubmitAnswerResponse(session_id=payload.session_id, state=state, feedback=feedback, next_question=PublicQuestion.from_question(next_question))

@app.post("/api/quiz/reset", response_model=QuizStateResponse)
def reset_quiz(payload: ResetQuizRequest):
	session = _require_session(payload.session_id)
	state, question = session.reset(payload.subject)
	session_store.mark_progress_logged(payload.session_id, False)
	logger.debug({"event": "session_reset", "session_id": payload.session_id, "subject": state.subject})
	return QuizStateResponse(session_id=payload.session_id, state=state, question=PublicQuestion.from_question(question))

# AI helpers

@app.post("/api/ai/chat", response_model=TextResponse)
def chat(payload: ChatRequest):
	progress = {k: v for k, v in {"stars": payload.stars, "level": payload.level}.items() if v is not None}
	text = explainer.chat(
		payload.message,
		mode=payload.mode,
		user_name=payload.user_name,
		current_view=payload.current_view,
		progress=progress,
		session_id=payload.session_id,
	)
	return TextResponse(text=text)

@app.post("/api/ai/doubt", response_model=TextResponse)
def solve_doubt(payload: DoubtRequest):
	text = explainer.solve_doubt(payload.doubt, fmt=payload.format, user_name=payload.user_name, image_b64=payload.image_base64, session_id=payload.session_id)
	return TextResponse(text=text)

@app.post("/api/ai/revision", response_model=RevisionResponse)
def revision(payload: RevisionRequest):
	response = RevisionResponse(topic=payload.topic)
	if payload.kind == "summary":
		response.summary = explainer.revision_summary(payload.topic, session_id=payload.session_id)
	elif payload.kind == "flashcards":
		response.flashcards = explainer.flashcards(payload.topic, session_id=payload.session_id)
	else:
		response.questions = explainer.revision_questions(payload.topic, payload.count, session_id=payload.session_id)
	return response
