from typing import Optional, Tuple
from ..config import settings
from ..errors import EmptyCandidatePool, InvalidOperation
from ..models import FeedbackSignal, Question, SessionState
from .question_bank import DIFFICULTY_ORDER, QuestionBank

POSITIVE_MESSAGE = "Wah! ⭐ Shabaash!"
NEGATIVE_MESSAGE = "No problem! Dekho hint 😊"

def shift_difficulty(current: str, direction: str) -> str:
    idx = DIFFICULTY_ORDER.index(current)
    if direction == "increase" and idx < len(DIFFICULTY_ORDER) - 1:
        return DIFFICULTY_ORDER[idx + 1]
    if direction == "decrease" and idx > 0:
        return DIFFICULTY_ORDER[idx - 1]
    return current

class AdaptiveQuizSession:
    """One learner's run through a fixed-length adaptive quiz.

    Difficulty starts at ``easy``. A streak of correct answers promotes one
    tier and consumes the streak; every incorrect answer demotes one tier.
    A streak of wrong answers ends the run with ``needs-revision``.

    Candidate pools are cycled with ``question_index % len(pool)``, so a
    short pool repeats questions once exhausted.
    """

    def __init__(
        self,
        bank: QuestionBank,
        *,
        question_quota: int | None = None,
        points_per_correct: int | None = None,
        promotion_streak: int | None = None,
        revision_streak: int | None = None,
    ) -> None:
        self.bank = bank
        self.question_quota = question_quota if question_quota is not None else settings.question_quota
        self.points_per_correct = points_per_correct if points_per_correct is not None else settings.points_per_correct
        self.promotion_streak = promotion_streak if promotion_streak is not None else settings.promotion_streak
        self.revision_streak = revision_streak if revision_streak is not None else settings.revision_streak
        self._state: Optional[SessionState] = None
        self._current: Optional[Question] = None

    @property
    def state(self) -> SessionState:
        if self._state is None:
            raise InvalidOperation("session_not_started")
        return self._state.model_copy()

    @property
    def current_question(self) -> Optional[Question]:
        return self._current

    @property
    def is_terminal(self) -> bool:
        return self._state is not None and self._state.outcome != "in-progress"

    def select_question(self, state: SessionState) -> Question:
        candidates = self.bank.query(state.subject, state.difficulty)
        if not candidates:
            raise EmptyCandidatePool(state.subject, state.difficulty)
        return candidates[state.question_index % len(candidates)]

    def start(self, subject: str) -> Tuple[SessionState, Question]:
        state = SessionState(subject=subject)
        question = self.select_question(state)
        self._state, self._current = state, question
        return state.model_copy(), question

    def reset(self, subject: str | None = None) -> Tuple[SessionState, Question]:
        chosen = subject or (self._state.subject if self._state else None)
        if not chosen:
            raise InvalidOperation("no_subject_chosen")
        return self.start(chosen)

    def submit_answer(self, selected_option_index: int) -> Tuple[SessionState, FeedbackSignal, Optional[Question]]:
        if self._state is None or self._current is None:
            raise InvalidOperation("session_not_started")
        if self._state.outcome != "in-progress":
            raise InvalidOperation(f"session_{self._state.outcome}")
        question = self._current
        if not 0 <= selected_option_index < len(question.options):
            raise InvalidOperation("option_index_out_of_range")

        # Work on a copy; nothing is committed until the next question is known.
        state = self._state.model_copy()
        before = state.difficulty
        is_correct = selected_option_index == question.correct_answer_index
        if is_correct:
            state.score += self.points_per_correct
            state.consecutive_correct += 1
            state.consecutive_wrong = 0
            if state.consecutive_correct >= self.promotion_streak:
                state.difficulty = shift_difficulty(state.difficulty, "increase")
                state.consecutive_correct = 0
        else:
            state.consecutive_wrong += 1
            state.consecutive_correct = 0
            state.difficulty = shift_difficulty(state.difficulty, "decrease")
            if state.consecutive_wrong >= self.revision_streak:
                state.outcome = "needs-revision"

        if state.outcome == "in-progress":
            state.question_index += 1
            if state.question_index >= self.question_quota:
                state.outcome = "finished"

        next_question = self.select_question(state) if state.outcome == "in-progress" else None

        change = None
        if state.difficulty != before:
            change = "increase" if DIFFICULTY_ORDER.index(state.difficulty) > DIFFICULTY_ORDER.index(before) else "decrease"
        feedback = FeedbackSignal(
            correct=is_correct,
            signal="positive" if is_correct else "negative",
            message=POSITIVE_MESSAGE if is_correct else NEGATIVE_MESSAGE,
            hint=None if is_correct else question.hint,
            points_awarded=self.points_per_correct if is_correct else 0,
            difficulty_change=change,
        )
        self._state, self._current = state, next_question
        return state.model_copy(), feedback, next_question
