"""
Timed interview state machine.

An InterviewSession moves not_started -> active -> complete. While active
it counts down the current question's time budget one tick at a time and
records one answer per question; submitting the last answer evaluates the
interview. reset() returns any session to not_started.

The session performs no I/O. Callers persist it with to_snapshot() after
each mutating call and rebuild it with from_snapshot().
"""
import logging
from datetime import datetime
from typing import Callable, List, Optional, Sequence

from interview_sim.schemas.interview import (
    CandidateInfo,
    ChatMessage,
    Evaluation,
    EvaluationResult,
    Question,
    SessionSnapshot,
)
from interview_sim.services.answer_evaluator import evaluate_answers

logger = logging.getLogger(__name__)

NO_ANSWER_PLACEHOLDER = "No answer provided"

CLOSING_MESSAGE = "Thank you for completing the interview! Your answers have been evaluated."


class InterviewError(Exception):
    """Base class for interview flow errors."""


class InvalidTransition(InterviewError):
    """Raised when an operation is attempted in a state that does not allow it."""

    def __init__(self, operation: str, status: str):
        self.operation = operation
        self.status = status
        super().__init__(f"Cannot {operation} while interview is {status}")


def welcome_message(name: str, question_count: int) -> str:
    return (
        f"Hello {name}! Welcome to your AI interview for a React/Node.js role. "
        f"I'll ask you {question_count} questions of varying difficulty. "
        "You'll have limited time for each question, shown by the timer above. "
        "Let's begin with the first question."
    )


class InterviewSession:
    """
    One candidate's attempt at the interview.

    Attributes mirror SessionSnapshot. Operations attempted outside their
    valid state raise InvalidTransition and leave every attribute as it was.
    """

    def __init__(
        self,
        candidate_info: Optional[CandidateInfo] = None,
        evaluator: Callable[[Sequence[Question], Sequence[str]], EvaluationResult] = evaluate_answers,
        clock: Callable[[], datetime] = datetime.utcnow,
    ):
        self._evaluator = evaluator
        self._clock = clock
        self._clear(candidate_info)

    def _clear(self, candidate_info: Optional[CandidateInfo] = None):
        self.candidate_info = candidate_info or CandidateInfo()
        self.questions: List[Question] = []
        self.current_index = 0
        self.answers: List[str] = []
        self.draft_answer = ""
        self.time_remaining = 0
        self.is_active = False
        self.is_complete = False
        self.score = 0
        self.summary = ""
        self.evaluations: List[Evaluation] = []
        self.transcript: List[ChatMessage] = []
        self.record_id: Optional[int] = None

    @property
    def status(self) -> str:
        if self.is_complete:
            return "complete"
        if self.is_active:
            return "active"
        return "not_started"

    @property
    def current_question(self) -> Optional[Question]:
        if not self.is_active:
            return None
        return self.questions[self.current_index]

    @property
    def is_last_question(self) -> bool:
        return self.current_index == len(self.questions) - 1

    def _require(self, status: str, operation: str):
        if self.status != status:
            raise InvalidTransition(operation, self.status)

    def _say(self, sender: str, content: str):
        self.transcript.append(ChatMessage(sender=sender, content=content, timestamp=self._clock()))

    def start(self, questions: Sequence[Question]):
        """
        Begin the interview with the given questions.

        Raises:
            InvalidTransition: if the session has already been started
            ValueError: if questions is empty
        """
        self._require("not_started", "start")
        if not questions:
            raise ValueError("An interview needs at least one question")

        self.questions = list(questions)
        self.current_index = 0
        self.answers = [""] * len(self.questions)
        self.draft_answer = ""
        self.time_remaining = self.questions[0].time_limit
        self.is_active = True

        self._say("ai", welcome_message(self.candidate_info.name, len(self.questions)))
        self._say("ai", self.questions[0].text)

    def tick(self):
        """
        Advance the countdown by one second.

        When the budget runs out the current draft is submitted exactly as
        if the candidate had pressed submit.
        """
        self._require("active", "tick")
        self.time_remaining = max(self.time_remaining - 1, 0)
        if self.time_remaining == 0:
            logger.debug(f"Time up on question {self.current_index + 1}, auto-submitting")
            self.submit_answer(self.draft_answer)

    def update_draft(self, text: str):
        """Remember the partially typed answer for a timeout auto-submit."""
        self._require("active", "update draft")
        self.draft_answer = text or ""

    def submit_answer(self, text: Optional[str]):
        """
        Record the answer to the current question and move on.

        A blank answer is stored as NO_ANSWER_PLACEHOLDER. The last answer
        triggers evaluation and completes the session.
        """
        self._require("active", "submit answer")

        answer = (text or "").strip() or NO_ANSWER_PLACEHOLDER
        self.answers[self.current_index] = answer
        self.draft_answer = ""
        self._say("candidate", answer)

        if self.is_last_question:
            self._complete()
            return

        self.current_index += 1
        self.time_remaining = self.questions[self.current_index].time_limit
        self._say("ai", self.questions[self.current_index].text)

    def _complete(self):
        result = self._evaluator(self.questions, self.answers)
        self.score = result.score
        self.summary = result.summary
        self.evaluations = list(result.evaluations)
        self.time_remaining = 0
        self.is_active = False
        self.is_complete = True
        self._say("ai", CLOSING_MESSAGE)

    def reset(self):
        """Drop all progress and candidate details."""
        self._clear()

    def to_snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            candidate_info=self.candidate_info,
            questions=self.questions,
            current_index=self.current_index,
            answers=self.answers,
            draft_answer=self.draft_answer,
            time_remaining=self.time_remaining,
            is_active=self.is_active,
            is_complete=self.is_complete,
            score=self.score,
            summary=self.summary,
            evaluations=self.evaluations,
            transcript=self.transcript,
            record_id=self.record_id,
        )

    @classmethod
    def from_snapshot(cls, snapshot: SessionSnapshot, **kwargs) -> "InterviewSession":
        session = cls(candidate_info=snapshot.candidate_info, **kwargs)
        session.questions = list(snapshot.questions)
        session.current_index = snapshot.current_index
        session.answers = list(snapshot.answers)
        session.draft_answer = snapshot.draft_answer
        session.time_remaining = snapshot.time_remaining
        session.is_active = snapshot.is_active
        session.is_complete = snapshot.is_complete
        session.score = snapshot.score
        session.summary = snapshot.summary
        session.evaluations = list(snapshot.evaluations)
        session.transcript = list(snapshot.transcript)
        session.record_id = snapshot.record_id
        return session
