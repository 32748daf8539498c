"""
Interview service.

Glues the InterviewSession state machine to durable storage: every
operation loads the session checkpoint, applies one transition under the
session's lock, appends the candidate record when the interview has just
completed, and saves the checkpoint again.
"""
import logging
import threading
import uuid
from typing import Callable, Dict, Optional, Sequence, Tuple

from pydantic import ValidationError
from sqlalchemy.orm import Session

from interview_sim.core.logging_config import sanitize_log_data
from interview_sim.schemas.candidate import CandidateRecordCreate
from interview_sim.schemas.interview import (
    CandidateInfo,
    CurrentQuestionView,
    Question,
    SessionSnapshot,
    SessionStateResponse,
)
from interview_sim.services.answer_evaluator import round_half_up
from interview_sim.services.candidate_store import CandidateStore
from interview_sim.services.checkpoint_service import (
    checkpoint_key,
    discard_checkpoint,
    load_checkpoint,
    save_checkpoint,
)
from interview_sim.services.interview_session import InterviewError, InterviewSession
from interview_sim.services.question_bank import get_questions

logger = logging.getLogger(__name__)

NAMESPACE = "interview"

_locks: Dict[str, threading.Lock] = {}
_locks_guard = threading.Lock()


class SessionNotFound(InterviewError):
    """Raised when no usable checkpoint exists for a session key."""

    def __init__(self, session_key: str):
        self.session_key = session_key
        super().__init__(f"Interview session not found: {session_key}")


def session_lock(session_key: str) -> threading.Lock:
    """Per-session lock serialising ticks, answers and resets."""
    with _locks_guard:
        lock = _locks.get(session_key)
        if lock is None:
            lock = _locks[session_key] = threading.Lock()
        return lock


def _drop_lock(session_key: str) -> None:
    with _locks_guard:
        _locks.pop(session_key, None)


def _save(db: Session, session_key: str, session: InterviewSession) -> None:
    save_checkpoint(
        db,
        checkpoint_key(NAMESPACE, session_key),
        session.to_snapshot().model_dump(mode="json"),
    )


def _record_completion(db: Session, session: InterviewSession) -> None:
    """Append the candidate record exactly once per completed session."""
    if not session.is_complete or session.record_id is not None:
        return

    session.record_id = CandidateStore(db).add(CandidateRecordCreate(
        candidate_info=session.candidate_info,
        questions=session.questions,
        answers=session.answers,
        score=session.score,
        summary=session.summary,
        evaluations=session.evaluations,
        transcript=session.transcript,
    ))


def load_session(db: Session, session_key: str) -> InterviewSession:
    """
    Rebuild a session from its checkpoint.

    Raises:
        SessionNotFound: if there is no checkpoint or it does not describe
            a valid session (the corrupt checkpoint is discarded)
    """
    key = checkpoint_key(NAMESPACE, session_key)
    payload = load_checkpoint(db, key)
    if payload is None:
        raise SessionNotFound(session_key)

    try:
        snapshot = SessionSnapshot.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Discarding invalid interview checkpoint {session_key}: {e.error_count()} errors")
        discard_checkpoint(db, key)
        raise SessionNotFound(session_key)

    return InterviewSession.from_snapshot(snapshot)


def _apply(db: Session, session_key: str, operation: Callable[[InterviewSession], None]) -> InterviewSession:
    # Locks live only while a session can still change
    finished = True
    try:
        with session_lock(session_key):
            session = load_session(db, session_key)
            finished = not session.is_active
            operation(session)
            _record_completion(db, session)
            _save(db, session_key, session)
            finished = not session.is_active
            return session
    finally:
        if finished:
            _drop_lock(session_key)


def start_interview(
    db: Session,
    candidate_info: CandidateInfo,
    question_source: Callable[[], Sequence[Question]] = get_questions,
) -> Tuple[str, InterviewSession]:
    """
    Create and start a new interview for a verified candidate.

    Args:
        db: Database session
        candidate_info: Verified candidate details
        question_source: Callable returning the questions to ask

    Returns:
        Tuple of (session_key, started session)
    """
    session_key = uuid.uuid4().hex
    session = InterviewSession(candidate_info=candidate_info)
    session.start(question_source())
    _save(db, session_key, session)

    logger.info(
        f"Interview started: session_key={session_key}, "
        f"candidate={sanitize_log_data(candidate_info.model_dump())}"
    )
    return session_key, session


def submit_answer(db: Session, session_key: str, text: str) -> InterviewSession:
    session = _apply(db, session_key, lambda s: s.submit_answer(text))
    if session.is_complete:
        logger.info(f"Interview completed: session_key={session_key}, score={session.score}")
    return session


def tick(db: Session, session_key: str) -> InterviewSession:
    return _apply(db, session_key, lambda s: s.tick())


def update_draft(db: Session, session_key: str, text: str) -> InterviewSession:
    return _apply(db, session_key, lambda s: s.update_draft(text))


def reset_interview(db: Session, session_key: str) -> bool:
    """
    Drop a session entirely.

    Returns:
        True if a session existed
    """
    with session_lock(session_key):
        existed = discard_checkpoint(db, checkpoint_key(NAMESPACE, session_key))
    _drop_lock(session_key)
    logger.info(f"Interview reset: session_key={session_key}, existed={existed}")
    return existed


def build_state_response(session_key: str, session: InterviewSession) -> SessionStateResponse:
    """Project a session onto what the candidate UI renders."""
    current: Optional[CurrentQuestionView] = None
    question = session.current_question
    if question is not None:
        current = CurrentQuestionView(
            number=session.current_index + 1,
            total=len(session.questions),
            id=question.id,
            text=question.text,
            difficulty=question.difficulty,
            time_limit=question.time_limit,
            time_remaining=session.time_remaining,
            progress_percent=round_half_up(100 * session.time_remaining / question.time_limit),
        )

    return SessionStateResponse(
        session_key=session_key,
        status=session.status,
        candidate_info=session.candidate_info,
        current_question=current,
        transcript=session.transcript,
        draft_answer=session.draft_answer,
        score=session.score if session.is_complete else None,
        summary=session.summary if session.is_complete else None,
        evaluations=session.evaluations,
        record_id=session.record_id,
    )
