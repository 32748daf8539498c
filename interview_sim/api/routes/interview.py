"""
Interview endpoints.

Candidate side of the flow: start an interview with verified details,
answer questions against the countdown, read the result.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from interview_sim.db.session import get_db
from interview_sim.schemas.interview import (
    AnswerRequest,
    CandidateInfo,
    SessionStateResponse,
    StartInterviewRequest,
)
from interview_sim.services import interview_service
from interview_sim.services.interview_service import SessionNotFound
from interview_sim.services.interview_session import InvalidTransition

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/interview", tags=["Interview"])


def _not_found(e: SessionNotFound) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


def _conflict(e: InvalidTransition) -> HTTPException:
    logger.info(f"Rejected interview operation: {e}")
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.post("/start", status_code=status.HTTP_201_CREATED, response_model=SessionStateResponse)
def start_interview(request: StartInterviewRequest, db: Session = Depends(get_db)):
    """
    Start a new interview.

    The returned session_key identifies the interview in every other call.
    """
    try:
        session_key, session = interview_service.start_interview(
            db,
            CandidateInfo(
                name=request.name.strip(),
                email=str(request.email),
                phone=request.phone.strip(),
                resume_ref=request.resume_ref,
            ),
        )
        return interview_service.build_state_response(session_key, session)
    except Exception as e:
        db.rollback()
        logger.error(f"Failed to start interview: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to start interview"
        )


@router.get("/{session_key}", response_model=SessionStateResponse)
def get_interview(session_key: str, db: Session = Depends(get_db)):
    """Current state of an interview, e.g. to resume after a reload."""
    try:
        session = interview_service.load_session(db, session_key)
    except SessionNotFound as e:
        raise _not_found(e)
    return interview_service.build_state_response(session_key, session)


@router.put("/{session_key}/draft", response_model=SessionStateResponse)
def update_draft(session_key: str, request: AnswerRequest, db: Session = Depends(get_db)):
    """Save the answer typed so far; it is submitted if time runs out."""
    try:
        session = interview_service.update_draft(db, session_key, request.text)
    except SessionNotFound as e:
        raise _not_found(e)
    except InvalidTransition as e:
        raise _conflict(e)
    return interview_service.build_state_response(session_key, session)


@router.post("/{session_key}/answer", response_model=SessionStateResponse)
def submit_answer(session_key: str, request: AnswerRequest, db: Session = Depends(get_db)):
    """Submit the answer to the current question."""
    try:
        session = interview_service.submit_answer(db, session_key, request.text)
    except SessionNotFound as e:
        raise _not_found(e)
    except InvalidTransition as e:
        raise _conflict(e)
    return interview_service.build_state_response(session_key, session)


@router.post("/{session_key}/tick", response_model=SessionStateResponse)
def tick(session_key: str, db: Session = Depends(get_db)):
    """Deliver one second of countdown from a client-side timer."""
    try:
        session = interview_service.tick(db, session_key)
    except SessionNotFound as e:
        raise _not_found(e)
    except InvalidTransition as e:
        raise _conflict(e)
    return interview_service.build_state_response(session_key, session)


@router.post("/{session_key}/reset", status_code=status.HTTP_204_NO_CONTENT)
def reset_interview(session_key: str, db: Session = Depends(get_db)):
    """Start over: the interview and its progress are dropped."""
    interview_service.reset_interview(db, session_key)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
