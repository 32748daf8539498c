"""
Recruiter endpoints.

List, search and sort completed interviews and open a single candidate.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session

from interview_sim.db.session import get_db
from interview_sim.schemas.candidate import (
    CandidateDetailResponse,
    CandidateListResponse,
    SortKey,
    SortOrder,
)
from interview_sim.services.candidate_store import CandidateStore, to_detail, to_summary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/candidates", tags=["Candidates"])


@router.get("", status_code=status.HTTP_200_OK, response_model=CandidateListResponse)
def list_candidates(
    search: str = Query("", description="Match against name or email (case-insensitive)"),
    sort_by: SortKey = Query("score", description="score, name or date"),
    sort_order: SortOrder = Query("desc", description="asc or desc"),
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(10, ge=1, le=100, description="Items per page"),
    db: Session = Depends(get_db)
):
    """
    Get the candidate list for the recruiter dashboard.

    Candidates with equal sort values keep the order they were added in.
    """
    try:
        store = CandidateStore(db)
        total = store.count(search)
        rows = store.list(
            search=search,
            sort_by=sort_by,
            sort_order=sort_order,
            offset=(page - 1) * page_size,
            limit=page_size,
        )

        logger.debug(f"Candidates listed: total={total}, page={page}, sort={sort_by} {sort_order}")

        return CandidateListResponse(
            candidates=[to_summary(row) for row in rows],
            total=total,
            page=page,
            page_size=page_size
        )

    except Exception as e:
        logger.error(f"Failed to list candidates: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list candidates"
        )


@router.get("/{candidate_id}", status_code=status.HTTP_200_OK, response_model=CandidateDetailResponse)
def get_candidate(candidate_id: int, db: Session = Depends(get_db)):
    """Full interview record: answers, per-question feedback and chat transcript."""
    row = CandidateStore(db).get(candidate_id)
    if not row:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Candidate not found"
        )
    return to_detail(row)
