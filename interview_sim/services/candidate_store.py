"""
Candidate store for completed interviews.

Append-only: records are added once when an interview completes and are
only read afterwards (recruiter list and detail views).
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import asc, desc, func, or_
from sqlalchemy.orm import Session

from interview_sim.db.models.candidate_record import CandidateRecord
from interview_sim.schemas.candidate import (
    CandidateDetailResponse,
    CandidateRecordCreate,
    CandidateSummaryResponse,
    score_band,
)
from interview_sim.schemas.interview import CandidateInfo

logger = logging.getLogger(__name__)

SORT_COLUMNS = {
    "score": CandidateRecord.score,
    "name": CandidateRecord.name,
    "date": CandidateRecord.created_at,
}
SORT_ORDERS = ("asc", "desc")


class CandidateStore:
    """Query and append candidate records through a database session."""

    def __init__(self, db: Session, clock=datetime.utcnow):
        self.db = db
        self._clock = clock

    def add(self, record: CandidateRecordCreate) -> int:
        """
        Append a completed interview.

        Args:
            record: Candidate details, interview content and outcome

        Returns:
            The new record's ID
        """
        row = CandidateRecord(
            name=record.candidate_info.name,
            email=record.candidate_info.email,
            phone=record.candidate_info.phone,
            resume_ref=record.candidate_info.resume_ref,
            score=record.score,
            summary=record.summary,
            questions=[q.model_dump(mode="json") for q in record.questions],
            answers=list(record.answers),
            evaluations=[e.model_dump(mode="json") for e in record.evaluations],
            transcript=[m.model_dump(mode="json") for m in record.transcript],
            created_at=self._clock(),
        )
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)

        logger.info(f"Candidate record created: record_id={row.id}, score={row.score}")
        return row.id

    def get(self, record_id: int) -> Optional[CandidateRecord]:
        return self.db.query(CandidateRecord).filter(CandidateRecord.id == record_id).first()

    def _filtered(self, search: str = ""):
        query = self.db.query(CandidateRecord)
        term = (search or "").strip().lower()
        if term:
            query = query.filter(or_(
                func.lower(CandidateRecord.name).contains(term, autoescape=True),
                func.lower(CandidateRecord.email).contains(term, autoescape=True),
            ))
        return query

    def count(self, search: str = "") -> int:
        return self._filtered(search).count()

    def list(
        self,
        search: str = "",
        sort_by: str = "score",
        sort_order: str = "desc",
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> List[CandidateRecord]:
        """
        List candidates matching a search, sorted.

        Args:
            search: Case-insensitive substring matched against name or email
            sort_by: "score", "name" or "date"
            sort_order: "asc" or "desc"
            offset: Rows to skip after sorting
            limit: Maximum rows to return (None for all)

        Returns:
            Matching records. Ties keep insertion order whatever the direction.

        Raises:
            ValueError: for an unknown sort key or order
        """
        if sort_by not in SORT_COLUMNS:
            raise ValueError(f"Unknown sort key: {sort_by}")
        if sort_order not in SORT_ORDERS:
            raise ValueError(f"Unknown sort order: {sort_order}")

        column = SORT_COLUMNS[sort_by]
        direction = desc if sort_order == "desc" else asc

        query = self._filtered(search).order_by(direction(column), asc(CandidateRecord.id))
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        return query.all()


def to_summary(row: CandidateRecord) -> CandidateSummaryResponse:
    return CandidateSummaryResponse(
        id=row.id,
        name=row.name,
        email=row.email,
        score=row.score,
        score_band=score_band(row.score),
        created_at=row.created_at,
    )


def to_detail(row: CandidateRecord) -> CandidateDetailResponse:
    return CandidateDetailResponse(
        id=row.id,
        candidate_info=CandidateInfo(
            name=row.name,
            email=row.email,
            phone=row.phone,
            resume_ref=row.resume_ref,
        ),
        score=row.score,
        score_band=score_band(row.score),
        summary=row.summary,
        questions=row.questions or [],
        answers=row.answers or [],
        evaluations=row.evaluations or [],
        transcript=row.transcript or [],
        created_at=row.created_at,
    )
