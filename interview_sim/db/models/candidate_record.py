"""
Candidate record model - one row per completed interview session.
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, JSON, Index
from interview_sim.db.base import Base


class CandidateRecord(Base):
    """
    A completed interview stored for recruiter review.

    Rows are append-only: the id is autoincremented so it also captures
    insertion order, which is used as the tie-break when listing.
    """
    __tablename__ = "candidate_records"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # Candidate identity
    name = Column(String, nullable=False, default="", index=True)
    email = Column(String, nullable=False, default="", index=True)
    phone = Column(String, nullable=False, default="")
    resume_ref = Column(String, nullable=False, default="")

    # Outcome
    score = Column(Integer, nullable=False, default=0, index=True)
    summary = Column(Text, nullable=False, default="")

    # Interview content (JSON-compatible lists of dicts / strings)
    questions = Column(JSON, nullable=False, default=list)
    answers = Column(JSON, nullable=False, default=list)
    evaluations = Column(JSON, nullable=False, default=list)
    transcript = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime, nullable=False, index=True)

    __table_args__ = (
        Index('idx_candidate_score_id', 'score', 'id'),
    )

    def __repr__(self):
        return f"<CandidateRecord(id={self.id}, name='{self.name}', score={self.score})>"
