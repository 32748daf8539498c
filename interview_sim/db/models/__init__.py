"""
Database models module.

Imports every model so it is registered with SQLAlchemy's Base.metadata
before table creation.
"""
from interview_sim.db.models.candidate_record import CandidateRecord
from interview_sim.db.models.checkpoint import Checkpoint

__all__ = [
    "CandidateRecord",
    "Checkpoint",
]
