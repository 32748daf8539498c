from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func
from interview_sim.db.base import Base


class Checkpoint(Base):
    """Namespaced key/value store for durable in-progress state."""
    __tablename__ = "checkpoints"

    key = Column(String, primary_key=True)  # "<namespace>:<id>", e.g. "interview:3f2a..."
    payload = Column(Text, nullable=False)  # JSON document
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
