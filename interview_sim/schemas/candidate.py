"""
Pydantic schemas for the recruiter candidate views.
"""
from typing import List, Literal
from datetime import datetime
from pydantic import BaseModel, Field

from interview_sim.schemas.interview import (
    CandidateInfo,
    ChatMessage,
    Evaluation,
    Question,
)

ScoreBand = Literal["green", "orange", "red"]
SortKey = Literal["score", "name", "date"]
SortOrder = Literal["asc", "desc"]


def score_band(score: int) -> str:
    """Colour band used by the recruiter dashboard."""
    if score >= 70:
        return "green"
    if score >= 50:
        return "orange"
    return "red"


class CandidateRecordCreate(BaseModel):
    """Everything a completed interview contributes to the candidate store."""
    candidate_info: CandidateInfo
    questions: List[Question]
    answers: List[str]
    score: int = Field(..., ge=0, le=100)
    summary: str
    evaluations: List[Evaluation]
    transcript: List[ChatMessage]


class CandidateSummaryResponse(BaseModel):
    """Schema for one row of the candidate list."""
    id: int = Field(..., description="Candidate record ID")
    name: str
    email: str
    score: int = Field(..., ge=0, le=100)
    score_band: ScoreBand
    created_at: datetime


class CandidateListResponse(BaseModel):
    """Schema for the candidate list response."""
    candidates: List[CandidateSummaryResponse] = Field(..., description="Candidates on this page")
    total: int = Field(..., description="Number of candidates matching the search")
    page: int = Field(1, description="Current page number")
    page_size: int = Field(10, description="Number of items per page")

    class Config:
        json_schema_extra = {
            "example": {
                "candidates": [],
                "total": 0,
                "page": 1,
                "page_size": 10
            }
        }


class CandidateDetailResponse(BaseModel):
    """Schema for the candidate detail view."""
    id: int
    candidate_info: CandidateInfo
    score: int = Field(..., ge=0, le=100)
    score_band: ScoreBand
    summary: str
    questions: List[Question]
    answers: List[str]
    evaluations: List[Evaluation]
    transcript: List[ChatMessage]
    created_at: datetime
