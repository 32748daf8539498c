"""
Pydantic schemas for the candidate interview flow.
"""
from typing import List, Literal, Optional
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field, model_validator

Difficulty = Literal["easy", "medium", "hard"]
Sender = Literal["ai", "candidate"]
SessionStatus = Literal["not_started", "active", "complete"]


class Question(BaseModel):
    """A single interview question with its countdown budget."""
    id: int = Field(..., description="Question ID")
    text: str = Field(..., description="Question text")
    difficulty: Difficulty = Field(..., description="Difficulty band")
    time_limit: int = Field(..., ge=1, description="Seconds allowed for this question")

    class Config:
        frozen = True


class CandidateInfo(BaseModel):
    """Candidate identity as extracted from the resume or typed in by the candidate."""
    name: str = Field("", description="Full name")
    email: str = Field("", description="Email address")
    phone: str = Field("", description="Phone number")
    resume_ref: str = Field("", description="Reference to the stored resume file")


class StartInterviewRequest(BaseModel):
    """Verified candidate details submitted to start the interview."""
    name: str = Field(..., min_length=1, max_length=255, description="Full name")
    email: EmailStr = Field(..., description="Email address")
    phone: str = Field(..., min_length=1, max_length=50, description="Phone number")
    resume_ref: str = Field("", max_length=255, description="Value returned by /resume/upload")

    class Config:
        json_schema_extra = {
            "example": {
                "name": "John Doe",
                "email": "john.doe@example.com",
                "phone": "(123) 456-7890",
                "resume_ref": "3f2a9c_resume.pdf"
            }
        }


class ChatMessage(BaseModel):
    """One line of the interview transcript."""
    sender: Sender
    content: str
    timestamp: datetime


class Evaluation(BaseModel):
    """Score and feedback for one answered question."""
    question_id: int
    score: int = Field(..., ge=0, le=10)
    feedback: str


class EvaluationResult(BaseModel):
    """Aggregate outcome of an interview."""
    score: int = Field(..., ge=0, le=100)
    evaluations: List[Evaluation]
    summary: str


class SessionSnapshot(BaseModel):
    """
    Durable shape of an interview session.

    Used for checkpointing; a payload that does not validate against this
    model is treated as absent.
    """
    candidate_info: CandidateInfo = Field(default_factory=CandidateInfo)
    questions: List[Question] = Field(default_factory=list)
    current_index: int = Field(0, ge=0)
    answers: List[str] = Field(default_factory=list)
    draft_answer: str = ""
    time_remaining: int = Field(0, ge=0)
    is_active: bool = False
    is_complete: bool = False
    score: int = Field(0, ge=0, le=100)
    summary: str = ""
    evaluations: List[Evaluation] = Field(default_factory=list)
    transcript: List[ChatMessage] = Field(default_factory=list)
    record_id: Optional[int] = None

    @model_validator(mode="after")
    def check_state(self):
        if self.is_active and self.is_complete:
            raise ValueError("session cannot be both active and complete")
        if self.is_active or self.is_complete:
            if not self.questions:
                raise ValueError("started session has no questions")
            if len(self.answers) != len(self.questions):
                raise ValueError("answers must match questions in length")
            if self.current_index >= len(self.questions):
                raise ValueError("current_index out of range")
        return self


class CurrentQuestionView(BaseModel):
    """What the chat view shows for the question being answered."""
    number: int = Field(..., description="1-based question number")
    total: int = Field(..., description="Number of questions in the interview")
    id: int
    text: str
    difficulty: Difficulty
    time_limit: int
    time_remaining: int
    progress_percent: int = Field(..., ge=0, le=100, description="Share of the time budget left")


class SessionStateResponse(BaseModel):
    """Schema for interview state returned to the candidate UI."""
    session_key: str
    status: SessionStatus
    candidate_info: CandidateInfo
    current_question: Optional[CurrentQuestionView] = None
    transcript: List[ChatMessage] = Field(default_factory=list)
    draft_answer: str = ""
    score: Optional[int] = Field(None, description="Final percentage, set once complete")
    summary: Optional[str] = None
    evaluations: List[Evaluation] = Field(default_factory=list)
    record_id: Optional[int] = Field(None, description="Candidate record created on completion")


class AnswerRequest(BaseModel):
    """Answer text for the current question. Blank means no answer."""
    text: str = Field("", max_length=10000)


class ResumeUploadResponse(BaseModel):
    """Result of uploading a resume."""
    candidate_info: CandidateInfo
    resume_ref: str
    text_length: int = Field(..., description="Characters of text extracted from the file")
