"""
Resume upload endpoint.

Stores the uploaded file, extracts its text and pre-fills the candidate
details the candidate verifies before starting the interview.
"""
import logging
import uuid
from pathlib import Path

from fastapi import APIRouter, File, HTTPException, UploadFile, status

from interview_sim.core import config
from interview_sim.schemas.interview import CandidateInfo, ResumeUploadResponse
from interview_sim.services.resume_info import extract_candidate_info
from interview_sim.services.resume_parser import parse_resume, validate_file_type

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/resume", tags=["Resume"])


@router.post("/upload", status_code=status.HTTP_200_OK, response_model=ResumeUploadResponse)
async def upload_resume(file: UploadFile = File(...)):
    """
    Upload a PDF or DOCX resume.

    Extraction problems are not errors: the response simply carries empty
    fields for the candidate to fill in.
    """
    if not validate_file_type(file.filename, file.content_type or ""):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only PDF and DOCX files are supported"
        )

    content = await file.read()
    if len(content) > config.MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Resume exceeds {config.MAX_UPLOAD_BYTES} bytes"
        )

    upload_dir = Path(config.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    resume_ref = f"{uuid.uuid4().hex}_{Path(file.filename or 'resume').name}"

    try:
        with open(upload_dir / resume_ref, "wb") as f:
            f.write(content)
    except OSError as e:
        logger.error(f"Failed to store resume: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to store resume"
        )

    text = parse_resume(upload_dir / resume_ref)
    info = extract_candidate_info(text)

    logger.info(f"Resume uploaded: resume_ref={resume_ref}, text_length={len(text)}")

    return ResumeUploadResponse(
        candidate_info=CandidateInfo(resume_ref=resume_ref, **info),
        resume_ref=resume_ref,
        text_length=len(text),
    )
