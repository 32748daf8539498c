"""
Candidate contact extraction from resume text.

Pulls name, email and phone out of the plain text produced by
resume_parser. Never raises; any field that cannot be found is returned
as an empty string.
"""
import logging
import re
from typing import Dict, Optional

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")

# Tried in order; the first pattern with any match wins
PHONE_PATTERNS = (
    re.compile(r"\(\d{3}\)\s*\d{3}[-.]?\d{4}"),        # (123) 456-7890
    re.compile(r"\d{3}[-.]\d{3}[-.]\d{4}"),            # 123-456-7890
    re.compile(r"\d{3}[.]\d{3}[.]\d{4}"),              # 123.456.7890
    re.compile(r"\d{3}\s\d{3}\s\d{4}"),                # 123 456 7890
    re.compile(r"[+]\d{1,3}\s\d{3}\s\d{3}\s\d{4}"),    # +1 123 456 7890
    re.compile(r"\d{10}"),                             # 1234567890
)

NAME_HEADER_LINES = 10
NON_NAME_WORDS = re.compile(r"\b(email|experience|skills|summary|professional|objective)\b", re.IGNORECASE)
DIGIT_OR_AT = re.compile(r"[@\d]")
ALL_CAPS_WORD = re.compile(r"^[A-Z][A-Z.'-]*$")
TITLE_CASE_WORD = re.compile(r"^[A-Z][a-z'`.-]+$")

NAME_RUN_PATTERNS = (
    re.compile(r"([A-Z][a-z]+(?:\s+[A-Z][a-z]+){1,3})"),
    re.compile(r"([A-Z]+(?:\s+[A-Z]+){1,3})"),
)
SECTION_HEADERS = re.compile(r"\b(EXPERIENCE|EDUCATION|SUMMARY|OBJECTIVE|SKILLS)\b", re.IGNORECASE)


def extract_email(text: str) -> str:
    match = EMAIL_PATTERN.search(text)
    return match.group(0) if match else ""


def extract_phone(text: str) -> str:
    for pattern in PHONE_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(0)
    return ""


def looks_like_name(line: str) -> bool:
    """
    Check whether a header line reads like a person's name.

    A name line has no digits or '@', none of the usual section words,
    and 2-4 words that are either all ALL-CAPS or all Title-Case.
    """
    if NON_NAME_WORDS.search(line):
        return False
    if DIGIT_OR_AT.search(line):
        return False

    words = line.split()
    if not 2 <= len(words) <= 4:
        return False

    all_caps = all(ALL_CAPS_WORD.match(w) for w in words)
    title_case = all(TITLE_CASE_WORD.match(w) for w in words)
    return all_caps or title_case


def name_from_email(email: str) -> str:
    """Turn 'jane.doe@x.com' into 'Jane Doe'."""
    local = email.split("@")[0]
    parts = [p[:1].upper() + p[1:] for p in re.split(r"[._]", local)]
    return " ".join(parts)


def extract_name(text: str, email: str = "") -> str:
    lines = [line.strip() for line in re.split(r"\r?\n", text)]
    header = [line for line in lines if line][:NAME_HEADER_LINES]

    for line in header:
        if looks_like_name(line):
            return re.sub(r"\s{2,}", " ", line).strip()

    for pattern in NAME_RUN_PATTERNS:
        match = pattern.search(text)
        if match:
            candidate = match.group(1).strip()
            if not SECTION_HEADERS.search(candidate):
                return candidate

    if email:
        return name_from_email(email)

    return ""


def extract_candidate_info(text: Optional[str]) -> Dict[str, str]:
    """
    Extract candidate contact details from resume text.

    Args:
        text: Full resume text; None or "" when extraction failed

    Returns:
        Dictionary with 'name', 'email' and 'phone' keys
    """
    if not text:
        return {"name": "", "email": "", "phone": ""}

    email = extract_email(text)
    phone = extract_phone(text)
    name = extract_name(text, email)

    logger.debug(
        f"Extracted resume fields: name={'yes' if name else 'no'}, "
        f"email={'yes' if email else 'no'}, phone={'yes' if phone else 'no'}"
    )

    return {"name": name, "email": email, "phone": phone}
