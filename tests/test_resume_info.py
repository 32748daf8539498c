"""
Tests for candidate contact extraction from resume text.
"""
import pytest

from interview_sim.services.resume_info import (
    extract_candidate_info,
    extract_phone,
    looks_like_name,
    name_from_email,
)


def test_extract_name_email_phone_from_header():
    """Test the canonical three-line resume header."""
    info = extract_candidate_info("John Doe\njohn.doe@example.com\n(123) 456-7890")

    assert info == {
        "name": "John Doe",
        "email": "john.doe@example.com",
        "phone": "(123) 456-7890",
    }


@pytest.mark.parametrize("text", ["", None])
def test_empty_text_returns_empty_fields(text):
    """Test missing text never raises and yields empty strings."""
    assert extract_candidate_info(text) == {"name": "", "email": "", "phone": ""}


def test_all_caps_name_line():
    """Test an ALL-CAPS header line is taken as the name."""
    info = extract_candidate_info("JANE SMITH\nSoftware Engineer at Acme\njane@smith.io")

    assert info["name"] == "JANE SMITH"
    assert info["email"] == "jane@smith.io"


def test_section_header_lines_are_skipped():
    """Test lines with section words do not count as names."""
    info = extract_candidate_info("Professional Summary\nMary Ann Lee\nmary@lee.dev")

    assert info["name"] == "Mary Ann Lee"


def test_repeated_spaces_in_name_collapse():
    """Test runs of spaces inside the name line are collapsed."""
    info = extract_candidate_info("  Grace   Hopper  \nNavy")

    assert info["name"] == "Grace Hopper"


def test_name_found_anywhere_when_header_has_none():
    """Test the fallback scan for a capitalised run in the body."""
    info = extract_candidate_info("contact: 555-123-4567\nI am Alan Turing from London")

    assert info["name"] == "Alan Turing"
    assert info["phone"] == "555-123-4567"


def test_name_from_email_when_only_section_words_are_capitalised():
    """Test section-header runs are rejected and the email local part is used."""
    text = "1. Education Details here\ncontact: mary_jones.dev@mail.com"

    info = extract_candidate_info(text)

    assert info["name"] == "Mary Jones Dev"
    assert info["email"] == "mary_jones.dev@mail.com"


def test_no_name_without_email():
    """Test the name stays empty when nothing qualifies and there is no email."""
    assert extract_candidate_info("1. Education Details here")["name"] == ""


def test_looks_like_name_rules():
    """Test the word-count and casing rules for name lines."""
    assert looks_like_name("Ada Lovelace")
    assert looks_like_name("Anne-marie O'hara")
    assert not looks_like_name("Ada")
    assert not looks_like_name("One Two Three Four Five")
    assert not looks_like_name("Ada lovelace")
    assert not looks_like_name("ADA Lovelace")
    assert not looks_like_name("Email Address")
    assert not looks_like_name("Ada Lovelace 1815")


def test_name_from_email_title_cases_segments():
    """Test dots and underscores split the local part."""
    assert name_from_email("first.middle_last@example.com") == "First Middle Last"


@pytest.mark.parametrize("text,expected", [
    ("Phone: (555) 123-4567", "(555) 123-4567"),
    ("Phone: (555)1234567", "(555)1234567"),
    ("Phone: 555-123-4567", "555-123-4567"),
    ("Phone: 555.123.4567", "555.123.4567"),
    ("Phone: 555 123 4567", "555 123 4567"),
    ("Phone: 5551234567", "5551234567"),
    ("No phone here", ""),
])
def test_phone_formats(text, expected):
    """Test each supported phone layout."""
    assert extract_phone(text) == expected


def test_phone_pattern_priority_beats_position():
    """Test an earlier pattern wins even when its match appears later in the text."""
    assert extract_phone("ref 1234567890 or (555) 123-4567") == "(555) 123-4567"


def test_international_number_matches_space_separated_pattern_first():
    """Test the space-separated pattern is tried before the international one."""
    assert extract_phone("+1 555 123 4567") == "555 123 4567"


def test_first_email_wins():
    """Test only the first email address is returned."""
    info = extract_candidate_info("Sam Rivers\nsam@first.com, sam@second.com")

    assert info["email"] == "sam@first.com"
