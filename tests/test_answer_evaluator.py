"""
Tests for the heuristic answer evaluator.
"""
import pytest

from interview_sim.schemas.interview import Evaluation, Question
from interview_sim.services import answer_evaluator
from interview_sim.services.answer_evaluator import (
    answer_feedback,
    build_summary,
    evaluate_answers,
    score_answer,
)
from interview_sim.services.question_bank import get_questions

EASY_GOOD = "JSX lets a React component describe UI; props flow in while state lives inside."
MEDIUM_GOOD = "Watch the lifecycle, measure performance, apply optimization with useEffect cleanup and memo."
HARD_GOOD = "Good architecture uses a custom hook, redux or context, and plans for scale from day one."


@pytest.mark.parametrize("length,expected", [
    (0, 0),
    (1, 1),
    (20, 1),
    (21, 2),
    (50, 2),
    (51, 3),
    (500, 3),
])
def test_length_bonus_thresholds(length, expected):
    """Test the length bands with an answer containing no keywords."""
    assert score_answer("a" * length, "easy") == expected


def test_sixty_char_easy_answer_with_one_keyword_scores_four():
    """Test 3 points for length plus 1 for a single keyword."""
    answer = "jsx " + "a" * 56
    assert len(answer) == 60

    assert score_answer(answer, "easy") == 4


def test_keywords_are_case_insensitive():
    """Test keyword matching ignores case on both sides."""
    assert score_answer("USEEFFECT and Memo", "medium") == 1 + 2


def test_keyword_sets_differ_by_difficulty():
    """Test an easy keyword earns nothing on a hard question."""
    assert score_answer("props", "easy") == 2
    assert score_answer("props", "hard") == 1


def test_score_is_capped_at_ten(monkeypatch):
    """Test the per-question score never exceeds 10."""
    monkeypatch.setitem(answer_evaluator.KEYWORDS, "hard", tuple("abcdefghij"))

    assert score_answer("abcdefghij" * 10, "hard") == 10


def test_none_answer_counts_as_empty():
    """Test None is scored like an empty string."""
    assert score_answer(None, "easy") == 0


@pytest.mark.parametrize("score,prefix", [
    (10, "Excellent"),
    (8, "Excellent"),
    (7, "Good"),
    (5, "Good"),
    (4, "Adequate"),
    (3, "Adequate"),
    (2, "Limited"),
    (0, "Limited"),
])
def test_feedback_bands(score, prefix):
    """Test feedback band boundaries and difficulty wording."""
    feedback = answer_feedback(score, "medium")

    assert feedback.startswith(prefix)
    assert "medium question" in feedback


def test_all_empty_answers_score_zero():
    """Test six empty answers: 0%, all Limited, not recommended."""
    questions = get_questions()

    result = evaluate_answers(questions, [""] * 6)

    assert result.score == 0
    assert [e.question_id for e in result.evaluations] == [1, 2, 3, 4, 5, 6]
    assert all(e.score == 0 for e in result.evaluations)
    assert all(e.feedback.startswith("Limited") for e in result.evaluations)
    assert result.summary == (
        "The candidate scored 0% overall. "
        "This result suggests limited React and Node.js knowledge. "
        "There are 6 areas that could use improvement. "
        "Overall recommendation: Not recommended for current React/Node.js positions."
    )


def test_strong_answers_summary():
    """Test a strong interview: 83%, six strengths, next stage."""
    questions = get_questions()
    answers = [EASY_GOOD, EASY_GOOD, MEDIUM_GOOD, MEDIUM_GOOD, HARD_GOOD, HARD_GOOD]

    result = evaluate_answers(questions, answers)

    assert [e.score for e in result.evaluations] == [8, 8, 8, 8, 9, 9]
    assert result.score == 83
    assert result.summary == (
        "The candidate scored 83% overall. "
        "This is an excellent result, indicating strong React and Node.js knowledge. "
        "The candidate showed strength in 6 areas. "
        "Overall recommendation: Consider for next interview stage."
    )


def test_missing_answers_count_as_empty():
    """Test a short answers list does not fail."""
    questions = get_questions()

    result = evaluate_answers(questions, [EASY_GOOD])

    assert len(result.evaluations) == 6
    assert result.evaluations[0].score == 8
    assert all(e.score == 0 for e in result.evaluations[1:])
    assert result.score == 13


def test_percentage_rounds_half_up():
    """Test 2.5% rounds to 3 rather than to the even neighbour."""
    questions = [Question(id=i, text="q", difficulty="easy", time_limit=20) for i in range(4)]

    result = evaluate_answers(questions, ["a", "", "", ""])

    assert result.score == 3


def test_no_questions_scores_zero():
    """Test an empty interview does not divide by zero."""
    assert evaluate_answers([], []).score == 0


def test_evaluation_is_deterministic():
    """Test identical inputs produce identical outputs."""
    questions = get_questions()
    answers = [EASY_GOOD, "", "memo", "No answer provided", HARD_GOOD, "redux"]

    assert evaluate_answers(questions, answers) == evaluate_answers(questions, answers)


def test_summary_singular_wording():
    """Test singular phrasing for one strength and one weakness."""
    evaluations = [
        Evaluation(question_id=1, score=7, feedback=""),
        Evaluation(question_id=2, score=3, feedback=""),
        Evaluation(question_id=3, score=5, feedback=""),
    ]

    summary = build_summary(55, evaluations)

    assert "This is an average result" in summary
    assert "strength in 1 area." in summary
    assert "There is 1 area that could use improvement." in summary
    assert summary.endswith("May be suitable for junior positions or with additional training.")


@pytest.mark.parametrize("percentage,band,recommendation", [
    (80, "excellent result", "Consider for next interview stage."),
    (70, "good result", "Consider for next interview stage."),
    (60, "good result", "May be suitable"),
    (50, "average result", "May be suitable"),
    (40, "average result", "Not recommended"),
    (39, "limited React", "Not recommended"),
])
def test_summary_bands(percentage, band, recommendation):
    """Test result band and recommendation thresholds."""
    summary = build_summary(percentage, [])

    assert band in summary
    assert recommendation in summary.split("Overall recommendation: ")[1]
    assert "strength" not in summary
    assert "improvement" not in summary
