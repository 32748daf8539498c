"""
Heuristic answer evaluator.

Scores each answer from its length and the difficulty-specific keywords it
mentions, then rolls the per-question scores into a percentage and a
recruiter-facing summary.

The thresholds, keyword sets and wording below are policy constants. They
stand in for a real evaluation model and are kept stable so that scores
stay comparable across candidates.
"""
import math
from typing import Dict, List, Optional, Sequence, Tuple

from interview_sim.schemas.interview import Evaluation, EvaluationResult, Question

MAX_QUESTION_SCORE = 10

# (exclusive lower bound on answer length, points)
LENGTH_BONUSES: Tuple[Tuple[int, int], ...] = (
    (50, 3),
    (20, 2),
    (0, 1),
)

KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "easy": ("react", "component", "jsx", "props", "state"),
    "medium": ("lifecycle", "performance", "optimization", "useEffect", "memo"),
    "hard": ("architecture", "custom", "hook", "redux", "context", "scale"),
}

FEEDBACK_BANDS = (
    (8, "Excellent answer for a {difficulty} question. Comprehensive and well-articulated."),
    (5, "Good answer for a {difficulty} question. Covers the main points but could be more detailed."),
    (3, "Adequate answer for a {difficulty} question. Basic understanding demonstrated."),
)
FEEDBACK_FALLBACK = "Limited answer for a {difficulty} question. Consider reviewing this topic."

RESULT_BANDS = (
    (80, "This is an excellent result, indicating strong React and Node.js knowledge."),
    (60, "This is a good result, showing solid understanding of React and Node.js concepts."),
    (40, "This is an average result, with basic React and Node.js knowledge demonstrated."),
)
RESULT_FALLBACK = "This result suggests limited React and Node.js knowledge."

RECOMMENDATIONS = (
    (70, "Consider for next interview stage."),
    (50, "May be suitable for junior positions or with additional training."),
)
RECOMMENDATION_FALLBACK = "Not recommended for current React/Node.js positions."

STRENGTH_THRESHOLD = 7
WEAKNESS_THRESHOLD = 3


def _pick_band(value: int, bands, fallback: str) -> str:
    for threshold, text in bands:
        if value >= threshold:
            return text
    return fallback


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_answer(answer: Optional[str], difficulty: str) -> int:
    """
    Score one answer on a 0-10 scale.

    Args:
        answer: Candidate answer (None is treated as empty)
        difficulty: Difficulty band of the question

    Returns:
        Length bonus plus one point per keyword hit, capped at 10
    """
    answer = answer or ""
    score = 0

    for lower_bound, points in LENGTH_BONUSES:
        if len(answer) > lower_bound:
            score += points
            break

    lowered = answer.lower()
    for keyword in KEYWORDS.get(difficulty, ()):
        if keyword.lower() in lowered:
            score += 1

    return min(score, MAX_QUESTION_SCORE)


def answer_feedback(score: int, difficulty: str) -> str:
    """Feedback sentence for a per-question score."""
    return _pick_band(score, FEEDBACK_BANDS, FEEDBACK_FALLBACK).format(difficulty=difficulty)


def build_summary(percentage: int, evaluations: Sequence[Evaluation]) -> str:
    """Compose the overall summary paragraph."""
    strengths = sum(1 for e in evaluations if e.score >= STRENGTH_THRESHOLD)
    weaknesses = sum(1 for e in evaluations if e.score <= WEAKNESS_THRESHOLD)

    parts = [
        f"The candidate scored {percentage}% overall.",
        _pick_band(percentage, RESULT_BANDS, RESULT_FALLBACK),
    ]

    if strengths > 0:
        plural = "s" if strengths > 1 else ""
        parts.append(f"The candidate showed strength in {strengths} area{plural}.")

    if weaknesses > 0:
        verb, plural = ("are", "s") if weaknesses > 1 else ("is", "")
        parts.append(f"There {verb} {weaknesses} area{plural} that could use improvement.")

    parts.append("Overall recommendation: " + _pick_band(percentage, RECOMMENDATIONS, RECOMMENDATION_FALLBACK))
    return " ".join(parts)


def evaluate_answers(questions: Sequence[Question], answers: Sequence[Optional[str]]) -> EvaluationResult:
    """
    Evaluate a full interview.

    Pure function of its inputs. Answers missing from the end of the
    list count as empty.

    Args:
        questions: Questions in asking order
        answers: Answers aligned with questions

    Returns:
        EvaluationResult with the percentage score, one Evaluation per
        question and the summary text
    """
    evaluations: List[Evaluation] = []
    total = 0

    for index, question in enumerate(questions):
        answer = answers[index] if index < len(answers) else ""
        score = score_answer(answer, question.difficulty)
        total += score
        evaluations.append(Evaluation(
            question_id=question.id,
            score=score,
            feedback=answer_feedback(score, question.difficulty),
        ))

    max_score = len(questions) * MAX_QUESTION_SCORE
    percentage = round_half_up(total * 100 / max_score) if max_score else 0

    return EvaluationResult(
        score=percentage,
        evaluations=evaluations,
        summary=build_summary(percentage, evaluations),
    )
