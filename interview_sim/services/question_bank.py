"""
Fixed question bank for the React/Node.js interview.

Two easy (20s), two medium (60s) and two hard (120s) questions, always in
that order. Anything that returns the same shape can stand in for
get_questions (see interview_service.start_interview).
"""
from typing import List

from interview_sim.schemas.interview import Question

TIME_LIMITS = {
    "easy": 20,
    "medium": 60,
    "hard": 120,
}

_QUESTION_BANK = (
    (1, "What is JSX in React?", "easy"),
    (2, "Explain the difference between state and props in React.", "easy"),
    (3, "Describe the React component lifecycle methods and their purpose.", "medium"),
    (4, "How would you optimize the performance of a React application?", "medium"),
    (5, "Explain how you would implement a custom hook for form validation in React.", "hard"),
    (
        6,
        "Describe how you would architect a large-scale React application with Redux, "
        "including folder structure and state management strategies.",
        "hard",
    ),
)


def get_questions() -> List[Question]:
    """Return the six interview questions in asking order."""
    return [
        Question(id=qid, text=text, difficulty=difficulty, time_limit=TIME_LIMITS[difficulty])
        for qid, text, difficulty in _QUESTION_BANK
    ]
