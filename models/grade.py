# models/grade.py

"""
Letter grades and the fixed thresholds used to derive them from an average.
"""

from enum import Enum


class Grade(Enum):
    # value is the inclusive lower bound of the band
    A = 90
    B = 80
    C = 70
    D = 60
    F = 0


# ordered highest-first
GRADE_THRESHOLDS: tuple[tuple[float, Grade], ...] = (
    (90.0, Grade.A),
    (80.0, Grade.B),
    (70.0, Grade.C),
    (60.0, Grade.D),
)


def letter_grade(score: float) -> Grade:
    """
    Maps a numeric average to a letter grade.

    Args:
        score (float): The average to classify.

    Returns:
        The first `Grade` whose threshold is less than or equal to `score`, or `Grade.F`
        if the score falls below every threshold.
    """
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return Grade.F
