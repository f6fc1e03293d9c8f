# models/score.py

"""
Represents a single recorded score: a subject and the points earned in it.

Scores are immutable and carry no reference to the student they belong to; the
`ScoreStore` associates them with a student ID.
"""

from __future__ import annotations

from typing import Any


class Score:

    def __init__(self, subject: str, points: float):
        self._subject: str = Score.validate_subject_input(subject)
        self._points: float = Score.validate_points_input(points)

    # === properties ===

    @property
    def subject(self) -> str:
        return self._subject

    @property
    def points(self) -> float:
        return self._points

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "subject": self._subject,
            "points": self._points,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Score:
        return cls(
            subject=data["subject"],
            points=data["points"],
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Score({self._subject}, {self._points})"

    def __str__(self) -> str:
        return f"SCORE: subject: {self._subject}, points: {self._points}"

    # === data validators ===

    @staticmethod
    def validate_subject_input(subject: Any) -> str:
        if subject is None or subject == "":
            raise ValueError("Invalid input. Score subject cannot be empty.")
        return subject

    @staticmethod
    def validate_points_input(points: Any) -> float:
        """
        Normalizes input for a `Score` points value.

        Args:
            points (Any): The input value to cast.

        Returns:
            The points value as a float.

        Raises:
            TypeError: If the input cannot be cast to float.

        Notes:
            - No range checks are applied; negative or very large values are stored as given.
        """
        try:
            return float(points)

        except (TypeError, ValueError):
            raise TypeError("Invalid input. Score points must be a number.") from None
