# models/score_store.py

"""
In-memory repository of `Score` records, keyed by student ID.

Each student ID maps to the list of that student's scores, in the order they were recorded.
An ID with no scores is absent from the mapping rather than mapped to an empty list; entries
are created on the first `add_score()` and never deleted.

Provides the aggregate queries used for reporting: per-student averages, letter grades,
and a ranking of students by average.

Notes:
- Every accessor returns newly built lists and dictionaries. `Score` objects are immutable,
  so sharing them between the store and its callers is safe.
- Ranking ties keep the order in which student IDs were first recorded.
"""

from __future__ import annotations

from models.grade import Grade, letter_grade
from models.score import Score


class ScoreStore:

    def __init__(self):
        self._scores: dict[str, list[Score]] = {}

    # === data accessors ===

    def get_student_scores(self, student_id: str) -> list[Score]:
        return list(self._scores.get(student_id, []))

    def get_all_scores(self) -> dict[str, list[Score]]:
        return {
            student_id: list(scores) for student_id, scores in self._scores.items()
        }

    # --- aggregate queries ---

    def calculate_average(self, student_id: str) -> float:
        """
        Computes the unweighted mean of a student's recorded points.

        Args:
            student_id (str): The student to average.

        Returns:
            The arithmetic mean of the student's points, or 0.0 if no scores are recorded.
        """
        scores = self._scores.get(student_id)

        if not scores:
            return 0.0

        return sum(score.points for score in scores) / len(scores)

    def get_grade(self, score: float) -> Grade:
        return letter_grade(score)

    def get_top_students(self, count: int) -> list[tuple[str, float]]:
        """
        Ranks every student with at least one score by average, highest first.

        Args:
            count (int): The maximum number of entries to return.

        Returns:
            A list of `(student_id, average)` pairs, at most `count` long. Empty if `count <= 0`.

        Notes:
            - `count` larger than the number of scored students returns all of them.
        """
        if count <= 0:
            return []

        averages = [
            (student_id, self.calculate_average(student_id))
            for student_id in self._scores
        ]
        averages.sort(key=lambda entry: entry[1], reverse=True)

        return averages[:count]

    # === data manipulators ===

    def add_score(self, student_id: str, score: Score) -> None:
        """
        Records a score for a student, creating the student's entry if needed.

        Raises:
            ValueError: If `student_id` is empty or `score` is None.
        """
        if not student_id:
            raise ValueError("Invalid input. Student id cannot be empty.")

        if score is None:
            raise ValueError("Invalid input. Score cannot be None.")

        self._scores.setdefault(student_id, []).append(score)

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._scores)

    def __repr__(self) -> str:
        return f"ScoreStore({len(self._scores)} students)"
