# models/student_store.py

"""
In-memory repository of `Student` records.

Students are kept in insertion order. The store does not enforce unique IDs: two students
sharing an ID may coexist, and `remove()` deletes only the first match.

All accessors return new lists so callers cannot mutate the store's internal state.
"""

from __future__ import annotations

from typing import Callable

from models.student import Student


class StudentStore:

    def __init__(self):
        self._students: list[Student] = []

    # === data accessors ===

    def get_all(self) -> list[Student]:
        return list(self._students)

    def find(self, predicate: Callable[[Student], bool]) -> list[Student]:
        """
        Returns every student matching a caller-supplied predicate.

        Args:
            predicate (Callable[[Student], bool]): Filter function applied to each student.

        Returns:
            A new list of matching students, in insertion order (may be empty).
        """
        return [student for student in self._students if predicate(student)]

    def get_students_by_age(self, min_age: int, max_age: int) -> list[Student]:
        """
        Returns students whose age falls within `[min_age, max_age]`, inclusive at both ends.

        Notes:
            - Yields an empty list when `min_age > max_age`; no error is raised.
        """
        return self.find(lambda student: min_age <= student.age <= max_age)

    # === data manipulators ===

    def add(self, student: Student) -> None:
        """
        Appends a `Student` to the end of the store.

        Raises:
            ValueError: If `student` is None.
        """
        if student is None:
            raise ValueError("Invalid input. Student cannot be None.")

        self._students.append(student)

    def remove(self, student: Student) -> bool:
        """
        Removes the first stored student equal to `student` (compared by ID).

        Returns:
            True if a student was removed, False if no match was found.
        """
        try:
            self._students.remove(student)

        except ValueError:
            return False

        else:
            return True

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, student: object) -> bool:
        return student in self._students

    def __repr__(self) -> str:
        return f"StudentStore({len(self._students)} students)"
