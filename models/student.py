# models/student.py

"""
Represents a student tracked by the score bookkeeping program.

Stores the identifying information for a student: a unique ID, a display name, and an age.
Students are immutable once constructed; all fields are exposed through read-only properties.

Includes functionality for:
- Validating required text fields on construction
- Comparing and ordering students by ID alone
- Serializing to and from JSON-compatible dictionaries

Notes:
- Equality, hashing, and ordering consider only `id`. Two students with the same ID but
  different names or ages compare equal.
- ID ordering is ordinal (code point) string comparison.
"""

from __future__ import annotations

from typing import Any


class Student:

    def __init__(self, id: str, name: str, age: int):
        self._id: str = Student.validate_required_text(id, "id")
        self._name: str = Student.validate_required_text(name, "name")
        self._age: int = age

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def age(self) -> int:
        return self._age

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "id": self._id,
            "name": self._name,
            "age": self._age,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Student:
        return cls(
            id=data["id"],
            name=data["name"],
            age=data["age"],
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._name}, {self._age})"

    def __str__(self) -> str:
        return f"STUDENT: id: {self._id}, name: {self._name}, age: {self._age}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self._id < other._id

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self._id <= other._id

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self._id > other._id

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self._id >= other._id

    # === data validators ===

    @staticmethod
    def validate_required_text(value: Any, field: str) -> str:
        """
        Validates that a required text field was provided and is not empty.

        Args:
            value (Any): The input value to validate.
            field (str): The field name, used in the error message.

        Returns:
            The value, unchanged.

        Raises:
            ValueError: If the value is None or an empty string.

        Notes:
            - Whitespace is not stripped; a string of spaces is accepted as-is.
        """
        if value is None or value == "":
            raise ValueError(f"Invalid input. Student {field} cannot be empty.")
        return value
