# tests/conftest.py

import pytest

from models.score import Score
from models.score_store import ScoreStore
from models.student import Student
from models.student_store import StudentStore


@pytest.fixture
def sample_student():
    return Student("2021001", "Zhang San", 20)


@pytest.fixture
def sample_students():
    return [
        Student("2021001", "Zhang San", 20),
        Student("2021002", "Li Si", 19),
        Student("2021003", "Wang Wu", 21),
    ]


@pytest.fixture
def sample_student_store(sample_students):
    store = StudentStore()
    for student in sample_students:
        store.add(student)
    return store


@pytest.fixture
def sample_score():
    return Score("Math", 95.5)


@pytest.fixture
def sample_score_store():
    store = ScoreStore()
    store.add_score("2021001", Score("Math", 95.5))
    store.add_score("2021001", Score("English", 87.0))
    store.add_score("2021002", Score("Math", 78.5))
    store.add_score("2021002", Score("English", 85.5))
    store.add_score("2021003", Score("Math", 88.0))
    store.add_score("2021003", Score("English", 92.0))
    return store
