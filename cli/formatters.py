# cli/formatters.py

import core.formatters as core_formatters
from models.grade import Grade
from models.score import Score
from models.student import Student


# === Student formatters ===


def format_student_oneline(student: Student) -> str:
    return f"{student.name:<20} | id: {student.id} | age: {student.age}"


def format_student_report(student: Student, average: float, grade: Grade) -> str:
    return (
        f"{format_student_oneline(student)} | "
        f"average: {core_formatters.format_average(average)} | grade: {grade.name}"
    )


# === Score formatters ===


def format_score_oneline(score: Score) -> str:
    return f"... {score.subject:<20} {score.points}"


# === Ranking formatters ===


def format_ranking_entry(rank: int, student_id: str, average: float) -> str:
    return f"#{rank} id: {student_id} | average: {core_formatters.format_average(average)}"
