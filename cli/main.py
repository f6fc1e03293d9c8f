# cli/main.py

"""
Demo driver for the student score bookkeeping program.

Populates a `StudentStore` and `ScoreStore` with sample data, prints the results of each
query, and round-trips the student list through the flat-file codec.
"""

import logging
import os

import cli.formatters as formatters
import cli.menu_helpers as helpers
import core.formatters as core_formatters
from cli.path_utils import resolve_students_path
from core.response import ErrorCode, Response
from core.student_file import load_students_from_file, save_students_to_file
from models.score import Score
from models.score_store import ScoreStore
from models.student import Student
from models.student_store import StudentStore

LOG_LEVEL_ENV_VAR = "STUDENT_SCORES_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

SAMPLE_STUDENTS = [
    ("2021001", "Zhang San", 20),
    ("2021002", "Li Si", 19),
    ("2021003", "Wang Wu", 21),
]

SAMPLE_SCORES = [
    ("2021001", "Math", 95.5),
    ("2021001", "English", 87.0),
    ("2021002", "Math", 78.5),
    ("2021002", "English", 85.5),
    ("2021003", "Math", 88.0),
    ("2021003", "English", 92.0),
]


def configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").strip().upper()
    level = logging.getLevelName(level_name)

    # getLevelName returns a "Level <name>" string for unknown names
    if not isinstance(level, int):
        level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT)


def run_demo(file_path: str | None = None) -> None:
    """
    Runs the fixed demo transcript and prints it to standard output.

    Args:
        file_path (str | None): Where to save and reload the students. Defaults to the path
            resolved by `resolve_students_path()`.

    Notes:
        - A ValueError from the stores or models ends the run after printing the message.
        - File failures are printed and the run continues.
    """
    print(core_formatters.format_banner_text("STUDENT SCORE MANAGER"))

    student_store = StudentStore()
    score_store = ScoreStore()

    try:
        print(core_formatters.format_section_heading(1, "Adding students"))
        for student_id, name, age in SAMPLE_STUDENTS:
            student_store.add(Student(student_id, name, age))
        print("... Students added.")

        print(core_formatters.format_section_heading(2, "Adding scores"))
        for student_id, subject, points in SAMPLE_SCORES:
            score_store.add_score(student_id, Score(subject, points))
        print("... Scores added.")

        print(core_formatters.format_section_heading(3, "Students aged 19 to 20"))
        helpers.display_results(
            student_store.get_students_by_age(19, 20), formatters.format_student_oneline
        )

        print(core_formatters.format_section_heading(4, "Score report"))
        all_students = student_store.get_all()
        for student in all_students:
            average = score_store.calculate_average(student.id)
            grade = score_store.get_grade(average)
            print(formatters.format_student_report(student, average, grade))
            helpers.display_results(
                score_store.get_student_scores(student.id),
                formatters.format_score_oneline,
            )

        print(core_formatters.format_section_heading(5, "Top student by average"))
        top_students = score_store.get_top_students(1)
        helpers.display_results(
            enumerate(top_students, start=1),
            lambda entry: formatters.format_ranking_entry(entry[0], *entry[1]),
        )

        print(core_formatters.format_section_heading(6, "Saving and reloading students"))
        path = file_path or resolve_students_path()

        save_response = save_students_to_file(all_students, path)
        if save_response.success:
            print(f"... {save_response.detail}")
        else:
            helpers.display_response_failure(save_response)

        load_response = load_students_from_file(path)
        if not load_response.success:
            helpers.display_response_failure(load_response)

        print("... Students loaded from file:")
        helpers.display_results(
            load_response.data.get("students", []), formatters.format_student_oneline
        )

    except ValueError as e:
        helpers.display_response_failure(
            Response.fail(detail=str(e), error=ErrorCode.INVALID_INPUT)
        )

    print(f"\n{core_formatters.format_banner_text('Demo Complete')}\n")


def main() -> None:
    configure_logging()
    run_demo()


if __name__ == "__main__":
    main()
