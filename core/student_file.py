# core/student_file.py

"""
Reads and writes student lists as comma-delimited text files.

Each student occupies one line in the form `id,name,age`, with no header row and no quoting.
A comma inside a student's name therefore splits the record into too many fields, and the
line is skipped on reload.

Neither function raises on I/O problems. Failures are logged and reported through the
returned `Response`, leaving the caller to decide whether to continue.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from core.response import ErrorCode, Response
from models.student import Student

logger = logging.getLogger(__name__)

FIELD_DELIMITER = ","
FILE_ENCODING = "utf-8"

# optional sign, ASCII digits only
AGE_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")


# === line codec ===


def format_student_line(student: Student) -> str:
    return FIELD_DELIMITER.join((student.id, student.name, str(student.age)))


def parse_student_line(line: str) -> Student | None:
    """
    Parses a single `id,name,age` record.

    Args:
        line (str): One line of the file, with or without its line terminator.

    Returns:
        A `Student` if the line is well formed, otherwise None.

    Notes:
        - Lines without exactly three fields, with a non-integer age, or with an empty
          id or name are rejected without raising.
        - Ages must be ASCII digits with an optional sign; underscores and non-ASCII
          digits are rejected even though `int()` would accept them.
        - A line with an empty id or name is skipped like any other malformed line, and
          loading continues with the next line rather than stopping at it.
    """
    parts = line.rstrip("\r\n").split(FIELD_DELIMITER)

    if len(parts) != 3:
        return None

    student_id, name, age_str = parts

    if not AGE_PATTERN.fullmatch(age_str):
        return None

    try:
        age = int(age_str)
        return Student(student_id, name, age)

    except ValueError:
        return None


# === file operations ===


def save_students_to_file(students: Iterable[Student], file_path: str) -> Response:
    """
    Writes a list of students to disk, one `id,name,age` line each.

    Args:
        students (Iterable[Student]): The students to write, in order.
        file_path (str): The destination file, overwritten if it exists.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if every student was written.
                - False if the file could not be opened or written.
            - detail (str | None):
                - A human-readable summary of the result.
            - error (ErrorCode | str | None):
                - `ErrorCode.IO_ERROR` if an OSError was raised.
            - status_code (int | None):
                - 200 on success
                - 400 on failure
            - data (dict | None): Payload with the following keys:
                - On success:
                    - "path" (str): The path written to.
                    - "count" (int): The number of students written.
                - On failure:
                    - None

    Notes:
        - Writes are not transactional; a failure part way through leaves a partial file.
    """
    count = 0

    try:
        with open(file_path, "w", encoding=FILE_ENCODING, newline="\n") as f:
            for student in students:
                f.write(format_student_line(student) + "\n")
                count += 1

    except OSError as e:
        logger.warning("Failed to save students to %s: %s", file_path, e)

        return Response.fail(
            detail=f"Failed to write student data to disk: {e}",
            error=ErrorCode.IO_ERROR,
        )

    else:
        logger.debug("Saved %d students to %s", count, file_path)

        return Response.succeed(
            detail=f"{count} students saved to {file_path}.",
            data={
                "path": file_path,
                "count": count,
            },
        )


def load_students_from_file(file_path: str) -> Response:
    """
    Reads students from an `id,name,age` text file.

    Args:
        file_path (str): The file to read.

    Returns:
        Response: A structured response with the following contract:
            - success (bool):
                - True if the whole file was read, even if some lines were skipped.
                - False if the file could not be opened or read.
            - detail (str | None):
                - On failure, a human-readable description of the error.
                - On success, None.
            - error (ErrorCode | str | None):
                - `ErrorCode.IO_ERROR` if an OSError or UnicodeDecodeError was raised.
            - status_code (int | None):
                - 200 on success
                - 400 on failure
            - data (dict): Payload with the following keys:
                - "students" (list[Student]): The parsed students in file order. On failure,
                  whatever was parsed before the error (possibly empty).

    Notes:
        - Malformed lines are skipped silently and are not counted or logged.
        - This method never raises.
    """
    students: list[Student] = []

    try:
        with open(file_path, "r", encoding=FILE_ENCODING, newline="") as f:
            for line in f:
                student = parse_student_line(line)

                if student is not None:
                    students.append(student)

    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Failed to load students from %s: %s", file_path, e)

        return Response.fail(
            detail=f"Failed to read student data from disk: {e}",
            error=ErrorCode.IO_ERROR,
            data={
                "students": students,
            },
        )

    else:
        logger.debug("Loaded %d students from %s", len(students), file_path)

        return Response.succeed(
            data={
                "students": students,
            },
        )
