# tests/test_student_file.py

import logging

from core.response import ErrorCode
from core.student_file import (
    format_student_line,
    load_students_from_file,
    parse_student_line,
    save_students_to_file,
)
from models.student import Student


def test_format_student_line(sample_student):
    assert format_student_line(sample_student) == "2021001,Zhang San,20"


def test_parse_student_line():
    student = parse_student_line("2021002,Li Si,19\n")

    assert student.id == "2021002"
    assert student.name == "Li Si"
    assert student.age == 19


def test_parse_student_line_rejects_malformed():
    assert parse_student_line("2021002,Li Si\n") is None
    assert parse_student_line("2021002,Li Si,nineteen\n") is None
    assert parse_student_line("2021002,Li, Si,19\n") is None
    assert parse_student_line(",Li Si,19\n") is None
    assert parse_student_line("\n") is None


def test_save_writes_one_line_per_student(tmp_path, sample_students):
    path = tmp_path / "students.csv"

    response = save_students_to_file(sample_students, str(path))

    assert response.success
    assert response.data["count"] == 3
    assert path.read_text(encoding="utf-8") == (
        "2021001,Zhang San,20\n2021002,Li Si,19\n2021003,Wang Wu,21\n"
    )


def test_save_and_load_round_trip(tmp_path, sample_students):
    path = str(tmp_path / "students.csv")

    save_students_to_file(sample_students, path)
    response = load_students_from_file(path)

    assert response.success
    loaded = response.data["students"]
    assert [(s.id, s.name, s.age) for s in loaded] == [
        (s.id, s.name, s.age) for s in sample_students
    ]


def test_round_trip_non_ascii_names(tmp_path):
    path = str(tmp_path / "students.csv")
    students = [Student("2021001", "张三", 20), Student("2021002", "李四", 19)]

    save_students_to_file(students, path)
    loaded = load_students_from_file(path).data["students"]

    assert [s.name for s in loaded] == ["张三", "李四"]


def test_save_empty_list(tmp_path):
    path = tmp_path / "students.csv"

    response = save_students_to_file([], str(path))

    assert response.success
    assert path.read_text(encoding="utf-8") == ""


def test_load_skips_malformed_lines(tmp_path):
    path = tmp_path / "students.csv"
    path.write_text(
        "2021001,Zhang San\n2021002,Li Si,abc\n2021003,Wang Wu,21\n",
        encoding="utf-8",
    )

    response = load_students_from_file(str(path))

    assert response.success
    loaded = response.data["students"]
    assert len(loaded) == 1
    assert loaded[0].id == "2021003"
    assert loaded[0].name == "Wang Wu"
    assert loaded[0].age == 21


def test_load_name_with_comma_is_skipped(tmp_path):
    path = str(tmp_path / "students.csv")

    save_students_to_file([Student("2021001", "San, Zhang", 20)], path)

    assert load_students_from_file(path).data["students"] == []


def test_load_missing_file_fails_without_raising(tmp_path, caplog):
    path = str(tmp_path / "missing.csv")

    with caplog.at_level(logging.WARNING, logger="core.student_file"):
        response = load_students_from_file(path)

    assert not response.success
    assert response.error is ErrorCode.IO_ERROR
    assert response.data["students"] == []
    assert "Failed to load students" in caplog.text


def test_save_to_missing_directory_fails_without_raising(tmp_path, caplog, sample_students):
    path = str(tmp_path / "no_such_dir" / "students.csv")

    with caplog.at_level(logging.WARNING, logger="core.student_file"):
        response = save_students_to_file(sample_students, path)

    assert not response.success
    assert response.error is ErrorCode.IO_ERROR
    assert "Failed to save students" in caplog.text


def test_load_undecodable_file_keeps_students_read_before_failure(tmp_path):
    path = tmp_path / "students.csv"
    good_lines = "".join(f"{2021000 + i},Student {i},20\n" for i in range(2000))
    path.write_bytes(good_lines.encode("utf-8") + b"\xff\xfe\n")

    response = load_students_from_file(str(path))

    assert not response.success
    assert response.error is ErrorCode.IO_ERROR

    loaded = response.data["students"]
    assert 0 < len(loaded) <= 2000
    assert [s.id for s in loaded] == [str(2021000 + i) for i in range(len(loaded))]


def test_load_rejects_non_ascii_and_underscored_ages(tmp_path):
    path = tmp_path / "students.csv"
    path.write_text(
        "2021001,Zhang San,1_9\n2021002,Li Si,١٩\n2021003,Wang Wu,+21\n",
        encoding="utf-8",
    )

    loaded = load_students_from_file(str(path)).data["students"]

    assert [(s.id, s.age) for s in loaded] == [("2021003", 21)]


def test_parse_student_line_accepts_signed_age():
    assert parse_student_line("2021001,Zhang San,-1\n").age == -1


def test_load_continues_past_empty_id_or_name(tmp_path):
    path = tmp_path / "students.csv"
    path.write_text(
        "2021001,Zhang San,20\n,Li Si,19\n2021003,,21\n2021004,Zhao Liu,22\n",
        encoding="utf-8",
    )

    response = load_students_from_file(str(path))

    assert response.success
    assert [s.id for s in response.data["students"]] == ["2021001", "2021004"]
