# cli/path_utils.py

import os

DEFAULT_STUDENTS_FILENAME = "students.csv"
STUDENTS_FILE_ENV_VAR = "STUDENT_SCORES_FILE"


def resolve_students_path(user_input: str | None = None) -> str:
    """
    Resolves the path of the student data file.

    Args:
        user_input (str | None): An optional user-specified file path. If None or blank, the
            environment or default path is used.

    Returns:
        A path string, chosen in order of precedence:
            - `user_input`, stripped and user-expanded, if provided.
            - The `STUDENT_SCORES_FILE` environment variable, user-expanded, if set and non-empty.
            - `students.csv` in the current working directory.

    Notes:
        - Does not create or check the file; the codec reports missing or unwritable paths.
    """
    if user_input is not None and user_input.strip():
        return os.path.expanduser(user_input.strip())

    env_path = os.environ.get(STUDENTS_FILE_ENV_VAR, "").strip()
    if env_path:
        return os.path.expanduser(env_path)

    return os.path.join(os.getcwd(), DEFAULT_STUDENTS_FILENAME)
