# core/formatters.py

# all pure text helpers
# must never import from models!

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_section_heading(number: int, title: str) -> str:
    return f"\n{number}. {title}:"


# === numeric formatters ===


def format_average(average: float) -> str:
    return f"{average:.2f}"
