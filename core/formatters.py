# core/formatters.py

# all pure text utilities
# must never import from models!

BANNER_WIDTH = 40
MARKS_DECIMALS = 2


def format_banner_text(title: str, width: int = BANNER_WIDTH) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_marks(marks: float, decimals: int = MARKS_DECIMALS) -> str:
    return f"{marks:.{decimals}f}"


def is_blank(text: str | None) -> bool:
    return text is None or (isinstance(text, str) and text.strip() == "")
