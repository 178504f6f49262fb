from typing import Dict, Tuple


GRADE_POINTS: Dict[str, float] = {
    "A": 5.0,
    "B": 4.0,
    "C": 3.0,
    "D": 2.0,
    "E": 1.0,
    "F": 0.0,
}

GRADE_SYMBOLS: Tuple[str, ...] = tuple(GRADE_POINTS)


def normalize_grade(letter_grade: str) -> str:
    symbol = (letter_grade or "").strip().upper()
    if symbol not in GRADE_POINTS:
        raise ValueError(f"Unsupported letter grade: {letter_grade!r}. Use one of {', '.join(GRADE_SYMBOLS)}.")
    return symbol


def to_grade_point(letter_grade: str) -> float:
    return GRADE_POINTS[normalize_grade(letter_grade)]
