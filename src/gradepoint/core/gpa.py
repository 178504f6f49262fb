from typing import Iterable, Optional

from gradepoint.core.grades import to_grade_point
from gradepoint.core.models import Course, Roster


def _maybe_round(value: float, round_to: Optional[int]) -> float:
    return value if round_to is None else round(value, round_to)


def compute_period_average(courses: Iterable[Course], *, round_to: Optional[int] = None) -> float:
    """
    GPA = Σ(credits * grade_point) / Σ(credits)
    An empty course list averages to 0.0.
    """
    weighted_sum = 0.0
    total_credits = 0.0

    for course in courses:
        weighted_sum += course.credits * to_grade_point(course.grade)
        total_credits += course.credits

    if total_credits == 0:
        return 0.0

    return _maybe_round(weighted_sum / total_credits, round_to)


def compute_overall_average(roster: Roster, *, round_to: Optional[int] = None) -> float:
    """Credit-weighted average over every course in the roster."""
    return compute_period_average(roster.all_courses(), round_to=round_to)


def compute_cumulative_average(roster: Roster, *, round_to: Optional[int] = None) -> float:
    """
    CGPA = mean of the per-period averages, counting only periods that hold
    at least one course. Periods are not weighted by their credit load.
    """
    period_averages = [compute_period_average(p.courses) for p in roster if not p.is_empty]
    if not period_averages:
        return 0.0
    return _maybe_round(sum(period_averages) / len(period_averages), round_to)


def compute_level_average(roster: Roster, level: str, *, round_to: Optional[int] = None) -> float:
    courses = [c for p in roster.periods_in_level(level) for c in p.courses]
    return compute_period_average(courses, round_to=round_to)
