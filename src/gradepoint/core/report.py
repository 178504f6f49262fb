from typing import List

from gradepoint.core.gpa import compute_cumulative_average, compute_overall_average, compute_period_average
from gradepoint.core.models import Course, Period, Roster


def format_credits(credits: float) -> str:
    return str(int(credits)) if credits.is_integer() else repr(credits)


def _course_line(course: Course) -> str:
    return f"{course.name}: {format_credits(course.credits)} credits, Grade: {course.grade}"


def _period_block(period: Period) -> str:
    lines = [period.name, f"GPA: {compute_period_average(period.courses):.2f}"]
    lines.extend(_course_line(c) for c in period.courses)
    return "\n".join(lines)


def serialize_report(roster: Roster, overall: float, cumulative: float) -> str:
    """
    Plain-text GPA report. Header with both averages, then one block per
    period that has courses, blocks separated by a blank line.
    """
    header = f"Overall GPA: {overall:.2f}\nCumulative GPA (CGPA): {cumulative:.2f}\n\n"
    blocks: List[str] = [_period_block(p) for p in roster if not p.is_empty]
    return header + "\n\n".join(blocks)


def build_report(roster: Roster) -> str:
    return serialize_report(roster, compute_overall_average(roster), compute_cumulative_average(roster))
