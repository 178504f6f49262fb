from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from gradepoint.core.errors import InvalidInputError, LayoutError, PeriodNotFoundError
from gradepoint.core.grades import normalize_grade
from gradepoint.core.models import (
    FLAT,
    LAYOUTS,
    LEVELS,
    NESTED,
    SEMESTERS,
    Course,
    Period,
    Roster,
    nested_period_id,
)

logger = logging.getLogger(__name__)

MAX_CREDITS = 1000


class CourseInput(BaseModel):
    """Raw form values for a new course. Credits may arrive as text."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    credits: float = Field(gt=0, le=MAX_CREDITS, allow_inf_nan=False)
    grade: str

    @field_validator("credits", mode="before")
    @classmethod
    def _strip_credits(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("Credits must be a number, not a boolean")
        return value.strip() if isinstance(value, str) else value

    @field_validator("grade")
    @classmethod
    def _known_grade(cls, value: str) -> str:
        return normalize_grade(value)


def parse_course_input(name: Any, credits: Any, grade: Any) -> CourseInput:
    try:
        return CourseInput(name=name, credits=credits, grade=grade)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = str(first["loc"][0]) if first.get("loc") else "course"
        raise InvalidInputError(field, first["msg"]) from exc


def build_roster(layout: str = FLAT) -> Roster:
    if layout == FLAT:
        return Roster(layout=FLAT, periods=(Period(id="1", name="Semester 1"),))
    if layout == NESTED:
        periods = tuple(
            Period(id=nested_period_id(level, semester), name=f"{level} - {semester}", level=level)
            for level in LEVELS
            for semester in SEMESTERS
        )
        return Roster(layout=NESTED, periods=periods)
    raise LayoutError(f"Unsupported layout: {layout!r}. Use one of {', '.join(LAYOUTS)}.")


def _replace_period(roster: Roster, period: Period) -> tuple[Period, ...]:
    return tuple(period if p.id == period.id else p for p in roster.periods)


def add_course(roster: Roster, period_ref: str, name: Any, credits: Any, grade: Any) -> Roster:
    period = roster.find_period(period_ref)
    if period is None:
        raise PeriodNotFoundError(period_ref)

    data = parse_course_input(name, credits, grade)
    course = Course(id=roster.next_course_id, name=data.name, credits=data.credits, grade=data.grade)
    updated = replace(period, courses=period.courses + (course,))
    logger.debug("Added course %s (%s) to period %s", course.id, course.name, period.id)
    return replace(roster, periods=_replace_period(roster, updated), next_course_id=course.id + 1)


def remove_course(roster: Roster, period_ref: str, course_id: int) -> Roster:
    period = roster.find_period(period_ref)
    if period is None:
        return roster

    remaining = tuple(c for c in period.courses if c.id != course_id)
    if len(remaining) == len(period.courses):
        return roster

    logger.debug("Removed course %s from period %s", course_id, period.id)
    return replace(roster, periods=_replace_period(roster, replace(period, courses=remaining)))


def add_semester(roster: Roster) -> Roster:
    if roster.layout != FLAT:
        raise LayoutError("Semesters can only be added to a flat roster.")

    number = len(roster.periods) + 1
    while roster.find_period(str(number)) is not None:
        number += 1
    period = Period(id=str(number), name=f"Semester {number}")
    return replace(roster, periods=roster.periods + (period,))
