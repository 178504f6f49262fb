from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

FLAT = "flat"
NESTED = "nested"
LAYOUTS = (FLAT, NESTED)

LEVELS: tuple[str, ...] = ("100 Level", "200 Level", "300 Level", "400 Level", "500 Level")
SEMESTERS: tuple[str, ...] = ("First Semester", "Second Semester")


@dataclass(frozen=True)
class Course:
    id: int
    name: str
    credits: float
    grade: str


@dataclass(frozen=True)
class Period:
    id: str
    name: str
    courses: tuple[Course, ...] = ()
    level: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.courses


@dataclass(frozen=True)
class Roster:
    layout: str = FLAT
    periods: tuple[Period, ...] = field(default_factory=tuple)
    next_course_id: int = 1

    def __iter__(self) -> Iterator[Period]:
        return iter(self.periods)

    def find_period(self, period_id: str) -> Period | None:
        return next((p for p in self.periods if p.id == period_id), None)

    def all_courses(self) -> list[Course]:
        return [c for p in self.periods for c in p.courses]

    def levels(self) -> list[str]:
        seen: list[str] = []
        for p in self.periods:
            if p.level is not None and p.level not in seen:
                seen.append(p.level)
        return seen

    def periods_in_level(self, level: str) -> list[Period]:
        return [p for p in self.periods if p.level == level]


def nested_period_id(level: str, semester: str) -> str:
    return f"{level}/{semester}"
