from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from gradepoint.core import roster as roster_ops
from gradepoint.core.errors import PeriodNotFoundError
from gradepoint.core.models import FLAT, Roster


@dataclass(frozen=True)
class AppState:
    roster: Roster
    selected_period_id: str
    dark_mode: bool = False

    @property
    def selected_period(self):
        return self.roster.find_period(self.selected_period_id)


def new_state(layout: str = FLAT) -> AppState:
    roster = roster_ops.build_roster(layout)
    return AppState(roster=roster, selected_period_id=roster.periods[0].id)


def select_period(state: AppState, period_id: str) -> AppState:
    if state.roster.find_period(period_id) is None:
        raise PeriodNotFoundError(period_id)
    return replace(state, selected_period_id=period_id)


def add_course(state: AppState, name: Any, credits: Any, grade: Any) -> AppState:
    roster = roster_ops.add_course(state.roster, state.selected_period_id, name, credits, grade)
    return replace(state, roster=roster)


def remove_course(state: AppState, period_id: str, course_id: int) -> AppState:
    roster = roster_ops.remove_course(state.roster, period_id, course_id)
    if roster is state.roster:
        return state
    return replace(state, roster=roster)


def add_semester(state: AppState) -> AppState:
    roster = roster_ops.add_semester(state.roster)
    return replace(state, roster=roster, selected_period_id=roster.periods[-1].id)


def toggle_theme(state: AppState) -> AppState:
    return replace(state, dark_mode=not state.dark_mode)
