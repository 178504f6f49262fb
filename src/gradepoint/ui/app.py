from __future__ import annotations

import logging

import flet as ft

from gradepoint.config.settings import settings
from gradepoint.core.errors import GradepointError
from gradepoint.core.gpa import (
    compute_cumulative_average,
    compute_level_average,
    compute_overall_average,
    compute_period_average,
)
from gradepoint.core.grades import GRADE_SYMBOLS
from gradepoint.core.models import FLAT, LEVELS, SEMESTERS, Period, nested_period_id
from gradepoint.core.report import build_report, format_credits
from gradepoint.services.export_service import export_report
from gradepoint.state import app_state
from gradepoint.state.app_state import AppState

logger = logging.getLogger(__name__)


class GPACalculatorApp:
    def __init__(self, page: ft.Page, state: AppState | None = None) -> None:
        self.page = page
        self.page.title = "Student GPA Calculator"
        self.page.scroll = ft.ScrollMode.AUTO
        self.state = state or app_state.new_state(settings.layout)

        self.course_name = ft.TextField(label="Course Name", hint_text="e.g. Mathematics 101", width=320)
        self.credits = ft.TextField(label="Credits/Unit", hint_text="e.g. 3", width=160)
        self.grade = ft.Dropdown(
            label="Grade",
            width=160,
            options=[ft.dropdown.Option(g) for g in GRADE_SYMBOLS],
        )
        self.status = ft.Text(color=ft.Colors.RED_400)
        self.body = ft.Column(spacing=12)

    def run(self) -> None:
        self.page.appbar = ft.AppBar(
            title=ft.Text("GPA Calculator", weight=ft.FontWeight.BOLD),
            actions=[ft.IconButton(icon=ft.Icons.DARK_MODE, tooltip="Toggle theme", on_click=self.handle_toggle_theme)],
        )
        self.page.add(self.body)
        self.render()

    def set_status(self, message: str, is_error: bool = True) -> None:
        self.status.value = message
        self.status.color = ft.Colors.RED_400 if is_error else ft.Colors.GREEN_400

    def render(self) -> None:
        self.page.theme_mode = ft.ThemeMode.DARK if self.state.dark_mode else ft.ThemeMode.LIGHT
        self.page.appbar.actions[0].icon = ft.Icons.LIGHT_MODE if self.state.dark_mode else ft.Icons.DARK_MODE

        self.body.controls = [
            ft.Text("Student GPA Calculator", size=24, weight=ft.FontWeight.BOLD),
            ft.Row([self.course_name, self.credits]),
            self.grade,
            self.period_selector(),
            ft.ElevatedButton("Add Course", on_click=self.handle_add_course),
            self.status,
            ft.Divider(),
            *self.period_sections(),
            ft.Divider(),
            *self.summary(),
        ]
        self.page.update()

    def period_selector(self) -> ft.Control:
        if self.state.roster.layout == FLAT:
            semester = ft.Dropdown(
                label="Semester",
                width=240,
                value=self.state.selected_period_id,
                options=[ft.dropdown.Option(p.id, p.name) for p in self.state.roster],
                on_change=lambda e: self.handle_select(e.control.value),
            )
            return ft.Row([semester, ft.OutlinedButton("Add New Semester", on_click=self.handle_add_semester)])

        selected = self.state.selected_period
        level = ft.Dropdown(
            label="Level",
            width=200,
            value=selected.level,
            options=[ft.dropdown.Option(lv) for lv in LEVELS],
        )
        semester = ft.Dropdown(
            label="Semester",
            width=220,
            value=selected.name.split(" - ", 1)[-1],
            options=[ft.dropdown.Option(s) for s in SEMESTERS],
        )

        def on_change(_: ft.ControlEvent) -> None:
            if level.value and semester.value:
                self.handle_select(nested_period_id(level.value, semester.value))

        level.on_change = on_change
        semester.on_change = on_change
        return ft.Row([level, semester])

    def period_section(self, period: Period) -> ft.Control:
        if period.courses:
            rows: list[ft.Control] = [
                ft.Row(
                    [
                        ft.Text(f"{c.name} ({format_credits(c.credits)} credits) - {c.grade}"),
                        ft.IconButton(
                            icon=ft.Icons.CLOSE,
                            on_click=lambda _, pid=period.id, cid=c.id: self.handle_remove(pid, cid),
                        ),
                    ],
                    alignment=ft.MainAxisAlignment.SPACE_BETWEEN,
                )
                for c in period.courses
            ]
        else:
            rows = [ft.Text("No courses added yet.")]

        return ft.Column(
            [
                ft.Text(period.name, size=18, weight=ft.FontWeight.BOLD),
                *rows,
                ft.Text(f"Semester GPA: {compute_period_average(period.courses):.2f}"),
            ]
        )

    def period_sections(self) -> list[ft.Control]:
        roster = self.state.roster
        if roster.layout == FLAT:
            return [self.period_section(p) for p in roster]

        sections: list[ft.Control] = []
        for lv in roster.levels():
            sections.append(ft.Text(lv, size=20, weight=ft.FontWeight.BOLD))
            sections.extend(self.period_section(p) for p in roster.periods_in_level(lv))
            sections.append(ft.Text(f"{lv} GPA: {compute_level_average(roster, lv):.2f}", weight=ft.FontWeight.BOLD))
        return sections

    def summary(self) -> list[ft.Control]:
        roster = self.state.roster
        return [
            ft.Text("Overall GPA", size=18, weight=ft.FontWeight.BOLD),
            ft.Text(f"{compute_overall_average(roster):.2f}", size=30, weight=ft.FontWeight.BOLD),
            ft.Text("Cumulative GPA (CGPA)", size=18, weight=ft.FontWeight.BOLD),
            ft.Text(f"{compute_cumulative_average(roster):.2f}", size=30, weight=ft.FontWeight.BOLD),
            ft.OutlinedButton("Download GPA Report", icon=ft.Icons.DOWNLOAD, on_click=self.handle_download),
        ]

    def handle_add_course(self, _: ft.ControlEvent) -> None:
        try:
            self.state = app_state.add_course(self.state, self.course_name.value, self.credits.value, self.grade.value)
        except GradepointError as exc:
            self.set_status(str(exc))
            self.page.update()
            return
        self.course_name.value = ""
        self.credits.value = ""
        self.grade.value = None
        self.set_status("")
        self.render()

    def handle_remove(self, period_id: str, course_id: int) -> None:
        self.state = app_state.remove_course(self.state, period_id, course_id)
        self.render()

    def handle_select(self, period_id: str) -> None:
        try:
            self.state = app_state.select_period(self.state, period_id)
        except GradepointError as exc:
            self.set_status(str(exc))
        self.render()

    def handle_add_semester(self, _: ft.ControlEvent) -> None:
        self.state = app_state.add_semester(self.state)
        self.render()

    def handle_toggle_theme(self, _: ft.ControlEvent) -> None:
        self.state = app_state.toggle_theme(self.state)
        self.render()

    def handle_download(self, _: ft.ControlEvent) -> None:
        path = export_report(build_report(self.state.roster))
        if path is not None:
            self.set_status(f"Report saved to {path}", is_error=False)
        self.render()


def main(page: ft.Page) -> None:
    GPACalculatorApp(page).run()
