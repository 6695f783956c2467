from __future__ import annotations

from datetime import MAXYEAR, MINYEAR
from typing import Optional

from flask import Flask, jsonify, render_template, request

from ..core.exceptions import ValidationError
from ..container import Container
from .model import ViewState
from .view import render_month

MENU_TABS = ("Dashboard", "Attendance", "Leave", "Payslips", "Documents")
DASHBOARD_CARDS = ("Announcements", "Upcoming Trainings", "Team Directory")


def register(app: Flask, container: Container) -> None:
    def _int_arg(name: str) -> Optional[int]:
        raw = request.args.get(name)
        if raw is None or raw == "":
            return None
        try:
            return int(raw)
        except ValueError:
            raise ValidationError(f"{name} must be an integer")

    def _requested_state() -> ViewState:
        today_state = ViewState.from_date(container.clock())
        year = _int_arg("year")
        month = _int_arg("month")
        state = ViewState.normalized(
            today_state.year if year is None else year,
            today_state.month if month is None else month,
        )
        if not MINYEAR <= state.year <= MAXYEAR:
            raise ValidationError(f"year must be between {MINYEAR} and {MAXYEAR}")
        return state

    @app.route("/", endpoint="dashboard")
    def dashboard():
        try:
            state = _requested_state()
        except ValidationError:
            state = ViewState.from_date(container.clock())

        grid = render_month(state, today=container.clock(), holidays=container.holidays)
        return render_template(
            "index.html",
            grid=grid,
            prev_state=state.shifted(-1),
            next_state=state.shifted(1),
            tabs=MENU_TABS,
            cards=DASHBOARD_CARDS,
            active_page="dashboard",
        )

    @app.route("/api/calendar", endpoint="api_calendar")
    def api_calendar():
        try:
            state = _requested_state()
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400

        grid = render_month(state, today=container.clock(), holidays=container.holidays)
        return jsonify(grid.to_dict())
