from __future__ import annotations

import structlog
from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.guards import tanod_required
from ..core.enums import AttendanceKind, LandingRoute
from ..core.exceptions import StoreUnavailable, ValidationError
from ..container import Container
from .ledger import next_allowed_action

log = structlog.get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route(LandingRoute.TANOD.value, endpoint="tanod_dashboard")
    @tanod_required
    def tanod_dashboard():
        uid = session["uid"]
        history, reports, next_action = [], [], None
        try:
            records = container.attendance_service.history(uid)
            history = [container.attendance_service.to_ui(r) for r in records]
            next_action = next_allowed_action(records)
            reports = container.report_service.list_for_owner(uid)
        except StoreUnavailable:
            log.exception("dashboard_load_failed", uid=uid)
            flash("Could not load your records. Please try again.", "danger")

        return render_template(
            "tanod_dashboard.html",
            name=session.get("name") or "Tanod",
            history=history,
            next_action=next_action,
            reports=reports,
            kinds=AttendanceKind,
            active_page="tanod_dashboard",
        )

    @app.route("/attendance", methods=["POST"], endpoint="record_attendance")
    @tanod_required
    def record_attendance():
        kind = request.form.get("kind", "")
        location = request.form.get("location", "")
        try:
            rec = container.attendance_service.record(session["uid"], kind, location)
            flash(f"{rec.kind.label} recorded at {rec.location}.", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except StoreUnavailable:
            log.exception("attendance_save_failed", uid=session["uid"])
            flash("Error saving record. Please try again.", "danger")
        return redirect(url_for("tanod_dashboard"))
