from __future__ import annotations

import structlog
from flask import Flask, flash, redirect, request, session, url_for

from ..common.datetime_utils import parse_optional_datetime
from ..common.guards import tanod_required
from ..core.exceptions import StoreUnavailable, ValidationError
from ..container import Container

log = structlog.get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/reports", methods=["POST"], endpoint="submit_report")
    @tanod_required
    def submit_report():
        try:
            occurred_at = parse_optional_datetime(request.form.get("date"), request.form.get("time"))
            report = container.report_service.submit(
                session["uid"],
                request.form.get("log_type") or None,
                request.form.get("content", ""),
                request.form.get("location", ""),
                occurred_at,
            )
            label = "Emergency report" if report.is_emergency else "Report"
            flash(f"{label} submitted.", "success")
        except ValidationError as e:
            flash(str(e), "warning")
        except StoreUnavailable:
            log.exception("report_save_failed", uid=session["uid"])
            flash("Error submitting report. Please try again.", "danger")
        return redirect(url_for("tanod_dashboard"))
