from __future__ import annotations

import csv
import io
from datetime import date

import structlog
from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.guards import admin_required, current_role
from ..core.constants import DATE_FORMAT
from ..core.enums import LandingRoute
from ..core.exceptions import StoreUnavailable, ValidationError
from ..container import Container

log = structlog.get_logger(__name__)

CSV_FIELDS = ["occurred_at", "severity", "reporter", "owner_id", "location", "body"]


def register(app: Flask, container: Container) -> None:
    def _window_args() -> tuple[date, date]:
        today = now_local().date()
        start_s = request.args.get("start") or today.strftime(DATE_FORMAT)
        end_s = request.args.get("end") or today.strftime(DATE_FORMAT)
        return parse_iso_date(start_s), parse_iso_date(end_s)

    @app.route(LandingRoute.ADMIN.value, endpoint="admin_dashboard")
    @admin_required
    def admin_dashboard():
        items, error = [], None
        try:
            items = container.dashboard_service.emergency_feed(viewer=current_role())
        except StoreUnavailable:
            log.exception("emergency_feed_failed")
            error = "Failed to load emergency reports."
        return render_template("admin/dashboard.html", items=items, error=error, active_page="admin_dashboard")

    @app.route("/tanod-list", endpoint="tanod_list")
    @admin_required
    def tanod_list():
        expanded = request.args.get("uid") or None
        tanods, records, error = [], [], None
        try:
            tanods = container.dashboard_service.tanod_roster()
            if expanded:
                records = container.dashboard_service.tanod_attendance(expanded)
        except StoreUnavailable:
            log.exception("tanod_list_failed", expanded=expanded)
            error = "Failed to load attendance."
        return render_template(
            "admin/tanods.html",
            tanods=tanods,
            expanded=expanded,
            records=records,
            error=error,
            active_page="tanod_list",
        )

    @app.route("/report-list", endpoint="report_list")
    @admin_required
    def report_list():
        items, error = [], None
        try:
            start, end = _window_args()
            items = container.dashboard_service.reports_for_window(start, end, viewer=current_role())
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("report_list"))
        except StoreUnavailable:
            log.exception("report_list_failed")
            error = "Failed to load reports."

        return render_template(
            "admin/reports.html",
            start=start.strftime(DATE_FORMAT),
            end=end.strftime(DATE_FORMAT),
            items=items,
            error=error,
            active_page="report_list",
        )

    @app.route("/report-list.csv", endpoint="report_list_csv")
    @admin_required
    def report_list_csv():
        try:
            start, end = _window_args()
            items = container.dashboard_service.reports_for_window(start, end, viewer=current_role())
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("report_list"))
        except StoreUnavailable:
            log.exception("report_export_failed")
            flash("Failed to export reports.", "danger")
            return redirect(url_for("report_list"))

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for row in container.dashboard_service.to_csv_rows(items):
            writer.writerow(row)

        filename = f"reports_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        return app.response_class(
            out.getvalue().encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
