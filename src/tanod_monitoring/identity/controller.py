from __future__ import annotations

import structlog
from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.guards import current_principal, login_required
from ..core.enums import LandingRoute
from ..core.exceptions import AuthenticationError, StoreUnavailable
from ..container import Container

log = structlog.get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        if "uid" in session:
            return redirect(url_for("profile_setup"))
        return redirect(url_for("login"))

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if request.method == "POST":
            token = request.form.get("id_token", "")
            remember = request.form.get("remember_me")
            try:
                principal = container.token_verifier.verify(token)
            except AuthenticationError as e:
                flash(str(e), "danger")
                return render_template("login.html"), 401

            session.clear()
            session.permanent = bool(remember)
            session["uid"] = principal.uid
            session["name"] = principal.display_name or ""
            session["email"] = principal.email or ""
            log.info("login_accepted", uid=principal.uid)
            return redirect(url_for("profile_setup"))

        if "uid" in session:
            return redirect(url_for("profile_setup"))
        return render_template("login.html")

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("You have been signed out.", "info")
        return redirect(url_for("login"))

    @app.route("/profile-setup", endpoint="profile_setup")
    def profile_setup():
        try:
            landing = container.identity_service.resolve_landing(current_principal())
        except AuthenticationError:
            return redirect(url_for("login"))
        except StoreUnavailable:
            log.exception("profile_lookup_failed", uid=session.get("uid"))
            flash("Could not load your profile. Please try again.", "danger")
            return render_template("profile_setup.html"), 503

        session["role"] = landing.role.value
        return redirect(landing.route.value)

    @app.route(LandingRoute.PENDING.value, endpoint="pending")
    @login_required
    def pending():
        return render_template("pending.html", email=session.get("email"))

    @app.route("/data-deletion", endpoint="data_deletion")
    def data_deletion():
        return render_template("data_deletion.html", support_email=app.config.get("SUPPORT_EMAIL"))
