from __future__ import annotations

from functools import wraps
from typing import Optional

import structlog
from flask import current_app, flash, g, redirect, render_template, session, url_for

from ..core.enums import Role
from ..core.exceptions import StoreUnavailable
from ..identity.model import Principal

log = structlog.get_logger(__name__)

EXTENSION_KEY = "tanod_monitoring"


def current_principal() -> Optional[Principal]:
    uid = session.get("uid")
    if not uid:
        return None
    return Principal(uid=uid, display_name=session.get("name"), email=session.get("email"))


def current_role() -> Optional[Role]:
    """Role resolved from the stored profile for this request, if a guard ran."""
    return g.get("role")


def render_forbidden():
    role = current_role()
    current_user = {"name": session.get("name"), "role": role.value if role else None}
    return render_template("403.html", current_user=current_user), 403


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "uid" not in session:
            flash("Please sign in to continue.", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def role_required(role: Role):
    """Allow only principals whose stored profile role is ``role``.

    The profile is read on every request so role changes apply without a new
    sign-in. A principal without a profile is sent to /profile-setup.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            uid = session.get("uid")
            if not uid:
                flash("Please sign in to continue.", "warning")
                return redirect(url_for("login"))

            container = current_app.extensions[EXTENSION_KEY]
            try:
                profile = container.identity_service.get_profile(uid)
            except StoreUnavailable:
                log.exception("role_lookup_failed", uid=uid)
                flash("Could not load your profile. Please try again.", "danger")
                return render_template("profile_setup.html"), 503
            if profile is None:
                return redirect(url_for("profile_setup"))

            g.role = profile.role
            session["role"] = profile.role.value
            if profile.role != role:
                return render_forbidden()
            return view(*args, **kwargs)

        return wrapper

    return decorator


tanod_required = role_required(Role.TANOD)
admin_required = role_required(Role.ADMIN)
