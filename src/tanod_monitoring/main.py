from __future__ import annotations

import importlib
from datetime import timedelta
from typing import Optional

import structlog
from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .common.guards import EXTENSION_KEY
from .config import get_settings_module
from .container import Container, build_container
from .core.constants import DEFAULT_SESSION_DAYS
from .dashboard.controller import register as register_dashboard
from .database.bootstrap import apply_schema, list_tables
from .identity.controller import register as register_identity
from .observability import install_request_context, setup_structured_logging
from .reports.controller import register as register_reports

log = structlog.get_logger(__name__)


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_structured_logging(
        json_output=bool(getattr(settings, "LOG_JSON", False)),
        level=str(getattr(settings, "LOG_LEVEL", "INFO")),
    )

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SUPPORT_EMAIL"] = getattr(settings, "SUPPORT_EMAIL", "")
    app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        log.info(
            "app_starting",
            settings=settings_module,
            db=f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}",
        )
        container = build_container(db_config=db_config, settings=settings)

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn)
            log.info("schema_ready", tables=len(list_tables(container.conn)))

    install_request_context(app)
    app.extensions[EXTENSION_KEY] = container
    register_identity(app, container)
    register_attendance(app, container)
    register_reports(app, container)
    register_dashboard(app, container)

    return app
