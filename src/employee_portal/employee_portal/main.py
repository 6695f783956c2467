from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .calendar.controller import register as register_calendar
from .core.constants import DEFAULT_PORT
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .users.controller import register as register_users

REPO_ROOT = Path(__file__).resolve().parents[3]


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder=str(REPO_ROOT / "templates"), static_folder=str(REPO_ROOT / "static"))

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PORT"] = int(getattr(settings, "PORT", DEFAULT_PORT))

    configure_logging(app.config["DEBUG"])

    if container is None:
        container = build_container(db_config=db_config)
        if app.config["DEBUG"]:
            app.logger.info("settings=%s db=%s", settings_module, container.conn.config.describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn, schema_path=REPO_ROOT / "database" / "schema.sql")
            app.logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))

    app.extensions["employee_portal"] = container

    register_users(app, container)
    register_calendar(app, container)

    return app


def run() -> None:
    app = create_app()
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=app.config["DEBUG"])


if __name__ == "__main__":
    run()
