from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .core.constants import DEFAULT_FETCH_WORKERS, DEFAULT_WEEK_DAYS
from .week.controller import register as register_week

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["WEEK_DAYS"] = int(getattr(settings, "WEEK_DAYS", DEFAULT_WEEK_DAYS))
    app.config["WEEK_STARTS_ON"] = str(getattr(settings, "WEEK_STARTS_ON", "sunday"))

    if app.config["DEBUG"]:
        logging.basicConfig(level=logging.DEBUG)
        logger.info(
            "[week-status] settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )

    container = build_container(
        db_config=db_config,
        week_days=app.config["WEEK_DAYS"],
        week_starts_on=app.config["WEEK_STARTS_ON"],
        fetch_workers=int(getattr(settings, "SOURCE_FETCH_WORKERS", DEFAULT_FETCH_WORKERS)),
    )

    register_week(app, container)

    return app
