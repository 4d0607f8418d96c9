from __future__ import annotations

import importlib
import logging.config
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import build_container
from .core.constants import DEFAULT_AUTH_REALM, DEFAULT_DATA_FILE
from .courses.controller import register as register_courses
from .database.bootstrap import ensure_default_users, ensure_sample_data
from .database.store import JsonDocumentStore
from .enrollments.controller import register as register_enrollments
from .users.controller import register as register_users
from .web.http import register_error_handlers

SETTING_DEFAULTS = {
    "DATA_FILE": DEFAULT_DATA_FILE,
    "DEBUG": False,
    "TESTING": False,
    "AUTO_SEED_DB": True,
    "SEED_SAMPLE_DATA": False,
    "EXPOSE_PASSWORDS": True,
    "LOG_LEVEL": "INFO",
    "AUTH_REALM": DEFAULT_AUTH_REALM,
}


def configure_logging(level: str) -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": "[%(asctime)s] %(levelname)s in %(name)s: %(message)s"},
            },
            "handlers": {
                "console": {"class": "logging.StreamHandler", "formatter": "default"},
            },
            "root": {"level": level.upper(), "handlers": ["console"]},
        }
    )


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)
    app.json.sort_keys = False

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    for key, default in SETTING_DEFAULTS.items():
        app.config[key] = getattr(settings, key, default)
    if overrides:
        app.config.update(overrides)

    configure_logging(str(app.config["LOG_LEVEL"]))
    data_file = app.config["DATA_FILE"]
    app.logger.info("settings=%s data_file=%s", settings_module, data_file or "<memory>")

    store = JsonDocumentStore(data_file)
    if app.config["AUTO_SEED_DB"]:
        ensure_default_users(store)
        if app.config["SEED_SAMPLE_DATA"]:
            ensure_sample_data(store)

    container = build_container(store=store)
    app.extensions["enrollment_system"] = container

    register_error_handlers(app)
    register_users(app, container)
    register_courses(app, container)
    register_enrollments(app, container)

    return app
