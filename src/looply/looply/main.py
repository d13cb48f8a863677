from __future__ import annotations

import importlib
import logging
from types import ModuleType
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.datetime_utils import now_utc
from .companies.controller import register as register_companies
from .container import build_container
from .database.bootstrap import apply_schema, list_tables
from .database.seed import seed_demo_company
from .errors import register as register_errors
from .reports.controller import register as register_reports
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def _configure_logging(settings: ModuleType) -> None:
    level = str(getattr(settings, "LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings: Optional[ModuleType] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    if settings is None:
        settings = importlib.import_module(get_settings_module())
    _configure_logging(settings)

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    backend = str(getattr(settings, "STORAGE_BACKEND", "memory")).lower()
    db_config = dict(getattr(settings, "DB_CONFIG", {}))
    logger.info("settings=%s storage=%s", settings.__name__, backend)

    container = build_container(storage_backend=backend, db_config=db_config)

    if container.conn is not None:
        logger.info(
            "db=%s@%s:%s/%s",
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(container.conn)
            logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))

    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        seed_demo_company(container.store, now_utc().date())

    app.extensions["looply"] = container

    register_errors(app)
    register_users(app, container)
    register_companies(app, container)
    register_reports(app, container)

    return app
