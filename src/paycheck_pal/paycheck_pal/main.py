from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.responses import error_response
from .container import build_container
from .core.exceptions import DomainError
from .records.controller import register as register_records
from .settings.controller import register as register_settings


def create_app(*, storage_config: Optional[dict] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    storage_config = storage_config or getattr(settings, "STORAGE_CONFIG")

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger = logging.getLogger("paycheck_pal")
    logger.info("settings=%s data_dir=%s", settings_module, storage_config.get("data_dir"))

    container = build_container(storage_config=storage_config)

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return error_response(e)

    register_records(app, container)
    register_settings(app, container)

    return app
