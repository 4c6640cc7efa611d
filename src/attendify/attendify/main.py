from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.logging import configure_logging, get_logger
from .container import Container, build_container
from .core.constants import DEFAULT_QR_TOKEN
from .core.exceptions import DomainError, FeatureDisabled, NotFoundError, ValidationError
from .directory.controller import register as register_directory
from .reports.controller import register as register_reports

logger = get_logger(__name__)


def _status_for(error: DomainError) -> int:
    if isinstance(error, NotFoundError):
        return 404
    if isinstance(error, FeatureDisabled):
        return 403
    if isinstance(error, ValidationError):
        return 400
    return 409


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["QR_TOKEN"] = getattr(settings, "QR_TOKEN", DEFAULT_QR_TOKEN)

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    summarizer_config = dict(getattr(settings, "SUMMARIZER_CONFIG", {}))
    if container is None:
        container = build_container(
            summarizer_config=summarizer_config,
            seed_demo_data=bool(getattr(settings, "SEED_DEMO_DATA", True)),
        )

    logger.info(
        "settings=%s summarizer=%s",
        settings_module,
        summarizer_config.get("model") if container.report_engine.configured else "offline",
    )

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"success": False, "message": str(e)}), _status_for(e)

    register_directory(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
