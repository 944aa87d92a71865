from __future__ import annotations

import importlib
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .core.constants import DEFAULT_PAGE_SIZE, DEFAULT_PASSWORD_HASH_METHOD, MAX_PAGE_SIZE
from .core.exceptions import DomainError, ValidationError
from .database.bootstrap import apply_schema, list_tables

from .container import Container, build_container
from .entries.controller import register as register_entries
from .registration.controller import register as register_registration

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"data": None, "errors": [str(e)]}), 400

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        logger.exception("Erro interno: %s", e)
        return jsonify({"data": None, "errors": ["Erro interno no servidor."]}), 500


def register_routes(app: Flask, container: Container) -> None:
    register_error_handlers(app)
    register_registration(app, container)
    register_entries(app, container)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["PAGE_SIZE"] = int(getattr(settings, "PAGE_SIZE", DEFAULT_PAGE_SIZE))
    app.config["MAX_PAGE_SIZE"] = int(getattr(settings, "MAX_PAGE_SIZE", MAX_PAGE_SIZE))

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(db_config, schema_path=schema_path)
        logger.info("schema ready (tables=%s)", len(list_tables(db_config)))

    container = build_container(
        db_config=db_config,
        page_size=app.config["PAGE_SIZE"],
        password_hash_method=getattr(settings, "PASSWORD_HASH_METHOD", DEFAULT_PASSWORD_HASH_METHOD),
    )
    register_routes(app, container)

    return app
