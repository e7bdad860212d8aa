from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .orgchart.controller import register as register_org_chart

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger = logging.getLogger(__name__)

    data_source = getattr(settings, "DATA_SOURCE", "demo")
    logger.info("settings=%s data_source=%s", settings_module, data_source)

    container = build_container(
        data_source=data_source,
        data_dir=getattr(settings, "DATA_DIR", "data"),
        organization_name=getattr(settings, "COMPANY_NAME", "Organization"),
        default_mode=getattr(settings, "DEFAULT_AGGREGATION_MODE", "direct-count"),
        half_day_convention=getattr(settings, "HALF_DAY_CONVENTION", "morning"),
    )
    app.extensions["org_availability"] = container

    register_org_chart(app, container)

    return app
