from __future__ import annotations

import importlib
import json
import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .payroll.controller import register as register_payroll
from .timesheet.controller import register as register_timesheet

logger = logging.getLogger(__name__)


def _load_seed(path: str | None) -> dict:
    if not path:
        return {}
    seed_path = Path(path)
    if not seed_path.is_file():
        logger.warning("[hr-system] seed file not found: %s", seed_path)
        return {}
    with seed_path.open(encoding="utf-8") as fh:
        return json.load(fh)


def create_app(*, seed: dict | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if seed is None:
        seed = _load_seed(getattr(settings, "SEED_FILE", None))
    logger.info(
        "[hr-system] settings=%s seed=(attendance=%s, reports=%s, profiles=%s)",
        settings_module,
        len(seed.get("attendance", [])),
        len(seed.get("workReports", [])),
        len(seed.get("payroll", [])),
    )

    container = build_container(settings=settings, seed=seed)

    register_payroll(app, container)
    register_timesheet(app, container)

    return app
