from __future__ import annotations

import logging
from typing import Any

from flask import Flask

from app.blueprints.api.devices import devices_api
from app.blueprints.api.energy import energy_api
from app.config import load_config, setup_logging


def create_app(config_overrides: dict[str, Any] | None = None) -> Flask:
    config = load_config()
    if config_overrides:
        for key, value in config_overrides.items():
            setattr(config, key.lower(), value)

    setup_logging(debug=config.DEBUG, level=config.log_level, log_dir=config.log_dir)

    flask_app = Flask(__name__)
    flask_app.config.update(config.as_flask_config())

    from app.services.container import ServiceContainer

    container = ServiceContainer.build(config)
    flask_app.config["CONTAINER"] = container

    # Connections are per-thread; close the request thread's one after each request
    flask_app.teardown_appcontext(container.database.close_db)

    flask_app.register_blueprint(devices_api, url_prefix="/api/devices")
    flask_app.register_blueprint(energy_api, url_prefix="/api/energy")

    logging.info("Energy monitor app created (env=%s, db=%s)", config.environment, config.database_path)
    return flask_app


__all__ = ["create_app"]
