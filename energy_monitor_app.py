"""WSGI entry point for the energy monitor backend.

Provides a minimal CLI entrypoint used both in development and production.
Host, port and debug mode come from the environment (see ``app.config``).
"""
from __future__ import annotations

import logging
import sys

from app import create_app
from app.config import load_config


def main() -> int:
    config = load_config()
    app = create_app()

    logging.info("Starting server on %s:%s", config.host, config.port)
    try:
        app.run(host=config.host, port=config.port, debug=config.DEBUG, use_reloader=False)
    except KeyboardInterrupt:
        logging.info("Server stopped by user")
    finally:
        app.config["CONTAINER"].shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
