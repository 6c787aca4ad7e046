"""
File: run.py
Purpose: Process entry point. Builds the app and serves it on the fixed address.
"""
import logging
import sys

from portfolio import create_app
from portfolio.classes.template_store import TemplateLoadError
from portfolio.config import HOST, PORT, LOG_FORMAT

logger = logging.getLogger('portfolio.run')


def configure_logging():
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)


def main():
    configure_logging()

    try:
        app = create_app()
    except TemplateLoadError as e:
        logger.critical("Failed to load template %s: %s", e.name, e.cause)
        sys.exit(1)

    logger.info("Portfolio running on http://%s:%d", HOST, PORT)
    try:
        app.run(host=HOST, port=PORT)
    except OSError as e:
        logger.critical("Failed to bind %s:%d: %s", HOST, PORT, e)
        sys.exit(1)
    except SystemExit:
        # werkzeug reports a busy port on stderr and exits on its own
        logger.critical("Failed to bind %s:%d", HOST, PORT)
        sys.exit(1)


if __name__ == '__main__':
    main()
