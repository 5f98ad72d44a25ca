import logging
import os

import tornado.ioloop
import tornado.web

from campus_robot.handlers import (
    CommandHandler,
    DocsHandler,
    HealthHandler,
    LocationsHandler,
    ModeHandler,
    OrderExecuteHandler,
    OrderHandler,
    OrdersHandler,
    OrderStatusHandler,
    RobotHandler,
    RobotResetHandler,
    StateWebSocketHandler,
)
from campus_robot.services.delivery_service import DeliveryService


def make_app() -> tornado.web.Application:
    service = DeliveryService()
    deps = dict(service=service)

    return tornado.web.Application(
        [
            (r"/health", HealthHandler),
            (r"/docs", DocsHandler),
            (r"/locations", LocationsHandler, deps),
            (r"/orders", OrdersHandler, deps),
            (r"/orders/([^/]+)", OrderHandler, deps),
            (r"/orders/([^/]+)/status", OrderStatusHandler, deps),
            (r"/orders/([^/]+)/execute", OrderExecuteHandler, deps),
            (r"/tx", CommandHandler, deps),
            (r"/mode", ModeHandler, deps),
            (r"/robot", RobotHandler, deps),
            (r"/robot/reset", RobotResetHandler, deps),
            (r"/ws", StateWebSocketHandler, deps),
        ],
        service=service,
    )


def setup_logger(name):
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.setLevel(os.environ.get("LOG_LEVEL", "INFO").upper())
    return logger


def main() -> None:
    logger = setup_logger("campus_robot")
    logger.info(f"Started server process {os.getpid()}")
    port = int(os.environ.get("PORT", "8000"))
    address = os.environ.get("ADDRESS", "0.0.0.0")
    app = make_app()
    logger.info(f"Waiting for application startup...")
    app.listen(port=port, address=address)
    logger.info(f"Application startup complete.")
    logger.info(f"Tornado running on http://{address}:{port} (Press Ctrl+C to quit)")
    tornado.ioloop.IOLoop.current().start()


if __name__ == "__main__":
    main()
