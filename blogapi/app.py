# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from blogapi.container import Container
from blogapi.shared.logging import logger, setup_logging
from blogapi.shared.middleware.error_handler import configure_error_handling
from blogapi.shared.middleware.request_logger import configure_request_logging


def create_app(container: Container | None = None) -> Flask:
    container = container or Container()
    config = container.config

    setup_logging(level=config.log_level, log_file=config.log_file)
    container.database.init_schema()

    app = Flask(__name__)
    app.config.update(SECRET_KEY=config.secret_key)
    app.extensions["blogapi.container"] = container

    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.users_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")
        return resp

    logger.info(
        f"Flask app initialized (env={config.app_env}, sessions={config.sessions.backend})"
    )
    return app


def main() -> None:
    container = Container()
    app = create_app(container)
    app.run(host="0.0.0.0", port=container.config.port)


if __name__ == "__main__":
    main()
