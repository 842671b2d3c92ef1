# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix

from identity_service.infrastructure.container import Container
from identity_service.shared.config import AppConfig, load_config
from identity_service.shared.logging import logger, setup_logging
from identity_service.shared.middleware.error_handler import configure_error_handling
from identity_service.shared.middleware.rate_limit import configure_rate_limit
from identity_service.shared.middleware.request_logger import configure_request_logging
from identity_service.shared.middleware.security_headers import configure_security_headers

CONTAINER_EXTENSION = "identity_service.container"


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(
        "DEBUG" if config.debug_logging else config.log_level,
        config.log_file,
    )

    container = Container(config)

    app = Flask(__name__)
    app.config.update(
        SECRET_KEY=config.secret_key,
        MAX_CONTENT_LENGTH=config.max_content_length,
    )
    app.json.sort_keys = False  # type: ignore[attr-defined]
    app.extensions[CONTAINER_EXTENSION] = container

    if config.security.trust_proxy:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1)  # type: ignore[method-assign]

    # Order matters: logging, then rate limit, then routes.
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_rate_limit(app, config.security)
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_security_headers(app, config.security)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.users_controller.as_blueprint())

    logger.info(f"Flask app initialized env={config.app_env}")
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    logger.info(f"Server is running on http://localhost:{config.port}")
    app.run(host=config.host, port=config.port, debug=False)


if __name__ == "__main__":
    main()
