# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import importlib
from typing import Any, Protocol, cast

from flask import Flask

from storefront.infrastructure.container import Container
from storefront.shared.config import AppConfig, load_config
from storefront.shared.logging import logger, setup_logging
from storefront.shared.middleware.error_handler import configure_error_handling
from storefront.shared.middleware.rate_limit import CONFIG_EXTENSION
from storefront.shared.middleware.request_logger import configure_request_logging


class _CORSCallable(Protocol):
    def __call__(self, app: Flask, **kwargs: Any) -> Any: ...


_flask_cors = importlib.import_module("flask_cors")
CORS = cast(_CORSCallable, _flask_cors.CORS)


def create_app(config: AppConfig | None = None, *, container: Container | None = None) -> Flask:
    config = config or load_config()
    container = container or Container(config)
    setup_logging(debug_mode=config.debug_logging)

    app = Flask(__name__)
    app.extensions[CONFIG_EXTENSION] = config
    configure_error_handling(app, config)
    configure_request_logging(app, debug_mode=config.debug_logging)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}}
    }
    CORS(app, **cors_kwargs)

    app.extensions["storefront.container"] = container
    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.products_controller.as_blueprint())
    app.register_blueprint(container.cart_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cache-Control", "no-store")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains",
            )

        return resp

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=8080, threaded=True)
