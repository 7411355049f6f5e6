from flask import Flask, jsonify, request, g
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
import time
import logging

from .src.config import Config
from .src.services.refresher import CredentialRefresher
from .routes.health import bp as health_bp
from .routes.credentials import bp as credentials_bp


QUIET_PATHS = ("/ping",)


def create_app(config=None, refresher=None):
    """Crea la app de Flask.

    `refresher` provee las credenciales cacheadas; si no se pasa se crea uno
    sin arrancar sus loops (quien lo arranca es `wxtoken.__main__`).
    """
    app = Flask(__name__)
    app.config.from_object(config or Config)

    CORS(app, resources={r"/*": {"origins": app.config.get("CORS_ORIGINS", "*")}})

    app.extensions["wxtoken"] = refresher or CredentialRefresher()

    app.register_blueprint(health_bp)
    app.register_blueprint(credentials_bp)

    logging.basicConfig(level=logging.DEBUG if app.config.get("DEBUG", True) else logging.INFO)

    @app.before_request
    def _log_start():
        g._start_time = time.time()

    @app.after_request
    def _log_request(resp):
        # Los health checks no ensucian el log de accesos
        if request.path in QUIET_PATHS:
            return resp
        started = getattr(g, '_start_time', None)
        dur_ms = int((time.time() - started) * 1000) if started else -1
        logging.info(
            "%s %s -> %s (%d ms) ip=%s",
            request.method,
            request.path,
            resp.status_code,
            dur_ms,
            request.headers.get('X-Forwarded-For', request.remote_addr),
        )
        return resp

    @app.errorhandler(Exception)
    def _internal_error(exc):
        if isinstance(exc, HTTPException):
            return exc
        logging.exception("unhandled error on %s %s", request.method, request.path)
        return jsonify({"error": "internal server error"}), 500

    return app
