import logging

from flask import Flask, Response, jsonify, request

from wizbridge.config import BridgeConfig
from wizbridge.network import BulbError, BulbNetworkError, BulbTimeoutError, toggle_bulb
from wizbridge.page import CLOSE_PAGE

logger = logging.getLogger(__name__)

TOGGLE_METHODS = ("GET", "POST")
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]


def _error_kind(err: BulbError) -> tuple[str, int]:
    if isinstance(err, BulbTimeoutError):
        return "bulb_timeout", 504
    if isinstance(err, BulbNetworkError):
        return "bulb_unreachable", 502
    return "bulb_protocol_error", 502


def create_app(config: BridgeConfig) -> Flask:
    app = Flask(__name__)
    # "//foo" is a routing miss, not a redirect to "/foo"
    app.url_map.merge_slashes = False

    @app.errorhandler(404)
    @app.errorhandler(405)
    def not_found(e):
        return "", 404

    @app.route("/", defaults={"path": ""}, methods=ALL_METHODS)
    @app.route("/<path:path>", methods=ALL_METHODS)
    def dispatch(path):
        if request.method not in TOGGLE_METHODS or not request.path.endswith(config.path_suffix):
            return "", 404

        logger.info(">> Client connected (%s %s)", request.method, request.path)
        try:
            toggle_bulb(config.address, timeout=config.timeout)
        except BulbError as e:
            kind, status = _error_kind(e)
            logger.exception("There was an error setting bulb %s", config.address)
            return jsonify({"error": kind, "message": str(e)}), status

        logger.info("responded")
        return Response(CLOSE_PAGE, status=200, mimetype="text/html")

    return app
