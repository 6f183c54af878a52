"""Centralized HTTP error handling; every error is answered with JSON."""

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException


def _json_error(code: int, message: str):
    response = jsonify({"success": False, "message": message})
    response.status_code = code
    return response


def register_error_handlers(app: Flask) -> None:
    """Install the JSON 404 handler and the catch-all handler on *app*."""

    @app.errorhandler(404)
    def handle_404(e):
        current_app.logger.warning(
            "404 path=%s ua=%s",
            request.path,
            request.user_agent,
            extra={"event": "api.http_4xx"},
        )
        return _json_error(404, "Not Found")

    @app.errorhandler(Exception)
    def handle_exception(e):
        is_http = isinstance(e, HTTPException)
        code = e.code if is_http else 500
        # 5xxの詳細messageは返さない（内部情報漏えい対策）
        public_message = e.name if (is_http and code < 500) else "Internal Server Error"

        if is_http and code < 500:
            current_app.logger.warning(
                "%s %s (%s)",
                code,
                request.path,
                request.remote_addr,
                extra={"event": "api.http_4xx"},
            )
        else:
            current_app.logger.exception(
                "%s %s (%s)",
                code,
                request.path,
                request.remote_addr,
                extra={"event": "api.http_5xx"},
            )
        return _json_error(code, public_message)
