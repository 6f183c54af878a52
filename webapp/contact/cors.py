"""CORS policy for the contact endpoint."""

from __future__ import annotations

from flask import Flask, request


_DEFAULT_CORS_ALLOW_ORIGIN = "*"
_DEFAULT_CORS_ALLOW_METHODS = "POST, GET, OPTIONS"
_DEFAULT_CORS_ALLOW_HEADERS = "Content-Type"
_DEFAULT_CORS_MAX_AGE = "86400"

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": _DEFAULT_CORS_ALLOW_ORIGIN,
    "Access-Control-Allow-Methods": _DEFAULT_CORS_ALLOW_METHODS,
    "Access-Control-Allow-Headers": _DEFAULT_CORS_ALLOW_HEADERS,
    "Access-Control-Max-Age": _DEFAULT_CORS_MAX_AGE,
}


def apply_cors_headers(response):
    for name, value in CORS_HEADERS.items():
        response.headers[name] = value
    return response


def register_cors(app: Flask, path: str) -> None:
    """Attach the CORS headers to every response for *path*.

    The hook is app-level so it also covers responses the router produces
    before the blueprint is selected (e.g. 405 for an unrouted method).
    The request ``Origin`` is ignored.
    """

    @app.after_request
    def _apply_cors_headers(response):
        if request.path == path:
            apply_cors_headers(response)
        return response
