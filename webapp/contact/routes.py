from __future__ import annotations

from typing import Any, Dict, Optional

from flask import current_app, request

from application.contact import ContactOutcome, ContactService, OutcomeKind
from domain.contact import decode_form_body

from . import bp


EXTENSION_KEY = "contact_relay"
CONTACT_PATH = "/contact"

# Every method is routed here so the handler, not the router, answers 405.
ACCEPTED_METHODS = [
    "GET",
    "HEAD",
    "POST",
    "PUT",
    "PATCH",
    "DELETE",
    "OPTIONS",
    "TRACE",
    "CONNECT",
]

# 外部公開メッセージ：失敗の詳細はログにのみ出力する
_RESPONSES: Dict[OutcomeKind, tuple[int, bool, str]] = {
    OutcomeKind.SUCCESS: (200, True, "Message sent successfully!"),
    OutcomeKind.BAD_REQUEST: (400, False, "Missing required fields. Fill everything out!"),
    OutcomeKind.METHOD_NOT_ALLOWED: (405, False, "Method Not Allowed"),
    OutcomeKind.TRANSPORT_FAILURE: (
        500,
        False,
        "Server error: Could not send email (check server logs).",
    ),
    OutcomeKind.UNEXPECTED_FAILURE: (500, False, "An unexpected server error occurred."),
}


def _contact_service() -> ContactService:
    return current_app.extensions[EXTENSION_KEY]


def _write_response(status: int, payload: Optional[Dict[str, Any]]):
    """Build the single response for this exchange."""

    body = b"" if payload is None else current_app.json.dumps(payload).encode("utf-8")
    return current_app.response_class(body, status=status, mimetype="application/json")


def _outcome_response(outcome: ContactOutcome):
    status, success, message = _RESPONSES[outcome.kind]
    return _write_response(status, {"success": success, "message": message})


@bp.route(CONTACT_PATH, methods=ACCEPTED_METHODS, provide_automatic_options=False)
def contact():
    """Relay a contact-form submission to the configured mailbox."""

    method = request.method.upper()

    # CORS preflight
    if method == "OPTIONS":
        return _write_response(204, None)

    if method != "POST":
        return _outcome_response(ContactOutcome.method_not_allowed(method))

    try:
        fields = decode_form_body(request.get_data(cache=False))
        outcome = _contact_service().submit(fields)
    except Exception as exc:
        current_app.logger.exception(
            "Unexpected error while handling contact request",
            extra={"event": "contact.unexpected_error"},
        )
        outcome = ContactOutcome.unexpected_failure(exc.__class__.__name__)

    return _outcome_response(outcome)
