"""Decoder for ``application/x-www-form-urlencoded`` request bodies."""

from __future__ import annotations

import logging
import re
from typing import Union
from urllib.parse import unquote_to_bytes


logger = logging.getLogger(__name__)

_MALFORMED_ESCAPE = re.compile(rb"%(?![0-9A-Fa-f]{2})")


class FormDecodeError(ValueError):
    """Raised for a key or value that is not valid percent-encoded UTF-8."""


def _percent_decode(component: bytes) -> str:
    if _MALFORMED_ESCAPE.search(component):
        raise FormDecodeError("malformed percent-escape")
    raw = unquote_to_bytes(component.replace(b"+", b" "))
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FormDecodeError("invalid UTF-8 sequence") from exc


def decode_form_body(body: Union[bytes, str, None]) -> dict[str, str]:
    """Decode a urlencoded body into a field mapping.

    Pairs without ``=`` or with an empty key are skipped, and a pair whose key
    or value cannot be decoded is dropped without affecting the others. When a
    key repeats, the last value wins.
    """

    if not body:
        return {}
    if isinstance(body, str):
        body = body.encode("utf-8")

    fields: dict[str, str] = {}
    for index, pair in enumerate(body.split(b"&")):
        raw_key, sep, raw_value = pair.partition(b"=")
        if not sep or not raw_key:
            continue
        try:
            key = _percent_decode(raw_key)
            value = _percent_decode(raw_value)
        except FormDecodeError as exc:
            logger.debug(
                "Dropping undecodable form pair #%d: %s",
                index,
                exc,
                extra={"event": "contact.form.decode_error", "pair_index": index},
            )
            continue
        fields[key] = value
    return fields


__all__ = ["FormDecodeError", "decode_form_body"]
