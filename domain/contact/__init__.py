"""Contact form domain layer.

フォームの生データを検証済みの問い合わせへ変換する純粋関数を提供します。
"""

from .form_decoder import decode_form_body
from .submission import ContactSubmission, MissingFields, REQUIRED_FIELDS, validate_submission

__all__ = [
    "ContactSubmission",
    "MissingFields",
    "REQUIRED_FIELDS",
    "decode_form_body",
    "validate_submission",
]
