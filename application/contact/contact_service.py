"""Contact service - Application layer.

このモジュールは問い合わせ1件分の処理（検証 → メール作成 → 送信）を提供します。
結果は ContactOutcome として返し、HTTP への変換はプレゼンテーション層が行います。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from core.settings import ContactRelaySettings
from domain.contact import MissingFields, validate_submission
from domain.email_sender import EmailSender

from .composer import compose_contact_email


logger = logging.getLogger(__name__)


class OutcomeKind(Enum):
    """問い合わせ処理の結果種別."""

    SUCCESS = "success"
    BAD_REQUEST = "bad_request"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    TRANSPORT_FAILURE = "transport_failure"
    UNEXPECTED_FAILURE = "unexpected_failure"


@dataclass(frozen=True)
class ContactOutcome:
    """処理結果.

    Attributes:
        kind: 結果種別
        reason: サーバー側診断用の補足（クライアントには返さない）
    """

    kind: OutcomeKind
    reason: Optional[str] = None

    @classmethod
    def success(cls) -> "ContactOutcome":
        return cls(OutcomeKind.SUCCESS)

    @classmethod
    def bad_request(cls, reason: str) -> "ContactOutcome":
        return cls(OutcomeKind.BAD_REQUEST, reason)

    @classmethod
    def method_not_allowed(cls, method: str) -> "ContactOutcome":
        return cls(OutcomeKind.METHOD_NOT_ALLOWED, method)

    @classmethod
    def transport_failure(cls, detail: Optional[str]) -> "ContactOutcome":
        return cls(OutcomeKind.TRANSPORT_FAILURE, detail)

    @classmethod
    def unexpected_failure(cls, reason: str) -> "ContactOutcome":
        return cls(OutcomeKind.UNEXPECTED_FAILURE, reason)


@dataclass(frozen=True)
class ContactService:
    """問い合わせをメールとして転送するアプリケーションサービス.

    Attributes:
        settings: 起動時に構築した不変の設定
        sender: メール送信実装（EmailSender）
    """

    settings: ContactRelaySettings
    sender: EmailSender

    def submit(self, fields: Mapping[str, str]) -> ContactOutcome:
        """デコード済みフォーム項目を処理する.

        例外は呼び出し元へ伝播させず、すべて ContactOutcome に変換します。

        Args:
            fields: decode_form_body() の結果

        Returns:
            ContactOutcome: 処理結果
        """
        logger.info(
            "New message received: name=%s email=%s",
            fields.get("name"),
            fields.get("email"),
            extra={"event": "contact.received"},
        )

        try:
            submission = validate_submission(fields)
            if isinstance(submission, MissingFields):
                logger.info(
                    "Rejected submission with missing fields: %s",
                    ", ".join(submission.fields),
                    extra={"event": "contact.validation_failed", "missing": list(submission.fields)},
                )
                return ContactOutcome.bad_request(
                    "missing required fields: " + ", ".join(submission.fields)
                )

            message = compose_contact_email(submission, self.settings)
            result = self.sender.send(message)
        except Exception as exc:
            logger.exception(
                "Unexpected error while relaying contact message",
                extra={"event": "contact.unexpected_error"},
            )
            return ContactOutcome.unexpected_failure(exc.__class__.__name__)

        if not result.ok:
            logger.error(
                "SMTP error: failed to send contact email: %s",
                result.detail,
                extra={"event": "contact.transport_error"},
            )
            return ContactOutcome.transport_failure(result.detail)

        logger.info(
            "Contact message sent to %s",
            self.settings.receiver_address,
            extra={"event": "contact.sent"},
        )
        return ContactOutcome.success()

    def can_send_emails(self) -> bool:
        """送信設定が有効かどうかを返す."""
        return self.sender.validate_config()
