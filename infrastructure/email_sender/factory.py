"""Email sender factory - Infrastructure layer.

このモジュールは設定からSMTPメール送信実装を生成するファクトリを提供します。
"""

from __future__ import annotations

import logging

from flask_mailman import Mail

from core.settings import ContactRelaySettings
from domain.email_sender import EmailSender

from .smtp_sender import SmtpCredentials, SmtpEmailSender


logger = logging.getLogger(__name__)


class EmailSenderFactory:
    """メール送信実装のファクトリクラス.

    本番環境ではSMTP（暗黙的TLS）のみを使用します。
    テスト用の送信実装は tests/helpers/email_sender/ にあります。
    """

    @classmethod
    def create(cls, settings: ContactRelaySettings, mail: Mail) -> EmailSender:
        """設定からSMTPメール送信実装を生成する.

        Args:
            settings: 起動時に構築した設定
            mail: Flask-Mailmanインスタンス

        Returns:
            EmailSender: メール送信実装
        """
        logger.info(
            "Creating SMTP email sender for %s:%s",
            settings.smtp_host,
            settings.smtp_port,
            extra={"event": "email.factory.create"},
        )
        return SmtpEmailSender(
            mail=mail,
            credentials=SmtpCredentials(
                username=settings.sender_address,
                password=settings.sender_secret,
            ),
            host=settings.smtp_host,
            port=settings.smtp_port,
            timeout=settings.smtp_timeout,
        )


__all__ = ["EmailSenderFactory"]
