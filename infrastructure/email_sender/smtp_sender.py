"""SMTP email sender implementation - Infrastructure layer.

このモジュールはSMTPプロトコルを使用したメール送信の実装を提供します。
Flask-Mailmanの接続（暗黙的TLS, SMTP_SSL）を使用し、
認証情報は SmtpCredentials として明示的に受け渡します。
"""

from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass, field
from typing import Optional

from flask_mailman import EmailMessage as FlaskEmailMessage
from flask_mailman import Mail

from domain.email_sender import EmailMessage, SendResult


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SmtpCredentials:
    """SMTPログイン用の認証情報."""

    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class SmtpEmailSender:
    """SMTPを使用したメール送信実装.

    送信ごとに新しい接続を開き、1回だけ送信を試みます（リトライなし）。
    接続・認証・プロトコルの失敗は SendResult.transport_error として返します。

    Attributes:
        mail: Flask-Mailmanインスタンス
        credentials: SMTP認証情報
        host: SMTPサーバー
        port: SMTPポート（暗黙的TLS）
        timeout: ソケットタイムアウト（秒）
    """

    mail: Mail
    credentials: SmtpCredentials
    host: str = "smtp.gmail.com"
    port: int = 465
    timeout: float = 30.0
    _logger: logging.Logger = field(default=logger, repr=False, compare=False)

    def send(self, message: EmailMessage) -> SendResult:
        """SMTPでメールを送信する.

        Args:
            message: 送信するメールメッセージ

        Returns:
            SendResult: 送信結果

        Raises:
            Exception: トランスポート以外のエラー（ヘッダー不正など）
        """
        connection = self.mail.get_connection(
            fail_silently=False,
            host=self.host,
            port=self.port,
            username=self.credentials.username,
            password=self.credentials.password,
            use_ssl=True,
            use_tls=False,
            timeout=self.timeout,
        )
        mail_message = self._to_flask_message(message, connection)

        try:
            sent = mail_message.send(fail_silently=False)
        except (smtplib.SMTPException, OSError) as exc:
            detail = self._describe_error(exc)
            self._logger.error(
                f"Failed to send email via SMTP: {detail}",
                extra={
                    "event": "email.smtp.error",
                    "to": message.to,
                    "subject": message.subject,
                    "error": detail,
                },
            )
            return SendResult.transport_error(detail)

        if not sent:
            detail = "SMTP server did not accept the message"
            self._logger.error(
                detail,
                extra={"event": "email.smtp.error", "to": message.to, "subject": message.subject},
            )
            return SendResult.transport_error(detail)

        self._logger.info(
            "Email sent successfully via SMTP",
            extra={
                "event": "email.smtp.sent",
                "to": message.to,
                "subject": message.subject,
            },
        )
        return SendResult.success()

    def validate_config(self) -> bool:
        """SMTP設定が有効かどうかを検証する.

        Returns:
            bool: サーバーと認証情報が揃っている場合True
        """
        if not self.host:
            self._logger.warning("SMTP host is not configured")
            return False
        if not (self.credentials.username and self.credentials.password):
            self._logger.warning("SMTP credentials are not configured")
            return False
        return True

    def _to_flask_message(self, message: EmailMessage, connection) -> FlaskEmailMessage:
        """ドメインメッセージをFlask-Mailmanメッセージに変換."""
        return FlaskEmailMessage(
            subject=message.subject,
            body=message.body,
            from_email=message.formatted_from or self.credentials.username,
            to=list(message.to),
            reply_to=self._normalize_reply_to(message.reply_to),
            connection=connection,
        )

    def _describe_error(self, exc: BaseException) -> str:
        """ログ用のエラー説明。パスワードは含めない."""
        text = f"{exc.__class__.__name__}: {exc}"
        if self.credentials.password:
            text = text.replace(self.credentials.password, "***")
        return text

    @staticmethod
    def _normalize_reply_to(reply_to: Optional[str]) -> list[str]:
        """reply_to をリスト形式に正規化.

        値はそのまま渡す。Flask-Mailman は非ASCIIのドメインをIDNAで変換するが、
        非ASCIIのローカル部はRFC 2047でエンコードされ返信先として使えない
        （SMTPUTF8は使用しない）。
        """
        if reply_to:
            return [reply_to]
        return []


__all__ = ["SmtpCredentials", "SmtpEmailSender"]
