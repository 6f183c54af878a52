"""Email sender infrastructure layer - Concrete implementations.

このモジュールはメール送信機能の具体的な実装を提供します。
各実装はドメイン層のEmailSenderプロトコルを満たします。
"""

from .smtp_sender import SmtpCredentials, SmtpEmailSender
from .factory import EmailSenderFactory

__all__ = ["EmailSenderFactory", "SmtpCredentials", "SmtpEmailSender"]
