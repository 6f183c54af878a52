# webapp/__init__.py
import logging
from typing import Optional

from flask import Flask

from application.contact import ContactService
from core.logging_config import configure_logging
from core.settings import ContactRelaySettings
from domain.email_sender import EmailSender
from infrastructure.email_sender import EmailSenderFactory

from .extensions import mail


def create_app(
    settings: ContactRelaySettings,
    sender: Optional[EmailSender] = None,
) -> Flask:
    """アプリケーションファクトリ

    Args:
        settings: 起動時に構築した不変の設定
        sender: メール送信実装（テストではフェイクを注入）
    """
    from .config import BaseApplicationSettings, mail_config

    app = Flask(__name__)
    app.config.from_object(BaseApplicationSettings)
    app.config.update(mail_config(settings))

    # ロギング設定
    root_logger = configure_logging(settings.log_level)
    app.logger.setLevel(root_logger.level)

    # 拡張初期化
    mail.init_app(app)

    if sender is None:
        sender = EmailSenderFactory.create(settings, mail)
    service = ContactService(settings=settings, sender=sender)
    if not service.can_send_emails():
        app.logger.warning(
            "Email sender configuration looks incomplete",
            extra={"event": "email.config.invalid"},
        )

    from .contact import routes as contact_routes

    app.extensions[contact_routes.EXTENSION_KEY] = service

    # Blueprint 登録
    from .contact import bp as contact_bp
    from .contact.cors import register_cors
    from .health import health_bp

    app.register_blueprint(contact_bp)
    register_cors(app, contact_routes.CONTACT_PATH)
    app.register_blueprint(health_bp)

    from .error_handlers import register_error_handlers

    register_error_handlers(app)

    return app
