"""Flask configuration derived from :class:`core.settings.ContactRelaySettings`."""

from core.settings import ContactRelaySettings


class BaseApplicationSettings:
    """Static Flask configuration shared by every instance."""

    JSON_AS_ASCII = False
    # Flask-Mailman: implicit TLS only, never STARTTLS
    MAIL_USE_SSL = True
    MAIL_USE_TLS = False


def mail_config(settings: ContactRelaySettings) -> dict:
    """Return the non-secret ``MAIL_*`` keys for Flask-Mailman.

    The credentials are handed to each connection explicitly and are
    intentionally absent from ``app.config``.
    """

    return {
        "MAIL_SERVER": settings.smtp_host,
        "MAIL_PORT": settings.smtp_port,
        "MAIL_TIMEOUT": settings.smtp_timeout,
        "MAIL_DEFAULT_SENDER": settings.sender_address,
    }
