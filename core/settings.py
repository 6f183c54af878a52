"""Centralised settings for the contact relay.

This module exposes :class:`ContactRelaySettings`, the immutable configuration
value built once at process start, and :func:`load_settings` which resolves it
from the ``config.properties`` file with an environment-variable fallback.

Production code passes the resulting instance explicitly into
:func:`webapp.create_app`; tests build their own instances directly or call
:func:`load_settings` with a dedicated mapping instead of ``os.environ``.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import dotenv_values


logger = logging.getLogger(__name__)

CONFIG_FILE = "config.properties"

SENDER_USER_KEY = "GMAIL_USER"
SENDER_PASSWORD_KEY = "GMAIL_APP_PASSWORD"

_DEFAULT_HOST = "0.0.0.0"
_DEFAULT_PORT = 5000
_DEFAULT_SMTP_HOST = "smtp.gmail.com"
_DEFAULT_SMTP_PORT = 465
_DEFAULT_SMTP_TIMEOUT = 30.0
_DEFAULT_SENDER_NAME = "Portfolio Alert Service"
_DEFAULT_LOG_LEVEL = "INFO"

SOURCE_FILE = "file"
SOURCE_ENVIRONMENT = "environment"


class FatalConfigError(RuntimeError):
    """Raised when sender credentials cannot be resolved at startup."""

    def __init__(self, missing: tuple[str, ...], config_path: Union[str, Path]):
        self.missing = missing
        self.config_path = str(config_path)
        super().__init__(
            "Email credentials ({}) are missing. Check {} or set environment "
            "variables before running!".format(" or ".join(missing), self.config_path)
        )


@dataclass(frozen=True)
class ContactRelaySettings:
    """Immutable process configuration.

    Attributes:
        sender_address: SMTP login and ``From`` address.
        sender_secret: SMTP app password. Never logged.
        receiver_address: Fixed recipient of every contact email.
        listen_host: Interface the HTTP listener binds to.
        listen_port: TCP port the HTTP listener binds to.
        smtp_host: Implicit-TLS SMTP server host.
        smtp_port: Implicit-TLS SMTP server port.
        smtp_timeout: Socket timeout in seconds for the SMTP session.
        sender_name: Display name used in the ``From`` header.
        log_level: Name of the logging level for the application logger.
        config_path: Properties file that was checked.
        source: ``"file"`` or ``"environment"``, whichever provided credentials.
    """

    sender_address: str
    sender_secret: str
    receiver_address: str
    listen_host: str = _DEFAULT_HOST
    listen_port: int = _DEFAULT_PORT
    smtp_host: str = _DEFAULT_SMTP_HOST
    smtp_port: int = _DEFAULT_SMTP_PORT
    smtp_timeout: float = _DEFAULT_SMTP_TIMEOUT
    sender_name: str = _DEFAULT_SENDER_NAME
    log_level: str = _DEFAULT_LOG_LEVEL
    config_path: str = CONFIG_FILE
    source: str = SOURCE_FILE

    def __repr__(self) -> str:
        return (
            f"ContactRelaySettings(sender_address={self.sender_address!r}, "
            f"sender_secret='***', receiver_address={self.receiver_address!r}, "
            f"listen_port={self.listen_port}, smtp_host={self.smtp_host!r}, "
            f"smtp_port={self.smtp_port}, source={self.source!r})"
        )


def _read_properties(path: Path) -> dict[str, Optional[str]]:
    """Parse a ``KEY=VALUE`` properties file. Raises ``OSError`` or ``UnicodeDecodeError`` when unreadable."""

    with path.open("r", encoding="utf-8") as stream:
        return dict(dotenv_values(stream=stream, interpolate=False))


class _LayeredSource:
    """Lookup helper: properties file first, then the environment."""

    def __init__(self, file_values: Mapping[str, Optional[str]], environ: Mapping[str, str]):
        self._file = file_values
        self._env = environ

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._file.get(key)
        if value:
            return value
        value = self._env.get(key)
        if value:
            return value
        return default

    def get_int(self, key: str, default: int) -> int:
        raw = self.get(key)
        if raw is None:
            return default
        try:
            return int(raw.strip())
        except ValueError:
            logger.warning(
                "Invalid integer for %s: %r, using %s",
                key,
                raw,
                default,
                extra={"event": "settings.invalid_value", "key": key},
            )
            return default

    def get_float(self, key: str, default: float) -> float:
        raw = self.get(key)
        if raw is None:
            return default
        try:
            return float(raw.strip())
        except ValueError:
            logger.warning(
                "Invalid number for %s: %r, using %s",
                key,
                raw,
                default,
                extra={"event": "settings.invalid_value", "key": key},
            )
            return default


def load_settings(
    config_path: Union[str, Path, None] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ContactRelaySettings:
    """Resolve the process configuration.

    Credentials come from the properties file when it can be read; only when
    reading fails are the environment variables of the same names used.
    Optional keys are looked up in the file, then the environment.

    Raises:
        FatalConfigError: when either credential is empty after resolution.
    """

    path = Path(config_path) if config_path is not None else Path(CONFIG_FILE)
    env = os.environ if environ is None else environ

    try:
        file_values = _read_properties(path)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(
            "Config file not found or failed to load (%s). Falling back to environment variables.",
            exc.__class__.__name__,
            extra={"event": "settings.env_fallback", "path": str(path)},
        )
        file_values = {}
        sender = env.get(SENDER_USER_KEY) or ""
        secret = env.get(SENDER_PASSWORD_KEY) or ""
        source = SOURCE_ENVIRONMENT
    else:
        logger.info(
            "Config loaded successfully from %s",
            path,
            extra={"event": "settings.file_loaded", "path": str(path)},
        )
        sender = file_values.get(SENDER_USER_KEY) or ""
        secret = file_values.get(SENDER_PASSWORD_KEY) or ""
        source = SOURCE_FILE

    missing = tuple(
        key
        for key, value in ((SENDER_USER_KEY, sender), (SENDER_PASSWORD_KEY, secret))
        if not value
    )
    if missing:
        raise FatalConfigError(missing, path)

    layered = _LayeredSource(file_values, env)
    return ContactRelaySettings(
        sender_address=sender,
        sender_secret=secret,
        receiver_address=layered.get("CONTACT_RECEIVER_EMAIL", sender),
        listen_host=layered.get("HOST", _DEFAULT_HOST),
        listen_port=layered.get_int("PORT", _DEFAULT_PORT),
        smtp_host=layered.get("SMTP_HOST", _DEFAULT_SMTP_HOST),
        smtp_port=layered.get_int("SMTP_PORT", _DEFAULT_SMTP_PORT),
        smtp_timeout=layered.get_float("SMTP_TIMEOUT", _DEFAULT_SMTP_TIMEOUT),
        sender_name=layered.get("CONTACT_SENDER_NAME", _DEFAULT_SENDER_NAME),
        log_level=layered.get("LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper(),
        config_path=str(path),
        source=source,
    )


__all__ = [
    "CONFIG_FILE",
    "ContactRelaySettings",
    "FatalConfigError",
    "SENDER_PASSWORD_KEY",
    "SENDER_USER_KEY",
    "load_settings",
]
