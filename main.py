"""Process entry point: load settings, bind the listener, serve."""

import argparse
import logging
import sys
from dataclasses import replace
from typing import Optional, Sequence

from dotenv import load_dotenv
from werkzeug.serving import make_server

from core.logging_config import configure_logging
from core.settings import (
    CONFIG_FILE,
    SENDER_PASSWORD_KEY,
    SENDER_USER_KEY,
    FatalConfigError,
    load_settings,
)
from webapp import create_app


logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="contact-relay",
        description="Relay portfolio contact-form submissions to a mailbox over SMTP.",
    )
    parser.add_argument(
        "--config",
        default=CONFIG_FILE,
        help=f"properties file with {SENDER_USER_KEY} and {SENDER_PASSWORD_KEY} (default: %(default)s)",
    )
    parser.add_argument("--port", type=int, default=None, help="override the listening port")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)

    # .env を読み込む（環境変数が未設定の場合のみ）
    load_dotenv()
    configure_logging()

    try:
        settings = load_settings(args.config)
    except FatalConfigError as exc:
        print(f"FATAL ERROR: {exc}", file=sys.stderr)
        print(
            f"Checked: {exc.config_path}, then environment variables "
            f"{SENDER_USER_KEY} / {SENDER_PASSWORD_KEY}",
            file=sys.stderr,
        )
        return 1

    if args.port is not None:
        settings = replace(settings, listen_port=args.port)

    app = create_app(settings)

    try:
        server = make_server(settings.listen_host, settings.listen_port, app, threaded=True)
    except OSError as exc:
        logger.error(
            "Could not bind %s:%s: %s",
            settings.listen_host,
            settings.listen_port,
            exc,
            extra={"event": "app.bind_error"},
        )
        print(f"FATAL ERROR: could not bind port {settings.listen_port}: {exc}", file=sys.stderr)
        return 1

    logger.info(
        "Contact server running on http://%s:%s/contact",
        settings.listen_host,
        settings.listen_port,
        extra={"event": "app.startup", "port": settings.listen_port},
    )
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down", extra={"event": "app.shutdown"})
    finally:
        server.server_close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
