from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .api.auth_api import AuthAPI
from .errors import AuthError, ManualLoginRequiredError
from .models import AppSettings, Identity
from .utils.config_loader import ConfigError, default_config_path, load_settings
from .utils.http_client import HttpClient

EXIT_OK = 0
# 2 is left to argparse usage errors
EXIT_CONFIG_ERROR = 3
EXIT_AUTH_ERROR = 4
EXIT_MANUAL_LOGIN = 5


def _env_str(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value


def _env_float(name: str) -> float | None:
    value = _env_str(name)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Log in to the service desk and print the user's identity.")
    parser.add_argument(
        "--config",
        default=_env_str("SD_CONFIG_PATH") or default_config_path(),
        help="Path to appsettings.json (default: ./Data/Configs/appsettings.json)",
    )
    parser.add_argument("--log-level", default=_env_str("LOG_LEVEL") or "INFO", help="Logging level")
    parser.add_argument(
        "--timeout",
        type=float,
        default=_env_float("SD_HTTP_TIMEOUT"),
        help="HTTP timeout in seconds (default: none)",
    )
    return parser.parse_args(argv)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def print_settings(settings: AppSettings) -> None:
    logging.info("Settings loaded:")
    for label, value in settings.summary().items():
        logging.info("  %-20s %s", label + ":", value)


def print_identity(identity: Identity) -> None:
    logging.info("User group id: %s", identity.user_group_id)
    logging.info("User name:     %s", identity.user_name)
    logging.info("User e-mail:   %s", identity.user_email)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        settings = load_settings(args.config)
    except ConfigError as exc:
        logging.error("Could not load settings: %s", exc)
        return EXIT_CONFIG_ERROR

    print_settings(settings)

    with HttpClient(timeout=args.timeout) as http_client:
        auth_api = AuthAPI(settings, http_client=http_client)
        try:
            identity = auth_api.login()
        except ManualLoginRequiredError as exc:
            logging.error("%s", exc)
            logging.error("Open %s in a browser, log in once, then run this again.", auth_api.base_url)
            return EXIT_MANUAL_LOGIN
        except AuthError as exc:
            logging.error("Login failed: %s", exc)
            return EXIT_AUTH_ERROR

    print_identity(identity)
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
