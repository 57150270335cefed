"""Service desk login and identity extraction."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError
import requests

from ..errors import (
    AuthError,
    AuthenticationFailedError,
    ManualLoginRequiredError,
    ResponseDecodeError,
    UserInfoMissingError,
)
from ..models import AppSettings, Identity, LoginPayload, LoginResponse
from ..utils.http_client import HttpClient

LOGIN_PATH = "api/v1/login?user"

# Portuguese only: the service desk gives no error code for this case.
MANUAL_LOGIN_PHRASES = (
    "informações de acesso incorretas.",
    "as palavras devem ser escritas na caixa correta.",
    "certifique-se de que a tecla caps lock não esteja ligada.",
)

NAME_FALLBACK = "Nome não encontrado"
EMAIL_FALLBACK = "E-mail não encontrado"

SESSION_ID_COOKIE = "JSESSIONID"
GOC_SESSION_COOKIE = "GOC_SESSION"


def classify_login_failure(body: str, status_code: Optional[int] = None) -> AuthError:
    """Maps a rejected login body to the matching error."""

    lowered = body.lower()
    if all(phrase in lowered for phrase in MANUAL_LOGIN_PHRASES):
        return ManualLoginRequiredError(body)
    return AuthenticationFailedError(body, status_code=status_code)


def _response_text(response: requests.Response) -> str:
    # requests falls back to ISO-8859-1 for text/* without a charset
    if "charset" not in response.headers.get("content-type", "").lower():
        response.encoding = "utf-8"
    return response.text


def _first_group_id(value: Any) -> int:
    if not isinstance(value, list) or not value:
        return 0
    first = value[0]
    if not isinstance(first, dict):
        return 0
    group_id = first.get("id")
    if isinstance(group_id, bool) or not isinstance(group_id, int) or group_id < 0:
        return 0
    return group_id


def _string_or(value: Any, fallback: str) -> str:
    return value if isinstance(value, str) else fallback


def extract_identity(
    info: Dict[str, Any],
    session_id: str = "",
    goc_session: str = "",
) -> Identity:
    """Builds an :class:`Identity` from the flattened ``info`` attributes.

    ``user_groups`` shape mismatches fall back to group id 0, which is then
    rejected. Missing name or e-mail only produce placeholder strings.
    """

    user_group_id = _first_group_id(info.get("user_groups"))
    if user_group_id == 0:
        logging.warning("No user group found in the login response.")
        raise UserInfoMissingError("Could not read the user group id.")

    return Identity(
        user_group_id=user_group_id,
        user_name=_string_or(info.get("first_name"), NAME_FALLBACK),
        user_email=_string_or(info.get("email_address"), EMAIL_FALLBACK),
        session_id=session_id,
        goc_session=goc_session,
    )


class AuthAPI:
    """Logs a configured user into the service desk.

    Identity attributes stay empty until :meth:`login` succeeds; a failed
    login leaves them untouched.
    """

    def __init__(self, settings: AppSettings, http_client: Optional[HttpClient] = None) -> None:
        self._settings = settings
        self._owns_client = http_client is None
        self.http_client = http_client or HttpClient()
        self.base_url = settings.service_desk_url.rstrip("/")

        self.identity: Optional[Identity] = None
        self.session_id = ""
        self.goc_session = ""
        self.user_group_id = 0
        self.user_name = ""
        self.user_email = ""

    @property
    def login_url(self) -> str:
        return f"{self.base_url}/{LOGIN_PATH}"

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    def login(self) -> Identity:
        payload = LoginPayload(
            user_name=self._settings.service_desk.username,
            password=self._settings.service_desk.password,
        )
        url = self.login_url
        logging.info("Authenticating against the service desk at %s", url)

        response = self.http_client.post_json(url, payload.model_dump())
        if not 200 <= response.status_code < 300:
            error = classify_login_failure(_response_text(response), status_code=response.status_code)
            logging.error("Login rejected (status %s): %s", response.status_code, type(error).__name__)
            raise error

        login_response = self._decode(response)
        identity = extract_identity(
            login_response.user.info_map(),
            session_id=self.http_client.cookie_value(SESSION_ID_COOKIE),
            goc_session=self.http_client.cookie_value(GOC_SESSION_COOKIE),
        )
        self._commit(identity)
        logging.info("Login succeeded for %s (group=%s)", identity.user_name, identity.user_group_id)
        return identity

    def _decode(self, response: requests.Response) -> LoginResponse:
        try:
            return LoginResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logging.error("Unexpected login response body: %s", exc)
            raise ResponseDecodeError(str(exc)) from exc

    def _commit(self, identity: Identity) -> None:
        self.identity = identity
        self.session_id = identity.session_id
        self.goc_session = identity.goc_session
        self.user_group_id = identity.user_group_id
        self.user_name = identity.user_name
        self.user_email = identity.user_email

    def close(self) -> None:
        if self._owns_client:
            self.http_client.close()

    def __enter__(self) -> "AuthAPI":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
