"""Models related to the service desk login request and response."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class LoginPayload(BaseModel):
    """Body of ``POST /api/v1/login``."""

    user_name: str
    password: str


class UserInfoEntry(BaseModel):
    """One key/value attribute from the login response's ``info`` list.

    ``value`` is left as raw JSON; it only gets a concrete type once a
    caller asks for a specific key.
    """

    key: str
    value: Any = None
    value_caption: Optional[str] = Field(default=None, alias="valueCaption")


class LoginUser(BaseModel):
    info: List[UserInfoEntry]

    def info_map(self) -> Dict[str, Any]:
        """Collapses the attribute list into ``key -> value``; later keys win."""

        return {entry.key: entry.value for entry in self.info}


class LoginResponse(BaseModel):
    """Envelope returned by a successful login."""

    user: LoginUser


class Identity(BaseModel):
    """Identity attributes of the logged-in user."""

    model_config = ConfigDict(frozen=True)

    user_group_id: int
    user_name: str
    user_email: str
    session_id: str = ""
    goc_session: str = ""
