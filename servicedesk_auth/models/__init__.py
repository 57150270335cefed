"""Data models for configuration and authentication."""

from .auth_models import Identity, LoginPayload, LoginResponse, LoginUser, UserInfoEntry
from .settings_models import AppSettings, ServiceDeskConfig, TopDeskConfig

__all__ = [
    "AppSettings",
    "ServiceDeskConfig",
    "TopDeskConfig",
    "LoginPayload",
    "UserInfoEntry",
    "LoginUser",
    "LoginResponse",
    "Identity",
]
