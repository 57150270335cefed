"""API layer for the service desk login."""

from .auth_api import AuthAPI, classify_login_failure, extract_identity

__all__ = ["AuthAPI", "classify_login_failure", "extract_identity"]
