from __future__ import annotations

import hmac
from typing import Optional, Protocol

from fastapi import Depends, Header

from .config import get_settings
from .errors import AuthenticationError


class TokenVerifier(Protocol):
    def verify(self, token: str) -> bool:
        ...


class StaticTokenVerifier:
    """Accepts exactly one shared secret."""

    def __init__(self, secret: str) -> None:
        self._secret = secret

    def verify(self, token: str) -> bool:
        return hmac.compare_digest(token.encode(), self._secret.encode())


def get_token_verifier() -> TokenVerifier:
    return StaticTokenVerifier(get_settings().auth_token)


def extract_token(authorization: Optional[str]) -> Optional[str]:
    """Return the second whitespace-separated part of the header, e.g. ``Bearer <token>``."""
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) < 2:
        return None
    return parts[1]


def require_bearer_token(
    authorization: Optional[str] = Header(default=None),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> None:
    # Missing and wrong tokens get the same response.
    token = extract_token(authorization)
    if token is None or not verifier.verify(token):
        raise AuthenticationError()
