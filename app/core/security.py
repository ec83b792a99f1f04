"""Parent shared-secret authentication helpers."""
from __future__ import annotations

import secrets

from app.utils.exceptions import AuthenticationError, AuthorizationError


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token portion of an ``Authorization`` header value."""

    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return authorization.strip()
    return token.strip()


def verify_parent_secret(authorization: str | None, secret: str | None) -> None:
    """Raise unless ``authorization`` carries ``secret``.

    When no secret is configured every request is accepted.
    """

    if not secret:
        return
    token = extract_bearer_token(authorization)
    if token is None:
        raise AuthenticationError("Missing parent credentials")
    if not secrets.compare_digest(token.encode("utf-8"), secret.encode("utf-8")):
        raise AuthorizationError("Invalid parent credentials")
