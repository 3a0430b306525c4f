"""
Security helpers for bearer-token authentication and role checks.

This module implements a lightweight JSON Web Token (JWT) mechanism
using HMAC‑SHA256 signatures and base64url encoding.  Tokens embed
the principal's email (``sub``), its role names (``roles``) and an
expiration timestamp (``exp``).  A secret key from the application
settings is used to sign and verify the token.

Every route is guarded by ``require_role``.  A request without a valid
token, or whose principal lacks the required role, is rejected with
HTTP 403; this API never answers 401.  Roles do not form a hierarchy:
a route that requires ``USER`` rejects a principal that only holds
``ADMIN``.
"""

import base64
import hashlib
import hmac
import json
import logging
import time
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings

logger = logging.getLogger(__name__)


class Role(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC‑SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """Create a signed JWT token with the given payload.

    The payload is extended with an ``exp`` field representing the
    expiration time as a UNIX timestamp.  Clients must include the
    token in the ``Authorization`` header as ``Bearer <token>``.

    Parameters
    ----------
    data : dict
        Claims to embed in the token, e.g.
        ``{"sub": "cgaucho@ucsb.edu", "roles": ["USER"]}``.
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.  Negative values
        produce an already expired token.

    Returns
    -------
    str
        A signed JWT token.
    """
    to_encode = data.copy()
    exp_seconds = expires_delta if expires_delta is not None else settings.access_token_expire_minutes * 60
    to_encode["exp"] = int(time.time()) + exp_seconds
    header = {"alg": "HS256", "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify and decode a JWT token.

    Returns the payload dictionary if the signature matches and the
    token has not expired, otherwise ``None``.
    """
    try:
        header_b64, payload_b64, signature_b64 = token.split(".")
    except ValueError:
        return None
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    expected_sig = _sign(signing_input, settings.secret_key)
    try:
        actual_sig = _b64_url_decode(signature_b64)
        if not hmac.compare_digest(expected_sig, actual_sig):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    if data.get("exp") is None or int(data["exp"]) < int(time.time()):
        return None
    return data


def normalize_roles(names: Iterable[str]) -> List[str]:
    """Map raw role names onto ``Role`` values.

    Names are upper-cased and a Spring-style ``ROLE_`` prefix is
    stripped, so ``"ROLE_ADMIN"``, ``"admin"`` and ``"ADMIN"`` are
    equivalent.  Unknown names are dropped.
    """
    known = {role.value for role in Role}
    roles: List[str] = []
    for name in names:
        value = str(name).upper()
        if value.startswith("ROLE_"):
            value = value[len("ROLE_"):]
        if value in known and value not in roles:
            roles.append(value)
    return roles


security = HTTPBearer(auto_error=False)


def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[Dict[str, Any]]:
    """Dependency that resolves the authenticated principal, if any.

    Returns ``None`` for anonymous requests and for tokens that are
    malformed, tampered with or expired.  The returned payload has its
    ``roles`` claim normalised and, for emails listed in
    ``settings.admin_emails``, extended with ``ADMIN``.
    """
    if credentials is None:
        return None
    payload = decode_access_token(credentials.credentials)
    if payload is None:
        logger.debug("Rejected invalid or expired bearer token")
        return None
    raw_roles = payload.get("roles") or []
    if isinstance(raw_roles, str):
        raw_roles = [raw_roles]
    roles = normalize_roles(raw_roles)
    email = str(payload.get("sub") or "").lower()
    if email and email in settings.admin_emails and Role.ADMIN.value not in roles:
        roles.append(Role.ADMIN.value)
    payload["roles"] = roles
    return payload


def require_role(role: Role) -> Callable[..., Dict[str, Any]]:
    """Dependency factory enforcing that the principal holds ``role``.

    Use it in endpoints as ``Depends(require_role(Role.ADMIN))``.  Both a
    missing principal and a principal without the role yield HTTP 403.
    """

    def _role_dependency(
        principal: Optional[Dict[str, Any]] = Depends(get_current_principal),
    ) -> Dict[str, Any]:
        if principal is None or role.value not in principal.get("roles", []):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
        return principal

    return _role_dependency
