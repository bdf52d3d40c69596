"""Bearer token issuing for login and registration.

Tokens are opaque to clients and never verified or expired by this service.
Which scheme is used is chosen by TOKEN_SCHEME:

- plain:  TOKEN_PREFIX + username
- hash:   sha256(username + hwid + unix millis), hex
- stored: random hex generated once at registration and reused afterwards
- signed: HS256 JWT carrying sub, role and iat (no exp)
"""

import hashlib
import secrets
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import jwt

if TYPE_CHECKING:
    from fullbright.core.config import Settings

# Random bytes behind a stored token (hex doubles the length).
STORED_TOKEN_BYTES = 32
SIGNED_TOKEN_ALGORITHM = "HS256"


def plain_token(prefix: str, username: str) -> str:
    return prefix + username


def hashed_token(username: str, hwid: str | None, now: datetime) -> str:
    """One-way hash of username, hwid and the issue time in milliseconds."""
    stamp = str(int(now.timestamp() * 1000))
    material = f"{username}{hwid or ''}{stamp}".encode("utf-8")
    return hashlib.sha256(material).hexdigest()


def random_token() -> str:
    return secrets.token_hex(STORED_TOKEN_BYTES)


def signed_token(username: str, role: str, secret: str, now: datetime) -> str:
    """Create a JWT with sub (username), role and iat."""
    payload: dict[str, Any] = {
        "sub": username,
        "role": role,
        "iat": now,
    }
    return jwt.encode(payload, secret, algorithm=SIGNED_TOKEN_ALGORITHM)


def issue_token(
    settings: "Settings",
    username: str,
    hwid: str | None,
    role: str,
    existing: str | None = None,
    now: datetime | None = None,
) -> str:
    """
    Return the token to hand back after a successful login or registration.

    For the stored scheme, an existing token is returned unchanged; a new one is
    only generated when the account has none yet.
    """
    now = now or datetime.now(UTC)
    scheme = settings.TOKEN_SCHEME
    if scheme == "plain":
        return plain_token(settings.TOKEN_PREFIX, username)
    if scheme == "hash":
        return hashed_token(username, hwid, now)
    if scheme == "stored":
        return existing or random_token()
    if scheme == "signed":
        secret = settings.TOKEN_SECRET.get_secret_value() if settings.TOKEN_SECRET else ""
        return signed_token(username, role, secret, now)
    raise ValueError(f"Unknown token scheme: {scheme!r}")
