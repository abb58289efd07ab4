"""Password hashing and avatar helpers."""

import hashlib
from urllib.parse import urlencode

import bcrypt

from core.config import settings

# bcrypt rejects longer input
MAX_PASSWORD_BYTES = 72

GRAVATAR_BASE_URL = "//www.gravatar.com/avatar/"
# size 200px, PG rating, "mystery man" fallback
GRAVATAR_OPTIONS = {"s": "200", "r": "pg", "d": "mm"}


def password_fits(password: str) -> bool:
    """Check the UTF-8 encoded password is within bcrypt's limit."""
    return len(password.encode("utf-8")) <= MAX_PASSWORD_BYTES


def hash_password(password: str, rounds: int | None = None) -> str:
    """Create a salted bcrypt hash of the password.

    Callers must check ``password_fits`` first.
    """
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, stored_hash: str | None) -> bool:
    # Over-long candidates can never match a stored hash
    if not stored_hash or not password_fits(password):
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), stored_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash
        return False


def gravatar_url(email: str, options: dict[str, str] | None = None) -> str:
    """Derive the Gravatar URL for an email address.

    The hash is taken over the trimmed, lower-cased address, so the result
    depends on nothing but the email and the options.
    """
    digest = hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()
    query = urlencode(options if options is not None else GRAVATAR_OPTIONS)
    return f"{GRAVATAR_BASE_URL}{digest}?{query}"
