"""Password hashing helpers (one-way, salted)."""
from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.constants import DEFAULT_PASSWORD_HASH_METHOD, PASSWORD_SALT_LENGTH
from ..core.exceptions import HashingError


def hash_password(secret: str, *, method: str = DEFAULT_PASSWORD_HASH_METHOD) -> str:
    """Return a salted hash of ``secret``; the same input never hashes twice to the same value."""
    try:
        return generate_password_hash(secret, method=method, salt_length=PASSWORD_SALT_LENGTH)
    except (ValueError, TypeError, NotImplementedError, OSError) as exc:
        # Unknown algorithm or no randomness source: not recoverable for this request.
        raise HashingError(f"Falha ao gerar hash da senha ({method})") from exc


def verify_password(secret: str, hashed: str) -> bool:
    try:
        return check_password_hash(hashed, secret)
    except (ValueError, TypeError):
        # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
        return False


class PasswordHasher:
    """Callable hasher bound to one method, injected into services."""

    def __init__(self, method: str = DEFAULT_PASSWORD_HASH_METHOD):
        self._method = method

    def __call__(self, secret: str) -> str:
        return hash_password(secret, method=self._method)
