"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from taskdesk.domain.users.repositories import PasswordHasher
from taskdesk.shared.errors.base import OperationFailedError
from taskdesk.shared.logging import logger


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted scrypt digests; every call embeds a fresh random salt."""

    def __init__(self, method: str = "scrypt") -> None:
        self._method = method

    def hash(self, password: str) -> str:
        try:
            return str(generate_password_hash(password, method=self._method))
        except (ValueError, TypeError, OSError) as exc:
            logger.error(f"password hashing failed: {type(exc).__name__}")
            raise OperationFailedError("hash_password") from exc

    def verify(self, password: str, hashed: str) -> bool:
        if not password or not hashed:
            return False
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError):
            # Unknown method or garbled parameters in a stored digest.
            logger.warning("password verify: malformed digest")
            return False
