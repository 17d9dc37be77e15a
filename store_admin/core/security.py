"""
Employee password derivation.

WHAT: One-way PBKDF2-HMAC derivation of employee passwords.

WHY: Stored employee passwords must never be recoverable. The derivation
parameters are fixed for the whole deployment: every stored hash was made
with the same iteration count, key length, digest and salt, so changing any
of them invalidates existing passwords.

HOW: PasswordHashingConfig holds the parameters; the iteration count, key
length and digest are compiled-in defaults and only the salt comes from
settings. A PasswordHasher is built once at startup and handed to
EmployeeService, which lets tests inject their own configuration.
"""

from dataclasses import dataclass
from typing import Optional

from passlib.crypto.digest import pbkdf2_hmac
from passlib.utils import consteq

from store_admin.core.config import settings


PBKDF2_ITERATIONS = 100
PBKDF2_KEY_LENGTH = 10
PBKDF2_DIGEST = "sha512"


@dataclass(frozen=True)
class PasswordHashingConfig:
    """
    Parameters of the password derivation.

    Fields:
    - salt: Deployment secret shared by all derivations
    - iterations: PBKDF2 round count
    - key_length: Derived key size in bytes (hex output is twice as long)
    - digest: HMAC digest name
    """

    salt: str
    iterations: int = PBKDF2_ITERATIONS
    key_length: int = PBKDF2_KEY_LENGTH
    digest: str = PBKDF2_DIGEST

    @classmethod
    def from_settings(cls) -> "PasswordHashingConfig":
        return cls(salt=settings.PASSWORD_SALT)


class PasswordHasher:
    """
    Derives and checks employee password hashes.

    Example:
        hasher = PasswordHasher(PasswordHashingConfig(salt="pepper"))
        stored = hasher.hash("S3cret!")
        hasher.verify("S3cret!", stored)  # True
    """

    def __init__(self, config: PasswordHashingConfig):
        self.config = config

    def hash(self, password: str) -> str:
        """
        Derive the stored form of a password.

        Args:
            password: Plain text password

        Returns:
            Lowercase hex digest, 2 * key_length characters
        """
        derived = pbkdf2_hmac(
            self.config.digest,
            password.encode("utf-8"),
            self.config.salt.encode("utf-8"),
            self.config.iterations,
            self.config.key_length,
        )
        return derived.hex()

    def verify(self, password: str, hashed: str) -> bool:
        """Constant-time comparison of a password against a stored hash."""
        return consteq(self.hash(password), hashed)


_default_hasher: Optional[PasswordHasher] = None


def get_password_hasher() -> PasswordHasher:
    """
    FastAPI dependency returning the process-wide hasher.

    Built lazily from settings on first use; tests replace it through
    app.dependency_overrides.
    """
    global _default_hasher
    if _default_hasher is None:
        _default_hasher = PasswordHasher(PasswordHashingConfig.from_settings())
    return _default_hasher
