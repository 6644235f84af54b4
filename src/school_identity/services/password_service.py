"""Password hashing service using PBKDF2-HMAC-SHA256.

Provides salted, iterated password hashing and constant-time verification.
Hashes are self-contained strings of the form::

    pbkdf2_sha256$<iterations>$<base64 salt>$<base64 derived key>
"""

import base64
import binascii
import secrets

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from school.domain.shared.exceptions import ValidationError


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> encoded = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", encoded)
    True
    >>> service.verify("wrong_password", encoded)
    False
    """

    ALGORITHM = "pbkdf2_sha256"
    SALT_BYTES = 16
    KEY_BYTES = 32
    DEFAULT_ITERATIONS = 100_000
    MIN_ITERATIONS = 10_000

    def __init__(self, iterations: int = DEFAULT_ITERATIONS):
        """Initialize the password hashing service.

        Parameters
        ----------
        iterations
            PBKDF2 iteration count. Higher values are slower to compute
            and therefore harder to brute force.

        Raises
        ------
        ValueError
            If the iteration count is below MIN_ITERATIONS
        """
        if iterations < self.MIN_ITERATIONS:
            msg = f"Iteration count must be at least {self.MIN_ITERATIONS}"
            raise ValueError(msg)
        self._iterations = iterations

    @property
    def iterations(self) -> int:
        return self._iterations

    def hash(self, password: str) -> str:
        """Hash a plaintext password with a fresh random salt.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The encoded hash string

        Raises
        ------
        ValidationError
            If password is empty
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValidationError(msg)

        salt = secrets.token_bytes(self.SALT_BYTES)
        key = self._kdf(salt, self._iterations).derive(password.encode("utf-8"))

        return "$".join(
            (
                self.ALGORITHM,
                str(self._iterations),
                base64.b64encode(salt).decode("ascii"),
                base64.b64encode(key).decode("ascii"),
            )
        )

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against an encoded hash.

        Never raises: malformed hashes simply fail verification.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The encoded hash to verify against

        Returns
        -------
        True if password matches, False otherwise
        """
        if not password or not password_hash:
            return False

        parsed = self._parse(password_hash)
        if parsed is None:
            return False

        iterations, salt, expected_key = parsed
        try:
            # PBKDF2HMAC.verify compares in constant time
            self._kdf(salt, iterations).verify(password.encode("utf-8"), expected_key)
        except InvalidKey:
            return False
        return True

    def needs_rehash(self, password_hash: str) -> bool:
        """Check if a password hash was produced with other parameters.

        Useful after raising the iteration count: outdated hashes can be
        regenerated on the user's next successful login.
        """
        parsed = self._parse(password_hash)
        if parsed is None:
            return True
        return parsed[0] != self._iterations

    def _kdf(self, salt: bytes, iterations: int) -> PBKDF2HMAC:
        return PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=self.KEY_BYTES,
            salt=salt,
            iterations=iterations,
        )

    def _parse(self, password_hash: str) -> tuple[int, bytes, bytes] | None:
        parts = password_hash.split("$")
        if len(parts) != 4 or parts[0] != self.ALGORITHM:
            return None

        try:
            iterations = int(parts[1])
            salt = base64.b64decode(parts[2], validate=True)
            key = base64.b64decode(parts[3], validate=True)
        except (ValueError, binascii.Error):
            return None

        if iterations < self.MIN_ITERATIONS:
            return None
        if len(salt) != self.SALT_BYTES or len(key) != self.KEY_BYTES:
            return None

        return iterations, salt, key
