"""JWT token service.

Provides JWT token creation and verification for authentication.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import jwt

from school_identity.domain.user import User, UserRole
from school_identity.exceptions import InvalidTokenError
from school_identity.schemas import TokenPayload


class JWTService:
    """Service for JWT token creation and verification.

    Tokens are signed with HS256 and carry the user's identity and role.
    Verification checks signature, issuer, audience and expiry without
    any clock-skew tolerance.

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key", issuer="school",
    ...                      audience="school-api")
    >>> token = service.create_access_token(user)
    >>> payload = service.verify_token(token)
    >>> print(payload.role)
    """

    DEFAULT_EXPIRE_MINUTES = 60
    ALGORITHM = "HS256"
    REQUIRED_CLAIMS = ("sub", "uid", "role", "jti", "iss", "aud", "exp")

    def __init__(
        self,
        secret_key: str,
        issuer: str,
        audience: str,
        expire_minutes: int = DEFAULT_EXPIRE_MINUTES,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        issuer
            Value of the ``iss`` claim, checked on verification
        audience
            Value of the ``aud`` claim, checked on verification
        expire_minutes
            Minutes until a token expires (default 60)
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)
        if expire_minutes <= 0:
            msg = "Token expiry must be a positive number of minutes"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._issuer = issuer
        self._audience = audience
        self._expire = timedelta(minutes=expire_minutes)

    @property
    def expire_seconds(self) -> int:
        return int(self._expire.total_seconds())

    def create_access_token(
        self,
        user: User,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a signed access token for a user.

        Parameters
        ----------
        user
            The authenticated user
        expires_delta
            Custom expiration time (optional)

        Returns
        -------
        The encoded JWT token string
        """
        now = datetime.now(tz=timezone.utc)
        expire = now + (expires_delta or self._expire)

        payload = {
            "sub": user.username,
            "email": user.email,
            "uid": str(user.id),
            "name": user.username,
            "role": user.role.value,
            "jti": uuid4().hex,
            "iss": self._issuer,
            "aud": self._audience,
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                leeway=0,
                options={"require": list(self.REQUIRED_CLAIMS)},
            )

            return TokenPayload(
                user_id=UUID(payload["uid"]),
                username=payload["sub"],
                email=payload.get("email", ""),
                role=UserRole(payload["role"]),
                token_id=payload["jti"],
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
