from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional
from jose import jwt, JWTError

from vocab_app.config import get_settings


class TokenIssuer:
    """Mints and checks HS256 access tokens.

    The signing secret is handed in once at construction; callers never
    look configuration up themselves.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expires_minutes: int = 60 * 24):
        self._secret_key = secret_key
        self._algorithm = algorithm
        self.expires_minutes = expires_minutes

    @property
    def expires_in_seconds(self) -> int:
        return self.expires_minutes * 60

    def create_access_token(
        self,
        user_id: str,
        email: Optional[str] = None,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """Create a JWT access token."""
        if expires_delta is None:
            expires_delta = timedelta(minutes=self.expires_minutes)
        expire = datetime.now(timezone.utc) + expires_delta

        to_encode = {
            "sub": user_id,
            "exp": expire,
            "type": "access",
        }
        if email:
            to_encode["email"] = email
        return jwt.encode(to_encode, self._secret_key, algorithm=self._algorithm)

    def verify_token(self, token: str) -> Optional[dict]:
        """
        Verify and decode a JWT access token.

        Returns:
            dict with token payload if valid, None otherwise
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError:
            return None
        if payload.get("type") != "access" or not payload.get("sub"):
            return None
        return payload


@lru_cache
def get_token_issuer() -> TokenIssuer:
    settings = get_settings()
    return TokenIssuer(
        secret_key=settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        expires_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
    )
