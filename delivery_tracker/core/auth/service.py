from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

from jose import jwt, JWTError

from delivery_tracker.config.settings import Settings
from delivery_tracker.core.exceptions import InvalidCredentialsError
from .schemas import TokenPayload

logger = logging.getLogger(__name__)

class AuthService:
    """Token issuing for the single configured credential pair"""

    def __init__(self, settings: Settings):
        self.settings = settings

    def credentials_match(self, username: str, password: str) -> bool:
        # Literal comparison, no hashing
        return username == self.settings.auth_username and password == self.settings.auth_password

    def create_access_token(self, subject: str, issued_at: Optional[datetime] = None) -> str:
        """Sign a token with sub, iat and exp claims"""
        issued_at = issued_at or datetime.now(timezone.utc)
        expire = issued_at + timedelta(seconds=self.settings.access_token_expire_seconds)

        to_encode = {
            "sub": subject,
            "iat": issued_at,
            "exp": expire,
        }
        return jwt.encode(to_encode, self.settings.secret_key, algorithm=self.settings.algorithm)

    def login(self, username: str, password: str) -> str:
        if not self.credentials_match(username, password):
            logger.warning(f"Rejected login for '{username}'")
            raise InvalidCredentialsError("Invalid username or password")

        logger.info(f"Issued token for '{username}'")
        return self.create_access_token(username)

    def verify_token(self, token: str) -> Optional[TokenPayload]:
        """Verify and decode a token, None when invalid or expired"""
        try:
            payload = jwt.decode(token, self.settings.secret_key, algorithms=[self.settings.algorithm])
        except JWTError:
            return None
        return TokenPayload(**payload)
