"""Sign-in providers."""
from typing import Any, Mapping, Optional

import bcrypt
from pydantic import BaseModel, Field, ValidationError
from sqlalchemy.orm import Session

from ..db.models import User
from ..utils.logger import get_logger

logger = get_logger("auth.providers")


class Credentials(BaseModel):
    """Email and password submitted by the sign-in form."""
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", description="Account email")
    password: str = Field(..., min_length=6, description="Plain-text password")


def hash_password(password: str) -> str:
    """Hash a plain-text password for storage."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plain-text password against a stored bcrypt hash."""
    return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))


class CredentialsProvider:
    """
    Email and password provider backed by the users table.

    ``authorize`` returns the matching user, or None for anything that
    should read as bad credentials.
    """

    name = "credentials"

    def authorize(self, form_data: Mapping[str, Any], db: Session) -> Optional[User]:
        """
        Look up and verify the user described by ``form_data``.

        Args:
            form_data: Raw sign-in form fields
            db: Database session

        Returns:
            The user on success, None otherwise
        """
        try:
            credentials = Credentials.model_validate(dict(form_data))
        except ValidationError:
            logger.info("Sign-in rejected: malformed credentials")
            return None

        user = db.query(User).filter(User.email == credentials.email).first()
        if not user:
            logger.info("Sign-in rejected: unknown user")
            return None

        if not verify_password(credentials.password, user.password):
            logger.info("Sign-in rejected: wrong password", extra={"extra": {"user_id": user.id}})
            return None

        return user
