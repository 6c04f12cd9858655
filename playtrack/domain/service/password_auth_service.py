"""Local (email + password) authentication domain service."""

import asyncio
import re
from datetime import date
from uuid import uuid4

import logfire

from playtrack.config import AuthSettings
from playtrack.domain.error import (
    DuplicateIdentityError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from playtrack.domain.model import User
from playtrack.domain.value import UserId
from playtrack.util.password import hash_password, verify_password

from .base import Service
from .user_service import UserService

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+$")


def canonicalize_email(email: str) -> str:
    """Canonical stored form of an email: trimmed and lowercased."""
    return email.strip().lower()


class PasswordAuthService(Service):
    """Registers and authenticates local accounts."""

    def __init__(self, user_service: UserService, auth_settings: AuthSettings) -> None:
        """Initialize password auth service.

        Args:
            user_service: User domain service
            auth_settings: Authentication settings (bcrypt rounds)
        """
        self.user_service = user_service
        self.auth_settings = auth_settings

    async def register(
        self,
        username: str | None,
        email: str | None,
        birthday: date | None,
        password: str | None,
    ) -> User:
        """Register a new local account.

        Args:
            username: Display name
            email: Email address, unique across accounts
            birthday: Date of birth
            password: Plain text password

        Returns:
            The created user

        Raises:
            ValidationError: If a field is missing or the email is malformed
            DuplicateIdentityError: If the email is already registered
        """
        if not username or not username.strip() or not email or not birthday or not password:
            raise ValidationError("Please add all fields")

        email = canonicalize_email(email)
        if not EMAIL_PATTERN.match(email):
            raise ValidationError(f"Invalid email: {email}")

        with logfire.span("password_auth_service.register", email=email):
            if await self.user_service.find_by_email(email):
                logfire.warn("Registration rejected - email taken", email=email)
                raise DuplicateIdentityError("email", email)

            password_hash = await asyncio.to_thread(
                hash_password, password, self.auth_settings.bcrypt_rounds
            )

            # The store's unique constraint still guards a concurrent registration
            return await self.user_service.create(
                User(
                    id=UserId(uuid4()),
                    username=username.strip(),
                    email=email,
                    birthday=birthday,
                    steam_id=None,
                    password_hash=password_hash,
                )
            )

    async def login(self, email: str | None, password: str | None) -> User:
        """Authenticate a local account.

        Args:
            email: Email address
            password: Plain text password

        Returns:
            The authenticated user, unchanged

        Raises:
            ValidationError: If a field is missing
            NotFoundError: If no account has this email
            InvalidCredentialsError: If the password does not match
        """
        if not email or not password:
            raise ValidationError("Please add all fields")

        email = canonicalize_email(email)

        with logfire.span("password_auth_service.login", email=email):
            user = await self.user_service.find_by_email(email)
            if not user:
                logfire.warn("Login rejected - unknown email", email=email)
                raise NotFoundError("User", email)

            matches = await asyncio.to_thread(
                verify_password, password, user.password_hash
            )
            if not matches:
                logfire.warn("Login rejected - bad password", user_id=str(user.id))
                raise InvalidCredentialsError()

            logfire.info("User logged in with password", user_id=str(user.id))
            return user
