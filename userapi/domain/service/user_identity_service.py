"""User identity domain service.

Registration, authentication and the user mutations that must keep the
email-uniqueness rule under concurrent requests.
"""

import asyncio
from datetime import timedelta
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from userapi.domain.error import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    UniquenessViolationError,
    ValidationError,
)
from userapi.domain.model import User
from userapi.domain.model.user import NAME_MAX_LENGTH, utcnow
from userapi.domain.repository import UserRepository
from userapi.domain.value import Email, UserId
from userapi.util.background import fire_and_forget

from .base import Service
from .jwt_service import JWTService
from .notifier import Notifier
from .password_service import PasswordService


class UserIdentityService(Service):
    """Domain service for user registration, login and account changes.

    Email uniqueness is checked up front for a friendly error, but the
    repository's write-time constraint is what guarantees it: a
    ``UniquenessViolationError`` from ``insert``/``update`` is reported as
    the same ``ConflictError`` as the pre-check.

    Argon2 work runs in a worker thread so concurrent requests are not
    blocked behind it.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordService,
        jwt_service: JWTService,
        notifier: Notifier,
    ) -> None:
        """Initialize user identity service.

        Args:
            user_repository: User repository
            password_service: Password hashing service
            jwt_service: JWT token service
            notifier: Notifier for welcome messages
        """
        self.user_repository = user_repository
        self.password_service = password_service
        self.jwt_service = jwt_service
        self.notifier = notifier

    async def authenticate(
        self, email: str, password: str, confirm_password: str
    ) -> tuple[User, str]:
        """Verify credentials and issue a token.

        Unknown email and wrong password raise the same error after the
        same amount of hashing work.

        Args:
            email: Login email (any case)
            password: Plaintext password
            confirm_password: Must equal ``password``

        Returns:
            The authenticated user and a signed token

        Raises:
            ValidationError: If password and confirmation differ
            InvalidCredentialsError: If the email or password is wrong
        """
        with logfire.span("user_identity_service.authenticate"):
            self._check_passwords_match(password, confirm_password)

            user = await self._find_by_login_email(email)
            if user is None:
                await asyncio.to_thread(self.password_service.verify_dummy, password)
                verified = False
            else:
                verified = await asyncio.to_thread(
                    self.password_service.verify, password, user.password_hash
                )

            if user is None or not verified:
                logfire.warn("Authentication failed", email=email)
                raise InvalidCredentialsError()

            token = self.jwt_service.create_token(user)
            logfire.info("User authenticated", user_id=str(user.id))
            return user, token

    async def register(
        self,
        first_name: str,
        email: str,
        password: str,
        confirm_password: str,
        last_name: str | None = None,
    ) -> User:
        """Create a new user and send a welcome notification.

        The notification runs detached; its failure is logged and never
        affects the registration.

        Args:
            first_name: Required first name
            email: Email address, must be unused (case-insensitive)
            password: Plaintext password
            confirm_password: Must equal ``password``
            last_name: Optional last name

        Returns:
            The persisted user

        Raises:
            ValidationError: If input is missing, malformed or inconsistent
            ConflictError: If the email is already taken
        """
        with logfire.span("user_identity_service.register", email=email):
            self._check_passwords_match(password, confirm_password)
            if not password:
                raise ValidationError("Password is required.")
            first_name = self._clean_name("First name", first_name)
            if first_name is None:
                raise ValidationError("First name is required.")
            last_name = self._clean_name("Last name", last_name)
            normalized = self._parse_email(email)

            if await self.user_repository.exists_by_email(normalized):
                logfire.warn("Registration rejected - email taken", email=normalized.root)
                raise ConflictError(f"Email '{normalized}' is already taken")

            password_hash = await asyncio.to_thread(self.password_service.hash, password)
            now = utcnow()
            user = User(
                id=UserId(uuid4()),
                first_name=first_name,
                last_name=last_name,
                email=normalized,
                password_hash=password_hash,
                created_at=now,
                updated_at=now,
            )

            try:
                saved = await self.user_repository.insert(user)
            except UniquenessViolationError as e:
                # Lost a race with a concurrent registration
                logfire.warn(
                    "Registration rejected - email taken at insert",
                    email=normalized.root,
                )
                raise ConflictError(f"Email '{normalized}' is already taken") from e

            logfire.info("User registered", user_id=str(saved.id))
            fire_and_forget(
                self._send_welcome(saved), name=f"welcome-notification-{saved.id}"
            )
            return saved

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_identity_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def get_all(self) -> list[User]:
        """Return all users in repository order."""
        with logfire.span("user_identity_service.get_all"):
            users = await self.user_repository.list_all()
            logfire.info("Users listed", count=len(users))
            return users

    async def update(
        self,
        user_id: UserId,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
        password: str | None = None,
        confirm_password: str | None = None,
    ) -> User:
        """Apply a partial update.

        Empty, blank or missing fields are left untouched. The password is rehashed
        only when a new one is given. ``updated_at`` always moves forward.

        Args:
            user_id: User to update
            first_name: New first name
            last_name: New last name
            email: New email address
            password: New password
            confirm_password: Must equal ``password``

        Returns:
            The updated user

        Raises:
            ValidationError: If password and confirmation differ or email is malformed
            NotFoundError: If the user does not exist
            ConflictError: If the new email belongs to another user
        """
        with logfire.span("user_identity_service.update", user_id=str(user_id)):
            self._check_passwords_match(password, confirm_password)
            first_name = self._clean_name("First name", first_name)
            last_name = self._clean_name("Last name", last_name)
            new_email = None
            if email and email.strip():
                new_email = self._parse_email(email)

            user = await self.get_by_id(user_id)

            if (
                new_email is not None
                and new_email != user.email
                and await self.user_repository.exists_by_email(new_email)
            ):
                logfire.warn("Update rejected - email taken", user_id=str(user_id))
                raise ConflictError(f"Email '{new_email}' is already taken")

            # Never step backwards or stand still, even on a coarse clock
            changes: dict = {
                "updated_at": max(utcnow(), user.updated_at + timedelta(microseconds=1))
            }
            if first_name:
                changes["first_name"] = first_name
            if last_name:
                changes["last_name"] = last_name
            if new_email is not None:
                changes["email"] = new_email
            if password:
                changes["password_hash"] = await asyncio.to_thread(
                    self.password_service.hash, password
                )

            try:
                saved = await self.user_repository.update(
                    user.model_copy(update=changes)
                )
            except UniquenessViolationError as e:
                logfire.warn(
                    "Update rejected - email taken at write", user_id=str(user_id)
                )
                raise ConflictError(f"Email '{new_email}' is already taken") from e

            logfire.info(
                "User updated",
                user_id=str(user_id),
                fields=sorted(k for k in changes if k != "updated_at"),
            )
            return saved

    async def delete(self, user_id: UserId) -> None:
        """Delete a user permanently.

        Tokens already issued to the user stay valid until they expire.

        Args:
            user_id: User to delete

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("user_identity_service.delete", user_id=str(user_id)):
            await self.user_repository.remove(user_id)
            logfire.info("User deleted", user_id=str(user_id))

    async def _find_by_login_email(self, email: str) -> User | None:
        """Look up a login email; malformed input simply matches nobody."""
        try:
            normalized = Email(email)
        except PydanticValidationError:
            return None
        return await self.user_repository.find_by_email(normalized)

    async def _send_welcome(self, user: User) -> None:
        try:
            await self.notifier.notify_registration(user.full_name, user.email)
            logfire.info("Welcome notification sent", user_id=str(user.id))
        except Exception:
            logfire.exception("Welcome notification failed", user_id=str(user.id))

    @staticmethod
    def _check_passwords_match(
        password: str | None, confirm_password: str | None
    ) -> None:
        if (password or "") != (confirm_password or ""):
            raise ValidationError("Password and Confirmation do not match.")

    @staticmethod
    def _clean_name(label: str, value: str | None) -> str | None:
        """Strip a name; blank means absent."""
        if value is None or not value.strip():
            return None
        value = value.strip()
        if len(value) > NAME_MAX_LENGTH:
            raise ValidationError(
                f"{label} must be at most {NAME_MAX_LENGTH} characters."
            )
        return value

    @staticmethod
    def _parse_email(email: str) -> Email:
        try:
            return Email(email)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid email address: {email}") from e
