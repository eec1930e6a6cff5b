"""Account registration and login."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from vocab_app.auth.jwt import TokenIssuer
from vocab_app.auth.password import PasswordHasher
from vocab_app.models.user import AuthResponse, LoginRequest, User, UserCreate, UserResponse
from vocab_app.services.errors import (
    InactiveUserError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
)

logger = logging.getLogger(__name__)


class AccountService:
    """Creates users and issues their access tokens.

    The hasher and token issuer are injected so this class never reads
    configuration itself.
    """

    def __init__(self, session: AsyncSession, hasher: PasswordHasher, issuer: TokenIssuer):
        self.session = session
        self.hasher = hasher
        self.issuer = issuer

    async def _find_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    def _auth_response(self, user: User) -> AuthResponse:
        return AuthResponse(
            token=self.issuer.create_access_token(user.id, user.email),
            expires_in=self.issuer.expires_in_seconds,
            user=UserResponse.model_validate(user, from_attributes=True),
        )

    async def register(self, data: UserCreate) -> AuthResponse:
        if await self._find_by_email(data.email) is not None:
            raise UserAlreadyExistsError(data.email)

        user = User(
            email=data.email,
            name=data.name,
            hashed_password=self.hasher.hash(data.password),
        )
        self.session.add(user)
        try:
            await self.session.commit()
        except IntegrityError:
            # Race condition: another request registered the same email
            await self.session.rollback()
            raise UserAlreadyExistsError(data.email)
        await self.session.refresh(user)

        logger.info("Registered user %s", user.id)
        return self._auth_response(user)

    async def login(self, data: LoginRequest) -> AuthResponse:
        user = await self._find_by_email(data.email)
        if user is None or not self.hasher.verify(data.password, user.hashed_password):
            logger.info("Failed login attempt for %s", data.email)
            raise InvalidCredentialsError()
        if not user.is_active:
            raise InactiveUserError()
        return self._auth_response(user)
