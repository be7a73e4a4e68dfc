"""Authentication service."""
from datetime import timedelta
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.config import settings
from catalog.core.exceptions import AuthenticationError, ValidationError
from catalog.core.security import create_access_token, get_password_hash, verify_password
from catalog.models.user import User
from catalog.schemas.user import Token, UserCreate


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def register_user(self, user_data: UserCreate) -> User:
        """Register a new user."""
        # Check if email already exists
        existing = await self.get_user_by_email(user_data.email)
        if existing:
            raise ValidationError("Email already registered", field="email")

        user = User(
            email=user_data.email,
            password_hash=get_password_hash(user_data.password),
        )
        self.db.add(user)
        await self.db.flush()
        await self.db.refresh(user)
        return user

    async def authenticate_user(self, email: str, password: str) -> User:
        """Authenticate a user by email and password."""
        user = await self.get_user_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            raise AuthenticationError("Invalid email or password")
        return user

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Get a user by email."""
        result = await self.db.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    def create_token(self, user: User) -> Token:
        """Create an access token for a user."""
        access_token = create_access_token(
            user_id=user.id,
            email=user.email,
            expires_delta=timedelta(hours=settings.jwt_expiration_hours),
        )
        return Token(
            access_token=access_token,
            token_type="bearer",
            expires_in=settings.jwt_expiration_hours * 3600,
        )
