"""
Identity Store

Looks up users and their roles and checks passwords. Used by the login
endpoint and by the seed script.
"""

import logging
from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from bookstore.models import Role, User
from bookstore.services.security import hash_password, verify_password


class IdentityStore:
    """User/role access over one database session."""

    def __init__(self, db: Session, logger: logging.Logger) -> None:
        self.db = db
        self.logger = logger

    def find_by_username(self, username: str) -> User | None:
        stmt = select(User).where(User.username == username)
        return self.db.execute(stmt).scalar_one_or_none()

    def check_password_sign_in(self, username: str, password: str) -> bool:
        """
        Return True when the user exists, is active and the password
        matches the stored bcrypt hash.
        """
        user = self.find_by_username(username)
        if user is None:
            self.logger.warning(f"Sign-in rejected: unknown user {username}")
            return False
        if not user.is_active:
            self.logger.warning(f"Sign-in rejected: inactive user {username}")
            return False
        if not verify_password(password, user.hashed_password):
            self.logger.warning(f"Sign-in rejected: wrong password for {username}")
            return False
        return True

    def get_roles(self, user: User) -> list[str]:
        return sorted(role.name for role in user.roles)

    # -------------------------------------------------------------------------
    # Seeding helpers
    # -------------------------------------------------------------------------
    def ensure_role(self, name: str) -> Role:
        role = self.db.execute(select(Role).where(Role.name == name)).scalar_one_or_none()
        if role is None:
            role = Role(name=name)
            self.db.add(role)
            self.db.flush()
            self.logger.info(f"Created role {name}")
        return role

    def ensure_user(
        self,
        username: str,
        email: str,
        password: str,
        roles: Iterable[str] = (),
    ) -> User:
        """Create the user with the given roles unless it already exists."""
        user = self.find_by_username(username)
        if user is not None:
            return user

        user = User(
            username=username,
            email=email,
            hashed_password=hash_password(password),
            is_active=True,
            roles=[self.ensure_role(name) for name in roles],
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        self.logger.info(f"Created user {username}")
        return user
