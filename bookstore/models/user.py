"""
User and Role Models

The identity store used by the login endpoint. Users sign in with their
username and password; roles are flattened into the issued token.
"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore.database import Base


# =============================================================================
# Association Table
# =============================================================================
user_roles = Table(
    "user_roles",
    Base.metadata,
    Column(
        "user_id",
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "role_id",
        Integer,
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    comment="Association table linking users to their roles",
)


class Role(Base):
    """
    Named role granted to users (e.g. "Administrator", "Customer").

    Table: roles
    """

    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
        comment="Role name"
    )

    def __repr__(self) -> str:
        return f"Role(id={self.id}, name='{self.name}')"


class User(Base):
    """
    User model representing accounts that can log in.

    Table: users

    Indexes:
    - username: Unique index for login lookups
    - email: Unique, used as the token subject

    Example:
        user = User(
            username="admin@bookstore.com",
            email="admin@bookstore.com",
            hashed_password=hash_password("P@ssword1"),
            roles=[administrator],
        )
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)

    username: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="Login name"
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="User's email address"
    )

    hashed_password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
        comment="Whether the account may log in"
    )

    roles: Mapped[list[Role]] = relationship(
        Role,
        secondary=user_roles,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"User(id={self.id}, username='{self.username}')"
