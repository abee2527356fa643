from enum import Enum
from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column
from models import Base


class UserField(str, Enum):
    """User fields a PATCH may change."""
    PASSWORD = "password"
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"


USER_COLUMNS = {
    UserField.FIRST_NAME.value: "first_name",
    UserField.LAST_NAME.value: "last_name",
}


class User(Base):
    """
    User model for authenticated API users.

    - username is the primary key and the JWT subject
    - password holds an argon2 hash, never the plain text
    """
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(25), primary_key=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)

    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)

    is_admin: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default='false'
    )

    def __repr__(self) -> str:
        return f"<User(username='{self.username}', is_admin={self.is_admin})>"
