"""User database service layer"""
import logging
from typing import Any, Mapping, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session
from auth.utils import hash_password, verify_password
from db.query_templates import USERS
from db.sql import sql_for_partial_update
from models.user import User, UserField, USER_COLUMNS
from utils.errors import BadRequestError

logger = logging.getLogger(__name__)


def get_user(db: Session, username: str) -> Optional[User]:
    """
    Get user by username.

    Args:
        db: Database session
        username: User's username

    Returns:
        User object if found, None otherwise
    """
    return db.query(User).filter(User.username == username).first()


def register_user(
    db: Session,
    username: str,
    password: str,
    first_name: str,
    last_name: str,
    email: str,
    is_admin: bool = False
) -> User:
    """
    Create a new user record with a hashed password.

    Args:
        db: Database session
        username: Unique username
        password: Plain-text password (hashed before storage)
        first_name: User's first name
        last_name: User's last name
        email: User's email address
        is_admin: Grant admin rights (only admins may set this)

    Returns:
        Created User object

    Raises:
        IntegrityError: If username already exists
    """
    user = User(
        username=username,
        password=hash_password(password),
        first_name=first_name,
        last_name=last_name,
        email=email.lower(),
        is_admin=is_admin,
    )

    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"Registered user {username} (admin={is_admin})")
    return user


def authenticate_user(db: Session, username: str, password: str) -> Optional[User]:
    """
    Check a username/password pair.

    Returns:
        User object if the credentials match, None otherwise
    """
    user = get_user(db, username)
    if user and verify_password(password, user.password):
        return user
    return None


def find_all_users(db: Session) -> list[User]:
    """Get all users ordered by username."""
    return db.query(User).order_by(User.username).all()


def update_user(
    db: Session,
    username: str,
    data: Mapping[str, Any]
) -> Optional[User]:
    """
    Partially update a user's profile.

    A new password is hashed and a new email lowercased (as in register_user)
    before either reaches the UPDATE statement.

    Args:
        db: Database session
        username: User to update
        data: {logicalField: value} with keys from UserField

    Returns:
        Updated User if found, None otherwise

    Raises:
        BadRequestError: If data is empty, names a non-updatable field
            or sets password to null
    """
    data = dict(data)
    if UserField.PASSWORD.value in data:
        if data[UserField.PASSWORD.value] is None:
            raise BadRequestError("password cannot be null")
        data[UserField.PASSWORD.value] = hash_password(data[UserField.PASSWORD.value])
    if data.get(UserField.EMAIL.value) is not None:
        data[UserField.EMAIL.value] = data[UserField.EMAIL.value].lower()

    set_clause = sql_for_partial_update(data, USER_COLUMNS, UserField)
    stmt = USERS.update(set_clause, username)

    user = db.execute(
        select(User)
        .from_statement(stmt.bind())
        .execution_options(populate_existing=True)
    ).scalar_one_or_none()
    db.commit()

    if user:
        logger.info(f"Updated user {username}: {', '.join(data)}")
    return user


def remove_user(db: Session, username: str) -> bool:
    """
    Delete a user.

    Returns:
        True if deleted, False if not found
    """
    user = get_user(db, username)
    if not user:
        return False

    db.delete(user)
    db.commit()

    logger.info(f"Deleted user {username}")
    return True
