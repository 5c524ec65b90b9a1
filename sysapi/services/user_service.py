"""User repository: CRUD and login against the users table."""

import logging
from datetime import UTC, datetime
from functools import lru_cache

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from sysapi.core.exceptions import BusinessError, ErrorCode
from sysapi.core.security import hash_password, verify_password
from sysapi.core.validation import require_has_text
from sysapi.models import User
from sysapi.schemas.user import UserCreate, UserListItem, UserRecord, UserUpdate

logger = logging.getLogger(__name__)

USERNAME_TAKEN_MESSAGE = "Username already exists"


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    # Verified against for unknown usernames so both failure paths cost one bcrypt check.
    return hash_password("not-a-real-password")


def build_user_row(record: UserCreate, now: datetime) -> User:
    """New ORM row from a create record: createdAt stamped, password hashed."""
    return User(
        username=record.username,
        email=record.email,
        password=hash_password(record.password),
        is_active=record.is_active,
        created_at=now,
        last_login=None,
    )


def update_values(record: UserUpdate) -> dict:
    """Column values overwritten by a full update; createdAt is never touched."""
    return {
        User.username: record.username,
        User.email: record.email,
        User.last_login: record.last_login,
        User.password: hash_password(record.password),
    }


class UserService:
    """Issues the user statements for one request-scoped session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def list(self) -> list[UserListItem]:
        """All users in insertion order, projected without sensitive columns."""
        rows = (
            self.db.query(User.id, User.username, User.email, User.last_login)
            .order_by(User.id)
            .all()
        )
        return [
            UserListItem(id=r.id, username=r.username, email=r.email, last_login=r.last_login)
            for r in rows
        ]

    def get_by_id(self, user_id: int) -> UserRecord | None:
        user = self.db.get(User, user_id)
        return UserRecord.model_validate(user) if user is not None else None

    def get_by_username(self, username: str) -> UserRecord | None:
        user = self.db.query(User).filter(User.username == username).first()
        return UserRecord.model_validate(user) if user is not None else None

    def login(self, username: str, password: str) -> UserRecord | None:
        """
        Return the user when the password matches the stored hash, else None.

        Unknown username and wrong password are indistinguishable to the caller.
        On success last_login is set to now.
        """
        user = self.db.query(User).filter(User.username == username).first()
        if user is None:
            verify_password(password, _dummy_hash())
            return None
        if not verify_password(password, user.password):
            return None
        user.last_login = datetime.now(UTC)
        self.db.commit()
        self.db.refresh(user)
        return UserRecord.model_validate(user)

    def save(self, record: UserCreate) -> int:
        """Insert a user and return its generated id."""
        require_has_text(record.username, "username must not be blank")
        user = build_user_row(record, datetime.now(UTC))
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise BusinessError(ErrorCode.USERNAME_TAKEN, USERNAME_TAKEN_MESSAGE) from e
        self.db.refresh(user)
        logger.info("Created user id=%s username=%s", user.id, user.username)
        return user.id

    def modify(self, record: UserUpdate) -> int:
        """
        Overwrite username, email, lastLogin and password (re-hashed).

        Raises BusinessError(RECORD_NOT_FOUND) when no row has record.id and
        BusinessError(USERNAME_TAKEN) when another user owns the new username.
        Returns the affected row count.
        """
        require_has_text(record.username, "username must not be blank")
        # Hash only once the row is known to exist.
        if self.db.query(User.id).filter(User.id == record.id).first() is None:
            raise BusinessError(ErrorCode.RECORD_NOT_FOUND, "Record does not exist")
        try:
            count = (
                self.db.query(User)
                .filter(User.id == record.id)
                .update(update_values(record), synchronize_session=False)
            )
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise BusinessError(ErrorCode.USERNAME_TAKEN, USERNAME_TAKEN_MESSAGE) from e
        return count

    def delete(self, user_id: int) -> int:
        """Delete by id; returns 0 when the row is absent."""
        count = (
            self.db.query(User)
            .filter(User.id == user_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        if count:
            logger.info("Deleted user id=%s", user_id)
        return count
