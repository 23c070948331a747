# bloglist/core/users.py

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload
from bloglist.core.auth import get_password_hash
from bloglist.core.errors import DuplicateUsername, ValidationError
from bloglist.core.logger import get_logger
from bloglist.core.schemas import UserCreate
from bloglist.models.user import User


MIN_PASSWORD_LENGTH = 3

logger = get_logger("users")


def register_user(db: Session, data: UserCreate) -> User:
    if not data.username:
        raise ValidationError("username missing")
    if not data.password or len(data.password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"password must be at least {MIN_PASSWORD_LENGTH} characters long")

    user_exists = db.query(User).filter(User.username == data.username).first()
    if user_exists:
        raise DuplicateUsername()

    user = User(
        username=data.username,
        name=data.name,
        password_hash=get_password_hash(data.password)
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # lost a race with a concurrent registration
        db.rollback()
        raise DuplicateUsername()
    db.refresh(user)
    logger.info("registered user %r (id=%s)", user.username, user.id)
    return user


def list_users(db: Session) -> list[User]:
    return (
        db.query(User)
        .options(selectinload(User.blogs))
        .order_by(User.id.asc())
        .all()
    )
