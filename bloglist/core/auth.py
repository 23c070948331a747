# bloglist/core/auth.py

from datetime import datetime, timedelta, timezone
from fastapi import Depends, Header
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session
from bloglist.core.config import ALGORITHM, BCRYPT_ROUNDS, SECRET_KEY, TOKEN_EXPIRE_SECONDS
from bloglist.core.errors import InvalidCredentials, InvalidToken, MissingToken, UnknownUser
from bloglist.core.logger import get_logger
from bloglist.core.schemas import MAX_INTEGER, Identity, LoginResponse
from bloglist.database import get_db
from bloglist.models.user import User


logger = get_logger("auth")

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS
)


# -------------------------------
# Passwords
# -------------------------------

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


# -------------------------------
# Session Issuer
# -------------------------------

def create_access_token(data: dict, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(seconds=TOKEN_EXPIRE_SECONDS))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def authenticate(db: Session, username: str, password: str) -> LoginResponse:
    """
    Checks the credentials and issues a token for the user.
    An unknown username and a wrong password fail the same way.
    """
    user = db.query(User).filter(User.username == username).first()
    if not user or not verify_password(password, user.password_hash):
        logger.info("failed login for %r", username)
        raise InvalidCredentials()

    token = create_access_token(data={"username": user.username, "id": user.id})
    return LoginResponse(token=token, username=user.username, name=user.name)


# -------------------------------
# Authorization Guard
# -------------------------------

def extract_token(authorization: str | None) -> str:
    if not authorization or not authorization.lower().startswith("bearer "):
        raise MissingToken()
    token = authorization[len("bearer "):].strip()
    if not token:
        raise MissingToken()
    return token


def decode_token(token: str) -> Identity:
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        raise InvalidToken("token expired")
    except JWTError:
        raise InvalidToken()

    user_id = payload.get("id")
    username = payload.get("username")
    if not isinstance(user_id, int) or user_id > MAX_INTEGER or username is None:
        raise InvalidToken()
    return Identity(id=user_id, username=username)


def authorize(db: Session, authorization: str | None) -> Identity:
    """
    Resolves an Authorization header to the identity of a live user.
    """
    identity = decode_token(extract_token(authorization))
    user = db.query(User).filter(User.id == identity.id).first()
    if user is None:
        raise UnknownUser()
    return Identity(id=user.id, username=user.username)


def get_identity(
    authorization: str | None = Header(None),
    db: Session = Depends(get_db)
) -> Identity:
    return authorize(db, authorization)
