# bloglist/core/schemas.py

from pydantic import BaseModel, Field


# largest value an INTEGER column can hold
MAX_INTEGER = 2**63 - 1


# -------------------------------
# Request schemas
# -------------------------------

class LoginRequest(BaseModel):
    username: str
    password: str


class UserCreate(BaseModel):
    username: str | None = None
    name: str | None = None
    password: str | None = None


class BlogCreate(BaseModel):
    title: str | None = None
    author: str | None = None
    url: str | None = None
    likes: int | None = Field(None, ge=0, le=MAX_INTEGER)


class BlogUpdate(BaseModel):
    """
    Partial update of a blog. Only the fields present in the request body
    are applied; the owner is not part of the payload and cannot change.
    """
    title: str | None = None
    author: str | None = None
    url: str | None = None
    likes: int | None = Field(None, ge=0, le=MAX_INTEGER)


# -------------------------------
# Response schemas
# -------------------------------

class LoginResponse(BaseModel):
    token: str
    username: str
    name: str | None = None


# -------------------------------
# Authorization
# -------------------------------

class Identity(BaseModel):
    """
    The user a verified bearer token resolves to.
    """
    id: int
    username: str
