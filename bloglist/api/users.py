# bloglist/api/users.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from bloglist.core.schemas import UserCreate
from bloglist.core.users import list_users, register_user
from bloglist.database import get_db


router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("")
def get_users(db: Session = Depends(get_db)):
    """
    Lists every user together with the blogs they have added.
    """
    return [user.to_dict() for user in list_users(db)]


@router.post("")
def create_user(body: UserCreate, db: Session = Depends(get_db)):
    """
    Registers a new user. The password hash is never returned.
    """
    user = register_user(db, body)
    return user.to_dict()
